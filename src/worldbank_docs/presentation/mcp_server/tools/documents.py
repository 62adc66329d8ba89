"""
Document Tools - search and single-document lookup.

Tools:
- wb_search_documents: Filtered full-text search with pagination and sorting
- wb_get_document: One document by ID with optional field selection
"""

import logging
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult
from pydantic import Field

from worldbank_docs.domain.entities import SearchFilter, SortField, SortOrder
from worldbank_docs.infrastructure.worldbank import MAX_LIMIT, WorldBankClient
from worldbank_docs.presentation.formatting import format_document_detail, format_search_output
from worldbank_docs.shared.exceptions import WorldBankDocsError

from ._common import ResponseFormatter, read_only_annotations

logger = logging.getLogger(__name__)

FIELDS_DESCRIPTION = (
    'Fields to return (e.g., ["docdt", "abstracts", "pdfurl", "docty", "count"]). '
    "Always returns id, display_title, url"
)


def register_document_tools(mcp: FastMCP, client: WorldBankClient) -> None:
    """Register document search and lookup tools."""

    @mcp.tool(
        name="wb_search_documents",
        title="Search World Bank Documents",
        annotations=read_only_annotations("Search World Bank Documents"),
        structured_output=False,
    )
    async def wb_search_documents(
        query: Annotated[
            str | None, Field(description="Full-text search query across title, abstract, and metadata")
        ] = None,
        country: Annotated[
            str | None, Field(description='Country name (exact match, e.g., "Mexico", "India", "Brazil")')
        ] = None,
        document_type: Annotated[
            str | None,
            Field(description='Document type (exact match, e.g., "Procurement Plan", "Working Paper")'),
        ] = None,
        theme: Annotated[
            str | None, Field(description='Major theme (exact match, e.g., "FY17 - Urban and Rural Development")')
        ] = None,
        sector: Annotated[
            str | None, Field(description='Economic sector (exact match, e.g., "Energy", "Education", "Health")')
        ] = None,
        language: Annotated[
            str | None, Field(description='Language (exact match, e.g., "English", "Spanish", "French")')
        ] = None,
        start_date: Annotated[str | None, Field(description="Start date filter (YYYY-MM-DD format)")] = None,
        end_date: Annotated[str | None, Field(description="End date filter (YYYY-MM-DD format)")] = None,
        limit: Annotated[
            int | None,
            Field(ge=1, le=MAX_LIMIT, description="Number of results per page (default: 20, max: 100)"),
        ] = None,
        offset: Annotated[int | None, Field(ge=0, description="Pagination offset (default: 0)")] = None,
        fields: Annotated[list[str] | None, Field(description=FIELDS_DESCRIPTION)] = None,
        sort_by: Annotated[
            SortField | None,
            Field(description="Field to sort by: docdt (date), docna (name), docty (type), repnb (report number)"),
        ] = None,
        sort_order: Annotated[SortOrder | None, Field(description="Sort order (default: desc for dates)")] = None,
    ) -> CallToolResult:
        """
        Search World Bank documents with comprehensive filters.

        WHEN TO USE:
        - Search documents by keywords or full-text query
        - Filter by country, document type, theme, sector or language
        - Search within date ranges
        - Combine multiple filters for precise queries

        EXAMPLES:
        - Basic search: { "query": "renewable energy" }
        - By country: { "country": "Mexico", "limit": 20 }
        - By document type: { "document_type": "Procurement Plan", "start_date": "2020-01-01" }
        - Combined: { "query": "education", "country": "India", "document_type": "Working Paper" }
        - With pagination: { "country": "Brazil", "limit": 50, "offset": 100 }

        RETURNS: Columnar table display + structured data with total count,
        rows, page, and documents array
        """
        try:
            search_filter = SearchFilter(
                query=query,
                country=country,
                document_type=document_type,
                theme=theme,
                sector=sector,
                language=language,
                start_date=start_date,
                end_date=end_date,
                limit=limit,
                offset=offset,
                fields=tuple(fields) if fields else None,
                sort_by=sort_by,
                sort_order=sort_order,
            )
            result = await client.search_documents(search_filter)
        except WorldBankDocsError as e:
            logger.warning(f"wb_search_documents failed: {e}")
            return ResponseFormatter.error(e, tool_name="wb_search_documents")
        except Exception as e:
            logger.exception(f"wb_search_documents failed: {e}")
            return ResponseFormatter.error(e, tool_name="wb_search_documents")

        return ResponseFormatter.success(format_search_output(result), result.to_dict())

    @mcp.tool(
        name="wb_get_document",
        title="Get World Bank Document",
        annotations=read_only_annotations("Get World Bank Document"),
        structured_output=False,
    )
    async def wb_get_document(
        document_id: Annotated[str, Field(description='Document ID (numeric string, e.g., "11831032")')],
        fields: Annotated[list[str] | None, Field(description=FIELDS_DESCRIPTION)] = None,
    ) -> CallToolResult:
        """
        Get a specific World Bank document by ID.

        WHEN TO USE:
        - Retrieve detailed information about a specific document
        - Get full document metadata including abstract and PDF URL
        - Look up a document by known ID

        EXAMPLES:
        - Get full document: { "document_id": "11831032" }
        - Get specific fields: { "document_id": "11831032", "fields": ["docdt", "abstracts", "pdfurl"] }

        RETURNS: Document object with requested fields + formatted display
        """
        try:
            document = await client.get_document(document_id, fields)
        except WorldBankDocsError as e:
            logger.warning(f"wb_get_document failed: {e}")
            return ResponseFormatter.error(e, tool_name="wb_get_document")
        except Exception as e:
            logger.exception(f"wb_get_document failed: {e}")
            return ResponseFormatter.error(e, tool_name="wb_get_document")

        return ResponseFormatter.success(format_document_detail(document), {"document": document.to_dict()})
