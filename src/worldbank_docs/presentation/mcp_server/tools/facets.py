"""
Facet Tools - discover filter values and their document counts.

Tools:
- wb_list_facets: Value counts for any facet fields, optionally filtered
- wb_list_countries: All countries, most documents first
- wb_list_document_types: All document types, most documents first
"""

import logging
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult
from pydantic import BaseModel, Field

from worldbank_docs.domain.entities import FacetFilter
from worldbank_docs.infrastructure.worldbank import WorldBankClient
from worldbank_docs.presentation.formatting import (
    format_countries_output,
    format_document_types_output,
    format_facets_output,
)
from worldbank_docs.shared.exceptions import WorldBankDocsError

from ._common import ResponseFormatter, read_only_annotations

logger = logging.getLogger(__name__)


class FacetFilterQuery(BaseModel):
    """Filters applied before faceting (same names as wb_search_documents)."""

    query: str | None = None
    country: str | None = None
    document_type: str | None = None
    theme: str | None = None
    sector: str | None = None
    language: str | None = None
    start_date: str | None = None
    end_date: str | None = None

    def to_facet_filter(self) -> FacetFilter:
        return FacetFilter.from_dict(self.model_dump(exclude_none=True))


def register_facet_tools(mcp: FastMCP, client: WorldBankClient) -> None:
    """Register facet discovery tools."""

    @mcp.tool(
        name="wb_list_facets",
        title="List Filter Facets",
        annotations=read_only_annotations("List Filter Facets"),
        structured_output=False,
    )
    async def wb_list_facets(
        facets: Annotated[
            list[str],
            Field(
                description=(
                    'Field names to facet (e.g., ["count_exact", "docty_exact", "lang_exact", '
                    '"majtheme_exact", "sectr_exact"])'
                )
            ),
        ],
        filter_query: Annotated[
            FacetFilterQuery | None,
            Field(description="Query to filter documents before faceting (same parameters as wb_search_documents)"),
        ] = None,
    ) -> CallToolResult:
        """
        Get available values and counts for filtering fields.

        WHEN TO USE:
        - Discover available values for filters (countries, document types, themes, etc.)
        - Validate filter values before using them
        - Get counts of documents matching each value

        EXAMPLES:
        - List countries: { "facets": ["count_exact"] }
        - List languages: { "facets": ["lang_exact"] }
        - Filtered facets: { "facets": ["docty_exact"], "filter_query": { "country": "Mexico" } }
        - Multiple facets: { "facets": ["count_exact", "docty_exact", "lang_exact"] }

        RETURNS: Columnar table display + structured facet data
        """
        try:
            facet_filter = filter_query.to_facet_filter() if filter_query else None
            result = await client.list_facets(facets, facet_filter)
        except WorldBankDocsError as e:
            logger.warning(f"wb_list_facets failed: {e}")
            return ResponseFormatter.error(e, tool_name="wb_list_facets")
        except Exception as e:
            logger.exception(f"wb_list_facets failed: {e}")
            return ResponseFormatter.error(e, tool_name="wb_list_facets")

        payload = {"facets": {name: [value.to_dict() for value in values] for name, values in result.items()}}
        return ResponseFormatter.success(format_facets_output(result), payload)

    @mcp.tool(
        name="wb_list_countries",
        title="List Countries",
        annotations=read_only_annotations("List Countries"),
        structured_output=False,
    )
    async def wb_list_countries() -> CallToolResult:
        """
        Get list of all available countries with document counts.

        WHEN TO USE:
        - Discover available countries
        - Get country names for use in search filters
        - Validate country names before searching

        RETURNS: Columnar table display + structured countries array,
        sorted by document count (descending)
        """
        try:
            countries = await client.list_countries()
        except WorldBankDocsError as e:
            logger.warning(f"wb_list_countries failed: {e}")
            return ResponseFormatter.error(e, tool_name="wb_list_countries")
        except Exception as e:
            logger.exception(f"wb_list_countries failed: {e}")
            return ResponseFormatter.error(e, tool_name="wb_list_countries")

        payload = {"countries": [country.to_dict() for country in countries]}
        return ResponseFormatter.success(format_countries_output(countries), payload)

    @mcp.tool(
        name="wb_list_document_types",
        title="List Document Types",
        annotations=read_only_annotations("List Document Types"),
        structured_output=False,
    )
    async def wb_list_document_types() -> CallToolResult:
        """
        Get list of all available document types with counts.

        WHEN TO USE:
        - Discover available document types
        - Get document type names for use in search filters
        - Understand what types of documents are available

        RETURNS: Columnar table display + structured document types array,
        sorted by document count (descending)
        """
        try:
            document_types = await client.list_document_types()
        except WorldBankDocsError as e:
            logger.warning(f"wb_list_document_types failed: {e}")
            return ResponseFormatter.error(e, tool_name="wb_list_document_types")
        except Exception as e:
            logger.exception(f"wb_list_document_types failed: {e}")
            return ResponseFormatter.error(e, tool_name="wb_list_document_types")

        payload = {"document_types": [doc_type.to_dict() for doc_type in document_types]}
        return ResponseFormatter.success(format_document_types_output(document_types), payload)
