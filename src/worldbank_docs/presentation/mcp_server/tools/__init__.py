"""
World Bank Documents MCP Tools

✅ Documents (2):
- wb_search_documents: Filtered search with pagination and sorting
- wb_get_document: Single document by ID

✅ Facets (3):
- wb_list_facets: Value counts for any facet field
- wb_list_countries: Countries by document count
- wb_list_document_types: Document types by document count

Usage:
    from .tools import register_all_tools
    register_all_tools(mcp, client)
"""

from mcp.server.fastmcp import FastMCP

from worldbank_docs.infrastructure.worldbank import WorldBankClient

from ._common import ResponseFormatter, read_only_annotations
from .documents import register_document_tools
from .facets import FacetFilterQuery, register_facet_tools


def register_all_tools(mcp: FastMCP, client: WorldBankClient) -> None:
    """Register every World Bank Documents tool on ``mcp``."""
    register_document_tools(mcp, client)
    register_facet_tools(mcp, client)


__all__ = [
    "FacetFilterQuery",
    "ResponseFormatter",
    "read_only_annotations",
    "register_all_tools",
    "register_document_tools",
    "register_facet_tools",
]
