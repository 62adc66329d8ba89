"""
Tool Registry - central place for MCP tool registration and lookup.

Usage:
    from .tool_registry import register_all_mcp_tools, list_registered_tools

    # Register all tools
    register_all_mcp_tools(mcp, client)

    # Query registered tools
    tools = list_registered_tools()
"""

import logging

from mcp.server.fastmcp import FastMCP

from worldbank_docs.infrastructure.worldbank import WorldBankClient

logger = logging.getLogger(__name__)


# ============================================================================
# Tool Categories
# ============================================================================

TOOL_CATEGORIES = {
    "documents": {
        "name": "Documents",
        "description": "Document search and lookup",
        "tools": ["wb_search_documents", "wb_get_document"],
    },
    "facets": {
        "name": "Facets",
        "description": "Filter values and document counts",
        "tools": ["wb_list_facets", "wb_list_countries", "wb_list_document_types"],
    },
}


# ============================================================================
# Registration
# ============================================================================


def register_all_mcp_tools(mcp: FastMCP, client: WorldBankClient) -> dict[str, int]:
    """
    Register all MCP tools.

    Args:
        mcp: FastMCP server instance
        client: WorldBankClient shared by every tool

    Returns:
        Dict with category ids and tool counts
    """
    from .tools import register_document_tools, register_facet_tools

    stats: dict[str, int] = {}

    logger.info("Registering document tools...")
    register_document_tools(mcp, client)
    stats["documents"] = len(TOOL_CATEGORIES["documents"]["tools"])

    logger.info("Registering facet tools...")
    register_facet_tools(mcp, client)
    stats["facets"] = len(TOOL_CATEGORIES["facets"]["tools"])

    logger.info(f"Total registered: {sum(stats.values())} tools")
    return stats


def list_registered_tools() -> dict[str, list[str]]:
    """List all defined tools grouped by category id."""
    return {cat_id: cat_info["tools"] for cat_id, cat_info in TOOL_CATEGORIES.items()}


def get_tool_info(tool_name: str) -> dict[str, str] | None:
    """
    Get category information for one tool.

    Returns:
        Dict with name, category, category_id and category_description,
        or None if the tool is unknown
    """
    for cat_id, cat_info in TOOL_CATEGORIES.items():
        if tool_name in cat_info["tools"]:
            return {
                "name": tool_name,
                "category": cat_info["name"],
                "category_id": cat_id,
                "category_description": cat_info["description"],
            }
    return None
