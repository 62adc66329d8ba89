"""
Tests for the MCP tool functions (documents + facets).

Tools are captured from a MagicMock server and called directly.
"""

from unittest.mock import MagicMock

import pytest
from mcp.types import CallToolResult

from worldbank_docs.presentation.mcp_server.tools import (
    FacetFilterQuery,
    ResponseFormatter,
    register_all_tools,
)
from worldbank_docs.shared.exceptions import NetworkError, NotFoundError


def _capture_tools(mcp, client):
    tools = {}
    mcp.tool = lambda **kwargs: lambda func: (tools.__setitem__(kwargs["name"], func), func)[1]
    register_all_tools(mcp, client)
    return tools


@pytest.fixture
def tools(client):
    return _capture_tools(MagicMock(), client)


def _text(result: CallToolResult) -> str:
    return result.content[0].text


class TestRegistration:
    def test_all_tools_captured(self, tools):
        assert set(tools) == {
            "wb_search_documents",
            "wb_get_document",
            "wb_list_facets",
            "wb_list_countries",
            "wb_list_document_types",
        }


# ============================================================
# wb_search_documents
# ============================================================


class TestSearchDocumentsTool:
    async def test_success(self, tools, mock_fetcher):
        result = await tools["wb_search_documents"](country="Mexico", limit=20)

        mock_fetcher.fetch.assert_awaited_once_with({"count_exact": "Mexico", "rows": 20})
        assert not result.isError
        assert _text(result).startswith("Search Results: 15,234 documents found (showing 2)")
        assert result.structuredContent["total"] == 15234
        assert [d["id"] for d in result.structuredContent["documents"]] == ["32226131", "11831032"]

    async def test_fields_and_sort(self, tools, mock_fetcher):
        await tools["wb_search_documents"](query="water", fields=["docdt"], sort_by="docdt", sort_order="asc")
        mock_fetcher.fetch.assert_awaited_once_with({"qterm": "water", "fl": "docdt", "sort": "docdt", "order": "asc"})

    async def test_network_error(self, tools, mock_fetcher):
        mock_fetcher.fetch.side_effect = NetworkError.from_status(503, "Service Unavailable")

        result = await tools["wb_search_documents"](query="water")

        assert result.isError is True
        assert "API request failed: 503 Service Unavailable" in _text(result)
        assert result.structuredContent is None

    async def test_invalid_sort(self, tools, mock_fetcher):
        result = await tools["wb_search_documents"](sort_by="title")
        assert result.isError is True
        assert "sort_by" in _text(result)
        mock_fetcher.fetch.assert_not_awaited()

    async def test_unexpected_error(self, tools, mock_fetcher):
        mock_fetcher.fetch.side_effect = RuntimeError("boom")
        result = await tools["wb_search_documents"]()
        assert result.isError is True
        assert _text(result) == "Error: boom"


# ============================================================
# wb_get_document
# ============================================================


class TestGetDocumentTool:
    async def test_success(self, tools, mock_document_record):
        result = await tools["wb_get_document"](document_id="32226131")

        assert not result.isError
        assert result.structuredContent == {"document": mock_document_record}
        assert "ID:      32226131" in _text(result)

    async def test_not_found(self, tools, mock_fetcher):
        mock_fetcher.fetch.return_value = {"documents": {"facets": {}}}

        result = await tools["wb_get_document"](document_id="000")

        assert result.isError is True
        assert "Document not found: 000" in _text(result)

    async def test_missing_id(self, tools, mock_fetcher):
        result = await tools["wb_get_document"](document_id="")
        assert result.isError is True
        assert "Missing required parameter: document_id" in _text(result)
        mock_fetcher.fetch.assert_not_awaited()


# ============================================================
# Facet tools
# ============================================================


class TestFacetTools:
    async def test_list_facets_with_filter(self, tools, mock_fetcher, mock_facet_response):
        mock_fetcher.fetch.return_value = mock_facet_response

        result = await tools["wb_list_facets"](
            facets=["count_exact", "lang_exact"],
            filter_query=FacetFilterQuery(country="Mexico"),
        )

        mock_fetcher.fetch.assert_awaited_once_with(
            {"count_exact": "Mexico", "fct": "count_exact,lang_exact", "rows": 0}
        )
        assert not result.isError
        assert _text(result).startswith("Filter Options (Facets)")
        facets = result.structuredContent["facets"]
        assert facets["lang_exact"] == [{"name": "English", "count": 300000}, {"name": "Spanish", "count": 40000}]

    async def test_list_facets_empty(self, tools, mock_fetcher):
        result = await tools["wb_list_facets"](facets=[])
        assert result.isError is True
        assert "Missing required parameter: facets" in _text(result)
        mock_fetcher.fetch.assert_not_awaited()

    async def test_list_countries(self, tools, mock_fetcher, mock_facet_response):
        mock_fetcher.fetch.return_value = mock_facet_response

        result = await tools["wb_list_countries"]()

        names = [c["name"] for c in result.structuredContent["countries"]]
        assert names == ["India", "Mexico", "Brazil", "Chile"]
        assert _text(result).startswith("Available Countries and Document Counts")

    async def test_list_document_types(self, tools, mock_fetcher, mock_document_type_response):
        mock_fetcher.fetch.return_value = mock_document_type_response

        result = await tools["wb_list_document_types"]()

        counts = [t["count"] for t in result.structuredContent["document_types"]]
        assert counts == [51000, 45000, 3000]
        assert "Project Paper" in _text(result)

    async def test_list_countries_error(self, tools, mock_fetcher):
        mock_fetcher.fetch.side_effect = NetworkError("Connection failed: refused")
        result = await tools["wb_list_countries"]()
        assert result.isError is True
        assert "🔄" in _text(result)


class TestFacetFilterQuery:
    def test_to_facet_filter(self):
        ff = FacetFilterQuery(country="Mexico", language="Spanish").to_facet_filter()
        assert ff.country == "Mexico"
        assert ff.language == "Spanish"
        assert ff.query is None


class TestResponseFormatter:
    def test_success(self):
        result = ResponseFormatter.success("text", {"a": 1})
        assert result.content[0].text == "text"
        assert result.structuredContent == {"a": 1}
        assert not result.isError

    def test_domain_error_gets_tool_name(self):
        error = NotFoundError("Document", "1")
        result = ResponseFormatter.error(error, tool_name="wb_get_document")
        assert result.isError is True
        assert error.context.tool_name == "wb_get_document"
        assert "**Error**: Document not found: 1" in result.content[0].text

    def test_plain_error(self):
        assert ResponseFormatter.error(ValueError("bad")).content[0].text == "Error: bad"
