"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from worldbank_docs.infrastructure.worldbank import WorldBankClient

# ============================================================
# Mock World Bank API Responses (wire format)
# ============================================================


@pytest.fixture
def mock_document_record():
    """One wire-format document record."""
    return {
        "id": "32226131",
        "display_title": "Mexico - Energy Efficiency Project : Procurement Plan",
        "docty": "Procurement Plan",
        "count": "Mexico",
        "docdt": "2019-07-18T00:00:00Z",
        "url": "http://documents.worldbank.org/curated/en/32226131",
        "pdfurl": "http://documents.worldbank.org/curated/en/32226131.pdf",
        "abstracts": {"cdata": "This procurement plan covers\nthe energy efficiency project."},
        "repnb": "PP1234",
    }


@pytest.fixture
def mock_search_response(mock_document_record):
    """Mock search response with two documents and the facets sentinel."""
    return {
        "rows": 2,
        "os": 0,
        "page": 1,
        "total": 15234,
        "documents": {
            "D32226131": mock_document_record,
            "D11831032": {
                "id": "11831032",
                "display_title": "Working paper on rural education",
                "docty": "Working Paper",
                "count": "India",
                "docdt": "2002-05-31T00:00:00Z",
                "url": "http://documents.worldbank.org/curated/en/11831032",
            },
            "facets": {},
        },
    }


@pytest.fixture
def mock_facet_response():
    """Mock facet response (rows=0) for countries and languages."""
    return {
        "rows": 0,
        "total": 400000,
        "documents": {
            "facets": {
                "count_exact": {
                    "0": {"name": "Brazil", "label": "Brazil", "count": 9120},
                    "1": {"name": "India", "label": "India", "count": 18750},
                    "2": {"name": "Chile", "label": "Chile", "count": 9120},
                    "3": {"name": "Mexico", "label": "Mexico", "count": 12040},
                },
                "lang_exact": [
                    {"name": "English", "count": 300000},
                    {"name": "Spanish", "count": 40000},
                ],
            }
        },
    }


@pytest.fixture
def mock_document_type_response():
    return {
        "rows": 0,
        "documents": {
            "facets": {
                "docty_exact": {
                    "0": {"name": "Procurement Plan", "count": 45000},
                    "1": {"name": "Project Paper", "count": 51000},
                    "2": {"name": "Working Paper", "count": "3000"},
                }
            }
        },
    }


# ============================================================
# Mock Fetcher / Client
# ============================================================


@pytest.fixture
def mock_fetcher(mock_search_response):
    """AsyncMock standing in for RateLimitedFetcher."""
    fetcher = AsyncMock()
    fetcher.fetch.return_value = mock_search_response
    return fetcher


@pytest.fixture
def client(mock_fetcher):
    return WorldBankClient(mock_fetcher)
