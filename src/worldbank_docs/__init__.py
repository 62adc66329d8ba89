"""
World Bank Docs - MCP server for the World Bank Documents & Reports API

Usage:
    from worldbank_docs import RateLimitedFetcher, SearchFilter, WorldBankClient

    async with RateLimitedFetcher() as fetcher:
        client = WorldBankClient(fetcher)
        result = await client.search_documents(SearchFilter(country="Mexico", limit=20))
        for document in result.documents:
            print(f"{document.id}: {document.display_title}")

Features:
    - Filtered document search (country, type, theme, sector, language, dates)
    - Single document lookup
    - Facet listings (countries, document types, any facet field)
    - Columnar text rendering alongside structured payloads
"""

from .domain.entities import Document, FacetFilter, FacetValue, SearchFilter, SearchResult
from .infrastructure.http import RateLimitedFetcher
from .infrastructure.worldbank import WorldBankClient

__version__ = "1.0.0"

__all__ = [
    "Document",
    "FacetFilter",
    "FacetValue",
    "RateLimitedFetcher",
    "SearchFilter",
    "SearchResult",
    "WorldBankClient",
]
