"""
World Bank Documents & Reports API client.

API: https://search.worldbank.org/api/v3/wds (JSON, no key, no documented
rate limit).

Operations:
- search_documents: Full-text + exact-match filtered search with pagination
- get_document: Single document lookup by ID
- list_facets: Aggregate value counts for one or more facet fields
- list_countries / list_document_types: Single-facet listings sorted by count

Validation errors are raised before the fetcher is touched.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from worldbank_docs.domain.entities import FacetFilter, SearchFilter
from worldbank_docs.shared.exceptions import NotFoundError

from .normalize import build_search_result, extract_facets, find_document, sort_by_count
from .query import (
    COUNTRY_FACET,
    DOCUMENT_TYPE_FACET,
    build_document_params,
    build_facet_params,
    build_search_params,
)

if TYPE_CHECKING:
    from worldbank_docs.domain.entities import Document, FacetValue, SearchResult
    from worldbank_docs.infrastructure.http import RateLimitedFetcher

logger = logging.getLogger(__name__)


class WorldBankClient:
    """
    Query translator over a :class:`RateLimitedFetcher`.

    Usage:
        client = WorldBankClient(fetcher)

        result = await client.search_documents(SearchFilter(country="Mexico", limit=20))
        document = await client.get_document("32226131")
        countries = await client.list_countries()
    """

    def __init__(self, fetcher: RateLimitedFetcher) -> None:
        self._fetcher = fetcher

    @property
    def fetcher(self) -> RateLimitedFetcher:
        return self._fetcher

    async def search_documents(self, search_filter: SearchFilter | None = None) -> SearchResult:
        """
        Search documents.

        Args:
            search_filter: Filters, pagination, field selection and sort

        Returns:
            SearchResult with total matches and the current page of documents
        """
        params = build_search_params(search_filter or SearchFilter())
        logger.info(f"Searching World Bank documents: {params}")
        payload = await self._fetcher.fetch(params)
        result = build_search_result(payload)
        logger.info(f"Search returned {len(result.documents)} of {result.total} documents")
        return result

    async def get_document(self, document_id: str, fields: list[str] | tuple[str, ...] | None = None) -> Document:
        """
        Get a single document by ID.

        Raises:
            MissingParameterError: ``document_id`` is empty
            NotFoundError: The response holds no matching record
        """
        params = build_document_params(document_id, fields)
        payload = await self._fetcher.fetch(params)
        document = find_document(payload, params["id"])
        if document is None:
            raise NotFoundError("Document", params["id"])
        return document

    async def list_facets(
        self,
        facets: list[str] | tuple[str, ...],
        facet_filter: FacetFilter | None = None,
    ) -> dict[str, list[FacetValue]]:
        """
        Get value counts for the given facet fields.

        Args:
            facets: Facet field names (e.g. ["count_exact", "docty_exact"])
            facet_filter: Optional filters scoping the counts

        Returns:
            Facet name -> values in wire order

        Raises:
            MissingParameterError: ``facets`` is empty
        """
        params = build_facet_params(facets, facet_filter)
        payload = await self._fetcher.fetch(params)
        return extract_facets(payload)

    async def _list_single_facet(self, facet_name: str) -> list[FacetValue]:
        facets = await self.list_facets([facet_name])
        return sort_by_count(facets.get(facet_name, []))

    async def list_countries(self) -> list[FacetValue]:
        """All countries with document counts, most documents first."""
        return await self._list_single_facet(COUNTRY_FACET)

    async def list_document_types(self) -> list[FacetValue]:
        """All document types with counts, most documents first."""
        return await self._list_single_facet(DOCUMENT_TYPE_FACET)
