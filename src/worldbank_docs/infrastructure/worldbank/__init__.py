"""World Bank Documents API: query translation and response normalization."""

from .client import WorldBankClient
from .normalize import (
    DOCUMENT_KEY_PREFIX,
    FACETS_KEY,
    build_search_result,
    extract_documents,
    extract_facets,
    find_document,
    sort_by_count,
)
from .query import (
    COUNTRY_FACET,
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    DOCUMENT_TYPE_FACET,
    FILTER_PARAM_MAP,
    MAX_LIMIT,
    SEARCH_PARAM_MAP,
    build_document_params,
    build_facet_params,
    build_filter_params,
    build_search_params,
)

__all__ = [
    "COUNTRY_FACET",
    "DEFAULT_LIMIT",
    "DEFAULT_OFFSET",
    "DOCUMENT_KEY_PREFIX",
    "DOCUMENT_TYPE_FACET",
    "FACETS_KEY",
    "FILTER_PARAM_MAP",
    "MAX_LIMIT",
    "SEARCH_PARAM_MAP",
    "WorldBankClient",
    "build_document_params",
    "build_facet_params",
    "build_filter_params",
    "build_search_params",
    "build_search_result",
    "extract_documents",
    "extract_facets",
    "find_document",
    "sort_by_count",
]
