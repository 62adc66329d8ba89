"""Domain entities for World Bank Documents MCP."""

from .document import Document, FacetValue, SearchResult
from .search_filter import (
    SORT_FIELDS,
    SORT_ORDERS,
    FacetFilter,
    SearchFilter,
    SortField,
    SortOrder,
)

__all__ = [
    "SORT_FIELDS",
    "SORT_ORDERS",
    "Document",
    "FacetFilter",
    "FacetValue",
    "SearchFilter",
    "SearchResult",
    "SortField",
    "SortOrder",
]
