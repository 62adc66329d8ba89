"""
Domain Layer - Core Entities

Contains:
- entities: Search filters and normalized response entities
"""

from .entities import Document, FacetFilter, FacetValue, SearchFilter, SearchResult

__all__ = [
    "Document",
    "FacetFilter",
    "FacetValue",
    "SearchFilter",
    "SearchResult",
]
