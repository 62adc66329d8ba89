"""
Search filter value objects.

``FacetFilter`` holds the filter vocabulary shared by searches and facet
listings; ``SearchFilter`` adds pagination, field selection and sorting.
Every field is optional: ``None`` means "unfiltered" for that dimension.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Literal, get_args

from worldbank_docs.shared.exceptions import InvalidParameterError

SortField = Literal["docdt", "docna", "docty", "repnb"]
SortOrder = Literal["asc", "desc"]

SORT_FIELDS: tuple[str, ...] = get_args(SortField)
SORT_ORDERS: tuple[str, ...] = get_args(SortOrder)


@dataclass(frozen=True)
class FacetFilter:
    """Filters that scope a search or a facet count."""

    query: str | None = None
    country: str | None = None
    document_type: str | None = None
    theme: str | None = None
    sector: str | None = None
    language: str | None = None
    start_date: str | None = None
    end_date: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> FacetFilter:
        """Build from a tool-provided mapping, ignoring unknown keys."""
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) in (None, "") for f in fields(self))


@dataclass(frozen=True)
class SearchFilter(FacetFilter):
    """Full search request: filters plus pagination, field selection and sort."""

    limit: int | None = None
    offset: int | None = None
    fields: tuple[str, ...] | None = None
    sort_by: SortField | None = None
    sort_order: SortOrder | None = None

    def __post_init__(self) -> None:
        if self.fields is not None and not isinstance(self.fields, tuple):
            object.__setattr__(self, "fields", tuple(self.fields))
        if self.sort_by and self.sort_by not in SORT_FIELDS:
            raise InvalidParameterError("sort_by", self.sort_by, f"one of {', '.join(SORT_FIELDS)}")
        if self.sort_order and self.sort_order not in SORT_ORDERS:
            raise InvalidParameterError("sort_order", self.sort_order, "'asc' or 'desc'")
