"""
Document domain entities.

Dataclasses for the normalized (array-shaped) view of World Bank Documents &
Reports API responses. Every instance lives for one tool call only.

Wire-format notes:
    - ``count`` is the *country* label of a document, not a number.
    - ``abstracts`` arrives as ``{"cdata": "..."}``.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class Document:
    """
    One retrieved document record.

    Attributes:
        id: Document ID (numeric string, e.g. "32226131")
        display_title: Human-readable title
        docty: Document type label (e.g. "Procurement Plan")
        count: Country label (upstream field name)
        docdt: ISO document date string
        url: Canonical document page URL
        pdfurl: Direct PDF URL
        abstract: Abstract text (from ``abstracts.cdata``)
        raw: The untouched wire object, including any ``fl``-selected extras
    """

    id: str
    display_title: str = ""
    docty: str | None = None
    count: str | None = None
    docdt: str | None = None
    url: str | None = None
    pdfurl: str | None = None
    abstract: str | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def country(self) -> str | None:
        return self.count

    @property
    def best_url(self) -> str | None:
        """Canonical URL, falling back to the PDF URL."""
        return self.url or self.pdfurl

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Document:
        """Create a Document from a wire-format record."""
        abstracts = data.get("abstracts")
        abstract = abstracts.get("cdata") if isinstance(abstracts, dict) else None
        return cls(
            id=str(data.get("id", "")),
            display_title=data.get("display_title") or "",
            docty=data.get("docty"),
            count=data.get("count"),
            docdt=data.get("docdt"),
            url=data.get("url"),
            pdfurl=data.get("pdfurl"),
            abstract=abstract,
            raw=dict(data),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the wire object unchanged."""
        if self.raw:
            return dict(self.raw)
        data = {k: v for k, v in asdict(self).items() if k not in ("raw", "abstract") and v is not None}
        if self.abstract is not None:
            data["abstracts"] = {"cdata": self.abstract}
        return data


@dataclass(frozen=True)
class FacetValue:
    """
    One distinct value of a filterable dimension with its occurrence count.

    Produced only as part of an aggregate list.
    """

    name: str
    count: int = 0
    label: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FacetValue:
        try:
            count = int(data.get("count") or 0)
        except (TypeError, ValueError):
            count = 0
        label = data.get("label")
        return cls(name=str(data.get("name", "")), count=count, label=label)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "count": self.count}
        if self.label is not None:
            data["label"] = self.label
        return data


@dataclass
class SearchResult:
    """
    One page of search results.

    ``total`` is the number of matches upstream and may exceed ``rows``.
    """

    total: int = 0
    rows: int = 0
    page: int = 1
    documents: list[Document] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "rows": self.rows,
            "page": self.page,
            "documents": [doc.to_dict() for doc in self.documents],
        }
