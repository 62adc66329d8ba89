"""
Response normalization for the World Bank Documents API.

The API nests records under ``documents`` as a mapping keyed by ``D<id>``
rather than an array, and embeds the facet aggregates under the reserved
``facets`` key of that same mapping:

    {
        "total": 1234, "rows": 2, "page": 1,
        "documents": {
            "D32226131": {"id": "32226131", "display_title": "...", ...},
            "D32226132": {...},
            "facets": {"count_exact": {"0": {"name": "Mexico", "count": 42}}}
        }
    }

Everything downstream of this module only sees arrays.
"""

from __future__ import annotations

import logging
from typing import Any

from worldbank_docs.domain.entities import Document, FacetValue, SearchResult

logger = logging.getLogger(__name__)

FACETS_KEY = "facets"
DOCUMENT_KEY_PREFIX = "D"


def _as_int(value: Any, default: int) -> int:
    try:
        return int(value) if value else default
    except (TypeError, ValueError):
        return default


def _documents_mapping(payload: dict[str, Any]) -> dict[str, Any]:
    documents = payload.get("documents") if isinstance(payload, dict) else None
    return documents if isinstance(documents, dict) else {}


def iter_document_records(payload: dict[str, Any]):
    """Yield wire document records in API order, skipping the sentinel key."""
    for key, record in _documents_mapping(payload).items():
        if key == FACETS_KEY or not key.startswith(DOCUMENT_KEY_PREFIX):
            continue
        if isinstance(record, dict):
            yield key, record


def extract_documents(payload: dict[str, Any]) -> list[Document]:
    return [Document.from_dict(record) for _, record in iter_document_records(payload)]


def build_search_result(payload: dict[str, Any]) -> SearchResult:
    """
    Build a SearchResult, defaulting missing ``total``/``rows``/``page`` to
    0 / number of documents / 1.
    """
    documents = extract_documents(payload)
    return SearchResult(
        total=_as_int(payload.get("total"), 0),
        rows=_as_int(payload.get("rows"), len(documents)),
        page=_as_int(payload.get("page"), 1),
        documents=documents,
    )


def find_document(payload: dict[str, Any], document_id: str) -> Document | None:
    """
    Locate one document: by the synthesized ``D<id>`` key first, then by a
    scan over the ``id`` field of every record.
    """
    documents = _documents_mapping(payload)
    record = documents.get(f"{DOCUMENT_KEY_PREFIX}{document_id}")
    if isinstance(record, dict):
        return Document.from_dict(record)

    for key, candidate in iter_document_records(payload):
        if str(candidate.get("id", "")) == document_id:
            logger.debug(f"Document {document_id} found under key {key} by scan")
            return Document.from_dict(candidate)
    return None


def _facet_records(body: Any) -> list[dict[str, Any]]:
    if isinstance(body, dict):
        records = body.values()
    elif isinstance(body, list):
        records = body
    else:
        return []
    return [record for record in records if isinstance(record, dict)]


def extract_facets(payload: dict[str, Any]) -> dict[str, list[FacetValue]]:
    """Facet name -> FacetValue list, both in wire order (no sorting)."""
    raw_facets = _documents_mapping(payload).get(FACETS_KEY)
    if not isinstance(raw_facets, dict):
        return {}
    return {
        name: [FacetValue.from_dict(record) for record in _facet_records(body)]
        for name, body in raw_facets.items()
    }


def sort_by_count(values: list[FacetValue]) -> list[FacetValue]:
    """Descending by count; ties keep wire order (``sorted`` is stable)."""
    return sorted(values, key=lambda value: value.count, reverse=True)
