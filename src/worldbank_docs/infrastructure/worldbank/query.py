"""
Outbound parameter mapping for the World Bank Documents API.

Tool-facing filter names are translated to the API's flat query-parameter
vocabulary. Only non-empty fields are emitted, so an unset filter never
reaches the wire.

    query          -> qterm
    country        -> count_exact      (exact match)
    document_type  -> docty_exact      (exact match)
    theme          -> majtheme_exact   (exact match)
    sector         -> sectr_exact      (exact match)
    language       -> lang_exact       (exact match)
    start_date     -> strdate          (ISO date, not validated)
    end_date       -> enddate          (ISO date, not validated)
    limit          -> rows
    offset         -> os
    fields         -> fl               (comma-joined)
    sort_by        -> sort
    sort_order     -> order
"""

from __future__ import annotations

from typing import Any

from worldbank_docs.domain.entities import FacetFilter, SearchFilter
from worldbank_docs.shared.exceptions import MissingParameterError

FILTER_PARAM_MAP: dict[str, str] = {
    "query": "qterm",
    "country": "count_exact",
    "document_type": "docty_exact",
    "theme": "majtheme_exact",
    "sector": "sectr_exact",
    "language": "lang_exact",
    "start_date": "strdate",
    "end_date": "enddate",
}

SEARCH_PARAM_MAP: dict[str, str] = {
    **FILTER_PARAM_MAP,
    "limit": "rows",
    "offset": "os",
    "fields": "fl",
    "sort_by": "sort",
    "sort_order": "order",
}

# Facet names for the convenience listings
COUNTRY_FACET = "count_exact"
DOCUMENT_TYPE_FACET = "docty_exact"

DEFAULT_LIMIT = 20
MAX_LIMIT = 100
DEFAULT_OFFSET = 0


def _is_set(value: Any) -> bool:
    return value is not None and value != "" and value != () and value != []


def _map_fields(source: FacetFilter, mapping: dict[str, str]) -> dict[str, Any]:
    params: dict[str, Any] = {}
    for attr, wire_name in mapping.items():
        value = getattr(source, attr, None)
        if not _is_set(value):
            continue
        if isinstance(value, (list, tuple)):
            value = ",".join(value)
        params[wire_name] = value
    return params


def build_filter_params(facet_filter: FacetFilter | None) -> dict[str, Any]:
    """Map the filter vocabulary (no pagination or sort) to wire parameters."""
    if facet_filter is None:
        return {}
    return _map_fields(facet_filter, FILTER_PARAM_MAP)


def build_search_params(search_filter: SearchFilter) -> dict[str, Any]:
    """Map a full search request to wire parameters."""
    return _map_fields(search_filter, SEARCH_PARAM_MAP)


def build_document_params(document_id: str, fields: list[str] | tuple[str, ...] | None = None) -> dict[str, Any]:
    """Parameters for a single-document lookup (``id=<id>&rows=1``)."""
    if not document_id or not str(document_id).strip():
        raise MissingParameterError("document_id", example='wb_get_document(document_id="32226131")')
    params: dict[str, Any] = {"id": str(document_id).strip(), "rows": 1}
    if fields:
        params["fl"] = ",".join(fields)
    return params


def build_facet_params(facets: list[str] | tuple[str, ...], facet_filter: FacetFilter | None = None) -> dict[str, Any]:
    """
    Parameters for a facet listing.

    ``rows`` is forced to 0 so only aggregate facet data comes back.
    """
    names = [name.strip() for name in facets or () if name and name.strip()]
    if not names:
        raise MissingParameterError("facets", example='wb_list_facets(facets=["count_exact"])')
    params = build_filter_params(facet_filter)
    params["fct"] = ",".join(names)
    params["rows"] = 0
    return params
