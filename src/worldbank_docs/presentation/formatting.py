"""
Presentation Formatter - fixed-width columnar text for tool responses.

The generic :func:`format_table` knows nothing about documents or facets;
the domain views below map entities to display rows and pick columns.

Example:
    >>> print(format_table([{"Name": "Mexico", "Count": "1,204"}], ["Name", "Count"]))
    Name   | Count
    ───────┼──────
    Mexico | 1,204
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from datetime import UTC, datetime
from typing import Any

from worldbank_docs.domain.entities import Document, FacetValue, SearchResult

NO_RESULTS = "No results found."
COLUMN_SEPARATOR = " | "
HEADER_RULE = "─"
HEADER_CROSS = "─┼─"

DEFAULT_TITLE_WIDTH = 60
TYPE_WIDTH = 25
COUNTRY_WIDTH = 20
NAME_WIDTH = 40
ABSTRACT_PREVIEW = 500


# ============================================================================
# Generic helpers
# ============================================================================


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


def truncate(text: Any, limit: int = DEFAULT_TITLE_WIDTH) -> str:
    """
    Collapse newlines and cut to ``limit`` characters with a ``...`` suffix.

    Strings at or under ``limit`` pass through, so truncation is idempotent.
    """
    if text is None or text == "":
        return ""
    text = str(text).replace("\n", " ")
    if len(text) > limit:
        return text[: max(limit - 3, 0)] + "..."
    return text


def format_date(value: str | None) -> str:
    """ISO timestamp -> ``YYYY-MM-DD`` (UTC). Empty for missing values."""
    if not value:
        return ""
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return value.split("T", 1)[0]
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(UTC)
    return parsed.date().isoformat()


def format_count(count: int | None) -> str:
    """Thousands-separated count (``1234567`` -> ``1,234,567``)."""
    return f"{count or 0:,}"


def column_widths(rows: Sequence[Mapping[str, Any]], columns: Sequence[str]) -> dict[str, int]:
    return {col: max(len(col), *(len(_cell(row.get(col))) for row in rows)) for col in columns}


def format_table(rows: Sequence[Mapping[str, Any]], columns: Sequence[str]) -> str:
    """
    Render rows as left-justified fixed-width columns.

    Output is a header line, a box-drawing separator and one line per row.
    An empty row list renders as ``"No results found."``.
    """
    if not rows:
        return NO_RESULTS

    widths = column_widths(rows, columns)
    header = COLUMN_SEPARATOR.join(col.ljust(widths[col]) for col in columns)
    separator = HEADER_CROSS.join(HEADER_RULE * widths[col] for col in columns)
    body = [COLUMN_SEPARATOR.join(_cell(row.get(col)).ljust(widths[col]) for col in columns) for row in rows]
    return "\n".join([header, separator, *body])


# ============================================================================
# Domain views
# ============================================================================


def _name_count_rows(values: Iterable[FacetValue], name_width: int | None = NAME_WIDTH) -> list[dict[str, str]]:
    return [
        {"Name": truncate(value.name, name_width) if name_width else value.name, "Count": format_count(value.count)}
        for value in values
    ]


def format_country_table(countries: Iterable[FacetValue]) -> str:
    return format_table(_name_count_rows(countries, name_width=None), ["Name", "Count"])


def format_document_type_table(document_types: Iterable[FacetValue]) -> str:
    return format_table(_name_count_rows(document_types), ["Name", "Count"])


def format_search_results_table(documents: Iterable[Document], title_width: int = DEFAULT_TITLE_WIDTH) -> str:
    rows = [
        {
            "ID": doc.id,
            "Title": truncate(doc.display_title, title_width),
            "Type": truncate(doc.docty, TYPE_WIDTH),
            "Country": truncate(doc.count, COUNTRY_WIDTH),
            "Date": format_date(doc.docdt),
        }
        for doc in documents
    ]
    return format_table(rows, ["ID", "Title", "Type", "Country", "Date"])


def format_facet_tables(facets: Mapping[str, Iterable[FacetValue]]) -> str:
    """One ``<facet>:`` heading and Name/Count table per facet."""
    sections = [f"{name}:\n{format_table(_name_count_rows(values), ['Name', 'Count'])}" for name, values in facets.items()]
    return "\n\n".join(sections) if sections else NO_RESULTS


# ============================================================================
# Full tool outputs
# ============================================================================


def format_search_output(result: SearchResult, title_width: int = DEFAULT_TITLE_WIDTH) -> str:
    header = f"Search Results: {format_count(result.total)} documents found (showing {result.rows})"
    return f"{header}\n\n{format_search_results_table(result.documents, title_width)}"


def format_document_detail(document: Document) -> str:
    lines = [
        f"Document: {document.display_title}",
        "",
        f"ID:      {document.id}",
        f"Type:    {document.docty or 'N/A'}",
        f"Date:    {format_date(document.docdt) or 'N/A'}",
        f"URL:     {document.best_url or 'N/A'}",
    ]
    if document.abstract:
        preview = document.abstract[:ABSTRACT_PREVIEW]
        if len(document.abstract) > ABSTRACT_PREVIEW:
            preview += "..."
        lines.extend(["", "Abstract:", preview])
    return "\n".join(lines)


def format_facets_output(facets: Mapping[str, Iterable[FacetValue]]) -> str:
    return f"Filter Options (Facets)\n\n{format_facet_tables(facets)}"


def format_countries_output(countries: Iterable[FacetValue]) -> str:
    return f"Available Countries and Document Counts\n\n{format_country_table(countries)}"


def format_document_types_output(document_types: Iterable[FacetValue]) -> str:
    return f"Available Document Types and Counts\n\n{format_document_type_table(document_types)}"
