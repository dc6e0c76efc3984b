"""
Renders an ``ExtractionResult`` as JSON or as commented CSV text.
"""

from __future__ import annotations

import csv
import io

from dto.output import ExtractionResult
from errors import UnsupportedFormatError

TABLE_SEPARATOR = "# ------------------------------"

SUPPORTED_FORMATS = ("json", "csv")


def render_json(result: ExtractionResult) -> str:
    return result.model_dump_json(indent=2, by_alias=True)


def render_csv(result: ExtractionResult) -> str:
    """
    Flatten the result into CSV text.

    A commented metadata block comes first, then each table as an
    optional header line followed by its data rows.  Tables are separated
    by a commented rule.  Cell values are quoted as needed.
    """
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")

    def comment(line: str = "") -> None:
        out.write(f"{line}\n")

    page = result.page
    total = len(result.tables)

    comment(f"# URL: {page.url}")
    if page.title is not None:
        comment(f"# Title: {page.title}")
    comment(f"# Tables found: {total}")
    comment(f"# Extraction time: {result.extraction_time_ms} ms")
    comment()

    for i, table in enumerate(result.tables, start=1):
        meta = table.metadata
        comment(f"# Table {i} of {total}")
        comment(f"# Position: {meta.position}")
        if meta.caption is not None:
            comment(f"# Caption: {meta.caption}")
        if meta.preceding_heading is not None:
            comment(f"# Preceding heading: {meta.preceding_heading}")
        comment()

        if table.data.headers:
            writer.writerow(table.data.headers)
        writer.writerows(table.data.rows)

        if i < total:
            comment()
            comment(TABLE_SEPARATOR)
            comment()

    return out.getvalue()


def render(result: ExtractionResult, fmt: str) -> str:
    """Render *result* in the named format (``json`` or ``csv``)."""
    fmt = fmt.lower().strip()
    if fmt == "json":
        return render_json(result)
    if fmt == "csv":
        return render_csv(result)
    raise UnsupportedFormatError(
        f"Unsupported output format: {fmt!r} (expected one of {', '.join(SUPPORTED_FORMATS)})"
    )
