"""
Extracts a single ``<table>`` element into a ``TableRecord``.

Pipeline per table:
  1. Read identifying attributes (``id`` / ``class``) and the caption.
  2. Find the enclosing section and the closest preceding heading.
  3. Classify the rows into header / data / footer zones.
  4. Assemble the ``TableRecord`` DTO.
"""

from __future__ import annotations

import logging
from typing import Optional

from bs4 import Tag

from detection.rows import RowClassifier
from dto.table import TableData, TableMetadata, TableRecord
from utils.dom import DocumentOrder, find_ancestor, selector_matcher

logger = logging.getLogger(__name__)

SECTION_SELECTOR = "section, article, div[role='main']"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _attr(element: Tag, name: str) -> Optional[str]:
    """Attribute value as a string; multi-valued attributes are space-joined."""
    value = element.get(name)
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def _inner_text(element: Tag) -> str:
    return element.decode_contents().strip()


# =====================================================================
# TableExtractor
# =====================================================================


class TableExtractor:
    """
    Turns one table element into a ``TableRecord``.

    Usage::

        order = DocumentOrder(soup)
        extractor = TableExtractor(order)
        record = extractor.extract(table, position=1)
    """

    def __init__(
        self,
        document_order: DocumentOrder,
        classifier: Optional[RowClassifier] = None,
    ) -> None:
        self._order = document_order
        self._classifier = classifier or RowClassifier()
        self._in_section = selector_matcher(SECTION_SELECTOR)

    # ------------------------------------------------------------------
    # Context
    # ------------------------------------------------------------------

    @staticmethod
    def _caption(table: Tag) -> Optional[str]:
        caption = table.find("caption")
        return _inner_text(caption) if caption is not None else None

    def _parent_section(self, table: Tag) -> Optional[str]:
        """``id`` of the enclosing section, falling back to its ``class``."""
        section = find_ancestor(table, self._in_section)
        if section is None:
            return None
        section_id = _attr(section, "id")
        if section_id is not None:
            return section_id
        return _attr(section, "class")

    def _preceding_heading(self, table: Tag) -> Optional[str]:
        heading = self._order.preceding_heading(table)
        return _inner_text(heading) if heading is not None else None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def extract(self, table: Tag, position: int) -> TableRecord:
        rows = table.find_all("tr")
        zones = self._classifier.classify(rows)

        metadata = TableMetadata(
            id=_attr(table, "id"),
            class_=_attr(table, "class"),
            caption=self._caption(table),
            position=position,
            row_count=zones.row_count,
            column_count=zones.column_count,
            header_row_count=zones.header_row_count,
            footer_row_count=zones.footer_row_count,
            parent_section=self._parent_section(table),
            preceding_heading=self._preceding_heading(table),
        )

        logger.debug(
            "Table %d: %d row(s) (%d header, %d data, %d footer), %d column(s)",
            position,
            zones.row_count,
            zones.header_row_count,
            zones.data_row_count,
            zones.footer_row_count,
            zones.column_count,
        )

        return TableRecord(
            metadata=metadata,
            data=TableData(headers=zones.headers, rows=zones.rows),
        )
