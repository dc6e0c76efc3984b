"""
Classifier for the rows of an HTML table.

Heuristic rules:
  - Header zone: the leading run of rows that contain at least one ``<th>``.
  - Footer zone: the trailing run of rows that sit inside a ``<tfoot>`` or
    contain at least one ``<th>``.
  - Data zone: whatever is left between the two.  The two runs are found
    independently, so on odd markup they can overlap; the data row count
    is then clamped to 0 rather than going negative.

Only the first header row supplies column labels.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from bs4 import Tag
from pydantic import BaseModel

from utils.dom import find_ancestor, tag_matcher
from utils.text import clean_cell_text

logger = logging.getLogger(__name__)

_IN_TFOOT = tag_matcher("tfoot")


class RowClassification(BaseModel):
    """Zone sizes and cell texts for one table."""

    model_config = {"frozen": True}

    row_count: int = 0
    header_row_count: int = 0
    footer_row_count: int = 0
    data_row_count: int = 0
    column_count: int = 0
    headers: List[str] = []
    rows: List[List[str]] = []


def _has_header_cell(row: Tag) -> bool:
    return row.find("th") is not None


def _cell_count(row: Tag) -> int:
    return len(row.find_all("th")) + len(row.find_all("td"))


class RowClassifier:

    # ------------------------------------------------------------------
    # Zone detection
    # ------------------------------------------------------------------

    @staticmethod
    def count_header_rows(rows: Sequence[Tag]) -> int:
        count = 0
        for row in rows:
            if not _has_header_cell(row):
                break
            count += 1
        return count

    @staticmethod
    def count_footer_rows(rows: Sequence[Tag]) -> int:
        count = 0
        for row in reversed(rows):
            in_tfoot = find_ancestor(row, _IN_TFOOT) is not None
            if not (in_tfoot or _has_header_cell(row)):
                break
            count += 1
        return count

    @staticmethod
    def count_columns(rows: Sequence[Tag]) -> int:
        """Widest row, counting both header and ordinary cells."""
        return max((_cell_count(row) for row in rows), default=0)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def classify(self, rows: Sequence[Tag]) -> RowClassification:
        """
        Partition *rows* (in document order) into header / data / footer
        zones and read the header labels and data cell texts.
        """
        row_count = len(rows)
        header_row_count = self.count_header_rows(rows)
        footer_row_count = self.count_footer_rows(rows)

        data_row_count = row_count - header_row_count - footer_row_count
        if data_row_count < 0:
            logger.debug(
                "Header (%d) and footer (%d) runs overlap in a %d-row table",
                header_row_count,
                footer_row_count,
                row_count,
            )
            data_row_count = 0

        headers: List[str] = []
        if header_row_count > 0:
            headers = [
                clean_cell_text(cell.decode_contents())
                for cell in rows[0].find_all("th")
            ]

        data_rows = rows[header_row_count : header_row_count + data_row_count]
        texts = [
            [clean_cell_text(cell.decode_contents()) for cell in row.find_all("td")]
            for row in data_rows
        ]

        return RowClassification(
            row_count=row_count,
            header_row_count=header_row_count,
            footer_row_count=footer_row_count,
            data_row_count=data_row_count,
            column_count=self.count_columns(rows),
            headers=headers,
            rows=texts,
        )
