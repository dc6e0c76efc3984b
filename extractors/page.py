"""
Scans a parsed page for tables.
"""

from __future__ import annotations

import logging
from typing import List

from bs4 import BeautifulSoup

from dto.table import TableRecord
from extractors.table import TableExtractor
from utils.dom import DocumentOrder

logger = logging.getLogger(__name__)


class PageScanner:
    """
    Finds every ``<table>`` in document order and extracts it.

    The document-order index is built once per scan and shared by all
    tables on the page.
    """

    def scan(self, soup: BeautifulSoup) -> List[TableRecord]:
        tables = soup.find_all("table")
        if not tables:
            logger.info("No tables found")
            return []

        extractor = TableExtractor(DocumentOrder(soup))
        records: List[TableRecord] = [
            extractor.extract(table, position)
            for position, table in enumerate(tables, start=1)
        ]
        logger.info("Extracted %d table(s)", len(records))
        return records
