"""
Top-level output DTO for the final document model.

    ExtractionResult
      ├─ page: PageMetadata
      └─ tables: List[TableRecord]
           ├─ metadata: TableMetadata
           └─ data: TableData
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel

from dto.page import PageMetadata
from dto.table import TableRecord


class ExtractionResult(BaseModel):
    """Everything extracted from one page in one run."""

    model_config = {"frozen": True}

    page: PageMetadata
    tables: List[TableRecord] = []
    extraction_time_ms: int = 0
