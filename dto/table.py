from pydantic import BaseModel, Field
from typing import List, Optional


class TableMetadata(BaseModel):
    """Identifying and contextual attributes of a single ``<table>``."""

    model_config = {"frozen": True, "populate_by_name": True}

    id: Optional[str] = None
    class_: Optional[str] = Field(default=None, alias="class")
    caption: Optional[str] = None
    position: int
    row_count: int = 0
    column_count: int = 0
    header_row_count: int = 0
    footer_row_count: int = 0
    parent_section: Optional[str] = None
    preceding_heading: Optional[str] = None


class TableData(BaseModel):
    model_config = {"frozen": True}

    headers: List[str] = []
    rows: List[List[str]] = []


class TableRecord(BaseModel):
    """Structured representation of a single table extracted from a page."""

    model_config = {"frozen": True}

    metadata: TableMetadata
    data: TableData

    @property
    def data_row_count(self) -> int:
        return len(self.data.rows)
