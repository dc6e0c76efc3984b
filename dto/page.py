from pydantic import BaseModel
from typing import Optional


class PageMetadata(BaseModel):
    """Page-level metadata read from ``<title>`` and ``<meta>`` tags."""

    model_config = {"frozen": True}

    url: str
    title: Optional[str] = None
    description: Optional[str] = None
    author: Optional[str] = None
    published_date: Optional[str] = None
    last_modified: Optional[str] = None
