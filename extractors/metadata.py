"""
Page-level metadata: ``<title>`` plus a handful of well-known meta tags.

Each field lists the meta names it is read from, in order of preference.
"""

from __future__ import annotations

from typing import Optional

from bs4 import BeautifulSoup

from dto.page import PageMetadata

_META_FIELDS = {
    "description": ("description", "og:description"),
    "author": ("author",),
    "published_date": ("article:published_time", "pubdate"),
    "last_modified": ("article:modified_time", "lastmod"),
}


def _meta_content(soup: BeautifulSoup, name: str) -> Optional[str]:
    """``content`` of the first ``meta[name=…]`` or ``meta[property=…]``."""
    element = soup.select_one(f'meta[name="{name}"], meta[property="{name}"]')
    if element is None:
        return None
    content = element.get("content")
    return str(content) if content is not None else None


def _first_meta(soup: BeautifulSoup, *names: str) -> Optional[str]:
    for name in names:
        content = _meta_content(soup, name)
        if content is not None:
            return content
    return None


def extract_page_metadata(soup: BeautifulSoup, url: str) -> PageMetadata:
    title_element = soup.find("title")
    title = (
        title_element.decode_contents().strip() if title_element is not None else None
    )

    fields = {field: _first_meta(soup, *names) for field, names in _META_FIELDS.items()}
    return PageMetadata(url=url, title=title, **fields)
