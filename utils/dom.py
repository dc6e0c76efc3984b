"""
DOM helpers shared by the table extractors.

  - ``find_ancestor`` walks strictly upward from an element and returns the
    nearest ancestor accepted by a matcher.  Matchers are plain predicates;
    ``tag_matcher`` and ``selector_matcher`` build the two common ones.
  - ``DocumentOrder`` ranks every element of a parsed document in
    depth-first pre-order so positions can be compared cheaply.
"""

from __future__ import annotations

from bisect import bisect_left
from typing import Callable, Dict, List, Optional

import soupsieve as sv
from bs4 import BeautifulSoup, Tag

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")

# HTML5 tree construction: implied end tags (</td>, </th>, </tr>) close
# cells and rows instead of nesting them.
HTML_PARSER = "html5lib"

Matcher = Callable[[Tag], bool]


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, HTML_PARSER)


# -------------------------------------------------------------------
# Ancestor search
# -------------------------------------------------------------------


def tag_matcher(tag_name: str) -> Matcher:
    """Match elements by tag name, ignoring case."""
    wanted = tag_name.lower()

    def _match(element: Tag) -> bool:
        return (element.name or "").lower() == wanted

    return _match


def selector_matcher(selector: str) -> Matcher:
    """Match elements against a CSS selector (compiled once)."""
    compiled = sv.compile(selector)

    def _match(element: Tag) -> bool:
        return compiled.match(element)

    return _match


def find_ancestor(element: Tag, matcher: Matcher) -> Optional[Tag]:
    """
    Return the nearest ancestor of *element* accepted by *matcher*.

    The element itself is never considered.  The walk stops at the
    document root, which is not an element and never matches.
    """
    for parent in element.parents:
        if isinstance(parent, BeautifulSoup):
            break
        if not isinstance(parent, Tag):
            continue
        if matcher(parent):
            return parent
    return None


# -------------------------------------------------------------------
# Document order
# -------------------------------------------------------------------


class DocumentOrder:
    """
    Pre-order rank of every element in a document.

    Built with a single walk.  Ranks are keyed by node identity because
    ``Tag.__eq__`` compares markup, so two identical tables would collide.

    Usage::

        order = DocumentOrder(soup)
        heading = order.preceding_heading(table)
    """

    def __init__(self, root: Tag) -> None:
        self._ranks: Dict[int, int] = {}
        self._heading_ranks: List[int] = []
        self._headings: List[Tag] = []

        for rank, element in enumerate(root.find_all(True)):
            self._ranks[id(element)] = rank
            if element.name in HEADING_TAGS:
                self._heading_ranks.append(rank)
                self._headings.append(element)

    def rank(self, element: Tag) -> Optional[int]:
        return self._ranks.get(id(element))

    def preceding_heading(self, element: Tag) -> Optional[Tag]:
        """Return the closest ``h1``–``h6`` strictly before *element*, if any."""
        rank = self.rank(element)
        if rank is None:
            return None
        idx = bisect_left(self._heading_ranks, rank)
        if idx == 0:
            return None
        return self._headings[idx - 1]
