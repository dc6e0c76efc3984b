"""
Cell text normalisation.
"""

from __future__ import annotations

import re

_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")


def clean_cell_text(html: str) -> str:
    """
    Turn the inner HTML of a cell into display text.

    Strips every ``<...>`` span, collapses whitespace runs to a single
    space and trims the ends.  Entities are left as the parser
    serialised them.
    """
    text = _TAG_RE.sub("", html)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()
