"""Tests for cell text normalisation."""

import pytest

from utils.text import clean_cell_text


def test_strips_markup_and_collapses_whitespace():
    assert clean_cell_text("<b>  Hello   World</b>\n") == "Hello World"


def test_nested_and_attribute_markup():
    html = '<a href="/x"><span class="n">42</span></a>\t<br/> units'
    assert clean_cell_text(html) == "42 units"


def test_plain_text_is_unchanged():
    assert clean_cell_text("already clean") == "already clean"


def test_empty_and_whitespace_only():
    assert clean_cell_text("") == ""
    assert clean_cell_text(" \n\t <i> </i> ") == ""


def test_entities_are_not_decoded():
    assert clean_cell_text("a &amp; b") == "a &amp; b"


@pytest.mark.parametrize(
    "html",
    [
        "<b>  Hello   World</b>\n",
        "<p>one</p><p>two</p>",
        "  lots   of\n\nspace  ",
    ],
)
def test_idempotent(html):
    once = clean_cell_text(html)
    assert clean_cell_text(once) == once
