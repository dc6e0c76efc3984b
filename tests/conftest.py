"""Pytest configuration and shared fixtures."""

import pytest
from bs4 import BeautifulSoup

from dto.output import ExtractionResult
from dto.page import PageMetadata
from dto.table import TableData, TableMetadata, TableRecord
from utils.dom import parse_html


def make_soup(html: str) -> BeautifulSoup:
    return parse_html(html)


@pytest.fixture
def simple_table_html() -> str:
    """One table: a <thead> row of three <th> and two <tbody> rows of three <td>."""
    return """
    <html><body>
      <h2>Prices</h2>
      <table id="prices" class="data wide">
        <caption> Fruit prices </caption>
        <thead><tr><th>Name</th><th>Colour</th><th>Price</th></tr></thead>
        <tbody>
          <tr><td>Apple</td><td>Red</td><td>1.20</td></tr>
          <tr><td>Banana</td><td><i>Yellow</i></td><td>0.50</td></tr>
        </tbody>
      </table>
    </body></html>
    """


@pytest.fixture
def page_html() -> str:
    """A page with metadata, two sections and three tables."""
    return """
    <html>
    <head>
      <title> Quarterly report </title>
      <meta name="description" content="Numbers for Q3">
      <meta name="author" content="Finance team">
      <meta property="article:published_time" content="2024-10-01">
      <meta name="lastmod" content="2024-10-05">
    </head>
    <body>
      <h1>Report</h1>
      <section id="revenue">
        <h2>Revenue</h2>
        <table><tr><th>Region</th><th>Total</th></tr><tr><td>EU</td><td>10</td></tr></table>
      </section>
      <article class="costs block">
        <table>
          <tr><td>Rent</td><td>5</td></tr>
          <tfoot><tr><td>Total</td><td>5</td></tr></tfoot>
        </table>
      </article>
      <h3>Appendix</h3>
      <div role="main"><table><tr><td>x</td></tr></table></div>
    </body>
    </html>
    """


@pytest.fixture
def sample_result() -> ExtractionResult:
    return ExtractionResult(
        page=PageMetadata(url="https://example.com/report", title="Report"),
        tables=[
            TableRecord(
                metadata=TableMetadata(
                    id="t1",
                    class_="data",
                    caption="Totals",
                    position=1,
                    row_count=3,
                    column_count=2,
                    header_row_count=1,
                    footer_row_count=0,
                    preceding_heading="Summary",
                ),
                data=TableData(
                    headers=["Name", "Amount"],
                    rows=[["Widgets, large", "1,000"], ["Bolts", "20"]],
                ),
            ),
            TableRecord(
                metadata=TableMetadata(position=2, row_count=1, column_count=1),
                data=TableData(rows=[["only"]]),
            ),
        ],
        extraction_time_ms=42,
    )
