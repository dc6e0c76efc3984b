"""
Web table scraper: CLI entry point.

Usage:
    python scraper.py --url <url> [--output <file>] [--format json|csv]
                      [--user-agent <agent>]

Fetches a page, extracts its metadata and every ``<table>`` (caption,
enclosing section, preceding heading, header / data / footer rows) and
writes the result as JSON or CSV to a file or to stdout.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from typing import Optional

import dotenv

dotenv.load_dotenv()

from dto.output import ExtractionResult
from errors import OutputWriteError, ScraperError
from extractors.metadata import extract_page_metadata
from extractors.page import PageScanner
from fetch import PageFetcher
from utils.dom import parse_html
from utils.render import SUPPORTED_FORMATS, render

logging.basicConfig(
    level=os.getenv("SCRAPER_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
)
logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Main pipeline
# -------------------------------------------------------------------


def extract_from_html(
    html: str,
    url: str,
    started_at: Optional[float] = None,
) -> ExtractionResult:
    """
    Parse *html* and extract the page metadata and all tables.

    *started_at* is a ``time.perf_counter()`` reading; the elapsed time
    reported in the result is measured from it (default: now).
    """
    if started_at is None:
        started_at = time.perf_counter()

    soup = parse_html(html)
    page = extract_page_metadata(soup, url)
    tables = PageScanner().scan(soup)

    elapsed_ms = int((time.perf_counter() - started_at) * 1000)
    return ExtractionResult(page=page, tables=tables, extraction_time_ms=elapsed_ms)


def scrape_url(url: str, user_agent: Optional[str] = None) -> ExtractionResult:
    """Fetch *url* and extract it.  The reported time includes the fetch."""
    started_at = time.perf_counter()
    html = PageFetcher(user_agent=user_agent).fetch(url)
    return extract_from_html(html, url, started_at=started_at)


def write_output(text: str, output_path: str) -> None:
    try:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as exc:
        raise OutputWriteError(f"Failed to write {output_path}: {exc}") from exc


# -------------------------------------------------------------------
# CLI
# -------------------------------------------------------------------


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Extract tables and metadata from a web page.",
    )
    parser.add_argument(
        "-u",
        "--url",
        required=True,
        help="URL of the page to extract tables from",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output file (default: stdout)",
    )
    parser.add_argument(
        "-f",
        "--format",
        default="json",
        help=f"Output format ({' or '.join(SUPPORTED_FORMATS)})",
    )
    parser.add_argument(
        "--user-agent",
        default=None,
        help="User agent string to send with the request (default: SCRAPER_USER_AGENT or a desktop browser string)",
    )
    args = parser.parse_args()

    try:
        result = scrape_url(args.url, user_agent=args.user_agent)
        text = render(result, args.format)

        if args.output:
            write_output(text, args.output)
            logger.info("Results written to %s", args.output)
        else:
            print(text, end="" if text.endswith("\n") else "\n")
    except ScraperError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    logger.info("Extraction summary:")
    logger.info("  URL: %s", args.url)
    logger.info("  Tables found: %d", len(result.tables))
    logger.info("  Extraction time: %d ms", result.extraction_time_ms)


if __name__ == "__main__":
    main()
