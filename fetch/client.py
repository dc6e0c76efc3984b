"""
HTTP page fetcher backed by httpx.

Failures are not retried: a non-success status or a transport error is
raised as ``FetchError`` straight away.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from errors import FetchError
from fetch.constants import get_request_timeout, get_user_agent

logger = logging.getLogger(__name__)


class PageFetcher:
    """Downloads a page and returns its decoded HTML."""

    def __init__(
        self,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.user_agent = user_agent or get_user_agent()
        self.timeout = timeout if timeout is not None else get_request_timeout()

    def fetch(self, url: str) -> str:
        logger.info("Fetching URL: %s", url)
        try:
            with httpx.Client(
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
                follow_redirects=True,
            ) as client:
                response = client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchError(f"Failed to fetch URL: {exc}") from exc

        if not response.is_success:
            raise FetchError(f"Failed to fetch URL: HTTP {response.status_code}")

        logger.debug("Fetched %d byte(s) from %s", len(response.content), url)
        return response.text
