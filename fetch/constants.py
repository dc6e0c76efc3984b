"""
Fetch settings, read from the environment when a fetcher is built so that
values loaded from ``.env`` are honoured.
"""

import os

from errors import ConfigurationError

DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"

DEFAULT_TIMEOUT = 30.0


def get_user_agent() -> str:
    return os.getenv("SCRAPER_USER_AGENT") or DEFAULT_USER_AGENT


def get_request_timeout() -> float:
    raw = os.getenv("SCRAPER_TIMEOUT")
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigurationError(
            f"SCRAPER_TIMEOUT must be a number of seconds, got {raw!r}"
        ) from None
    if timeout <= 0:
        raise ConfigurationError(f"SCRAPER_TIMEOUT must be positive, got {raw!r}")
    return timeout
