"""Exception classes raised outside the extraction core."""


class ScraperError(Exception):
    """Base exception for all scraper errors."""

    pass


class FetchError(ScraperError):
    """Raised when the page cannot be downloaded."""

    pass


class UnsupportedFormatError(ScraperError):
    """Raised when an unknown output format is requested."""

    pass


class OutputWriteError(ScraperError):
    """Raised when the rendered output cannot be written to disk."""

    pass


class ConfigurationError(ScraperError):
    """Raised when a setting from the environment is invalid."""

    pass
