# site_harvest/exceptions.py
"""
Exception hierarchy for SiteHarvest.

Fatal-start errors (:class:`InvalidSeedURLError`, :class:`ConfigError`) abort a
run before anything is fetched. :class:`FetchError` and its subclasses are
per-URL: the crawler logs them and moves on.
"""
from __future__ import annotations

__all__ = (
    "SiteHarvestError",
    "ConfigError",
    "InvalidSeedURLError",
    "FetchError",
    "HTTPStatusError",
    "FetchTimeoutError",
    "TransportError",
    "InvalidURLError",
)


class SiteHarvestError(Exception):
    """Base class for all SiteHarvest errors."""


class ConfigError(SiteHarvestError):
    """Config file is unreadable, malformed or fails validation."""


class InvalidSeedURLError(SiteHarvestError, ValueError):
    """The seed URL is not an absolute http(s) URL."""

    def __init__(self, url: str, reason: str = "expected an absolute http(s) URL") -> None:
        super().__init__(f"invalid URL {url!r}: {reason}")
        self.url = url
        self.reason = reason


class FetchError(SiteHarvestError):
    """A single URL could not be fetched."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(reason)
        self.url = url
        self.reason = reason


class HTTPStatusError(FetchError):
    def __init__(self, url: str, status: int) -> None:
        super().__init__(url, f"status code: {status}")
        self.status = status


class FetchTimeoutError(FetchError):
    def __init__(self, url: str, timeout: float) -> None:
        super().__init__(url, f"timed out after {timeout:g} s")
        self.timeout = timeout


class TransportError(FetchError):
    """Connection, DNS or protocol level failure."""


class InvalidURLError(FetchError):
    """The URL could not be turned into a request."""
