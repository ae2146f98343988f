# site_harvest/crawler/fetcher.py
"""
Fetcher module: one GET per URL with the configured User-Agent and a hard timeout.
"""
from __future__ import annotations

import asyncio

from aiohttp import ClientError, ClientSession, ClientTimeout, InvalidURL

from site_harvest.config import CrawlerConfig
from site_harvest.exceptions import (
    FetchTimeoutError,
    HTTPStatusError,
    InvalidURLError,
    TransportError,
)

__all__ = ("Fetcher", "open_session")


def open_session(config: CrawlerConfig) -> ClientSession:
    """Build a session carrying the run's timeout and User-Agent."""
    return ClientSession(
        timeout=ClientTimeout(total=config.timeout),
        headers={"User-Agent": config.user_agent},
        raise_for_status=False,
    )


class Fetcher:
    """Performs a single HTTP GET, no retries, no content-type checks."""

    def __init__(self, session: ClientSession, config: CrawlerConfig) -> None:
        self.session = session
        self.config = config

    async def fetch(self, url: str) -> str:
        """
        Return the body of *url* as text.

        Raises a :class:`~site_harvest.exceptions.FetchError` subclass on any
        non-200 status, timeout, transport failure or malformed URL.
        """
        try:
            async with self.session.get(url) as resp:
                if resp.status != 200:
                    raise HTTPStatusError(url, resp.status)
                return await resp.text(errors="replace")
        except asyncio.TimeoutError as exc:
            raise FetchTimeoutError(url, self.config.timeout) from exc
        except InvalidURL as exc:
            raise InvalidURLError(url, f"malformed URL: {exc}") from exc
        except ClientError as exc:
            raise TransportError(url, str(exc) or type(exc).__name__) from exc
        except ValueError as exc:
            # yarl rejects some strings before aiohttp gets to wrap them
            raise InvalidURLError(url, f"malformed URL: {exc}") from exc
