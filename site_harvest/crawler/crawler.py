# === FILE: site_harvest/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import time
from typing import List, Optional
from urllib.parse import urlsplit

from aiohttp import ClientSession

from site_harvest.config import CrawlerConfig
from site_harvest.crawler.admission import AdmissionController
from site_harvest.crawler.fetcher import Fetcher, open_session
from site_harvest.crawler.models import Page, utcnow
from site_harvest.crawler.url_resolver import resolve_link
from site_harvest.crawler.visited import VisitedSet
from site_harvest.exceptions import FetchError, InvalidSeedURLError
from site_harvest.logger import get_logger
from site_harvest.parser.html_parser import parse_html
from site_harvest.parser.selector_parser import extract_fields

__all__ = ("Crawler", "CrawlRun", "validate_seed_url")


def validate_seed_url(url: str) -> str:
    """Return *url* unchanged if it is an absolute http(s) URL."""
    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise InvalidSeedURLError(url, str(exc)) from exc
    if parts.scheme not in ("http", "https") or not parts.hostname:
        raise InvalidSeedURLError(url)
    return url


class CrawlRun:
    """Bookkeeping owned by a single :meth:`Crawler.start` call."""

    __slots__ = ("visited", "admission")

    def __init__(self, visited: VisitedSet, admission: AdmissionController) -> None:
        self.visited = visited
        self.admission = admission


class Crawler:
    """
    Recursive crawler: every page fans out into one task per same-host link.

    Termination rests on two bounds together: links deeper than ``max_depth``
    are dropped, and a URL is only fetched by whoever claims it first in the
    run's :class:`VisitedSet`. At most ``concurrency`` fetches run at once.

    Each :meth:`start` call gets its own visited set and admission gate, so
    overlapping runs on one crawler never see each other's URLs. After a run,
    :attr:`visited` and :attr:`admission` hold the bookkeeping of the most
    recently started run.
    """

    def __init__(
        self,
        config: CrawlerConfig,
        *,
        session: Optional[ClientSession] = None,
        visited: Optional[VisitedSet] = None,
        admission: Optional[AdmissionController] = None,
    ) -> None:
        self.config = config
        self.session = session
        self._owns_session = session is None
        self._given_visited = visited
        self._given_admission = admission
        self.visited: VisitedSet = visited if visited is not None else VisitedSet()
        self.admission: AdmissionController = (
            admission if admission is not None else AdmissionController(config.concurrency)
        )
        self.logger = get_logger("crawler")
        self._fetcher: Optional[Fetcher] = None

    async def __aenter__(self) -> Crawler:
        if self.session is None:
            self.session = open_session(self.config)
        self._fetcher = Fetcher(self.session, self.config)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()
        self._fetcher = None

    def _new_run(self) -> CrawlRun:
        # fresh bookkeeping per run unless the caller supplied its own
        return CrawlRun(
            self._given_visited if self._given_visited is not None else VisitedSet(),
            self._given_admission
            if self._given_admission is not None
            else AdmissionController(self.config.concurrency),
        )

    async def start(self, seed_url: str) -> List[Page]:
        """Crawl from *seed_url* at depth 0 and return every page fetched."""
        validate_seed_url(seed_url)
        if self._fetcher is None:
            raise RuntimeError("Crawler must be used as 'async with Crawler(...)'")

        run = self._new_run()
        self.visited, self.admission = run.visited, run.admission

        self.logger.info("Starting crawl: %s", seed_url)
        started = time.monotonic()
        pages = await self.crawl(run, seed_url, 0)
        duration = time.monotonic() - started
        self.logger.info(
            "Crawl finished: %d pages in %.2f s (%d URLs claimed)",
            len(pages), duration, len(run.visited),
        )
        return pages

    async def crawl(self, run: CrawlRun, url: str, depth: int) -> List[Page]:
        """Visit *url* at *depth*, then its links at ``depth + 1``."""
        if depth > self.config.max_depth:
            return []
        if not run.visited.try_claim(url):
            return []

        page = await self._fetch_page(run, url)
        if page is None:
            return []

        children = []
        for link in page.links:
            target = resolve_link(url, link)
            if target is None:
                continue
            children.append(asyncio.create_task(self.crawl(run, target, depth + 1)))

        results: List[Page] = [page]
        if not children:
            return results

        for outcome in await asyncio.gather(*children, return_exceptions=True):
            if isinstance(outcome, BaseException):
                # one broken branch must not take its siblings down
                self.logger.error("Branch under %s failed: %r", url, outcome)
                continue
            results.extend(outcome)
        return results

    async def _fetch_page(self, run: CrawlRun, url: str) -> Optional[Page]:
        """Fetch and extract one page while holding an admission slot."""
        if self._fetcher is None:
            raise RuntimeError("Session not initialized")
        async with run.admission.slot():
            self.logger.debug("Fetching %s", url)
            try:
                body = await self._fetcher.fetch(url)
            except FetchError as exc:
                self.logger.warning("Error fetching %s: %s", url, exc)
                return None
            crawled_at = utcnow()
            parsed = parse_html(body)
            fields = extract_fields(body, self.config.css_selectors)

        return Page(
            url=url,
            title=parsed.title,
            content=parsed.content,
            links=tuple(parsed.links),
            crawled_at=crawled_at,
            selector_data=fields,
        )
