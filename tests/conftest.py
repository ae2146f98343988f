# File: tests/conftest.py
from __future__ import annotations

import asyncio
import logging
from collections import Counter
from typing import Awaitable, Callable, Dict, Tuple, Union

import pytest
import pytest_asyncio
from aiohttp import web

from site_harvest.config import CrawlerConfig
from site_harvest.logger import LOGGER_NAME

#: a route body, or an HTTP status to answer with
Route = Union[str, int]


def pytest_configure(config):
    """Register custom markers so that `--strict-markers` does not fail."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )


class SiteStats:
    """Request counters collected by :func:`_build_app`."""

    def __init__(self) -> None:
        self.hits: Counter[str] = Counter()
        self.user_agents: list[str] = []
        self.active = 0
        self.peak = 0


def _build_app(routes: Dict[str, Route], delay: float = 0.0) -> Tuple[web.Application, SiteStats]:
    """
    Serve *routes* (path -> HTML body or status code). Every handler sleeps
    *delay* seconds, which keeps requests overlapping for concurrency checks.
    """
    stats = SiteStats()

    def make_handler(path: str, route: Route):
        async def handler(request: web.Request) -> web.Response:
            stats.hits[path] += 1
            stats.user_agents.append(request.headers.get("User-Agent", ""))
            stats.active += 1
            stats.peak = max(stats.peak, stats.active)
            try:
                if delay:
                    await asyncio.sleep(delay)
                if isinstance(route, int):
                    return web.Response(status=route, text="error")
                return web.Response(text=route, content_type="text/html")
            finally:
                stats.active -= 1

        return handler

    app = web.Application()
    for path, route in routes.items():
        app.router.add_get(path, make_handler(path, route))
    return app, stats


@pytest_asyncio.fixture
async def serve(unused_tcp_port_factory) -> Callable[[web.Application], Awaitable[str]]:
    """Start aiohttp apps on free ports; returns their base URL. Cleaned up after the test."""
    runners: list[web.AppRunner] = []

    async def _start(app: web.Application) -> str:
        port = unused_tcp_port_factory()
        runner = web.AppRunner(app)
        await runner.setup()
        site = web.TCPSite(runner, "127.0.0.1", port)
        await site.start()
        runners.append(runner)
        return f"http://127.0.0.1:{port}"

    yield _start

    for runner in runners:
        await runner.cleanup()


@pytest.fixture()
def make_config() -> Callable[..., CrawlerConfig]:
    """Factory for test configs with short timeouts."""

    def _make(**overrides) -> CrawlerConfig:
        values = {
            "max_depth": 2,
            "concurrency": 4,
            "timeout": 2.0,
            "user_agent": "TestAgent/1.0",
        }
        values.update(overrides)
        return CrawlerConfig(**values)

    return _make


@pytest.fixture(autouse=True)
def harvest_logger():
    """Route the project logger through the root logger so caplog sees it."""
    lg = logging.getLogger(LOGGER_NAME)
    lg.handlers.clear()
    lg.propagate = True
    yield lg
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()
    lg.setLevel(logging.NOTSET)
    lg.propagate = True


@pytest.fixture(name="build_app")
def build_app_fixture() -> Callable[..., Tuple[web.Application, SiteStats]]:
    """:func:`_build_app` as a fixture, so test modules need not import conftest."""
    return _build_app
