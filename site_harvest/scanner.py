# === FILE: site_harvest/scanner.py ===
"""
Wrapper that runs one crawl inside a managed Crawler.
"""
from typing import List

from site_harvest.config import CrawlerConfig
from site_harvest.crawler.crawler import Crawler
from site_harvest.crawler.models import Page


async def start_crawl(cfg: CrawlerConfig, url: str) -> List[Page]:
    """
    Open a crawler session, crawl from *url* and return the pages.

    Parameters
    ----------
    cfg : CrawlerConfig
        Run configuration.
    url : str
        Seed URL.

    Returns
    -------
    List[Page]
        Every page fetched successfully, in no particular order.
    """
    async with Crawler(cfg) as crawler:
        pages = await crawler.start(url)
    return pages

__all__ = ["start_crawl"]
