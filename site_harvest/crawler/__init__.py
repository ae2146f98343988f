# site_harvest/crawler/__init__.py
"""site_harvest.crawler: traversal engine and its building blocks."""

from site_harvest.crawler.admission import AdmissionController
from site_harvest.crawler.crawler import Crawler, validate_seed_url
from site_harvest.crawler.models import Page
from site_harvest.crawler.url_resolver import resolve_link
from site_harvest.crawler.visited import VisitedSet

__all__ = [
    "AdmissionController",
    "Crawler",
    "Page",
    "VisitedSet",
    "resolve_link",
    "validate_seed_url",
]
