# site_harvest/crawler/models.py
"""
Data models for the SiteHarvest crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Tuple

__all__ = ("Page", "utcnow")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class Page:
    """
    One successfully fetched URL and everything extracted from it.

    Pages hash by URL only, so they can live in sets and dict keys; equality
    still compares every field.
    """

    url: str
    title: str = ""
    content: str = ""
    links: Tuple[str, ...] = ()
    crawled_at: datetime = field(default_factory=utcnow)
    selector_data: Dict[str, str] = field(default_factory=dict)

    def __hash__(self) -> int:
        # selector_data is a dict; equal pages always share a URL
        return hash(self.url)

    def to_dict(self) -> Dict[str, Any]:
        """Serialisable form; ``selector_data`` is left out when empty."""
        data: Dict[str, Any] = {
            "url": self.url,
            "title": self.title,
            "content": self.content,
            "links": list(self.links),
            "crawled_at": self.crawled_at.isoformat(),
        }
        if self.selector_data:
            data["selector_data"] = dict(self.selector_data)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Page:
        return cls(
            url=data["url"],
            title=data.get("title") or "",
            content=data.get("content") or "",
            links=tuple(data.get("links") or ()),
            crawled_at=datetime.fromisoformat(data["crawled_at"]),
            selector_data=dict(data.get("selector_data") or {}),
        )
