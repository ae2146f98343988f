# site_harvest/crawler/visited.py
"""
Per-run record of URLs that have already been claimed for fetching.
"""
from __future__ import annotations

import threading
from typing import FrozenSet, Set

__all__ = ("VisitedSet",)


class VisitedSet:
    """Thread-safe insert-once set; a URL can be claimed exactly one time."""

    def __init__(self) -> None:
        self._urls: Set[str] = set()
        self._lock = threading.Lock()

    def try_claim(self, url: str) -> bool:
        """Mark *url* visited. Returns False if someone claimed it first."""
        with self._lock:
            if url in self._urls:
                return False
            self._urls.add(url)
            return True

    def snapshot(self) -> FrozenSet[str]:
        with self._lock:
            return frozenset(self._urls)

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._urls

    def __len__(self) -> int:
        with self._lock:
            return len(self._urls)
