# site_harvest/crawler/admission.py
"""
Admission control: caps the number of fetches in flight at once.
"""
from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator

__all__ = ("AdmissionController",)


class AdmissionController:
    """Counting gate around :class:`asyncio.Semaphore` with in-flight bookkeeping."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._sem = asyncio.Semaphore(capacity)
        self.in_flight = 0
        self.peak = 0

    async def acquire(self) -> None:
        await self._sem.acquire()
        self.in_flight += 1
        self.peak = max(self.peak, self.in_flight)

    def release(self) -> None:
        if self.in_flight <= 0:
            raise RuntimeError("release() called without a matching acquire()")
        self.in_flight -= 1
        self._sem.release()

    @asynccontextmanager
    async def slot(self) -> AsyncIterator[None]:
        """``async with gate.slot():`` holds one unit for the body of the block."""
        await self.acquire()
        try:
            yield
        finally:
            self.release()
