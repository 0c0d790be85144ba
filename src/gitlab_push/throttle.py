"""Throttles that pace outbound GitLab API calls.

A throttle hands out permits; callers ``await throttle.acquire()`` before each
request. Throttles are passed in by the caller so several pushes in one
process can share the same budget.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class Throttle(Protocol):
    async def acquire(self) -> None: ...


class NullThrottle:
    """Grants every permit immediately."""

    async def acquire(self) -> None:
        return None


class IntervalThrottle:
    """Hands out one permit per ``interval`` seconds.

    Like a ticker, at most one unused permit is held back: after a long idle
    period the next call returns at once and the one after waits a full
    interval.
    """

    def __init__(self, interval: float) -> None:
        if interval < 0:
            msg = f"interval must not be negative, got {interval}"
            raise ValueError(msg)
        self.interval = interval
        self._next: float | None = None
        self._lock = asyncio.Lock()

    async def acquire(self) -> None:
        async with self._lock:
            loop = asyncio.get_running_loop()
            now = loop.time()
            if self._next is not None and self._next > now:
                delay = self._next - now
                logger.debug("Throttled for %.3fs", delay)
                await asyncio.sleep(delay)
                now = self._next
            self._next = now + self.interval


def make_throttle(interval: float) -> Throttle:
    """Build a throttle for *interval* seconds; zero disables pacing."""
    if interval <= 0:
        return NullThrottle()
    return IntervalThrottle(interval)
