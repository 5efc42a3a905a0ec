"""
core/ratelimit.py

Rolling-window rate limiter: at most N acquisitions per trailing 60 seconds.
"""
from __future__ import annotations

import asyncio
import logging
import time
from collections import deque
from typing import Awaitable, Callable, Deque

logger = logging.getLogger(__name__)

WINDOW_SECONDS = 60.0


class RateLimiter:
    """
    Delay callers so no more than *requests_per_minute* acquisitions start
    within any trailing window.

    One instance per logical caller stream.  Coroutines sharing an instance
    queue on an asyncio.Lock, so a waiter holds the slot it is waiting for.
    """

    def __init__(
        self,
        requests_per_minute: int = 30,
        window: float = WINDOW_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if requests_per_minute < 1:
            logger.warning("requests_per_minute=%r is below 1, using 1", requests_per_minute)
            requests_per_minute = 1
        self.requests_per_minute = requests_per_minute
        self.window = window
        self._clock = clock
        self._sleep = sleep
        self._requests: Deque[float] = deque()
        self._lock = asyncio.Lock()

    def _prune(self, now: float) -> None:
        while self._requests and now - self._requests[0] >= self.window:
            self._requests.popleft()

    async def acquire(self) -> float:
        """Wait for a free slot, record it and return its timestamp."""
        async with self._lock:
            now = self._clock()
            self._prune(now)
            while len(self._requests) >= self.requests_per_minute:
                wait = self.window - (now - self._requests[0])
                logger.debug("Rate limit reached, sleeping %.2fs", wait)
                await self._sleep(wait)
                now = self._clock()
                self._prune(now)
            self._requests.append(now)
            return now

    @property
    def pending(self) -> int:
        """Acquisitions currently counted against the window."""
        return len(self._requests)
