"""Sliding-window rate limiter for quota-limited upstream APIs."""

from __future__ import annotations

import asyncio
import logging
import time
from collections import deque
from typing import Awaitable, Callable

# Padding on each computed wait so the retry lands past the window edge.
WAIT_BUFFER_MS = 100


def _now_ms() -> float:
    return time.time() * 1000


class RateLimiter:
    """Admit at most *max_requests* calls in any trailing *window_ms*.

    Admission order across concurrent waiters is not FIFO: whichever waiter
    re-checks first after the window moves gets the free slot.
    """

    def __init__(
        self,
        max_requests: int = 10,
        window_ms: float = 60_000,
        *,
        clock: Callable[[], float] = _now_ms,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        logger: logging.Logger | None = None,
    ) -> None:
        if max_requests < 1:
            raise ValueError("max_requests must be >= 1")
        if window_ms <= 0:
            raise ValueError("window_ms must be > 0")
        self.max_requests = max_requests
        self.window_ms = window_ms
        self._clock = clock
        self._sleep = sleep
        self._logger = logger or logging.getLogger(__name__)
        self._timestamps: deque[float] = deque()

    def _purge(self, now: float) -> None:
        while self._timestamps and now - self._timestamps[0] >= self.window_ms:
            self._timestamps.popleft()

    async def admit(self) -> None:
        """Wait until a request may be issued, then record it."""
        while True:
            now = self._clock()
            self._purge(now)
            if len(self._timestamps) < self.max_requests:
                self._timestamps.append(now)
                return

            wait_ms = self.window_ms - (now - self._timestamps[0]) + WAIT_BUFFER_MS
            self._logger.info("Rate limit reached: waiting %.1fs", wait_ms / 1000)
            await self._sleep(wait_ms / 1000)

    def remaining(self) -> int:
        now = self._clock()
        in_window = sum(1 for stamp in self._timestamps if now - stamp < self.window_ms)
        return max(0, self.max_requests - in_window)
