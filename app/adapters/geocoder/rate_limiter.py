"""Minimum-interval rate limiter owned by a single geocoding adapter."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)


class MinIntervalRateLimiter:
    """Guarantee at least *min_interval* seconds between successive calls.

    Concurrent callers queue on an asyncio.Lock, so the spacing holds even
    when many requests race for the same upstream. A cancelled waiter raises
    CancelledError out of ``wait()`` without recording a call.
    """

    def __init__(
        self,
        min_interval: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        if min_interval < 0:
            raise ValueError("min_interval must be >= 0")
        self._min_interval = min_interval
        self._clock = clock
        self._sleep = sleep
        self._lock = asyncio.Lock()
        self._last_call: float | None = None

    async def wait(self) -> None:
        """Block until the next call is allowed, then record it."""
        async with self._lock:
            if self._last_call is not None:
                remaining = self._last_call + self._min_interval - self._clock()
                if remaining > 0:
                    logger.debug("Rate limiting: waiting %.0f ms before API call", remaining * 1000)
                    await self._sleep(remaining)
            self._last_call = self._clock()
