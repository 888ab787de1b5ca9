"""
Rate Limiting
=============

Per-client sliding-window limiter kept in process memory.

Usage:
    from portfolio_api.shared.api.rate_limit import enforce_contact_rate_limit

    @router.post("/contact", dependencies=[Depends(enforce_contact_rate_limit)])
    async def submit_contact():
        ...

Counters are not persisted; a restart starts every client from zero.
"""

import math
import time
from collections import deque
from dataclasses import dataclass
from threading import Lock
from typing import Callable, Deque, Dict

from fastapi import Request, Response

from portfolio_api.core import RateLimitExceededException


@dataclass(frozen=True)
class RateLimitResult:
    """Outcome of one hit against the limiter."""
    allowed: bool
    limit: int
    remaining: int
    reset_at: float

    def retry_after(self, now: float) -> int:
        return max(1, math.ceil(self.reset_at - now))


class SlidingWindowRateLimiter:
    """
    Allows at most ``limit`` hits per key within any ``window_seconds`` span.

    Rejected hits are not recorded. The check and the append happen under one
    lock, so concurrent hits from the same key are counted exactly. Keys whose
    window has emptied are dropped at most once per window span.
    """

    def __init__(
        self,
        limit: int,
        window_seconds: float,
        clock: Callable[[], float] = time.time
    ):
        self.limit = limit
        self.window_seconds = window_seconds
        self._clock = clock
        self._lock = Lock()
        self._windows: Dict[str, Deque[float]] = {}
        self._last_sweep = clock()

    def hit(self, key: str) -> RateLimitResult:
        now = self._clock()
        window_start = now - self.window_seconds

        with self._lock:
            if now - self._last_sweep >= self.window_seconds:
                self._sweep(window_start)
                self._last_sweep = now

            window = self._windows.get(key)
            if window is None:
                window = self._windows[key] = deque()
            while window and window[0] <= window_start:
                window.popleft()

            if len(window) >= self.limit:
                return RateLimitResult(
                    allowed=False,
                    limit=self.limit,
                    remaining=0,
                    reset_at=window[0] + self.window_seconds,
                )

            window.append(now)
            return RateLimitResult(
                allowed=True,
                limit=self.limit,
                remaining=self.limit - len(window),
                reset_at=window[0] + self.window_seconds,
            )

    def _sweep(self, window_start: float) -> None:
        stale = [key for key, window in self._windows.items() if not window or window[-1] <= window_start]
        for key in stale:
            del self._windows[key]

    def reset(self) -> None:
        """Clear all state (for tests)."""
        with self._lock:
            self._windows.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._windows)

    def stats(self) -> dict:
        with self._lock:
            return {key: len(window) for key, window in self._windows.items() if window}


def get_client_address(request: Request) -> str:
    return request.client.host if request.client else "unknown"


async def enforce_contact_rate_limit(request: Request, response: Response) -> None:
    """Dependency guarding the contact endpoint."""
    limiter: SlidingWindowRateLimiter = request.app.state.contact_rate_limiter
    result = limiter.hit(get_client_address(request))
    reset_at = math.ceil(result.reset_at)

    if not result.allowed:
        raise RateLimitExceededException(
            limit=result.limit,
            retry_after=result.retry_after(time.time()),
            reset_at=reset_at,
        )

    response.headers["X-RateLimit-Limit"] = str(result.limit)
    response.headers["X-RateLimit-Remaining"] = str(result.remaining)
    response.headers["X-RateLimit-Reset"] = str(reset_at)
