"""In-process fixed-window request counter."""

from __future__ import annotations

from dataclasses import dataclass
from threading import Lock
from time import time
from typing import Callable


@dataclass(frozen=True, slots=True)
class RateLimitDecision:
    allowed: bool
    limit: int
    remaining: int
    reset_epoch: int


class FixedWindowRateLimiter:
    """
    Counts requests per key inside fixed windows aligned to the epoch.

    State is per process: several workers each keep their own counters.
    """

    def __init__(self, clock: Callable[[], float] = time) -> None:
        self._clock = clock
        self._lock = Lock()
        self._buckets: dict[tuple[str, int], int] = {}

    def check(self, key: str, limit: int, window_seconds: int = 60) -> RateLimitDecision:
        """
        Count one request for ``key`` and decide whether it may proceed.

        Rejected requests are not counted.

        Args:
            key: Caller identity (e.g. ``"ip:203.0.113.7"``)
            limit: Requests allowed per window
            window_seconds: Window length

        Returns:
            RateLimitDecision with the remaining budget and window reset time
        """
        now = self.now()
        window_start = now - (now % window_seconds)
        reset_epoch = window_start + window_seconds

        with self._lock:
            self._drop_expired(window_start)

            count = self._buckets.get((key, window_start), 0)
            if count >= limit:
                return RateLimitDecision(
                    allowed=False,
                    limit=limit,
                    remaining=0,
                    reset_epoch=reset_epoch,
                )

            count += 1
            self._buckets[(key, window_start)] = count
            return RateLimitDecision(
                allowed=True,
                limit=limit,
                remaining=max(0, limit - count),
                reset_epoch=reset_epoch,
            )

    def now(self) -> int:
        return int(self._clock())

    def _drop_expired(self, current_window: int) -> None:
        expired = [bucket for bucket in self._buckets if bucket[1] < current_window]
        for bucket in expired:
            del self._buckets[bucket]
