from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional

from ..core.exceptions import RateLimitError


@dataclass
class _Bucket:
    count: int
    reset_at: float


class FixedWindowRateLimiter:
    """Per-key request counter reset every window; in memory, best effort."""

    def __init__(self, *, max_requests: int = 60, window_seconds: float = 600, clock: Optional[Callable[[], float]] = None):
        self._max = int(max_requests)
        self._window = float(window_seconds)
        self._clock = clock or time.monotonic
        self._buckets: dict[str, _Bucket] = {}
        self._next_sweep = 0.0
        self._lock = threading.Lock()

    def tracked_keys(self) -> int:
        return len(self._buckets)

    def _sweep(self, now: float) -> None:
        # at most once per window
        if now < self._next_sweep:
            return
        self._buckets = {k: b for k, b in self._buckets.items() if b.reset_at > now}
        self._next_sweep = now + self._window

    def hit(self, key: str) -> None:
        now = self._clock()
        with self._lock:
            self._sweep(now)
            bucket = self._buckets.get(key)
            if bucket is None or bucket.reset_at <= now:
                self._buckets[key] = _Bucket(count=1, reset_at=now + self._window)
                return
            if bucket.count >= self._max:
                raise RateLimitError("Rate limit exceeded. Try again later.")
            bucket.count += 1
