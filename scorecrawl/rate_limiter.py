from __future__ import annotations

import time


class RateLimiter:
    """Politeness throttle enforcing a minimum gap between requests.

    The crawl runs on a single worker, so acquire() simply sleeps until
    ``interval_secs`` has passed since the previous call."""

    def __init__(self, interval_secs: float) -> None:
        self._interval = max(0.0, interval_secs)
        self._next_allowed = 0.0

    @classmethod
    def from_qps(cls, qps: float) -> "RateLimiter":
        return cls(1.0 / qps if qps > 0 else 0.0)

    @property
    def interval(self) -> float:
        return self._interval

    def acquire(self) -> None:
        """Block until the next request is permitted."""
        if self._interval <= 0:
            return
        now = time.monotonic()
        if now < self._next_allowed:
            time.sleep(self._next_allowed - now)
        self._next_allowed = time.monotonic() + self._interval
