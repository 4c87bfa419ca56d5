"""In-memory TTL cache for the reference rate"""

import time
from typing import Callable, Optional, Tuple


class RateCache:
    """
    Single-value cache with an explicit time-to-live.

    Expiry is a plain timestamp comparison against the injected clock.
    Writes replace the (value, fetched_at) pair in one assignment, so
    concurrent writers resolve as last-writer-wins.
    """

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self._entry: Optional[Tuple[float, float]] = None

    def get(self) -> Optional[float]:
        """Cached value, or None when empty or expired"""
        entry = self._entry
        if entry is None:
            return None

        value, fetched_at = entry
        if self.clock() - fetched_at >= self.ttl_seconds:
            return None
        return value

    def put(self, value: float) -> None:
        self._entry = (value, self.clock())

    def clear(self) -> None:
        self._entry = None
