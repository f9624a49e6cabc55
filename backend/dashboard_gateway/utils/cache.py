"""In-memory TTL cache.

Process-level cache for normalized upstream responses. Every entry carries its
own expiry, so one cache can hold short-lived quotes next to day-long
historical data. Reads never return an expired entry, and a periodic
``sweep()`` drops the ones nobody asked for again.
"""

import time
from typing import Any, Callable


class TTLCache:
    """TTL-aware cache for JSON-like values and pydantic models."""

    def __init__(
        self,
        default_ttl: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._entries: dict[str, tuple[float, Any]] = {}
        self._default_ttl = default_ttl
        self._clock = clock

    def get(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        ttl = self._default_ttl if ttl is None else ttl
        self._entries[key] = (self._clock() + ttl, value)

    def increment(self, key: str, ttl: float | None = None) -> int:
        """Add one to an integer counter, keeping the window it started in.

        A missing or expired counter starts at 1 with a fresh expiry.
        """
        current = self.get(key)
        if current is None:
            self.set(key, 1, ttl)
            return 1
        expires_at, _ = self._entries[key]
        self._entries[key] = (expires_at, current + 1)
        return current + 1

    def sweep(self) -> int:
        """Drop expired entries. Returns how many were removed."""
        now = self._clock()
        expired = [k for k, (expires_at, _) in self._entries.items() if now >= expires_at]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def default_ttl(self) -> float:
        return self._default_ttl
