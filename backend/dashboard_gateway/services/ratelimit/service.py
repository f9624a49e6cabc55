"""Per-IP fixed-window rate limiting for the REST proxy.

A client may make ``limit`` requests per ``window_seconds``. The window
starts with the first request and is not extended by later ones, so the
counter resets exactly ``window_seconds`` after it was created.

Two counter stores are available: an in-process one (default) and a Redis
one for deployments that run several gateway processes behind one address.
"""

import logging
from abc import ABC, abstractmethod

import redis.asyncio as redis
from fastapi import Request

from dashboard_gateway.utils.cache import TTLCache

logger = logging.getLogger(__name__)


class RateLimitStore(ABC):
    """Counter storage for ``RateLimiter``."""

    @abstractmethod
    async def current(self, key: str) -> int:
        """Return the count for ``key`` in its live window (0 if none)."""
        pass

    @abstractmethod
    async def increment(self, key: str, window_seconds: int) -> int:
        """Count one request, starting a new window if none is live."""
        pass

    async def close(self) -> None:
        pass


class MemoryRateLimitStore(RateLimitStore):
    def __init__(self, cache: TTLCache | None = None) -> None:
        self._cache = cache if cache is not None else TTLCache(default_ttl=60)

    async def current(self, key: str) -> int:
        return self._cache.get(key) or 0

    async def increment(self, key: str, window_seconds: int) -> int:
        return self._cache.increment(key, window_seconds)


class RedisRateLimitStore(RateLimitStore):
    """Redis-backed counters shared by every gateway process.

    INCR and EXPIRE NX run in one pipeline, so the expiry is only set when
    the window opens.
    """

    def __init__(self, redis_url: str = "redis://localhost:6379") -> None:
        self._redis_url = redis_url
        self._client: redis.Redis | None = None

    async def connect(self) -> None:
        if self._client is None:
            self._client = redis.from_url(
                self._redis_url,
                encoding="utf-8",
                decode_responses=True,
            )

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _ensure_connected(self) -> redis.Redis:
        if self._client is None:
            await self.connect()
        return self._client  # type: ignore

    async def current(self, key: str) -> int:
        client = await self._ensure_connected()
        value = await client.get(key)
        return int(value) if value is not None else 0

    async def increment(self, key: str, window_seconds: int) -> int:
        client = await self._ensure_connected()
        async with client.pipeline(transaction=True) as pipe:
            pipe.incr(key)
            pipe.expire(key, window_seconds, nx=True)
            count, _ = await pipe.execute()
        return int(count)


class RateLimiter:
    """Decides whether a client IP has exceeded its request budget."""

    def __init__(self, store: RateLimitStore, limit: int = 60, window_seconds: int = 60) -> None:
        self._store = store
        self.limit = limit
        self.window_seconds = window_seconds

    @property
    def store(self) -> RateLimitStore:
        return self._store

    def build_key(self, ip: str) -> str:
        return f"rate:{ip}:{self.window_seconds}"

    async def hit(self, ip: str) -> bool:
        """Record a request from ``ip``. Returns True if it must be rejected.

        Rejected requests are not counted.
        """
        key = self.build_key(ip)
        if await self._store.current(key) >= self.limit:
            logger.info(f"[RATE] {ip} over limit ({self.limit}/{self.window_seconds}s)")
            return True
        await self._store.increment(key, self.window_seconds)
        return False


def client_ip(request: Request) -> str:
    """First ``X-Forwarded-For`` entry, else the socket peer, else ``"unknown"``."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    if request.client and request.client.host:
        return request.client.host
    return "unknown"
