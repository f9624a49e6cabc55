from .service import (
    MemoryRateLimitStore,
    RateLimiter,
    RateLimitStore,
    RedisRateLimitStore,
    client_ip,
)

__all__ = [
    "MemoryRateLimitStore",
    "RateLimiter",
    "RateLimitStore",
    "RedisRateLimitStore",
    "client_ip",
]
