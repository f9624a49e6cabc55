"""Per-data-class response caches.

Each data class (weather, stocks, crypto, ...) gets its own ``TTLCache`` with
a default TTL that matches how fast the upstream data changes, and its own
background sweep interval. Individual entries may override the default TTL
(a stock profile lives far longer than a stock quote).

Cache keys are built only by the ``build_*_key`` helpers below so GraphQL
resolvers and the REST proxy agree on the format.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Iterable

from dashboard_gateway.utils.cache import TTLCache
from dashboard_gateway.utils.geo import format_coord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CachePolicy:
    """Default TTL and sweep interval for one data class (seconds)."""

    ttl: float
    sweep_interval: float


CACHE_POLICIES: dict[str, CachePolicy] = {
    "weather": CachePolicy(ttl=600, sweep_interval=120),
    "stock": CachePolicy(ttl=30, sweep_interval=10),
    "crypto": CachePolicy(ttl=60, sweep_interval=20),
    "podcast": CachePolicy(ttl=300, sweep_interval=60),
    "weather_extras": CachePolicy(ttl=600, sweep_interval=60),
    "bible": CachePolicy(ttl=3600, sweep_interval=300),
    "bible_versions": CachePolicy(ttl=86400, sweep_interval=3600),
}

# Per-entry TTL overrides (seconds)
STOCK_QUOTE_TTL = 30
STOCK_SEARCH_TTL = 300
STOCK_CANDLES_TTL = 300
STOCK_NEWS_TTL = 300
STOCK_PROFILE_TTL = 3600
EARNINGS_TTL = 600
PODCAST_SEARCH_TTL = 300
PODCAST_TRENDING_TTL = 3600
PODCAST_EPISODES_TTL = 600
PODCAST_FEED_TTL = 300
AIR_QUALITY_TTL = 600
HISTORICAL_TTL = 86400
GEOCODING_TTL = 600


class GatewayCaches:
    """Owns one ``TTLCache`` per data class plus their sweeper tasks.

    Built once per app instance and injected wherever caching happens, so
    tests get a fresh, isolated set and can pass a fake clock.
    """

    def __init__(
        self,
        clock: Callable[[], float] | None = None,
        policies: dict[str, CachePolicy] | None = None,
    ) -> None:
        self._policies = dict(policies or CACHE_POLICIES)
        self._caches: dict[str, TTLCache] = {}
        for name, policy in self._policies.items():
            if clock is None:
                self._caches[name] = TTLCache(policy.ttl)
            else:
                self._caches[name] = TTLCache(policy.ttl, clock=clock)
        self._sweepers: list[asyncio.Task] = []

    def __getitem__(self, name: str) -> TTLCache:
        return self._caches[name]

    @property
    def weather(self) -> TTLCache:
        return self._caches["weather"]

    @property
    def stock(self) -> TTLCache:
        return self._caches["stock"]

    @property
    def crypto(self) -> TTLCache:
        return self._caches["crypto"]

    @property
    def podcast(self) -> TTLCache:
        return self._caches["podcast"]

    @property
    def weather_extras(self) -> TTLCache:
        return self._caches["weather_extras"]

    @property
    def bible(self) -> TTLCache:
        return self._caches["bible"]

    @property
    def bible_versions(self) -> TTLCache:
        return self._caches["bible_versions"]

    def items(self) -> Iterable[tuple[str, TTLCache]]:
        return self._caches.items()

    # ------------------------------------------------------------------
    # Background sweeping
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Start one periodic sweep task per cache. Requires a running loop."""
        if self._sweepers:
            return
        for name, cache in self._caches.items():
            interval = self._policies[name].sweep_interval
            task = asyncio.create_task(self._sweep_forever(name, cache, interval))
            self._sweepers.append(task)
        logger.info(f"[CACHE] Started {len(self._sweepers)} sweepers")

    async def stop(self) -> None:
        for task in self._sweepers:
            task.cancel()
        await asyncio.gather(*self._sweepers, return_exceptions=True)
        self._sweepers.clear()

    @staticmethod
    async def _sweep_forever(name: str, cache: TTLCache, interval: float) -> None:
        while True:
            await asyncio.sleep(interval)
            removed = cache.sweep()
            if removed:
                logger.debug(f"[CACHE] {name}: swept {removed} expired entries")

    def clear(self) -> None:
        for cache in self._caches.values():
            cache.clear()

    # ------------------------------------------------------------------
    # Key builders
    # ------------------------------------------------------------------

    @staticmethod
    def build_weather_key(kind: str, lat: float, lon: float) -> str:
        """Key for ``current``, ``forecast`` or ``hourly`` weather.

        Example:
            >>> GatewayCaches.build_weather_key("current", 51.5074, -0.1278)
            'current:51.51:-0.13'
        """
        return f"{kind}:{format_coord(lat)}:{format_coord(lon)}"

    @staticmethod
    def build_air_quality_key(lat: float, lon: float) -> str:
        return f"aqi:{format_coord(lat)}:{format_coord(lon)}"

    @staticmethod
    def build_historical_key(lat: float, lon: float, date: str) -> str:
        return f"historical:{format_coord(lat)}:{format_coord(lon)}:{date}"

    @staticmethod
    def build_city_search_key(query: str, limit: int) -> str:
        return f"geo:search:{query}:{limit}"

    @staticmethod
    def build_reverse_geocode_key(lat: float, lon: float) -> str:
        return f"geo:reverse:{format_coord(lat)}:{format_coord(lon)}"

    @staticmethod
    def build_stock_key(kind: str, *parts: object) -> str:
        """``stock:{kind}:{part}:...``, e.g. ``stock:candles:AAPL:D:1:2``."""
        return ":".join(["stock", kind, *(str(p) for p in parts)])

    @staticmethod
    def build_earnings_key(from_: str, to: str) -> str:
        return f"earnings:{from_}:{to}"

    @staticmethod
    def build_crypto_key(ids: list[str], vs_currency: str) -> str:
        """Order-independent: ``["eth", "btc"]`` and ``["btc", "eth"]`` share a key."""
        return f"crypto:{','.join(sorted(ids))}:{vs_currency}"

    @staticmethod
    def build_podcast_key(kind: str, *parts: object) -> str:
        return ":".join(["podcast", kind, *(str(p) for p in parts)])

    @staticmethod
    def build_bible_versions_key(language: str = "en") -> str:
        return f"youversion:bibles:{language}"

    @staticmethod
    def build_passage_key(bible_id: int, usfm: str) -> str:
        return f"youversion:passage:{bible_id}:{usfm}"

    @staticmethod
    def build_votd_key(day: int) -> str:
        return f"youversion:votd:{day}"
