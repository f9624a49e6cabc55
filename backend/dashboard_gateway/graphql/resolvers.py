"""Data access behind every GraphQL field.

Each method follows the same shape: check the credential the provider
needs, look in the data class's cache, and on a miss fetch, normalize,
store and return. Results are pydantic models; the strawberry types in
``types.py`` wrap them at the schema boundary.
"""

import asyncio
import logging
import re
from datetime import datetime
from typing import Any, Awaitable, Callable, Optional

from dashboard_gateway.models import (
    AirQuality,
    BiblePassage,
    BibleVerse,
    BibleVersion,
    City,
    CompanyNewsArticle,
    CryptoPrice,
    CurrentWeather,
    EarningsEvent,
    ForecastDay,
    HistoricalWeatherDay,
    HourlyForecast,
    InvalidRequestError,
    PodcastEpisodesResponse,
    PodcastFeed,
    PodcastSearchResponse,
    StockCandle,
    StockQuote,
    StockSearchResult,
    UpstreamError,
    WeatherData,
)
from dashboard_gateway.services import GatewayCaches, ProviderClients
from dashboard_gateway.services.bible import (
    DEFAULT_BIBLE_ID,
    DEFAULT_TRANSLATION,
    curated_reference,
    normalize_passage,
    normalize_verse,
    normalize_versions,
    passage_to_verse,
    to_usfm,
)
from dashboard_gateway.services.cache import service as cache_ttl
from dashboard_gateway.services.crypto import normalize_crypto_prices
from dashboard_gateway.services.podcast import (
    normalize_episodes_response,
    normalize_feed,
    normalize_feeds_response,
)
from dashboard_gateway.services.stocks import (
    normalize_candles,
    normalize_company_news,
    normalize_earnings,
    normalize_quote,
    normalize_search,
)
from dashboard_gateway.services.weather import (
    normalize_air_quality,
    normalize_city,
    normalize_current_weather,
    normalize_forecast,
    normalize_historical_day,
    normalize_hourly,
)
from dashboard_gateway.utils.cache import TTLCache

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def validate_date(value: str) -> str:
    """Accept only real calendar dates written as ``YYYY-MM-DD``."""
    if not _DATE_RE.match(value):
        raise InvalidRequestError(f"Invalid date '{value}': expected YYYY-MM-DD")
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError as e:
        raise InvalidRequestError(f"Invalid date '{value}': {e}") from e
    return value


def parse_bible_id(translation: Optional[str]) -> int:
    """Numeric bible id from a translation argument, else the NIV default."""
    if translation is None:
        return DEFAULT_BIBLE_ID
    try:
        return int(translation.strip())
    except ValueError:
        return DEFAULT_BIBLE_ID


class GatewayResolvers:
    """Cache-first access to every upstream data class."""

    def __init__(self, caches: GatewayCaches, clients: ProviderClients) -> None:
        self.caches = caches
        self.clients = clients

    @staticmethod
    async def _cached(
        cache: TTLCache,
        key: str,
        load: Callable[[], Awaitable[Any]],
        ttl: float | None = None,
    ) -> Any:
        cached = cache.get(key)
        if cached is not None:
            return cached
        value = await load()
        # None means "nothing there"; it is not cached so the next call asks again.
        if value is not None:
            cache.set(key, value, ttl)
        return value

    # ------------------------------------------------------------------
    # Weather
    # ------------------------------------------------------------------

    async def _fetch_current(self, lat: float, lon: float) -> CurrentWeather:
        return normalize_current_weather(await self.clients.openweather.current(lat, lon))

    async def _fetch_forecast(self, lat: float, lon: float) -> list[ForecastDay]:
        return normalize_forecast(await self.clients.openweather.forecast(lat, lon))

    async def _fetch_hourly(self, lat: float, lon: float) -> list[HourlyForecast]:
        return normalize_hourly(await self.clients.openweather.hourly(lat, lon))

    async def weather(self, lat: float, lon: float) -> WeatherData:
        """Current, daily and hourly weather, cached or fetched as a unit.

        If any one of the three is missing from the cache, all three are
        refetched concurrently so the parts always come from one moment.
        """
        self.clients.openweather.check_credentials()
        cache = self.caches.weather
        keys = {
            kind: GatewayCaches.build_weather_key(kind, lat, lon)
            for kind in ("current", "forecast", "hourly")
        }
        cached = {kind: cache.get(key) for kind, key in keys.items()}
        if all(value is not None for value in cached.values()):
            return WeatherData(**cached)

        current, forecast, hourly = await asyncio.gather(
            self._fetch_current(lat, lon),
            self._fetch_forecast(lat, lon),
            self._fetch_hourly(lat, lon),
        )
        cache.set(keys["current"], current)
        cache.set(keys["forecast"], forecast)
        cache.set(keys["hourly"], hourly)
        return WeatherData(current=current, forecast=forecast, hourly=hourly)

    async def current_weather(self, lat: float, lon: float) -> CurrentWeather:
        self.clients.openweather.check_credentials()
        key = GatewayCaches.build_weather_key("current", lat, lon)
        return await self._cached(self.caches.weather, key, lambda: self._fetch_current(lat, lon))

    async def refresh_current_weather(self, lat: float, lon: float) -> CurrentWeather:
        """Always fetch, then overwrite the cached entry. Used by subscription pollers."""
        self.clients.openweather.check_credentials()
        current = await self._fetch_current(lat, lon)
        self.caches.weather.set(GatewayCaches.build_weather_key("current", lat, lon), current)
        return current

    async def forecast(self, lat: float, lon: float) -> list[ForecastDay]:
        self.clients.openweather.check_credentials()
        key = GatewayCaches.build_weather_key("forecast", lat, lon)
        return await self._cached(self.caches.weather, key, lambda: self._fetch_forecast(lat, lon))

    async def hourly_forecast(self, lat: float, lon: float) -> list[HourlyForecast]:
        self.clients.openweather.check_credentials()
        key = GatewayCaches.build_weather_key("hourly", lat, lon)
        return await self._cached(self.caches.weather, key, lambda: self._fetch_hourly(lat, lon))

    async def air_quality(self, lat: float, lon: float) -> Optional[AirQuality]:
        self.clients.openweather.check_credentials()

        async def load() -> Optional[AirQuality]:
            return normalize_air_quality(await self.clients.openweather.air_pollution(lat, lon))

        key = GatewayCaches.build_air_quality_key(lat, lon)
        return await self._cached(self.caches.weather_extras, key, load, cache_ttl.AIR_QUALITY_TTL)

    async def historical_weather(self, lat: float, lon: float, date: str) -> Optional[HistoricalWeatherDay]:
        """One past day from the Open-Meteo archive.

        Args:
            lat: Latitude in degrees.
            lon: Longitude in degrees.
            date: Day as ``YYYY-MM-DD``; anything else raises ``InvalidRequestError``.

        Returns:
            The normalized day, or ``None`` when the archive has no data for it.
        """
        validate_date(date)

        async def load() -> Optional[HistoricalWeatherDay]:
            return normalize_historical_day(await self.clients.open_meteo.archive(lat, lon, date))

        key = GatewayCaches.build_historical_key(lat, lon, date)
        return await self._cached(self.caches.weather_extras, key, load, cache_ttl.HISTORICAL_TTL)

    async def search_cities(self, query: str, limit: int = 5) -> list[City]:
        self.clients.openweather.check_credentials()

        async def load() -> list[City]:
            results = await self.clients.openweather.geocode_direct(query, limit)
            return [normalize_city(item) for item in results or []]

        key = GatewayCaches.build_city_search_key(query, limit)
        return await self._cached(self.caches.weather_extras, key, load, cache_ttl.GEOCODING_TTL)

    async def reverse_geocode(self, lat: float, lon: float) -> Optional[City]:
        self.clients.openweather.check_credentials()

        async def load() -> Optional[City]:
            results = await self.clients.openweather.geocode_reverse(lat, lon)
            return normalize_city(results[0]) if results else None

        key = GatewayCaches.build_reverse_geocode_key(lat, lon)
        return await self._cached(self.caches.weather_extras, key, load, cache_ttl.GEOCODING_TTL)

    # ------------------------------------------------------------------
    # Crypto
    # ------------------------------------------------------------------

    async def crypto_prices(self, ids: list[str], vs_currency: str = "usd") -> list[CryptoPrice]:
        """Market rows for ``ids``, in CoinGecko's market-cap order.

        The cache key sorts the ids, so the same set in any order shares one entry.
        """
        async def load() -> list[CryptoPrice]:
            return normalize_crypto_prices(await self.clients.coingecko.markets(ids, vs_currency))

        key = GatewayCaches.build_crypto_key(ids, vs_currency)
        return await self._cached(self.caches.crypto, key, load)

    # ------------------------------------------------------------------
    # Stocks
    # ------------------------------------------------------------------

    async def search_stocks(self, query: str) -> list[StockSearchResult]:
        self.clients.finnhub.check_credentials()

        async def load() -> list[StockSearchResult]:
            return normalize_search(await self.clients.finnhub.search(query))

        key = GatewayCaches.build_stock_key("search", query)
        return await self._cached(self.caches.stock, key, load, cache_ttl.STOCK_SEARCH_TTL)

    async def stock_quote(self, symbol: str) -> StockQuote:
        self.clients.finnhub.check_credentials()

        async def load() -> StockQuote:
            return normalize_quote(await self.clients.finnhub.quote(symbol))

        key = GatewayCaches.build_stock_key("quote", symbol)
        return await self._cached(self.caches.stock, key, load, cache_ttl.STOCK_QUOTE_TTL)

    async def stock_candles(self, symbol: str, resolution: str, from_: int, to: int) -> StockCandle:
        """OHLCV candles for ``symbol`` between two unix timestamps.

        Args:
            symbol: Ticker symbol.
            resolution: Finnhub resolution (1, 5, 15, 30, 60, D, W, M).
            from_: Range start, unix seconds.
            to: Range end, unix seconds.

        Returns:
            Candle arrays; ``s == "no_data"`` with empty arrays when nothing traded.
        """
        self.clients.finnhub.check_credentials()

        async def load() -> StockCandle:
            return normalize_candles(await self.clients.finnhub.candles(symbol, resolution, from_, to))

        key = GatewayCaches.build_stock_key("candles", symbol, resolution, from_, to)
        return await self._cached(self.caches.stock, key, load, cache_ttl.STOCK_CANDLES_TTL)

    async def company_news(self, symbol: str, from_: str, to: str) -> list[CompanyNewsArticle]:
        self.clients.finnhub.check_credentials()

        async def load() -> list[CompanyNewsArticle]:
            return normalize_company_news(await self.clients.finnhub.company_news(symbol, from_, to))

        key = GatewayCaches.build_stock_key("news", symbol, from_, to)
        return await self._cached(self.caches.stock, key, load, cache_ttl.STOCK_NEWS_TTL)

    async def earnings_calendar(self, from_: str, to: str) -> list[EarningsEvent]:
        self.clients.finnhub.check_credentials()

        async def load() -> list[EarningsEvent]:
            return normalize_earnings(await self.clients.finnhub.earnings_calendar(from_, to))

        key = GatewayCaches.build_earnings_key(from_, to)
        return await self._cached(self.caches.stock, key, load, cache_ttl.EARNINGS_TTL)

    # ------------------------------------------------------------------
    # Podcasts
    # ------------------------------------------------------------------

    async def search_podcasts(self, query: str) -> PodcastSearchResponse:
        self.clients.podcast.check_credentials()

        async def load() -> PodcastSearchResponse:
            return normalize_feeds_response(await self.clients.podcast.search_by_term(query))

        key = GatewayCaches.build_podcast_key("search", query)
        return await self._cached(self.caches.podcast, key, load, cache_ttl.PODCAST_SEARCH_TTL)

    async def trending_podcasts(self) -> PodcastSearchResponse:
        self.clients.podcast.check_credentials()

        async def load() -> PodcastSearchResponse:
            return normalize_feeds_response(await self.clients.podcast.trending())

        key = GatewayCaches.build_podcast_key("trending")
        return await self._cached(self.caches.podcast, key, load, cache_ttl.PODCAST_TRENDING_TTL)

    async def podcast_episodes(self, feed_id: str) -> PodcastEpisodesResponse:
        self.clients.podcast.check_credentials()

        async def load() -> PodcastEpisodesResponse:
            return normalize_episodes_response(await self.clients.podcast.episodes_by_feed_id(feed_id))

        key = GatewayCaches.build_podcast_key("episodes", feed_id)
        return await self._cached(self.caches.podcast, key, load, cache_ttl.PODCAST_EPISODES_TTL)

    async def podcast_feed(self, feed_id: str) -> Optional[PodcastFeed]:
        self.clients.podcast.check_credentials()

        async def load() -> Optional[PodcastFeed]:
            feed = await self.clients.podcast.podcast_by_feed_id(feed_id)
            return normalize_feed(feed) if feed else None

        key = GatewayCaches.build_podcast_key("feed", feed_id)
        return await self._cached(self.caches.podcast, key, load, cache_ttl.PODCAST_FEED_TTL)

    # ------------------------------------------------------------------
    # Bible
    # ------------------------------------------------------------------

    async def bible_versions(self) -> list[BibleVersion]:
        self.clients.youversion.check_credentials()

        async def load() -> list[BibleVersion]:
            return normalize_versions(await self.clients.youversion.bibles("en"))

        key = GatewayCaches.build_bible_versions_key("en")
        return await self._cached(self.caches.bible_versions, key, load)

    async def bible_passage(self, reference: str, translation: Optional[str] = None) -> BiblePassage:
        """Passage text for a human reference.

        Args:
            reference: e.g. "John 3:16" or "Psalm 23:1-6"; unknown books are sent as given.
            translation: Numeric bible id as a string; anything else uses NIV (111).

        Returns:
            The normalized passage.
        """
        self.clients.youversion.check_credentials()
        return await self._passage(parse_bible_id(translation), reference)

    async def _passage(self, bible_id: int, reference: str) -> BiblePassage:
        usfm = to_usfm(reference)

        async def load() -> BiblePassage:
            data = await self.clients.youversion.passage(bible_id, usfm)
            return normalize_passage(data, reference, bible_id)

        key = GatewayCaches.build_passage_key(bible_id, usfm)
        return await self._cached(self.caches.bible, key, load)

    async def _provider_votd(self, day: int) -> BibleVerse:
        votd = await self.clients.youversion.verse_of_the_day(day)
        passage_id = votd.get("passage_id") if isinstance(votd, dict) else None
        if not passage_id or not isinstance(passage_id, str):
            raise UpstreamError("youversion", f"No passage_id returned for day {day}")
        data = await self.clients.youversion.passage(DEFAULT_BIBLE_ID, passage_id)
        if not isinstance(data, dict):
            raise UpstreamError("youversion", f"Unexpected passage body for {passage_id}")
        return normalize_verse(data, passage_id, DEFAULT_TRANSLATION)

    async def bible_votd(self, day: int) -> BibleVerse:
        """Verse of the day, degrading to a curated verse and then to its reference.

        A missing app key is still an error: it is checked before any of the
        fallbacks so misconfiguration is never hidden.
        """
        self.clients.youversion.check_credentials()
        key = GatewayCaches.build_votd_key(day)
        try:
            return await self._cached(self.caches.bible, key, lambda: self._provider_votd(day))
        except UpstreamError as e:
            logger.warning(f"[BIBLE] Verse of the day failed for day {day}, using curated verse: {e}")

        reference = curated_reference(day)
        try:
            return passage_to_verse(await self._passage(DEFAULT_BIBLE_ID, reference))
        except UpstreamError as e:
            logger.warning(f"[BIBLE] Curated passage {reference} failed, returning reference only: {e}")

        return BibleVerse(text="", reference=reference, translation=DEFAULT_TRANSLATION, copyright=None)
