"""Dashboard Gateway Services.

Service layer components:
- Weather: OpenWeatherMap (current, forecast, air quality, geocoding) and Open-Meteo (history)
- Stocks: Finnhub quotes, candles, news and earnings
- Crypto: CoinGecko market prices
- Podcast: PodcastIndex search, trending and episodes (signed requests)
- Bible: YouVersion versions, passages and verse of the day
- Cache: per-data-class TTL caches with background sweeping
- Rate limit: per-IP fixed-window limiting (memory or Redis)
- Subscriptions: weather pollers and in-process pub/sub
"""

from .base import ProviderClient
from .clients import ProviderClients
from .bible import YouVersionClient
from .cache import GatewayCaches
from .crypto import CoinGeckoClient
from .podcast import PodcastIndexClient
from .ratelimit import MemoryRateLimitStore, RateLimiter, RedisRateLimitStore
from .stocks import FinnhubClient
from .subscriptions import WeatherBus, WeatherSubscriptionManager
from .weather import OpenMeteoClient, OpenWeatherClient

__all__ = [
    "CoinGeckoClient",
    "FinnhubClient",
    "GatewayCaches",
    "MemoryRateLimitStore",
    "OpenMeteoClient",
    "OpenWeatherClient",
    "PodcastIndexClient",
    "ProviderClient",
    "ProviderClients",
    "RateLimiter",
    "RedisRateLimitStore",
    "WeatherBus",
    "WeatherSubscriptionManager",
    "YouVersionClient",
]
