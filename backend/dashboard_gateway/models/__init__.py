"""Models for the dashboard gateway: normalized payloads and error types."""

from .bible import BiblePassage, BibleVerse, BibleVersion
from .errors import (
    AppError,
    ConfigurationError,
    ErrorCode,
    GatewayError,
    InvalidRequestError,
    RateLimitError,
    UpstreamError,
)
from .markets import (
    CompanyNewsArticle,
    CryptoPrice,
    EarningsEvent,
    StockCandle,
    StockQuote,
    StockSearchResult,
)
from .podcast import (
    PodcastEpisode,
    PodcastEpisodesResponse,
    PodcastFeed,
    PodcastSearchResponse,
)
from .weather import (
    AirQuality,
    City,
    Clouds,
    CurrentWeather,
    ForecastDay,
    HistoricalWeatherDay,
    HourlyForecast,
    Temperature,
    WeatherCondition,
    WeatherData,
    WeatherUpdate,
    Wind,
)

__all__ = [
    # Errors
    "AppError",
    "ConfigurationError",
    "ErrorCode",
    "GatewayError",
    "InvalidRequestError",
    "RateLimitError",
    "UpstreamError",
    # Weather
    "AirQuality",
    "City",
    "Clouds",
    "CurrentWeather",
    "ForecastDay",
    "HistoricalWeatherDay",
    "HourlyForecast",
    "Temperature",
    "WeatherCondition",
    "WeatherData",
    "WeatherUpdate",
    "Wind",
    # Markets
    "CompanyNewsArticle",
    "CryptoPrice",
    "EarningsEvent",
    "StockCandle",
    "StockQuote",
    "StockSearchResult",
    # Podcast
    "PodcastEpisode",
    "PodcastEpisodesResponse",
    "PodcastFeed",
    "PodcastSearchResponse",
    # Bible
    "BiblePassage",
    "BibleVerse",
    "BibleVersion",
]
