"""Gateway configuration read from the environment (and an optional .env).

Provider credentials are optional at start-up. Code that needs one calls
``require()`` at request time, so a missing key fails that request with a
named "not configured" error instead of breaking the whole server.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from dashboard_gateway.models import ConfigurationError

try:
    load_dotenv()
except Exception:
    pass  # Unreadable .env is not fatal; plain environment still applies

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:3001",
    "http://localhost:5173",
]


def _env(name: str) -> str | None:
    """Read a variable, treating empty strings as unset."""
    value = os.getenv(name)
    return value if value else None


def _env_int(name: str, default: int) -> int:
    value = _env(name)
    return int(value) if value is not None else default


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in ("1", "true", "yes", "on")


def require(value: str | None, variable: str) -> str:
    """Return a credential or raise ``ConfigurationError`` naming the variable."""
    if not value:
        raise ConfigurationError(variable)
    return value


@dataclass(frozen=True)
class Settings:
    """Runtime settings for one gateway instance."""

    openweather_api_key: str | None = None
    finnhub_api_key: str | None = None
    podcastindex_api_key: str | None = None
    podcastindex_api_secret: str | None = None
    youversion_app_key: str | None = None

    openweather_base_url: str = "https://api.openweathermap.org"
    open_meteo_base_url: str = "https://archive-api.open-meteo.com"
    finnhub_base_url: str = "https://finnhub.io"
    coingecko_base_url: str = "https://api.coingecko.com"
    podcastindex_base_url: str = "https://api.podcastindex.org"
    youversion_api_base_url: str = "https://api.youversion.com/v1"

    environment: str = "development"
    rest_proxy_enabled: bool = False
    rate_limit_requests: int = 60
    rate_limit_window_seconds: int = 60
    weather_poll_interval_seconds: float = 600.0
    redis_url: str | None = None
    cors_origins: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    port: int = 3003
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        environment = _env("GATEWAY_ENV") or "development"
        cors = _env("CORS_ORIGINS")
        return cls(
            openweather_api_key=_env("OPENWEATHER_API_KEY"),
            finnhub_api_key=_env("FINNHUB_API_KEY"),
            podcastindex_api_key=_env("PODCASTINDEX_API_KEY"),
            podcastindex_api_secret=_env("PODCASTINDEX_API_SECRET"),
            youversion_app_key=_env("YOUVERSION_APP_KEY"),
            openweather_base_url=_env("OPENWEATHER_BASE_URL") or cls.openweather_base_url,
            open_meteo_base_url=_env("OPEN_METEO_BASE_URL") or cls.open_meteo_base_url,
            finnhub_base_url=_env("FINNHUB_BASE_URL") or cls.finnhub_base_url,
            coingecko_base_url=_env("COINGECKO_BASE_URL") or cls.coingecko_base_url,
            podcastindex_base_url=_env("PODCASTINDEX_BASE_URL") or cls.podcastindex_base_url,
            youversion_api_base_url=_env("YOUVERSION_API_BASE_URL") or cls.youversion_api_base_url,
            environment=environment,
            rest_proxy_enabled=environment == "production" or _env_flag("ENABLE_REST_PROXY"),
            rate_limit_requests=_env_int("RATE_LIMIT_REQUESTS", 60),
            rate_limit_window_seconds=_env_int("RATE_LIMIT_WINDOW_SECONDS", 60),
            weather_poll_interval_seconds=float(_env_int("WEATHER_POLL_INTERVAL_SECONDS", 600)),
            redis_url=_env("REDIS_URL"),
            cors_origins=[o.strip() for o in cors.split(",") if o.strip()] if cors else list(DEFAULT_CORS_ORIGINS),
            port=_env_int("PORT", 3003),
            log_level=(_env("LOG_LEVEL") or "INFO").upper(),
        )
