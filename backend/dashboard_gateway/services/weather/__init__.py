"""Weather providers: OpenWeatherMap (live + geocoding) and Open-Meteo (history)."""

from .normalize import (
    normalize_air_quality,
    normalize_city,
    normalize_current_weather,
    normalize_forecast,
    normalize_historical_day,
    normalize_hourly,
    wmo_code_to_description,
)
from .service import OpenMeteoClient, OpenWeatherClient

__all__ = [
    "OpenMeteoClient",
    "OpenWeatherClient",
    "normalize_air_quality",
    "normalize_city",
    "normalize_current_weather",
    "normalize_forecast",
    "normalize_historical_day",
    "normalize_hourly",
    "wmo_code_to_description",
]
