"""Pure transforms from weather provider JSON to the canonical models.

Rounding happens here, not in the UI, so cached values are display-ready.
Missing optional fields become ``None`` or the model default; a malformed
payload never raises past these functions except where a required number
is genuinely absent (then the upstream answer is unusable anyway).
"""

from collections import OrderedDict
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from dashboard_gateway.models import (
    AirQuality,
    City,
    Clouds,
    CurrentWeather,
    ForecastDay,
    HistoricalWeatherDay,
    HourlyForecast,
    Temperature,
    WeatherCondition,
    Wind,
)
from dashboard_gateway.utils.geo import round_half_up

MAX_FORECAST_DAYS = 7


def wmo_code_to_description(code: int) -> dict[str, str]:
    """Map an Open-Meteo WMO weather code to a description and icon.

    The range checks are ordered; a later range only applies when every
    earlier check failed (so 95 is "Thunderstorm" but 96-99 carry hail).
    """
    if code == 0:
        return {"description": "Clear sky", "icon": "01d"}
    if code <= 3:
        descriptions = {1: "Mainly clear", 2: "Partly cloudy", 3: "Overcast"}
        return {
            "description": descriptions.get(code, "Overcast"),
            "icon": "02d" if code <= 1 else "04d",
        }
    if code <= 48:
        return {"description": "Fog", "icon": "50d"}
    if code <= 55:
        return {"description": "Drizzle", "icon": "09d"}
    if code <= 65:
        return {"description": "Rain", "icon": "10d"}
    if code <= 75:
        return {"description": "Snow", "icon": "13d"}
    if code <= 82:
        return {"description": "Rain showers", "icon": "09d"}
    if code == 95:
        return {"description": "Thunderstorm", "icon": "11d"}
    if code <= 99:
        return {"description": "Thunderstorm with hail", "icon": "11d"}
    return {"description": "Unknown", "icon": "03d"}


def _conditions(raw: Any) -> list[WeatherCondition]:
    conditions = []
    for item in raw or []:
        conditions.append(
            WeatherCondition(
                id=item.get("id") or 0,
                main=item.get("main") or "",
                description=item.get("description") or "",
                icon=item.get("icon") or "",
            )
        )
    return conditions


def _wind(raw: Optional[dict]) -> Wind:
    raw = raw or {}
    return Wind(speed=raw.get("speed") or 0.0, deg=raw.get("deg") or 0, gust=raw.get("gust"))


def _value(mapping: dict, key: str, default: Any) -> Any:
    # Zero is a real reading; only absent or null falls back.
    value = mapping.get(key)
    return default if value is None else value


def normalize_current_weather(data: dict) -> CurrentWeather:
    main = data.get("main") or {}
    sys = data.get("sys") or {}
    return CurrentWeather(
        temp=round_half_up(main["temp"]),
        feels_like=round_half_up(_value(main, "feels_like", main["temp"])),
        temp_min=round_half_up(_value(main, "temp_min", main["temp"])),
        temp_max=round_half_up(_value(main, "temp_max", main["temp"])),
        pressure=main.get("pressure") or 0,
        humidity=main.get("humidity") or 0,
        weather=_conditions(data.get("weather")),
        wind=_wind(data.get("wind")),
        clouds=Clouds(all=(data.get("clouds") or {}).get("all") or 0),
        dt=data.get("dt") or 0,
        timezone=data.get("timezone") or 0,
        sunrise=sys.get("sunrise"),
        sunset=sys.get("sunset"),
        visibility=data.get("visibility"),
    )


def normalize_forecast(data: dict) -> list[ForecastDay]:
    """Collapse 3-hour forecast samples into at most seven local days.

    Samples are grouped by calendar date in the location's own timezone
    (``city.timezone`` offset in seconds). Per day: min/max over all
    samples, ``day`` from the first 12:00-15:00 sample, ``night`` from the
    first 00:00-03:00 sample, mean humidity, max precipitation probability
    and the middle sample's conditions.
    """
    offset = timedelta(seconds=(data.get("city") or {}).get("timezone") or 0)
    days: "OrderedDict[str, list[tuple[int, dict]]]" = OrderedDict()
    for item in data.get("list") or []:
        local = datetime.fromtimestamp(item["dt"], tz=timezone.utc) + offset
        days.setdefault(local.date().isoformat(), []).append((local.hour, item))

    result: list[ForecastDay] = []
    for samples in list(days.values())[:MAX_FORECAST_DAYS]:
        items = [item for _, item in samples]
        day_sample = next((item for hour, item in samples if 12 <= hour <= 15), items[0])
        night_sample = next((item for hour, item in samples if 0 <= hour <= 3), items[-1])
        result.append(
            ForecastDay(
                dt=items[0]["dt"],
                temp=Temperature(
                    min=round_half_up(min(i["main"]["temp_min"] for i in items)),
                    max=round_half_up(max(i["main"]["temp_max"] for i in items)),
                    day=round_half_up(day_sample["main"]["temp"]),
                    night=round_half_up(night_sample["main"]["temp"]),
                ),
                weather=_conditions(items[len(items) // 2].get("weather")),
                humidity=round_half_up(sum(i["main"].get("humidity") or 0 for i in items) / len(items)),
                wind_speed=(items[0].get("wind") or {}).get("speed") or 0.0,
                pop=max(i.get("pop") or 0.0 for i in items),
            )
        )
    return result


def normalize_hourly(data: dict) -> list[HourlyForecast]:
    return [
        HourlyForecast(
            dt=item["dt"],
            temp=round_half_up(item["main"]["temp"]),
            weather=_conditions(item.get("weather")),
            pop=item.get("pop") or 0.0,
            wind_speed=(item.get("wind") or {}).get("speed") or 0.0,
        )
        for item in data.get("list") or []
    ]


def normalize_air_quality(data: dict) -> Optional[AirQuality]:
    """First reading of the air pollution response, or ``None`` if empty."""
    readings = data.get("list") or []
    if not readings:
        return None
    item = readings[0]
    components = item.get("components") or {}
    return AirQuality(
        aqi=(item.get("main") or {}).get("aqi") or 0,
        co=components.get("co") or 0.0,
        no=components.get("no") or 0.0,
        no2=components.get("no2") or 0.0,
        o3=components.get("o3") or 0.0,
        so2=components.get("so2") or 0.0,
        pm2_5=components.get("pm2_5") or 0.0,
        pm10=components.get("pm10") or 0.0,
    )


def _first(values: Any, default: Any = None) -> Any:
    if not values:
        return default
    value = values[0]
    return default if value is None else value


def normalize_historical_day(data: dict) -> Optional[HistoricalWeatherDay]:
    daily = data.get("daily") or {}
    if not daily.get("time"):
        return None
    code = _first(daily.get("weathercode"), 0)
    mapped = wmo_code_to_description(code)
    return HistoricalWeatherDay(
        date=daily["time"][0],
        temp_max=round_half_up(_first(daily.get("temperature_2m_max"), 0.0)),
        temp_min=round_half_up(_first(daily.get("temperature_2m_min"), 0.0)),
        precipitation=_first(daily.get("precipitation_sum"), 0.0),
        wind_speed_max=_first(daily.get("windspeed_10m_max"), 0.0),
        weather_description=mapped["description"],
        weather_icon=mapped["icon"],
    )


def normalize_city(item: dict) -> City:
    return City(
        id=f"{item['lat']},{item['lon']}",
        name=item.get("name") or "",
        country=item.get("country") or "",
        state=item.get("state"),
        lat=item["lat"],
        lon=item["lon"],
    )
