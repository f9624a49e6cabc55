"""Normalized weather models.

Field names follow the GraphQL schema (and OpenWeather's own snake_case
names), so cached values can be handed to clients without renaming.
Temperatures are already rounded to whole degrees Celsius.
"""

from typing import Optional

from pydantic import BaseModel, Field


class WeatherCondition(BaseModel):
    """A single OpenWeather condition entry (icon codes like ``10d``)."""

    id: int = Field(..., description="OpenWeather condition id")
    main: str = Field(..., description="Condition group, e.g. Rain")
    description: str = Field(..., description="Human-readable condition")
    icon: str = Field(..., description="OpenWeather icon code")


class Wind(BaseModel):
    speed: float = Field(0.0, description="Wind speed in m/s")
    deg: int = Field(0, description="Wind direction in degrees")
    gust: Optional[float] = Field(None, description="Gust speed in m/s")


class Clouds(BaseModel):
    all: int = Field(0, description="Cloud cover percentage")


class Temperature(BaseModel):
    min: float
    max: float
    day: float
    night: float


class CurrentWeather(BaseModel):
    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: int
    humidity: int
    weather: list[WeatherCondition] = Field(default_factory=list)
    wind: Wind = Field(default_factory=Wind)
    clouds: Clouds = Field(default_factory=Clouds)
    dt: int
    timezone: int = 0
    sunrise: Optional[int] = None
    sunset: Optional[int] = None
    visibility: Optional[int] = None


class ForecastDay(BaseModel):
    dt: int
    temp: Temperature
    weather: list[WeatherCondition] = Field(default_factory=list)
    humidity: int
    wind_speed: float
    pop: float


class HourlyForecast(BaseModel):
    dt: int
    temp: float
    weather: list[WeatherCondition] = Field(default_factory=list)
    pop: float
    wind_speed: float


class WeatherData(BaseModel):
    """Aggregate of current, daily and hourly weather for one location."""

    current: Optional[CurrentWeather] = None
    forecast: Optional[list[ForecastDay]] = None
    hourly: Optional[list[HourlyForecast]] = None


class AirQuality(BaseModel):
    """OpenWeather air pollution reading; ``aqi`` is the 1-5 index."""

    aqi: int
    co: float
    no: float
    no2: float
    o3: float
    so2: float
    pm2_5: float
    pm10: float


class HistoricalWeatherDay(BaseModel):
    date: str = Field(..., description="YYYY-MM-DD")
    temp_max: float
    temp_min: float
    precipitation: float = 0.0
    wind_speed_max: float = 0.0
    weather_description: str
    weather_icon: str


class City(BaseModel):
    id: str = Field(..., description='Stable id built as "lat,lon"')
    name: str
    country: str
    state: Optional[str] = None
    lat: float
    lon: float


class WeatherUpdate(BaseModel):
    """Payload published to ``weatherUpdates`` subscribers."""

    lat: float
    lon: float
    current: CurrentWeather
    timestamp: str = Field(..., description="ISO-8601 publication time")
