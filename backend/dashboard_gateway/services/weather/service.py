"""Weather provider clients: OpenWeatherMap and Open-Meteo.

OpenWeatherMap serves current conditions, the 5-day/3-hour forecast, air
pollution and geocoding, authenticated with an ``appid`` query parameter.
Open-Meteo's archive API serves historical days and needs no key.

Both return raw provider JSON; see ``normalize.py`` for the canonical shapes.
"""

from typing import Any

import httpx

from dashboard_gateway.config import require
from dashboard_gateway.services.base import ProviderClient


class OpenWeatherClient(ProviderClient):
    """OpenWeatherMap client (data 2.5 + geo 1.0 APIs)."""

    provider_name = "openweather"
    timeout = 5.0

    def __init__(
        self,
        base_url: str,
        api_key: str | None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(base_url, transport=transport)
        self._api_key = api_key

    def check_credentials(self) -> str:
        return require(self._api_key, "OPENWEATHER_API_KEY")

    def _auth_params(self, **params: Any) -> dict[str, Any]:
        return {**params, "appid": self.check_credentials()}

    async def current(self, lat: float, lon: float) -> dict:
        """Current conditions in metric units.

        Args:
            lat: Latitude in degrees.
            lon: Longitude in degrees.

        Returns:
            Raw OpenWeatherMap ``/weather`` response.
        """
        params = self._auth_params(lat=lat, lon=lon, units="metric")
        return await self._get_json("/data/2.5/weather", params=params)

    async def forecast(self, lat: float, lon: float, cnt: int = 40) -> dict:
        """5-day forecast in 3-hour steps; 40 samples cover all five days."""
        params = self._auth_params(lat=lat, lon=lon, cnt=cnt, units="metric")
        return await self._get_json("/data/2.5/forecast", params=params)

    async def hourly(self, lat: float, lon: float) -> dict:
        return await self.forecast(lat, lon, cnt=16)

    async def air_pollution(self, lat: float, lon: float) -> dict:
        params = self._auth_params(lat=lat, lon=lon)
        return await self._get_json("/data/2.5/air_pollution", params=params)

    async def geocode_direct(self, query: str, limit: int = 5) -> list:
        """Cities matching a name.

        Args:
            query: City name, optionally with ", country code".
            limit: Maximum number of matches (provider caps this at 5).

        Returns:
            List of raw location dicts with ``name, lat, lon, country, state``.
        """
        params = self._auth_params(q=query, limit=limit)
        return await self._get_json("/geo/1.0/direct", params=params)

    async def geocode_reverse(self, lat: float, lon: float) -> list:
        """Nearest named place to a coordinate, as a list of at most one."""
        params = self._auth_params(lat=lat, lon=lon, limit=1)
        return await self._get_json("/geo/1.0/reverse", params=params)


class OpenMeteoClient(ProviderClient):
    """Open-Meteo historical archive. Free, no API key."""

    provider_name = "open-meteo"
    timeout = 10.0

    DAILY_FIELDS = "temperature_2m_max,temperature_2m_min,weathercode,windspeed_10m_max,precipitation_sum"

    async def archive(self, lat: float, lon: float, date: str) -> dict:
        """Daily aggregates for one past day.

        Args:
            lat: Latitude in degrees.
            lon: Longitude in degrees.
            date: Day as ``YYYY-MM-DD``.

        Returns:
            Raw archive response; ``daily`` holds one-element arrays.
        """
        params = {
            "latitude": lat,
            "longitude": lon,
            "start_date": date,
            "end_date": date,
            "daily": self.DAILY_FIELDS,
            "timezone": "auto",
        }
        return await self._get_json("/v1/archive", params=params)
