"""The set of upstream clients one gateway instance talks to."""

import asyncio
from dataclasses import dataclass

import httpx

from dashboard_gateway.config import Settings

from .bible import YouVersionClient
from .crypto import CoinGeckoClient
from .podcast import PodcastIndexClient
from .stocks import FinnhubClient
from .weather import OpenMeteoClient, OpenWeatherClient


@dataclass
class ProviderClients:
    openweather: OpenWeatherClient
    open_meteo: OpenMeteoClient
    finnhub: FinnhubClient
    coingecko: CoinGeckoClient
    podcast: PodcastIndexClient
    youversion: YouVersionClient

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "ProviderClients":
        """Build every client from settings. ``transport`` is shared (tests)."""
        return cls(
            openweather=OpenWeatherClient(
                settings.openweather_base_url, settings.openweather_api_key, transport=transport
            ),
            open_meteo=OpenMeteoClient(settings.open_meteo_base_url, transport=transport),
            finnhub=FinnhubClient(settings.finnhub_base_url, settings.finnhub_api_key, transport=transport),
            coingecko=CoinGeckoClient(settings.coingecko_base_url, transport=transport),
            podcast=PodcastIndexClient(
                settings.podcastindex_base_url,
                settings.podcastindex_api_key,
                settings.podcastindex_api_secret,
                transport=transport,
            ),
            youversion=YouVersionClient(
                settings.youversion_api_base_url, settings.youversion_app_key, transport=transport
            ),
        )

    async def close(self) -> None:
        await asyncio.gather(
            self.openweather.close(),
            self.open_meteo.close(),
            self.finnhub.close(),
            self.coingecko.close(),
            self.podcast.close(),
            self.youversion.close(),
        )
