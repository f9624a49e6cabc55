"""PodcastIndex client: search, trending, episodes and single feeds."""

import time
from typing import Callable

import httpx

from dashboard_gateway.config import require
from dashboard_gateway.services.base import ProviderClient

from .auth import build_podcast_index_headers


class PodcastIndexClient(ProviderClient):
    provider_name = "podcast"
    timeout = 10.0

    def __init__(
        self,
        base_url: str,
        api_key: str | None,
        api_secret: str | None,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        super().__init__(base_url, transport=transport)
        self._api_key = api_key
        self._api_secret = api_secret
        self._clock = clock

    def check_credentials(self) -> tuple[str, str]:
        return (
            require(self._api_key, "PODCASTINDEX_API_KEY"),
            require(self._api_secret, "PODCASTINDEX_API_SECRET"),
        )

    async def _get(self, path: str, **params) -> dict:
        api_key, api_secret = self.check_credentials()
        headers = build_podcast_index_headers(api_key, api_secret, now=self._clock)
        return await self._get_json(f"/api/1.0{path}", params=params, headers=headers)

    async def search_by_term(self, query: str) -> dict:
        """Podcasts whose title, author or owner matches ``query``.

        Args:
            query: Search terms.

        Returns:
            Raw ``{"status", "feeds": [...], "count"}`` response. Feed
            ``categories`` are still an id-to-name map here.
        """
        return await self._get("/search/byterm", q=query)

    async def trending(self, max_results: int = 20) -> dict:
        """Currently trending podcasts, same shape as ``search_by_term``."""
        return await self._get("/podcasts/trending", max=max_results)

    async def episodes_by_feed_id(self, feed_id: str, max_results: int = 20) -> dict:
        """Most recent episodes of one feed.

        Args:
            feed_id: PodcastIndex feed id.
            max_results: Number of episodes to return.

        Returns:
            Raw ``{"items": [...], "count"}`` response.
        """
        return await self._get("/episodes/byfeedid", id=feed_id, max=max_results)

    async def podcast_by_feed_id(self, feed_id: str) -> dict | None:
        """The ``feed`` object of a single podcast, or ``None`` if unknown."""
        data = await self._get("/podcasts/byfeedid", id=feed_id)
        feed = data.get("feed") if isinstance(data, dict) else None
        return feed or None
