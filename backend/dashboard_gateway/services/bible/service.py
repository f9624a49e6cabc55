"""YouVersion Platform client: bible versions, passages, verse of the day."""

from urllib.parse import quote

import httpx

from dashboard_gateway.config import require
from dashboard_gateway.services.base import ProviderClient


class YouVersionClient(ProviderClient):
    provider_name = "youversion"
    timeout = 10.0

    def __init__(
        self,
        base_url: str,
        app_key: str | None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(base_url, transport=transport)
        self._app_key = app_key

    def check_credentials(self) -> str:
        return require(self._app_key, "YOUVERSION_APP_KEY")

    def _auth_headers(self) -> dict[str, str]:
        return {"x-yvp-app-key": self.check_credentials()}

    async def bibles(self, language: str = "en") -> dict | list:
        params = {"language_ranges[]": language, "all_available": "true"}
        return await self._get_json("/bibles", params=params, headers=self._auth_headers())

    async def passage(self, bible_id: int, usfm: str) -> dict:
        """Plain-text passage.

        Args:
            bible_id: Numeric YouVersion bible id (111 is NIV).
            usfm: USFM reference such as ``JHN.3.16`` or ``PSA.23.1-PSA.23.6``.

        Returns:
            Raw passage dict with ``content`` and ``reference``.
        """
        path = f"/bibles/{bible_id}/passages/{quote(usfm, safe='')}"
        return await self._get_json(path, params={"format": "text"}, headers=self._auth_headers())

    async def verse_of_the_day(self, day: int) -> dict:
        """``{"day": ..., "passage_id": "<USFM>"}`` for a day of the year."""
        return await self._get_json(f"/verse_of_the_days/{day}", headers=self._auth_headers())
