"""Finnhub client for symbol search, quotes, candles, news and earnings.

Every request carries the key in the ``X-Finnhub-Token`` header. The key is
checked before the request is built, so a missing key never reaches the
network.
"""

import httpx

from dashboard_gateway.config import require
from dashboard_gateway.services.base import ProviderClient


class FinnhubClient(ProviderClient):
    provider_name = "finnhub"
    timeout = 10.0

    def __init__(
        self,
        base_url: str,
        api_key: str | None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(base_url, transport=transport)
        self._api_key = api_key

    def check_credentials(self) -> str:
        return require(self._api_key, "FINNHUB_API_KEY")

    def _auth_headers(self) -> dict[str, str]:
        return {"X-Finnhub-Token": self.check_credentials()}

    async def _get(self, path: str, **params) -> dict | list:
        headers = self._auth_headers()
        return await self._get_json(f"/api/v1{path}", params=params, headers=headers)

    async def search(self, query: str) -> dict:
        """Search symbols by name, ticker, ISIN or CUSIP.

        Args:
            query: Free-text search, e.g. "apple" or "AAPL".

        Returns:
            Raw ``{"count": ..., "result": [...]}`` response.
        """
        return await self._get("/search", q=query)

    async def quote(self, symbol: str) -> dict:
        """Real-time quote for one symbol.

        Args:
            symbol: Ticker symbol, e.g. "AAPL".

        Returns:
            Raw quote with keys ``c, d, dp, h, l, o, pc, t``. Unknown symbols
            come back as zeros rather than an error.
        """
        return await self._get("/quote", symbol=symbol)

    async def profile(self, symbol: str) -> dict:
        """Company profile (name, exchange, industry, logo); ``{}`` if unknown."""
        return await self._get("/stock/profile2", symbol=symbol)

    async def candles(self, symbol: str, resolution: str, from_: int, to: int) -> dict:
        """OHLCV candles for a time range.

        Args:
            symbol: Ticker symbol.
            resolution: 1, 5, 15, 30, 60, D, W or M.
            from_: Range start, unix seconds.
            to: Range end, unix seconds.

        Returns:
            Parallel arrays ``c, h, l, o, t, v`` plus status ``s``
            (``"ok"`` or ``"no_data"``).
        """
        return await self._get("/stock/candle", symbol=symbol, resolution=resolution, **{"from": from_, "to": to})

    async def company_news(self, symbol: str, from_: str, to: str) -> list:
        """Company news between two ``YYYY-MM-DD`` dates, newest first.

        Args:
            symbol: Ticker symbol.
            from_: First day included.
            to: Last day included.

        Returns:
            List of raw article dicts.
        """
        return await self._get("/company-news", symbol=symbol, **{"from": from_, "to": to})

    async def earnings_calendar(self, from_: str, to: str) -> dict:
        return await self._get("/calendar/earnings", **{"from": from_, "to": to})
