"""CoinGecko markets client. Public API, no key."""

from dashboard_gateway.services.base import ProviderClient


class CoinGeckoClient(ProviderClient):
    provider_name = "coingecko"
    timeout = 10.0

    async def markets(self, ids: list[str], vs_currency: str = "usd") -> list:
        """Market data for ``ids`` with a 7-day sparkline and 24h change."""
        params = {
            "vs_currency": vs_currency,
            "ids": ",".join(ids),
            "order": "market_cap_desc",
            "sparkline": "true",
            "price_change_percentage": "24h",
        }
        return await self._get_json("/api/v3/coins/markets", params=params)
