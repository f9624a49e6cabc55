"""CoinGecko market rows to ``CryptoPrice``."""

from typing import Any

from dashboard_gateway.models import CryptoPrice


def normalize_crypto_prices(data: Any) -> list[CryptoPrice]:
    prices = []
    for coin in data or []:
        prices.append(
            CryptoPrice(
                id=coin.get("id") or "",
                symbol=coin.get("symbol") or "",
                name=coin.get("name") or "",
                image=coin.get("image") or "",
                current_price=coin.get("current_price") or 0.0,
                market_cap=coin.get("market_cap") or 0.0,
                market_cap_rank=coin.get("market_cap_rank"),
                price_change_percentage_24h=coin.get("price_change_percentage_24h"),
                total_volume=coin.get("total_volume") or 0.0,
                sparkline_7d=(coin.get("sparkline_in_7d") or {}).get("price") or [],
            )
        )
    return prices
