"""Crypto market data from CoinGecko."""

from .normalize import normalize_crypto_prices
from .service import CoinGeckoClient

__all__ = ["CoinGeckoClient", "normalize_crypto_prices"]
