"""Stock market data from Finnhub."""

from .normalize import (
    normalize_candles,
    normalize_company_news,
    normalize_earnings,
    normalize_quote,
    normalize_search,
)
from .service import FinnhubClient

__all__ = [
    "FinnhubClient",
    "normalize_candles",
    "normalize_company_news",
    "normalize_earnings",
    "normalize_quote",
    "normalize_search",
]
