"""Normalized stock (Finnhub) and crypto (CoinGecko) models."""

from typing import Optional

from pydantic import BaseModel, Field


class StockSearchResult(BaseModel):
    description: str = ""
    displaySymbol: str = ""
    symbol: str
    type: str = ""


class StockQuote(BaseModel):
    """Finnhub quote. Unknown symbols come back as zeros, never nulls."""

    c: float = Field(0.0, description="Current price")
    d: float = Field(0.0, description="Change")
    dp: float = Field(0.0, description="Percent change")
    h: float = Field(0.0, description="High price of the day")
    l: float = Field(0.0, description="Low price of the day")  # noqa: E741
    o: float = Field(0.0, description="Open price of the day")
    pc: float = Field(0.0, description="Previous close price")
    t: int = Field(0, description="Quote timestamp (unix seconds)")


class StockCandle(BaseModel):
    c: list[float] = Field(default_factory=list)
    h: list[float] = Field(default_factory=list)
    l: list[float] = Field(default_factory=list)  # noqa: E741
    o: list[float] = Field(default_factory=list)
    t: list[int] = Field(default_factory=list)
    v: list[int] = Field(default_factory=list)
    s: str = Field("no_data", description="Finnhub status: ok or no_data")


class CompanyNewsArticle(BaseModel):
    id: int
    category: str = "company"
    datetime: int
    headline: str = ""
    image: Optional[str] = None
    source: str = ""
    summary: str = ""
    url: str = ""
    related: Optional[str] = None


class EarningsEvent(BaseModel):
    date: str
    epsActual: Optional[float] = None
    epsEstimate: Optional[float] = None
    revenueActual: Optional[float] = None
    revenueEstimate: Optional[float] = None
    symbol: str
    hour: Optional[str] = None
    quarter: Optional[int] = None
    year: Optional[int] = None


class CryptoPrice(BaseModel):
    id: str
    symbol: str
    name: str
    image: str = ""
    current_price: float = 0.0
    market_cap: float = 0.0
    market_cap_rank: Optional[int] = None
    price_change_percentage_24h: Optional[float] = None
    total_volume: float = 0.0
    sparkline_7d: list[float] = Field(default_factory=list)
