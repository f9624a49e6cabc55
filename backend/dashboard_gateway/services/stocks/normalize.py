"""Finnhub payloads to canonical stock models."""

from typing import Any

from dashboard_gateway.models import (
    CompanyNewsArticle,
    EarningsEvent,
    StockCandle,
    StockQuote,
    StockSearchResult,
)

MAX_NEWS_ARTICLES = 10
MAX_EARNINGS_EVENTS = 10


def normalize_search(data: Any) -> list[StockSearchResult]:
    results = (data or {}).get("result") or []
    return [
        StockSearchResult(
            description=item.get("description") or "",
            displaySymbol=item.get("displaySymbol") or item.get("symbol") or "",
            symbol=item.get("symbol") or "",
            type=item.get("type") or "",
        )
        for item in results
    ]


def normalize_quote(data: Any) -> StockQuote:
    # Finnhub answers unknown symbols with zeros, and sometimes nulls.
    fields = {k: v for k, v in (data or {}).items() if k in StockQuote.model_fields and v is not None}
    return StockQuote(**fields)


def normalize_candles(data: Any) -> StockCandle:
    fields = {k: v for k, v in (data or {}).items() if k in StockCandle.model_fields and v is not None}
    return StockCandle(**fields)


def normalize_company_news(data: Any) -> list[CompanyNewsArticle]:
    return [
        CompanyNewsArticle(
            id=item.get("id") or 0,
            category=item.get("category") or "company",
            datetime=item.get("datetime") or 0,
            headline=item.get("headline") or "",
            image=item.get("image") or None,
            source=item.get("source") or "",
            summary=item.get("summary") or "",
            url=item.get("url") or "",
            related=item.get("related") or None,
        )
        for item in (data or [])[:MAX_NEWS_ARTICLES]
    ]


def normalize_earnings(data: Any) -> list[EarningsEvent]:
    events = (data or {}).get("earningsCalendar") or []
    return [
        EarningsEvent(
            date=item.get("date") or "",
            epsActual=item.get("epsActual"),
            epsEstimate=item.get("epsEstimate"),
            revenueActual=item.get("revenueActual"),
            revenueEstimate=item.get("revenueEstimate"),
            symbol=item.get("symbol") or "",
            hour=item.get("hour") or None,
            quarter=item.get("quarter"),
            year=item.get("year"),
        )
        for item in events[:MAX_EARNINGS_EVENTS]
    ]
