"""REST proxy routes for non-GraphQL consumers.

    GET /stock/search?q=...
    GET /stock/quote?symbol=...
    GET /stock/profile?symbol=...
    GET /stock/candles?symbol=...&resolution=D&from=...&to=...
    GET /podcast/search?q=...
    GET /podcast/trending
    GET /podcast/episodes?feedId=...

Each request goes through the same gates in order: provider credentials
(500), per-IP rate limit (429), parameters (400), route (404). Only then
is the proxy's own cache consulted and, on a miss, the provider called.
Provider JSON is passed through as-is, except that podcast feed
``categories`` are flattened to a display string.
"""

import logging
from dataclasses import dataclass
from functools import partial
from typing import Any, Awaitable, Callable

from fastapi import APIRouter, Request

from dashboard_gateway.models import InvalidRequestError, RateLimitError
from dashboard_gateway.services import GatewayCaches, ProviderClients, RateLimiter
from dashboard_gateway.services.cache import service as cache_ttl
from dashboard_gateway.services.podcast import normalize_feed_categories
from dashboard_gateway.services.ratelimit import client_ip
from dashboard_gateway.utils.cache import TTLCache

logger = logging.getLogger(__name__)

router = APIRouter()


@dataclass
class RestProxy:
    """Everything the proxy routes need; stored on ``app.state.rest_proxy``."""

    caches: GatewayCaches
    clients: ProviderClients
    rate_limiter: RateLimiter


def get_rest_proxy(request: Request) -> RestProxy:
    return request.app.state.rest_proxy


def _require_param(request: Request, name: str) -> str:
    value = request.query_params.get(name)
    if not value:
        raise InvalidRequestError(f"{name} parameter required")
    return value


def _require_timestamp(request: Request, name: str) -> int:
    value = request.query_params.get(name)
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise InvalidRequestError(f"{name} parameter must be a unix timestamp") from e


async def _enforce_rate_limit(proxy: RestProxy, request: Request) -> None:
    if await proxy.rate_limiter.hit(client_ip(request)):
        raise RateLimitError()


async def _cached(cache: TTLCache, key: str, ttl: int, load: Callable[[], Awaitable[Any]]) -> Any:
    cached = cache.get(key)
    if cached is not None:
        logger.debug(f"[PROXY] Cache hit: {key}")
        return cached
    data = await load()
    cache.set(key, data, ttl)
    return data


@router.get("/stock/{route}")
async def stock_proxy(route: str, request: Request) -> Any:
    """Finnhub passthrough with per-route cache TTLs."""
    proxy = get_rest_proxy(request)
    finnhub = proxy.clients.finnhub
    finnhub.check_credentials()
    await _enforce_rate_limit(proxy, request)

    if route == "search":
        q = _require_param(request, "q")
        key, ttl = GatewayCaches.build_stock_key("search", q), cache_ttl.STOCK_SEARCH_TTL
        load = partial(finnhub.search, q)
    elif route == "quote":
        symbol = _require_param(request, "symbol")
        key, ttl = GatewayCaches.build_stock_key("quote", symbol), cache_ttl.STOCK_QUOTE_TTL
        load = partial(finnhub.quote, symbol)
    elif route == "profile":
        symbol = _require_param(request, "symbol")
        key, ttl = GatewayCaches.build_stock_key("profile", symbol), cache_ttl.STOCK_PROFILE_TTL
        load = partial(finnhub.profile, symbol)
    elif route == "candles":
        symbol = _require_param(request, "symbol")
        resolution = request.query_params.get("resolution") or "D"
        from_ = _require_timestamp(request, "from")
        to = _require_timestamp(request, "to")
        key = GatewayCaches.build_stock_key("candles", symbol, resolution, from_, to)
        ttl = cache_ttl.STOCK_CANDLES_TTL
        load = partial(finnhub.candles, symbol, resolution, from_, to)
    else:
        raise InvalidRequestError(f"Unknown stock route: {route}", status_code=404)

    return await _cached(proxy.caches.stock, key, ttl, load)


@router.get("/podcast/{route}")
async def podcast_proxy(route: str, request: Request) -> Any:
    """PodcastIndex passthrough with signed requests."""
    proxy = get_rest_proxy(request)
    podcast = proxy.clients.podcast
    podcast.check_credentials()
    await _enforce_rate_limit(proxy, request)

    if route == "search":
        q = _require_param(request, "q")
        key, ttl = GatewayCaches.build_podcast_key("search", q), cache_ttl.PODCAST_SEARCH_TTL

        async def load() -> Any:
            return normalize_feed_categories(await podcast.search_by_term(q))
    elif route == "trending":
        key, ttl = GatewayCaches.build_podcast_key("trending"), cache_ttl.PODCAST_TRENDING_TTL

        async def load() -> Any:
            return normalize_feed_categories(await podcast.trending())
    elif route == "episodes":
        feed_id = _require_param(request, "feedId")
        key, ttl = GatewayCaches.build_podcast_key("episodes", feed_id), cache_ttl.PODCAST_EPISODES_TTL

        async def load() -> Any:
            return await podcast.episodes_by_feed_id(feed_id)
    else:
        raise InvalidRequestError(f"Unknown podcast route: {route}", status_code=404)

    return await _cached(proxy.caches.podcast, key, ttl, load)
