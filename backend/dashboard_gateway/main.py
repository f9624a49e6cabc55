"""Dashboard Gateway FastAPI Application.

Main entry point for the gateway server: GraphQL at ``/graphql`` (queries
over HTTP, subscriptions over WebSocket), the REST proxy when enabled, and
``/health``.
"""

import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from strawberry.fastapi import GraphQLRouter

from dashboard_gateway.api import RestProxy, router
from dashboard_gateway.config import Settings
from dashboard_gateway.graphql import GatewayResolvers, schema
from dashboard_gateway.models import ErrorCode, GatewayError
from dashboard_gateway.services import (
    GatewayCaches,
    MemoryRateLimitStore,
    ProviderClients,
    RateLimiter,
    RedisRateLimitStore,
    WeatherBus,
    WeatherSubscriptionManager,
)
from dashboard_gateway.services.cache import CACHE_POLICIES, CachePolicy

# Configure logging
logging.basicConfig(
    level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger(__name__)


def _build_rest_proxy(settings: Settings, clients: ProviderClients) -> RestProxy:
    window = settings.rate_limit_window_seconds
    # The proxy keeps its own caches, plus one for in-memory rate counters.
    caches = GatewayCaches(
        policies={**CACHE_POLICIES, "ratelimit": CachePolicy(ttl=window, sweep_interval=window)}
    )
    if settings.redis_url:
        store = RedisRateLimitStore(settings.redis_url)
    else:
        store = MemoryRateLimitStore(caches["ratelimit"])
    limiter = RateLimiter(store, limit=settings.rate_limit_requests, window_seconds=window)
    return RestProxy(caches=caches, clients=clients, rate_limiter=limiter)


def _error_response(status_code: int, code: ErrorCode, message: str, user_message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": {
                "code": code.value,
                "message": message,
                "user_message": user_message,
            },
        },
    )


def create_app(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build a gateway app with its own caches, clients and pollers.

    ``transport`` replaces the network for every upstream client (tests pass
    an ``httpx.MockTransport``).
    """
    settings = settings or Settings.from_env()

    caches = GatewayCaches()
    clients = ProviderClients.from_settings(settings, transport=transport)
    resolvers = GatewayResolvers(caches, clients)
    subscriptions = WeatherSubscriptionManager(
        resolvers.refresh_current_weather,
        WeatherBus(),
        interval=settings.weather_poll_interval_seconds,
    )
    rest_proxy = _build_rest_proxy(settings, clients) if settings.rest_proxy_enabled else None

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        # Startup
        caches.start()
        if rest_proxy:
            rest_proxy.caches.start()
        logger.info(
            f"[GATEWAY] Started ({settings.environment}, "
            f"REST proxy {'on' if rest_proxy else 'off'})"
        )
        yield
        # Shutdown
        await subscriptions.stop_all()
        await caches.stop()
        if rest_proxy:
            await rest_proxy.caches.stop()
            await rest_proxy.rate_limiter.store.close()
        await clients.close()
        logger.info("[GATEWAY] Stopped")

    app = FastAPI(
        title="Dashboard Gateway",
        description="GraphQL aggregation gateway for weather, markets, podcasts and Bible data",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.resolvers = resolvers
    app.state.subscriptions = subscriptions
    app.state.rest_proxy = rest_proxy

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Global exception handlers
    @app.exception_handler(GatewayError)
    async def gateway_exception_handler(request: Request, exc: GatewayError):
        """Configuration, upstream, rate limit and request errors."""
        return _error_response(exc.status_code, exc.code, exc.message, exc.user_message)

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(request: Request, exc: ValidationError):
        """Handle Pydantic validation errors."""
        return _error_response(
            422,
            ErrorCode.VALIDATION_ERROR,
            str(exc),
            "Invalid request format. Please check your input.",
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected errors."""
        logger.exception(f"[GATEWAY] Unhandled error on {request.url.path}")
        return _error_response(500, ErrorCode.API_ERROR, str(exc), "Something went wrong. Please try again.")

    async def get_context() -> dict:
        return {"resolvers": resolvers, "subscriptions": subscriptions}

    app.include_router(GraphQLRouter(schema, context_getter=get_context), prefix="/graphql")

    if rest_proxy:
        app.include_router(router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    return app


def run() -> None:
    """Console entry point: serve the gateway with uvicorn."""
    settings = Settings.from_env()
    uvicorn.run(
        "dashboard_gateway.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
