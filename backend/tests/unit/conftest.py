"""Shared test helpers: a controllable clock and a fake upstream network."""

from typing import Any, Callable

import httpx
import pytest

from dashboard_gateway.config import Settings
from dashboard_gateway.graphql import GatewayResolvers
from dashboard_gateway.services import GatewayCaches, ProviderClients

Route = Any  # JSON body, (status, JSON body) tuple, or callable(request) -> httpx.Response


class FakeClock:
    def __init__(self, now: float = 1_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeUpstream:
    """Answers requests by URL path and records every request it sees."""

    def __init__(self, routes: dict[str, Route] | None = None) -> None:
        self.routes: dict[str, Route] = dict(routes or {})
        self.calls: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"error": f"no route for {request.url.path}"})
        if callable(route):
            return route(request)
        if isinstance(route, tuple):
            status, body = route
            return httpx.Response(status, json=body)
        return httpx.Response(200, json=route)

    def calls_to(self, path: str) -> list[httpx.Request]:
        return [call for call in self.calls if call.url.path == path]


def make_settings(**overrides: Any) -> Settings:
    values = {
        "openweather_api_key": "ow-key",
        "finnhub_api_key": "fh-key",
        "podcastindex_api_key": "pi-key",
        "podcastindex_api_secret": "pi-secret",
        "youversion_app_key": "yv-key",
    }
    values.update(overrides)
    return Settings(**values)


def make_resolvers(
    upstream: FakeUpstream,
    clock: Callable[[], float] | None = None,
    **settings_overrides: Any,
) -> GatewayResolvers:
    settings = make_settings(**settings_overrides)
    clients = ProviderClients.from_settings(settings, transport=upstream.transport)
    return GatewayResolvers(GatewayCaches(clock=clock), clients)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()
