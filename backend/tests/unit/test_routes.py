"""Unit tests for the REST proxy and the app-level endpoints."""

from fastapi.testclient import TestClient

from conftest import FakeUpstream, make_settings
from dashboard_gateway.main import create_app


def _client(upstream: FakeUpstream, **overrides) -> TestClient:
    settings = make_settings(rest_proxy_enabled=True, **overrides)
    return TestClient(create_app(settings, transport=upstream.transport))


class TestHealth:
    def test_health(self, upstream: FakeUpstream) -> None:
        with _client(upstream) as client:
            response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["timestamp"].endswith("+00:00")

    def test_proxy_not_mounted_when_disabled(self, upstream: FakeUpstream) -> None:
        app = create_app(make_settings(rest_proxy_enabled=False), transport=upstream.transport)
        with TestClient(app) as client:
            response = client.get("/stock/quote", params={"symbol": "AAPL"})

        assert response.status_code == 404
        assert upstream.calls == []


class TestStockProxy:
    def test_quote_passthrough_and_cache(self) -> None:
        upstream = FakeUpstream({"/api/v1/quote": {"c": 189.5, "d": 1.2, "dp": 0.6}})
        with _client(upstream) as client:
            first = client.get("/stock/quote", params={"symbol": "AAPL"})
            second = client.get("/stock/quote", params={"symbol": "AAPL"})

        assert first.status_code == 200
        assert first.json() == {"c": 189.5, "d": 1.2, "dp": 0.6}
        assert second.json() == first.json()
        assert len(upstream.calls_to("/api/v1/quote")) == 1
        assert upstream.calls[0].headers["X-Finnhub-Token"] == "fh-key"

    def test_missing_key_is_configuration_error(self, upstream: FakeUpstream) -> None:
        with _client(upstream, finnhub_api_key=None) as client:
            response = client.get("/stock/quote", params={"symbol": "AAPL"})

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "CONFIGURATION_ERROR"
        assert body["error"]["message"] == "FINNHUB_API_KEY not configured"
        assert upstream.calls == []

    def test_missing_query_parameter(self, upstream: FakeUpstream) -> None:
        with _client(upstream) as client:
            response = client.get("/stock/search")

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "q parameter required"
        assert upstream.calls == []

    def test_candles_require_timestamps(self, upstream: FakeUpstream) -> None:
        with _client(upstream) as client:
            response = client.get("/stock/candles", params={"symbol": "AAPL", "from": "yesterday", "to": "1"})

        assert response.status_code == 400

    def test_unknown_route(self, upstream: FakeUpstream) -> None:
        with _client(upstream) as client:
            response = client.get("/stock/dividends", params={"symbol": "AAPL"})

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    def test_upstream_status_passed_through(self) -> None:
        upstream = FakeUpstream({"/api/v1/quote": (403, {"error": "no access"})})
        with _client(upstream) as client:
            response = client.get("/stock/quote", params={"symbol": "AAPL"})

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "UPSTREAM_ERROR"

    def test_rate_limit(self) -> None:
        upstream = FakeUpstream({"/api/v1/quote": {"c": 1.0}})
        with _client(upstream, rate_limit_requests=3) as client:
            statuses = [client.get("/stock/quote", params={"symbol": "AAPL"}).status_code for _ in range(4)]
            podcast = client.get("/podcast/trending")

        assert statuses == [200, 200, 200, 429]
        assert podcast.status_code == 429

    def test_forwarded_clients_limited_separately(self) -> None:
        upstream = FakeUpstream({"/api/v1/quote": {"c": 1.0}})
        with _client(upstream, rate_limit_requests=1) as client:
            a = client.get("/stock/quote", params={"symbol": "A"}, headers={"X-Forwarded-For": "1.1.1.1"})
            b = client.get("/stock/quote", params={"symbol": "A"}, headers={"X-Forwarded-For": "2.2.2.2"})
            c = client.get("/stock/quote", params={"symbol": "A"}, headers={"X-Forwarded-For": "1.1.1.1"})

        assert [a.status_code, b.status_code, c.status_code] == [200, 200, 429]


class TestPodcastProxy:
    def test_search_flattens_categories(self) -> None:
        upstream = FakeUpstream(
            {
                "/api/1.0/search/byterm": {
                    "status": "true",
                    "feeds": [{"id": 1, "title": "Daily", "categories": {"9": "News", "55": "Politics"}}],
                    "count": 1,
                }
            }
        )
        with _client(upstream) as client:
            response = client.get("/podcast/search", params={"q": "news"})

        assert response.status_code == 200
        feed = response.json()["feeds"][0]
        assert feed["categories"] == "News, Politics"
        assert feed["title"] == "Daily"
        request = upstream.calls[0]
        assert request.headers["X-Auth-Key"] == "pi-key"
        assert "Authorization" in request.headers

    def test_episodes_require_feed_id(self, upstream: FakeUpstream) -> None:
        with _client(upstream) as client:
            response = client.get("/podcast/episodes")

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "feedId parameter required"

    def test_missing_secret(self, upstream: FakeUpstream) -> None:
        with _client(upstream, podcastindex_api_secret=None) as client:
            response = client.get("/podcast/trending")

        assert response.status_code == 500
        assert response.json()["error"]["message"] == "PODCASTINDEX_API_SECRET not configured"
        assert upstream.calls == []
