"""Unit tests for TTLCache and the per-data-class cache registry."""

import asyncio

import pytest

from conftest import FakeClock
from dashboard_gateway.services.cache import CACHE_POLICIES, GatewayCaches
from dashboard_gateway.utils.cache import TTLCache


class TestTTLCache:
    """Tests for entry expiry and counters."""

    def test_get_missing_key_returns_none(self, clock: FakeClock) -> None:
        cache = TTLCache(default_ttl=30, clock=clock)
        assert cache.get("stock:quote:AAPL") is None

    def test_entry_visible_until_ttl_elapses(self, clock: FakeClock) -> None:
        cache = TTLCache(default_ttl=30, clock=clock)
        cache.set("stock:quote:AAPL", {"c": 190.5})

        clock.advance(29)
        assert cache.get("stock:quote:AAPL") == {"c": 190.5}

        clock.advance(2)
        assert cache.get("stock:quote:AAPL") is None

    def test_expired_entry_is_removed_on_read(self, clock: FakeClock) -> None:
        cache = TTLCache(default_ttl=10, clock=clock)
        cache.set("k", "v")
        clock.advance(10)
        assert cache.get("k") is None
        assert len(cache) == 0

    def test_per_entry_ttl_overrides_default(self, clock: FakeClock) -> None:
        cache = TTLCache(default_ttl=30, clock=clock)
        cache.set("stock:profile:AAPL", {"name": "Apple"}, ttl=3600)
        clock.advance(600)
        assert cache.get("stock:profile:AAPL") == {"name": "Apple"}

    def test_sweep_drops_only_expired_entries(self, clock: FakeClock) -> None:
        cache = TTLCache(default_ttl=60, clock=clock)
        cache.set("short", 1, ttl=5)
        cache.set("long", 2, ttl=500)
        clock.advance(10)

        assert cache.sweep() == 1
        assert len(cache) == 1
        assert cache.get("long") == 2

    def test_increment_keeps_original_expiry(self, clock: FakeClock) -> None:
        cache = TTLCache(default_ttl=60, clock=clock)
        assert cache.increment("rate:1.2.3.4:60", 60) == 1
        clock.advance(50)
        assert cache.increment("rate:1.2.3.4:60", 60) == 2

        clock.advance(11)
        assert cache.get("rate:1.2.3.4:60") is None
        assert cache.increment("rate:1.2.3.4:60", 60) == 1

    def test_clear(self, clock: FakeClock) -> None:
        cache = TTLCache(default_ttl=60, clock=clock)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.clear()
        assert len(cache) == 0


class TestGatewayCaches:
    """Tests for the cache registry and its key builders."""

    def test_each_data_class_has_its_own_default_ttl(self) -> None:
        caches = GatewayCaches()
        assert caches.weather.default_ttl == 600
        assert caches.stock.default_ttl == 30
        assert caches.crypto.default_ttl == 60
        assert caches.podcast.default_ttl == 300
        assert caches.weather_extras.default_ttl == 600
        assert caches.bible.default_ttl == 3600
        assert caches.bible_versions.default_ttl == 86400

    def test_sweep_intervals(self) -> None:
        intervals = {name: policy.sweep_interval for name, policy in CACHE_POLICIES.items()}
        assert intervals == {
            "weather": 120,
            "stock": 10,
            "crypto": 20,
            "podcast": 60,
            "weather_extras": 60,
            "bible": 300,
            "bible_versions": 3600,
        }

    def test_caches_are_isolated(self, clock: FakeClock) -> None:
        caches = GatewayCaches(clock=clock)
        caches.stock.set("same-key", "stock")
        assert caches.crypto.get("same-key") is None

    def test_crypto_key_ignores_id_order(self) -> None:
        a = GatewayCaches.build_crypto_key(["ethereum", "bitcoin"], "usd")
        b = GatewayCaches.build_crypto_key(["bitcoin", "ethereum"], "usd")
        assert a == b == "crypto:bitcoin,ethereum:usd"

    def test_weather_keys_round_coordinates(self) -> None:
        assert GatewayCaches.build_weather_key("current", 51.5074, -0.1278) == "current:51.51:-0.13"
        assert GatewayCaches.build_air_quality_key(40.0, -74.0) == "aqi:40.00:-74.00"
        assert (
            GatewayCaches.build_historical_key(40.7128, -74.006, "2024-01-15")
            == "historical:40.71:-74.01:2024-01-15"
        )

    def test_stock_and_podcast_keys(self) -> None:
        assert GatewayCaches.build_stock_key("candles", "AAPL", "D", 1, 2) == "stock:candles:AAPL:D:1:2"
        assert GatewayCaches.build_stock_key("quote", "MSFT") == "stock:quote:MSFT"
        assert GatewayCaches.build_earnings_key("2024-01-01", "2024-01-07") == "earnings:2024-01-01:2024-01-07"
        assert GatewayCaches.build_podcast_key("trending") == "podcast:trending"
        assert GatewayCaches.build_podcast_key("episodes", "920666") == "podcast:episodes:920666"

    def test_bible_keys(self) -> None:
        assert GatewayCaches.build_bible_versions_key() == "youversion:bibles:en"
        assert GatewayCaches.build_passage_key(111, "JHN.3.16") == "youversion:passage:111:JHN.3.16"
        assert GatewayCaches.build_votd_key(42) == "youversion:votd:42"

    @pytest.mark.asyncio
    async def test_start_and_stop_sweepers(self) -> None:
        caches = GatewayCaches()
        caches.start()
        await asyncio.sleep(0)
        assert len(caches._sweepers) == len(CACHE_POLICIES)

        await caches.stop()
        assert caches._sweepers == []
