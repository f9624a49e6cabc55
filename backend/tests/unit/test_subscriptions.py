"""Unit tests for weather pollers and the in-process update bus."""

import asyncio

import pytest

from conftest import FakeUpstream, make_resolvers
from dashboard_gateway.graphql import schema
from dashboard_gateway.models import CurrentWeather, WeatherUpdate
from dashboard_gateway.services.subscriptions import WeatherBus, WeatherSubscriptionManager
from dashboard_gateway.utils.geo import is_nearby


def _current(temp: float = 20.0) -> CurrentWeather:
    return CurrentWeather(temp=temp, feels_like=temp, temp_min=temp, temp_max=temp, pressure=1000, humidity=50, dt=1)


class FakeFetcher:
    def __init__(self, fail: bool = False) -> None:
        self.calls: list[tuple[float, float]] = []
        self.fail = fail

    async def __call__(self, lat: float, lon: float) -> CurrentWeather:
        self.calls.append((lat, lon))
        if self.fail:
            raise RuntimeError("provider down")
        return _current()


class TestWeatherBus:
    @pytest.mark.asyncio
    async def test_publish_reaches_every_subscriber(self) -> None:
        bus = WeatherBus()
        manager = WeatherSubscriptionManager(FakeFetcher(), bus, interval=3600)

        async with bus.subscribe() as first, bus.subscribe() as second:
            manager.start(40.71, -74.0)
            a = await asyncio.wait_for(first.get(), timeout=1)
            b = await asyncio.wait_for(second.get(), timeout=1)

        assert a.lat == 40.71
        assert a is b
        assert bus.subscriber_count == 0
        await manager.stop_all()


class TestSubscriptionManager:
    @pytest.mark.asyncio
    async def test_publishes_immediately(self) -> None:
        fetcher = FakeFetcher()
        bus = WeatherBus()
        manager = WeatherSubscriptionManager(fetcher, bus, interval=3600)

        async with bus.subscribe() as queue:
            manager.start(51.5, -0.12)
            update = await asyncio.wait_for(queue.get(), timeout=1)

        assert update.current.temp == 20.0
        assert update.timestamp
        assert fetcher.calls == [(51.5, -0.12)]
        await manager.stop_all()

    @pytest.mark.asyncio
    async def test_second_start_replaces_poller(self) -> None:
        manager = WeatherSubscriptionManager(FakeFetcher(), WeatherBus(), interval=3600)

        t1 = manager.start(51.5074, -0.1278)
        t2 = manager.start(51.5071, -0.1281)
        await asyncio.sleep(0)

        assert t1.cancelled()
        assert not t2.done()
        assert manager.active_keys == ["51.51,-0.13"]
        assert manager.task_for(51.5074, -0.1278) is t2
        await manager.stop_all()

    @pytest.mark.asyncio
    async def test_errors_do_not_stop_polling(self) -> None:
        fetcher = FakeFetcher(fail=True)
        manager = WeatherSubscriptionManager(fetcher, WeatherBus(), interval=0.01)

        task = manager.start(1.0, 2.0)
        await asyncio.sleep(0.05)

        assert len(fetcher.calls) >= 2
        assert not task.done()
        await manager.stop_all()

    @pytest.mark.asyncio
    async def test_stop_all_cancels_everything(self) -> None:
        manager = WeatherSubscriptionManager(FakeFetcher(), WeatherBus(), interval=3600)
        tasks = [manager.start(1.0, 2.0), manager.start(3.0, 4.0)]

        await manager.stop_all()

        assert all(task.cancelled() for task in tasks)
        assert manager.active_keys == []


class TestProximity:
    def test_within_tolerance(self) -> None:
        assert is_nearby(40.71, -74.0, 40.715, -74.004)

    def test_outside_tolerance(self) -> None:
        assert not is_nearby(40.71, -74.0, 40.75, -74.0)
        assert not is_nearby(40.71, -74.0, 40.71, -74.02)


class TestWeatherUpdatesSubscription:
    @pytest.mark.asyncio
    async def test_only_nearby_updates_are_delivered(self) -> None:
        async def never_returns(lat: float, lon: float) -> CurrentWeather:
            await asyncio.Event().wait()

        bus = WeatherBus()
        manager = WeatherSubscriptionManager(never_returns, bus, interval=3600)
        context = {"resolvers": make_resolvers(FakeUpstream()), "subscriptions": manager}
        query = "subscription { weatherUpdates(lat: 40.71, lon: -74.0) { lat lon current { temp } } }"

        async def first_update():
            stream = await schema.subscribe(query, context_value=context)
            async for result in stream:
                return result

        task = asyncio.create_task(first_update())
        for _ in range(100):
            if bus.subscriber_count:
                break
            await asyncio.sleep(0.01)

        far = WeatherUpdate(lat=48.85, lon=2.35, current=_current(5.0), timestamp="2024-01-15T12:00:00+00:00")
        near = WeatherUpdate(lat=40.712, lon=-74.001, current=_current(21.0), timestamp="2024-01-15T12:00:00+00:00")
        bus.publish(far)
        bus.publish(near)
        result = await asyncio.wait_for(task, timeout=1)

        assert result.errors is None
        assert result.data["weatherUpdates"] == {"lat": 40.712, "lon": -74.001, "current": {"temp": 21.0}}
        assert manager.active_keys == ["40.71,-74.00"]
        await manager.stop_all()
