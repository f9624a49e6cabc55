"""Live weather updates for GraphQL subscribers.

``WeatherBus`` fans each published ``WeatherUpdate`` out to every open
subscription. ``WeatherSubscriptionManager`` keeps at most one polling task
per rounded location; each task publishes fresh current weather right away
and then once per interval until it is replaced or stopped.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncIterator, Awaitable, Callable

from dashboard_gateway.models import CurrentWeather, WeatherUpdate
from dashboard_gateway.utils.geo import location_key

logger = logging.getLogger(__name__)

FetchCurrent = Callable[[float, float], Awaitable[CurrentWeather]]


class WeatherBus:
    """In-process broadcast of weather updates."""

    def __init__(self) -> None:
        self._queues: set[asyncio.Queue] = set()

    @asynccontextmanager
    async def subscribe(self) -> AsyncIterator[asyncio.Queue]:
        queue: asyncio.Queue = asyncio.Queue()
        self._queues.add(queue)
        try:
            yield queue
        finally:
            self._queues.discard(queue)

    def publish(self, update: WeatherUpdate) -> None:
        for queue in list(self._queues):
            queue.put_nowait(update)

    @property
    def subscriber_count(self) -> int:
        return len(self._queues)


class WeatherSubscriptionManager:
    def __init__(self, fetch_current: FetchCurrent, bus: WeatherBus, interval: float = 600.0) -> None:
        self._fetch_current = fetch_current
        self._bus = bus
        self._interval = interval
        self._tasks: dict[str, asyncio.Task] = {}

    @property
    def bus(self) -> WeatherBus:
        return self._bus

    @property
    def active_keys(self) -> list[str]:
        return list(self._tasks)

    def task_for(self, lat: float, lon: float) -> asyncio.Task | None:
        return self._tasks.get(location_key(lat, lon))

    def start(self, lat: float, lon: float) -> asyncio.Task:
        """Start polling a location, replacing any poller already running there."""
        key = location_key(lat, lon)
        previous = self._tasks.pop(key, None)
        if previous is not None:
            previous.cancel()
            logger.info(f"[SUBSCRIPTION] Replaced poller for {key}")
        else:
            logger.info(f"[SUBSCRIPTION] Started poller for {key}")

        task = asyncio.create_task(self._poll(lat, lon))
        self._tasks[key] = task
        task.add_done_callback(lambda t, k=key: self._forget(k, t))
        return task

    def _forget(self, key: str, task: asyncio.Task) -> None:
        if self._tasks.get(key) is task:
            del self._tasks[key]

    async def _poll(self, lat: float, lon: float) -> None:
        while True:
            try:
                current = await self._fetch_current(lat, lon)
                self._bus.publish(
                    WeatherUpdate(
                        lat=lat,
                        lon=lon,
                        current=current,
                        timestamp=datetime.now(timezone.utc).isoformat(),
                    )
                )
            except asyncio.CancelledError:
                raise
            except Exception as e:
                logger.error(f"[SUBSCRIPTION] Poll failed for {location_key(lat, lon)}: {e}")
            await asyncio.sleep(self._interval)

    async def stop_all(self) -> None:
        tasks = list(self._tasks.values())
        self._tasks.clear()
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        if tasks:
            logger.info(f"[SUBSCRIPTION] Stopped {len(tasks)} pollers")
