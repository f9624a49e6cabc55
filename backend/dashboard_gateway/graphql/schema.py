"""Strawberry schema: ``Query`` and ``Subscription`` root types.

Root fields only translate arguments and wrap results; the work happens in
``GatewayResolvers``, found on the request context. Every root field is
nullable, so a field that fails (missing key, provider down) is reported in
``errors`` while its siblings in the same query still resolve.
"""

from typing import Annotated, AsyncGenerator, Optional

import strawberry
from strawberry.schema.config import StrawberryConfig
from strawberry.types import Info

from dashboard_gateway.graphql import types
from dashboard_gateway.graphql.resolvers import GatewayResolvers
from dashboard_gateway.services.subscriptions import WeatherSubscriptionManager
from dashboard_gateway.utils.geo import is_nearby


def _resolvers(info: Info) -> GatewayResolvers:
    return info.context["resolvers"]


@strawberry.type
class Query:
    # Weather

    @strawberry.field
    async def weather(self, info: Info, lat: float, lon: float) -> Optional[types.WeatherData]:
        return types.WeatherData.from_pydantic(await _resolvers(info).weather(lat, lon))

    @strawberry.field(name="currentWeather")
    async def current_weather(self, info: Info, lat: float, lon: float) -> Optional[types.CurrentWeather]:
        return types.CurrentWeather.from_pydantic(await _resolvers(info).current_weather(lat, lon))

    @strawberry.field
    async def forecast(self, info: Info, lat: float, lon: float) -> Optional[list[types.ForecastDay]]:
        days = await _resolvers(info).forecast(lat, lon)
        return [types.ForecastDay.from_pydantic(day) for day in days]

    @strawberry.field(name="hourlyForecast")
    async def hourly_forecast(self, info: Info, lat: float, lon: float) -> Optional[list[types.HourlyForecast]]:
        hours = await _resolvers(info).hourly_forecast(lat, lon)
        return [types.HourlyForecast.from_pydantic(hour) for hour in hours]

    @strawberry.field(name="airQuality")
    async def air_quality(self, info: Info, lat: float, lon: float) -> Optional[types.AirQuality]:
        result = await _resolvers(info).air_quality(lat, lon)
        return types.AirQuality.from_pydantic(result) if result else None

    @strawberry.field(name="historicalWeather")
    async def historical_weather(
        self, info: Info, lat: float, lon: float, date: str
    ) -> Optional[types.HistoricalWeatherDay]:
        result = await _resolvers(info).historical_weather(lat, lon, date)
        return types.HistoricalWeatherDay.from_pydantic(result) if result else None

    @strawberry.field(name="searchCities")
    async def search_cities(self, info: Info, query: str, limit: int = 5) -> Optional[list[types.City]]:
        cities = await _resolvers(info).search_cities(query, limit)
        return [types.City.from_pydantic(city) for city in cities]

    @strawberry.field(name="reverseGeocode")
    async def reverse_geocode(self, info: Info, lat: float, lon: float) -> Optional[types.City]:
        result = await _resolvers(info).reverse_geocode(lat, lon)
        return types.City.from_pydantic(result) if result else None

    # Crypto and stocks

    @strawberry.field(name="cryptoPrices")
    async def crypto_prices(
        self,
        info: Info,
        ids: list[str],
        vs_currency: Annotated[str, strawberry.argument(name="vsCurrency")] = "usd",
    ) -> Optional[list[types.CryptoPrice]]:
        prices = await _resolvers(info).crypto_prices(ids, vs_currency)
        return [types.CryptoPrice.from_pydantic(price) for price in prices]

    @strawberry.field(name="searchStocks")
    async def search_stocks(self, info: Info, query: str) -> Optional[list[types.StockSearchResult]]:
        results = await _resolvers(info).search_stocks(query)
        return [types.StockSearchResult.from_pydantic(result) for result in results]

    @strawberry.field(name="stockQuote")
    async def stock_quote(self, info: Info, symbol: str) -> Optional[types.StockQuote]:
        return types.StockQuote.from_pydantic(await _resolvers(info).stock_quote(symbol))

    @strawberry.field(name="stockCandles")
    async def stock_candles(
        self,
        info: Info,
        symbol: str,
        from_: Annotated[int, strawberry.argument(name="from")],
        to: int,
        resolution: str = "D",
    ) -> Optional[types.StockCandle]:
        candles = await _resolvers(info).stock_candles(symbol, resolution, from_, to)
        return types.StockCandle.from_pydantic(candles)

    @strawberry.field(name="companyNews")
    async def company_news(
        self,
        info: Info,
        symbol: str,
        from_: Annotated[str, strawberry.argument(name="from")],
        to: str,
    ) -> Optional[list[types.CompanyNewsArticle]]:
        articles = await _resolvers(info).company_news(symbol, from_, to)
        return [types.CompanyNewsArticle.from_pydantic(article) for article in articles]

    @strawberry.field(name="earningsCalendar")
    async def earnings_calendar(
        self,
        info: Info,
        from_: Annotated[str, strawberry.argument(name="from")],
        to: str,
    ) -> Optional[list[types.EarningsEvent]]:
        events = await _resolvers(info).earnings_calendar(from_, to)
        return [types.EarningsEvent.from_pydantic(event) for event in events]

    # Podcasts

    @strawberry.field(name="searchPodcasts")
    async def search_podcasts(self, info: Info, query: str) -> Optional[types.PodcastSearchResponse]:
        return types.PodcastSearchResponse.from_pydantic(await _resolvers(info).search_podcasts(query))

    @strawberry.field(name="trendingPodcasts")
    async def trending_podcasts(self, info: Info) -> Optional[types.PodcastSearchResponse]:
        return types.PodcastSearchResponse.from_pydantic(await _resolvers(info).trending_podcasts())

    @strawberry.field(name="podcastEpisodes")
    async def podcast_episodes(
        self,
        info: Info,
        feed_id: Annotated[strawberry.ID, strawberry.argument(name="feedId")],
    ) -> Optional[types.PodcastEpisodesResponse]:
        episodes = await _resolvers(info).podcast_episodes(str(feed_id))
        return types.PodcastEpisodesResponse.from_pydantic(episodes)

    @strawberry.field(name="podcastFeed")
    async def podcast_feed(
        self,
        info: Info,
        feed_id: Annotated[strawberry.ID, strawberry.argument(name="feedId")],
    ) -> Optional[types.PodcastFeed]:
        feed = await _resolvers(info).podcast_feed(str(feed_id))
        return types.PodcastFeed.from_pydantic(feed) if feed else None

    # Bible

    @strawberry.field(name="bibleVersions")
    async def bible_versions(self, info: Info) -> Optional[list[types.BibleVersion]]:
        versions = await _resolvers(info).bible_versions()
        return [types.BibleVersion.from_pydantic(version) for version in versions]

    @strawberry.field(name="bibleVotd")
    async def bible_votd(self, info: Info, day: int) -> Optional[types.BibleVerse]:
        return types.BibleVerse.from_pydantic(await _resolvers(info).bible_votd(day))

    @strawberry.field(name="biblePassage")
    async def bible_passage(
        self, info: Info, reference: str, translation: Optional[str] = None
    ) -> Optional[types.BiblePassage]:
        passage = await _resolvers(info).bible_passage(reference, translation)
        return types.BiblePassage.from_pydantic(passage)


@strawberry.type
class Subscription:
    @strawberry.subscription(name="weatherUpdates")
    async def weather_updates(
        self, info: Info, lat: float, lon: float
    ) -> AsyncGenerator[types.WeatherUpdate, None]:
        """Current weather for a location now and then once per poll interval."""
        _resolvers(info).clients.openweather.check_credentials()
        manager: WeatherSubscriptionManager = info.context["subscriptions"]
        # Subscribe first so the poller's immediate publication is not missed.
        async with manager.bus.subscribe() as queue:
            manager.start(lat, lon)
            while True:
                update = await queue.get()
                if is_nearby(update.lat, update.lon, lat, lon):
                    yield types.WeatherUpdate.from_pydantic(update)


schema = strawberry.Schema(
    query=Query,
    subscription=Subscription,
    config=StrawberryConfig(auto_camel_case=False),
)
