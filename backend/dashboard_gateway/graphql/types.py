"""GraphQL object types, generated from the pydantic models.

Types are declared leaf-first: strawberry resolves a nested model field by
looking up the type already registered for that model.
"""

from strawberry.experimental.pydantic import type as pydantic_type

from dashboard_gateway import models


# Weather

@pydantic_type(model=models.WeatherCondition, all_fields=True)
class WeatherCondition:
    pass


@pydantic_type(model=models.Wind, all_fields=True)
class Wind:
    pass


@pydantic_type(model=models.Clouds, all_fields=True)
class Clouds:
    pass


@pydantic_type(model=models.Temperature, all_fields=True)
class Temperature:
    pass


@pydantic_type(model=models.CurrentWeather, all_fields=True)
class CurrentWeather:
    pass


@pydantic_type(model=models.ForecastDay, all_fields=True)
class ForecastDay:
    pass


@pydantic_type(model=models.HourlyForecast, all_fields=True)
class HourlyForecast:
    pass


@pydantic_type(model=models.WeatherData, all_fields=True)
class WeatherData:
    pass


@pydantic_type(model=models.AirQuality, all_fields=True)
class AirQuality:
    pass


@pydantic_type(model=models.HistoricalWeatherDay, all_fields=True)
class HistoricalWeatherDay:
    pass


@pydantic_type(model=models.City, all_fields=True)
class City:
    pass


@pydantic_type(model=models.WeatherUpdate, all_fields=True)
class WeatherUpdate:
    pass


# Markets

@pydantic_type(model=models.StockSearchResult, all_fields=True)
class StockSearchResult:
    pass


@pydantic_type(model=models.StockQuote, all_fields=True)
class StockQuote:
    pass


@pydantic_type(model=models.StockCandle, all_fields=True)
class StockCandle:
    pass


@pydantic_type(model=models.CompanyNewsArticle, all_fields=True)
class CompanyNewsArticle:
    pass


@pydantic_type(model=models.EarningsEvent, all_fields=True)
class EarningsEvent:
    pass


@pydantic_type(model=models.CryptoPrice, all_fields=True)
class CryptoPrice:
    pass


# Podcasts

@pydantic_type(model=models.PodcastFeed, all_fields=True)
class PodcastFeed:
    pass


@pydantic_type(model=models.PodcastEpisode, all_fields=True)
class PodcastEpisode:
    pass


@pydantic_type(model=models.PodcastSearchResponse, all_fields=True)
class PodcastSearchResponse:
    pass


@pydantic_type(model=models.PodcastEpisodesResponse, all_fields=True)
class PodcastEpisodesResponse:
    pass


# Bible

@pydantic_type(model=models.BibleVersion, all_fields=True)
class BibleVersion:
    pass


@pydantic_type(model=models.BibleVerse, all_fields=True)
class BibleVerse:
    pass


@pydantic_type(model=models.BiblePassage, all_fields=True)
class BiblePassage:
    pass
