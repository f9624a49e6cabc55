"""Unit tests for weather payload normalization."""

from datetime import datetime, timezone

import pytest

from dashboard_gateway.services.weather import (
    normalize_air_quality,
    normalize_city,
    normalize_current_weather,
    normalize_forecast,
    normalize_historical_day,
    normalize_hourly,
    wmo_code_to_description,
)
from dashboard_gateway.utils.geo import round_half_up


def _ts(year: int, month: int, day: int, hour: int) -> int:
    return int(datetime(year, month, day, hour, tzinfo=timezone.utc).timestamp())


def _sample(dt: int, temp: float, humidity: int = 60, pop: float = 0.0, icon: str = "01d") -> dict:
    return {
        "dt": dt,
        "main": {"temp": temp, "temp_min": temp - 1, "temp_max": temp + 1, "humidity": humidity},
        "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": icon}],
        "wind": {"speed": 3.5, "deg": 180},
        "pop": pop,
    }


CURRENT_PAYLOAD = {
    "main": {"temp": 22.5, "feels_like": 21.4, "temp_min": 20.1, "temp_max": 24.6, "pressure": 1013, "humidity": 65},
    "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}],
    "wind": {"speed": 4.1, "deg": 250},
    "clouds": {"all": 75},
    "dt": 1_705_320_000,
    "timezone": 3600,
    "sys": {"sunrise": 1_705_300_000, "sunset": 1_705_335_000},
    "visibility": 10000,
}


class TestRounding:
    def test_halves_round_up(self) -> None:
        assert round_half_up(22.5) == 23
        assert round_half_up(21.5) == 22
        assert round_half_up(-2.5) == -2
        assert round_half_up(21.4) == 21


class TestCurrentWeather:
    def test_normalizes_and_rounds_temperatures(self) -> None:
        current = normalize_current_weather(CURRENT_PAYLOAD)
        assert current.temp == 23
        assert current.feels_like == 21
        assert current.temp_min == 20
        assert current.temp_max == 25
        assert current.humidity == 65
        assert current.weather[0].icon == "10d"
        assert current.wind.speed == 4.1
        assert current.wind.gust is None
        assert current.clouds.all == 75
        assert current.sunrise == 1_705_300_000

    def test_missing_optional_fields_get_defaults(self) -> None:
        current = normalize_current_weather({"main": {"temp": 10.0}, "dt": 1})
        assert current.weather == []
        assert current.wind.speed == 0.0
        assert current.clouds.all == 0
        assert current.sunrise is None
        assert current.visibility is None


class TestForecast:
    def test_groups_samples_by_day(self) -> None:
        pops = [0.0, 0.2, 0.5, 0.1, 0.0, 0.0, 0.3, 0.0]
        samples = [
            _sample(_ts(2024, 1, 15, hour), temp=hour + 0.5, humidity=50 + i, pop=pops[i], icon=f"{i:02d}d")
            for i, hour in enumerate(range(0, 24, 3))
        ]
        samples.append(_sample(_ts(2024, 1, 16, 0), temp=5.0))

        days = normalize_forecast({"list": samples, "city": {"timezone": 0}})

        assert len(days) == 2
        first = days[0]
        assert first.dt == _ts(2024, 1, 15, 0)
        assert first.temp.min == 0  # -0.5 rounds half-up to 0
        assert first.temp.max == 23  # 22.5
        assert first.temp.day == 13  # 12:00 sample, 12.5
        assert first.temp.night == 1  # 00:00 sample, 0.5
        assert first.humidity == 54  # mean 53.5
        assert first.pop == 0.5
        assert first.wind_speed == 3.5
        assert first.weather[0].icon == "04d"  # middle of eight samples

    def test_day_and_night_fall_back_to_first_and_last_samples(self) -> None:
        samples = [
            _sample(_ts(2024, 1, 15, 6), temp=6.0),
            _sample(_ts(2024, 1, 15, 9), temp=9.0),
            _sample(_ts(2024, 1, 15, 18), temp=18.0),
        ]
        day = normalize_forecast({"list": samples, "city": {"timezone": 0}})[0]
        assert day.temp.day == 6
        assert day.temp.night == 18

    def test_groups_by_local_date(self) -> None:
        # UTC-5: both samples fall on the evening of 15 January locally.
        samples = [
            _sample(_ts(2024, 1, 15, 21), temp=10.0),
            _sample(_ts(2024, 1, 16, 3), temp=8.0),
        ]
        days = normalize_forecast({"list": samples, "city": {"timezone": -5 * 3600}})
        assert len(days) == 1

    def test_caps_at_seven_days(self) -> None:
        samples = [_sample(_ts(2024, 1, day, 12), temp=10.0) for day in range(1, 11)]
        days = normalize_forecast({"list": samples, "city": {"timezone": 0}})
        assert len(days) == 7

    def test_empty_list(self) -> None:
        assert normalize_forecast({"list": []}) == []


class TestHourly:
    def test_one_entry_per_sample(self) -> None:
        samples = [_sample(_ts(2024, 1, 15, h), temp=h + 0.5, pop=0.4) for h in (0, 3, 6)]
        hours = normalize_hourly({"list": samples})
        assert [h.temp for h in hours] == [1, 4, 7]
        assert hours[0].pop == 0.4
        assert hours[0].wind_speed == 3.5


class TestAirQuality:
    def test_first_reading(self) -> None:
        payload = {
            "list": [
                {
                    "main": {"aqi": 2},
                    "components": {
                        "co": 201.9, "no": 0.02, "no2": 0.77, "o3": 68.66,
                        "so2": 0.64, "pm2_5": 0.5, "pm10": 0.54,
                    },
                }
            ]
        }
        aqi = normalize_air_quality(payload)
        assert aqi is not None
        assert aqi.aqi == 2
        assert aqi.pm2_5 == 0.5

    def test_empty_list_is_none(self) -> None:
        assert normalize_air_quality({"list": []}) is None


class TestWmoCodes:
    @pytest.mark.parametrize(
        "code,description,icon",
        [
            (0, "Clear sky", "01d"),
            (1, "Mainly clear", "02d"),
            (2, "Partly cloudy", "04d"),
            (3, "Overcast", "04d"),
            (45, "Fog", "50d"),
            (53, "Drizzle", "09d"),
            (61, "Rain", "10d"),
            (71, "Snow", "13d"),
            (80, "Rain showers", "09d"),
            (95, "Thunderstorm", "11d"),
            (97, "Thunderstorm with hail", "11d"),
            (150, "Unknown", "03d"),
        ],
    )
    def test_mapping(self, code: int, description: str, icon: str) -> None:
        assert wmo_code_to_description(code) == {"description": description, "icon": icon}


class TestHistorical:
    def test_first_day(self) -> None:
        payload = {
            "daily": {
                "time": ["2024-01-15"],
                "temperature_2m_max": [5.5],
                "temperature_2m_min": [-1.5],
                "weathercode": [61],
                "windspeed_10m_max": [20.3],
                "precipitation_sum": [4.2],
            }
        }
        day = normalize_historical_day(payload)
        assert day is not None
        assert day.date == "2024-01-15"
        assert day.temp_max == 6
        assert day.temp_min == -1
        assert day.weather_description == "Rain"
        assert day.weather_icon == "10d"
        assert day.precipitation == 4.2

    def test_no_days_is_none(self) -> None:
        assert normalize_historical_day({"daily": {"time": []}}) is None
        assert normalize_historical_day({}) is None


class TestCity:
    def test_id_is_lat_lon(self) -> None:
        city = normalize_city({"name": "London", "country": "GB", "state": "England", "lat": 51.5073, "lon": -0.1276})
        assert city.id == "51.5073,-0.1276"
        assert city.state == "England"

    def test_state_optional(self) -> None:
        city = normalize_city({"name": "Paris", "country": "FR", "lat": 48.85, "lon": 2.35})
        assert city.state is None


class TestExplicitNulls:
    def test_current_null_fields(self) -> None:
        current = normalize_current_weather(
            {
                "main": {"temp": 10.0, "feels_like": None, "pressure": None, "humidity": None},
                "weather": [{"id": None, "main": None, "description": None, "icon": None}],
                "wind": {"speed": None, "deg": None},
                "clouds": {"all": None},
                "dt": None,
                "timezone": None,
            }
        )

        assert current.feels_like == 10
        assert current.pressure == 0
        assert current.weather[0].id == 0
        assert current.weather[0].icon == ""
        assert current.wind.speed == 0.0
        assert current.clouds.all == 0
        assert current.dt == 0

    def test_zero_feels_like_is_kept(self) -> None:
        current = normalize_current_weather({"main": {"temp": 2.0, "feels_like": 0.0}, "dt": 1})

        assert current.feels_like == 0

    def test_hourly_null_fields(self) -> None:
        hours = normalize_hourly({"list": [{"dt": 1, "main": {"temp": 5.0}, "pop": None, "wind": {"speed": None}}]})

        assert hours[0].pop == 0.0
        assert hours[0].wind_speed == 0.0

    def test_air_quality_null_components(self) -> None:
        aqi = normalize_air_quality({"list": [{"main": {"aqi": None}, "components": {"co": None, "pm10": None}}]})

        assert aqi.aqi == 0
        assert aqi.co == 0.0
        assert aqi.pm10 == 0.0

    def test_city_null_names(self) -> None:
        city = normalize_city({"lat": 1.0, "lon": 2.0, "name": None, "country": None})

        assert city.name == ""
        assert city.country == ""
