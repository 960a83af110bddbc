from datetime import date
from unittest.mock import MagicMock

import pytest
import requests
from data.weather_utils import (
    ForecastDailyWeather,
    NotFoundError,
    ProviderError,
    SyntheticDailyWeather,
    WeatherProvider,
    describe_weather_code,
    forecast_for_trip,
)
from core.models import WeatherSnapshot

GEOCODE_PAYLOAD = {"results": [{"latitude": 38.72, "longitude": -9.14}]}

FORECAST_PAYLOAD = {
    "current": {
        "temperature_2m": 18.4,
        "relative_humidity_2m": 70,
        "wind_speed_10m": 12.0,
        "weather_code": 61,
        "precipitation": 0.4,
        "cloud_cover": 90,
    },
    "daily": {
        "time": ["2025-06-01", "2025-06-02"],
        "weather_code": [0, 95],
        "temperature_2m_max": [24.0, 20.0],
        "temperature_2m_min": [14.0, 12.0],
        "precipitation_sum": [0.0, 8.5],
        "wind_speed_10m_max": [10.0, 30.0],
    },
}


def make_response(status_code=200, payload=None):
    response = MagicMock()
    response.status_code = status_code
    response.reason = "OK" if status_code == 200 else "Error"
    response.json.return_value = payload
    return response


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture(autouse=True)
def mock_logging(mocker):
    """Fixture to mock the logging module."""
    mocker.patch('logging.info')


@pytest.mark.parametrize("code, description, icon", [
    (0, "Clear sky", "01d"),
    (2, "Partly cloudy", "02d"),
    (45, "Fog", "50d"),
    (61, "Rain", "10d"),
    (71, "Snow", "13d"),
    (95, "Thunderstorm", "11d"),
    (150, "Unknown", "01d"),
])
def test_describe_weather_code(code, description, icon):
    assert describe_weather_code(code) == {"description": description, "icon": icon}


def test_current_and_forecast_success(session):
    session.get.side_effect = [make_response(payload=GEOCODE_PAYLOAD), make_response(payload=FORECAST_PAYLOAD)]
    provider = WeatherProvider(session=session)

    result = provider.current_and_forecast("Lisbon")

    current = result["current"]
    assert current.temperature == 18.4
    assert current.description == "Rain"
    assert current.is_rainy
    assert current.humidity == 70
    assert [day.temperature for day in result["forecast"]] == [19.0, 16.0]
    assert result["forecast"][1].description == "Thunderstorm"
    assert result["forecast"][0].date == date(2025, 6, 1)

    geocode_call = session.get.call_args_list[0]
    assert geocode_call.kwargs["params"] == {"name": "Lisbon", "count": 1}
    assert geocode_call.kwargs["timeout"] == provider.timeout


def test_unknown_location_raises_not_found(session):
    session.get.return_value = make_response(payload={"results": []})

    with pytest.raises(NotFoundError) as excinfo:
        WeatherProvider(session=session).current_and_forecast("Atlantis")

    assert excinfo.value.location == "Atlantis"


def test_http_error_raises_provider_error(session):
    session.get.side_effect = [make_response(payload=GEOCODE_PAYLOAD), make_response(status_code=503)]

    with pytest.raises(ProviderError) as excinfo:
        WeatherProvider(session=session).current_and_forecast("Lisbon")

    assert excinfo.value.status_code == 503


def test_transport_error_raises_provider_error(session):
    session.get.side_effect = requests.ConnectionError("connection refused")

    with pytest.raises(ProviderError):
        WeatherProvider(session=session).current_and_forecast("Lisbon")


def test_malformed_payload_raises_provider_error(session):
    session.get.side_effect = [make_response(payload=GEOCODE_PAYLOAD), make_response(payload={"current": {}})]

    with pytest.raises(ProviderError):
        WeatherProvider(session=session).current_and_forecast("Lisbon")


def test_default_session_uses_requests(mocker):
    mock_session_cls = mocker.patch('data.weather_utils.requests.Session')
    mock_session_cls.return_value.get.return_value = make_response(payload={})

    with pytest.raises(NotFoundError):
        WeatherProvider().current_and_forecast("Nowhere")

    mock_session_cls.assert_called_once()


def test_forecast_for_trip_drops_past_days():
    forecast = [
        WeatherSnapshot(temperature=10, description="Fog", date=date(2025, 6, 1)),
        WeatherSnapshot(temperature=12, description="Fog", date=date(2025, 6, 2)),
    ]

    assert forecast_for_trip(forecast, date(2025, 6, 2)) == forecast[1:]
    assert forecast_for_trip(forecast, date(2025, 7, 1)) == []
    assert forecast_for_trip(forecast, date(2025, 5, 30), duration_days=2) == []
    assert forecast_for_trip(forecast, date(2025, 5, 31), duration_days=2) == forecast[:1]


def test_forecast_daily_weather_matches_days_by_date():
    forecast = [
        WeatherSnapshot(temperature=t, description="Clear sky", date=date(2025, 6, d))
        for t, d in ((5, 3), (20, 4), (28, 5))
    ]
    base = WeatherSnapshot(temperature=18, description="Cloudy")
    source = ForecastDailyWeather(forecast, date(2025, 6, 1), fallback=SyntheticDailyWeather(base))

    assert source.for_day(1).date is None
    assert source.for_day(1).temperature == 20
    assert source.for_day(3) is forecast[0]
    assert source.for_day(4) is forecast[1]
    assert source.for_day(6).description == "rainy"
    assert ForecastDailyWeather(forecast, date(2025, 6, 1)).for_day(2) is None
