import logging
from datetime import date, timedelta
from typing import Dict, List, Optional

import requests

from config.settings import GEOCODING_API_URL, WEATHER_API_BASE_URL, WEATHER_TIMEOUT_SECONDS
from config.travel_config import WEATHER_VARIATION
from core.models import WeatherSnapshot


class WeatherError(Exception):
    """Base class for weather provider failures."""


class NotFoundError(WeatherError):
    """The location could not be resolved to coordinates."""

    def __init__(self, location: str):
        super().__init__(f'Location "{location}" not found. Please check the spelling or try a nearby city.')
        self.location = location


class ProviderError(WeatherError):
    """Transport, HTTP or payload format failure talking to the provider."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


# Open-Meteo WMO weather codes: (upper bound, description, icon)
WEATHER_CODES = [
    (0, "Clear sky", "01d"),
    (3, "Partly cloudy", "02d"),
    (48, "Fog", "50d"),
    (67, "Rain", "10d"),
    (77, "Snow", "13d"),
    (99, "Thunderstorm", "11d"),
]


def describe_weather_code(code) -> Dict[str, str]:
    """Maps a weather code to a description and icon id."""
    for upper, description, icon in WEATHER_CODES:
        if code is not None and code <= upper:
            return {"description": description, "icon": icon}
    return {"description": "Unknown", "icon": "01d"}


class WeatherProvider:
    """
    Open-Meteo backed weather lookup.
    Resolves a location name to coordinates, then fetches current conditions
    and the daily forecast in one call.
    """

    def __init__(self, session=None, base_url: str = WEATHER_API_BASE_URL,
                 geocoding_url: str = GEOCODING_API_URL, timeout: float = WEATHER_TIMEOUT_SECONDS):
        self._session = session or requests.Session()
        self.base_url = base_url.rstrip("/")
        self.geocoding_url = geocoding_url
        self.timeout = timeout

    def current_and_forecast(self, location: str) -> Dict:
        latitude, longitude = self._geocode(location)
        data = self._get_json(
            f"{self.base_url}/forecast",
            {
                "latitude": latitude,
                "longitude": longitude,
                "current": "temperature_2m,relative_humidity_2m,wind_speed_10m,weather_code,precipitation,cloud_cover",
                "daily": "weather_code,temperature_2m_max,temperature_2m_min,precipitation_sum,wind_speed_10m_max",
                "timezone": "auto",
            },
            "weather data",
        )
        try:
            current = self._parse_current(data["current"])
            forecast = self._parse_daily(data["daily"])
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise ProviderError(f"Unexpected weather payload for {location}: {e}") from e

        logging.info(f"🌤️ Weather for {location}: {current.temperature}°C, {current.description}")
        return {"current": current, "forecast": forecast}

    def _geocode(self, location: str):
        data = self._get_json(self.geocoding_url, {"name": location, "count": 1}, "location data")
        results = data.get("results") if isinstance(data, dict) else None
        if not results:
            raise NotFoundError(location)
        try:
            return results[0]["latitude"], results[0]["longitude"]
        except (KeyError, TypeError) as e:
            raise ProviderError(f"Unexpected geocoding payload for {location}: {e}") from e

    def _get_json(self, url: str, params: Dict, what: str):
        try:
            response = self._session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise ProviderError(f"Failed to fetch {what}: {e}") from e

        if response.status_code != 200:
            raise ProviderError(
                f"Failed to fetch {what}: {response.status_code} {response.reason}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as e:
            raise ProviderError(f"Invalid JSON in {what}: {e}") from e

    @staticmethod
    def _parse_current(current: Dict) -> WeatherSnapshot:
        code = describe_weather_code(current["weather_code"])
        return WeatherSnapshot(
            temperature=float(current["temperature_2m"]),
            description=code["description"],
            icon=code["icon"],
            humidity=current.get("relative_humidity_2m"),
            wind_speed=current.get("wind_speed_10m"),
            precipitation=current.get("precipitation"),
            cloud_cover=current.get("cloud_cover"),
        )

    @staticmethod
    def _parse_daily(daily: Dict) -> List[WeatherSnapshot]:
        forecast = []
        for index, day in enumerate(daily["time"]):
            code = describe_weather_code(daily["weather_code"][index])
            forecast.append(WeatherSnapshot(
                temperature=(daily["temperature_2m_max"][index] + daily["temperature_2m_min"][index]) / 2,
                description=code["description"],
                icon=code["icon"],
                humidity=0,
                wind_speed=daily["wind_speed_10m_max"][index],
                precipitation=daily["precipitation_sum"][index],
                date=date.fromisoformat(day),
            ))
        return forecast


class SyntheticDailyWeather:
    """
    Derives per-day weather from one base reading with a fixed 4-day cycle:
    unchanged, warmer, cooler and rainy, rainy.
    """

    def __init__(self, base: Optional[WeatherSnapshot]):
        self.base = base
        self._cycle = self._build_cycle(base) if base is not None else []

    @staticmethod
    def _build_cycle(base: WeatherSnapshot) -> List[WeatherSnapshot]:
        step = WEATHER_VARIATION["step_c"]
        rainy = WEATHER_VARIATION["rain_description"]
        return [
            base,
            base.with_changes(temperature=min(base.temperature + step, WEATHER_VARIATION["max_temp_c"])),
            base.with_changes(
                temperature=max(base.temperature - step, WEATHER_VARIATION["min_temp_c"]),
                description=base.description if base.is_rainy else rainy,
            ),
            base.with_changes(description=rainy),
        ]

    def for_day(self, day: int) -> Optional[WeatherSnapshot]:
        if not self._cycle:
            return None
        return self._cycle[day % len(self._cycle)]


class ForecastDailyWeather:
    """
    Looks trip days up in a dated forecast: day d is start_date + (d - 1).
    Undated snapshots stand for consecutive days from start_date. Days the
    forecast does not cover fall back to the synthetic cycle.
    """

    def __init__(self, forecast: List[WeatherSnapshot], start_date: date,
                 fallback: Optional[SyntheticDailyWeather] = None):
        self.start_date = start_date
        self.fallback = fallback
        self._by_date: Dict[date, WeatherSnapshot] = {}
        for offset, snapshot in enumerate(forecast or []):
            self._by_date.setdefault(snapshot.date or start_date + timedelta(days=offset), snapshot)

    def for_day(self, day: int) -> Optional[WeatherSnapshot]:
        snapshot = self._by_date.get(self.start_date + timedelta(days=day - 1))
        if snapshot is not None:
            return snapshot
        return self.fallback.for_day(day) if self.fallback else None


def forecast_for_trip(forecast: List[WeatherSnapshot], start_date: date,
                      duration_days: Optional[int] = None) -> List[WeatherSnapshot]:
    """Keeps dated forecast days that fall inside the trip window; [] when none overlap."""
    end_date = start_date + timedelta(days=duration_days) if duration_days else None
    return [
        snapshot for snapshot in forecast or []
        if snapshot.date is None
        or (snapshot.date >= start_date and (end_date is None or snapshot.date < end_date))
    ]
