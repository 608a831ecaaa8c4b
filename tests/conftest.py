"""Shared fixtures: a realistic 7-day WeatherAPI.com forecast payload."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, timedelta
from typing import Any

import pytest

from weather_dashboard.config import DashboardLayout, Settings
from weather_dashboard.schemas import ForecastResponse

# 2024-06-15 is a Saturday
START_DATE = date(2024, 6, 15)

CONDITIONS = [
    "Sunny",
    "Partly cloudy",
    "Cloudy",
    "Light rain",
    "Moderate rain",
    "Overcast",
    "Clear",
]


def to_f(celsius: float) -> float:
    return round(celsius * 9 / 5 + 32, 1)


def make_hours(day: date, offset: float) -> list[dict[str, Any]]:
    """24 hourly samples for ``day``."""
    return [
        {
            "time_epoch": 1718409600 + h * 3600,
            "time": f"{day.isoformat()} {h:02d}:00",
            "temp_c": 10 + h * 0.5 + offset,
            "temp_f": to_f(10 + h * 0.5 + offset),
            "precip_mm": round(h * 0.1, 1),
            "wind_kph": 5.0 + h,
            "humidity": 70,
        }
        for h in range(24)
    ]


def make_forecast_payload(
    name: str = "Paris",
    region: str = "Ile-de-France",
    days: int = 7,
    *,
    air_quality: bool = False,
) -> dict[str, Any]:
    """A ``forecast.json`` body with ``days`` forecast days."""
    forecastday = []
    for i in range(days):
        day = START_DATE + timedelta(days=i)
        aggregate: dict[str, Any] = {
            "avgtemp_c": 18.0 + i,
            "avgtemp_f": to_f(18.0 + i),
            "maxtemp_c": 22.5 + i,
            "maxtemp_f": to_f(22.5 + i),
            "mintemp_c": 12.0 + i,
            "mintemp_f": to_f(12.0 + i),
            "avghumidity": 60 + i,
            "daily_chance_of_rain": 10 * i,
            "daily_chance_of_snow": 0,
            "daily_will_it_rain": 1 if i >= 3 else 0,
            "daily_will_it_snow": 0,
            "maxwind_kph": 15.5 + i,
            "totalprecip_mm": 0.5 * i,
            "uv": 5.0,
            "condition": {
                "text": CONDITIONS[i % len(CONDITIONS)],
                "icon": f"//cdn.weatherapi.com/weather/64x64/day/{113 + i}.png",
                "code": 1000 + i,
            },
        }
        if air_quality:
            aggregate["air_quality"] = {"pm2_5": 8.4, "us-epa-index": 1}
        forecastday.append(
            {
                "date": day.isoformat(),
                "date_epoch": 1718409600 + i * 86400,
                "day": aggregate,
                "astro": {
                    "sunrise": "05:46 AM",
                    "sunset": "09:56 PM",
                    "moonrise": "02:10 PM",
                    "moonset": "01:31 AM",
                    "moon_phase": "Waxing Gibbous",
                    "moon_illumination": 63,
                },
                "hour": make_hours(day, offset=i),
            }
        )
    return {
        "location": {
            "name": name,
            "region": region,
            "country": "France",
            "lat": 48.87,
            "lon": 2.33,
            "localtime": "2024-06-15 10:00",
        },
        "current": {"temp_c": 17.0},
        "forecast": {"forecastday": forecastday},
    }


@pytest.fixture
def forecast_payload() -> dict[str, Any]:
    return make_forecast_payload()


@pytest.fixture
def forecast(forecast_payload: dict[str, Any]) -> ForecastResponse:
    return ForecastResponse.model_validate(forecast_payload)


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any local .env file."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        base_url="https://api.example.com/v1/",
        api_key="test-key",
        layout=DashboardLayout.TABS,
    )


@pytest.fixture
def panels_settings(settings: Settings) -> Settings:
    return settings.model_copy(update={"layout": DashboardLayout.PANELS})


@pytest.fixture
def payload_factory() -> Callable[..., dict[str, Any]]:
    """``make_forecast_payload`` for tests that need a custom payload."""
    return make_forecast_payload
