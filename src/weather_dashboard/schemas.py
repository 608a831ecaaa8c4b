"""
Domain models for the weather dashboard.

Pydantic models mirroring the WeatherAPI.com ``forecast.json`` payload.
Only the fields the dashboard reads are declared; anything else in the
response is ignored.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

# =============================================================================
# Enums
# =============================================================================


class TemperatureUnit(StrEnum):
    """Temperature display unit."""

    CELSIUS = "C"
    FAHRENHEIT = "F"


class Metric(StrEnum):
    """Hourly series that can be charted."""

    TEMPERATURE = "temperature"
    PRECIPITATION = "precipitation"
    WIND = "wind"

    @property
    def label(self) -> str:
        """Display name, e.g. ``Temperature``."""
        return self.value.capitalize()


# =============================================================================
# Forecast payload
# =============================================================================


class Location(BaseModel):
    """Resolved location returned by the API."""

    name: str
    region: str = ""
    country: str = ""
    lat: float | None = None
    lon: float | None = None
    localtime: str | None = None


class Condition(BaseModel):
    """Weather condition text and icon."""

    text: str = ""
    icon: str = ""
    code: int | None = None


class DayAggregate(BaseModel):
    """Aggregate metrics for one forecast day."""

    avgtemp_c: float
    avgtemp_f: float
    maxtemp_c: float
    maxtemp_f: float
    mintemp_c: float
    mintemp_f: float
    avghumidity: float = 0
    daily_chance_of_rain: int = 0
    daily_chance_of_snow: int = 0
    daily_will_it_rain: int = 0
    daily_will_it_snow: int = 0
    maxwind_kph: float = 0
    totalprecip_mm: float = 0
    condition: Condition = Field(default_factory=Condition)
    air_quality: dict[str, float] | None = None

    def avg_temp(self, unit: TemperatureUnit) -> float:
        return self.avgtemp_c if unit is TemperatureUnit.CELSIUS else self.avgtemp_f

    def max_temp(self, unit: TemperatureUnit) -> float:
        return self.maxtemp_c if unit is TemperatureUnit.CELSIUS else self.maxtemp_f

    def min_temp(self, unit: TemperatureUnit) -> float:
        return self.mintemp_c if unit is TemperatureUnit.CELSIUS else self.mintemp_f


class Astro(BaseModel):
    """Sun and moon times for one day."""

    sunrise: str = ""
    sunset: str = ""
    moonrise: str = ""
    moonset: str = ""
    moon_phase: str = ""
    moon_illumination: float = 0


class HourSample(BaseModel):
    """One hour's point-in-time reading."""

    time: str = Field(..., description="Local time, 'YYYY-MM-DD HH:MM'")
    temp_c: float
    temp_f: float
    precip_mm: float = 0
    wind_kph: float = 0

    @property
    def hour(self) -> int:
        """Hour of day (0-23)."""
        return datetime.fromisoformat(self.time).hour

    def temperature(self, unit: TemperatureUnit) -> float:
        return self.temp_c if unit is TemperatureUnit.CELSIUS else self.temp_f


class ForecastDay(BaseModel):
    """One calendar day: aggregates, astro data and hourly samples."""

    date: date
    day: DayAggregate
    astro: Astro | None = None
    hour: list[HourSample] = Field(default_factory=list)


class Forecast(BaseModel):
    """Ordered forecast days."""

    forecastday: list[ForecastDay] = Field(..., min_length=1)


class ForecastResponse(BaseModel):
    """Root object of a ``forecast.json`` response."""

    location: Location
    forecast: Forecast

    @property
    def days(self) -> list[ForecastDay]:
        """Shortcut for ``forecast.forecastday``."""
        return self.forecast.forecastday


# =============================================================================
# Operations
# =============================================================================


class Result(BaseModel):
    """Generic result wrapper for controller actions."""

    success: bool
    message: str
    data: dict[str, Any] | None = None
    error: str | None = None
