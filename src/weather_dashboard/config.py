"""
Application settings.

Values are read once from environment variables prefixed with
``WEATHER_DASHBOARD_`` (or a local ``.env`` file), e.g.::

    WEATHER_DASHBOARD_API_KEY=abc123
    WEATHER_DASHBOARD_LAYOUT=panels
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DashboardLayout(StrEnum):
    """How charts and details are laid out on the page."""

    TABS = "tabs"  # one shared chart, metric picked by tab
    PANELS = "panels"  # three charts side by side + astro/extended details


class Settings(BaseSettings):
    """Dashboard configuration."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_DASHBOARD_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "weather-dashboard"
    app_env: str = "development"
    debug: bool = False

    base_url: str = Field(
        default="https://api.weatherapi.com/v1/",
        description="Weather API root; forecast.json is appended to it",
    )
    api_key: str = Field(default="", description="Sent as the 'key' request header")
    forecast_days: int = Field(default=7, ge=1, le=14)
    request_air_quality: bool = True

    layout: DashboardLayout = DashboardLayout.TABS
    api_port: int = 8000
    site_dir: Path = Path("site")

    @property
    def extended_details(self) -> bool:
        """Whether the conditions panel shows the astro/extended block."""
        return self.layout is DashboardLayout.PANELS


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded on first use."""
    return Settings()
