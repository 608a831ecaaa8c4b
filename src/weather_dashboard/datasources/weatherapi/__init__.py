"""WeatherAPI.com data source.

Public API:
  - forecast: fetch_forecast (7-day forecast with hourly samples)
  - client: endpoint constants, request construction
"""

from weather_dashboard.datasources.weatherapi.client import (
    FORECAST_ENDPOINT,
    forecast_params,
    forecast_url,
)
from weather_dashboard.datasources.weatherapi.forecast import fetch_forecast

__all__ = [
    "FORECAST_ENDPOINT",
    "fetch_forecast",
    "forecast_params",
    "forecast_url",
]
