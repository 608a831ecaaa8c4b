"""WeatherAPI.com client constants and request construction.

API docs: https://www.weatherapi.com/docs/
"""

from __future__ import annotations

from typing import Any

FORECAST_ENDPOINT = "forecast.json"

# The API key travels as a request header rather than a query parameter
API_KEY_HEADER = "key"


def forecast_url(base_url: str) -> str:
    """Join the configured base URL and the forecast endpoint."""
    if not base_url.endswith("/"):
        base_url += "/"
    return f"{base_url}{FORECAST_ENDPOINT}"


def forecast_params(location: str, days: int, *, air_quality: bool) -> dict[str, Any]:
    """Query parameters for a forecast request."""
    params: dict[str, Any] = {"q": location, "days": days}
    if air_quality:
        params["aqi"] = "yes"
    return params
