"""Multi-day forecast from the WeatherAPI.com forecast endpoint."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import requests
from pydantic import ValidationError

from weather_dashboard.config import get_settings
from weather_dashboard.datasources.weatherapi.client import (
    API_KEY_HEADER,
    forecast_params,
    forecast_url,
)
from weather_dashboard.errors import InputError, TransportError
from weather_dashboard.schemas import ForecastResponse
from weather_dashboard.services.http import session

if TYPE_CHECKING:
    from weather_dashboard.config import Settings

logger = logging.getLogger(__name__)


def fetch_forecast(
    location: str,
    settings: Settings | None = None,
    *,
    http: requests.Session | None = None,
) -> ForecastResponse:
    """
    Fetch the forecast for a free-text location.

    Makes exactly one request; nothing is cached.

    Args:
        location: City name, postcode, "lat,lon", etc.
        settings: Endpoint, key and request options (default: process settings).
        http: Session to use (default: the shared module session).

    Returns:
        The parsed forecast.

    Raises:
        InputError: ``location`` is blank; no request is made.
        TransportError: Network failure, non-2xx status, or a body that is
            not a valid forecast.
    """
    location = location.strip()
    if not location:
        raise InputError("Location must not be empty")

    settings = settings or get_settings()
    http = http or session
    url = forecast_url(settings.base_url)
    params = forecast_params(
        location, settings.forecast_days, air_quality=settings.request_air_quality
    )
    headers = {API_KEY_HEADER: settings.api_key}

    logger.debug("GET %s q=%r days=%s", url, location, settings.forecast_days)
    try:
        resp = http.get(url, params=params, headers=headers)
    except requests.RequestException as exc:
        raise TransportError(f"Request to {url} failed: {exc}") from exc

    if not resp.ok:
        raise TransportError(f"Forecast request for {location!r} rejected", resp.status_code)

    try:
        return ForecastResponse.model_validate(resp.json())
    except (ValueError, ValidationError) as exc:
        raise TransportError(f"Malformed forecast response for {location!r}: {exc}") from exc
