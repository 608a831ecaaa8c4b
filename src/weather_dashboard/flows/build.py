"""
Prefect flow for building a static dashboard snapshot.

Fetches one location, applies the requested selections and writes the page
to ``<site_dir>/index.html``.

Run locally:
    python -m weather_dashboard.flows.build Paris
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from prefect import flow, task

from weather_dashboard.config import get_settings
from weather_dashboard.datasources.weatherapi import fetch_forecast
from weather_dashboard.errors import InputError
from weather_dashboard.schemas import ForecastResponse, Metric, TemperatureUnit
from weather_dashboard.viewmodel import WeatherViewModel


# No retries: a failed lookup is reported, not repeated
@task(name="fetch-forecast")
def fetch_location(location: str) -> ForecastResponse:
    """Fetch the forecast for ``location`` from WeatherAPI.com."""
    return fetch_forecast(location)


@task(name="write-site")
def write_site(html: str, site_dir: Path) -> Path:
    """Write HTML to the site directory."""
    site_dir.mkdir(parents=True, exist_ok=True)
    output_path = site_dir / "index.html"
    with output_path.open("w", encoding="utf-8") as f:
        f.write(html)
    return output_path


@flow(name="build-dashboard", log_prints=True)
def build_dashboard(
    location: str,
    unit: str = TemperatureUnit.CELSIUS.value,
    day: int = 0,
    metric: str = Metric.TEMPERATURE.value,
    site_dir: Path | None = None,
) -> dict[str, Any]:
    """
    Build a static dashboard page for one location.

    Args:
        location: Location to search for.
        unit: ``C`` or ``F``.
        day: Forecast day to select (0 = first day).
        metric: Metric shown in the tabs layout.
        site_dir: Output directory (default: ``site_dir`` setting).
    """
    settings = get_settings()
    view = WeatherViewModel(settings, fetcher=fetch_location)
    view.toggle_unit(unit)
    view.select_metric(metric)

    print(f"Fetching forecast for {location!r}...")
    result = view.search(location)
    if not result.success:
        print(f"Fetch failed: {result.error}")
        return {"error": result.error}

    try:
        view.select_day(day)
    except InputError as exc:
        print(f"Invalid day: {exc}")
        return {"error": str(exc)}

    print("Building HTML...")
    html = view.page_html()

    print("Writing site...")
    output_path = write_site(html, site_dir or settings.site_dir)

    print(f"Site built: {output_path}")
    return {
        "location": result.data["location"] if result.data else location,
        "days": result.data["days"] if result.data else 0,
        "output": str(output_path),
    }


if __name__ == "__main__":
    summary = build_dashboard(sys.argv[1] if len(sys.argv) > 1 else "London")
    print(f"Flow complete: {summary}")
