"""Weather Dashboard - 7-day forecast with hourly charts for any location.

Architecture::

    datasources/   External APIs (WeatherAPI.com forecast)
    state.py       UI selections + held forecast
    renderers/     Pure data → HTML (conditions panel, day strip, page)
    charts.py      Chart.js configs and per-canvas chart ownership
    viewmodel.py   Controller: user actions → state → regions + charts
    server.py      Local single-threaded HTTP server for the dashboard
    flows/         Prefect orchestration (static snapshot build)
    services/      Shared utilities (HTTP session)

Data flow: user action → viewmodel → datasource (search only) → state →
renderers + charts → page
"""

__version__ = "0.1.0"

from weather_dashboard.config import Settings
from weather_dashboard.schemas import ForecastResponse

__all__ = ["ForecastResponse", "Settings", "__version__"]
