"""
Dashboard controller.

``WeatherViewModel`` owns the UI state and reacts to the four user actions:
search, unit toggle, day click and metric tab. Each action runs to
completion: state is updated first, then both HTML regions and the charts
are re-rendered from it.

Forecast requests carry a generation number. A response that arrives after
a newer search was started is dropped, so the page always reflects the most
recent search rather than the slowest response.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from weather_dashboard.charts import (
    METRIC_CANVASES,
    SHARED_CANVAS,
    ChartBoard,
    build_chart_config,
    chart_targets,
)
from weather_dashboard.config import DashboardLayout, Settings, get_settings
from weather_dashboard.datasources.weatherapi import fetch_forecast
from weather_dashboard.errors import InputError, TransportError
from weather_dashboard.notify import Notifier
from weather_dashboard.renderers.conditions import build_conditions_html
from weather_dashboard.renderers.day_strip import build_day_strip_html
from weather_dashboard.renderers.page import build_page_html
from weather_dashboard.schemas import ForecastResponse, Metric, Result, TemperatureUnit
from weather_dashboard.state import UIState

logger = logging.getLogger(__name__)

EMPTY_LOCATION_MESSAGE = "Please enter a city name"
FETCH_ERROR_MESSAGE = "Error fetching weather data. Please try again."

Fetcher = Callable[[str], ForecastResponse]


class WeatherViewModel:
    """Top-level controller: state, regions, charts and notifications."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        fetcher: Fetcher | None = None,
        notifier: Notifier | None = None,
        board: ChartBoard | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.layout = self.settings.layout
        self.state = UIState()
        self.notifier = notifier or Notifier()
        self.board = board or ChartBoard(chart_targets(self.layout))
        self._fetch: Fetcher = fetcher or self._fetch_with_settings
        self.weather_info_html = ""
        self.forecast_html = ""
        self.content_visible = False
        self.last_query = ""

    def _fetch_with_settings(self, location: str) -> ForecastResponse:
        return fetch_forecast(location, self.settings)

    # -------------------------------------------------------------------------
    # User actions
    # -------------------------------------------------------------------------

    def search(self, location: str) -> Result:
        """Fetch ``location`` and show it, or notify the user why not."""
        location = location.strip()
        self.last_query = location
        if not location:
            self.notifier.notify(EMPTY_LOCATION_MESSAGE)
            return Result(success=False, message=EMPTY_LOCATION_MESSAGE, error="empty location")

        generation = self.state.begin_request()
        try:
            forecast = self._fetch(location)
        except TransportError as exc:
            if not self.state.is_current(generation):
                return self._superseded(location, generation)
            logger.error("Fetching forecast for %r failed: %s", location, exc)
            self.notifier.notify(FETCH_ERROR_MESSAGE)
            return Result(success=False, message=FETCH_ERROR_MESSAGE, error=str(exc))

        if not self.state.is_current(generation):
            return self._superseded(location, generation)

        self.state.hold(forecast)
        self.content_visible = True
        self.refresh()
        name = f"{forecast.location.name}, {forecast.location.region}"
        logger.info("Showing %d-day forecast for %s", len(forecast.days), name)
        return Result(
            success=True,
            message=f"Forecast loaded for {name}",
            data={"location": name, "days": len(forecast.days)},
        )

    def _superseded(self, location: str, generation: int) -> Result:
        """Outcome of a request overtaken by a newer search: logged, never shown."""
        logger.info(
            "Dropping response for %r: request %d superseded by %d",
            location,
            generation,
            self.state.generation,
        )
        return Result(success=False, message="Superseded by a newer search", error="stale")

    def toggle_unit(self, unit: TemperatureUnit | str) -> None:
        """Switch the temperature unit; day and metric stay as they are."""
        self.state.unit = TemperatureUnit(unit)
        self.refresh()

    def select_day(self, index: int) -> None:
        """Show forecast day ``index``."""
        forecast = self.state.forecast
        if forecast is None:
            raise InputError("No forecast loaded")
        if not 0 <= index < len(forecast.days):
            msg = f"Day index {index} outside forecast of {len(forecast.days)} days"
            raise InputError(msg)
        self.state.selected_day_index = index
        self.refresh()

    def select_metric(self, metric: Metric | str) -> None:
        """Switch the charted metric (the tabs layout shows one at a time)."""
        self.state.active_metric = Metric(metric)
        if self.state.forecast is not None:
            self._draw_charts()

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def refresh(self) -> None:
        """Re-render both regions and every chart from the current state."""
        forecast = self.state.forecast
        if forecast is None:
            return
        day_index = self.state.selected_day_index
        unit = self.state.unit
        self.weather_info_html = build_conditions_html(
            forecast, day_index, unit, extended=self.settings.extended_details
        )
        self.forecast_html = build_day_strip_html(forecast, day_index, unit)
        self._draw_charts()

    def _draw_charts(self) -> None:
        day = self.state.selected_day
        if day is None:
            return
        unit = self.state.unit
        if self.layout is DashboardLayout.PANELS:
            for metric, canvas_id in METRIC_CANVASES.items():
                self.board.draw(
                    canvas_id, build_chart_config(day.hour, metric, unit, unit_ticks=True)
                )
        else:
            self.board.draw(
                SHARED_CANVAS, build_chart_config(day.hour, self.state.active_metric, unit)
            )

    def page_html(self) -> str:
        """The full page for the current state; pending notifications are shown once."""
        return build_page_html(
            app_name=self.settings.app_name,
            layout=self.layout,
            canvas_ids=self.board.canvas_ids,
            charts=self.board.live_configs(),
            active_metric=self.state.active_metric,
            weather_info_html=self.weather_info_html,
            forecast_html=self.forecast_html,
            content_visible=self.content_visible,
            notifications=self.notifier.drain(),
            location_query=self.last_query,
        )
