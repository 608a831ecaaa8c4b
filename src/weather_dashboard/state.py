"""UI state owned by the dashboard controller."""

from __future__ import annotations

from dataclasses import dataclass

from weather_dashboard.schemas import ForecastDay, ForecastResponse, Metric, TemperatureUnit


@dataclass
class UIState:
    """
    Current selections and the held forecast.

    ``unit`` and ``active_metric`` survive new searches; ``selected_day_index``
    goes back to 0 whenever a new forecast is held. ``generation`` counts
    issued forecast requests so a response can be checked for staleness when
    it arrives.
    """

    unit: TemperatureUnit = TemperatureUnit.CELSIUS
    selected_day_index: int = 0
    active_metric: Metric = Metric.TEMPERATURE
    forecast: ForecastResponse | None = None
    generation: int = 0

    def begin_request(self) -> int:
        """Issue a new request generation and return it."""
        self.generation += 1
        return self.generation

    def is_current(self, generation: int) -> bool:
        """True if no newer request was issued after ``generation``."""
        return generation == self.generation

    def hold(self, forecast: ForecastResponse) -> None:
        """Replace the held forecast and select its first day."""
        self.forecast = forecast
        self.selected_day_index = 0

    @property
    def selected_day(self) -> ForecastDay | None:
        if self.forecast is None:
            return None
        return self.forecast.days[self.selected_day_index]
