"""Hourly line charts: Chart.js configurations and canvas ownership.

Python never draws a chart; it produces Chart.js configurations and decides
which one is live on which ``<canvas>``. The page script instantiates
``new Chart(canvas, config)`` for every live handle.

Each canvas is owned by a :class:`CanvasSlot` holding at most one
:class:`ChartHandle`. Drawing always creates a fresh handle and the slot
disposes its previous one first, so a re-render (new day, unit or metric)
never leaves a stale chart attached to a canvas.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from weather_dashboard.config import DashboardLayout
from weather_dashboard.renderers.date_utils import hour_label
from weather_dashboard.schemas import HourSample, Metric, TemperatureUnit

LINE_COLOR = "#2196F3"

#: Shared canvas in the tabs layout.
SHARED_CANVAS = "weatherGraph"

#: One canvas per metric in the panels layout.
METRIC_CANVASES: dict[Metric, str] = {
    Metric.TEMPERATURE: "temperatureChart",
    Metric.PRECIPITATION: "precipitationChart",
    Metric.WIND: "windChart",
}


def metric_values(hours: Sequence[HourSample], metric: Metric, unit: TemperatureUnit) -> list[float]:
    """The hourly series for ``metric`` (temperature in ``unit``, mm, kph)."""
    if metric is Metric.TEMPERATURE:
        return [h.temperature(unit) for h in hours]
    if metric is Metric.PRECIPITATION:
        return [h.precip_mm for h in hours]
    return [h.wind_kph for h in hours]


def metric_unit_suffix(metric: Metric, unit: TemperatureUnit) -> str:
    """Tick-label suffix for ``metric``."""
    if metric is Metric.TEMPERATURE:
        return f"°{unit.value}"
    if metric is Metric.PRECIPITATION:
        return "mm"
    return "kph"


def build_chart_config(
    hours: Sequence[HourSample],
    metric: Metric,
    unit: TemperatureUnit,
    *,
    unit_ticks: bool = False,
) -> dict[str, Any]:
    """
    Build a Chart.js line chart configuration for one day's hourly samples.

    Args:
        hours: Ordered hourly samples of the selected day.
        metric: Series to plot.
        unit: Active temperature unit (only affects temperature).
        unit_ticks: Annotate y tick labels with the metric's unit suffix.

    Returns:
        JSON-serialisable config dict.
    """
    y_scale: dict[str, Any] = {
        "display": True,
        "title": {"display": True, "text": metric.label},
    }
    if unit_ticks:
        # Read by the page script, which installs the tick callback
        y_scale["ticks"] = {"unitSuffix": metric_unit_suffix(metric, unit)}

    return {
        "type": "line",
        "data": {
            "labels": [hour_label(h.time) for h in hours],
            "datasets": [
                {
                    "label": metric.label,
                    "data": metric_values(hours, metric, unit),
                    "borderColor": LINE_COLOR,
                    "fill": False,
                }
            ],
        },
        "options": {
            "responsive": True,
            "plugins": {"legend": {"display": False}},
            "scales": {
                "x": {"display": True, "title": {"display": True, "text": "Time"}},
                "y": y_scale,
            },
        },
    }


def chart_targets(layout: DashboardLayout) -> list[str]:
    """Canvas ids present on the page for ``layout``."""
    if layout is DashboardLayout.PANELS:
        return list(METRIC_CANVASES.values())
    return [SHARED_CANVAS]


# =============================================================================
# Chart ownership
# =============================================================================


@dataclass(eq=False)
class ChartHandle:
    """One live chart instance bound to a canvas."""

    canvas_id: str
    config: dict[str, Any]
    disposed: bool = False

    def dispose(self) -> None:
        """Release the chart; a disposed handle is never drawn again."""
        self.disposed = True


class CanvasSlot:
    """Owns at most one chart handle for a single canvas."""

    def __init__(self, canvas_id: str) -> None:
        self.canvas_id = canvas_id
        self._handle: ChartHandle | None = None

    @property
    def handle(self) -> ChartHandle | None:
        return self._handle

    def assign(self, handle: ChartHandle) -> None:
        """Hold ``handle``, disposing the previously held one first."""
        if handle.canvas_id != self.canvas_id:
            msg = f"Handle for {handle.canvas_id!r} assigned to canvas {self.canvas_id!r}"
            raise ValueError(msg)
        self.release()
        self._handle = handle

    def release(self) -> None:
        """Dispose and drop the held handle, if any."""
        if self._handle is not None:
            self._handle.dispose()
            self._handle = None


HandleFactory = Callable[[str, dict[str, Any]], ChartHandle]


class ChartBoard:
    """The set of canvases on the page, each with its own slot."""

    def __init__(self, canvas_ids: Iterable[str], factory: HandleFactory = ChartHandle) -> None:
        self._slots = {canvas_id: CanvasSlot(canvas_id) for canvas_id in canvas_ids}
        self._factory = factory

    @property
    def canvas_ids(self) -> list[str]:
        return list(self._slots)

    def slot(self, canvas_id: str) -> CanvasSlot:
        """Slot for ``canvas_id``; raises ``KeyError`` for unknown canvases."""
        try:
            return self._slots[canvas_id]
        except KeyError:
            msg = f"Unknown canvas {canvas_id!r}"
            raise KeyError(msg) from None

    def draw(self, canvas_id: str, config: dict[str, Any]) -> ChartHandle:
        """Replace whatever is on ``canvas_id`` with a new chart for ``config``."""
        slot = self.slot(canvas_id)
        handle = self._factory(canvas_id, config)
        slot.assign(handle)
        return handle

    def live_configs(self) -> dict[str, dict[str, Any]]:
        """Config of the live chart on each canvas that has one."""
        return {
            canvas_id: slot.handle.config
            for canvas_id, slot in self._slots.items()
            if slot.handle is not None
        }

    def clear(self) -> None:
        """Dispose every live chart."""
        for slot in self._slots.values():
            slot.release()
