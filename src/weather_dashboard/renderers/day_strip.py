"""Day-selector strip renderer: one clickable entry per forecast day."""

from __future__ import annotations

from weather_dashboard.renderers import render_template
from weather_dashboard.renderers.date_utils import short_weekday
from weather_dashboard.renderers.weather_utils import format_temp
from weather_dashboard.schemas import ForecastResponse, TemperatureUnit


def build_day_strip_html(
    forecast: ForecastResponse,
    day_index: int,
    unit: TemperatureUnit,
) -> str:
    """Build the day selector, marking ``day_index`` as active."""
    days = [
        {
            "index": i,
            "active": i == day_index,
            "weekday": short_weekday(fday.date),
            "icon": fday.day.condition.icon,
            "condition_text": fday.day.condition.text,
            "high": format_temp(fday.day.max_temp(unit)),
            "low": format_temp(fday.day.min_temp(unit)),
        }
        for i, fday in enumerate(forecast.days)
    ]
    return render_template("day_strip.html.j2", days=days)
