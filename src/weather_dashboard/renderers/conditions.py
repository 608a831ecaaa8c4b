"""Current-conditions panel renderer.

Location heading, condition, date, averaged temperature with the C/F toggle,
high/low and a details block for the selected forecast day. The panels
layout adds an extended block with astro times and rain/snow flags.
"""

from __future__ import annotations

from typing import Any

from weather_dashboard.renderers import render_template
from weather_dashboard.renderers.date_utils import long_date_label
from weather_dashboard.renderers.weather_utils import format_number, format_temp, yes_no
from weather_dashboard.schemas import ForecastDay, ForecastResponse, TemperatureUnit

# WeatherAPI air_quality key for the US EPA index (1 = good ... 6 = hazardous)
_EPA_INDEX_KEY = "us-epa-index"


def _select_day(forecast: ForecastResponse, day_index: int) -> ForecastDay:
    if not 0 <= day_index < len(forecast.days):
        msg = f"Day index {day_index} outside forecast of {len(forecast.days)} days"
        raise IndexError(msg)
    return forecast.days[day_index]


def _extended_details(fday: ForecastDay) -> list[dict[str, str]]:
    day = fday.day
    rows: list[dict[str, str]] = []
    if fday.astro is not None:
        astro = fday.astro
        rows += [
            {"label": "Sunrise", "value": astro.sunrise},
            {"label": "Sunset", "value": astro.sunset},
            {"label": "Moonrise", "value": astro.moonrise},
            {"label": "Moonset", "value": astro.moonset},
            {"label": "Moon Phase", "value": astro.moon_phase},
            {
                "label": "Moon Illumination",
                "value": f"{format_number(astro.moon_illumination)}%",
            },
        ]
    rows += [
        {"label": "Chance of Rain", "value": f"{day.daily_chance_of_rain}%"},
        {"label": "Will it Rain", "value": yes_no(day.daily_will_it_rain)},
        {"label": "Chance of Snow", "value": f"{day.daily_chance_of_snow}%"},
        {"label": "Will it Snow", "value": yes_no(day.daily_will_it_snow)},
    ]
    if day.air_quality and _EPA_INDEX_KEY in day.air_quality:
        rows.append(
            {"label": "Air Quality (US EPA)", "value": format_number(day.air_quality[_EPA_INDEX_KEY])}
        )
    return rows


def _conditions_context(
    forecast: ForecastResponse,
    day_index: int,
    unit: TemperatureUnit,
    *,
    extended: bool = False,
) -> dict[str, Any]:
    """Template variables for the conditions panel."""
    fday = _select_day(forecast, day_index)
    day = fday.day
    return {
        "location_name": forecast.location.name,
        "region": forecast.location.region,
        "condition_text": day.condition.text,
        "condition_icon": day.condition.icon,
        "date_label": long_date_label(fday.date),
        "avg_temp": format_temp(day.avg_temp(unit)),
        "high": format_temp(day.max_temp(unit)),
        "low": format_temp(day.min_temp(unit)),
        "units": [{"value": u.value, "active": u is unit} for u in TemperatureUnit],
        "details": [
            {"label": "Humidity", "value": f"{format_number(day.avghumidity)}%"},
            {"label": "Precipitation Chances", "value": f"{day.daily_chance_of_rain}%"},
            {"label": "Wind", "value": f"{format_number(day.maxwind_kph)} KpH"},
        ],
        "extended_details": _extended_details(fday) if extended else [],
    }


def build_conditions_html(
    forecast: ForecastResponse,
    day_index: int,
    unit: TemperatureUnit,
    *,
    extended: bool = False,
) -> str:
    """Build the current-conditions panel for ``forecast.days[day_index]``.

    Args:
        forecast: Held forecast.
        day_index: Selected day, ``0 <= day_index < len(forecast.days)``.
        unit: Active temperature unit.
        extended: Add the astro / rain-snow / air-quality block.

    Raises:
        IndexError: ``day_index`` is outside the forecast.
    """
    context = _conditions_context(forecast, day_index, unit, extended=extended)
    return render_template("conditions.html.j2", **context)
