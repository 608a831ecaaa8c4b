"""Weather value formatting for renderers.

Pure functions with no external dependencies.
"""

from __future__ import annotations


def format_number(value: float) -> str:
    """Format a reading without a trailing ``.0`` (``18.0`` -> ``18``, ``18.5`` -> ``18.5``)."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def format_temp(value: float) -> str:
    """Temperature with a degree sign, unit left to the surrounding markup."""
    return f"{format_number(value)}°"


def yes_no(flag: int | bool) -> str:
    """Render a WeatherAPI 0/1 flag."""
    return "Yes" if flag else "No"
