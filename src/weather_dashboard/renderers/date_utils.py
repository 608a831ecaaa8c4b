"""Shared date-formatting helpers for renderers."""

from __future__ import annotations

from datetime import date, datetime


def long_date_label(day: date) -> str:
    """Weekday, short month and day, e.g. ``Saturday, Jun 15``."""
    return f"{day.strftime('%A, %b')} {day.day}"


def short_weekday(day: date) -> str:
    """Abbreviated weekday, e.g. ``Sat``."""
    return day.strftime("%a")


def hour_label(timestamp: str) -> str:
    """Hour-of-day axis label from a ``YYYY-MM-DD HH:MM`` timestamp, e.g. ``13:00``."""
    return f"{datetime.fromisoformat(timestamp).hour}:00"
