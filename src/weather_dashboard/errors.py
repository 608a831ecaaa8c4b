"""Exception hierarchy for the weather dashboard."""

from __future__ import annotations


class DashboardError(Exception):
    """Base exception for all dashboard errors."""


class InputError(DashboardError):
    """User input rejected before any network call (empty location, bad index)."""


class TransportError(DashboardError):
    """Forecast could not be obtained: network failure, non-2xx status or bad body."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialize with an optional HTTP status code."""
        self.status_code = status_code
        if status_code is not None:
            message = f"HTTP {status_code}: {message}"
        super().__init__(message)
