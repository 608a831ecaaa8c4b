"""
Local dashboard server.

A plain ``http.server.HTTPServer`` (one request at a time) bound to a single
``WeatherViewModel``. Every link and form on the page is a GET to an action
path; the handler applies the action and redirects back to ``/``::

    /                 page for the current state
    /search?q=Paris   search
    /unit?u=F         unit toggle
    /day?i=3          day click
    /metric?m=wind    metric tab
"""

from __future__ import annotations

import http.server
import logging
from collections.abc import Callable
from http import HTTPStatus
from urllib.parse import parse_qs, urlsplit

from weather_dashboard.errors import InputError
from weather_dashboard.viewmodel import WeatherViewModel

logger = logging.getLogger(__name__)


def _param(query: dict[str, list[str]], name: str) -> str:
    values = query.get(name)
    return values[0] if values else ""


def _apply_search(view: WeatherViewModel, query: dict[str, list[str]]) -> None:
    view.search(_param(query, "q"))


def _apply_unit(view: WeatherViewModel, query: dict[str, list[str]]) -> None:
    try:
        view.toggle_unit(_param(query, "u"))
    except ValueError as exc:
        raise InputError(f"Unknown unit {_param(query, 'u')!r}") from exc


def _apply_day(view: WeatherViewModel, query: dict[str, list[str]]) -> None:
    raw = _param(query, "i")
    try:
        index = int(raw)
    except ValueError as exc:
        raise InputError(f"Invalid day index {raw!r}") from exc
    view.select_day(index)


def _apply_metric(view: WeatherViewModel, query: dict[str, list[str]]) -> None:
    try:
        view.select_metric(_param(query, "m"))
    except ValueError as exc:
        raise InputError(f"Unknown metric {_param(query, 'm')!r}") from exc


ACTIONS: dict[str, Callable[[WeatherViewModel, dict[str, list[str]]], None]] = {
    "/search": _apply_search,
    "/unit": _apply_unit,
    "/day": _apply_day,
    "/metric": _apply_metric,
}


class DashboardRequestHandler(http.server.BaseHTTPRequestHandler):
    """Serves the page and applies UI actions to ``view``."""

    view: WeatherViewModel

    def do_GET(self) -> None:  # noqa: N802
        parts = urlsplit(self.path)
        if parts.path == "/":
            self._send_page()
            return

        action = ACTIONS.get(parts.path)
        if action is None:
            self.send_error(HTTPStatus.NOT_FOUND)
            return

        try:
            action(self.view, parse_qs(parts.query))
        except InputError as exc:
            logger.warning("Rejected %s: %s", self.path, exc)
            self.view.notifier.notify(str(exc))

        self.send_response(HTTPStatus.SEE_OTHER)
        self.send_header("Location", "/")
        self.end_headers()

    def _send_page(self) -> None:
        body = self.view.page_html().encode("utf-8")
        self.send_response(HTTPStatus.OK)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: object) -> None:  # noqa: A002
        logger.debug("%s - %s", self.address_string(), format % args)


def make_handler(view: WeatherViewModel) -> type[DashboardRequestHandler]:
    """Handler class bound to ``view``."""
    return type("BoundDashboardRequestHandler", (DashboardRequestHandler,), {"view": view})


def create_server(view: WeatherViewModel, host: str = "", port: int = 8000) -> http.server.HTTPServer:
    """Build (but don't start) the dashboard server."""
    return http.server.HTTPServer((host, port), make_handler(view))
