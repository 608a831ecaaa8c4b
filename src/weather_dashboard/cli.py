"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from weather_dashboard import __version__
from weather_dashboard.config import get_settings
from weather_dashboard.datasources.weatherapi import forecast_url
from weather_dashboard.flows.build import build_dashboard
from weather_dashboard.schemas import Metric, TemperatureUnit
from weather_dashboard.server import create_server
from weather_dashboard.viewmodel import WeatherViewModel


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-dashboard",
        description="7-day weather dashboard with hourly temperature, precipitation and wind charts",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    # 'build' command - write a static snapshot page
    build_parser = subparsers.add_parser("build", help="Build a static dashboard page")
    build_parser.add_argument("location", help="City name, postcode or 'lat,lon'")
    build_parser.add_argument(
        "--unit",
        choices=[u.value for u in TemperatureUnit],
        default=TemperatureUnit.CELSIUS.value,
        help="Temperature unit (default: C)",
    )
    build_parser.add_argument(
        "--day",
        type=int,
        default=0,
        help="Forecast day to select, 0 = first (default: 0)",
    )
    build_parser.add_argument(
        "--metric",
        choices=[m.value for m in Metric],
        default=Metric.TEMPERATURE.value,
        help="Charted metric in the tabs layout (default: temperature)",
    )
    build_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output directory (default: site_dir from settings)",
    )

    # 'serve' command - interactive dashboard
    serve_parser = subparsers.add_parser("serve", help="Serve the dashboard locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def configure_logging(debug: bool) -> None:
    """Root logging setup for CLI runs."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Layout: {settings.layout}")
    print(f"Endpoint: {forecast_url(settings.base_url)}")
    print(f"API key set: {'yes' if settings.api_key else 'no'}")
    return 0


def cmd_build(args: argparse.Namespace) -> int:
    """Handle the 'build' command: fetch one location and write the page."""
    result = build_dashboard(
        args.location,
        unit=args.unit,
        day=args.day,
        metric=args.metric,
        site_dir=args.output,
    )
    if "error" in result:
        print(f"Error: {result['error']}", file=sys.stderr)
        return 1
    print(f"Wrote {result['output']}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: run the interactive dashboard."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    view = WeatherViewModel(settings)

    with create_server(view, port=port) as server:
        print(f"Serving dashboard on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.debug)

    commands = {
        "info": cmd_info,
        "build": cmd_build,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
