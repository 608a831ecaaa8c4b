"""
Tests for CLI functionality.

These tests verify the command-line interface logic.
"""

from __future__ import annotations

import argparse
import unittest.mock
from io import StringIO
from pathlib import Path
from unittest.mock import patch

import pytest

from weather_dashboard.cli import cmd_build, cmd_info, cmd_serve, create_parser, main
from weather_dashboard.viewmodel import WeatherViewModel


def build_args(**overrides: object) -> argparse.Namespace:
    values: dict[str, object] = {
        "location": "Paris",
        "unit": "C",
        "day": 0,
        "metric": "temperature",
        "output": None,
        "debug": False,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


def mock_server() -> unittest.mock.MagicMock:
    server = unittest.mock.MagicMock()
    server.__enter__ = unittest.mock.Mock(return_value=server)
    server.__exit__ = unittest.mock.Mock(return_value=False)
    server.serve_forever = unittest.mock.Mock(side_effect=KeyboardInterrupt)
    return server


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        """Parser is created successfully."""
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "weather-dashboard"

    def test_parser_has_version(self) -> None:
        """Parser has version argument."""
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["--version"])

    def test_parser_has_debug_flag(self) -> None:
        """Parser accepts --debug flag."""
        parser = create_parser()
        args = parser.parse_args(["--debug", "info"])
        assert args.debug is True

    def test_parser_build_defaults(self) -> None:
        """Build command needs a location; everything else has defaults."""
        parser = create_parser()
        args = parser.parse_args(["build", "Paris"])
        assert args.command == "build"
        assert args.location == "Paris"
        assert args.unit == "C"
        assert args.day == 0
        assert args.metric == "temperature"
        assert args.output is None

    def test_parser_build_options(self) -> None:
        parser = create_parser()
        args = parser.parse_args(
            ["build", "New York", "--unit", "F", "--day", "3", "--metric", "wind", "--output", "out"]
        )
        assert args.location == "New York"
        assert args.unit == "F"
        assert args.day == 3
        assert args.metric == "wind"
        assert args.output == Path("out")

    @pytest.mark.parametrize(
        "argv",
        [
            ["build", "Paris", "--unit", "K"],
            ["build", "Paris", "--metric", "humidity"],
            ["build"],
        ],
    )
    def test_parser_build_rejects_bad_input(self, argv: list[str]) -> None:
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(argv)

    def test_parser_info_command(self) -> None:
        """Parser accepts info command."""
        parser = create_parser()
        args = parser.parse_args(["info"])
        assert args.command == "info"

    def test_parser_serve_command(self) -> None:
        """Parser accepts serve command with optional --port."""
        parser = create_parser()
        args = parser.parse_args(["serve"])
        assert args.command == "serve"
        assert args.port is None

    def test_parser_serve_with_port(self) -> None:
        """Parser accepts serve --port."""
        parser = create_parser()
        args = parser.parse_args(["serve", "--port", "3000"])
        assert args.port == 3000


class TestCmdInfo:
    """Tests for cmd_info function."""

    def test_returns_zero(self) -> None:
        """Info command returns exit code 0."""
        exit_code = cmd_info(argparse.Namespace())
        assert exit_code == 0

    def test_prints_app_info(self) -> None:
        """Info command prints application information."""
        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            cmd_info(argparse.Namespace())
            output = mock_stdout.getvalue()
        assert "Application" in output
        assert "forecast.json" in output


class TestCmdBuild:
    """Tests for cmd_build function."""

    def test_success_returns_zero(self) -> None:
        with patch("weather_dashboard.cli.build_dashboard") as mock_build:
            mock_build.return_value = {
                "location": "Paris, Ile-de-France",
                "days": 7,
                "output": "site/index.html",
            }
            exit_code = cmd_build(build_args())

        assert exit_code == 0
        mock_build.assert_called_once_with(
            "Paris", unit="C", day=0, metric="temperature", site_dir=None
        )

    def test_passes_options(self, tmp_path: Path) -> None:
        with patch("weather_dashboard.cli.build_dashboard") as mock_build:
            mock_build.return_value = {"output": str(tmp_path / "index.html")}
            cmd_build(build_args(unit="F", day=2, metric="wind", output=tmp_path))

        mock_build.assert_called_once_with(
            "Paris", unit="F", day=2, metric="wind", site_dir=tmp_path
        )

    def test_failure_returns_one(self) -> None:
        with (
            patch("weather_dashboard.cli.build_dashboard") as mock_build,
            patch("sys.stderr", new=StringIO()) as mock_stderr,
        ):
            mock_build.return_value = {"error": "HTTP 400: bad request"}
            exit_code = cmd_build(build_args())

        assert exit_code == 1
        assert "HTTP 400" in mock_stderr.getvalue()


class TestCmdServe:
    """Tests for cmd_serve function."""

    def test_uses_port_from_args(self) -> None:
        """Serve uses --port when provided."""
        with patch(
            "weather_dashboard.cli.create_server", return_value=mock_server()
        ) as mock_create:
            exit_code = cmd_serve(argparse.Namespace(port=9999))

        assert exit_code == 0
        mock_create.assert_called_once()
        assert mock_create.call_args.kwargs["port"] == 9999
        assert isinstance(mock_create.call_args.args[0], WeatherViewModel)

    def test_uses_port_from_settings_when_none(self) -> None:
        """Serve falls back to api_port from settings."""
        with (
            patch(
                "weather_dashboard.cli.create_server", return_value=mock_server()
            ) as mock_create,
            patch("weather_dashboard.cli.WeatherViewModel"),
            patch("weather_dashboard.cli.get_settings") as mock_settings,
        ):
            mock_settings.return_value.api_port = 5555
            cmd_serve(argparse.Namespace(port=None))

        assert mock_create.call_args.kwargs["port"] == 5555


class TestMain:
    """Tests for main function."""

    def test_no_command_shows_help(self) -> None:
        """No command shows help and exits 0."""
        with patch("sys.argv", ["weather-dashboard"]):
            exit_code = main()
            assert exit_code == 0

    @pytest.mark.parametrize(
        ("argv", "handler"),
        [
            (["info"], "cmd_info"),
            (["build", "Paris"], "cmd_build"),
            (["serve"], "cmd_serve"),
        ],
    )
    def test_dispatches_command(self, argv: list[str], handler: str) -> None:
        with (
            patch("sys.argv", ["weather-dashboard", *argv]),
            patch(f"weather_dashboard.cli.{handler}") as mock_cmd,
        ):
            mock_cmd.return_value = 0
            exit_code = main()
            assert exit_code == 0
            mock_cmd.assert_called_once()

    def test_handler_exit_code_propagates(self) -> None:
        with (
            patch("sys.argv", ["weather-dashboard", "build", "Paris"]),
            patch("weather_dashboard.cli.cmd_build", return_value=1),
        ):
            assert main() == 1

    def test_unknown_command_shows_help(self) -> None:
        """Unknown command shows help and returns 1."""
        with (
            patch("sys.argv", ["weather-dashboard", "info"]),
            patch("weather_dashboard.cli.create_parser") as mock_parser,
        ):
            mock_parser.return_value.parse_args.return_value = argparse.Namespace(
                command="unknown", debug=False
            )
            exit_code = main()
            assert exit_code == 1
