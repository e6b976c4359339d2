"""Tests for the command line entry point."""

from __future__ import annotations

import io
import logging
from unittest.mock import MagicMock, patch

import pytest
import requests

from weather_display.app.state import WeatherState
from weather_display.cli import (
    EXIT_OK,
    EXIT_REQUEST_FAILED,
    EXIT_USAGE,
    build_parser,
    render_state,
    run_cli,
)
from weather_display.clients.openweather.models import WeatherSnapshot
from weather_display.view_model import to_view_model


@pytest.fixture(autouse=True)
def restore_logging():
    """run_cli reconfigures the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def session(make_response, sample_payload) -> MagicMock:
    fake = MagicMock(spec=requests.Session)
    fake.get.return_value = make_response(200, sample_payload)
    return fake


@pytest.fixture
def patched_session(session):
    """Route the CLI's client through the fake session."""
    with patch("weather_display.clients.openweather.client.requests.Session", return_value=session):
        yield session


@pytest.fixture
def api_key_env(monkeypatch, clean_env) -> None:
    monkeypatch.setenv("OPENWEATHER_API_KEY", "test-key")
    monkeypatch.setenv("NO_COLOR", "1")


class TestBuildParser:
    def test_city_optional(self) -> None:
        args = build_parser().parse_args([])
        assert args.city is None
        assert args.lat is None

    def test_coordinates(self) -> None:
        args = build_parser().parse_args(["--lat", "5.6", "--lon", "-0.19"])
        assert (args.lat, args.lon) == (5.6, -0.19)

    def test_units_choices(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--units", "furlongs"])


class TestRenderState:
    def test_renders_view(self, sample_payload) -> None:
        snapshot = WeatherSnapshot.from_payload(sample_payload)
        state = WeatherState(snapshot=snapshot, view=to_view_model(snapshot), city="Accra")

        text = render_state(state)

        assert "Accra, GH" in text
        assert "28°" in text
        assert "Visibility" in text and "8.0 km" in text
        assert "Quick cities: London, New York" in text

    def test_renders_error_and_notice(self) -> None:
        state = WeatherState(error="Please add your key", credential_missing=True)

        text = render_state(state)

        assert "Error: Please add your key" in text
        assert "OPENWEATHER_API_KEY" in text

    def test_loading(self) -> None:
        assert render_state(WeatherState(loading=True)) == "Loading..."


class TestRunCli:
    def test_city_lookup(self, api_key_env, patched_session) -> None:
        out = io.StringIO()

        code = run_cli(["Accra"], out=out)

        assert code == EXIT_OK
        assert "Accra, GH" in out.getvalue()
        assert patched_session.get.call_args.kwargs["params"]["q"] == "Accra"

    def test_no_arguments_falls_back_to_default_city(self, api_key_env, monkeypatch, patched_session) -> None:
        monkeypatch.setenv("DEFAULT_CITY", "Lagos")

        code = run_cli([], out=io.StringIO())

        assert code == EXIT_OK
        assert patched_session.get.call_args.kwargs["params"]["q"] == "Lagos"

    def test_coordinates(self, api_key_env, patched_session) -> None:
        run_cli(["--lat", "5.6", "--lon", "-0.19"], out=io.StringIO())

        params = patched_session.get.call_args.kwargs["params"]
        assert (params["lat"], params["lon"]) == (5.6, -0.19)

    def test_units_override(self, api_key_env, patched_session) -> None:
        out = io.StringIO()

        run_cli(["Accra", "--units", "imperial"], out=out)

        assert patched_session.get.call_args.kwargs["params"]["units"] == "imperial"
        assert "°F" in out.getvalue()

    def test_city_not_found(self, api_key_env, patched_session, make_response) -> None:
        patched_session.get.return_value = make_response(404, {"cod": "404", "message": "city not found"})
        out = io.StringIO()

        code = run_cli(["Nonexistentville"], out=out)

        assert code == EXIT_REQUEST_FAILED
        assert "City not found" in out.getvalue()

    def test_missing_key(self, clean_env, monkeypatch, patched_session) -> None:
        monkeypatch.setenv("NO_COLOR", "1")
        out = io.StringIO()

        code = run_cli(["Accra"], out=out)

        assert code == EXIT_REQUEST_FAILED
        assert "openweathermap.org/api" in out.getvalue()
        patched_session.get.assert_not_called()

    def test_api_key_flag(self, clean_env, patched_session) -> None:
        code = run_cli(["Accra", "--api-key", "flag-key"], out=io.StringIO())

        assert code == EXIT_OK
        assert patched_session.get.call_args.kwargs["params"]["appid"] == "flag-key"

    def test_lat_without_lon(self, api_key_env) -> None:
        with pytest.raises(SystemExit) as exc_info:
            run_cli(["--lat", "5.6"])
        assert exc_info.value.code == EXIT_USAGE

    def test_city_and_coordinates(self, api_key_env) -> None:
        with pytest.raises(SystemExit) as exc_info:
            run_cli(["Accra", "--lat", "5.6", "--lon", "1.0"])
        assert exc_info.value.code == EXIT_USAGE

    def test_out_of_range_coordinates(self, api_key_env, patched_session) -> None:
        with pytest.raises(SystemExit) as exc_info:
            run_cli(["--lat", "95", "--lon", "0"])
        assert exc_info.value.code == EXIT_USAGE
        patched_session.get.assert_not_called()

    def test_invalid_configuration(self, clean_env, monkeypatch) -> None:
        monkeypatch.setenv("OPENWEATHER_UNITS", "bogus")
        assert run_cli(["Accra"], out=io.StringIO()) == EXIT_USAGE
