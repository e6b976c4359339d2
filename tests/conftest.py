"""Shared pytest fixtures for weather display tests."""

from __future__ import annotations

import copy
import json
from typing import Any, Callable, Dict, Generator, Optional

import pytest
import requests

from weather_display.config.settings import reset_settings

SAMPLE_PAYLOAD: Dict[str, Any] = {
    "coord": {"lon": -0.1969, "lat": 5.556},
    "weather": [
        {"id": 802, "main": "Clouds", "description": "scattered clouds", "icon": "03d"},
    ],
    "base": "stations",
    "main": {
        "temp": 28.4,
        "feels_like": 31.27,
        "temp_min": 27.5,
        "temp_max": 28.9,
        "pressure": 1011,
        "humidity": 74,
    },
    "visibility": 8046,
    "wind": {"speed": 3.6, "deg": 210},
    "clouds": {"all": 40},
    "dt": 1729335600,
    "sys": {"type": 1, "id": 1126, "country": "GH", "sunrise": 1729316610, "sunset": 1729359961},
    "timezone": 0,
    "id": 2306104,
    "name": "Accra",
    "cod": 200,
}


@pytest.fixture
def sample_payload() -> Dict[str, Any]:
    """Well-formed current-weather payload for Accra (deep copy per test)."""
    return copy.deepcopy(SAMPLE_PAYLOAD)


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    """Build real ``requests.Response`` objects without touching the network."""

    def _make(
        status_code: int = 200,
        json_body: Optional[Any] = None,
        text: Optional[str] = None,
    ) -> requests.Response:
        response = requests.Response()
        response.status_code = status_code
        response.url = "https://api.openweathermap.org/data/2.5/weather"
        if json_body is not None:
            body = json.dumps(json_body).encode("utf-8")
        else:
            body = (text or "").encode("utf-8")
        response._content = body
        response._content_consumed = True
        response.encoding = "utf-8"
        return response

    return _make


@pytest.fixture
def clean_env(monkeypatch, tmp_path) -> None:
    """Remove weather display env vars and move away from any local .env."""
    env_vars = [
        "OPENWEATHER_API_KEY",
        "OPENWEATHER_API_URL",
        "OPENWEATHER_UNITS",
        "REQUEST_TIMEOUT_SECONDS",
        "DEFAULT_CITY",
        "LOG_LEVEL",
        "PROVIDER__OPENWEATHER_API_KEY",
        "DISPLAY__DEFAULT_CITY",
    ]
    for var in env_vars:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings singleton between tests to ensure isolation."""
    reset_settings()
    yield
    reset_settings()
