from __future__ import annotations
from .client import OpenWeatherClient
from .constants import (
    CURRENT_WEATHER_ENDPOINT,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_UNITS,
    SUPPORTED_UNITS,
)
from .models import (
    CityNotFoundError,
    ConditionEntry,
    LocationQuery,
    MissingCredentialError,
    NetworkError,
    ProviderError,
    SchemaError,
    WeatherAPIError,
    WeatherError,
    WeatherSnapshot,
)

__all__ = [
    # Client
    "OpenWeatherClient",
    # Models
    "LocationQuery",
    "ConditionEntry",
    "WeatherSnapshot",
    # Exceptions
    "WeatherError",
    "MissingCredentialError",
    "WeatherAPIError",
    "CityNotFoundError",
    "ProviderError",
    "NetworkError",
    "SchemaError",
    # Constants
    "CURRENT_WEATHER_ENDPOINT",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_UNITS",
    "SUPPORTED_UNITS",
]
