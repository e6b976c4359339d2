"""Data models and custom exceptions for the OpenWeatherMap client."""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

import requests
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .constants import API_KEY_SIGNUP_URL


@dataclass(frozen=True)
class LocationQuery:
    """Location for a single provider request.

    Exactly one form is active: a free-text place name, or a
    latitude/longitude pair.

    Attributes:
        name: Place name, trimmed.
        latitude: Latitude in decimal degrees, within [-90, 90].
        longitude: Longitude in decimal degrees, within [-180, 180].

    Examples:
        >>> LocationQuery.by_name("  Accra ").name
        'Accra'
        >>> LocationQuery.by_coordinates(5.6, -0.19).is_coordinates
        True
    """
    name: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate that exactly one query form is present and in range."""
        has_coords = self.latitude is not None or self.longitude is not None
        if self.name is not None and has_coords:
            raise ValueError("Provide either a place name or coordinates, not both")
        if self.name is not None:
            trimmed = self.name.strip()
            if not trimmed:
                raise ValueError("Place name must not be empty")
            object.__setattr__(self, "name", trimmed)
            return
        if self.latitude is None or self.longitude is None:
            raise ValueError("Provide a place name or both latitude and longitude")
        _check_range("latitude", self.latitude, 90.0)
        _check_range("longitude", self.longitude, 180.0)

    @classmethod
    def by_name(cls, name: str) -> LocationQuery:
        return cls(name=name)

    @classmethod
    def by_coordinates(cls, latitude: float, longitude: float) -> LocationQuery:
        return cls(latitude=latitude, longitude=longitude)

    @property
    def is_coordinates(self) -> bool:
        return self.name is None

    def to_params(self) -> Dict[str, Union[str, float]]:
        """Return the provider query parameters for the active form."""
        if self.name is not None:
            return {"q": self.name}
        return {"lat": self.latitude, "lon": self.longitude}

    def describe(self) -> str:
        if self.name is not None:
            return self.name
        return f"{self.latitude:.4f},{self.longitude:.4f}"


def _check_range(label: str, value: float, bound: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{label} must be a number, got {value!r}")
    if not math.isfinite(value) or not -bound <= value <= bound:
        raise ValueError(f"{label} must be within [-{bound:g}, {bound:g}], got {value}")


# Provider payload ---------------------------------------------------------

class ConditionEntry(BaseModel):
    """One entry of the provider ``weather`` array.

    Attributes:
        id: Provider condition code (e.g. 500 for light rain).
        main: Short category label (e.g. 'Rain').
        description: Human-readable description (e.g. 'light rain').
    """

    id: int
    main: str
    description: str

    model_config = ConfigDict(frozen=True, extra="ignore")


class _MainBlock(BaseModel):
    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    humidity: int
    pressure: int

    model_config = ConfigDict(allow_inf_nan=False)


class _SysBlock(BaseModel):
    country: str


class _WindBlock(BaseModel):
    speed: float

    model_config = ConfigDict(allow_inf_nan=False)


class CurrentWeatherResponse(BaseModel):
    """Raw current-weather response, only the fields the display needs."""

    name: str
    sys: _SysBlock
    main: _MainBlock
    weather: List[ConditionEntry] = Field(min_length=1)
    wind: _WindBlock
    visibility: int


class WeatherSnapshot(BaseModel):
    """One parsed weather observation for a single location.

    Values are kept exactly as the provider sent them; rounding and unit
    conversion happen only when building the display model.
    """

    name: str
    country: str
    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    humidity: int
    pressure: int
    wind_speed: float
    visibility: int
    conditions: Tuple[ConditionEntry, ...] = Field(min_length=1)

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    @classmethod
    def from_payload(cls, payload: Any) -> WeatherSnapshot:
        """Build a snapshot from a decoded provider JSON body.

        Raises:
            SchemaError: If the payload does not match the expected schema.
        """
        try:
            raw = CurrentWeatherResponse.model_validate(payload)
        except ValidationError as exc:
            raise SchemaError(
                f"Provider response does not match the expected schema: "
                f"{exc.error_count()} error(s)",
                errors=exc.errors(include_url=False),
            ) from exc
        return cls(
            name=raw.name,
            country=raw.sys.country,
            temp=raw.main.temp,
            feels_like=raw.main.feels_like,
            temp_min=raw.main.temp_min,
            temp_max=raw.main.temp_max,
            humidity=raw.main.humidity,
            pressure=raw.main.pressure,
            wind_speed=raw.wind.speed,
            visibility=raw.visibility,
            conditions=tuple(raw.weather),
        )

    @property
    def primary_condition(self) -> ConditionEntry:
        return self.conditions[0]


# Exceptions ---------------------------------------------------------------

class WeatherError(Exception):
    """Base exception for all weather client errors."""

    kind = "weather_error"
    user_message = "Failed to fetch weather data"


class MissingCredentialError(WeatherError):
    """No API key is configured; no request was attempted."""

    kind = "missing_credential"
    user_message = (
        "Please add your OpenWeatherMap API key. "
        f"Get one free at {API_KEY_SIGNUP_URL}"
    )


class WeatherAPIError(WeatherError):
    """Provider answered with a non-success status."""

    kind = "provider_error"

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
        response: Optional[requests.Response] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail
        self.response = response


class CityNotFoundError(WeatherAPIError):
    """Name lookup returned HTTP 404."""

    kind = "not_found"
    user_message = "City not found"


class ProviderError(WeatherAPIError):
    """Any other non-2xx response."""

    kind = "provider_error"


class NetworkError(WeatherError):
    """No response was received (connection failure, timeout)."""

    kind = "network_error"
    user_message = "Failed to fetch weather data. Please check your connection."


class SchemaError(WeatherError):
    """Response body could not be parsed into a snapshot."""

    kind = "schema_error"

    def __init__(self, message: str, *, errors: Optional[List[Dict[str, Any]]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []


__all__ = [
    "LocationQuery",
    "ConditionEntry",
    "CurrentWeatherResponse",
    "WeatherSnapshot",
    "WeatherError",
    "MissingCredentialError",
    "WeatherAPIError",
    "CityNotFoundError",
    "ProviderError",
    "NetworkError",
    "SchemaError",
]
