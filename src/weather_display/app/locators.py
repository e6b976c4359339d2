"""One-shot geolocation collaborators.

A locator reports the current position exactly once, through either the
success or the failure continuation.
"""
from __future__ import annotations
from enum import Enum
from typing import Any, Callable, Protocol

SuccessCallback = Callable[[float, float], Any]
ErrorCallback = Callable[["GeolocationFailure"], Any]


class GeolocationFailure(str, Enum):
    PERMISSION_DENIED = "permission_denied"
    POSITION_UNAVAILABLE = "position_unavailable"
    TIMEOUT = "timeout"
    UNSUPPORTED = "unsupported"


class Locator(Protocol):
    def locate(self, on_success: SuccessCallback, on_error: ErrorCallback) -> None:
        ...


class FixedLocator:
    """Reports a known position, e.g. one passed on the command line."""

    def __init__(self, latitude: float, longitude: float) -> None:
        self.latitude = latitude
        self.longitude = longitude

    def locate(self, on_success: SuccessCallback, on_error: ErrorCallback) -> None:
        on_success(self.latitude, self.longitude)


class UnavailableLocator:
    """Always fails; stands in where no geolocation source exists."""

    def __init__(self, reason: GeolocationFailure = GeolocationFailure.UNSUPPORTED) -> None:
        self.reason = reason

    def locate(self, on_success: SuccessCallback, on_error: ErrorCallback) -> None:
        on_error(self.reason)


__all__ = [
    "GeolocationFailure",
    "Locator",
    "FixedLocator",
    "UnavailableLocator",
]
