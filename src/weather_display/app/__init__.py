from __future__ import annotations
from .controller import WeatherController, WeatherFetcher
from .locators import FixedLocator, GeolocationFailure, Locator, UnavailableLocator
from .state import RequestTicket, WeatherState

__all__ = [
    "WeatherController",
    "WeatherFetcher",
    "WeatherState",
    "RequestTicket",
    "Locator",
    "FixedLocator",
    "UnavailableLocator",
    "GeolocationFailure",
]
