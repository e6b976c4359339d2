from __future__ import annotations
# API Endpoints
CURRENT_WEATHER_ENDPOINT = "https://api.openweathermap.org/data/2.5/weather"
API_KEY_SIGNUP_URL = "openweathermap.org/api"

# Request configuration
DEFAULT_TIMEOUT_SECONDS = 10
DEFAULT_UNITS = "metric"
SUPPORTED_UNITS = ("metric", "imperial", "standard")

# HTTP status returned by the provider for an unknown city
NOT_FOUND_STATUS = 404

__all__ = [
    "CURRENT_WEATHER_ENDPOINT",
    "API_KEY_SIGNUP_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_UNITS",
    "SUPPORTED_UNITS",
    "NOT_FOUND_STATUS",
]
