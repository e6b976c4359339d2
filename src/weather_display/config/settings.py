"""Centralized configuration management using Pydantic Settings.

Configuration is loaded from environment variables and an optional .env file.
The provider API key is deliberately optional: a missing key is reported as a
recoverable ``MissingCredentialError`` at request time instead of failing at
startup.

Example:
    >>> from weather_display.config import get_settings
    >>> get_settings().provider.openweather_units
    'metric'
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_display.clients.openweather.constants import (
    CURRENT_WEATHER_ENDPOINT,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_UNITS,
    SUPPORTED_UNITS,
)

LOGGER = logging.getLogger(__name__)

_ENV_CONFIG = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    case_sensitive=False,
    extra="ignore",
)


class ProviderSettings(BaseSettings):
    """OpenWeatherMap provider configuration."""

    model_config = _ENV_CONFIG

    openweather_api_key: Optional[str] = Field(
        default=None,
        description="OpenWeatherMap API key",
    )
    openweather_api_url: str = Field(
        default=CURRENT_WEATHER_ENDPOINT,
        description="Current weather endpoint URL",
    )
    openweather_units: str = Field(
        default=DEFAULT_UNITS,
        description="Units preference sent to the provider",
    )
    request_timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="HTTP request timeout in seconds",
    )

    @field_validator("openweather_api_key")
    @classmethod
    def blank_key_is_missing(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty or whitespace-only key as not configured."""
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("openweather_api_url")
    @classmethod
    def validate_endpoint_url(cls, v: str) -> str:
        """Ensure endpoint starts with http:// or https://."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("OpenWeatherMap endpoint must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("openweather_units")
    @classmethod
    def validate_units(cls, v: str) -> str:
        units = v.strip().lower()
        if units not in SUPPORTED_UNITS:
            raise ValueError(f"Units must be one of {', '.join(SUPPORTED_UNITS)}")
        return units


class DisplaySettings(BaseSettings):
    """Display and logging configuration."""

    model_config = _ENV_CONFIG

    default_city: str = Field(
        default="Accra",
        min_length=1,
        description="City loaded when geolocation is unavailable",
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level


class Settings(BaseSettings):
    """Root settings container.

    Example .env file:
        OPENWEATHER_API_KEY=your_api_key
        OPENWEATHER_UNITS=metric
        DEFAULT_CITY=Accra
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    provider: ProviderSettings = Field(default_factory=ProviderSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)

    @property
    def has_api_key(self) -> bool:
        return self.provider.openweather_api_key is not None


# Lazy initialization - only create settings when accessed
_settings: Optional[Settings] = None
_settings_lock = threading.Lock()


def get_settings() -> Settings:
    """Get or create the Settings singleton (thread-safe).

    Returns:
        Settings instance loaded from environment variables/.env file.

    Raises:
        ValidationError: If a configured value is invalid.
    """
    global _settings

    if _settings is not None:
        return _settings

    with _settings_lock:
        if _settings is None:
            LOGGER.debug("Initializing Settings from environment variables and .env file")
            try:
                _settings = Settings()
            except ValidationError as e:
                LOGGER.error("Configuration validation failed: %s", e)
                raise
            if not _settings.has_api_key:
                LOGGER.warning("OPENWEATHER_API_KEY is not set; weather requests will fail")

    return _settings


def reset_settings() -> None:
    """Drop the cached Settings so the next access reloads them."""
    global _settings
    with _settings_lock:
        _settings = None


__all__ = [
    "ProviderSettings",
    "DisplaySettings",
    "Settings",
    "get_settings",
    "reset_settings",
]
