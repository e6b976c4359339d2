from __future__ import annotations
import logging
from typing import Any, Dict, Optional, Union

import requests

from .constants import (
    CURRENT_WEATHER_ENDPOINT,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_UNITS,
    NOT_FOUND_STATUS,
    SUPPORTED_UNITS,
)
from .models import (
    CityNotFoundError,
    LocationQuery,
    MissingCredentialError,
    NetworkError,
    ProviderError,
    SchemaError,
    WeatherAPIError,
    WeatherSnapshot,
)

LOGGER = logging.getLogger(__name__)


def _extract_detail(response: requests.Response) -> Optional[str]:
    """Pull the provider's error message out of a failed response."""
    try:
        body = response.json()
    except ValueError:
        text = (response.text or "").strip()
        return text[:200] or None
    if isinstance(body, dict):
        message = body.get("message")
        return str(message) if message is not None else None
    return None


def _build_api_error(response: requests.Response, query: LocationQuery) -> WeatherAPIError:
    """Convert a non-success response into the matching client error.

    Only a name lookup maps HTTP 404 to ``CityNotFoundError``; a 404 for a
    coordinate lookup is an ordinary provider failure.
    """
    status_code = response.status_code
    detail = _extract_detail(response)
    message = f"HTTP {status_code} from provider for {query.describe()!r}"
    if detail:
        message = f"{message} (details: {detail})"

    if status_code == NOT_FOUND_STATUS and not query.is_coordinates:
        return CityNotFoundError(
            message, status_code=status_code, detail=detail, response=response
        )
    return ProviderError(message, status_code=status_code, detail=detail, response=response)


def _redact(params: Dict[str, Any]) -> Dict[str, Any]:
    return {key: ("***" if key == "appid" else value) for key, value in params.items()}


class OpenWeatherClient:
    """Client for the OpenWeatherMap current-weather endpoint.

    Each fetch performs exactly one GET request. There is no retry and no
    caching; the caller decides what to do with a failure.

    Example:
        >>> with OpenWeatherClient(api_key="...") as client:
        ...     snapshot = client.fetch_by_name("Accra")
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: str = CURRENT_WEATHER_ENDPOINT,
        units: str = DEFAULT_UNITS,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ) -> None:
        if units not in SUPPORTED_UNITS:
            raise ValueError(f"Unsupported units: {units!r}. Expected one of {SUPPORTED_UNITS}")
        self._api_key = (api_key or "").strip()
        self._base_url = base_url.rstrip("/")
        self._units = units
        self._timeout = timeout
        # Track if we own the session for cleanup
        self._owns_session = session is None
        self._session = session

    @classmethod
    def from_settings(
        cls,
        settings: Any,
        session: Optional[requests.Session] = None,
        *,
        api_key: Optional[str] = None,
        units: Optional[str] = None,
    ) -> OpenWeatherClient:
        """Create a client from the ``provider`` section of the app settings.

        ``api_key`` and ``units`` override the configured values when given.
        """
        provider = settings.provider
        return cls(
            api_key if api_key is not None else provider.openweather_api_key,
            base_url=provider.openweather_api_url,
            units=units or provider.openweather_units,
            timeout=provider.request_timeout_seconds,
            session=session,
        )

    @property
    def has_credential(self) -> bool:
        return bool(self._api_key)

    @property
    def units(self) -> str:
        return self._units

    def _get_session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def close(self) -> None:
        if self._owns_session and self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self) -> OpenWeatherClient:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def fetch_by_name(self, name: str) -> WeatherSnapshot:
        """Fetch current conditions for a place name.

        Args:
            name: City name; must be non-empty after trimming.

        Returns:
            Parsed weather snapshot.

        Raises:
            ValueError: If the name is blank.
            MissingCredentialError: If no API key is configured.
            CityNotFoundError: If the provider does not know the city.
            ProviderError: On any other non-success status.
            NetworkError: If no response was received.
            SchemaError: If the body cannot be parsed.
        """
        return self.fetch(LocationQuery.by_name(name))

    def fetch_by_coordinates(self, latitude: float, longitude: float) -> WeatherSnapshot:
        """Fetch current conditions for a latitude/longitude pair.

        Raises the same errors as :meth:`fetch_by_name`, except that HTTP 404
        is reported as ``ProviderError``.
        """
        return self.fetch(LocationQuery.by_coordinates(latitude, longitude))

    def fetch(self, query: LocationQuery) -> WeatherSnapshot:
        if not self._api_key:
            LOGGER.warning("No OpenWeatherMap API key configured; skipping request for %s", query.describe())
            raise MissingCredentialError("OpenWeatherMap API key is not configured")

        params: Dict[str, Union[str, float]] = {
            **query.to_params(),
            "appid": self._api_key,
            "units": self._units,
        }
        LOGGER.debug("GET %s params=%s", self._base_url, _redact(params))

        try:
            response = self._get_session().get(self._base_url, params=params, timeout=self._timeout)
        except requests.exceptions.Timeout as exc:
            LOGGER.error("Request for %s timed out after %s seconds", query.describe(), self._timeout)
            raise NetworkError(f"Request timed out after {self._timeout} seconds") from exc
        except requests.RequestException as exc:
            LOGGER.error("Request for %s failed: %s", query.describe(), exc)
            raise NetworkError(f"Failed to reach weather provider: {exc}") from exc

        try:
            if not 200 <= response.status_code < 300:
                error = _build_api_error(response, query)
                LOGGER.warning("%s", error)
                raise error
            try:
                payload = response.json()
            except ValueError as exc:
                LOGGER.error("Provider returned a non-JSON body for %s", query.describe())
                raise SchemaError("Provider response is not valid JSON") from exc
            snapshot = WeatherSnapshot.from_payload(payload)
        finally:
            response.close()

        LOGGER.info(
            "Fetched weather for %s, %s (condition %d)",
            snapshot.name,
            snapshot.country,
            snapshot.primary_condition.id,
        )
        return snapshot


__all__ = ["OpenWeatherClient"]
