"""Request orchestration for the weather display.

The controller owns the single current ``WeatherState`` and replaces it on
every transition. Requests are tagged with monotonically increasing tokens;
a completion whose token is no longer the latest is discarded, so a slow
earlier response can never overwrite a newer one.
"""
from __future__ import annotations
import itertools
import logging
from typing import Callable, List, Optional, Protocol

from weather_display.app.locators import GeolocationFailure, Locator
from weather_display.app.state import RequestTicket, WeatherState
from weather_display.clients.openweather.constants import DEFAULT_UNITS
from weather_display.clients.openweather.models import (
    LocationQuery,
    WeatherError,
    WeatherSnapshot,
)
from weather_display.view_model import DEFAULT_CITY, to_view_model

LOGGER = logging.getLogger(__name__)

StateListener = Callable[[WeatherState], None]


class WeatherFetcher(Protocol):
    def fetch(self, query: LocationQuery) -> WeatherSnapshot:
        ...


class WeatherController:
    def __init__(
        self,
        client: WeatherFetcher,
        *,
        units: Optional[str] = None,
        default_city: str = DEFAULT_CITY,
    ) -> None:
        self._client = client
        self._units = units or getattr(client, "units", DEFAULT_UNITS)
        self._default_city = default_city
        self._sequence = itertools.count(1)
        self._listeners: List[StateListener] = []
        self._state = WeatherState(
            credential_missing=not getattr(client, "has_credential", True),
        )

    @property
    def state(self) -> WeatherState:
        return self._state

    @property
    def default_city(self) -> str:
        return self._default_city

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called with every new state.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, new_state: WeatherState) -> None:
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)

    # ── Request lifecycle ───────────────────────────────────────

    def begin(self, query: LocationQuery) -> RequestTicket:
        """Start a request: issue the next token and show the loading state."""
        ticket = RequestTicket(request_id=next(self._sequence), query=query)
        LOGGER.debug("Request %d started for %s", ticket.request_id, query.describe())
        self._set_state(self._state.started(ticket))
        return ticket

    def is_current(self, ticket: RequestTicket) -> bool:
        return ticket.request_id == self._state.request_id

    def resolve(self, ticket: RequestTicket, snapshot: WeatherSnapshot) -> bool:
        """Apply a successful response. Returns False if it was stale."""
        if not self.is_current(ticket):
            LOGGER.debug(
                "Discarding stale response %d (latest is %d)",
                ticket.request_id,
                self._state.request_id,
            )
            return False
        view = to_view_model(snapshot, self._units)
        self._set_state(self._state.succeeded(snapshot, view))
        return True

    def fail(self, ticket: RequestTicket, error: WeatherError) -> bool:
        """Apply a failed response. Returns False if it was stale.

        The previously displayed snapshot stays in place.
        """
        if not self.is_current(ticket):
            LOGGER.debug("Discarding stale failure %d: %s", ticket.request_id, error)
            return False
        LOGGER.info("Request %d failed (%s): %s", ticket.request_id, error.kind, error)
        self._set_state(self._state.failed(error))
        return True

    def run(self, query: LocationQuery) -> WeatherState:
        """Fetch ``query`` synchronously and return the resulting state."""
        ticket = self.begin(query)
        try:
            snapshot = self._client.fetch(query)
            self.resolve(ticket, snapshot)
        except WeatherError as exc:
            self.fail(ticket, exc)
        except Exception:
            # Unexpected errors propagate, but never leave the spinner on
            if self.is_current(ticket) and self._state.loading:
                self._set_state(self._state.settled())
            raise
        return self._state

    # ── User actions ────────────────────────────────────────────

    def search(self, name: str) -> WeatherState:
        """Look up a city by name; blank input is ignored."""
        if not name or not name.strip():
            LOGGER.debug("Ignoring blank search")
            return self._state
        return self.run(LocationQuery.by_name(name))

    def load_coordinates(self, latitude: float, longitude: float) -> WeatherState:
        return self.run(LocationQuery.by_coordinates(latitude, longitude))

    def start(self, locator: Locator) -> WeatherState:
        """Initial load: geolocate once, or fall back to the default city."""
        locator.locate(self.load_coordinates, self._on_locate_error)
        return self._state

    def _on_locate_error(self, reason: GeolocationFailure) -> None:
        LOGGER.info(
            "Geolocation failed (%s); falling back to %s",
            getattr(reason, "value", reason),
            self._default_city,
        )
        self.search(self._default_city)


__all__ = ["WeatherController", "WeatherFetcher", "StateListener"]
