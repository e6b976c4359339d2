"""Immutable UI state for the weather display."""
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional

from weather_display.clients.openweather.models import (
    LocationQuery,
    MissingCredentialError,
    WeatherError,
    WeatherSnapshot,
)
from weather_display.view_model import DisplayModel


@dataclass(frozen=True)
class RequestTicket:
    """Token handed out when a request starts; only the latest one may land."""
    request_id: int
    query: LocationQuery


@dataclass(frozen=True)
class WeatherState:
    """Everything the display needs, replaced wholesale on every transition.

    Attributes:
        snapshot: Last successfully fetched snapshot, kept across failures.
        view: Display model for ``snapshot``.
        city: Place name of the displayed snapshot.
        loading: True while the latest request is pending.
        error: User-visible message of the latest failure.
        error_kind: Stable error kind, e.g. 'not_found'.
        request_id: Token of the most recently started request.
        credential_missing: True when no API key is configured.
    """
    snapshot: Optional[WeatherSnapshot] = None
    view: Optional[DisplayModel] = None
    city: str = ""
    loading: bool = False
    error: Optional[str] = None
    error_kind: Optional[str] = None
    request_id: int = 0
    credential_missing: bool = False

    @property
    def has_weather(self) -> bool:
        return self.snapshot is not None

    def started(self, ticket: RequestTicket) -> WeatherState:
        return replace(self, loading=True, error=None, error_kind=None, request_id=ticket.request_id)

    def succeeded(self, snapshot: WeatherSnapshot, view: DisplayModel) -> WeatherState:
        return replace(
            self,
            snapshot=snapshot,
            view=view,
            city=snapshot.name,
            loading=False,
            error=None,
            error_kind=None,
            credential_missing=False,
        )

    def failed(self, error: WeatherError) -> WeatherState:
        return replace(
            self,
            loading=False,
            error=error.user_message,
            error_kind=error.kind,
            credential_missing=self.credential_missing or isinstance(error, MissingCredentialError),
        )

    def settled(self) -> WeatherState:
        """Clear the loading flag without touching anything else."""
        return replace(self, loading=False)


__all__ = ["RequestTicket", "WeatherState"]
