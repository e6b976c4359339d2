"""Display-ready fields derived from a weather snapshot."""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Dict, Tuple

from weather_display.clients.openweather.constants import DEFAULT_UNITS
from weather_display.clients.openweather.models import WeatherSnapshot
from weather_display.conditions import ConditionCategory, ConditionStyle, classify, style_for

DEFAULT_CITY = "Accra"
QUICK_CITIES: Tuple[str, ...] = ("London", "New York", "Tokyo", "Paris", "Dubai", "Sydney")

# units preference -> (temperature symbol, wind speed unit)
UNIT_LABELS: Dict[str, Tuple[str, str]] = {
    "metric": ("°C", "m/s"),
    "imperial": ("°F", "mph"),
    "standard": ("K", "m/s"),
}


@dataclass(frozen=True)
class DetailItem:
    label: str
    value: str


@dataclass(frozen=True)
class DisplayModel:
    """Presentation-ready view of one snapshot."""
    location: str
    temperature: str
    feels_like: str
    temp_min: str
    temp_max: str
    description: str
    category: ConditionCategory
    style: ConditionStyle
    details: Tuple[DetailItem, ...]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity.

    Examples:
        >>> round_half_up(28.5)
        29
        >>> round_half_up(-2.5)
        -2
    """
    whole = math.floor(value)
    return int(whole) + (1 if value - whole >= 0.5 else 0)


def format_visibility(meters: int) -> str:
    """Format a visibility distance in metres as kilometres.

    Examples:
        >>> format_visibility(8046)
        '8.0 km'
    """
    return f"{meters / 1000:.1f} km"


def format_number(value: float) -> str:
    """Render a provider number without a trailing '.0' for whole values."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _capitalize_words(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


def to_view_model(snapshot: WeatherSnapshot, units: str = DEFAULT_UNITS) -> DisplayModel:
    """Build the display model for a snapshot.

    Temperatures are rounded independently of each other, visibility is
    converted to kilometres and the primary condition code selects the icon.

    Args:
        snapshot: Parsed weather snapshot.
        units: Units preference the snapshot was fetched with.

    Returns:
        Immutable display model; equal snapshots give equal models.

    Raises:
        ValueError: If ``units`` is not a known preference.
    """
    try:
        temp_symbol, wind_unit = UNIT_LABELS[units]
    except KeyError:
        raise ValueError(f"Unsupported units: {units!r}") from None

    condition = snapshot.primary_condition
    category = classify(condition.id)
    details = (
        DetailItem("Wind Speed", f"{format_number(snapshot.wind_speed)} {wind_unit}"),
        DetailItem("Humidity", f"{snapshot.humidity}%"),
        DetailItem("Visibility", format_visibility(snapshot.visibility)),
        DetailItem("Pressure", f"{snapshot.pressure} hPa"),
    )
    return DisplayModel(
        location=f"{snapshot.name}, {snapshot.country}",
        temperature=f"{round_half_up(snapshot.temp)}°",
        feels_like=f"Feels like {round_half_up(snapshot.feels_like)}°",
        temp_min=f"{round_half_up(snapshot.temp_min)}{temp_symbol}",
        temp_max=f"{round_half_up(snapshot.temp_max)}{temp_symbol}",
        description=_capitalize_words(condition.description),
        category=category,
        style=style_for(category),
        details=details,
    )


__all__ = [
    "DEFAULT_CITY",
    "QUICK_CITIES",
    "UNIT_LABELS",
    "DetailItem",
    "DisplayModel",
    "round_half_up",
    "format_visibility",
    "format_number",
    "to_view_model",
]
