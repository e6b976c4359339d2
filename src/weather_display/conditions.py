"""Weather condition categories and their display styling.

Provider condition codes are grouped by numeric range
(https://openweathermap.org/weather-conditions). Both the range rule and the
category styling are static tables so every category is covered.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class ConditionCategory(str, Enum):
    THUNDERSTORM = "thunderstorm"
    DRIZZLE = "drizzle"
    RAIN = "rain"
    SNOW = "snow"
    ATMOSPHERE = "atmosphere"
    CLEAR = "clear"
    CLOUDS = "clouds"
    UNKNOWN = "unknown"


# (lower inclusive, upper exclusive, category), checked in order
CONDITION_RANGES: Tuple[Tuple[int, int, ConditionCategory], ...] = (
    (200, 300, ConditionCategory.THUNDERSTORM),
    (300, 400, ConditionCategory.DRIZZLE),
    (500, 600, ConditionCategory.RAIN),
    (600, 700, ConditionCategory.SNOW),
    (700, 800, ConditionCategory.ATMOSPHERE),
    (800, 801, ConditionCategory.CLEAR),
)


def classify(code: int) -> ConditionCategory:
    """Map a provider condition code to its display category.

    Codes outside every documented range resolve to ``UNKNOWN``.

    Examples:
        >>> classify(501)
        <ConditionCategory.RAIN: 'rain'>
        >>> classify(804)
        <ConditionCategory.CLOUDS: 'clouds'>
        >>> classify(450)
        <ConditionCategory.UNKNOWN: 'unknown'>
    """
    for lower, upper, category in CONDITION_RANGES:
        if lower <= code < upper:
            return category
    if code > 800:
        return ConditionCategory.CLOUDS
    return ConditionCategory.UNKNOWN


@dataclass(frozen=True)
class ConditionStyle:
    """Icon identifier and color token for one category."""
    icon: str
    color: str


CONDITION_STYLES: Dict[ConditionCategory, ConditionStyle] = {
    ConditionCategory.THUNDERSTORM: ConditionStyle("zap", "yellow-500"),
    ConditionCategory.DRIZZLE: ConditionStyle("cloud-drizzle", "blue-300"),
    ConditionCategory.RAIN: ConditionStyle("cloud-rain", "blue-400"),
    ConditionCategory.SNOW: ConditionStyle("cloud-snow", "blue-200"),
    ConditionCategory.ATMOSPHERE: ConditionStyle("cloud-fog", "gray-400"),
    ConditionCategory.CLEAR: ConditionStyle("sun", "yellow-400"),
    ConditionCategory.CLOUDS: ConditionStyle("cloud", "gray-400"),
    ConditionCategory.UNKNOWN: ConditionStyle("cloud", "gray-400"),
}


def style_for(category: ConditionCategory) -> ConditionStyle:
    return CONDITION_STYLES[category]


__all__ = [
    "ConditionCategory",
    "CONDITION_RANGES",
    "classify",
    "ConditionStyle",
    "CONDITION_STYLES",
    "style_for",
]
