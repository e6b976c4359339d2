"""Tests for condition code classification."""

from __future__ import annotations

import pytest

from weather_display.conditions import (
    CONDITION_STYLES,
    ConditionCategory,
    ConditionStyle,
    classify,
    style_for,
)


class TestClassify:
    """Tests for the code range rule."""

    @pytest.mark.parametrize(
        "start, stop, category",
        [
            (200, 300, ConditionCategory.THUNDERSTORM),
            (300, 400, ConditionCategory.DRIZZLE),
            (500, 600, ConditionCategory.RAIN),
            (600, 700, ConditionCategory.SNOW),
            (700, 800, ConditionCategory.ATMOSPHERE),
            (801, 900, ConditionCategory.CLOUDS),
        ],
    )
    def test_every_code_in_range(self, start, stop, category) -> None:
        """Every code of a documented range maps to its category."""
        assert {classify(code) for code in range(start, stop)} == {category}

    def test_clear_is_exactly_800(self) -> None:
        assert classify(800) is ConditionCategory.CLEAR

    def test_range_bounds(self) -> None:
        assert classify(299) is ConditionCategory.THUNDERSTORM
        assert classify(300) is ConditionCategory.DRIZZLE
        assert classify(799) is ConditionCategory.ATMOSPHERE
        assert classify(801) is ConditionCategory.CLOUDS

    def test_gap_between_drizzle_and_rain_is_unknown(self) -> None:
        assert {classify(code) for code in range(400, 500)} == {ConditionCategory.UNKNOWN}

    @pytest.mark.parametrize("code", [-1, 0, 100, 199])
    def test_below_thunderstorm_is_unknown(self, code) -> None:
        assert classify(code) is ConditionCategory.UNKNOWN

    def test_large_codes_are_clouds(self) -> None:
        assert classify(10_000) is ConditionCategory.CLOUDS

    def test_category_values(self) -> None:
        assert ConditionCategory.RAIN == "rain"
        assert len(ConditionCategory) == 8


class TestStyles:
    """Tests for the static icon table."""

    def test_table_covers_every_category(self) -> None:
        assert set(CONDITION_STYLES) == set(ConditionCategory)

    @pytest.mark.parametrize(
        "category, icon, color",
        [
            (ConditionCategory.THUNDERSTORM, "zap", "yellow-500"),
            (ConditionCategory.CLEAR, "sun", "yellow-400"),
            (ConditionCategory.UNKNOWN, "cloud", "gray-400"),
        ],
    )
    def test_known_entries(self, category, icon, color) -> None:
        assert style_for(category) == ConditionStyle(icon, color)
