"""Hero Fields — verifies the powers codec, power-level banding and instant formatting.

Tests:
    - Powers survive join → split with order preserved and whitespace trimmed
    - Empty elements are dropped on both directions
    - Every power level 1..10 maps to its band
    - Naive and aware datetimes render as the same UTC instant
"""

from datetime import datetime, timedelta, timezone

import pytest

from app.core.hero_fields import (
    clean_powers, format_instant, join_powers, power_level_description, split_powers,
)


def test_join_uses_comma_space():
    assert join_powers(["Flight", "Super strength"]) == "Flight, Super strength"


def test_round_trip_preserves_order_and_content():
    powers = ["A", "B"]
    assert split_powers(join_powers(powers)) == ["A", "B"]


def test_round_trip_trims_elements():
    assert split_powers(join_powers(["  Flight ", "X-ray vision  "])) == [
        "Flight", "X-ray vision",
    ]


def test_split_drops_empty_elements():
    assert split_powers("Flight,, ,Speed,") == ["Flight", "Speed"]


def test_split_of_empty_or_none_is_empty_list():
    assert split_powers("") == []
    assert split_powers(None) == []


def test_clean_powers_keeps_order():
    assert clean_powers(["b", "", "a", "  "]) == ["b", "a"]


@pytest.mark.parametrize("level, expected", [
    (1, "Beginner"), (3, "Beginner"),
    (4, "Intermediate"), (6, "Intermediate"),
    (7, "Advanced"), (8, "Advanced"),
    (9, "Elite"), (10, "Elite"),
])
def test_power_level_bands(level, expected):
    assert power_level_description(level) == expected


def test_format_instant_aware_utc():
    value = datetime(2024, 1, 2, 3, 4, 5, 678_901, tzinfo=timezone.utc)
    assert format_instant(value) == "2024-01-02T03:04:05.678Z"


def test_format_instant_treats_naive_as_utc():
    value = datetime(2024, 1, 2, 3, 4, 5)
    assert format_instant(value) == "2024-01-02T03:04:05.000Z"


def test_format_instant_converts_other_offsets():
    value = datetime(2024, 1, 2, 5, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    assert format_instant(value) == "2024-01-02T03:00:00.000Z"
