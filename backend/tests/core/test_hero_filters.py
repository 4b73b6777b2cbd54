"""Hero Filters — verifies raw query-string normalization.

Tests:
    - Missing and blank parameters are omitted
    - Text terms are trimmed
    - Each numeric/boolean parameter rejects malformed or out-of-range input
      with InvalidInputError naming the parameter
"""

import pytest

from app.core.errors import InvalidInputError
from app.core.hero_filters import HeroFilters, normalize_alias_term, normalize_filters


def test_no_parameters_yields_empty_filter_set():
    assert normalize_filters() == HeroFilters()


def test_all_parameters_parsed():
    filters = normalize_filters(
        name="clark", city="Metropolis", is_active="true",
        power_level="7", limit="20", offset="40",
    )
    assert filters == HeroFilters(
        name="clark", city="Metropolis", is_active=True,
        power_level=7, limit=20, offset=40,
    )


def test_text_terms_are_trimmed_and_blank_terms_omitted():
    filters = normalize_filters(name="  bruce ", city="   ")
    assert filters.name == "bruce"
    assert filters.city is None


@pytest.mark.parametrize("raw, expected", [("true", True), ("false", False)])
def test_is_active_accepts_true_and_false(raw, expected):
    assert normalize_filters(is_active=raw).is_active is expected


@pytest.mark.parametrize("raw", ["yes", "1", "True", "FALSE", "maybe", "", " "])
def test_is_active_rejects_anything_else(raw):
    with pytest.raises(InvalidInputError) as exc:
        normalize_filters(is_active=raw)
    assert exc.value.field == "isActive"
    assert exc.value.http_status == 400


@pytest.mark.parametrize("raw", ["1", "10", " 5 "])
def test_power_level_in_range(raw):
    assert 1 <= normalize_filters(power_level=raw).power_level <= 10


@pytest.mark.parametrize("raw", ["0", "11", "-3", "abc", "5abc", "2.5"])
def test_power_level_out_of_range_or_malformed(raw):
    with pytest.raises(InvalidInputError) as exc:
        normalize_filters(power_level=raw)
    assert exc.value.field == "powerLevel"


@pytest.mark.parametrize("raw, expected", [("1", 1), ("100", 100)])
def test_limit_bounds_inclusive(raw, expected):
    assert normalize_filters(limit=raw).limit == expected


@pytest.mark.parametrize("raw", ["0", "101", "ten", "-1"])
def test_limit_rejected(raw):
    with pytest.raises(InvalidInputError) as exc:
        normalize_filters(limit=raw)
    assert exc.value.field == "limit"


def test_offset_zero_allowed():
    assert normalize_filters(offset="0").offset == 0


@pytest.mark.parametrize("raw", ["-1", "x", "1.5"])
def test_offset_rejected(raw):
    with pytest.raises(InvalidInputError) as exc:
        normalize_filters(offset=raw)
    assert exc.value.field == "offset"


def test_empty_numeric_parameters_are_omitted():
    filters = normalize_filters(power_level="", limit="", offset="", is_active="")
    assert filters == HeroFilters()


def test_alias_term_required():
    with pytest.raises(InvalidInputError) as exc:
        normalize_alias_term(None)
    assert exc.value.field == "alias"
    with pytest.raises(InvalidInputError):
        normalize_alias_term("   ")


def test_alias_term_trimmed():
    assert normalize_alias_term(" man ") == "man"
