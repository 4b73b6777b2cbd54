"""Hero Filters — turns raw query-string values into a typed filter set.

Invariants:
    - Missing or blank parameters are omitted (None), never defaulted
    - Text terms are trimmed; an empty term never reaches the predicate builder
    - Every malformed value raises InvalidInputError naming the offending parameter
    - No IO, no side effects

Design Decisions:
    - Raw strings in, not pre-parsed ints: "abc" and "5abc" must both be rejected
      with a domain message rather than a framework coercion error
    - HeroFilters is frozen: the service reads it, never mutates it
"""

from dataclasses import dataclass

from app.core.domain_types import (
    MAX_PAGE_SIZE, MAX_POWER_LEVEL, MIN_PAGE_SIZE, MIN_POWER_LEVEL,
)
from app.core.errors import InvalidInputError


@dataclass(frozen=True)
class HeroFilters:
    """Normalized filter set for listing and searching superheroes."""
    name: str | None = None
    city: str | None = None
    alias: str | None = None
    is_active: bool | None = None
    power_level: int | None = None
    limit: int | None = None
    offset: int | None = None


def normalize_filters(
    name: str | None = None,
    city: str | None = None,
    is_active: str | None = None,
    power_level: str | None = None,
    limit: str | None = None,
    offset: str | None = None,
) -> HeroFilters:
    """Validate raw list parameters. Raises InvalidInputError on bad values."""
    return HeroFilters(
        name=_clean_term(name),
        city=_clean_term(city),
        is_active=_parse_bool(is_active, "isActive"),
        power_level=_parse_bounded_int(
            power_level, "powerLevel", MIN_POWER_LEVEL, MAX_POWER_LEVEL,
        ),
        limit=_parse_bounded_int(limit, "limit", MIN_PAGE_SIZE, MAX_PAGE_SIZE),
        offset=_parse_offset(offset),
    )


def normalize_alias_term(alias: str | None) -> str:
    """Alias search term is mandatory."""
    term = _clean_term(alias)
    if term is None:
        raise InvalidInputError('The "alias" parameter is required', "alias")
    return term


def _clean_term(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _parse_bool(value: str | None, field: str) -> bool | None:
    if value is None:
        return None
    if value == "true":
        return True
    if value == "false":
        return False
    raise InvalidInputError(f'{field} must be "true" or "false"', field)


def _parse_int(value: str) -> int | None:
    value = value.strip()
    digits = value[1:] if value[:1] in "+-" else value
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(value)


def _parse_bounded_int(
    value: str | None, field: str, low: int, high: int,
) -> int | None:
    if value is None or value == "":
        return None
    parsed = _parse_int(value)
    if parsed is None or not low <= parsed <= high:
        raise InvalidInputError(
            f"{field} must be a number between {low} and {high}", field,
        )
    return parsed


def _parse_offset(value: str | None) -> int | None:
    if value is None or value == "":
        return None
    parsed = _parse_int(value)
    if parsed is None or parsed < 0:
        raise InvalidInputError(
            "offset must be a number greater than or equal to 0", "offset",
        )
    return parsed
