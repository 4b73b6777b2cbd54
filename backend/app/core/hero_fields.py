"""Hero Fields — pure transforms between stored and client-facing field shapes.

Invariants:
    - join_powers(split_powers(s)) is stable; split_powers(join_powers(p)) == stripped p
    - Empty elements never survive a split
    - Timestamps are rendered as UTC instants with millisecond precision and a Z suffix

Design Decisions:
    - Powers live in a single text column joined by ", " (ADR: flat table, no join table)
    - Naive datetimes are read as UTC: SQLite drops tzinfo on the way back
"""

from collections.abc import Iterable
from datetime import datetime, timezone

from app.core.domain_types import (
    POWER_LEVEL_BANDS, POWERS_JOINER, POWERS_SEPARATOR, PowerLevelBand,
)


def clean_powers(powers: Iterable[str]) -> list[str]:
    """Strip each power and drop the empty ones, keeping order."""
    return [p.strip() for p in powers if p and p.strip()]


def split_powers(stored: str | None) -> list[str]:
    """Expand the stored comma-joined string into a list of powers."""
    if not stored:
        return []
    return clean_powers(stored.split(POWERS_SEPARATOR))


def join_powers(powers: Iterable[str]) -> str:
    """Collapse a sequence of powers into its stored form."""
    return POWERS_JOINER.join(clean_powers(powers))


def power_level_description(level: int) -> str:
    for upper, band in POWER_LEVEL_BANDS:
        if level <= upper:
            return band.value
    return PowerLevelBand.ELITE.value


def format_instant(value: datetime) -> str:
    """Render a datetime as e.g. 2024-01-01T12:00:00.000Z."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
