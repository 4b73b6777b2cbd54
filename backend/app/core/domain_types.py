"""Domain Types — rich types and bounds shared across the superhero domain.

Invariants:
    - HeroId wraps the store-assigned integer id, never reassigned after insert
    - PowerLevel is bounded MIN_POWER_LEVEL..MAX_POWER_LEVEL (1–10)
    - Page size is bounded 1..MAX_PAGE_SIZE; offsets are never negative

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

HeroId = NewType("HeroId", int)


# ─── Value Types ─────────────────────────────────────────────────

PowerLevel = NewType("PowerLevel", int)    # 1–10

MIN_POWER_LEVEL = 1
MAX_POWER_LEVEL = 10
DEFAULT_POWER_LEVEL = 5

MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 100

TOP_CITIES_LIMIT = 10

POWERS_SEPARATOR = ","
POWERS_JOINER = ", "


# ─── Enums ───────────────────────────────────────────────────────

class PowerLevelBand(str, Enum):
    """Label shown next to a power level — upper bound inclusive."""
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    ELITE = "Elite"


# Ordered (upper bound, band); anything above the last bound is ELITE
POWER_LEVEL_BANDS: tuple[tuple[int, PowerLevelBand], ...] = (
    (3, PowerLevelBand.BEGINNER),
    (6, PowerLevelBand.INTERMEDIATE),
    (8, PowerLevelBand.ADVANCED),
)
