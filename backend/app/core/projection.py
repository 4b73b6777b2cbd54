"""Projection — maps a stored superhero to its client-facing shape.

Invariants:
    - powers expanded from the stored string; power_count == len(powers)
    - power_level_description derived from power_level, never stored
    - Every other field passes through unchanged; timestamps become ISO-8601 instants

Design Decisions:
    - Pure function over HeroLike, not a method on the ORM model: derived fields
      stay at the boundary and the model stays a plain mapping
"""

from app.core.hero_fields import format_instant, power_level_description, split_powers
from app.core.repository_protocols import HeroLike


def project_hero(hero: HeroLike) -> dict:
    """Projection keyed by field name. Pure, no IO."""
    powers = split_powers(hero.powers)
    return {
        "id": hero.id,
        "name": hero.name,
        "alias": hero.alias,
        "powers": powers,
        "city": hero.city,
        "description": hero.description,
        "image_url": hero.image_url,
        "power_level": hero.power_level,
        "is_active": hero.is_active,
        "created_at": format_instant(hero.created_at),
        "updated_at": format_instant(hero.updated_at),
        "power_count": len(powers),
        "power_level_description": power_level_description(hero.power_level),
    }
