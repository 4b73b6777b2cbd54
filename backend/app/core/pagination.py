"""Pagination — pure shaping of the pagination block returned by list endpoints.

Invariants:
    - Without an explicit limit the page is the whole filtered set (limit == total)
    - hasNext iff offset + limit < total; hasPrev iff offset > 0
"""

from app.core.hero_filters import HeroFilters


def build_pagination(filters: HeroFilters, total: int) -> dict:
    limit = filters.limit or total
    offset = filters.offset or 0
    return {
        "limit": limit,
        "offset": offset,
        "total": total,
        "has_next": offset + limit < total,
        "has_prev": offset > 0,
    }
