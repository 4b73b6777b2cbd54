"""Superhero Repository — SQLAlchemy implementation of HeroRepository.

Invariants:
    - One repository per AsyncSession (request-scoped); the text matcher is resolved once from its dialect
    - search() ANDs every present filter, orders by created_at DESC then id DESC
    - search() total counts the filtered set before limit/offset; find() skips the count
    - Writes are flushed, never committed, until the service calls commit()

Design Decisions:
    - Flush on add/save so IntegrityError surfaces inside the service's try block
    - Bulk DELETE statement for hard delete: rowcount tells absent from deleted in one round-trip
"""

from collections.abc import Sequence
from typing import Any

from sqlalchemy import ColumnElement, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.hero_filters import HeroFilters
from app.models.superhero import Superhero, utcnow
from app.services.text_match import TextMatcher, text_matcher_for

# Fields count_grouped() may group by
_GROUPABLE = {
    "power_level": Superhero.power_level,
    "city": Superhero.city,
    "is_active": Superhero.is_active,
}


class SqlAlchemyHeroRepository:
    """Superhero persistence over an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession, matcher: TextMatcher | None = None):
        self.db = db
        self.matcher = matcher or text_matcher_for(db.bind.dialect.name)

    async def add(self, values: dict[str, Any]) -> Superhero:
        hero = Superhero(**values)
        self.db.add(hero)
        await self.db.flush()
        return hero

    async def get(self, hero_id: int) -> Superhero | None:
        return await self.db.get(Superhero, hero_id)

    async def get_by_alias(self, alias: str) -> Superhero | None:
        result = await self.db.execute(
            select(Superhero).where(Superhero.alias == alias),
        )
        return result.scalar_one_or_none()

    async def search(
        self, filters: HeroFilters,
    ) -> tuple[Sequence[Superhero], int]:
        """Page of matches plus the size of the whole filtered set."""
        total = await self.db.scalar(
            select(func.count())
            .select_from(Superhero)
            .where(*self._conditions(filters)),
        )
        return await self.find(filters), total or 0

    async def find(self, filters: HeroFilters) -> Sequence[Superhero]:
        """Page of matches only."""
        query = (
            select(Superhero)
            .where(*self._conditions(filters))
            .order_by(Superhero.created_at.desc(), Superhero.id.desc())
        )
        if filters.limit is not None:
            query = query.limit(filters.limit)
        if filters.offset:
            query = query.offset(filters.offset)

        result = await self.db.execute(query)
        return result.scalars().all()

    async def count(self, is_active: bool | None = None) -> int:
        query = select(func.count()).select_from(Superhero)
        if is_active is not None:
            query = query.where(Superhero.is_active.is_(is_active))
        return await self.db.scalar(query) or 0

    async def count_grouped(
        self, field: str, top: int | None = None,
    ) -> list[tuple[Any, int]]:
        """Row count per distinct value of `field`.

        Without `top`: every group, ordered by value. With `top`: the `top`
        largest groups, ordered by count descending then value.
        """
        column = _GROUPABLE[field]
        count = func.count(Superhero.id).label("count")
        query = select(column, count).group_by(column)
        if top is None:
            query = query.order_by(column)
        else:
            query = query.order_by(count.desc(), column).limit(top)
        result = await self.db.execute(query)
        return [(value, n) for value, n in result.all()]

    async def save(self, hero: Superhero, values: dict[str, Any]) -> Superhero:
        """Apply `values` and stamp updated_at, even if every value is unchanged."""
        for key, value in {**values, "updated_at": utcnow()}.items():
            setattr(hero, key, value)
        await self.db.flush()
        return hero

    async def reload(self, hero: Superhero) -> Superhero:
        await self.db.refresh(hero)
        return hero

    async def delete(self, hero_id: int) -> int:
        result = await self.db.execute(
            delete(Superhero).where(Superhero.id == hero_id),
        )
        return result.rowcount

    async def commit(self) -> None:
        await self.db.commit()

    async def rollback(self) -> None:
        await self.db.rollback()

    def _conditions(self, filters: HeroFilters) -> list[ColumnElement[bool]]:
        conditions: list[ColumnElement[bool]] = []
        if filters.name:
            conditions.append(self.matcher.contains(Superhero.name, filters.name))
        if filters.city:
            conditions.append(self.matcher.contains(Superhero.city, filters.city))
        if filters.alias:
            conditions.append(self.matcher.contains(Superhero.alias, filters.alias))
        if filters.is_active is not None:
            conditions.append(Superhero.is_active.is_(filters.is_active))
        if filters.power_level is not None:
            conditions.append(Superhero.power_level == filters.power_level)
        return conditions
