"""Superhero Service — create/read/update/delete orchestration over HeroRepository.

Invariants:
    - alias is unique: exact-match pre-check before every insert and every alias change
    - A unique-index violation at write time is reported as the same AliasConflictError
    - update() applies only the fields the client sent; powers re-joined when present
    - Every failed write is rolled back; store failures surface as PersistenceError
      with a generic message, the cause is logged
    - Every successful mutation is committed before the projection is returned

Design Decisions:
    - Pre-check gives a clean 409 without relying on driver error text; the unique
      index closes the check-then-act race between concurrent writers
    - Projection done here (SuperheroResponse), routes only shape envelopes
"""

import logging
from collections.abc import Sequence
from typing import NoReturn

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.core.domain_types import TOP_CITIES_LIMIT
from app.core.errors import AliasConflictError, PersistenceError, ResourceNotFoundError
from app.core.hero_fields import join_powers
from app.core.hero_filters import HeroFilters
from app.core.projection import project_hero
from app.core.repository_protocols import HeroLike, HeroRepository
from app.schemas.superhero import (
    SuperheroCreate, SuperheroResponse, SuperheroStats, SuperheroUpdate,
)

logger = logging.getLogger(__name__)

RESOURCE_TYPE = "Superhero"


def to_response(hero: HeroLike) -> SuperheroResponse:
    return SuperheroResponse.model_validate(project_hero(hero))


class SuperheroService:
    """Business operations on superhero records."""

    def __init__(self, repository: HeroRepository):
        self.repository = repository

    async def create(self, payload: SuperheroCreate) -> SuperheroResponse:
        """Insert a new superhero. Raises AliasConflictError if the alias is taken."""
        await self._ensure_alias_free(payload.alias)

        values = payload.model_dump()
        values["powers"] = join_powers(payload.powers)
        try:
            hero = await self.repository.add(values)
            await self.repository.commit()
        except SQLAlchemyError as e:
            await self._fail_write(e, payload.alias, "create")

        logger.info(
            f"Superhero created: {hero.alias}",
            extra={"hero_id": hero.id, "alias": hero.alias, "operation": "create"},
        )
        return to_response(hero)

    async def find_all(
        self, filters: HeroFilters,
    ) -> tuple[list[SuperheroResponse], int]:
        """Filtered page plus the size of the whole filtered set."""
        heroes, total = await self.repository.search(filters)
        return [to_response(h) for h in heroes], total

    async def find_one(self, hero_id: int) -> SuperheroResponse:
        return to_response(await self._get_or_404(hero_id))

    async def find_by_alias(self, term: str) -> list[SuperheroResponse]:
        """Active superheroes whose alias contains `term`, ignoring case."""
        heroes = await self.repository.find(
            HeroFilters(alias=term, is_active=True),
        )
        return [to_response(h) for h in heroes]

    async def update(
        self, hero_id: int, payload: SuperheroUpdate,
    ) -> SuperheroResponse:
        """Apply a partial update. Raises ResourceNotFoundError / AliasConflictError."""
        hero = await self._get_or_404(hero_id)
        changes = payload.changes()
        if not changes:
            return to_response(hero)

        # None when the alias is absent or unchanged: no conflict is possible then
        new_alias = changes.get("alias")
        if new_alias == hero.alias:
            new_alias = None
        if new_alias is not None:
            await self._ensure_alias_free(new_alias)
        if "powers" in changes:
            changes["powers"] = join_powers(changes["powers"])

        try:
            hero = await self.repository.save(hero, changes)
            await self.repository.commit()
            hero = await self.repository.reload(hero)
        except SQLAlchemyError as e:
            await self._fail_write(e, new_alias, "update")

        logger.info(
            f"Superhero {hero_id} updated: {sorted(changes)}",
            extra={"hero_id": hero_id, "operation": "update"},
        )
        return to_response(hero)

    async def hard_delete(self, hero_id: int) -> dict:
        """Permanently remove a superhero. Raises ResourceNotFoundError if absent."""
        try:
            deleted = await self.repository.delete(hero_id)
            if not deleted:
                raise ResourceNotFoundError(RESOURCE_TYPE, str(hero_id))
            await self.repository.commit()
        except SQLAlchemyError as e:
            await self._fail_write(e, None, "delete")

        logger.info(
            f"Superhero {hero_id} deleted",
            extra={"hero_id": hero_id, "operation": "delete"},
        )
        return {"message": "Superhero permanently deleted from the database"}

    async def get_stats(self) -> SuperheroStats:
        total = await self.repository.count()
        active = await self.repository.count(is_active=True)
        by_level = await self.repository.count_grouped("power_level")
        by_city = await self.repository.count_grouped("city", top=TOP_CITIES_LIMIT)
        return SuperheroStats(
            total=total,
            active=active,
            inactive=total - active,
            by_power_level=_as_mapping(by_level),
            by_cities=_as_mapping(by_city),
        )

    async def _get_or_404(self, hero_id: int) -> HeroLike:
        hero = await self.repository.get(hero_id)
        if hero is None:
            raise ResourceNotFoundError(RESOURCE_TYPE, str(hero_id))
        return hero

    async def _ensure_alias_free(self, alias: str) -> None:
        if await self.repository.get_by_alias(alias) is not None:
            logger.warning(
                f"Alias already taken: {alias}",
                extra={"alias": alias, "error_code": "ALIAS_CONFLICT"},
            )
            raise AliasConflictError(alias)

    async def _fail_write(
        self, error: SQLAlchemyError, alias: str | None, operation: str,
    ) -> NoReturn:
        """Roll back and raise the domain error matching a failed write."""
        await self.repository.rollback()
        if (
            isinstance(error, IntegrityError)
            and alias is not None
            and await self.repository.get_by_alias(alias) is not None
        ):
            logger.warning(
                f"Alias claimed concurrently: {alias}",
                extra={"alias": alias, "error_code": "ALIAS_CONFLICT"},
            )
            raise AliasConflictError(alias) from error
        logger.error(
            f"Failed to {operation} superhero: {error}",
            extra={"operation": operation, "error_code": "PERSISTENCE_ERROR"},
            exc_info=True,
        )
        raise PersistenceError(
            f"Failed to {operation} superhero", operation,
        ) from error


def _as_mapping(groups: Sequence[tuple[object, int]]) -> dict[str, int]:
    return {str(value): count for value, count in groups}
