"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - The record service talks to storage only through HeroRepository
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Repository receives HeroFilters, not query-builder fragments: the service
      never depends on ORM chaining semantics, only on filter/order/page contracts
"""

from collections.abc import Sequence
from datetime import datetime
from typing import Any, Protocol

from app.core.hero_filters import HeroFilters


class HeroLike(Protocol):
    """Structural contract for stored superhero records.

    Avoids coupling the projector to the ORM model while giving mypy
    real type information (unlike Any).
    """
    id: int
    name: str
    alias: str
    powers: str
    city: str
    description: str | None
    image_url: str | None
    power_level: int
    is_active: bool
    created_at: datetime
    updated_at: datetime


class HeroRepository(Protocol):
    """Contract for superhero persistence — implemented by shell.

    Writes are staged with add()/save() and flushed on commit(); search()
    orders by created_at descending and returns (page, total before paging).
    """
    async def add(self, values: dict[str, Any]) -> HeroLike: ...
    async def get(self, hero_id: int) -> HeroLike | None: ...
    async def get_by_alias(self, alias: str) -> HeroLike | None: ...
    async def search(self, filters: HeroFilters) -> tuple[Sequence[HeroLike], int]: ...
    async def find(self, filters: HeroFilters) -> Sequence[HeroLike]: ...
    async def count(self, is_active: bool | None = None) -> int: ...
    async def count_grouped(
        self, field: str, top: int | None = None,
    ) -> list[tuple[Any, int]]: ...
    async def save(self, hero: HeroLike, values: dict[str, Any]) -> HeroLike: ...
    async def reload(self, hero: HeroLike) -> HeroLike: ...
    async def delete(self, hero_id: int) -> int: ...
    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...
