"""Superhero Routes — REST surface for superhero records under /superheroes.

Invariants:
    - Query strings reach normalize_filters() as raw strings; bad values become 400 before any query runs
    - /stats and /search are registered before /{hero_id}
    - Domain errors propagate to the global SuperheroesError handler (404 / 409 / 400 / 500)

Design Decisions:
    - Thin routes: parsing here, business rules in SuperheroService
    - Service built per request from the request-scoped AsyncSession
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.hero_filters import normalize_alias_term, normalize_filters
from app.core.pagination import build_pagination
from app.infrastructure.database import get_db
from app.schemas.superhero import (
    MessageResponse, SuperheroCreate, SuperheroListResponse, SuperheroResponse,
    SuperheroStats, SuperheroUpdate,
)
from app.services.superhero_repository import SqlAlchemyHeroRepository
from app.services.superhero_service import SuperheroService

router = APIRouter(prefix="/superheroes", tags=["superheroes"])


async def get_superhero_service(
    db: AsyncSession = Depends(get_db),
) -> SuperheroService:
    """FastAPI DI factory for SuperheroService."""
    return SuperheroService(SqlAlchemyHeroRepository(db))


@router.post(
    "", response_model=SuperheroResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_superhero(
    body: SuperheroCreate,
    service: SuperheroService = Depends(get_superhero_service),
):
    """Create a superhero. 409 if the alias is already taken."""
    return await service.create(body)


@router.get("", response_model=SuperheroListResponse)
async def list_superheroes(
    name: str | None = Query(None),
    city: str | None = Query(None),
    is_active: str | None = Query(None, alias="isActive"),
    power_level: str | None = Query(None, alias="powerLevel"),
    limit: str | None = Query(None),
    offset: str | None = Query(None),
    service: SuperheroService = Depends(get_superhero_service),
):
    """List superheroes with optional filters and pagination."""
    filters = normalize_filters(
        name=name, city=city, is_active=is_active,
        power_level=power_level, limit=limit, offset=offset,
    )
    data, total = await service.find_all(filters)
    return {
        "data": data,
        "total": total,
        "pagination": build_pagination(filters, total),
    }


@router.get("/stats", response_model=SuperheroStats)
async def get_superhero_stats(
    service: SuperheroService = Depends(get_superhero_service),
):
    return await service.get_stats()


@router.get("/search", response_model=list[SuperheroResponse])
async def search_superheroes(
    alias: str | None = Query(None),
    service: SuperheroService = Depends(get_superhero_service),
):
    """Active superheroes whose alias contains the term (case-insensitive)."""
    return await service.find_by_alias(normalize_alias_term(alias))


@router.get("/{hero_id}", response_model=SuperheroResponse)
async def get_superhero(
    hero_id: int,
    service: SuperheroService = Depends(get_superhero_service),
):
    return await service.find_one(hero_id)


@router.patch("/{hero_id}", response_model=SuperheroResponse)
async def update_superhero(
    hero_id: int,
    body: SuperheroUpdate,
    service: SuperheroService = Depends(get_superhero_service),
):
    """Partially update a superhero. Only fields present in the body change."""
    return await service.update(hero_id, body)


@router.delete("/{hero_id}", response_model=MessageResponse)
async def delete_superhero(
    hero_id: int,
    service: SuperheroService = Depends(get_superhero_service),
):
    """Permanently delete a superhero."""
    return await service.hard_delete(hero_id)
