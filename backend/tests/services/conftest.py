"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session factory
    - db_manager patched so readiness probes see the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency; PostgreSQL-specific SQL is
      checked by compiling against the postgresql dialect (test_text_match.py)
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.models.superhero import Superhero
from app.schemas.superhero import SuperheroCreate
from app.services.superhero_repository import SqlAlchemyHeroRepository
from app.services.superhero_service import SuperheroService
import app.infrastructure.database as db_module
from app.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def service(test_db):
    """SuperheroService over the test session."""
    return SuperheroService(SqlAlchemyHeroRepository(test_db))


@pytest.fixture
def hero_payload():
    """Build a valid SuperheroCreate, overriding any field by keyword."""
    def _build(**overrides) -> SuperheroCreate:
        data = {
            "name": "Clark Kent",
            "alias": "SUPERMAN",
            "powers": ["Flight", "Super strength"],
            "city": "Metropolis",
            "power_level": 10,
        }
        data.update(overrides)
        return SuperheroCreate(**data)
    return _build


@pytest.fixture
async def count_rows(test_session_factory):
    """Row count of the superheroes table, read through a separate session."""
    from sqlalchemy import func, select

    async def _count() -> int:
        async with test_session_factory() as session:
            return await session.scalar(
                select(func.count()).select_from(Superhero),
            )
    return _count


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
