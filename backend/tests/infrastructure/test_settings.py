"""Settings — async driver rewriting and schema auto-creation rules."""

import pytest

from app.config import Settings


@pytest.mark.parametrize("url, expected", [
    ("postgresql://u:p@db/heroes", "postgresql+asyncpg://u:p@db/heroes"),
    ("postgres://u:p@db/heroes", "postgresql+asyncpg://u:p@db/heroes"),
    ("sqlite:///./heroes.db", "sqlite+aiosqlite:///./heroes.db"),
    ("postgresql+asyncpg://u:p@db/heroes", "postgresql+asyncpg://u:p@db/heroes"),
])
def test_database_url_uses_async_driver(url, expected):
    assert Settings(_env_file=None, database_url=url).database_url == expected


def test_schema_created_outside_production():
    settings = Settings(_env_file=None, environment="development")
    assert settings.should_create_schema is True


def test_schema_not_created_in_production():
    settings = Settings(_env_file=None, environment="Production")
    assert settings.is_production
    assert settings.should_create_schema is False


def test_explicit_schema_flag_wins():
    settings = Settings(
        _env_file=None, environment="production", auto_create_schema=True,
    )
    assert settings.should_create_schema is True


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DATABASE_POOL_SIZE", "5")
    settings = Settings(_env_file=None)
    assert settings.log_level == "DEBUG"
    assert settings.database_pool_size == 5
