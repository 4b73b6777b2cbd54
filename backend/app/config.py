"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Credentials come from environment variables or .env (never hardcoded beyond local defaults)
    - get_settings() is cached (lru_cache): one instance per process
    - database_url always names an async driver (asyncpg / aiosqlite)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - SQLite by default: the API runs out of the box; PostgreSQL via DATABASE_URL
    - auto_create_schema defaults to on outside production; production uses Alembic
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ASYNC_DRIVERS = (
    ("postgresql://", "postgresql+asyncpg://"),
    ("postgres://", "postgresql+asyncpg://"),
    ("sqlite://", "sqlite+aiosqlite://"),
)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    environment: str = "development"

    # Database
    database_url: str = "sqlite+aiosqlite:///./superheroes.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def use_async_driver(cls, v: str) -> str:
        """Hosting platforms hand out postgresql:// URLs; the engine needs an async driver."""
        if isinstance(v, str):
            for prefix, replacement in _ASYNC_DRIVERS:
                if v.startswith(prefix):
                    return v.replace(prefix, replacement, 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_echo: bool = False
    auto_create_schema: bool | None = None

    # API
    cors_origins: list[str] = ["http://localhost:4200"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def should_create_schema(self) -> bool:
        if self.auto_create_schema is not None:
            return self.auto_create_schema
        return not self.is_production


@lru_cache
def get_settings() -> Settings:
    return Settings()
