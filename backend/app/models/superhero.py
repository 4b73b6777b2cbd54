"""Superhero ORM — one row per hero record.

Invariants:
    - id is an autoincrement integer primary key (store-assigned, immutable)
    - alias is globally unique (named unique constraint uq_superheroes_alias)
    - powers stored as a ", "-joined string; the list form exists only at the API boundary
    - power_level constrained to 1..10 at the store level as well
    - created_at set once on insert; updated_at stamped by every save, even when no column value changes

Design Decisions:
    - Python-side timestamp defaults over server defaults: identical behaviour on SQLite and PostgreSQL
    - No to_dict()/derived-field methods here: projection lives in core/projection.py
"""

from datetime import datetime, timezone

from sqlalchemy import (
    Boolean, CheckConstraint, DateTime, Integer, String, Text, UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.core.domain_types import DEFAULT_POWER_LEVEL, MAX_POWER_LEVEL, MIN_POWER_LEVEL
from app.db.base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Superhero(Base):
    """Superhero record."""
    __tablename__ = "superheroes"
    __table_args__ = (
        UniqueConstraint("alias", name="uq_superheroes_alias"),
        CheckConstraint(
            f"power_level BETWEEN {MIN_POWER_LEVEL} AND {MAX_POWER_LEVEL}",
            name="ck_superheroes_power_level_range",
        ),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    alias: Mapped[str] = mapped_column(String(100), nullable=False)
    powers: Mapped[str] = mapped_column(Text, nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(255), nullable=True)
    power_level: Mapped[int] = mapped_column(
        Integer, nullable=False, default=DEFAULT_POWER_LEVEL,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=utcnow, onupdate=utcnow,
    )

    def __repr__(self) -> str:
        return f"<Superhero id={self.id} alias={self.alias!r}>"
