"""Create the superheroes table.

Revision ID: 001_superheroes
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_superheroes"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "superheroes",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("alias", sa.String(100), nullable=False),
        sa.Column("powers", sa.Text, nullable=False),
        sa.Column("city", sa.String(100), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("image_url", sa.String(255), nullable=True),
        sa.Column("power_level", sa.Integer, nullable=False, server_default="5"),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("alias", name="uq_superheroes_alias"),
        sa.CheckConstraint(
            "power_level BETWEEN 1 AND 10",
            name="ck_superheroes_power_level_range",
        ),
    )
    op.create_index("ix_superheroes_created_at", "superheroes", ["created_at"])
    op.create_index("ix_superheroes_is_active", "superheroes", ["is_active"])


def downgrade() -> None:
    op.drop_index("ix_superheroes_is_active", table_name="superheroes")
    op.drop_index("ix_superheroes_created_at", table_name="superheroes")
    op.drop_table("superheroes")
