"""create tasks table

Revision ID: 0001
Revises:
Create Date: 2025-10-19 00:00:00
"""

from __future__ import annotations

import sqlalchemy as sa

from alembic import op
from todokit.core.types import ULIDType, UTCDateTime

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create the tasks table."""
    op.create_table(
        "tasks",
        sa.Column("id", ULIDType(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("done", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("created_at", UTCDateTime(), nullable=False),
        sa.Column("updated_at", UTCDateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """Drop the tasks table."""
    op.drop_table("tasks")
