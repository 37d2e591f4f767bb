"""recent searches

Revision ID: 002_recent_searches
Revises: 001_initial
Create Date: 2026-10-24
"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "002_recent_searches"
down_revision = "001_initial"
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "recent_searches",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("query", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("location", sa.String(length=100), nullable=False, server_default=""),
        sa.Column("filters", sa.JSON, nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_recent_searches_id", "recent_searches", ["id"])
    op.create_index(
        "ix_recent_searches_user_created", "recent_searches", ["user_id", "created_at"]
    )


def downgrade():
    op.drop_table("recent_searches")
