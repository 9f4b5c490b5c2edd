"""Create users and feed_providers tables

Revision ID: 4f2a9c1d7e3b
Revises:
Create Date: 2026-10-19 10:12:41.208113

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4f2a9c1d7e3b"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        *timestamps(),
    )
    # Unique index backs the repository's duplicate-email check
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "feed_providers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("owner_id", sa.String(length=32), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("url", sa.String(length=2048), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default=sa.false()),
        *timestamps(),
    )
    op.create_index("ix_feed_providers_id", "feed_providers", ["id"])
    op.create_index("ix_feed_providers_owner_id", "feed_providers", ["owner_id"])


def downgrade() -> None:
    op.drop_index("ix_feed_providers_owner_id", table_name="feed_providers")
    op.drop_index("ix_feed_providers_id", table_name="feed_providers")
    op.drop_table("feed_providers")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
