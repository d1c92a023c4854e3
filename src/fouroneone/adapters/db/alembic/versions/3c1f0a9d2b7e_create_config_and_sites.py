"""create config and sites tables

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-19 09:12:44.518203

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b7e"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "config",
        sa.Column(
            "key", sa.String(length=128), nullable=False, comment="Setting name."
        ),
        sa.Column("value", sa.Text(), nullable=False, comment="Setting value."),
        sa.PrimaryKeyConstraint("key", name=op.f("pk_config")),
    )
    op.create_table(
        "sites",
        sa.Column(
            "site_id",
            sa.Integer(),
            sa.Identity(start=1),
            nullable=False,
            comment="Surrogate key.",
        ),
        sa.Column(
            "name", sa.String(length=255), nullable=False, comment="Display name."
        ),
        sa.Column(
            "host",
            sa.String(length=255),
            nullable=False,
            comment="Lowercase host name without port.",
        ),
        sa.PrimaryKeyConstraint("site_id", name=op.f("pk_sites")),
        sa.UniqueConstraint("host", name=op.f("uq_sites_host")),
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_table("sites")
    op.drop_table("config")
