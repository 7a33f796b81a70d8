"""Tenant schema baseline

Revision ID: 20261017_01
Revises:
Create Date: 2026-10-17
"""
# pylint: disable=no-member,invalid-name,wrong-import-order

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "20261017_01"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = ("schema",)
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "tenant",
        sa.Column("tenant_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("tenant_guid", sa.String(length=36), nullable=False),
        sa.Column("alias", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(length=256), nullable=False),
        sa.Column(
            "created_at_utc",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.UniqueConstraint("tenant_guid", name="uq_tenant_guid"),
        sa.UniqueConstraint("alias", name="uq_tenant_alias"),
    )
    op.create_index("ix_tenant_name", "tenant", ["name"])


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index("ix_tenant_name", table_name="tenant")
    op.drop_table("tenant")
