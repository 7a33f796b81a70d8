"""Development seed data: demo tenants

Applied only in the development environment.

Revision ID: 20261017_02
Revises:
Create Date: 2026-10-17
"""
# pylint: disable=no-member,invalid-name,wrong-import-order

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "20261017_02"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = ("seed_dev_data",)
depends_on: Union[str, Sequence[str], None] = "20261017_01"

_SEED_TENANTS = [
    {"tenant_guid": "6f1c2a4e-1d3b-4c59-9a1e-2b7d3f4a5c01", "alias": "contoso", "name": "Contoso Ltd."},
    {"tenant_guid": "0b8e7d6c-5a4f-4e3d-8c2b-1a0f9e8d7c02", "alias": "fabrikam", "name": "Fabrikam Inc."},
]


def upgrade() -> None:
    """Insert demo tenants."""

    tenant_table = sa.table(
        "tenant",
        sa.column("tenant_guid", sa.String),
        sa.column("alias", sa.String),
        sa.column("name", sa.String),
    )
    op.bulk_insert(tenant_table, _SEED_TENANTS)


def downgrade() -> None:
    """Remove demo tenants."""

    op.execute(
        sa.text("DELETE FROM tenant WHERE alias IN ('contoso', 'fabrikam')")
    )
