"""add unique index on account identity

Concurrent imports of the same account can both pass the duplicate check;
the unique index makes the second insert fail, which the importer reports
as a skipped duplicate.

Revision ID: 20261017_0002
Revises: 20261017_0001
Create Date: 2026-10-17 09:30:00
"""

from __future__ import annotations

from alembic import op

# revision identifiers, used by Alembic.
revision = "20261017_0002"
down_revision = "20261017_0001"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_index(
        "uq_accounts_name_industry",
        "accounts",
        ["name", "industry"],
        unique=True,
    )


def downgrade() -> None:
    op.drop_index("uq_accounts_name_industry", table_name="accounts")
