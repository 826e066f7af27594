"""Create contacts table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `contacts` table and its name index.
How:   Integer identity key assigned by the store; four bounded, required
       string columns; composite index backing the canonical ordering.

Rollback: downgrade() drops the table entirely (all contact data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the contacts table; column limits mirror contact_manager/models/contact.py."""
    op.create_table(
        "contacts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("first_name", sa.String(64), nullable=False),
        sa.Column("last_name", sa.String(64), nullable=False),
        sa.Column("email", sa.String(256), nullable=False),
        sa.Column("phone", sa.String(256), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    # Every listing is ORDER BY first_name, last_name
    op.create_index(
        "idx_contacts_name",
        "contacts",
        ["first_name", "last_name"],
    )


def downgrade() -> None:
    op.drop_index("idx_contacts_name", table_name="contacts")
    op.drop_table("contacts")
