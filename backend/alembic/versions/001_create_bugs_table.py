"""Create bugs table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `bugs` table: the only collection the tracker stores.
How:   UUID primary key plus three nullable text columns; no secondary indexes.

Rollback: downgrade() drops the table (all bugs are lost).
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
    """Create the bugs table. Column docs live in bugtracker/models/bug.py."""
    op.create_table(
        "bugs",
        sa.Column(
            "id",
            sa.Uuid(as_uuid=True),
            nullable=False,
            comment="Unique identifier assigned on insert; never changes",
        ),
        sa.Column(
            "title",
            sa.Text(),
            nullable=True,
            comment="Short summary of the bug",
        ),
        sa.Column(
            "description",
            sa.Text(),
            nullable=True,
            comment="Free-form details",
        ),
        sa.Column(
            "status",
            sa.String(50),
            nullable=True,
            server_default=sa.text("'open'"),
            comment="Workflow state, 'open' by default",
        ),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("bugs")
