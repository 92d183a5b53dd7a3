"""
Bug Tracker Backend — Bug SQLAlchemy Model
============================================

What:  ORM model representing the `bugs` table.
How:   Inherits from SQLAlchemy's DeclarativeBase; Alembic reads this for migrations.
Who:   Used by SQLAlchemyBugStore for CRUD operations.

Table Design:
    - id: UUID primary key, generated in Python so every dialect gets one
    - title / description: unbounded TEXT, nullable (no required fields)
    - status: short free-form text, "open" when not supplied at creation
    - No indexes beyond the primary key (no filtering or ordering queries)
"""

import uuid
from typing import Optional

from sqlalchemy import String, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from bugtracker.database import Base

DEFAULT_STATUS = "open"


class Bug(Base):
    """
    Represents a tracked bug in the database.

    Lifecycle:
        1. Inserted on POST /api/bugs (status defaults to 'open')
        2. Merged in place on PUT /api/bugs/{id} (last write wins)
        3. Hard-deleted on DELETE /api/bugs/{id}
    """

    __tablename__ = "bugs"

    # ── Primary Key ───────────────────────────────────────────────────────
    # Uuid maps to native UUID on PostgreSQL and CHAR(32) on SQLite
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier assigned on insert; never changes",
    )

    title: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        comment="Short summary of the bug",
    )

    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        comment="Free-form details",
    )

    # Values are not constrained: "open", "resolved", or anything a client sends
    status: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
        default=DEFAULT_STATUS,
        server_default=text(f"'{DEFAULT_STATUS}'"),
        comment="Workflow state, 'open' by default",
    )

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        return f"<Bug(id={self.id}, status='{self.status}')>"
