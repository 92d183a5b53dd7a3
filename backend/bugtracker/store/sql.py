"""
Bug Tracker Backend — SQLAlchemy Bug Store
============================================

What:  BugStore backed by an async SQLAlchemy engine.
How:   Each operation opens its own session from the factory, runs one
       statement, and commits. No transaction spans two operations.
Who:   Built by create_store() when STORE_BACKEND=sql (the default).
When:  Engine created once at startup; disposed by close() at shutdown.

Query plans:
    insert    → INSERT INTO bugs ... RETURNING via ORM flush
    find_all  → SELECT * FROM bugs (no ORDER BY: natural order)
    update    → SELECT by primary key, assign supplied columns, COMMIT
    delete    → DELETE FROM bugs WHERE id = :id
"""

import logging
import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from bugtracker.database import Base, build_session_factory
from bugtracker.models.bug import Bug
from bugtracker.store.base import BugRecord, BugStore, writable

logger = logging.getLogger(__name__)


def _parse_id(bug_id: str) -> Optional[uuid.UUID]:
    """Convert a path id to a UUID; None when it cannot name any row."""
    try:
        return uuid.UUID(str(bug_id))
    except ValueError:
        return None


def _to_record(bug: Bug) -> BugRecord:
    return BugRecord(
        id=str(bug.id),
        title=bug.title,
        description=bug.description,
        status=bug.status,
    )


class SQLAlchemyBugStore(BugStore):
    """
    Persistent bug store.

    Args:
        engine: Async engine (see bugtracker.database.build_engine)
        session_factory: Optional factory; built from the engine when omitted
    """

    def __init__(
        self,
        engine: AsyncEngine,
        session_factory: Optional[async_sessionmaker[AsyncSession]] = None,
    ):
        self.engine = engine
        self.session_factory = session_factory or build_session_factory(engine)

    async def create_schema(self) -> None:
        """Create the `bugs` table if it does not exist (metadata.create_all)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Store schema ensured (tables: %s)", ", ".join(Base.metadata.tables))

    async def insert(self, fields: Dict[str, Any]) -> BugRecord:
        async with self.session_factory() as session:
            bug = Bug(**writable(fields))
            session.add(bug)
            await session.commit()
            return _to_record(bug)

    async def find_all(self) -> List[BugRecord]:
        async with self.session_factory() as session:
            result = await session.execute(select(Bug))
            return [_to_record(bug) for bug in result.scalars().all()]

    async def update(self, bug_id: str, fields: Dict[str, Any]) -> Optional[BugRecord]:
        key = _parse_id(bug_id)
        if key is None:
            return None

        async with self.session_factory() as session:
            bug = await session.get(Bug, key)
            if bug is None:
                return None
            for column, value in writable(fields).items():
                setattr(bug, column, value)
            await session.commit()
            return _to_record(bug)

    async def delete(self, bug_id: str) -> bool:
        key = _parse_id(bug_id)
        if key is None:
            return False

        async with self.session_factory() as session:
            result = await session.execute(delete(Bug).where(Bug.id == key))
            await session.commit()
            return result.rowcount > 0

    async def ping(self) -> bool:
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("Store ping failed: %s", str(e))
            return False

    async def close(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()
