"""
Bug Tracker Backend — Database Engine Management
==================================================

What:  Async SQLAlchemy engine factory, session factory, and declarative base.
How:   build_engine() creates an async engine with connection pooling sized
       from settings; build_session_factory() binds sessions to it.
Who:   Used by SQLAlchemyBugStore (one engine per process) and Alembic.
When:  The engine is built once, when the store is created in the app lifespan.

Connection Pooling Strategy:
    pool_size=10:      Persistent connections for normal load
    max_overflow=5:    Temporary connections for traffic spikes (total max = 15)
    pool_pre_ping:     Validates connections before use (catches stale connections)
    pool_recycle=3600: Recycles connections every hour

    SQLite URLs get none of these: aiosqlite uses its own pool classes
    which reject queue-pool arguments.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from bugtracker.config import Settings


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object, read by Alembic for migrations and by
    SQLAlchemyBugStore.create_schema() for create_all().
    """
    pass


# ── Engine Configuration ──────────────────────────────────────────────────
def build_engine(config: Settings) -> AsyncEngine:
    """
    Create the async engine described by `config`.

    Args:
        config: Application settings (database_url, pool sizing, log level)

    Returns:
        AsyncEngine managing the connection pool
    """
    options = {
        # Echo SQL in DEBUG mode only
        "echo": config.log_level == "DEBUG",
    }
    if not config.is_sqlite:
        options.update(
            pool_size=config.db_pool_size,
            max_overflow=config.db_max_overflow,
            pool_pre_ping=config.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return create_async_engine(config.database_url, **options)


# ── Session Factory ───────────────────────────────────────────────────────
def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Create the session factory used for each store operation.

    expire_on_commit=False keeps attributes readable after commit, so records
    can be converted to BugRecord values once the transaction is done.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
