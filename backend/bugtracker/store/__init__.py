# Store package init
"""
Bug Tracker Backend — Store Layer
===================================

What:  Persistence for bug records behind the BugStore interface.
How:   create_store() builds the backend named by settings.store_backend.
       The lifespan in main.py calls it once and keeps the handle on
       app.state.store; routes receive it through get_bug_store().

Store Inventory:
    - BugStore (abstract): Contract every backend implements
    - SQLAlchemyBugStore: Async SQLAlchemy (default)
    - InMemoryBugStore: Process-local dict
"""

import logging

from fastapi import Request

from bugtracker.config import Settings
from bugtracker.database import build_engine
from bugtracker.store.base import BugRecord, BugStore
from bugtracker.store.memory import InMemoryBugStore
from bugtracker.store.sql import SQLAlchemyBugStore

logger = logging.getLogger(__name__)

__all__ = [
    "BugRecord",
    "BugStore",
    "InMemoryBugStore",
    "SQLAlchemyBugStore",
    "create_store",
    "get_bug_store",
]


async def create_store(config: Settings) -> BugStore:
    """
    Build the store selected by `config.store_backend`.

    For the SQL backend this creates the engine (the process's single
    connection pool) and, when create_schema_on_startup is set, the table.
    """
    if config.store_backend == "memory":
        logger.info("Using in-memory bug store (data is not persisted)")
        return InMemoryBugStore()

    store = SQLAlchemyBugStore(build_engine(config))
    logger.info("Using SQL bug store: %s", store.engine.url.render_as_string(hide_password=True))
    if config.create_schema_on_startup:
        await store.create_schema()
    return store


def get_bug_store(request: Request) -> BugStore:
    """
    FastAPI dependency returning the process-wide store handle.

    Tests replace it with app.dependency_overrides[get_bug_store].
    """
    return request.app.state.store
