"""
Bug Tracker Backend — Test Configuration (conftest.py)
========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── memory_store: Fresh InMemoryBugStore
    ├── sql_store: SQLAlchemyBugStore on an in-memory SQLite database
    ├── store: Parametrized over both backends (contract tests)
    ├── mock_store: AsyncMock with the BugStore interface (failure injection)
    ├── test_client: HTTPX AsyncClient serving memory_store
    └── make_client: Builds a client around any store (e.g. a failing mock)
"""

import os

# Override settings for testing BEFORE any bugtracker imports
os.environ["STORE_BACKEND"] = "memory"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from bugtracker.store import BugStore, InMemoryBugStore, SQLAlchemyBugStore, get_bug_store


@pytest.fixture
def memory_store():
    return InMemoryBugStore()


@pytest_asyncio.fixture
async def sql_store():
    """
    SQLAlchemyBugStore against a private in-memory SQLite database.

    StaticPool keeps one connection, so every session sees the same database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    store = SQLAlchemyBugStore(engine)
    await store.create_schema()
    yield store
    await store.close()


@pytest.fixture(params=["memory", "sql"])
def store(request, memory_store, sql_store):
    """Runs a test once per backend."""
    return memory_store if request.param == "memory" else sql_store


@pytest.fixture
def mock_store():
    """
    A BugStore whose coroutines are AsyncMocks.

    Usage:
        mock_store.find_all.side_effect = ConnectionError("db down")
    """
    return AsyncMock(spec=BugStore)


@pytest.fixture
def make_client():
    """
    Factory for HTTPX clients talking to the app with a given store injected.

    The store replaces the get_bug_store dependency, so the lifespan (and the
    real database) is never involved.
    """
    from bugtracker.main import app

    def _make(bug_store: BugStore) -> AsyncClient:
        app.dependency_overrides[get_bug_store] = lambda: bug_store
        transport = ASGITransport(app=app)
        return AsyncClient(transport=transport, base_url="http://test")

    yield _make
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_client(make_client, memory_store):
    """
    HTTPX AsyncClient serving a fresh in-memory store.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/bugs")
            assert response.status_code == 200
    """
    async with make_client(memory_store) as client:
        yield client
