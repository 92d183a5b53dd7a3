"""
Bug Tracker Backend — Store Contract Tests
============================================

What:  The same BugStore contract checked against every backend.
How:   The `store` fixture is parametrized over InMemoryBugStore and
       SQLAlchemyBugStore (in-memory SQLite through aiosqlite).
"""

import uuid

import pytest

from bugtracker.config import Settings
from bugtracker.store import InMemoryBugStore, SQLAlchemyBugStore, create_store


class TestStoreContract:

    @pytest.mark.asyncio
    async def test_insert_assigns_id(self, store):
        record = await store.insert({"title": "t", "description": "d", "status": "open"})

        assert record.id
        assert (record.title, record.description, record.status) == ("t", "d", "open")

    @pytest.mark.asyncio
    async def test_insert_defaults_status(self, store):
        record = await store.insert({"title": "t"})
        assert record.status == "open"

    @pytest.mark.asyncio
    async def test_insert_ignores_id_key(self, store):
        record = await store.insert({"id": "mine", "title": "t"})
        assert record.id != "mine"

    @pytest.mark.asyncio
    async def test_find_all_returns_inserted(self, store):
        first = await store.insert({"title": "a", "status": "open"})
        second = await store.insert({"title": "b", "status": "open"})

        records = await store.find_all()

        assert sorted(r.id for r in records) == sorted([first.id, second.id])

    @pytest.mark.asyncio
    async def test_update_merges_supplied_fields(self, store):
        record = await store.insert({"title": "t", "description": "d", "status": "open"})

        updated = await store.update(record.id, {"status": "resolved"})

        assert updated.id == record.id
        assert updated.status == "resolved"
        assert updated.title == "t"
        assert updated.description == "d"

    @pytest.mark.asyncio
    async def test_update_persists(self, store):
        record = await store.insert({"title": "t", "status": "open"})
        await store.update(record.id, {"title": "new"})

        (stored,) = await store.find_all()

        assert stored.title == "new"

    @pytest.mark.asyncio
    async def test_update_cannot_change_id(self, store):
        record = await store.insert({"title": "t", "status": "open"})

        updated = await store.update(record.id, {"id": "other", "title": "x"})

        assert updated.id == record.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bug_id", [str(uuid.uuid4()), "not-a-uuid", ""])
    async def test_update_unknown_id_returns_none(self, store, bug_id):
        assert await store.update(bug_id, {"status": "x"}) is None

    @pytest.mark.asyncio
    async def test_delete_reports_removal(self, store):
        record = await store.insert({"title": "t", "status": "open"})

        assert await store.delete(record.id) is True
        assert await store.delete(record.id) is False
        assert await store.find_all() == []

    @pytest.mark.asyncio
    async def test_delete_malformed_id_is_false(self, store):
        assert await store.delete("not-a-uuid") is False

    @pytest.mark.asyncio
    async def test_ping(self, store):
        assert await store.ping() is True


class TestSQLStore:

    @pytest.mark.asyncio
    async def test_ids_are_uuid_strings(self, sql_store):
        record = await sql_store.insert({"title": "t"})
        assert str(uuid.UUID(record.id)) == record.id


class TestCreateStore:

    @pytest.mark.asyncio
    async def test_memory_backend(self):
        store = await create_store(Settings(store_backend="memory"))
        assert isinstance(store, InMemoryBugStore)

    @pytest.mark.asyncio
    async def test_sql_backend_creates_schema(self, tmp_path):
        config = Settings(
            store_backend="sql",
            database_url=f"sqlite+aiosqlite:///{tmp_path / 'bugs.db'}",
            create_schema_on_startup=True,
        )

        store = await create_store(config)
        try:
            assert isinstance(store, SQLAlchemyBugStore)
            record = await store.insert({"title": "persisted"})
            assert [r.id for r in await store.find_all()] == [record.id]
        finally:
            await store.close()
