"""
MemoryStore behaviour shared by every service.
"""

import asyncio

import pytest

from packpal.core.exceptions import ConflictError, StorageError
from packpal.database.store import EVENT_MEMBERS, ITEMS, POLL_VOTES, MemoryStore


class TestMemoryStore:
    """CRUD, filters and unique constraints"""

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_timestamp(self, store):
        row = await store.create(ITEMS, {"name": "Tent"})
        assert row["id"]
        assert row["created_at"]
        assert await store.get(ITEMS, row["id"]) == row

    @pytest.mark.asyncio
    async def test_rows_are_copies(self, store):
        row = await store.create(ITEMS, {"name": "Tent", "tags": ["a"]})
        row["tags"].append("b")
        assert (await store.get(ITEMS, row["id"]))["tags"] == ["a"]

    @pytest.mark.asyncio
    async def test_list_filters(self, store):
        await store.create(ITEMS, {"event_id": "e1", "name": "Tent"})
        await store.create(ITEMS, {"event_id": "e2", "name": "Stove"})
        rows = await store.list(ITEMS, {"event_id": "e1"})
        assert [r["name"] for r in rows] == ["Tent"]
        assert await store.count(ITEMS) == 2

    @pytest.mark.asyncio
    async def test_update_and_delete(self, store):
        row = await store.create(ITEMS, {"name": "Tent"})
        updated = await store.update(ITEMS, row["id"], {"name": "Big tent"})
        assert updated["name"] == "Big tent"
        assert await store.update(ITEMS, "missing", {"name": "x"}) is None
        assert await store.delete(ITEMS, row["id"]) == 1
        assert await store.delete(ITEMS, row["id"]) == 0

    @pytest.mark.asyncio
    async def test_delete_where(self, store):
        for name in ("a", "b"):
            await store.create(ITEMS, {"category_id": "c1", "name": name})
        await store.create(ITEMS, {"category_id": "c2", "name": "c"})
        assert await store.delete_where(ITEMS, {"category_id": "c1"}) == 2
        assert await store.count(ITEMS) == 1

    @pytest.mark.asyncio
    async def test_unique_membership(self, store):
        await store.create(EVENT_MEMBERS, {"event_id": "e1", "user_id": "bob", "role": "member"})
        with pytest.raises(ConflictError):
            await store.create(EVENT_MEMBERS, {"event_id": "e1", "user_id": "bob", "role": "viewer"})
        await store.create(EVENT_MEMBERS, {"event_id": "e2", "user_id": "bob", "role": "member"})

    @pytest.mark.asyncio
    async def test_concurrent_votes_single_winner(self, store):
        results = await asyncio.gather(
            *[store.create(POLL_VOTES, {"poll_id": "p1", "user_id": "bob", "option_id": "o"}) for _ in range(5)],
            return_exceptions=True
        )
        assert sum(1 for r in results if isinstance(r, dict)) == 1
        assert all(isinstance(r, ConflictError) for r in results if not isinstance(r, dict))

    @pytest.mark.asyncio
    async def test_unknown_entity(self):
        with pytest.raises(StorageError):
            await MemoryStore().get("spaceships", "1")
