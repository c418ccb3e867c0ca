"""
Category operations, including delete with cascade or reassignment.
"""

import pytest

from packpal.core.exceptions import ForbiddenError, ValidationError
from packpal.database.store import CATEGORIES, ITEMS
from packpal.modules.categories.schemas import CategoryCreate, CategoryUpdate
from packpal.modules.items.schemas import ItemCreate
from packpal.realtime.broadcaster import ChangeType


async def seed(services, event, names=("Gear", "Food")):
    categories = [
        await services.categories.create_category(event.id, CategoryCreate(name=name), "alice")
        for name in names
    ]
    for index, category in enumerate(categories):
        await services.items.create_item(
            event.id, ItemCreate(category_id=category.id, name=f"thing {index}"), "alice"
        )
    return categories


class TestCategories:
    @pytest.mark.asyncio
    async def test_member_creates_category(self, services, event_factory, registry, socket_factory):
        event = await event_factory(members={"bob": "member"})
        socket = socket_factory()
        registry.subscribe(registry.add(socket), event.id)

        category = await services.categories.create_category(
            event.id, CategoryCreate(name="Gear", color="#00ff00"), "bob"
        )

        assert category.event_id == event.id
        assert socket.sent[0]["type"] == ChangeType.CATEGORY_CREATED.value
        assert socket.sent[0]["payload"]["id"] == category.id

    @pytest.mark.asyncio
    async def test_viewer_cannot_create(self, services, event_factory):
        event = await event_factory(members={"vic": "viewer"})
        with pytest.raises(ForbiddenError):
            await services.categories.create_category(event.id, CategoryCreate(name="Gear"), "vic")

    def test_color_must_be_hex(self):
        with pytest.raises(ValueError):
            CategoryCreate(name="Gear", color="green")

    @pytest.mark.asyncio
    async def test_update(self, services, event_factory):
        event = await event_factory(members={"bob": "member"})
        category = await services.categories.create_category(event.id, CategoryCreate(name="Gear"), "alice")
        updated = await services.categories.update_category(category.id, CategoryUpdate(name="Kit"), "bob")
        assert updated.name == "Kit"

    @pytest.mark.asyncio
    async def test_member_cannot_delete(self, services, event_factory):
        event = await event_factory(members={"bob": "member"})
        gear, _ = await seed(services, event)
        with pytest.raises(ForbiddenError):
            await services.categories.delete_category(gear.id, "bob")

    @pytest.mark.asyncio
    async def test_delete_cascades_items(self, services, event_factory, store):
        event = await event_factory()
        gear, food = await seed(services, event)

        await services.categories.delete_category(gear.id, "alice")

        assert await store.get(CATEGORIES, gear.id) is None
        assert await store.list(ITEMS, {"category_id": gear.id}) == []
        assert len(await store.list(ITEMS, {"category_id": food.id})) == 1

    @pytest.mark.asyncio
    async def test_delete_with_reassign(self, services, event_factory, store, registry, socket_factory):
        event = await event_factory()
        gear, food = await seed(services, event)
        socket = socket_factory()
        registry.subscribe(registry.add(socket), event.id)

        await services.categories.delete_category(gear.id, "alice", reassign_to=food.id)

        assert len(await store.list(ITEMS, {"category_id": food.id})) == 2
        assert [m["type"] for m in socket.sent] == ["item_updated", "category_deleted"]
        assert socket.sent[-1]["payload"] == {"id": gear.id}

    @pytest.mark.asyncio
    async def test_reassign_to_other_event_rejected(self, services, event_factory):
        event = await event_factory()
        other = await event_factory(name="Other")
        gear, _ = await seed(services, event)
        (foreign,) = await seed(services, other, names=("Foreign",))
        with pytest.raises(ValidationError):
            await services.categories.delete_category(gear.id, "alice", reassign_to=foreign.id)
