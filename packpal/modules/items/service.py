import logging
from typing import List, Optional

from packpal.core.access import (
    authorize, can_delete_item, can_update_item, enforce, is_member, require_member
)
from packpal.core.exceptions import NotFoundError, ValidationError
from packpal.core.permissions import Capability
from packpal.database.store import CATEGORIES, ITEMS, Store, utcnow
from packpal.modules.events.schemas import EventResponse
from packpal.modules.events.service import get_event_or_404
from packpal.modules.items.schemas import ItemCreate, ItemUpdate, ItemResponse
from packpal.modules.items.status import Direction, next_status
from packpal.realtime.broadcaster import ChangeBroadcaster, ChangeType

logger = logging.getLogger(__name__)


async def get_item_or_404(store: Store, item_id: str) -> ItemResponse:
    row = await store.get(ITEMS, item_id)
    if row is None:
        raise NotFoundError("Item not found")
    return ItemResponse(**row)


class ItemService:
    def __init__(self, store: Store, broadcaster: ChangeBroadcaster):
        self.store = store
        self.broadcaster = broadcaster

    async def _check_category(self, event_id: str, category_id: str) -> None:
        category = await self.store.get(CATEGORIES, category_id)
        if category is None or category["event_id"] != event_id:
            raise ValidationError("Invalid category")

    @staticmethod
    def _check_assignee(event: EventResponse, assigned_to: Optional[str]) -> None:
        if assigned_to is not None and not is_member(event, assigned_to):
            raise ValidationError("Items can only be assigned to event members")

    async def list_items(
        self, event_id: str, user_id: str, assigned_to: Optional[str] = None
    ) -> List[ItemResponse]:
        event = await get_event_or_404(self.store, event_id)
        require_member(event, user_id, "view this event's items")
        filters = {"event_id": event_id}
        if assigned_to is not None:
            filters["assigned_to"] = assigned_to
        rows = await self.store.list(ITEMS, filters)
        return [ItemResponse(**row) for row in rows]

    async def get_item(self, item_id: str, user_id: str) -> ItemResponse:
        item = await get_item_or_404(self.store, item_id)
        event = await get_event_or_404(self.store, item.event_id)
        require_member(event, user_id, "view this item")
        return item

    async def create_item(self, event_id: str, item_data: ItemCreate, user_id: str) -> ItemResponse:
        """Create an item (requires add_items)"""
        event = await get_event_or_404(self.store, event_id)
        enforce(authorize(event, user_id, Capability.ADD_ITEMS), "add items to this event")
        await self._check_category(event_id, item_data.category_id)
        self._check_assignee(event, item_data.assigned_to)

        now = utcnow()
        row = await self.store.create(ITEMS, {
            **item_data.model_dump(mode="json"),
            "event_id": event_id,
            "created_by": user_id,
            "created_at": now,
            "updated_at": now
        })
        item = ItemResponse(**row)
        await self.broadcaster.publish(event_id, ChangeType.ITEM_CREATED, item, actor_id=user_id)
        return item

    async def update_item(self, item_id: str, item_data: ItemUpdate, user_id: str) -> ItemResponse:
        """Update an item (edit_items, or its assignee or creator)"""
        item = await get_item_or_404(self.store, item_id)
        event = await get_event_or_404(self.store, item.event_id)
        enforce(can_update_item(event, user_id, item), "update this item")

        update_data = item_data.model_dump(mode="json", exclude_unset=True)
        for field in ("category_id", "name", "quantity", "status"):
            if field in update_data and update_data[field] is None:
                del update_data[field]
        if "category_id" in update_data and update_data["category_id"] != item.category_id:
            await self._check_category(item.event_id, update_data["category_id"])
        if "assigned_to" in update_data:
            self._check_assignee(event, update_data["assigned_to"])
        if not update_data:
            return item
        return await self._apply(item, update_data, user_id)

    async def transition_item(self, item_id: str, direction: Direction, user_id: str) -> ItemResponse:
        """Move an item along to_pack -> packed -> delivered, or back to to_pack"""
        item = await get_item_or_404(self.store, item_id)
        event = await get_event_or_404(self.store, item.event_id)
        enforce(can_update_item(event, user_id, item), "update this item")
        status = next_status(item.status, direction)
        if status == item.status:
            return item
        return await self._apply(item, {"status": status.value}, user_id)

    async def check_item(self, item_id: str, user_id: str) -> ItemResponse:
        return await self.transition_item(item_id, Direction.CHECK, user_id)

    async def uncheck_item(self, item_id: str, user_id: str) -> ItemResponse:
        return await self.transition_item(item_id, Direction.UNCHECK, user_id)

    async def _apply(self, item: ItemResponse, update_data: dict, user_id: str) -> ItemResponse:
        update_data["updated_at"] = utcnow()
        row = await self.store.update(ITEMS, item.id, update_data)
        if row is None:
            raise NotFoundError("Item not found")
        updated = ItemResponse(**row)
        await self.broadcaster.publish(
            item.event_id, ChangeType.ITEM_UPDATED, updated, actor_id=user_id, previous=item
        )
        return updated

    async def delete_item(self, item_id: str, user_id: str) -> bool:
        """Delete an item (delete_items, or its creator)"""
        item = await get_item_or_404(self.store, item_id)
        event = await get_event_or_404(self.store, item.event_id)
        enforce(can_delete_item(event, user_id, item), "delete this item")

        deleted = await self.store.delete(ITEMS, item_id)
        if not deleted:
            raise NotFoundError("Item not found")
        await self.broadcaster.publish(item.event_id, ChangeType.ITEM_DELETED, {"id": item_id}, actor_id=user_id)
        return True
