import logging
from typing import List, Optional

from packpal.core.access import authorize, enforce, require_member
from packpal.core.exceptions import NotFoundError, ValidationError
from packpal.core.permissions import Capability
from packpal.database.store import CATEGORIES, ITEMS, Store, utcnow
from packpal.modules.categories.schemas import CategoryCreate, CategoryUpdate, CategoryResponse
from packpal.modules.events.service import get_event_or_404
from packpal.realtime.broadcaster import ChangeBroadcaster, ChangeType

logger = logging.getLogger(__name__)


async def get_category_or_404(store: Store, category_id: str) -> CategoryResponse:
    row = await store.get(CATEGORIES, category_id)
    if row is None:
        raise NotFoundError("Category not found")
    return CategoryResponse(**row)


class CategoryService:
    def __init__(self, store: Store, broadcaster: ChangeBroadcaster):
        self.store = store
        self.broadcaster = broadcaster

    async def list_categories(self, event_id: str, user_id: str) -> List[CategoryResponse]:
        event = await get_event_or_404(self.store, event_id)
        require_member(event, user_id, "view this event's categories")
        rows = await self.store.list(CATEGORIES, {"event_id": event_id})
        return [CategoryResponse(**row) for row in rows]

    async def create_category(self, event_id: str, category_data: CategoryCreate, user_id: str) -> CategoryResponse:
        """Create a category (requires add_items)"""
        event = await get_event_or_404(self.store, event_id)
        enforce(authorize(event, user_id, Capability.ADD_ITEMS), "add categories to this event")

        row = await self.store.create(CATEGORIES, {
            "event_id": event_id,
            "name": category_data.name,
            "description": category_data.description,
            "color": category_data.color
        })
        category = CategoryResponse(**row)
        await self.broadcaster.publish(event_id, ChangeType.CATEGORY_CREATED, category, actor_id=user_id)
        return category

    async def update_category(self, category_id: str, category_data: CategoryUpdate, user_id: str) -> CategoryResponse:
        """Update a category (requires edit_items)"""
        category = await get_category_or_404(self.store, category_id)
        event = await get_event_or_404(self.store, category.event_id)
        enforce(authorize(event, user_id, Capability.EDIT_ITEMS), "update this category")

        update_data = {}
        if category_data.name:
            update_data["name"] = category_data.name
        if category_data.description is not None:
            update_data["description"] = category_data.description
        if category_data.color is not None:
            update_data["color"] = category_data.color
        if not update_data:
            return category
        update_data["updated_at"] = utcnow()

        row = await self.store.update(CATEGORIES, category_id, update_data)
        if row is None:
            raise NotFoundError("Category not found")
        updated = CategoryResponse(**row)
        await self.broadcaster.publish(
            category.event_id, ChangeType.CATEGORY_UPDATED, updated, actor_id=user_id, previous=category
        )
        return updated

    async def delete_category(self, category_id: str, user_id: str, reassign_to: Optional[str] = None) -> bool:
        """Delete a category (requires delete_items).

        Its items are deleted with it, or moved to ``reassign_to`` when given.
        """
        category = await get_category_or_404(self.store, category_id)
        event = await get_event_or_404(self.store, category.event_id)
        enforce(authorize(event, user_id, Capability.DELETE_ITEMS), "delete this category")

        moved = []
        if reassign_to is not None:
            if reassign_to == category_id:
                raise ValidationError("Cannot reassign items to the category being deleted")
            target = await self.store.get(CATEGORIES, reassign_to)
            if target is None or target["event_id"] != category.event_id:
                raise ValidationError("Invalid category")
            for item in await self.store.list(ITEMS, {"category_id": category_id}):
                row = await self.store.update(ITEMS, item["id"], {
                    "category_id": reassign_to,
                    "updated_at": utcnow()
                })
                if row is not None:
                    moved.append(row)
        else:
            removed = await self.store.delete_where(ITEMS, {"category_id": category_id})
            logger.info(f"Deleted {removed} item(s) with category {category_id}")

        deleted = await self.store.delete(CATEGORIES, category_id)
        if not deleted:
            raise NotFoundError("Category not found")

        for row in moved:
            await self.broadcaster.publish(category.event_id, ChangeType.ITEM_UPDATED, row, actor_id=user_id)
        await self.broadcaster.publish(
            category.event_id, ChangeType.CATEGORY_DELETED, {"id": category_id}, actor_id=user_id
        )
        return True
