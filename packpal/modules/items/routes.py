from fastapi import APIRouter, Depends
from packpal.modules.items.schemas import ItemCreate, ItemUpdate, ItemResponse
from packpal.modules.items.service import ItemService
from packpal.core.dependencies import get_current_user, get_store, get_broadcaster
from packpal.database.store import Store
from packpal.realtime.broadcaster import ChangeBroadcaster
from typing import List, Optional, Dict

router = APIRouter(tags=["items"])


def get_item_service(
    store: Store = Depends(get_store),
    broadcaster: ChangeBroadcaster = Depends(get_broadcaster)
) -> ItemService:
    return ItemService(store, broadcaster)


@router.get("/events/{event_id}/items", response_model=List[ItemResponse])
async def list_items(
    event_id: str,
    assigned_to: Optional[str] = None,
    user_data: Dict = Depends(get_current_user),
    service: ItemService = Depends(get_item_service)
):
    """List items of an event, optionally only those assigned to one member"""
    return await service.list_items(event_id, user_data["id"], assigned_to=assigned_to)


@router.post("/events/{event_id}/items", response_model=ItemResponse, status_code=201)
async def create_item(
    event_id: str,
    item_data: ItemCreate,
    user_data: Dict = Depends(get_current_user),
    service: ItemService = Depends(get_item_service)
):
    """Create an item (requires add_items)"""
    return await service.create_item(event_id, item_data, user_data["id"])


@router.get("/items/{item_id}", response_model=ItemResponse)
async def get_item(
    item_id: str,
    user_data: Dict = Depends(get_current_user),
    service: ItemService = Depends(get_item_service)
):
    return await service.get_item(item_id, user_data["id"])


@router.put("/items/{item_id}", response_model=ItemResponse)
async def update_item(
    item_id: str,
    item_data: ItemUpdate,
    user_data: Dict = Depends(get_current_user),
    service: ItemService = Depends(get_item_service)
):
    """Update an item (edit_items, or the item's assignee or creator)"""
    return await service.update_item(item_id, item_data, user_data["id"])


@router.post("/items/{item_id}/check", response_model=ItemResponse)
async def check_item(
    item_id: str,
    user_data: Dict = Depends(get_current_user),
    service: ItemService = Depends(get_item_service)
):
    """Advance the item status: to_pack -> packed -> delivered"""
    return await service.check_item(item_id, user_data["id"])


@router.post("/items/{item_id}/uncheck", response_model=ItemResponse)
async def uncheck_item(
    item_id: str,
    user_data: Dict = Depends(get_current_user),
    service: ItemService = Depends(get_item_service)
):
    """Reset the item status to to_pack"""
    return await service.uncheck_item(item_id, user_data["id"])


@router.delete("/items/{item_id}", status_code=204)
async def delete_item(
    item_id: str,
    user_data: Dict = Depends(get_current_user),
    service: ItemService = Depends(get_item_service)
):
    """Delete an item (delete_items, or the item's creator)"""
    await service.delete_item(item_id, user_data["id"])
    return None
