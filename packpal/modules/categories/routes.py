from fastapi import APIRouter, Depends
from packpal.modules.categories.schemas import CategoryCreate, CategoryUpdate, CategoryResponse
from packpal.modules.categories.service import CategoryService
from packpal.core.dependencies import get_current_user, get_store, get_broadcaster
from packpal.database.store import Store
from packpal.realtime.broadcaster import ChangeBroadcaster
from typing import List, Optional, Dict

router = APIRouter(tags=["categories"])


def get_category_service(
    store: Store = Depends(get_store),
    broadcaster: ChangeBroadcaster = Depends(get_broadcaster)
) -> CategoryService:
    return CategoryService(store, broadcaster)


@router.get("/events/{event_id}/categories", response_model=List[CategoryResponse])
async def list_categories(
    event_id: str,
    user_data: Dict = Depends(get_current_user),
    service: CategoryService = Depends(get_category_service)
):
    """List categories of an event (members only)"""
    return await service.list_categories(event_id, user_data["id"])


@router.post("/events/{event_id}/categories", response_model=CategoryResponse, status_code=201)
async def create_category(
    event_id: str,
    category_data: CategoryCreate,
    user_data: Dict = Depends(get_current_user),
    service: CategoryService = Depends(get_category_service)
):
    """Create a category (requires add_items)"""
    return await service.create_category(event_id, category_data, user_data["id"])


@router.put("/categories/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: str,
    category_data: CategoryUpdate,
    user_data: Dict = Depends(get_current_user),
    service: CategoryService = Depends(get_category_service)
):
    """Update a category (requires edit_items)"""
    return await service.update_category(category_id, category_data, user_data["id"])


@router.delete("/categories/{category_id}", status_code=204)
async def delete_category(
    category_id: str,
    reassign_to: Optional[str] = None,
    user_data: Dict = Depends(get_current_user),
    service: CategoryService = Depends(get_category_service)
):
    """Delete a category and its items, or move the items to reassign_to (requires delete_items)"""
    await service.delete_category(category_id, user_data["id"], reassign_to=reassign_to)
    return None
