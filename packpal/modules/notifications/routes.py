from fastapi import APIRouter, Depends
from packpal.modules.notifications.schemas import NotificationResponse
from packpal.modules.notifications.service import NotificationService
from packpal.core.dependencies import get_current_user, get_store
from packpal.database.store import Store
from typing import List, Dict

router = APIRouter(prefix="/notifications", tags=["notifications"])


def get_notification_service(store: Store = Depends(get_store)) -> NotificationService:
    return NotificationService(store)


@router.get("", response_model=List[NotificationResponse])
async def list_notifications(
    unread_only: bool = False,
    user_data: Dict = Depends(get_current_user),
    service: NotificationService = Depends(get_notification_service)
):
    """List the current user's notifications, newest first"""
    return await service.list_for_user(user_data["id"], unread_only=unread_only)


@router.post("/{notification_id}/read", response_model=NotificationResponse)
async def mark_read(
    notification_id: str,
    user_data: Dict = Depends(get_current_user),
    service: NotificationService = Depends(get_notification_service)
):
    return await service.mark_read(notification_id, user_data["id"])


@router.delete("/{notification_id}", status_code=204)
async def delete_notification(
    notification_id: str,
    user_data: Dict = Depends(get_current_user),
    service: NotificationService = Depends(get_notification_service)
):
    await service.delete_notification(notification_id, user_data["id"])
    return None
