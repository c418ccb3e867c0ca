from enum import Enum
from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class NotificationType(str, Enum):
    ITEM_STATUS_CHANGED = "item_status_changed"
    ITEM_ASSIGNED = "item_assigned"
    ITEM_CREATED = "item_created"
    MEMBER_JOINED = "member_joined"
    MEMBER_ROLE_CHANGED = "member_role_changed"
    POLL_CREATED = "poll_created"
    POLL_CLOSED = "poll_closed"


class NotificationResponse(BaseModel):
    id: str
    user_id: str
    event_id: Optional[str] = None
    item_id: Optional[str] = None
    type: NotificationType
    title: str
    message: str
    read: bool = False
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
