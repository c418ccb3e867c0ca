from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from packpal.modules.items.status import ItemStatus


class ItemCreate(BaseModel):
    category_id: str
    name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    quantity: int = Field(default=1, ge=1)
    status: ItemStatus = ItemStatus.TO_PACK
    assigned_to: Optional[str] = None
    notes: Optional[str] = None


class ItemUpdate(BaseModel):
    category_id: Optional[str] = None
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    quantity: Optional[int] = Field(default=None, ge=1)
    status: Optional[ItemStatus] = None
    assigned_to: Optional[str] = None  # explicit null unassigns
    notes: Optional[str] = None


class ItemResponse(BaseModel):
    id: str
    event_id: str
    category_id: str
    name: str
    description: Optional[str] = None
    quantity: int = 1
    status: ItemStatus = ItemStatus.TO_PACK
    assigned_to: Optional[str] = None
    notes: Optional[str] = None
    created_by: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
