from pydantic import BaseModel, Field, model_validator
from typing import Optional, List, Dict
from datetime import datetime, timezone

from packpal.core.permissions import Role


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def dates_in_order(start: Optional[datetime], end: Optional[datetime]) -> bool:
    if start is None or end is None:
        return True
    return _as_utc(end) >= _as_utc(start)


class EventCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    template: Optional[str] = None  # premade template name to seed categories and items

    @model_validator(mode="after")
    def end_after_start(self):
        if not dates_in_order(self.start_date, self.end_date):
            raise ValueError("end_date must not be before start_date")
        return self


class EventUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


class EventResponse(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    invite_code: str
    created_by: str
    user_roles: Dict[str, Role] = {}
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class JoinEventRequest(BaseModel):
    invite_code: str = Field(min_length=6)


class JoinEventResponse(BaseModel):
    event_id: str
    event_name: str
    role: Role
    message: str


class EventExport(BaseModel):
    event: EventResponse
    categories: List[dict]
    items: List[dict]
    members: List[dict]
    exported_at: datetime
