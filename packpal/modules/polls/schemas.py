from enum import Enum
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime


class PollStatus(str, Enum):
    ACTIVE = "active"
    CLOSED = "closed"


class PollCreate(BaseModel):
    event_id: str
    item_id: Optional[str] = None
    question: str = Field(..., min_length=1, max_length=500)
    options: List[str] = Field(..., min_length=2, max_length=20)

    @field_validator("options")
    @classmethod
    def options_not_blank(cls, value: List[str]) -> List[str]:
        options = [option.strip() for option in value]
        if any(not option for option in options):
            raise ValueError("Poll options cannot be empty")
        if len(set(options)) != len(options):
            raise ValueError("Poll options must be unique")
        return options


class PollOption(BaseModel):
    id: str
    text: str
    votes: int = 0


class PollResponse(BaseModel):
    id: str
    event_id: str
    item_id: Optional[str] = None
    question: str
    options: List[PollOption]
    status: PollStatus = PollStatus.ACTIVE
    created_by: str
    created_at: Optional[datetime] = None
    closed_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class VoteRequest(BaseModel):
    option_id: str
