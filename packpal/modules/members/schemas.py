from pydantic import BaseModel, Field
from datetime import datetime

from packpal.core.permissions import Role


class MemberAdd(BaseModel):
    user_id: str = Field(min_length=1)
    role: Role = Role.MEMBER


class MemberRoleUpdate(BaseModel):
    role: Role


class MemberResponse(BaseModel):
    id: str
    event_id: str
    user_id: str
    role: Role
    created_at: datetime

    class Config:
        from_attributes = True
