from pydantic import BaseModel
from typing import Optional, Dict, Any, List


class CurrentUserResponse(BaseModel):
    id: str
    email: Optional[str] = None
    user_metadata: Dict[str, Any] = {}


class CapabilityInfo(BaseModel):
    name: str
    description: str


class RoleCapabilities(BaseModel):
    name: str
    description: str
    capabilities: Dict[str, bool]


class CapabilityMatrixResponse(BaseModel):
    capabilities: List[CapabilityInfo]
    roles: List[RoleCapabilities]
