"""
Permission model: role -> capability set, capability set -> allow/deny.

Pure functions over the static matrix in ``permissions_config``. Role values
come from stored event data, so anything outside the enumeration is denied
instead of raising.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Optional

from packpal.config.permissions_config import ROLES


class Role(str, Enum):
    OWNER = "owner"
    ADMIN = "admin"
    MEMBER = "member"
    VIEWER = "viewer"


class Capability(str, Enum):
    MANAGE_USERS = "manage_users"
    EDIT_ITEMS = "edit_items"
    DELETE_ITEMS = "delete_items"
    MANAGE_SETTINGS = "manage_settings"
    VIEW_PRIVATE_ITEMS = "view_private_items"
    ADD_ITEMS = "add_items"
    EXPORT_DATA = "export_data"
    MANAGE_TEMPLATES = "manage_templates"


@dataclass(frozen=True)
class CapabilitySet:
    manage_users: bool = False
    edit_items: bool = False
    delete_items: bool = False
    manage_settings: bool = False
    view_private_items: bool = False
    add_items: bool = False
    export_data: bool = False
    manage_templates: bool = False

    def allows(self, capability: Any) -> bool:
        name = capability.value if isinstance(capability, Capability) else capability
        if name not in _CAPABILITY_NAMES:
            return False
        return getattr(self, name)

    def as_dict(self) -> Dict[str, bool]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


_CAPABILITY_NAMES = frozenset(f.name for f in fields(CapabilitySet))

NO_CAPABILITIES = CapabilitySet()

# Built once from config; every role maps to exactly one capability set
ROLE_CAPABILITIES: Dict[Role, CapabilitySet] = {
    Role(role_name): CapabilitySet(**{name: True for name in role_config["capabilities"]})
    for role_name, role_config in ROLES.items()
}


def parse_role(value: Any) -> Optional[Role]:
    """Return the Role for a stored value, or None for anything unknown."""
    if isinstance(value, Role):
        return value
    try:
        return Role(value)
    except (ValueError, TypeError):
        return None


def capabilities_for(role: Any) -> CapabilitySet:
    role = parse_role(role)
    if role is None:
        return NO_CAPABILITIES
    return ROLE_CAPABILITIES[role]


def has_capability(role: Any, capability: Any) -> bool:
    return capabilities_for(role).allows(capability)
