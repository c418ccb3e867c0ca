"""
Role resolution and the access guard for event-scoped operations.

``authorize`` is a pure check: it returns an ``AccessDecision`` and never
raises. Services call it before any write and turn a denial into
``ForbiddenError`` themselves. Denial reasons are safe to log; they never
contain another user's role.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from packpal.core.exceptions import ForbiddenError
from packpal.core.permissions import Capability, Role, has_capability, parse_role

logger = logging.getLogger(__name__)

NOT_A_MEMBER = "not a member"
INSUFFICIENT_PERMISSION = "insufficient permission"


@dataclass(frozen=True)
class AccessDecision:
    allowed: bool
    role: Optional[Role] = None
    reason: str = ""

    def __bool__(self) -> bool:
        return self.allowed


def _attr(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def role_of(event: Any, user_id: Optional[str]) -> Optional[Role]:
    """Effective role of user_id in event, None when not a member.

    The creator falls back to owner when the role map lacks an entry for them.
    """
    if not user_id:
        return None
    user_roles = _attr(event, "user_roles") or {}
    if user_id in user_roles:
        return parse_role(user_roles[user_id])
    if _attr(event, "created_by") == user_id:
        return Role.OWNER
    return None


def is_member(event: Any, user_id: Optional[str]) -> bool:
    return role_of(event, user_id) is not None


def authorize(event: Any, user_id: Optional[str], capability: Capability) -> AccessDecision:
    role = role_of(event, user_id)
    if role is None:
        return AccessDecision(False, None, NOT_A_MEMBER)
    if not has_capability(role, capability):
        return AccessDecision(False, role, INSUFFICIENT_PERMISSION)
    return AccessDecision(True, role)


def enforce(decision: AccessDecision, action: str) -> AccessDecision:
    """Raise ForbiddenError for a denied decision, pass an allowed one through."""
    if not decision.allowed:
        logger.warning("Access denied for %s: %s", action, decision.reason)
        raise ForbiddenError(f"Not authorized to {action}: {decision.reason}")
    return decision


def require_member(event: Any, user_id: Optional[str], action: str = "view this event") -> Role:
    role = role_of(event, user_id)
    if role is None:
        enforce(AccessDecision(False, None, NOT_A_MEMBER), action)
    return role


def count_owners(event: Any) -> int:
    user_roles = _attr(event, "user_roles") or {}
    return sum(1 for role in user_roles.values() if parse_role(role) == Role.OWNER)


# Special-case rules layered above the capability check

def can_delete_event(event: Any, user_id: Optional[str]) -> AccessDecision:
    """manage_settings AND (creator OR owner)."""
    decision = authorize(event, user_id, Capability.MANAGE_SETTINGS)
    if not decision:
        return decision
    if _attr(event, "created_by") == user_id or decision.role == Role.OWNER:
        return decision
    return AccessDecision(False, decision.role, "only the creator or an owner can delete the event")


def can_change_member_role(event: Any, user_id: Optional[str]) -> AccessDecision:
    """manage_users AND acting role is owner."""
    decision = authorize(event, user_id, Capability.MANAGE_USERS)
    if not decision:
        return decision
    if decision.role != Role.OWNER:
        return AccessDecision(False, decision.role, "only an owner can change member roles")
    return decision


def can_remove_member(event: Any, user_id: Optional[str], target_role: Optional[Role]) -> AccessDecision:
    """Removing someone else: manage_users, and removing an owner takes an owner."""
    decision = authorize(event, user_id, Capability.MANAGE_USERS)
    if not decision:
        return decision
    if target_role == Role.OWNER and decision.role != Role.OWNER:
        return AccessDecision(False, decision.role, "only an owner can remove an owner")
    return decision


def can_update_item(event: Any, user_id: Optional[str], item: Any) -> AccessDecision:
    """edit_items, or the item's assignee or creator."""
    decision = authorize(event, user_id, Capability.EDIT_ITEMS)
    if decision or decision.role is None:
        return decision
    if user_id in (_attr(item, "assigned_to"), _attr(item, "created_by")):
        return AccessDecision(True, decision.role)
    return decision


def can_delete_item(event: Any, user_id: Optional[str], item: Any) -> AccessDecision:
    """delete_items, or the item's creator."""
    decision = authorize(event, user_id, Capability.DELETE_ITEMS)
    if decision or decision.role is None:
        return decision
    if _attr(item, "created_by") == user_id:
        return AccessDecision(True, decision.role)
    return decision


def can_close_poll(event: Any, user_id: Optional[str], poll: Any) -> AccessDecision:
    """manage_settings, or the poll's creator."""
    decision = authorize(event, user_id, Capability.MANAGE_SETTINGS)
    if decision or decision.role is None:
        return decision
    if _attr(poll, "created_by") == user_id:
        return AccessDecision(True, decision.role)
    return decision
