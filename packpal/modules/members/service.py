import logging
from typing import Any, Dict, List, Optional

from packpal.core.access import (
    authorize, can_change_member_role, can_remove_member, count_owners, enforce, require_member
)
from packpal.core.exceptions import ConflictError, ForbiddenError, NotFoundError
from packpal.core.permissions import Capability, Role, parse_role
from packpal.database.store import EVENT_MEMBERS, Store
from packpal.modules.events.service import get_event_or_404
from packpal.modules.members.schemas import MemberAdd, MemberResponse
from packpal.realtime.broadcaster import ChangeBroadcaster, ChangeType

logger = logging.getLogger(__name__)

LAST_OWNER = "An event must keep at least one owner, transfer ownership first"
CREATOR_STAYS = "The event creator cannot leave or be removed from the event"


async def find_membership(store: Store, event_id: str, user_id: str) -> Optional[Dict[str, Any]]:
    rows = await store.list(EVENT_MEMBERS, {"event_id": event_id, "user_id": user_id})
    return rows[0] if rows else None


class MemberService:
    def __init__(self, store: Store, broadcaster: ChangeBroadcaster):
        self.store = store
        self.broadcaster = broadcaster

    async def list_members(self, event_id: str, user_id: str) -> List[MemberResponse]:
        """List all members of an event"""
        event = await get_event_or_404(self.store, event_id)
        require_member(event, user_id, "view this event's members")
        rows = await self.store.list(EVENT_MEMBERS, {"event_id": event_id})
        return [MemberResponse(**row) for row in rows]

    async def add_member(self, event_id: str, member_data: MemberAdd, user_id: str) -> MemberResponse:
        """Add a user to the event directly (requires manage_users)"""
        event = await get_event_or_404(self.store, event_id)
        decision = enforce(authorize(event, user_id, Capability.MANAGE_USERS), "add members to this event")
        if member_data.role == Role.OWNER and decision.role != Role.OWNER:
            raise ForbiddenError("Only an owner can add another owner")

        if member_data.user_id in event.user_roles:
            raise ConflictError("User is already a member of this event")
        try:
            row = await self.store.create(EVENT_MEMBERS, {
                "event_id": event_id,
                "user_id": member_data.user_id,
                "role": member_data.role.value
            })
        except ConflictError:
            raise ConflictError("User is already a member of this event")

        member = MemberResponse(**row)
        logger.info(f"User {member.user_id} added to event {event_id} by {user_id}")
        await self.broadcaster.publish(event_id, ChangeType.MEMBER_JOINED, member, actor_id=user_id)
        return member

    async def update_member_role(
        self, event_id: str, target_user_id: str, new_role: Role, user_id: str
    ) -> MemberResponse:
        """Change a member's role. Only owners may do this, and never down to zero owners."""
        event = await get_event_or_404(self.store, event_id)
        enforce(can_change_member_role(event, user_id), "change member roles")

        membership = await find_membership(self.store, event_id, target_user_id)
        if membership is None:
            raise NotFoundError("Member not found")
        previous_role = parse_role(membership["role"])
        if previous_role == new_role:
            return MemberResponse(**membership)
        if previous_role == Role.OWNER and count_owners(event) <= 1:
            raise ConflictError(LAST_OWNER)

        row = await self.store.update(EVENT_MEMBERS, membership["id"], {"role": new_role.value})
        if row is None:
            raise NotFoundError("Member not found")

        # A concurrent demotion may have raced this one; restore rather than leave no owner
        if previous_role == Role.OWNER:
            refreshed = await get_event_or_404(self.store, event_id)
            if count_owners(refreshed) == 0:
                await self.store.update(EVENT_MEMBERS, membership["id"], {"role": previous_role.value})
                raise ConflictError(LAST_OWNER)

        member = MemberResponse(**row)
        logger.info(
            f"Role of {target_user_id} in event {event_id} changed "
            f"from {previous_role.value if previous_role else None} to {new_role.value} by {user_id}"
        )
        await self.broadcaster.publish(
            event_id, ChangeType.MEMBER_ROLE_CHANGED, member,
            actor_id=user_id, previous=MemberResponse(**membership)
        )
        return member

    async def remove_member(self, event_id: str, target_user_id: str, user_id: str) -> bool:
        """Remove a member, or leave the event when target is the caller"""
        event = await get_event_or_404(self.store, event_id)
        membership = await find_membership(self.store, event_id, target_user_id)

        if target_user_id == user_id:
            if membership is None:
                raise NotFoundError("Member not found")
            target_role = parse_role(membership["role"])
            if target_role == Role.OWNER and count_owners(event) <= 1:
                raise ConflictError("Owner cannot leave the event, transfer ownership first")
        else:
            require_member(event, user_id, "remove members")
            if membership is None:
                raise NotFoundError("Member not found")
            target_role = parse_role(membership["role"])
            enforce(can_remove_member(event, user_id, target_role), "remove this member")
            if target_role == Role.OWNER and count_owners(event) <= 1:
                raise ConflictError(LAST_OWNER)
        if target_user_id == event.created_by:
            raise ConflictError(CREATOR_STAYS)

        deleted = await self.store.delete(EVENT_MEMBERS, membership["id"])
        if not deleted:
            raise NotFoundError("Member not found")

        logger.info(f"User {target_user_id} left event {event_id} (removed by {user_id})")
        await self.broadcaster.publish(
            event_id, ChangeType.MEMBER_LEFT,
            {"id": membership["id"], "user_id": target_user_id},
            actor_id=user_id
        )
        return True

    async def leave_event(self, event_id: str, user_id: str) -> bool:
        return await self.remove_member(event_id, user_id, user_id)
