import logging
import secrets
import string
from datetime import datetime, timezone
from typing import List, Optional

from packpal.config.settings import settings
from packpal.core.access import authorize, can_delete_event, enforce, require_member
from packpal.core.exceptions import ConflictError, NotFoundError, StorageError, ValidationError
from packpal.core.permissions import Capability, Role
from packpal.database.store import (
    CATEGORIES, EVENT_MEMBERS, EVENTS, ITEMS, NOTIFICATIONS, POLL_VOTES, POLLS,
    Store, utcnow,
)
from packpal.modules.events.schemas import (
    EventCreate, EventUpdate, EventResponse, JoinEventResponse, EventExport, dates_in_order
)
from packpal.modules.members.schemas import MemberResponse
from packpal.realtime.broadcaster import ChangeBroadcaster, ChangeType

logger = logging.getLogger(__name__)

INVITE_ALPHABET = string.ascii_uppercase + string.digits
INVITE_CODE_ATTEMPTS = 5
CASCADE_ENTITIES = (EVENT_MEMBERS, NOTIFICATIONS, POLLS, ITEMS, CATEGORIES)


def generate_invite_code(length: Optional[int] = None) -> str:
    length = length or settings.invite_code_length
    return "".join(secrets.choice(INVITE_ALPHABET) for _ in range(length))


async def load_event(store: Store, event_id: str) -> Optional[EventResponse]:
    """Event with its user_roles projection built from event_members."""
    row = await store.get(EVENTS, event_id)
    if row is None:
        return None
    members = await store.list(EVENT_MEMBERS, {"event_id": event_id})
    row["user_roles"] = {m["user_id"]: m["role"] for m in members}
    return EventResponse(**row)


async def get_event_or_404(store: Store, event_id: str) -> EventResponse:
    event = await load_event(store, event_id)
    if event is None:
        raise NotFoundError("Event not found")
    return event


class EventService:
    def __init__(self, store: Store, broadcaster: ChangeBroadcaster):
        self.store = store
        self.broadcaster = broadcaster

    async def create_event(self, event_data: EventCreate, user_id: str) -> EventResponse:
        """Create an event; the creator becomes its owner"""
        fields = event_data.model_dump(mode="json", exclude={"template"})
        fields["created_by"] = user_id
        row = None
        for _ in range(INVITE_CODE_ATTEMPTS):
            fields["invite_code"] = generate_invite_code()
            try:
                row = await self.store.create(EVENTS, fields)
                break
            except ConflictError:
                logger.debug("Invite code collision, retrying")
        if row is None:
            raise ConflictError("Could not allocate a unique invite code")

        try:
            await self.store.create(EVENT_MEMBERS, {
                "event_id": row["id"],
                "user_id": user_id,
                "role": Role.OWNER.value
            })
        except Exception:
            # An event never exists without its owner membership
            await self.store.delete(EVENTS, row["id"])
            raise

        logger.info(f"Event {row['id']} created by {user_id}")
        return await get_event_or_404(self.store, row["id"])

    async def get_event(self, event_id: str, user_id: str) -> EventResponse:
        event = await get_event_or_404(self.store, event_id)
        require_member(event, user_id, "view this event")
        return event

    async def list_events(self, user_id: str) -> List[EventResponse]:
        """Events the user is a member of or created"""
        memberships = await self.store.list(EVENT_MEMBERS, {"user_id": user_id})
        event_ids = [m["event_id"] for m in memberships]
        for row in await self.store.list(EVENTS, {"created_by": user_id}):
            if row["id"] not in event_ids:
                event_ids.append(row["id"])

        events = []
        for event_id in event_ids:
            event = await load_event(self.store, event_id)
            if event is not None:
                events.append(event)
        return sorted(events, key=lambda e: e.created_at, reverse=True)

    async def update_event(self, event_id: str, event_data: EventUpdate, user_id: str) -> EventResponse:
        event = await get_event_or_404(self.store, event_id)
        enforce(authorize(event, user_id, Capability.MANAGE_SETTINGS), "update this event")

        update_data = event_data.model_dump(mode="json", exclude_unset=True)
        if update_data.get("name", "") is None:
            del update_data["name"]
        if not update_data:
            return event
        changed = event_data.model_fields_set
        start = event_data.start_date if "start_date" in changed else event.start_date
        end = event_data.end_date if "end_date" in changed else event.end_date
        if not dates_in_order(start, end):
            raise ValidationError("end_date must not be before start_date")
        update_data["updated_at"] = utcnow()

        result = await self.store.update(EVENTS, event_id, update_data)
        if result is None:
            raise NotFoundError("Event not found")

        updated = await get_event_or_404(self.store, event_id)
        await self.broadcaster.publish(
            event_id, ChangeType.EVENT_UPDATED, updated, actor_id=user_id, previous=event
        )
        return updated

    async def delete_event(self, event_id: str, user_id: str) -> bool:
        """Delete an event and everything that belongs to it"""
        event = await get_event_or_404(self.store, event_id)
        enforce(can_delete_event(event, user_id), "delete this event")

        polls = await self.store.list(POLLS, {"event_id": event_id})
        if not await self.store.delete(EVENTS, event_id):
            raise NotFoundError("Event not found")
        logger.info(f"Event {event_id} deleted by {user_id}")

        # Rows left behind by a failure below reference a missing event and are unreachable through it
        children = [(POLL_VOTES, {"poll_id": poll["id"]}) for poll in polls]
        children += [(entity, {"event_id": event_id}) for entity in CASCADE_ENTITIES]
        for entity, filters in children:
            try:
                await self.store.delete_where(entity, filters)
            except StorageError as e:
                logger.error(f"Failed to delete {entity} of deleted event {event_id}: {e.detail}")
        return True

    async def join_event(self, invite_code: str, user_id: str) -> JoinEventResponse:
        """Join an event as member using its invite code"""
        matches = await self.store.list(EVENTS, {"invite_code": invite_code.strip().upper()})
        if not matches:
            raise NotFoundError("Event not found")
        event = await get_event_or_404(self.store, matches[0]["id"])

        if user_id in event.user_roles:
            raise ConflictError("You are already a member of this event")
        try:
            row = await self.store.create(EVENT_MEMBERS, {
                "event_id": event.id,
                "user_id": user_id,
                "role": Role.MEMBER.value
            })
        except ConflictError:
            # A concurrent join for the same user won the insert
            raise ConflictError("You are already a member of this event")

        member = MemberResponse(**row)
        logger.info(f"User {user_id} joined event {event.id}")
        await self.broadcaster.publish(event.id, ChangeType.MEMBER_JOINED, member, actor_id=user_id)
        return JoinEventResponse(
            event_id=event.id,
            event_name=event.name,
            role=Role.MEMBER,
            message="Successfully joined event"
        )

    async def export_event(self, event_id: str, user_id: str) -> EventExport:
        event = await get_event_or_404(self.store, event_id)
        enforce(authorize(event, user_id, Capability.EXPORT_DATA), "export this event")
        return EventExport(
            event=event,
            categories=await self.store.list(CATEGORIES, {"event_id": event_id}),
            items=await self.store.list(ITEMS, {"event_id": event_id}),
            members=await self.store.list(EVENT_MEMBERS, {"event_id": event_id}),
            exported_at=datetime.now(timezone.utc),
        )
