import logging
from typing import Iterable, List, Optional

from packpal.core.exceptions import NotFoundError
from packpal.database.store import EVENT_MEMBERS, NOTIFICATIONS, Store
from packpal.modules.notifications.schemas import NotificationResponse, NotificationType
from packpal.realtime.broadcaster import Change, ChangeType

logger = logging.getLogger(__name__)


class NotificationService:
    def __init__(self, store: Store):
        self.store = store

    async def create_notification(
        self,
        user_id: str,
        type: NotificationType,
        title: str,
        message: str,
        event_id: Optional[str] = None,
        item_id: Optional[str] = None
    ) -> NotificationResponse:
        row = await self.store.create(NOTIFICATIONS, {
            "user_id": user_id,
            "event_id": event_id,
            "item_id": item_id,
            "type": NotificationType(type).value,
            "title": title,
            "message": message,
            "read": False
        })
        return NotificationResponse(**row)

    async def notify_members(
        self,
        event_id: str,
        type: NotificationType,
        title: str,
        message: str,
        exclude: Iterable[Optional[str]] = (),
        item_id: Optional[str] = None
    ) -> int:
        """Notify every member of the event except the excluded users. Returns the number created."""
        skip = {user_id for user_id in exclude if user_id}
        created = 0
        for member in await self.store.list(EVENT_MEMBERS, {"event_id": event_id}):
            if member["user_id"] in skip:
                continue
            try:
                await self.create_notification(member["user_id"], type, title, message, event_id, item_id)
                created += 1
            except Exception as e:
                logger.warning(f"Failed to notify {member['user_id']} for event {event_id}: {e}")
        return created

    async def list_for_user(self, user_id: str, unread_only: bool = False) -> List[NotificationResponse]:
        """Notifications of a user, newest first"""
        filters = {"user_id": user_id}
        if unread_only:
            filters["read"] = False
        rows = await self.store.list(NOTIFICATIONS, filters)
        rows.reverse()
        return [NotificationResponse(**row) for row in rows]

    async def _get_own(self, notification_id: str, user_id: str) -> NotificationResponse:
        row = await self.store.get(NOTIFICATIONS, notification_id)
        # Other users' notifications look missing
        if row is None or row["user_id"] != user_id:
            raise NotFoundError("Notification not found")
        return NotificationResponse(**row)

    async def mark_read(self, notification_id: str, user_id: str) -> NotificationResponse:
        notification = await self._get_own(notification_id, user_id)
        if notification.read:
            return notification
        row = await self.store.update(NOTIFICATIONS, notification_id, {"read": True})
        if row is None:
            raise NotFoundError("Notification not found")
        return NotificationResponse(**row)

    async def delete_notification(self, notification_id: str, user_id: str) -> bool:
        await self._get_own(notification_id, user_id)
        deleted = await self.store.delete(NOTIFICATIONS, notification_id)
        if not deleted:
            raise NotFoundError("Notification not found")
        return True

    async def on_change(self, change: Change) -> None:
        """Broadcaster listener turning persisted changes into notifications."""
        handler = {
            ChangeType.ITEM_CREATED: self._item_created,
            ChangeType.ITEM_UPDATED: self._item_updated,
            ChangeType.MEMBER_JOINED: self._member_joined,
            ChangeType.MEMBER_ROLE_CHANGED: self._member_role_changed,
        }.get(change.type)
        if handler is not None:
            await handler(change)

    async def _item_created(self, change: Change) -> None:
        item = change.payload
        await self.notify_members(
            change.event_id,
            NotificationType.ITEM_CREATED,
            "New item",
            f'{change.actor_id} added a new item "{item["name"]}"',
            exclude=[change.actor_id],
            item_id=item["id"]
        )
        await self._notify_assignee(change, item)

    async def _item_updated(self, change: Change) -> None:
        item = change.payload
        previous = change.previous
        if not previous:
            return
        if previous.get("status") != item.get("status"):
            await self.notify_members(
                change.event_id,
                NotificationType.ITEM_STATUS_CHANGED,
                "Item status changed",
                f'{change.actor_id} marked "{item["name"]}" as {item["status"]}',
                exclude=[change.actor_id],
                item_id=item["id"]
            )
        if previous.get("assigned_to") != item.get("assigned_to"):
            await self._notify_assignee(change, item)

    async def _notify_assignee(self, change: Change, item: dict) -> None:
        assignee = item.get("assigned_to")
        if not assignee or assignee == change.actor_id:
            return
        await self.create_notification(
            assignee,
            NotificationType.ITEM_ASSIGNED,
            "Item assigned",
            f'{change.actor_id} assigned "{item["name"]}" to {assignee}',
            change.event_id,
            item["id"]
        )

    async def _member_joined(self, change: Change) -> None:
        member = change.payload
        await self.notify_members(
            change.event_id,
            NotificationType.MEMBER_JOINED,
            "New member",
            f"{member['user_id']} joined the event as {member['role']}",
            exclude=[change.actor_id, member["user_id"]]
        )

    async def _member_role_changed(self, change: Change) -> None:
        member = change.payload
        previous_role = (change.previous or {}).get("role")
        await self.notify_members(
            change.event_id,
            NotificationType.MEMBER_ROLE_CHANGED,
            "Role changed",
            f"{member['user_id']}'s role was changed from {previous_role} to {member['role']}",
            exclude=[change.actor_id]
        )
