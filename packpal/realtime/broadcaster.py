"""
Pushes typed change messages to every connection subscribed to an event.

Delivery is best effort and at most once: closed or failing connections are
skipped and logged, never retried, and failures never reach the caller of the
mutation that produced the change. Sends to one event's subscribers run
concurrently, so a slow connection does not hold up the others.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional

from fastapi.encoders import jsonable_encoder

from packpal.realtime.registry import ConnectionRegistry

logger = logging.getLogger(__name__)


class ChangeType(str, Enum):
    ITEM_CREATED = "item_created"
    ITEM_UPDATED = "item_updated"
    ITEM_DELETED = "item_deleted"
    CATEGORY_CREATED = "category_created"
    CATEGORY_UPDATED = "category_updated"
    CATEGORY_DELETED = "category_deleted"
    EVENT_UPDATED = "event_updated"
    MEMBER_JOINED = "member_joined"
    MEMBER_LEFT = "member_left"
    MEMBER_ROLE_CHANGED = "member_role_changed"


@dataclass(frozen=True)
class Change:
    event_id: str
    type: ChangeType
    payload: Dict[str, Any]
    actor_id: Optional[str] = None
    previous: Optional[Dict[str, Any]] = None

    def to_message(self) -> Dict[str, Any]:
        return {"type": self.type.value, "eventId": self.event_id, "payload": self.payload}


ChangeListener = Callable[[Change], Awaitable[None]]


class ChangeBroadcaster:
    def __init__(self, registry: ConnectionRegistry):
        self.registry = registry
        self._listeners: List[ChangeListener] = []

    def add_listener(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    async def broadcast(self, event_id: str, message: Dict[str, Any]) -> int:
        """Send message to open connections subscribed to event_id. Returns the delivered count."""
        targets = [c for c in self.registry.subscribers(event_id) if c.is_open]
        results = await asyncio.gather(*(c.send(message) for c in targets), return_exceptions=True)
        delivered = 0
        for connection, result in zip(targets, results):
            if isinstance(result, Exception):
                logger.warning(f"Error broadcasting to connection {connection.id}: {result}")
            else:
                delivered += 1
        return delivered

    async def publish(
        self,
        event_id: str,
        change_type: ChangeType,
        payload: Any,
        actor_id: Optional[str] = None,
        previous: Any = None,
    ) -> int:
        """Broadcast a change that has already been persisted, then notify listeners."""
        change = Change(
            event_id=event_id,
            type=change_type,
            payload=jsonable_encoder(payload),
            actor_id=actor_id,
            previous=jsonable_encoder(previous) if previous is not None else None,
        )
        delivered = await self.broadcast(event_id, change.to_message())
        logger.debug(f"{change_type.value} for event {event_id} delivered to {delivered} connection(s)")
        for listener in self._listeners:
            try:
                await listener(change)
            except Exception as e:
                logger.warning(f"Change listener failed for {change_type.value}: {e}")
        return delivered
