"""
Websocket message protocol.

Client -> server: authenticate {userId, token}, subscribe {eventId},
unsubscribe {eventId}, ping. Server -> client: authenticated, subscribed,
unsubscribed, pong, error {message}, and the change messages sent by
ChangeBroadcaster. Failures are answered on the same connection only.
"""

import json
import logging
from typing import Any, Awaitable, Callable, Dict

from packpal.core.access import is_member
from packpal.core.exceptions import PackPalError
from packpal.database.store import Store
from packpal.modules.events.service import load_event
from packpal.realtime.registry import Connection, ConnectionRegistry

logger = logging.getLogger(__name__)

IdentityVerifier = Callable[[Dict[str, Any]], Awaitable[str]]


class RealtimeGateway:
    def __init__(self, registry: ConnectionRegistry, store: Store, verify_identity: IdentityVerifier):
        self.registry = registry
        self.store = store
        self.verify_identity = verify_identity

    async def _send(self, connection: Connection, message: Dict[str, Any]) -> None:
        try:
            await connection.send(message)
        except Exception as e:
            logger.warning(f"Error sending to connection {connection.id}: {e}")

    async def _error(self, connection: Connection, message: str) -> None:
        await self._send(connection, {"type": "error", "message": message})

    async def handle_text(self, connection: Connection, text: str) -> None:
        try:
            message = json.loads(text)
        except ValueError:
            await self._error(connection, "Invalid message format")
            return
        if not isinstance(message, dict):
            await self._error(connection, "Invalid message format")
            return
        await self.handle_message(connection, message)

    async def handle_message(self, connection: Connection, message: Dict[str, Any]) -> None:
        message_type = message.get("type")
        if message_type == "authenticate":
            await self.authenticate(connection, message)
        elif message_type == "subscribe":
            await self.subscribe(connection, message.get("eventId"))
        elif message_type == "unsubscribe":
            await self.unsubscribe(connection, message.get("eventId"))
        elif message_type == "ping":
            await self._send(connection, {"type": "pong"})
        else:
            await self._error(connection, f"Unknown message type: {message_type}")

    async def authenticate(self, connection: Connection, message: Dict[str, Any]) -> None:
        try:
            user_id = await self.verify_identity(message)
        except PackPalError as e:
            await self._error(connection, e.detail)
            return
        if not self.registry.authenticate(connection, user_id):
            await self._error(connection, "Connection is already authenticated as another user")
            return
        logger.info(f"Connection {connection.id} authenticated as {user_id}")
        await self._send(connection, {"type": "authenticated", "userId": user_id})

    async def subscribe(self, connection: Connection, event_id: Any) -> None:
        if not connection.is_authenticated:
            await self._error(connection, "Not authenticated")
            return
        if event_id is None or event_id == "":
            await self._error(connection, "eventId is required")
            return
        event_id = str(event_id)
        try:
            event = await load_event(self.store, event_id)
        except PackPalError as e:
            logger.error(f"Subscribe lookup for event {event_id} failed: {e}")
            await self._error(connection, "Could not subscribe to event")
            return
        if event is None:
            await self._error(connection, "Event not found")
            return
        if not is_member(event, connection.user_id):
            logger.warning(f"Connection {connection.id} denied subscription to event {event_id}")
            await self._error(connection, "Not authorized to subscribe to this event")
            return
        if not self.registry.subscribe(connection, event_id):
            return
        logger.info(f"Connection {connection.id} subscribed to event {event_id}")
        await self._send(connection, {"type": "subscribed", "eventId": event_id})

    async def unsubscribe(self, connection: Connection, event_id: Any) -> None:
        if event_id is None or event_id == "":
            await self._error(connection, "eventId is required")
            return
        event_id = str(event_id)
        self.registry.unsubscribe(connection, event_id)
        logger.info(f"Connection {connection.id} unsubscribed from event {event_id}")
        await self._send(connection, {"type": "unsubscribed", "eventId": event_id})
