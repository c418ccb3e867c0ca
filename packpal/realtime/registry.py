"""
Registry of live realtime connections.

Each connection carries an optional authenticated user id and a set of
subscribed event ids. All mutations and snapshots happen under one lock with
no awaits inside, so a disconnect racing a broadcast either happens before
the snapshot or after it; sends always happen outside the lock.

The registry lives in process memory. Running several workers needs a shared
pub/sub layer in front of ``ChangeBroadcaster`` instead.
"""

import itertools
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from starlette.websockets import WebSocketState

logger = logging.getLogger(__name__)

_ids = itertools.count(1)


@dataclass
class Connection:
    transport: Any
    id: int = field(default_factory=lambda: next(_ids))
    user_id: Optional[str] = None
    subscriptions: Set[str] = field(default_factory=set)
    closed: bool = False

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    @property
    def is_open(self) -> bool:
        if self.closed:
            return False
        for attr in ("client_state", "application_state"):
            state = getattr(self.transport, attr, WebSocketState.CONNECTED)
            if state != WebSocketState.CONNECTED:
                return False
        return True

    async def send(self, message: Dict[str, Any]) -> None:
        await self.transport.send_json(message)


class ConnectionRegistry:
    def __init__(self):
        self._lock = threading.Lock()
        self._connections: Dict[int, Connection] = {}

    def add(self, transport: Any) -> Connection:
        connection = Connection(transport=transport)
        with self._lock:
            self._connections[connection.id] = connection
        logger.info(f"Connection {connection.id} opened. Total connections: {len(self)}")
        return connection

    def remove(self, connection: Connection) -> None:
        with self._lock:
            connection.closed = True
            self._connections.pop(connection.id, None)
            connection.subscriptions = set()
        logger.info(f"Connection {connection.id} closed. Total connections: {len(self)}")

    def authenticate(self, connection: Connection, user_id: str) -> bool:
        """Bind a user to the connection. Set once; a different user is refused."""
        with self._lock:
            if connection.user_id is not None and connection.user_id != user_id:
                return False
            connection.user_id = user_id
        return True

    def subscribe(self, connection: Connection, event_id: str) -> bool:
        with self._lock:
            if connection.closed or connection.id not in self._connections:
                return False
            # Copy-on-write so snapshots taken by broadcasts stay stable
            connection.subscriptions = connection.subscriptions | {event_id}
        return True

    def unsubscribe(self, connection: Connection, event_id: str) -> None:
        with self._lock:
            connection.subscriptions = connection.subscriptions - {event_id}

    def subscribers(self, event_id: str) -> List[Connection]:
        with self._lock:
            return [
                c for c in self._connections.values()
                if event_id in c.subscriptions and not c.closed
            ]

    def connections_for_user(self, user_id: str) -> List[Connection]:
        with self._lock:
            return [c for c in self._connections.values() if c.user_id == user_id and not c.closed]

    def get(self, connection_id: int) -> Optional[Connection]:
        with self._lock:
            return self._connections.get(connection_id)

    def clear(self) -> None:
        with self._lock:
            for connection in self._connections.values():
                connection.closed = True
            self._connections.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._connections)
