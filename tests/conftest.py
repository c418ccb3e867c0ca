"""
Shared fixtures: an in-memory store, a private registry/broadcaster pair and
fake websocket transports.
"""

from types import SimpleNamespace

import pytest
from starlette.websockets import WebSocketState

from packpal.core.permissions import Role
from packpal.database.store import EVENT_MEMBERS, MemoryStore
from packpal.modules.categories.service import CategoryService
from packpal.modules.events.schemas import EventCreate
from packpal.modules.events.service import EventService, get_event_or_404
from packpal.modules.items.service import ItemService
from packpal.modules.members.service import MemberService
from packpal.modules.notifications.service import NotificationService
from packpal.modules.polls.service import PollService
from packpal.modules.templates.service import TemplateService
from packpal.realtime.broadcaster import ChangeBroadcaster
from packpal.realtime.registry import ConnectionRegistry


class FakeSocket:
    """Records what the server sends; state attributes mirror starlette's WebSocket."""

    def __init__(self, fail: bool = False):
        self.sent = []
        self.fail = fail
        self.client_state = WebSocketState.CONNECTED
        self.application_state = WebSocketState.CONNECTED

    async def send_json(self, message):
        if self.fail:
            raise RuntimeError("socket is gone")
        self.sent.append(message)

    def disconnect(self):
        self.client_state = WebSocketState.DISCONNECTED


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def registry():
    return ConnectionRegistry()


@pytest.fixture
def broadcaster(registry):
    return ChangeBroadcaster(registry)


@pytest.fixture
def socket_factory():
    return FakeSocket


@pytest.fixture
def services(store, broadcaster):
    notifications = NotificationService(store)
    return SimpleNamespace(
        events=EventService(store, broadcaster),
        members=MemberService(store, broadcaster),
        categories=CategoryService(store, broadcaster),
        items=ItemService(store, broadcaster),
        notifications=notifications,
        polls=PollService(store, notifications),
        templates=TemplateService(store, broadcaster),
    )


@pytest.fixture
def event_factory(store, services):
    """Create an event owned by ``owner`` with extra members given as {user_id: role}."""

    async def make(owner="alice", members=None, name="Summer Camp"):
        event = await services.events.create_event(EventCreate(name=name), owner)
        for user_id, role in (members or {}).items():
            await store.create(EVENT_MEMBERS, {
                "event_id": event.id,
                "user_id": user_id,
                "role": Role(role).value
            })
        return await get_event_or_404(store, event.id)

    return make
