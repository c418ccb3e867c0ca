"""
Connection registry and change broadcaster tests.
"""

import asyncio
import threading
from unittest.mock import AsyncMock

import pytest

from packpal.realtime.broadcaster import Change, ChangeType


class TestConnectionRegistry:
    """Connections, identity binding and subscriptions"""

    def test_add_and_remove(self, registry, socket_factory):
        connection = registry.add(socket_factory())
        assert len(registry) == 1
        assert not connection.is_authenticated
        registry.remove(connection)
        assert len(registry) == 0
        assert connection.closed
        assert connection.subscriptions == set()

    def test_authenticate_is_set_once(self, registry, socket_factory):
        connection = registry.add(socket_factory())
        assert registry.authenticate(connection, "alice")
        assert registry.authenticate(connection, "alice")
        assert not registry.authenticate(connection, "mallory")
        assert connection.user_id == "alice"

    def test_subscribe_and_unsubscribe(self, registry, socket_factory):
        connection = registry.add(socket_factory())
        assert registry.subscribe(connection, "e1")
        assert registry.subscribers("e1") == [connection]
        registry.unsubscribe(connection, "e1")
        registry.unsubscribe(connection, "e1")
        assert registry.subscribers("e1") == []

    def test_subscribe_after_remove_is_refused(self, registry, socket_factory):
        connection = registry.add(socket_factory())
        registry.remove(connection)
        assert not registry.subscribe(connection, "e1")

    def test_snapshot_is_stable(self, registry, socket_factory):
        connection = registry.add(socket_factory())
        registry.subscribe(connection, "e1")
        snapshot = registry.subscribers("e1")
        registry.remove(connection)
        assert snapshot == [connection]
        assert registry.subscribers("e1") == []

    def test_connections_for_user(self, registry, socket_factory):
        first = registry.add(socket_factory())
        second = registry.add(socket_factory())
        registry.authenticate(first, "alice")
        registry.authenticate(second, "bob")
        assert registry.connections_for_user("alice") == [first]

    def test_concurrent_mutation(self, registry, socket_factory):
        connections = [registry.add(socket_factory()) for _ in range(50)]

        def churn(start):
            for connection in connections[start::2]:
                registry.subscribe(connection, "e1")
                registry.subscribers("e1")
                registry.remove(connection)

        threads = [threading.Thread(target=churn, args=(i,)) for i in range(2)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert len(registry) == 0
        assert registry.subscribers("e1") == []


class TestChangeBroadcaster:
    """Fan-out to subscribers of one event only"""

    @pytest.mark.asyncio
    async def test_broadcast_reaches_only_subscribers(self, registry, broadcaster, socket_factory):
        a, b, c = socket_factory(), socket_factory(), socket_factory()
        conn_a, conn_b, conn_c = registry.add(a), registry.add(b), registry.add(c)
        registry.subscribe(conn_a, "1")
        registry.subscribe(conn_b, "2")
        registry.subscribe(conn_c, "1")
        registry.subscribe(conn_c, "2")

        delivered = await broadcaster.broadcast("1", {"type": "ping"})

        assert delivered == 2
        assert a.sent == [{"type": "ping"}]
        assert b.sent == []
        assert c.sent == [{"type": "ping"}]

    @pytest.mark.asyncio
    async def test_closed_connection_skipped(self, registry, broadcaster, socket_factory):
        open_socket, closed_socket = socket_factory(), socket_factory()
        for socket in (open_socket, closed_socket):
            registry.subscribe(registry.add(socket), "1")
        closed_socket.disconnect()

        assert await broadcaster.broadcast("1", {"type": "ping"}) == 1
        assert closed_socket.sent == []

    @pytest.mark.asyncio
    async def test_failing_send_does_not_stop_fan_out(self, registry, broadcaster, socket_factory):
        broken, healthy = socket_factory(fail=True), socket_factory()
        for socket in (broken, healthy):
            registry.subscribe(registry.add(socket), "1")

        assert await broadcaster.broadcast("1", {"type": "ping"}) == 1
        assert healthy.sent == [{"type": "ping"}]

    @pytest.mark.asyncio
    async def test_slow_connection_does_not_delay_others(self, registry, broadcaster, socket_factory):
        gate = asyncio.Event()

        class StalledSocket:
            async def send_json(self, message):
                await gate.wait()

        healthy = socket_factory()
        for socket in (StalledSocket(), healthy):
            registry.subscribe(registry.add(socket), "1")

        sending = asyncio.ensure_future(broadcaster.broadcast("1", {"type": "ping"}))
        for _ in range(5):
            await asyncio.sleep(0)
        assert healthy.sent == [{"type": "ping"}]
        assert not sending.done()

        gate.set()
        assert await sending == 2

    @pytest.mark.asyncio
    async def test_publish_message_shape(self, registry, broadcaster, socket_factory):
        socket = socket_factory()
        registry.subscribe(registry.add(socket), "e1")

        await broadcaster.publish("e1", ChangeType.ITEM_DELETED, {"id": "i1"}, actor_id="alice")

        assert socket.sent == [{"type": "item_deleted", "eventId": "e1", "payload": {"id": "i1"}}]

    @pytest.mark.asyncio
    async def test_listeners_receive_change(self, broadcaster):
        listener = AsyncMock()
        broadcaster.add_listener(listener)

        await broadcaster.publish("e1", ChangeType.EVENT_UPDATED, {"id": "e1"}, actor_id="alice",
                                  previous={"id": "e1", "name": "old"})

        change = listener.await_args.args[0]
        assert isinstance(change, Change)
        assert change.actor_id == "alice"
        assert change.previous == {"id": "e1", "name": "old"}

    @pytest.mark.asyncio
    async def test_failing_listener_is_swallowed(self, broadcaster):
        failing = AsyncMock(side_effect=RuntimeError("boom"))
        after = AsyncMock()
        broadcaster.add_listener(failing)
        broadcaster.add_listener(after)

        await broadcaster.publish("e1", ChangeType.ITEM_DELETED, {"id": "i1"})

        after.assert_awaited_once()
