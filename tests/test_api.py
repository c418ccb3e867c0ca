"""
HTTP and websocket surface through FastAPI's TestClient. The bearer token is
taken as the user id.
"""

from typing import Optional
from unittest.mock import patch

import pytest
from fastapi import Security
from fastapi.security import HTTPAuthorizationCredentials
from fastapi.testclient import TestClient

from packpal.config.settings import settings
from packpal.core.dependencies import get_current_user, reset_realtime, security
from packpal.core.exceptions import StorageError, UnauthorizedError
from packpal.database.store import reset_store
from packpal.main import app
from packpal.modules.templates.service import TemplateService


def user_from_token(credentials: Optional[HTTPAuthorizationCredentials] = Security(security)) -> dict:
    if credentials is None:
        raise UnauthorizedError("Not authenticated")
    return {"id": credentials.credentials, "email": f"{credentials.credentials}@example.com"}


def auth(user_id):
    return {"Authorization": f"Bearer {user_id}"}


@pytest.fixture
def client():
    reset_store()
    reset_realtime()
    app.dependency_overrides[get_current_user] = user_from_token
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    reset_realtime()
    reset_store()


@pytest.fixture
def event(client):
    response = client.post("/api/v1/events", json={"name": "Festival"}, headers=auth("alice"))
    assert response.status_code == 201
    return response.json()


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.json() == {"status": "healthy"}
        assert response.headers["X-Frame-Options"] == "DENY"


class TestEventsApi:
    def test_requires_authentication(self, client):
        response = client.get("/api/v1/events")
        assert response.status_code == 401
        assert response.json()["kind"] == "unauthorized"

    def test_create_and_join(self, client, event):
        assert event["user_roles"] == {"alice": "owner"}
        response = client.post("/api/v1/events/join", json={"invite_code": event["invite_code"]}, headers=auth("bob"))
        assert response.status_code == 201
        again = client.post("/api/v1/events/join", json={"invite_code": event["invite_code"]}, headers=auth("bob"))
        assert again.status_code == 409
        assert again.json()["kind"] == "conflict"

    def test_short_invite_code(self, client):
        response = client.post("/api/v1/events/join", json={"invite_code": "ABC"}, headers=auth("bob"))
        assert response.status_code == 422
        assert response.json()["kind"] == "validation_error"

    def test_create_with_template(self, client):
        response = client.post(
            "/api/v1/events", json={"name": "Slopes", "template": "Ski Trip"}, headers=auth("alice")
        )
        assert response.status_code == 201
        items = client.get(f"/api/v1/events/{response.json()['id']}/items", headers=auth("alice"))
        assert len(items.json()) == 10

    def test_unknown_template_creates_nothing(self, client):
        response = client.post("/api/v1/events", json={"name": "X", "template": "Nope"}, headers=auth("alice"))
        assert response.status_code == 404
        assert client.get("/api/v1/events", headers=auth("alice")).json() == []

    def test_failed_template_removes_event(self, client):
        with patch.object(TemplateService, "apply_template", side_effect=StorageError("connection reset")):
            response = client.post(
                "/api/v1/events", json={"name": "Slopes", "template": "Ski Trip"}, headers=auth("alice")
            )
        assert response.status_code == 500
        assert response.json()["kind"] == "storage_error"
        assert client.get("/api/v1/events", headers=auth("alice")).json() == []

    def test_forbidden_update(self, client, event):
        client.post("/api/v1/events/join", json={"invite_code": event["invite_code"]}, headers=auth("bob"))
        response = client.put(f"/api/v1/events/{event['id']}", json={"name": "Mine"}, headers=auth("bob"))
        assert response.status_code == 403
        assert response.json()["kind"] == "forbidden"

    def test_last_owner_role_change(self, client, event):
        response = client.put(
            f"/api/v1/events/{event['id']}/members/alice", json={"role": "member"}, headers=auth("alice")
        )
        assert response.status_code == 409
        members = client.get(f"/api/v1/events/{event['id']}/members", headers=auth("alice")).json()
        assert [(m["user_id"], m["role"]) for m in members] == [("alice", "owner")]


class TestItemsApi:
    def test_item_flow(self, client, event):
        category = client.post(
            f"/api/v1/events/{event['id']}/categories", json={"name": "Gear"}, headers=auth("alice")
        ).json()
        item = client.post(
            f"/api/v1/events/{event['id']}/items",
            json={"category_id": category["id"], "name": "Tent"},
            headers=auth("alice")
        ).json()

        checked = client.post(f"/api/v1/items/{item['id']}/check", headers=auth("alice"))
        assert checked.json()["status"] == "packed"

        deleted = client.delete(f"/api/v1/items/{item['id']}", headers=auth("alice"))
        assert deleted.status_code == 204
        assert client.get(f"/api/v1/items/{item['id']}", headers=auth("alice")).status_code == 404


class TestRealtimeApi:
    def test_subscribe_and_receive_changes(self, client, event, monkeypatch):
        monkeypatch.setattr(settings, "ws_allow_unverified_user_id", True)
        with client.websocket_connect(settings.ws_path) as websocket:
            websocket.send_json({"type": "subscribe", "eventId": event["id"]})
            assert websocket.receive_json() == {"type": "error", "message": "Not authenticated"}

            websocket.send_json({"type": "authenticate", "userId": "alice"})
            assert websocket.receive_json() == {"type": "authenticated", "userId": "alice"}
            websocket.send_json({"type": "subscribe", "eventId": event["id"]})
            assert websocket.receive_json() == {"type": "subscribed", "eventId": event["id"]}

            client.post(f"/api/v1/events/{event['id']}/categories", json={"name": "Gear"}, headers=auth("alice"))

            message = websocket.receive_json()
            assert message["type"] == "category_created"
            assert message["eventId"] == event["id"]
            assert message["payload"]["name"] == "Gear"
