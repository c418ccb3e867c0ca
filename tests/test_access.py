"""
Role resolver and access guard tests.
"""

import pytest

from packpal.core.access import (
    INSUFFICIENT_PERMISSION, NOT_A_MEMBER, authorize, can_change_member_role, can_close_poll,
    can_delete_event, can_delete_item, can_remove_member, can_update_item, count_owners,
    enforce, require_member, role_of
)
from packpal.core.exceptions import ForbiddenError
from packpal.core.permissions import Capability, Role


def make_event(user_roles, created_by="alice"):
    return {"id": "e1", "created_by": created_by, "user_roles": user_roles}


class TestRoleOf:
    """Role resolution from the role map with creator fallback"""

    def test_role_from_map(self):
        event = make_event({"alice": "owner", "bob": "viewer"})
        assert role_of(event, "bob") == Role.VIEWER

    def test_non_member(self):
        assert role_of(make_event({"alice": "owner"}), "mallory") is None

    def test_creator_falls_back_to_owner(self):
        assert role_of(make_event({}, created_by="alice"), "alice") == Role.OWNER

    def test_map_entry_wins_over_creator(self):
        event = make_event({"alice": "member", "bob": "owner"}, created_by="alice")
        assert role_of(event, "alice") == Role.MEMBER

    def test_unknown_stored_role_is_not_a_role(self):
        assert role_of(make_event({"bob": "wizard"}), "bob") is None

    def test_missing_user(self):
        assert role_of(make_event({"alice": "owner"}), None) is None


class TestAuthorize:
    """Pure allow/deny decisions"""

    def test_allowed(self):
        decision = authorize(make_event({"alice": "owner"}), "alice", Capability.MANAGE_USERS)
        assert decision
        assert decision.role == Role.OWNER

    def test_not_a_member(self):
        decision = authorize(make_event({"alice": "owner"}), "mallory", Capability.ADD_ITEMS)
        assert not decision
        assert decision.reason == NOT_A_MEMBER

    def test_insufficient_permission(self):
        decision = authorize(make_event({"bob": "viewer"}), "bob", Capability.ADD_ITEMS)
        assert not decision
        assert decision.reason == INSUFFICIENT_PERMISSION

    def test_reason_never_mentions_other_roles(self):
        decision = authorize(make_event({"alice": "owner", "bob": "viewer"}), "bob", Capability.MANAGE_USERS)
        assert "alice" not in decision.reason
        assert "owner" not in decision.reason

    def test_enforce_raises_forbidden(self):
        with pytest.raises(ForbiddenError) as exc:
            enforce(authorize(make_event({"bob": "viewer"}), "bob", Capability.ADD_ITEMS), "add items")
        assert exc.value.kind == "forbidden"

    def test_require_member(self):
        event = make_event({"bob": "viewer"})
        assert require_member(event, "bob") == Role.VIEWER
        with pytest.raises(ForbiddenError):
            require_member(event, "mallory")


class TestSpecialRules:
    """Rules layered above the capability check"""

    def test_delete_event_needs_creator_or_owner(self):
        event = make_event({"alice": "owner", "carol": "admin"}, created_by="alice")
        assert can_delete_event(event, "alice")
        assert not can_delete_event(event, "carol")

    def test_admin_creator_can_delete_event(self):
        event = make_event({"alice": "admin", "bob": "owner"}, created_by="alice")
        assert can_delete_event(event, "alice")

    def test_only_owner_changes_roles(self):
        event = make_event({"alice": "owner", "carol": "admin", "bob": "member"})
        assert can_change_member_role(event, "alice")
        assert not can_change_member_role(event, "carol")
        assert not can_change_member_role(event, "bob")

    def test_admin_cannot_remove_owner(self):
        event = make_event({"alice": "owner", "carol": "admin", "bob": "member"})
        assert can_remove_member(event, "carol", Role.MEMBER)
        assert not can_remove_member(event, "carol", Role.OWNER)
        assert can_remove_member(event, "alice", Role.OWNER)

    def test_assignee_can_update_item(self):
        event = make_event({"alice": "owner", "vic": "viewer", "val": "viewer"})
        item = {"assigned_to": "vic", "created_by": "alice"}
        assert can_update_item(event, "vic", item)
        assert not can_update_item(event, "val", item)

    def test_self_service_requires_membership(self):
        event = make_event({"alice": "owner"})
        item = {"assigned_to": "ghost", "created_by": "ghost"}
        assert not can_update_item(event, "ghost", item)
        assert not can_delete_item(event, "ghost", item)

    def test_creator_can_delete_own_item(self):
        event = make_event({"alice": "owner", "bob": "member"})
        assert can_delete_item(event, "bob", {"created_by": "bob", "assigned_to": None})
        assert not can_delete_item(event, "bob", {"created_by": "alice", "assigned_to": "bob"})

    def test_poll_creator_can_close(self):
        event = make_event({"alice": "owner", "bob": "member", "dan": "member"})
        poll = {"created_by": "bob"}
        assert can_close_poll(event, "bob", poll)
        assert not can_close_poll(event, "dan", poll)
        assert can_close_poll(event, "alice", poll)

    def test_count_owners(self):
        assert count_owners(make_event({"a": "owner", "b": "owner", "c": "member"})) == 2
