"""
Polls: one vote per user, auto-close once every member has voted.
"""

import pytest

from packpal.core.exceptions import ConflictError, ForbiddenError, ValidationError
from packpal.database.store import NOTIFICATIONS, POLL_VOTES
from packpal.modules.polls.schemas import PollCreate, PollStatus


@pytest.fixture
def poll_event(services, event_factory):
    async def make():
        event = await event_factory(members={"bob": "member", "dan": "viewer"})
        poll = await services.polls.create_poll(
            PollCreate(event_id=event.id, question="Who brings the stove?", options=["Bob", "Dan"]),
            "alice"
        )
        return event, poll
    return make


class TestCreatePoll:
    @pytest.mark.asyncio
    async def test_options_start_at_zero(self, poll_event):
        _, poll = await poll_event()
        assert poll.status == PollStatus.ACTIVE
        assert [o.votes for o in poll.options] == [0, 0]

    def test_needs_two_distinct_options(self):
        with pytest.raises(ValueError):
            PollCreate(event_id="e1", question="?", options=["only"])
        with pytest.raises(ValueError):
            PollCreate(event_id="e1", question="?", options=["same", "same "])

    @pytest.mark.asyncio
    async def test_viewer_cannot_create(self, services, event_factory):
        event = await event_factory(members={"vic": "viewer"})
        with pytest.raises(ForbiddenError):
            await services.polls.create_poll(PollCreate(event_id=event.id, question="?", options=["a", "b"]), "vic")

    @pytest.mark.asyncio
    async def test_members_notified(self, poll_event, store):
        await poll_event()
        recipients = {n["user_id"] for n in await store.list(NOTIFICATIONS, {"type": "poll_created"})}
        assert recipients == {"bob", "dan"}


class TestVote:
    @pytest.mark.asyncio
    async def test_vote_counts(self, services, poll_event):
        _, poll = await poll_event()
        result = await services.polls.vote(poll.id, poll.options[1].id, "bob")
        assert result.options[0].text == "Dan"
        assert result.options[0].votes == 1
        assert result.status == PollStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_double_vote_conflicts(self, services, poll_event, store):
        _, poll = await poll_event()
        await services.polls.vote(poll.id, poll.options[0].id, "bob")
        with pytest.raises(ConflictError):
            await services.polls.vote(poll.id, poll.options[1].id, "bob")
        assert len(await store.list(POLL_VOTES, {"poll_id": poll.id})) == 1

    @pytest.mark.asyncio
    async def test_unknown_option(self, services, poll_event):
        _, poll = await poll_event()
        with pytest.raises(ValidationError):
            await services.polls.vote(poll.id, "nope", "bob")

    @pytest.mark.asyncio
    async def test_non_member_cannot_vote(self, services, poll_event):
        _, poll = await poll_event()
        with pytest.raises(ForbiddenError):
            await services.polls.vote(poll.id, poll.options[0].id, "mallory")

    @pytest.mark.asyncio
    async def test_closes_after_every_member_votes(self, services, poll_event, store):
        event, poll = await poll_event()
        for user_id in ("alice", "bob"):
            result = await services.polls.vote(poll.id, poll.options[0].id, user_id)
            assert result.status == PollStatus.ACTIVE

        result = await services.polls.vote(poll.id, poll.options[1].id, "dan")

        assert result.status == PollStatus.CLOSED
        assert result.closed_at is not None
        await services.events.join_event(event.invite_code, "erin")
        with pytest.raises(ConflictError):
            await services.polls.vote(poll.id, poll.options[0].id, "erin")
        closed = await store.list(NOTIFICATIONS, {"type": "poll_closed"})
        assert {n["user_id"] for n in closed} == {"alice", "bob", "dan"}
        assert "Winner: Bob" in closed[0]["message"]


class TestClosePoll:
    @pytest.mark.asyncio
    async def test_creator_closes(self, services, poll_event):
        _, poll = await poll_event()
        closed = await services.polls.close_poll(poll.id, "alice")
        assert closed.status == PollStatus.CLOSED
        with pytest.raises(ConflictError):
            await services.polls.close_poll(poll.id, "alice")

    @pytest.mark.asyncio
    async def test_other_member_cannot_close(self, services, poll_event):
        _, poll = await poll_event()
        with pytest.raises(ForbiddenError):
            await services.polls.close_poll(poll.id, "bob")

    @pytest.mark.asyncio
    async def test_list_polls(self, services, poll_event):
        event, poll = await poll_event()
        assert [p.id for p in await services.polls.list_polls(event.id, "dan")] == [poll.id]
