import logging
import uuid
from collections import Counter
from typing import List

from packpal.core.access import authorize, can_close_poll, enforce, require_member
from packpal.core.exceptions import ConflictError, NotFoundError, ValidationError
from packpal.core.permissions import Capability
from packpal.database.store import EVENT_MEMBERS, ITEMS, POLL_VOTES, POLLS, Store, utcnow
from packpal.modules.events.service import get_event_or_404
from packpal.modules.notifications.schemas import NotificationType
from packpal.modules.notifications.service import NotificationService
from packpal.modules.polls.schemas import PollCreate, PollResponse, PollStatus

logger = logging.getLogger(__name__)


def _results(row: dict) -> PollResponse:
    """Poll with its options ordered by votes, most first"""
    row = dict(row)
    row["options"] = sorted(row["options"], key=lambda option: option["votes"], reverse=True)
    return PollResponse(**row)


class PollService:
    def __init__(self, store: Store, notifications: NotificationService):
        self.store = store
        self.notifications = notifications

    async def _get_row(self, poll_id: str) -> dict:
        row = await self.store.get(POLLS, poll_id)
        if row is None:
            raise NotFoundError("Poll not found")
        return row

    async def create_poll(self, poll_data: PollCreate, user_id: str) -> PollResponse:
        """Create a poll in an event (requires add_items)"""
        event = await get_event_or_404(self.store, poll_data.event_id)
        enforce(authorize(event, user_id, Capability.ADD_ITEMS), "create polls in this event")
        if poll_data.item_id is not None:
            item = await self.store.get(ITEMS, poll_data.item_id)
            if item is None or item["event_id"] != event.id:
                raise ValidationError("Invalid item")

        row = await self.store.create(POLLS, {
            "event_id": event.id,
            "item_id": poll_data.item_id,
            "question": poll_data.question,
            "options": [{"id": str(uuid.uuid4()), "text": text, "votes": 0} for text in poll_data.options],
            "status": PollStatus.ACTIVE.value,
            "created_by": user_id,
            "closed_at": None
        })
        await self.notifications.notify_members(
            event.id,
            NotificationType.POLL_CREATED,
            "New poll",
            f"A new poll has been created: {poll_data.question}",
            exclude=[user_id],
            item_id=poll_data.item_id
        )
        return PollResponse(**row)

    async def get_poll(self, poll_id: str, user_id: str) -> PollResponse:
        row = await self._get_row(poll_id)
        event = await get_event_or_404(self.store, row["event_id"])
        require_member(event, user_id, "view this poll")
        return _results(row)

    async def list_polls(self, event_id: str, user_id: str) -> List[PollResponse]:
        event = await get_event_or_404(self.store, event_id)
        require_member(event, user_id, "view this event's polls")
        rows = await self.store.list(POLLS, {"event_id": event_id})
        return [_results(row) for row in rows]

    async def vote(self, poll_id: str, option_id: str, user_id: str) -> PollResponse:
        """Cast the user's single vote. The poll closes once every member has voted."""
        row = await self._get_row(poll_id)
        event = await get_event_or_404(self.store, row["event_id"])
        require_member(event, user_id, "vote on this poll")
        if row["status"] != PollStatus.ACTIVE.value:
            raise ConflictError("Poll is closed")
        if option_id not in {option["id"] for option in row["options"]}:
            raise ValidationError("Invalid poll option")

        try:
            vote = await self.store.create(POLL_VOTES, {
                "poll_id": poll_id,
                "option_id": option_id,
                "user_id": user_id
            })
        except ConflictError:
            raise ConflictError("User already voted")

        row = await self._get_row(poll_id)
        if row["status"] != PollStatus.ACTIVE.value:
            # Closed while this vote was being recorded
            await self.store.delete(POLL_VOTES, vote["id"])
            raise ConflictError("Poll is closed")

        votes = await self.store.list(POLL_VOTES, {"poll_id": poll_id})
        tally = Counter(v["option_id"] for v in votes)
        options = [{**option, "votes": tally.get(option["id"], 0)} for option in row["options"]]
        row = await self.store.update(POLLS, poll_id, {"options": options})
        if row is None:
            raise NotFoundError("Poll not found")

        participants = await self.store.count(EVENT_MEMBERS, {"event_id": row["event_id"]})
        if len(votes) >= participants:
            row = await self._close(row)
        return _results(row)

    async def close_poll(self, poll_id: str, user_id: str) -> PollResponse:
        """Close a poll (its creator, or manage_settings)"""
        row = await self._get_row(poll_id)
        event = await get_event_or_404(self.store, row["event_id"])
        enforce(can_close_poll(event, user_id, PollResponse(**row)), "close this poll")
        if row["status"] != PollStatus.ACTIVE.value:
            raise ConflictError("Poll is already closed")
        return _results(await self._close(row))

    async def _close(self, row: dict) -> dict:
        closed = await self.store.update(POLLS, row["id"], {
            "status": PollStatus.CLOSED.value,
            "closed_at": utcnow()
        })
        if closed is None:
            raise NotFoundError("Poll not found")
        logger.info(f"Poll {row['id']} closed")

        results = _results(closed)
        winner = results.options[0] if results.options and results.options[0].votes else None
        message = f'The poll "{results.question}" has been closed.'
        message += f" Winner: {winner.text}" if winner else " No votes were cast."
        await self.notifications.notify_members(
            results.event_id,
            NotificationType.POLL_CLOSED,
            "Poll results available",
            message,
            item_id=results.item_id
        )
        return closed
