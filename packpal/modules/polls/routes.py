from fastapi import APIRouter, Depends
from packpal.modules.polls.schemas import PollCreate, PollResponse, VoteRequest
from packpal.modules.polls.service import PollService
from packpal.modules.notifications.service import NotificationService
from packpal.core.dependencies import get_current_user, get_store
from packpal.database.store import Store
from typing import List, Dict

router = APIRouter(tags=["polls"])


def get_poll_service(store: Store = Depends(get_store)) -> PollService:
    return PollService(store, NotificationService(store))


@router.post("/polls", response_model=PollResponse, status_code=201)
async def create_poll(
    poll_data: PollCreate,
    user_data: Dict = Depends(get_current_user),
    service: PollService = Depends(get_poll_service)
):
    """Create a poll for an event, optionally about one item"""
    return await service.create_poll(poll_data, user_data["id"])


@router.get("/polls/{poll_id}", response_model=PollResponse)
async def get_poll(
    poll_id: str,
    user_data: Dict = Depends(get_current_user),
    service: PollService = Depends(get_poll_service)
):
    """Get a poll with its options ordered by votes"""
    return await service.get_poll(poll_id, user_data["id"])


@router.post("/polls/{poll_id}/vote", response_model=PollResponse)
async def vote(
    poll_id: str,
    vote_data: VoteRequest,
    user_data: Dict = Depends(get_current_user),
    service: PollService = Depends(get_poll_service)
):
    return await service.vote(poll_id, vote_data.option_id, user_data["id"])


@router.post("/polls/{poll_id}/close", response_model=PollResponse)
async def close_poll(
    poll_id: str,
    user_data: Dict = Depends(get_current_user),
    service: PollService = Depends(get_poll_service)
):
    return await service.close_poll(poll_id, user_data["id"])


@router.get("/events/{event_id}/polls", response_model=List[PollResponse])
async def list_polls(
    event_id: str,
    user_data: Dict = Depends(get_current_user),
    service: PollService = Depends(get_poll_service)
):
    return await service.list_polls(event_id, user_data["id"])
