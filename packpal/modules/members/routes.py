from fastapi import APIRouter, Depends
from packpal.modules.members.schemas import MemberAdd, MemberRoleUpdate, MemberResponse
from packpal.modules.members.service import MemberService
from packpal.core.dependencies import get_current_user, get_store, get_broadcaster
from packpal.database.store import Store
from packpal.realtime.broadcaster import ChangeBroadcaster
from typing import List, Dict

router = APIRouter(prefix="/events/{event_id}/members", tags=["members"])


def get_member_service(
    store: Store = Depends(get_store),
    broadcaster: ChangeBroadcaster = Depends(get_broadcaster)
) -> MemberService:
    return MemberService(store, broadcaster)


@router.get("", response_model=List[MemberResponse])
async def list_members(
    event_id: str,
    user_data: Dict = Depends(get_current_user),
    service: MemberService = Depends(get_member_service)
):
    """List all members of an event (members only)"""
    return await service.list_members(event_id, user_data["id"])


@router.post("", response_model=MemberResponse, status_code=201)
async def add_member(
    event_id: str,
    member_data: MemberAdd,
    user_data: Dict = Depends(get_current_user),
    service: MemberService = Depends(get_member_service)
):
    """Add a member to the event (requires manage_users)"""
    return await service.add_member(event_id, member_data, user_data["id"])


@router.put("/{user_id}", response_model=MemberResponse)
async def update_member_role(
    event_id: str,
    user_id: str,
    role_data: MemberRoleUpdate,
    user_data: Dict = Depends(get_current_user),
    service: MemberService = Depends(get_member_service)
):
    """Change a member's role (owners only)"""
    return await service.update_member_role(event_id, user_id, role_data.role, user_data["id"])


@router.delete("/{user_id}", status_code=204)
async def remove_member(
    event_id: str,
    user_id: str,
    user_data: Dict = Depends(get_current_user),
    service: MemberService = Depends(get_member_service)
):
    """Remove a member, or leave the event when user_id is the caller"""
    await service.remove_member(event_id, user_id, user_data["id"])
    return None
