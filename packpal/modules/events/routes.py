from fastapi import APIRouter, Depends
from packpal.modules.events.schemas import (
    EventCreate, EventUpdate, EventResponse, JoinEventRequest, JoinEventResponse, EventExport
)
from packpal.modules.events.service import EventService
from packpal.modules.templates.routes import get_template_service
from packpal.modules.templates.service import TemplateService
from packpal.core.dependencies import get_current_user, get_store, get_broadcaster
from packpal.database.store import Store
from packpal.realtime.broadcaster import ChangeBroadcaster
from typing import List, Dict

router = APIRouter(prefix="/events", tags=["events"])


def get_event_service(
    store: Store = Depends(get_store),
    broadcaster: ChangeBroadcaster = Depends(get_broadcaster)
) -> EventService:
    return EventService(store, broadcaster)


@router.post("", response_model=EventResponse, status_code=201)
async def create_event(
    event_data: EventCreate,
    user_data: Dict = Depends(get_current_user),
    service: EventService = Depends(get_event_service),
    templates: TemplateService = Depends(get_template_service)
):
    """Create a new event; the caller becomes its owner. Optionally seeded from a template."""
    if event_data.template:
        templates.get_template(event_data.template)
    event = await service.create_event(event_data, user_data["id"])
    if event_data.template:
        try:
            await templates.apply_template(event.id, event_data.template, user_data["id"])
        except Exception:
            # No partly seeded event survives a failed template
            await service.delete_event(event.id, user_data["id"])
            raise
    return event


@router.get("", response_model=List[EventResponse])
async def list_events(
    user_data: Dict = Depends(get_current_user),
    service: EventService = Depends(get_event_service)
):
    """List events the caller is a member of or created"""
    return await service.list_events(user_data["id"])


@router.post("/join", response_model=JoinEventResponse, status_code=201)
async def join_event(
    join_data: JoinEventRequest,
    user_data: Dict = Depends(get_current_user),
    service: EventService = Depends(get_event_service)
):
    """Join an event by invite code (as member)"""
    return await service.join_event(join_data.invite_code, user_data["id"])


@router.get("/{event_id}", response_model=EventResponse)
async def get_event(
    event_id: str,
    user_data: Dict = Depends(get_current_user),
    service: EventService = Depends(get_event_service)
):
    """Get event by ID (members only)"""
    return await service.get_event(event_id, user_data["id"])


@router.put("/{event_id}", response_model=EventResponse)
async def update_event(
    event_id: str,
    event_data: EventUpdate,
    user_data: Dict = Depends(get_current_user),
    service: EventService = Depends(get_event_service)
):
    """Update event details (requires manage_settings)"""
    return await service.update_event(event_id, event_data, user_data["id"])


@router.delete("/{event_id}", status_code=204)
async def delete_event(
    event_id: str,
    user_data: Dict = Depends(get_current_user),
    service: EventService = Depends(get_event_service)
):
    """Delete event with its categories, items and memberships (creator or owner)"""
    await service.delete_event(event_id, user_data["id"])
    return None


@router.get("/{event_id}/export", response_model=EventExport)
async def export_event(
    event_id: str,
    user_data: Dict = Depends(get_current_user),
    service: EventService = Depends(get_event_service)
):
    """Export the full packing list (requires export_data)"""
    return await service.export_event(event_id, user_data["id"])
