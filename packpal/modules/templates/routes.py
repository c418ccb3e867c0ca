from fastapi import APIRouter, Depends
from packpal.modules.templates.schemas import TemplateResponse, TemplateApplyResponse
from packpal.modules.templates.service import TemplateService
from packpal.core.dependencies import get_current_user, get_store, get_broadcaster
from packpal.database.store import Store
from packpal.realtime.broadcaster import ChangeBroadcaster
from typing import List, Dict

router = APIRouter(tags=["templates"])


def get_template_service(
    store: Store = Depends(get_store),
    broadcaster: ChangeBroadcaster = Depends(get_broadcaster)
) -> TemplateService:
    return TemplateService(store, broadcaster)


@router.get("/templates", response_model=List[TemplateResponse])
async def list_templates(
    user_data: Dict = Depends(get_current_user),
    service: TemplateService = Depends(get_template_service)
):
    """List premade packing templates"""
    return service.list_templates()


@router.get("/templates/{template_name}", response_model=TemplateResponse)
async def get_template(
    template_name: str,
    user_data: Dict = Depends(get_current_user),
    service: TemplateService = Depends(get_template_service)
):
    return service.get_template(template_name)


@router.post(
    "/events/{event_id}/templates/{template_name}",
    response_model=TemplateApplyResponse,
    status_code=201
)
async def apply_template(
    event_id: str,
    template_name: str,
    user_data: Dict = Depends(get_current_user),
    service: TemplateService = Depends(get_template_service)
):
    """Add a template's categories and items to an event (requires manage_templates)"""
    return await service.apply_template(event_id, template_name, user_data["id"])
