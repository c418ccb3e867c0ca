import logging
from typing import List

from packpal.core.access import authorize, enforce
from packpal.core.exceptions import NotFoundError
from packpal.core.permissions import Capability
from packpal.database.store import Store
from packpal.modules.categories.schemas import CategoryCreate
from packpal.modules.categories.service import CategoryService
from packpal.modules.events.service import get_event_or_404
from packpal.modules.items.schemas import ItemCreate
from packpal.modules.items.service import ItemService
from packpal.modules.templates.data import PREMADE_TEMPLATES
from packpal.modules.templates.schemas import TemplateApplyResponse, TemplateResponse
from packpal.realtime.broadcaster import ChangeBroadcaster

logger = logging.getLogger(__name__)

_TEMPLATES = {t["name"].lower(): TemplateResponse(**t) for t in PREMADE_TEMPLATES}


class TemplateService:
    def __init__(self, store: Store, broadcaster: ChangeBroadcaster):
        self.store = store
        self.broadcaster = broadcaster

    def list_templates(self) -> List[TemplateResponse]:
        return list(_TEMPLATES.values())

    def get_template(self, name: str) -> TemplateResponse:
        template = _TEMPLATES.get(name.strip().lower())
        if template is None:
            raise NotFoundError(f"Template '{name}' not found")
        return template

    async def apply_template(self, event_id: str, name: str, user_id: str) -> TemplateApplyResponse:
        """Create the template's categories and items in the event (requires manage_templates)"""
        template = self.get_template(name)
        event = await get_event_or_404(self.store, event_id)
        enforce(authorize(event, user_id, Capability.MANAGE_TEMPLATES), "apply templates to this event")

        categories = CategoryService(self.store, self.broadcaster)
        items = ItemService(self.store, self.broadcaster)
        created_categories = [
            await categories.create_category(
                event_id, CategoryCreate(name=c.name, description=c.description), user_id
            )
            for c in template.categories
        ]
        created_items = [
            await items.create_item(
                event_id,
                ItemCreate(
                    category_id=created_categories[i.category].id,
                    name=i.name,
                    description=i.description
                ),
                user_id
            )
            for i in template.items
        ]
        logger.info(f"Applied template '{template.name}' to event {event_id}")
        return TemplateApplyResponse(
            template=template.name,
            event_id=event_id,
            categories=created_categories,
            items=created_items
        )
