from pydantic import BaseModel
from typing import Optional, List

from packpal.modules.categories.schemas import CategoryResponse
from packpal.modules.items.schemas import ItemResponse


class TemplateCategory(BaseModel):
    name: str
    description: Optional[str] = None


class TemplateItem(BaseModel):
    name: str
    category: int
    description: Optional[str] = None


class TemplateResponse(BaseModel):
    name: str
    description: Optional[str] = None
    categories: List[TemplateCategory]
    items: List[TemplateItem]


class TemplateApplyResponse(BaseModel):
    template: str
    event_id: str
    categories: List[CategoryResponse]
    items: List[ItemResponse]
