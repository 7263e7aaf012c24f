from datetime import datetime
from typing import Optional

from pydantic import Field

from menuhub.schemas.base import CamelModel, PartialUpdate


class CategoryCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    icon: str = Field(default="utensils", min_length=1, max_length=100)
    display_order: int = 0


class CategoryUpdate(PartialUpdate):
    non_nullable = ("name", "icon", "display_order")

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    icon: Optional[str] = Field(default=None, min_length=1, max_length=100)
    display_order: Optional[int] = None


class CategoryResponse(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    icon: str
    display_order: int
    restaurant_id: int
    created_at: datetime
    updated_at: datetime
