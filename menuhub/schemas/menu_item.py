"""
Menu item Pydantic schemas for API request/response models.

Prices are integers in the currency's minor unit.
"""
from datetime import datetime
from typing import Optional

from pydantic import Field

from menuhub.schemas.base import CamelModel, PartialUpdate, id_field


class MenuItemCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    price: int = Field(ge=0)
    discount_price: Optional[int] = Field(default=None, ge=0)
    image: Optional[str] = Field(default=None, max_length=1024)
    featured: bool = False
    category_id: int = id_field()


class MenuItemUpdate(PartialUpdate):
    non_nullable = ("name", "price", "featured", "category_id")

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    price: Optional[int] = Field(default=None, ge=0)
    discount_price: Optional[int] = Field(default=None, ge=0)
    image: Optional[str] = Field(default=None, max_length=1024)
    featured: Optional[bool] = None
    category_id: Optional[int] = id_field(default=None)


class MenuItemResponse(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    price: int
    discount_price: Optional[int] = None
    image: Optional[str] = None
    featured: bool
    category_id: int
    restaurant_id: int
    created_at: datetime
    updated_at: datetime
