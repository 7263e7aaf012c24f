"""
Read-only public menu document.

Only the fields listed here leave the service: no owner, contact email,
status or timestamps.
"""
from typing import List, Optional

from menuhub.schemas.base import CamelModel


class PublicRestaurant(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    logo: Optional[str] = None
    primary_color: str
    secondary_color: str
    rtl: bool
    phone: Optional[str] = None
    address: Optional[str] = None


class PublicMenuItem(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    price: int
    discount_price: Optional[int] = None
    image: Optional[str] = None
    featured: bool
    category_id: int


class PublicCategory(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    icon: str
    display_order: int
    items: List[PublicMenuItem]


class PublicSocialMediaLink(CamelModel):
    id: int
    platform: str
    url: str


class PublicMenuResponse(CamelModel):
    restaurant: PublicRestaurant
    categories: List[PublicCategory]
    social_media_links: List[PublicSocialMediaLink]
