"""
Public menu aggregation.

Builds the unauthenticated, read-only menu document of one restaurant:
branding, categories with their items, and social links. Only active
restaurants are published; anything else is reported as not found so that
restaurants still in setup (or switched off) stay invisible.
"""
from collections import defaultdict
import re
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from menuhub.core.exceptions import NotFoundError
from menuhub.models.menu import Category, MenuItem
from menuhub.models.restaurant import Restaurant
from menuhub.models.social_media import SocialMediaLink
from menuhub.schemas.base import MAX_ID
from menuhub.schemas.public_menu import (
    PublicCategory,
    PublicMenuItem,
    PublicMenuResponse,
    PublicRestaurant,
    PublicSocialMediaLink,
)

MENU_NOT_AVAILABLE = "Restaurant menu not available"

# "5" or "5-falafel-house"
SLUG_PATTERN = re.compile(r"^(\d+)(?:-[\w-]*)?$")


class SlugResolver:
    """Maps a public menu slug to a restaurant id."""

    def resolve(self, slug: str) -> Optional[int]:
        match = SLUG_PATTERN.match(slug)
        if not match:
            return None
        restaurant_id = int(match.group(1))
        if not 1 <= restaurant_id <= MAX_ID:
            return None
        return restaurant_id


def get_slug_resolver() -> SlugResolver:
    """Dependency hook for swapping slug resolution."""
    return SlugResolver()


class PublicMenuService:
    def __init__(self, db: Session):
        self.db = db

    def get_menu(self, restaurant_id: int) -> PublicMenuResponse:
        restaurant = self.db.get(Restaurant, restaurant_id)
        if restaurant is None or not restaurant.is_public:
            raise NotFoundError(MENU_NOT_AVAILABLE)

        categories = (
            self.db.query(Category)
            .filter(Category.restaurant_id == restaurant_id)
            .order_by(Category.display_order.asc(), Category.id.asc())
            .all()
        )
        items = (
            self.db.query(MenuItem)
            .filter(MenuItem.restaurant_id == restaurant_id)
            .order_by(MenuItem.id.asc())
            .all()
        )
        links = (
            self.db.query(SocialMediaLink)
            .filter(SocialMediaLink.restaurant_id == restaurant_id)
            .order_by(SocialMediaLink.id.asc())
            .all()
        )

        return PublicMenuResponse(
            restaurant=PublicRestaurant.model_validate(restaurant),
            categories=group_items_by_category(categories, items),
            social_media_links=[PublicSocialMediaLink.model_validate(link) for link in links],
        )


def group_items_by_category(categories: List[Category], items: List[MenuItem]) -> List[PublicCategory]:
    """
    Attach each item to its category.

    Category order is kept as given; items keep their relative order within
    a category. Items whose category is not in ``categories`` are dropped.
    """
    by_category: Dict[int, List[PublicMenuItem]] = defaultdict(list)
    for item in items:
        by_category[item.category_id].append(PublicMenuItem.model_validate(item))

    return [
        PublicCategory(
            id=category.id,
            name=category.name,
            description=category.description,
            icon=category.icon,
            display_order=category.display_order,
            items=by_category.get(category.id, []),
        )
        for category in categories
    ]
