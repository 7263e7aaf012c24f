"""
Public menu endpoints. No authentication.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from menuhub.core.exceptions import NotFoundError
from menuhub.db.session import get_db
from menuhub.schemas.base import EntityId
from menuhub.schemas.public_menu import PublicMenuResponse
from menuhub.services.public_menu import (
    MENU_NOT_AVAILABLE,
    PublicMenuService,
    SlugResolver,
    get_slug_resolver,
)

router = APIRouter(tags=["public"])
pages_router = APIRouter(tags=["public"])


@router.get("/public/restaurants/{restaurant_id}/menu", response_model=PublicMenuResponse)
def get_public_menu(restaurant_id: EntityId, db: Session = Depends(get_db)):
    """
    Full menu of an active restaurant: branding, categories in display
    order with their items, and social links.
    """
    return PublicMenuService(db).get_menu(restaurant_id)


@pages_router.get("/menus/{slug}", response_model=PublicMenuResponse)
def get_menu_by_slug(
    slug: str,
    db: Session = Depends(get_db),
    resolver: SlugResolver = Depends(get_slug_resolver),
):
    """Menu behind a printed QR code link."""
    restaurant_id = resolver.resolve(slug)
    if restaurant_id is None:
        raise NotFoundError(MENU_NOT_AVAILABLE)
    return PublicMenuService(db).get_menu(restaurant_id)
