"""
Menu items router.

Every item belongs to a category of the same restaurant; creating or moving
an item into another restaurant's category is rejected.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from menuhub.core.deps import get_principal
from menuhub.core.exceptions import ValidationFailedError
from menuhub.core.permissions import Principal, get_owned_child, get_owned_restaurant
from menuhub.db.session import get_db
from menuhub.models.activity_log import ActivityAction
from menuhub.models.menu import Category, MenuItem
from menuhub.schemas.base import EntityId, MessageResponse
from menuhub.schemas.menu_item import MenuItemCreate, MenuItemResponse, MenuItemUpdate
from menuhub.services.activity import ENTITY_MENU_ITEM, record_activity

router = APIRouter(tags=["menu-items"])


def get_category_in_restaurant(db: Session, category_id: int, restaurant_id: int) -> Category:
    """Category ``category_id`` if it belongs to ``restaurant_id``, else a validation error."""
    category = db.get(Category, category_id)
    if category is None or category.restaurant_id != restaurant_id:
        raise ValidationFailedError.for_field("categoryId", "Category does not belong to this restaurant")
    return category


@router.get("/restaurants/{restaurant_id}/menu-items", response_model=List[MenuItemResponse])
def list_restaurant_menu_items(
    restaurant_id: EntityId,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_principal),
):
    get_owned_restaurant(db, principal, restaurant_id)

    return (
        db.query(MenuItem)
        .filter(MenuItem.restaurant_id == restaurant_id)
        .order_by(MenuItem.id.asc())
        .all()
    )


@router.get("/categories/{category_id}/menu-items", response_model=List[MenuItemResponse])
def list_category_menu_items(
    category_id: EntityId,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_principal),
):
    get_owned_child(db, principal, Category, category_id, "Category")

    return (
        db.query(MenuItem)
        .filter(MenuItem.category_id == category_id)
        .order_by(MenuItem.id.asc())
        .all()
    )


@router.post(
    "/restaurants/{restaurant_id}/menu-items",
    response_model=MenuItemResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_menu_item(
    restaurant_id: EntityId,
    item_data: MenuItemCreate,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_principal),
):
    restaurant = get_owned_restaurant(db, principal, restaurant_id)
    category = get_category_in_restaurant(db, item_data.category_id, restaurant_id)

    item = MenuItem(
        restaurant=restaurant,
        category=category,
        **item_data.model_dump(exclude={"category_id"}),
    )
    db.add(item)
    db.flush()

    record_activity(
        db,
        actor_id=principal.id,
        action=ActivityAction.CREATE,
        entity_type=ENTITY_MENU_ITEM,
        entity_id=item.id,
        restaurant_id=restaurant_id,
        details={"name": item.name},
    )
    db.commit()
    db.refresh(item)

    return item


@router.get("/menu-items/{item_id}", response_model=MenuItemResponse)
def get_menu_item(
    item_id: EntityId,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_principal),
):
    return get_owned_child(db, principal, MenuItem, item_id, "Menu item")


@router.put("/menu-items/{item_id}", response_model=MenuItemResponse)
def update_menu_item(
    item_id: EntityId,
    update_data: MenuItemUpdate,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_principal),
):
    """
    Update a menu item's properties.

    ``categoryId`` may move the item to another category of the same
    restaurant; the restaurant itself cannot be changed.
    """
    item = get_owned_child(db, principal, MenuItem, item_id, "Menu item")
    changes = update_data.changes()

    if "category_id" in changes and changes["category_id"] != item.category_id:
        item.category = get_category_in_restaurant(db, changes.pop("category_id"), item.restaurant_id)
    changes.pop("category_id", None)

    for field, value in changes.items():
        setattr(item, field, value)

    record_activity(
        db,
        actor_id=principal.id,
        action=ActivityAction.UPDATE,
        entity_type=ENTITY_MENU_ITEM,
        entity_id=item.id,
        restaurant_id=item.restaurant_id,
        details={"name": item.name},
    )
    db.commit()
    db.refresh(item)

    return item


@router.delete("/menu-items/{item_id}", response_model=MessageResponse)
def delete_menu_item(
    item_id: EntityId,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_principal),
):
    item = get_owned_child(db, principal, MenuItem, item_id, "Menu item")
    restaurant_id = item.restaurant_id
    name = item.name

    db.delete(item)
    record_activity(
        db,
        actor_id=principal.id,
        action=ActivityAction.DELETE,
        entity_type=ENTITY_MENU_ITEM,
        entity_id=item_id,
        restaurant_id=restaurant_id,
        details={"name": name},
    )
    db.commit()

    return MessageResponse(message="Menu item deleted successfully")
