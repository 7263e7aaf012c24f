"""
Menu category router.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from menuhub.core.deps import get_principal
from menuhub.core.permissions import Principal, get_owned_child, get_owned_restaurant
from menuhub.db.session import get_db
from menuhub.models.activity_log import ActivityAction
from menuhub.models.menu import Category
from menuhub.schemas.base import EntityId, MessageResponse
from menuhub.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from menuhub.services.activity import ENTITY_CATEGORY, record_activity

router = APIRouter(tags=["categories"])


@router.get("/restaurants/{restaurant_id}/categories", response_model=List[CategoryResponse])
def list_categories(
    restaurant_id: EntityId,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_principal),
):
    """List a restaurant's categories in display order."""
    get_owned_restaurant(db, principal, restaurant_id)

    return (
        db.query(Category)
        .filter(Category.restaurant_id == restaurant_id)
        .order_by(Category.display_order.asc(), Category.id.asc())
        .all()
    )


@router.post(
    "/restaurants/{restaurant_id}/categories",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_category(
    restaurant_id: EntityId,
    category_data: CategoryCreate,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_principal),
):
    restaurant = get_owned_restaurant(db, principal, restaurant_id)

    category = Category(restaurant=restaurant, **category_data.model_dump())
    db.add(category)
    db.flush()

    record_activity(
        db,
        actor_id=principal.id,
        action=ActivityAction.CREATE,
        entity_type=ENTITY_CATEGORY,
        entity_id=category.id,
        restaurant_id=restaurant_id,
        details={"name": category.name},
    )
    db.commit()
    db.refresh(category)

    return category


@router.get("/categories/{category_id}", response_model=CategoryResponse)
def get_category(
    category_id: EntityId,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_principal),
):
    return get_owned_child(db, principal, Category, category_id, "Category")


@router.put("/categories/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: EntityId,
    update_data: CategoryUpdate,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_principal),
):
    """Update a category. Its restaurant cannot be changed."""
    category = get_owned_child(db, principal, Category, category_id, "Category")

    for field, value in update_data.changes().items():
        setattr(category, field, value)

    record_activity(
        db,
        actor_id=principal.id,
        action=ActivityAction.UPDATE,
        entity_type=ENTITY_CATEGORY,
        entity_id=category.id,
        restaurant_id=category.restaurant_id,
        details={"name": category.name},
    )
    db.commit()
    db.refresh(category)

    return category


@router.delete("/categories/{category_id}", response_model=MessageResponse)
def delete_category(
    category_id: EntityId,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_principal),
):
    """Delete a category together with the menu items in it."""
    category = get_owned_child(db, principal, Category, category_id, "Category")
    restaurant_id = category.restaurant_id
    name = category.name

    db.delete(category)
    record_activity(
        db,
        actor_id=principal.id,
        action=ActivityAction.DELETE,
        entity_type=ENTITY_CATEGORY,
        entity_id=category_id,
        restaurant_id=restaurant_id,
        details={"name": name},
    )
    db.commit()

    return MessageResponse(message="Category deleted successfully")
