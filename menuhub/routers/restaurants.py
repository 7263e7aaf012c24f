"""
Restaurant router.

Restaurant admins see and edit only their own restaurant and can never
reassign it. Super admins see everything, assign owners, provision new
restaurants and delete them.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from menuhub.core.deps import get_principal, get_super_admin
from menuhub.core.exceptions import NotFoundError, ValidationFailedError
from menuhub.core.permissions import Principal, get_owned_restaurant
from menuhub.db.session import get_db
from menuhub.models.activity_log import ActivityAction
from menuhub.models.restaurant import Restaurant
from menuhub.schemas.base import EntityId, MessageResponse
from menuhub.schemas.restaurant import (
    ProvisionRequest,
    ProvisionResponse,
    RestaurantCreate,
    RestaurantResponse,
    RestaurantUpdate,
)
from menuhub.schemas.user import UserResponse
from menuhub.services.accounts import ensure_assignable_admin
from menuhub.services.activity import ENTITY_RESTAURANT, record_activity
from menuhub.services.provisioning import ProvisioningService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/restaurants", tags=["restaurants"])


@router.get("", response_model=List[RestaurantResponse])
def list_restaurants(
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_principal),
):
    query = db.query(Restaurant)
    if not principal.is_super_admin:
        query = query.filter(Restaurant.admin_id == principal.id)
    return query.order_by(Restaurant.id.asc()).all()


@router.get("/{restaurant_id}", response_model=RestaurantResponse)
def get_restaurant(
    restaurant_id: EntityId,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_principal),
):
    return get_owned_restaurant(db, principal, restaurant_id)


@router.post("", response_model=RestaurantResponse, status_code=status.HTTP_201_CREATED)
def create_restaurant(
    restaurant_data: RestaurantCreate,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_principal),
):
    """
    Create a restaurant.

    A restaurant admin always becomes the owner of what they create, whatever
    ``adminId`` the payload carries. A super admin must name the owner.
    """
    if principal.is_super_admin:
        if restaurant_data.admin_id is None:
            raise ValidationFailedError.for_field("adminId", "adminId is required")
        admin_id = restaurant_data.admin_id
    else:
        admin_id = principal.id

    ensure_assignable_admin(db, admin_id)

    attributes = restaurant_data.model_dump(mode="json", exclude={"admin_id"})
    restaurant = Restaurant(admin_id=admin_id, **attributes)
    db.add(restaurant)
    db.flush()

    record_activity(
        db,
        actor_id=principal.id,
        action=ActivityAction.CREATE,
        entity_type=ENTITY_RESTAURANT,
        entity_id=restaurant.id,
        restaurant_id=restaurant.id,
        details={"name": restaurant.name},
    )
    db.commit()
    db.refresh(restaurant)

    return restaurant


@router.post("/provision", response_model=ProvisionResponse, status_code=status.HTTP_201_CREATED)
def provision_restaurant(
    request: ProvisionRequest,
    db: Session = Depends(get_db),
    admin: Principal = Depends(get_super_admin),
):
    """
    Create a restaurant and its admin account in one step.

    Pass ``admin`` credentials to create a new restaurant admin, or
    ``adminId`` to hand the restaurant to an existing one.
    """
    restaurant, restaurant_admin = ProvisioningService(db).provision(admin, request)
    return ProvisionResponse(
        restaurant=RestaurantResponse.model_validate(restaurant),
        admin=UserResponse.model_validate(restaurant_admin),
    )


@router.put("/{restaurant_id}", response_model=RestaurantResponse)
def update_restaurant(
    restaurant_id: EntityId,
    update_data: RestaurantUpdate,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_principal),
):
    restaurant = get_owned_restaurant(db, principal, restaurant_id)
    changes = update_data.changes()

    # Only super admins may reassign ownership
    if not principal.is_super_admin:
        changes.pop("admin_id", None)
    elif "admin_id" in changes:
        if changes["admin_id"] is None:
            raise ValidationFailedError.for_field("adminId", "adminId cannot be null")
        if changes["admin_id"] != restaurant.admin_id:
            ensure_assignable_admin(db, changes["admin_id"], restaurant_id=restaurant.id)

    for field, value in changes.items():
        setattr(restaurant, field, value)

    record_activity(
        db,
        actor_id=principal.id,
        action=ActivityAction.UPDATE,
        entity_type=ENTITY_RESTAURANT,
        entity_id=restaurant.id,
        restaurant_id=restaurant.id,
        details={"name": restaurant.name},
    )
    db.commit()
    db.refresh(restaurant)

    return restaurant


@router.delete("/{restaurant_id}", response_model=MessageResponse)
def delete_restaurant(
    restaurant_id: EntityId,
    db: Session = Depends(get_db),
    admin: Principal = Depends(get_super_admin),
):
    """
    Delete a restaurant with its categories, menu items, social links and
    QR codes. Activity history is kept.
    """
    restaurant = db.get(Restaurant, restaurant_id)
    if not restaurant:
        raise NotFoundError("Restaurant not found")

    name = restaurant.name
    db.delete(restaurant)
    record_activity(
        db,
        actor_id=admin.id,
        action=ActivityAction.DELETE,
        entity_type=ENTITY_RESTAURANT,
        entity_id=restaurant_id,
        details={"name": name},
    )
    db.commit()

    logger.info("Restaurant %d deleted by %d", restaurant_id, admin.id)
    return MessageResponse(message="Restaurant deleted successfully")
