"""
Ownership guard for restaurant-scoped resources.

Super admins may act on any restaurant; a restaurant admin only on the
restaurant whose ``admin_id`` is their own id. Nested resources are resolved
to their owning restaurant first, then the same rule applies.

Lookup order is fixed: the requested entity must exist, then its restaurant
must exist, and only then is ownership checked. A miss at either step is a
404; a failed ownership check is a 403.
"""
from dataclasses import dataclass
from typing import Type, TypeVar

from sqlalchemy.orm import Session

from menuhub.core.exceptions import ForbiddenError, NotFoundError
from menuhub.models.restaurant import Restaurant
from menuhub.models.user import User, UserRole

T = TypeVar("T")


@dataclass(frozen=True)
class Principal:
    """The authenticated actor of a request."""
    id: int
    role: UserRole

    @classmethod
    def from_user(cls, user: User) -> "Principal":
        return cls(id=user.id, role=UserRole(user.role))

    @property
    def is_super_admin(self) -> bool:
        return self.role == UserRole.SUPER_ADMIN


def can_access_restaurant(principal: Principal, restaurant: Restaurant) -> bool:
    """Pure ownership decision."""
    if principal.is_super_admin:
        return True
    return restaurant.admin_id == principal.id


def check_restaurant_access(principal: Principal, restaurant: Restaurant) -> None:
    if not can_access_restaurant(principal, restaurant):
        raise ForbiddenError()


def require_super_admin(principal: Principal) -> None:
    if not principal.is_super_admin:
        raise ForbiddenError("Forbidden: Super admin access required")


def get_owned_restaurant(db: Session, principal: Principal, restaurant_id: int) -> Restaurant:
    """Load a restaurant the principal may manage."""
    restaurant = db.get(Restaurant, restaurant_id)
    if restaurant is None:
        raise NotFoundError("Restaurant not found")
    check_restaurant_access(principal, restaurant)
    return restaurant


def get_owned_child(db: Session, principal: Principal, model: Type[T], entity_id: int, label: str) -> T:
    """
    Load a restaurant-scoped entity (category, menu item, social link, QR code)
    the principal may manage.

    Args:
        model: ORM class with a ``restaurant_id`` column
        label: Human-readable entity name used in the 404 message
    """
    entity = db.get(model, entity_id)
    if entity is None:
        raise NotFoundError(f"{label} not found")

    restaurant = db.get(Restaurant, entity.restaurant_id)
    if restaurant is None:
        raise NotFoundError("Restaurant not found")

    check_restaurant_access(principal, restaurant)
    return entity
