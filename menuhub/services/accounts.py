"""
User account helpers shared by the users router, provisioning and startup.
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from menuhub.core.config import get_settings
from menuhub.core.exceptions import ConflictError, ValidationFailedError
from menuhub.core.security import hash_password
from menuhub.models.restaurant import Restaurant
from menuhub.models.user import User, UserRole

logger = logging.getLogger(__name__)


def ensure_username_available(db: Session, username: str, exclude_user_id: Optional[int] = None) -> None:
    query = db.query(User).filter(User.username == username)
    if exclude_user_id is not None:
        query = query.filter(User.id != exclude_user_id)
    if query.first():
        raise ConflictError("Username already exists")


def build_user(username: str, password: str, name: str, email: str, role: UserRole) -> User:
    """New, unsaved user with a hashed password."""
    return User(
        username=username,
        hashed_password=hash_password(password),
        name=name,
        email=email,
        role=role.value,
    )


def count_super_admins(db: Session) -> int:
    return db.query(User).filter(User.role == UserRole.SUPER_ADMIN.value).count()


def ensure_assignable_admin(db: Session, admin_id: int, restaurant_id: Optional[int] = None) -> User:
    """
    Check that ``admin_id`` may own a restaurant.

    The user must exist, be a restaurant admin, and not already own a
    restaurant other than ``restaurant_id``.
    """
    admin = db.get(User, admin_id)
    if admin is None:
        raise ValidationFailedError.for_field("adminId", "Admin user not found")

    if admin.role != UserRole.RESTAURANT_ADMIN.value:
        raise ValidationFailedError.for_field("adminId", "Restaurants can only be assigned to restaurant admins")

    owned = db.query(Restaurant).filter(Restaurant.admin_id == admin_id)
    if restaurant_id is not None:
        owned = owned.filter(Restaurant.id != restaurant_id)
    if owned.first():
        raise ConflictError("This admin already manages a restaurant")

    return admin


def ensure_super_admin(db: Session) -> Optional[User]:
    """
    Create the initial super admin from settings when none exists.

    Returns the created user, or None when nothing had to be done.
    """
    settings = get_settings()
    if not settings.INITIAL_ADMIN_USERNAME or not settings.INITIAL_ADMIN_PASSWORD:
        return None

    if count_super_admins(db) > 0:
        return None

    admin = build_user(
        username=settings.INITIAL_ADMIN_USERNAME,
        password=settings.INITIAL_ADMIN_PASSWORD,
        name="Super Admin",
        email=settings.INITIAL_ADMIN_EMAIL,
        role=UserRole.SUPER_ADMIN,
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    logger.info("Created initial super admin %r", admin.username)
    return admin
