"""
User management router. Every endpoint requires a super admin.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from menuhub.core.deps import get_super_admin
from menuhub.core.exceptions import ConflictError, NotFoundError
from menuhub.core.permissions import Principal
from menuhub.core.security import hash_password
from menuhub.db.session import get_db
from menuhub.models.activity_log import ActivityAction
from menuhub.models.restaurant import Restaurant
from menuhub.models.user import User, UserRole
from menuhub.schemas.base import EntityId, MessageResponse
from menuhub.schemas.user import UserCreate, UserResponse, UserUpdate
from menuhub.services.accounts import build_user, count_super_admins, ensure_username_available
from menuhub.services.activity import ENTITY_USER, record_activity

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


def get_user_or_404(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if not user:
        raise NotFoundError("User not found")
    return user


@router.get("", response_model=List[UserResponse])
def list_users(
    db: Session = Depends(get_db),
    admin: Principal = Depends(get_super_admin),
):
    return db.query(User).order_by(User.id.asc()).all()


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: EntityId,
    db: Session = Depends(get_db),
    admin: Principal = Depends(get_super_admin),
):
    return get_user_or_404(db, user_id)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user_data: UserCreate,
    db: Session = Depends(get_db),
    admin: Principal = Depends(get_super_admin),
):
    ensure_username_available(db, user_data.username)

    user = build_user(
        username=user_data.username,
        password=user_data.password,
        name=user_data.name,
        email=user_data.email,
        role=user_data.role,
    )
    db.add(user)
    db.flush()

    record_activity(
        db,
        actor_id=admin.id,
        action=ActivityAction.CREATE,
        entity_type=ENTITY_USER,
        entity_id=user.id,
        details={"username": user.username},
    )
    db.commit()
    db.refresh(user)

    return user


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: EntityId,
    update_data: UserUpdate,
    db: Session = Depends(get_db),
    admin: Principal = Depends(get_super_admin),
):
    """
    Update profile fields or reset a password. The role cannot be changed.
    """
    user = get_user_or_404(db, user_id)
    changes = update_data.changes()

    if "username" in changes:
        ensure_username_available(db, changes["username"], exclude_user_id=user.id)

    if "password" in changes:
        user.hashed_password = hash_password(changes.pop("password"))

    for field, value in changes.items():
        setattr(user, field, value)

    record_activity(
        db,
        actor_id=admin.id,
        action=ActivityAction.UPDATE,
        entity_type=ENTITY_USER,
        entity_id=user.id,
        details={"username": user.username},
    )
    db.commit()
    db.refresh(user)

    return user


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: EntityId,
    db: Session = Depends(get_db),
    admin: Principal = Depends(get_super_admin),
):
    """
    Delete a user.

    The last super admin cannot be deleted, and neither can an admin that
    still manages a restaurant.
    """
    user = get_user_or_404(db, user_id)

    if user.role == UserRole.SUPER_ADMIN.value and count_super_admins(db) <= 1:
        raise ConflictError("Cannot delete the only super admin")

    owned = db.query(Restaurant).filter(Restaurant.admin_id == user.id).first()
    if owned:
        raise ConflictError(f"User still manages restaurant {owned.name!r}")

    username = user.username
    db.delete(user)
    record_activity(
        db,
        actor_id=admin.id if admin.id != user_id else None,
        action=ActivityAction.DELETE,
        entity_type=ENTITY_USER,
        entity_id=user_id,
        details={"username": username},
    )
    db.commit()

    logger.info("User %d deleted by %d", user_id, admin.id)
    return MessageResponse(message="User deleted successfully")
