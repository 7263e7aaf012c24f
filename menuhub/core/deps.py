"""
FastAPI dependencies for authentication.
"""
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from menuhub.core.config import get_settings
from menuhub.core.exceptions import UnauthenticatedError
from menuhub.core.permissions import Principal, require_super_admin
from menuhub.db.session import get_db
from menuhub.models.user import User
from menuhub.services.sessions import SessionStore, get_session_store


def get_session_token(request: Request) -> Optional[str]:
    """Opaque session token from the session cookie, if any."""
    return request.cookies.get(get_settings().SESSION_COOKIE_NAME)


def get_current_user(
    token: Optional[str] = Depends(get_session_token),
    store: SessionStore = Depends(get_session_store),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the session cookie to a user or fail with 401."""
    if not token:
        raise UnauthenticatedError()

    user_id = store.get_user_id(token)
    if user_id is None:
        raise UnauthenticatedError()

    user = db.get(User, user_id)
    if user is None:
        raise UnauthenticatedError("User not found")

    return user


def get_principal(current_user: User = Depends(get_current_user)) -> Principal:
    return Principal.from_user(current_user)


def get_super_admin(principal: Principal = Depends(get_principal)) -> Principal:
    require_super_admin(principal)
    return principal
