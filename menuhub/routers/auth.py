"""
Authentication router with login, logout, and current-user endpoints.

Sessions are server-side: the cookie only carries an opaque token.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from menuhub.core.config import get_settings
from menuhub.core.deps import get_current_user, get_session_token
from menuhub.core.exceptions import UnauthenticatedError
from menuhub.core.security import verify_password
from menuhub.db.session import get_db
from menuhub.models.activity_log import ActivityAction
from menuhub.models.user import User
from menuhub.schemas.auth import LoginRequest, LoginResponse
from menuhub.schemas.base import MessageResponse
from menuhub.schemas.user import UserResponse
from menuhub.services.activity import ENTITY_USER, record_activity
from menuhub.services.sessions import SessionStore, get_session_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
) -> LoginResponse:
    """
    Authenticate with username and password and open a session.
    """
    user = db.query(User).filter(User.username == credentials.username).first()

    if not user or not verify_password(credentials.password, user.hashed_password):
        logger.warning("Failed login attempt for username %r", credentials.username)
        raise UnauthenticatedError("Invalid credentials")

    record_activity(
        db,
        actor_id=user.id,
        action=ActivityAction.LOGIN,
        entity_type=ENTITY_USER,
        entity_id=user.id,
        details={"username": user.username},
    )
    db.commit()

    token = store.create(user.id)

    settings = get_settings()
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_EXPIRE_HOURS * 3600,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )

    logger.info("User %d logged in", user.id)
    return LoginResponse(user=UserResponse.model_validate(user))


@router.post("/logout", response_model=MessageResponse)
def logout(
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    store: SessionStore = Depends(get_session_store),
) -> MessageResponse:
    """
    End the current session. Safe to call without one.
    """
    if token:
        store.revoke(token)

    response.delete_cookie(get_settings().SESSION_COOKIE_NAME)
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=UserResponse)
def get_me(current_user: User = Depends(get_current_user)) -> User:
    """
    Get the current authenticated user's profile.
    """
    return current_user
