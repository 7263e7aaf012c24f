"""
Server-side session storage.

A session is an opaque token handed to the browser in a cookie and mapped
server-side to a user id. Two backends implement the same contract:

- DatabaseSessionStore: rows in ``user_sessions`` (default)
- RedisSessionStore: keys with a TTL, for deployments running several workers

Request handling depends on ``get_session_store``, so tests and deployments
can swap the backend through FastAPI dependency overrides.
"""
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from functools import lru_cache
import logging
from typing import Optional

from fastapi import Depends
import redis
from sqlalchemy.orm import Session

from menuhub.core.config import get_settings
from menuhub.core.security import generate_session_token, hash_token, session_expiry
from menuhub.db.session import get_db
from menuhub.models.user_session import UserSession

logger = logging.getLogger(__name__)


class SessionStore(ABC):
    """Maps opaque session tokens to user ids."""

    @abstractmethod
    def create(self, user_id: int) -> str:
        """Open a session for ``user_id`` and return the new token."""

    @abstractmethod
    def get_user_id(self, token: str) -> Optional[int]:
        """Return the user id for a live session, or None."""

    @abstractmethod
    def revoke(self, token: str) -> None:
        """End a session. Unknown tokens are ignored."""


class DatabaseSessionStore(SessionStore):
    def __init__(self, db: Session):
        self.db = db

    def create(self, user_id: int) -> str:
        token = generate_session_token()
        self.db.add(UserSession(
            token_hash=hash_token(token),
            user_id=user_id,
            expires_at=session_expiry(),
        ))
        self.db.commit()
        return token

    def get_user_id(self, token: str) -> Optional[int]:
        now = datetime.now(timezone.utc)
        record = self.db.query(UserSession).filter(
            UserSession.token_hash == hash_token(token),
            UserSession.expires_at > now,
        ).first()

        return record.user_id if record else None

    def revoke(self, token: str) -> None:
        self.db.query(UserSession).filter(
            UserSession.token_hash == hash_token(token)
        ).delete()
        self.db.commit()


class RedisSessionStore(SessionStore):
    key_prefix = "menuhub:session:"

    def __init__(self, client: "redis.Redis"):
        self.client = client

    def _key(self, token: str) -> str:
        return f"{self.key_prefix}{hash_token(token)}"

    def create(self, user_id: int) -> str:
        token = generate_session_token()
        ttl_seconds = get_settings().SESSION_EXPIRE_HOURS * 3600
        self.client.setex(self._key(token), ttl_seconds, str(user_id))
        return token

    def get_user_id(self, token: str) -> Optional[int]:
        value = self.client.get(self._key(token))
        if value is None:
            return None
        if isinstance(value, bytes):
            value = value.decode()
        return int(value)

    def revoke(self, token: str) -> None:
        self.client.delete(self._key(token))


@lru_cache
def get_redis_client() -> "redis.Redis":
    """Shared Redis connection pool for the redis session backend."""
    return redis.Redis.from_url(get_settings().REDIS_URL, socket_connect_timeout=2)


def get_session_store(db: Session = Depends(get_db)) -> SessionStore:
    """Dependency returning the configured session backend."""
    if get_settings().SESSION_BACKEND == "redis":
        return RedisSessionStore(get_redis_client())
    return DatabaseSessionStore(db)


def cleanup_expired_sessions(db: Session) -> int:
    """
    Remove expired rows from ``user_sessions``.

    Redis expires keys on its own; this only matters for the database backend.

    Returns:
        Number of sessions removed
    """
    now = datetime.now(timezone.utc)
    result = db.query(UserSession).filter(
        UserSession.expires_at < now
    ).delete()

    db.commit()
    logger.info("Removed %d expired sessions", result)
    return result
