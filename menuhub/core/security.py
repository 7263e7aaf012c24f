"""
Security utilities for password hashing and session token handling.
"""
from datetime import datetime, timedelta, timezone
import hashlib
import secrets

import bcrypt

from menuhub.core.config import get_settings


def hash_token(token: str) -> str:
    """
    Hash a session token for storage.

    Only the hash is persisted, so a leaked sessions table cannot be
    replayed as cookies.
    """
    return hashlib.sha256(token.encode()).hexdigest()


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt()).decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    try:
        return bcrypt.checkpw(plain_password.encode('utf-8'), hashed_password.encode('utf-8'))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def generate_session_token() -> str:
    """Create a new opaque session token."""
    return secrets.token_urlsafe(32)


def session_expiry(now: datetime | None = None) -> datetime:
    """Expiry timestamp for a session created at ``now``."""
    now = now or datetime.now(timezone.utc)
    return now + timedelta(hours=get_settings().SESSION_EXPIRE_HOURS)
