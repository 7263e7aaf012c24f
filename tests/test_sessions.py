"""
Tests for the session stores.
"""
from datetime import datetime, timedelta, timezone

from sqlalchemy.orm import Session

from menuhub.core.security import hash_token
from menuhub.models.user import User
from menuhub.models.user_session import UserSession
from menuhub.services.sessions import (
    DatabaseSessionStore,
    RedisSessionStore,
    cleanup_expired_sessions,
)


class FakeRedis:
    """In-memory stand-in exposing the Redis commands the store uses."""

    def __init__(self):
        self.data = {}
        self.ttls = {}

    def setex(self, key, ttl, value):
        self.data[key] = value.encode()
        self.ttls[key] = ttl

    def get(self, key):
        return self.data.get(key)

    def delete(self, key):
        self.data.pop(key, None)


class TestDatabaseSessionStore:
    """Tests for sessions stored in user_sessions."""

    def test_create_and_resolve(self, db: Session, owner: User):
        store = DatabaseSessionStore(db)

        token = store.create(owner.id)

        assert store.get_user_id(token) == owner.id
        assert db.get(UserSession, hash_token(token)) is not None

    def test_revoke(self, db: Session, owner: User):
        store = DatabaseSessionStore(db)
        token = store.create(owner.id)

        store.revoke(token)

        assert store.get_user_id(token) is None

    def test_expired_session_rejected(self, db: Session, owner: User):
        store = DatabaseSessionStore(db)
        db.add(UserSession(
            token_hash=hash_token("stale"),
            user_id=owner.id,
            expires_at=datetime.now(timezone.utc) - timedelta(minutes=1),
        ))
        db.commit()

        assert store.get_user_id("stale") is None

    def test_cleanup_removes_only_expired(self, db: Session, owner: User):
        store = DatabaseSessionStore(db)
        live_token = store.create(owner.id)
        db.add(UserSession(
            token_hash=hash_token("stale"),
            user_id=owner.id,
            expires_at=datetime.now(timezone.utc) - timedelta(hours=1),
        ))
        db.commit()

        assert cleanup_expired_sessions(db) == 1
        assert store.get_user_id(live_token) == owner.id


class TestRedisSessionStore:
    """Tests for sessions stored in Redis."""

    def test_create_sets_ttl_and_hashes_key(self):
        client = FakeRedis()
        store = RedisSessionStore(client)

        token = store.create(42)

        key = f"menuhub:session:{hash_token(token)}"
        assert client.data[key] == b"42"
        assert client.ttls[key] == 24 * 3600
        assert token not in key

    def test_resolve_and_revoke(self):
        store = RedisSessionStore(FakeRedis())
        token = store.create(42)

        assert store.get_user_id(token) == 42

        store.revoke(token)
        assert store.get_user_id(token) is None

    def test_unknown_token(self):
        assert RedisSessionStore(FakeRedis()).get_user_id("nope") is None
