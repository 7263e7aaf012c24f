"""
Tests for the error envelope of unexpected and constraint failures.
"""
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from menuhub.main import app
from menuhub.models.user import User
from menuhub.routers import users
from menuhub.services.public_menu import get_slug_resolver


class TestUnexpectedErrors:
    """Unhandled exceptions become a generic 500."""

    def test_internal_details_not_leaked(self, override_db: Session):
        def broken_resolver():
            raise RuntimeError("connection to db-internal:5432 refused")

        app.dependency_overrides[get_slug_resolver] = broken_resolver

        with TestClient(app, raise_server_exceptions=False) as c:
            response = c.get("/menus/5")

        assert response.status_code == 500
        assert response.json() == {"message": "Internal server error"}
        assert "db-internal" not in response.text


class TestIntegrityErrors:
    """Constraint violations that slip past the checks become 409."""

    def test_duplicate_username_reaching_database(
        self, super_client: TestClient, db: Session, owner: User, monkeypatch
    ):
        monkeypatch.setattr(users, "ensure_username_available", lambda *args, **kwargs: None)

        response = super_client.post(
            "/api/users",
            json={
                "username": "owner",
                "password": "secret123",
                "name": "Duplicate",
                "email": "dup@example.com",
            }
        )

        assert response.status_code == 409
        assert response.json() == {"message": "Conflict with existing data"}

        db.rollback()
        assert db.query(User).filter(User.username == "owner").count() == 1
