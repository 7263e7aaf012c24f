"""
Tests for health check endpoints.
"""
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from menuhub.db.session import get_db
from menuhub.main import app


class TestHealth:
    """Tests for health check endpoints."""

    def test_basic_health(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_api_health_with_services(self, client: TestClient):
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["services"]["database"]["status"] == "ok"
        # Redis is not checked with the database session backend
        assert "redis" not in data["services"]

    def test_root(self, client: TestClient):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["docs"] == "/docs"


class TestHealthFailures:
    """Tests for the unhealthy path of /api/health."""

    def test_database_failure_hides_details(self, client: TestClient):
        class BrokenSession:
            def execute(self, statement):
                raise OperationalError("SELECT 1", {}, Exception("password=hunter2"))

        def broken_db():
            yield BrokenSession()

        app.dependency_overrides[get_db] = broken_db

        response = client.get("/api/health")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "unhealthy"
        assert data["services"]["database"] == {"status": "error", "message": "Database unavailable"}
        assert "hunter2" not in response.text
