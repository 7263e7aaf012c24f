"""
Tests for the activity log.
"""
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from menuhub.models.activity_log import ActivityAction
from menuhub.models.restaurant import Restaurant
from menuhub.models.user import User
from menuhub.services.activity import recent_activity, record_activity


class TestRecordActivity:
    """Tests for the audit helpers."""

    def test_recent_activity_is_newest_first_and_limited(self, db: Session, owner: User):
        for entity_id in range(1, 6):
            record_activity(
                db,
                actor_id=owner.id,
                action=ActivityAction.UPDATE,
                entity_type="category",
                entity_id=entity_id,
            )
        db.commit()

        logs = recent_activity(db, limit=3)

        assert [log.entity_id for log in logs] == [5, 4, 3]

    def test_record_does_not_commit(self, db: Session, owner: User):
        record_activity(
            db,
            actor_id=owner.id,
            action=ActivityAction.CREATE,
            entity_type="category",
            entity_id=1,
        )
        db.rollback()

        assert recent_activity(db) == []


class TestActivityEndpoints:
    """Tests for GET /api/activity and GET /api/restaurants/{id}/activity."""

    def test_mutations_are_logged(self, owner_client: TestClient, restaurant: Restaurant):
        category = owner_client.post(
            f"/api/restaurants/{restaurant.id}/categories",
            json={"name": "Plates"}
        ).json()
        owner_client.put(f"/api/categories/{category['id']}", json={"name": "Big Plates"})

        response = owner_client.get(f"/api/restaurants/{restaurant.id}/activity")

        assert response.status_code == 200
        entries = [(e["action"], e["entityType"]) for e in response.json()]
        assert entries == [("update", "category"), ("create", "category")]
        assert response.json()[0]["details"] == {"name": "Big Plates"}

    def test_restaurant_activity_isolated(self, owner_client: TestClient, other_restaurant: Restaurant):
        response = owner_client.get(f"/api/restaurants/{other_restaurant.id}/activity")

        assert response.status_code == 403

    def test_recent_activity_super_admin_only(self, owner_client: TestClient):
        assert owner_client.get("/api/activity").status_code == 403

    def test_recent_activity_limit(self, super_client: TestClient):
        response = super_client.get("/api/activity", params={"limit": 1})

        assert response.status_code == 200
        # The super admin's own login is the newest entry
        assert len(response.json()) == 1
        assert response.json()[0]["action"] == "login"

    def test_limit_out_of_range(self, super_client: TestClient):
        assert super_client.get("/api/activity", params={"limit": 0}).status_code == 400
