"""
Tests for restaurant endpoints and ownership isolation.
"""
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from menuhub.models.activity_log import ActivityLog
from menuhub.models.menu import Category, MenuItem
from menuhub.models.qr_code import QRCode
from menuhub.models.restaurant import Restaurant
from menuhub.models.social_media import SocialMediaLink
from menuhub.models.user import User

from conftest import login, make_user


class TestListRestaurants:
    """Tests for GET /api/restaurants."""

    def test_super_admin_sees_all(
        self, super_client: TestClient, restaurant: Restaurant, other_restaurant: Restaurant
    ):
        response = super_client.get("/api/restaurants")

        assert response.status_code == 200
        assert {r["id"] for r in response.json()} == {restaurant.id, other_restaurant.id}

    def test_admin_sees_only_own(
        self, owner_client: TestClient, restaurant: Restaurant, other_restaurant: Restaurant
    ):
        response = owner_client.get("/api/restaurants")

        assert response.status_code == 200
        data = response.json()
        assert [r["id"] for r in data] == [restaurant.id]
        assert data[0]["adminId"] == restaurant.admin_id
        assert data[0]["primaryColor"] == "#e65100"


class TestGetRestaurant:
    """Tests for GET /api/restaurants/{id}."""

    def test_get_own(self, owner_client: TestClient, restaurant: Restaurant):
        response = owner_client.get(f"/api/restaurants/{restaurant.id}")

        assert response.status_code == 200
        assert response.json()["name"] == "Falafel House"

    def test_get_foreign_forbidden(self, owner_client: TestClient, other_restaurant: Restaurant):
        response = owner_client.get(f"/api/restaurants/{other_restaurant.id}")

        assert response.status_code == 403
        assert response.json()["message"] == "Forbidden: You don't have access to this restaurant"

    def test_get_missing(self, owner_client: TestClient):
        response = owner_client.get("/api/restaurants/9999")

        assert response.status_code == 404
        assert response.json()["message"] == "Restaurant not found"

    def test_non_numeric_id(self, owner_client: TestClient):
        assert owner_client.get("/api/restaurants/abc").status_code == 400

    def test_id_beyond_integer_range(self, owner_client: TestClient):
        response = owner_client.get("/api/restaurants/99999999999999999999")

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "restaurant_id"

    def test_zero_id(self, owner_client: TestClient):
        assert owner_client.get("/api/restaurants/0").status_code == 400


class TestCreateRestaurant:
    """Tests for POST /api/restaurants."""

    def test_super_admin_assigns_admin(self, super_client: TestClient, db: Session):
        admin = make_user(db, "fresh")

        response = super_client.post(
            "/api/restaurants",
            json={"name": "Hummus Haven", "adminId": admin.id}
        )

        assert response.status_code == 201
        data = response.json()
        assert data["adminId"] == admin.id
        assert data["status"] == "setup"
        assert data["rtl"] is True

    def test_super_admin_must_name_admin(self, super_client: TestClient):
        response = super_client.post("/api/restaurants", json={"name": "Orphan"})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "adminId"

    def test_admin_cannot_own_two_restaurants(self, super_client: TestClient, restaurant: Restaurant):
        response = super_client.post(
            "/api/restaurants",
            json={"name": "Second", "adminId": restaurant.admin_id}
        )

        assert response.status_code == 409

    def test_super_admin_cannot_own_restaurant(self, super_client: TestClient, super_admin: User):
        response = super_client.post(
            "/api/restaurants",
            json={"name": "Mine", "adminId": super_admin.id}
        )

        assert response.status_code == 400

    def test_restaurant_admin_becomes_owner(self, db: Session, client: TestClient):
        admin = make_user(db, "solo")
        login(client, "solo")

        response = client.post(
            "/api/restaurants",
            json={"name": "Solo Kitchen", "adminId": 9999}
        )

        assert response.status_code == 201
        assert response.json()["adminId"] == admin.id

    def test_invalid_color(self, super_client: TestClient, owner: User):
        response = super_client.post(
            "/api/restaurants",
            json={"name": "Bad Colors", "adminId": owner.id, "primaryColor": "orange"}
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "primaryColor"


class TestUpdateRestaurant:
    """Tests for PUT /api/restaurants/{id}."""

    def test_admin_updates_branding(self, owner_client: TestClient, restaurant: Restaurant):
        response = owner_client.put(
            f"/api/restaurants/{restaurant.id}",
            json={"primaryColor": "#123456", "rtl": False}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["primaryColor"] == "#123456"
        assert data["rtl"] is False
        assert data["name"] == "Falafel House"

    def test_admin_cannot_reassign(
        self, owner_client: TestClient, restaurant: Restaurant, other_owner: User
    ):
        response = owner_client.put(
            f"/api/restaurants/{restaurant.id}",
            json={"adminId": other_owner.id, "name": "Renamed"}
        )

        assert response.status_code == 200
        assert response.json()["adminId"] == restaurant.admin_id
        assert response.json()["name"] == "Renamed"

    def test_admin_cannot_update_foreign(self, owner_client: TestClient, other_restaurant: Restaurant):
        response = owner_client.put(
            f"/api/restaurants/{other_restaurant.id}",
            json={"name": "Hijacked"}
        )

        assert response.status_code == 403

    def test_super_admin_reassigns(self, super_client: TestClient, db: Session, restaurant: Restaurant):
        new_admin = make_user(db, "successor")

        response = super_client.put(
            f"/api/restaurants/{restaurant.id}",
            json={"adminId": new_admin.id}
        )

        assert response.status_code == 200
        assert response.json()["adminId"] == new_admin.id

    def test_required_field_cannot_be_nulled(self, owner_client: TestClient, restaurant: Restaurant):
        response = owner_client.put(f"/api/restaurants/{restaurant.id}", json={"name": None})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "name"

    def test_admin_null_owner_is_ignored(self, owner_client: TestClient, restaurant: Restaurant):
        response = owner_client.put(
            f"/api/restaurants/{restaurant.id}",
            json={"name": "Renamed", "adminId": None}
        )

        assert response.status_code == 200
        assert response.json()["adminId"] == restaurant.admin_id
        assert response.json()["name"] == "Renamed"

    def test_super_admin_cannot_null_owner(self, super_client: TestClient, restaurant: Restaurant):
        response = super_client.put(f"/api/restaurants/{restaurant.id}", json={"adminId": None})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "adminId"

    def test_owner_id_beyond_integer_range(self, super_client: TestClient, restaurant: Restaurant):
        response = super_client.put(
            f"/api/restaurants/{restaurant.id}",
            json={"adminId": 99999999999999999999}
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "adminId"


class TestDeleteRestaurant:
    """Tests for DELETE /api/restaurants/{id}."""

    def test_delete_cascades_content(self, super_client: TestClient, db: Session, restaurant: Restaurant):
        category = Category(restaurant=restaurant, name="Plates")
        db.add_all([
            category,
            MenuItem(restaurant=restaurant, category=category, name="Falafel Plate", price=900),
            SocialMediaLink(restaurant=restaurant, platform="instagram", url="https://instagram.com/x"),
            QRCode(restaurant=restaurant, label="Table 1"),
        ])
        db.commit()
        restaurant_id = restaurant.id

        response = super_client.delete(f"/api/restaurants/{restaurant_id}")

        assert response.status_code == 200
        assert response.json()["message"] == "Restaurant deleted successfully"
        db.expire_all()
        assert db.get(Restaurant, restaurant_id) is None
        assert db.query(Category).count() == 0
        assert db.query(MenuItem).count() == 0
        assert db.query(SocialMediaLink).count() == 0
        assert db.query(QRCode).count() == 0

        delete_log = db.query(ActivityLog).filter(ActivityLog.action == "delete").one()
        assert delete_log.entity_id == restaurant_id
        assert delete_log.restaurant_id is None

    def test_restaurant_admin_cannot_delete(self, owner_client: TestClient, restaurant: Restaurant):
        response = owner_client.delete(f"/api/restaurants/{restaurant.id}")

        assert response.status_code == 403

    def test_delete_missing(self, super_client: TestClient):
        assert super_client.delete("/api/restaurants/9999").status_code == 404
