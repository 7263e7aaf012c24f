"""
Tests for menu category endpoints.
"""
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from menuhub.models.menu import Category, MenuItem
from menuhub.models.restaurant import Restaurant


class TestCategoryCrud:
    """Tests for category create, read, update and delete."""

    def test_create_with_defaults(self, owner_client: TestClient, restaurant: Restaurant):
        response = owner_client.post(
            f"/api/restaurants/{restaurant.id}/categories",
            json={"name": "Sandwiches"}
        )

        assert response.status_code == 201
        data = response.json()
        assert data["icon"] == "utensils"
        assert data["displayOrder"] == 0
        assert data["restaurantId"] == restaurant.id

    def test_round_trip(self, owner_client: TestClient, restaurant: Restaurant):
        payload = {"name": "Mezze", "description": "Small plates", "icon": "leaf", "displayOrder": 3}
        created = owner_client.post(f"/api/restaurants/{restaurant.id}/categories", json=payload).json()

        fetched = owner_client.get(f"/api/categories/{created['id']}").json()

        assert {key: fetched[key] for key in payload} == payload

    def test_list_in_display_order(self, owner_client: TestClient, restaurant: Restaurant):
        for name, order in [("Drinks", 2), ("Starters", 0), ("Mains", 1)]:
            owner_client.post(
                f"/api/restaurants/{restaurant.id}/categories",
                json={"name": name, "displayOrder": order}
            )

        response = owner_client.get(f"/api/restaurants/{restaurant.id}/categories")

        assert [c["name"] for c in response.json()] == ["Starters", "Mains", "Drinks"]

    def test_update(self, owner_client: TestClient, db: Session, restaurant: Restaurant):
        category = Category(restaurant=restaurant, name="Plates")
        db.add(category)
        db.commit()

        response = owner_client.put(
            f"/api/categories/{category.id}",
            json={"name": "Big Plates", "icon": "bowl-food"}
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Big Plates"
        assert response.json()["icon"] == "bowl-food"

    def test_delete_cascades_items(self, owner_client: TestClient, db: Session, restaurant: Restaurant):
        category = Category(restaurant=restaurant, name="Plates")
        db.add_all([
            category,
            MenuItem(restaurant=restaurant, category=category, name="Falafel Plate", price=900),
        ])
        db.commit()
        category_id = category.id

        response = owner_client.delete(f"/api/categories/{category_id}")

        assert response.status_code == 200
        assert response.json()["message"] == "Category deleted successfully"
        db.expire_all()
        assert db.get(Category, category_id) is None
        assert db.query(MenuItem).count() == 0

    def test_missing_name(self, owner_client: TestClient, restaurant: Restaurant):
        response = owner_client.post(f"/api/restaurants/{restaurant.id}/categories", json={})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "name"


class TestCategoryIsolation:
    """A restaurant admin cannot touch another restaurant's categories."""

    def test_create_in_foreign_restaurant(self, owner_client: TestClient, other_restaurant: Restaurant):
        response = owner_client.post(
            f"/api/restaurants/{other_restaurant.id}/categories",
            json={"name": "Intruder"}
        )

        assert response.status_code == 403

    def test_update_foreign_category(
        self, owner_client: TestClient, db: Session, other_restaurant: Restaurant
    ):
        category = Category(restaurant=other_restaurant, name="Drinks")
        db.add(category)
        db.commit()

        response = owner_client.put(f"/api/categories/{category.id}", json={"name": "Mine"})

        assert response.status_code == 403
        db.refresh(category)
        assert category.name == "Drinks"

    def test_missing_category(self, owner_client: TestClient):
        response = owner_client.get("/api/categories/9999")

        assert response.status_code == 404
        assert response.json()["message"] == "Category not found"

    def test_super_admin_manages_any(self, super_client: TestClient, restaurant: Restaurant):
        response = super_client.post(
            f"/api/restaurants/{restaurant.id}/categories",
            json={"name": "Specials"}
        )

        assert response.status_code == 201
