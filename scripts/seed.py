"""
Seed script for the MenuHub development database.

Creates a super admin and three restaurants, each with its own restaurant
admin, a few categories and dishes, and social links.

Usage:
    pip install -e .
    python scripts/seed.py
"""
from menuhub.core.permissions import Principal
from menuhub.db.session import SessionLocal
from menuhub.models.menu import Category, MenuItem
from menuhub.models.social_media import SocialMediaLink
from menuhub.models.user import User, UserRole
from menuhub.schemas.restaurant import ProvisionRequest
from menuhub.services.accounts import build_user
from menuhub.services.provisioning import ProvisioningService

SEED_PASSWORD = "password123"

RESTAURANTS = [
    {
        "restaurant": {
            "name": "Falafel House",
            "description": "Crispy falafel and fresh salads",
            "phone": "+961 1 234 567",
            "address": "Hamra Street, Beirut",
            "status": "active",
        },
        "admin": {"username": "falafel", "name": "Rami Haddad", "email": "owner@falafelhouse.example"},
        "menu": {
            "Sandwiches": [("Falafel Wrap", 450), ("Halloumi Wrap", 550)],
            "Plates": [("Falafel Plate", 900), ("Mixed Mezze", 1400)],
        },
        "links": [("instagram", "https://instagram.com/falafelhouse")],
    },
    {
        "restaurant": {
            "name": "Shawarma Palace",
            "description": "Chicken and beef shawarma since 1998",
            "address": "Mar Mikhael, Beirut",
            "status": "active",
            "primaryColor": "#b71c1c",
            "secondaryColor": "#d32f2f",
        },
        "admin": {"username": "shawarma", "name": "Nour Khalil", "email": "owner@shawarmapalace.example"},
        "menu": {
            "Shawarma": [("Chicken Shawarma", 500), ("Beef Shawarma", 600)],
            "Drinks": [("Ayran", 150), ("Fresh Lemonade", 250)],
        },
        "links": [
            ("facebook", "https://facebook.com/shawarmapalace"),
            ("whatsapp", "https://wa.me/9611000000"),
        ],
    },
    {
        "restaurant": {
            "name": "Hummus Haven",
            "description": "Hummus bowls and warm pita",
            "status": "setup",
            "rtl": False,
        },
        "admin": {"username": "hummus", "name": "Lina Saab", "email": "owner@hummushaven.example"},
        "menu": {
            "Bowls": [("Classic Hummus", 600), ("Hummus with Meat", 950)],
        },
        "links": [],
    },
]


def seed_database():
    """Seed the database with development data."""
    session = SessionLocal()

    try:
        # Check if data already exists
        existing_users = session.query(User).count()
        if existing_users > 0:
            print("Database already seeded. Skipping...")
            return

        print("Seeding database...")

        super_admin = build_user(
            username="superadmin",
            password=SEED_PASSWORD,
            name="Super Admin",
            email="admin@menuhub.example",
            role=UserRole.SUPER_ADMIN,
        )
        session.add(super_admin)
        session.commit()
        print(f"Created super admin: {super_admin.username}")

        provisioning = ProvisioningService(session)
        actor = Principal.from_user(super_admin)

        for entry in RESTAURANTS:
            request = ProvisionRequest.model_validate({
                "restaurant": entry["restaurant"],
                "admin": {**entry["admin"], "password": SEED_PASSWORD},
            })
            restaurant, admin = provisioning.provision(actor, request)

            for order, (category_name, dishes) in enumerate(entry["menu"].items()):
                category = Category(restaurant=restaurant, name=category_name, display_order=order)
                session.add(category)
                for dish_name, price in dishes:
                    session.add(MenuItem(restaurant=restaurant, category=category, name=dish_name, price=price))

            for platform, url in entry["links"]:
                session.add(SocialMediaLink(restaurant=restaurant, platform=platform, url=url))

            session.commit()
            print(f"Created restaurant {restaurant.name} (admin: {admin.username})")

        print("\n✅ Database seeded successfully!")
        print("\nTest credentials (all passwords: password123):")
        print("  superadmin")
        for entry in RESTAURANTS:
            print(f"  {entry['admin']['username']}")

    except Exception as e:
        session.rollback()
        print(f"❌ Error seeding database: {e}")
        raise
    finally:
        session.close()


if __name__ == "__main__":
    seed_database()
