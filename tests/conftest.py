"""
Test configuration and fixtures.
"""
import os
import pytest
from typing import Generator
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Configure settings before importing the app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SESSION_BACKEND"] = "database"
os.environ.pop("INITIAL_ADMIN_USERNAME", None)
os.environ.pop("INITIAL_ADMIN_PASSWORD", None)

from menuhub.main import app
from menuhub.db.base import Base
from menuhub.db.session import create_db_engine, get_db
from menuhub.models.user import User, UserRole
from menuhub.models.restaurant import Restaurant, RestaurantStatus
from menuhub.core.security import hash_password


# One in-memory database shared by the test and the app threads
engine = create_db_engine("sqlite://", poolclass=StaticPool)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

PASSWORD = "testpassword123"


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """Fresh schema and session for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def override_db(db: Session) -> Generator[Session, None, None]:
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield db
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client(override_db: Session) -> Generator[TestClient, None, None]:
    """Anonymous test client."""
    with TestClient(app) as c:
        yield c


def make_user(db: Session, username: str, role: UserRole = UserRole.RESTAURANT_ADMIN) -> User:
    user = User(
        username=username,
        hashed_password=hash_password(PASSWORD),
        name=username.title(),
        email=f"{username}@example.com",
        role=role.value,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_restaurant(db: Session, admin: User, name: str, status: RestaurantStatus = RestaurantStatus.ACTIVE) -> Restaurant:
    restaurant = Restaurant(name=name, admin_id=admin.id, status=status.value)
    db.add(restaurant)
    db.commit()
    db.refresh(restaurant)
    return restaurant


def login(c: TestClient, username: str, password: str = PASSWORD) -> TestClient:
    response = c.post("/api/auth/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return c


@pytest.fixture
def super_admin(db: Session) -> User:
    return make_user(db, "root", UserRole.SUPER_ADMIN)


@pytest.fixture
def owner(db: Session) -> User:
    return make_user(db, "owner")


@pytest.fixture
def restaurant(db: Session, owner: User) -> Restaurant:
    return make_restaurant(db, owner, "Falafel House")


@pytest.fixture
def other_owner(db: Session) -> User:
    return make_user(db, "other")


@pytest.fixture
def other_restaurant(db: Session, other_owner: User) -> Restaurant:
    return make_restaurant(db, other_owner, "Shawarma Palace")


@pytest.fixture
def super_client(override_db: Session, super_admin: User) -> Generator[TestClient, None, None]:
    """Client logged in as the super admin."""
    with TestClient(app) as c:
        yield login(c, super_admin.username)


@pytest.fixture
def owner_client(override_db: Session, restaurant: Restaurant) -> Generator[TestClient, None, None]:
    """Client logged in as the admin of ``restaurant``."""
    with TestClient(app) as c:
        yield login(c, "owner")


@pytest.fixture
def other_client(override_db: Session, other_restaurant: Restaurant) -> Generator[TestClient, None, None]:
    """Client logged in as the admin of ``other_restaurant``."""
    with TestClient(app) as c:
        yield login(c, "other")
