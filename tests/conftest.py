"""Pytest configuration and fixtures."""

import os

# Settings are cached on first import, so the test environment goes in first
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ADMIN_EMAIL"] = "admin@example.com"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from feedhub.database import Base, engine, get_db  # noqa: E402
from feedhub.main import app  # noqa: E402
from feedhub.services.hashing import PasswordHasher  # noqa: E402
from feedhub.services.user_repository import UserRepository  # noqa: E402

ADMIN_EMAIL = "admin@example.com"

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class AuthHeaders(dict):
    """Dict subclass that also stores the user's id and email."""

    def __init__(self, *args, user_id: str | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    from feedhub import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def users(db, hasher):
    """User repository bound to the test session."""
    return UserRepository(db, hasher=hasher, admin_email=ADMIN_EMAIL)


@pytest.fixture(scope="function")
def override_db(db):
    """Route the app's sessions to the test session."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client(override_db):
    """Create a test client with database override."""
    with TestClient(app) as test_client:
        yield test_client


def register(client, name: str, email: str, password: str = "testpass123") -> AuthHeaders:
    response = client.post(
        "/api/v1/auth/register",
        json={"email": email, "password": password, "name": name},
    )
    assert response.status_code == 201
    data = response.json()
    return AuthHeaders(
        {"Authorization": f"Bearer {data['token']}"},
        user_id=data["user"]["id"],
        email=email,
    )


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return register(client, "Test User", "test@example.com")


@pytest.fixture
def admin_headers(client):
    """Create the administrator and return auth headers."""
    return register(client, "Admin", ADMIN_EMAIL)


@pytest.fixture
def register_user(client):
    """Factory that registers extra users through the API."""

    def _register(name: str, email: str, password: str = "testpass123") -> AuthHeaders:
        return register(client, name, email, password)

    return _register
