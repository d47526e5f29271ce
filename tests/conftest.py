"""Shared fixtures: in-memory database, API client and a signed-in user."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from voltshare.core.database import Base, get_db
from voltshare.main import app


@pytest.fixture
def test_db():
    """Create an in-memory test database."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = testing_session_local()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(test_db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield test_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def register_and_login(client: TestClient, email: str, name: str = "Landlord") -> dict[str, str]:
    """Helper: create an account and return bearer auth headers for it."""
    response = client.post(
        "/api/auth/register",
        json={"email": email, "name": name, "password": "secret-pass-1"},
    )
    assert response.status_code == 201
    response = client.post(
        "/api/auth/login",
        json={"email": email, "password": "secret-pass-1"},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def auth_headers(client):
    """Bearer headers for a freshly registered landlord."""
    return register_and_login(client, "landlord@example.com")


@pytest.fixture
def make_user(client):
    """Factory fixture: register another landlord and return their headers."""

    def _make(email: str, name: str = "Landlord") -> dict[str, str]:
        return register_and_login(client, email, name)

    return _make
