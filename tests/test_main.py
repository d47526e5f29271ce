"""Tests for main application endpoints."""

from fastapi.testclient import TestClient

from voltshare.core.config import Settings
from voltshare.main import app

client = TestClient(app)


def test_health_check():
    """Test health check endpoint."""
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "voltshare"


def test_openapi_lists_calculator():
    """Test the calculator route is published."""
    response = client.get("/openapi.json")
    assert response.status_code == 200
    assert "/api/calculate" in response.json()["paths"]


def test_default_settings(monkeypatch):
    """Test the database and billing defaults when no environment is set."""
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("DEFAULT_RATE_PER_UNIT", raising=False)
    defaults = Settings(_env_file=None)
    assert defaults.DATABASE_URL == "sqlite:///./voltshare.db"
    assert defaults.DEFAULT_RATE_PER_UNIT == 12.0


def test_database_url_from_environment(monkeypatch):
    """Test DATABASE_URL can be moved through the environment."""
    monkeypatch.setenv("DATABASE_URL", "sqlite:////srv/voltshare/bills.db")
    assert Settings(_env_file=None).DATABASE_URL == "sqlite:////srv/voltshare/bills.db"
