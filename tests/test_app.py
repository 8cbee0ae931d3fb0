"""
Tests for application-level behavior: health, root, error handlers.
"""

import pydantic
import pytest
from fastapi import status
from fastapi.testclient import TestClient

from catalog.config import Settings
from catalog.dependencies import get_author_service
from catalog.main import app

API = "/api/v1"


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "healthy"
        assert data["database"] == "ok"
        assert data["rate_limiting"]["enabled"] is False

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["docs"] == "/docs"


class TestUnexpectedErrors:
    def test_unexpected_error_is_generic_500(self, client):
        class BrokenService:
            def list(self, query):
                raise RuntimeError("connection string secret=hunter2")

        app.dependency_overrides[get_author_service] = lambda: BrokenService()

        with TestClient(app, raise_server_exceptions=False) as raw_client:
            response = raw_client.get(f"{API}/authors/")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        body = response.json()
        assert body == {"error": "internal_error", "detail": "An internal error occurred."}
        assert "hunter2" not in response.text


class TestSettings:
    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(log_level="verbose")

    def test_allowed_origins_list(self):
        settings = Settings(allowed_origins="http://a.test, http://b.test")

        assert settings.allowed_origins_list == ["http://a.test", "http://b.test"]

    def test_sqlite_detection(self):
        assert Settings(database_url="sqlite://").is_sqlite
        assert not Settings(database_url="postgresql://u:p@h/db").is_sqlite
