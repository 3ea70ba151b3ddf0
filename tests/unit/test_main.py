"""
Tests for the application-level endpoints and error handling.
"""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.main import install_rate_limit


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_root_reports_permission_graph(client):
    data = client.get("/").json()

    assert data["admin_role"] == "admin"
    assert data["permission_graph"]["source"] == "built-in"
    assert data["permission_graph"]["nodes"] > 0


def test_validation_errors_are_keyed_by_position(client, admin_headers):
    response = client.put(
        "/roles",
        json=[{"id": "viewer", "name": "Viewer"}, {"id": "", "name": "Vacío"}],
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert list(response.json()) == ["1.id"]


class TestRateLimit:
    @pytest.fixture
    def limited_client(self):
        limited = FastAPI()
        install_rate_limit(limited, "2/minute")

        @limited.get("/ping")
        async def ping():
            return {"pong": True}

        with TestClient(limited) as test_client:
            yield test_client

    def test_third_request_is_rejected(self, limited_client):
        headers = {"Authorization": "Bearer one"}
        assert limited_client.get("/ping", headers=headers).status_code == 200
        assert limited_client.get("/ping", headers=headers).status_code == 200

        response = limited_client.get("/ping", headers=headers)

        assert response.status_code == 429
        assert response.json() == {"error": "You are going too fast"}

    def test_buckets_are_per_token(self, limited_client):
        for _ in range(3):
            limited_client.get("/ping", headers={"Authorization": "Bearer one"})

        assert limited_client.get("/ping", headers={"Authorization": "Bearer two"}).status_code == 200

    def test_no_limit_when_unset(self):
        unlimited = FastAPI()
        install_rate_limit(unlimited, None)

        @unlimited.get("/ping")
        async def ping():
            return {"pong": True}

        with TestClient(unlimited) as test_client:
            assert all(test_client.get("/ping").status_code == 200 for _ in range(5))
