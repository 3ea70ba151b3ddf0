"""
Tests for the /users endpoints and bearer authentication.
"""
from datetime import timedelta

import jwt

from app.features.users.auth import create_access_token
from tests.conftest import auth_headers_for


class TestAuthentication:
    def test_me(self, client, viewer_headers):
        response = client.get("/users/me", headers=viewer_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["email"] == "viewer@example.com"
        assert data["role_id"] == "viewer"
        assert data["last_login_at"] is not None

    def test_missing_token(self, client):
        assert client.get("/users/me").status_code in (401, 403)

    def test_wrong_signature(self, client):
        token = jwt.encode({"sub": "01HVIEWER00000000000000000"}, "another-secret", algorithm="HS256")
        response = client.get("/users/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["detail"].startswith("Invalid token")

    def test_expired_token(self, client):
        token = create_access_token("01HVIEWER00000000000000000", expires_in=timedelta(seconds=-10))
        response = client.get("/users/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Token has expired"

    def test_unknown_user(self, client):
        response = client.get("/users/me", headers=auth_headers_for("01HNOBODY00000000000000000"))

        assert response.status_code == 401
        assert response.json()["detail"] == "User not found"

    def test_inactive_user(self, client, inactive_headers):
        response = client.get("/users/me", headers=inactive_headers)

        assert response.status_code == 403
        assert response.json()["detail"] == "User account is deactivated"


class TestPermissionsReport:
    def test_requires_report_permission(self, client, viewer_headers):
        assert client.get("/users/permissions-report", headers=viewer_headers).status_code == 403

    def test_report_rows(self, client, manager_headers):
        response = client.get("/users/permissions-report", headers=manager_headers)

        assert response.status_code == 200
        rows = response.json()
        assert [row["user_name"] for row in rows] == [
            "Ana Administradora",
            "Inés Inactiva",
            "Mónica Gestora",
            "Óscar Huérfano",
            "Víctor Visor",
        ]
        orphan = next(row for row in rows if row["user_email"] == "orphan@example.com")
        assert orphan["role_name"] == "Rol no encontrado"
        assert orphan["permissions"] == []

    def test_search_and_sort(self, client, admin_headers):
        response = client.get(
            "/users/permissions-report",
            params={"search": "VISOR", "sort_key": "role_name", "sort_direction": "desc"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert [row["user_email"] for row in response.json()] == ["viewer@example.com"]

    def test_invalid_sort_key(self, client, admin_headers):
        response = client.get("/users/permissions-report", params={"sort_key": "email"}, headers=admin_headers)
        assert response.status_code == 400
