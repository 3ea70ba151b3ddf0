"""
Tests for the /permissions endpoints.
"""
from app.features.permissions.catalog import ALL_PERMISSIONS, DEFAULT_PERMISSION_TREE


class TestCatalog:
    def test_requires_authentication(self, client):
        response = client.get("/permissions/catalog")
        assert response.status_code in (401, 403)

    def test_returns_catalog(self, client, viewer_headers):
        response = client.get("/permissions/catalog", headers=viewer_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["permissions"] == ALL_PERMISSIONS
        assert data["tree"] == DEFAULT_PERMISSION_TREE
        assert data["labels"]["roles:read"] == "Roles: Leer"
        assert "Gestión de Roles" in data["groups"]


class TestResolve:
    def test_grant_preview(self, client, viewer_headers):
        response = client.post(
            "/permissions/resolve",
            json={"permission": "requests:view:sale-price", "checked": True, "permissions": ["dashboard:access"]},
            headers=viewer_headers,
        )

        assert response.status_code == 200
        assert response.json() == {
            "permissions": [
                "dashboard:access",
                "requests:view:cost",
                "requests:view:margin",
                "requests:view:sale-price",
            ],
            "added": ["requests:view:cost", "requests:view:margin", "requests:view:sale-price"],
            "removed": [],
        }

    def test_revoke_preview(self, client, viewer_headers):
        response = client.post(
            "/permissions/resolve",
            json={
                "permission": "admin:logs:read",
                "checked": False,
                "permissions": ["admin:access", "admin:logs:read", "admin:logs:clear"],
            },
            headers=viewer_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["permissions"] == ["admin:access"]
        assert data["removed"] == ["admin:logs:clear", "admin:logs:read"]

    def test_missing_permission_is_bad_request(self, client, viewer_headers):
        response = client.post("/permissions/resolve", json={"checked": True}, headers=viewer_headers)

        assert response.status_code == 400
        assert "permission" in response.json()


class TestMe:
    def test_admin(self, client, admin_headers):
        response = client.get("/permissions/me", headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["is_admin"] is True
        assert data["permissions"] == sorted(ALL_PERMISSIONS)
        assert data["admin_section"] is True
        assert data["analytics_section"] is True

    def test_viewer(self, client, viewer_headers):
        response = client.get("/permissions/me", headers=viewer_headers)

        data = response.json()
        assert data["role_id"] == "viewer"
        assert data["role_name"] == "Viewer"
        assert data["is_admin"] is False
        assert data["permissions"] == ["dashboard:access", "quotes:create", "quotes:drafts:read"]
        assert data["admin_section"] is False

    def test_user_with_deleted_role(self, client, orphan_headers):
        data = client.get("/permissions/me", headers=orphan_headers).json()

        assert data["role_name"] is None
        assert data["permissions"] == []


class TestCheck:
    def test_any_of(self, client, viewer_headers):
        response = client.post(
            "/permissions/check",
            json={"permissions": ["roles:read", "quotes:create"]},
            headers=viewer_headers,
        )
        assert response.json() == {"has_permission": True, "reason": None}

    def test_denied(self, client, viewer_headers):
        response = client.post("/permissions/check", json={"permissions": ["roles:read"]}, headers=viewer_headers)
        assert response.json() == {"has_permission": False, "reason": "Permission denied"}

    def test_empty_list_only_needs_a_role(self, client, viewer_headers, orphan_headers):
        assert client.post("/permissions/check", json={}, headers=viewer_headers).json()["has_permission"] is True
        assert client.post("/permissions/check", json={}, headers=orphan_headers).json() == {
            "has_permission": False,
            "reason": "Role not found",
        }


class TestAuditLogs:
    def test_requires_logs_permission(self, client, viewer_headers):
        response = client.get("/permissions/audit-logs", headers=viewer_headers)
        assert response.status_code == 403

    def test_records_role_changes(self, client, admin_headers):
        client.post("/roles", json={"id": "auditor", "name": "Auditor"}, headers=admin_headers)
        client.delete("/roles/auditor", headers=admin_headers)

        response = client.get("/permissions/audit-logs", params={"resource_type": "role"}, headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert {item["action"] for item in data["items"]} == {"create", "delete"}
        assert all(item["resource_id"] == "auditor" for item in data["items"])
        assert all(item["user_id"] == "01HADMIN000000000000000000" for item in data["items"])

    def test_filter_by_action(self, client, admin_headers):
        client.post("/roles/reset", headers=admin_headers)
        client.post("/roles/viewer/copy", headers=admin_headers)

        data = client.get("/permissions/audit-logs", params={"action": "reset"}, headers=admin_headers).json()

        assert data["total"] == 1
        assert data["items"][0]["details"]["roles"] == ["admin", "planner-user", "requester-user", "viewer"]
