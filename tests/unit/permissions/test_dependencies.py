"""
Tests for role-based permission checks.
"""
from app.features.permissions.catalog import ALL_PERMISSIONS
from app.features.permissions.dependencies import (
    effective_permissions,
    has_any_permission,
    has_permission,
    is_admin_role,
    is_admin_section,
    is_analytics_section,
)
from app.features.roles.models import Role


ADMIN = Role(id="admin", name="Admin", permissions=[])
REQUESTER = Role(id="requester-user", name="Solicitante", permissions=["requests:read", "requests:create"])


class TestHasPermission:
    """Test the has_permission function."""

    def test_admin_has_everything(self):
        assert is_admin_role(ADMIN) is True
        assert has_permission(ADMIN, "admin:maintenance:reset") is True
        assert has_permission(ADMIN, "not:in:catalog") is True

    def test_role_permissions(self):
        assert has_permission(REQUESTER, "requests:create") is True
        assert has_permission(REQUESTER, "requests:status:approve") is False

    def test_missing_role(self):
        assert has_permission(None, "requests:read") is False
        assert is_admin_role(None) is False


class TestHasAnyPermission:
    """Test the has_any_permission function."""

    def test_any_match(self):
        assert has_any_permission(REQUESTER, ["roles:read", "requests:read"]) is True

    def test_no_match(self):
        assert has_any_permission(REQUESTER, ["roles:read", "roles:update"]) is False

    def test_empty_requirement(self):
        assert has_any_permission(REQUESTER, []) is True
        assert has_any_permission(None, []) is False


class TestEffectivePermissions:
    """Test the effective_permissions function."""

    def test_admin_gets_catalog(self):
        assert effective_permissions(ADMIN) == sorted(ALL_PERMISSIONS)

    def test_regular_role_sorted(self):
        assert effective_permissions(REQUESTER) == ["requests:create", "requests:read"]

    def test_missing_role(self):
        assert effective_permissions(None) == []


class TestSections:
    """Admin and analytics section visibility."""

    def test_admin_section(self):
        assert is_admin_section(["roles:read"]) is True
        assert is_admin_section(["requests:read"]) is False

    def test_analytics_section(self):
        assert is_analytics_section(["analytics:receiving-report:read"]) is True
        assert is_analytics_section(["admin:access"]) is False
