"""
Consistency checks for the static permission catalog.
"""
import pytest

from app.features.permissions.catalog import (
    ADMIN_PERMISSIONS,
    ALL_PERMISSIONS,
    ANALYTICS_PERMISSIONS,
    DEFAULT_ROLES,
    PERMISSION_GROUPS,
    PERMISSION_LABELS,
    permission_label,
)


def test_permission_ids_unique():
    assert len(ALL_PERMISSIONS) == len(set(ALL_PERMISSIONS))


def test_groups_cover_every_permission_once():
    grouped = [p for members in PERMISSION_GROUPS.values() for p in members]
    assert len(grouped) == len(set(grouped))
    assert set(grouped) == set(ALL_PERMISSIONS)


def test_every_permission_has_a_label():
    assert set(PERMISSION_LABELS) == set(ALL_PERMISSIONS)


def test_section_lists_are_known_permissions():
    assert set(ADMIN_PERMISSIONS) <= set(ALL_PERMISSIONS)
    assert set(ANALYTICS_PERMISSIONS) <= set(ALL_PERMISSIONS)


@pytest.mark.parametrize("role", DEFAULT_ROLES, ids=lambda r: r["id"])
def test_default_roles_use_known_permissions(role):
    assert set(role["permissions"]) <= set(ALL_PERMISSIONS)


def test_default_role_ids_unique():
    ids = [role["id"] for role in DEFAULT_ROLES]
    assert len(ids) == len(set(ids))


def test_permission_label():
    assert permission_label("roles:read") == "Roles: Leer"
    assert permission_label("reports:export") == "reports:export"
