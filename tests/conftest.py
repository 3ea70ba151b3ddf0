"""
Global pytest configuration and fixtures for the access control API test suite.
"""
import asyncio
import os
import tempfile
from typing import Dict, Generator

# Point the application at a throwaway database before it is imported
_TEST_DIR = tempfile.mkdtemp(prefix="erp-tools-access-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_TEST_DIR, 'test.db')}"
os.environ["JWT_SECRET"] = "test-secret-key-for-testing-only-32-chars"
os.environ.pop("PERMISSION_TREE_FILE", None)
os.environ.pop("RATE_LIMIT", None)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.core.database.engine import AsyncSessionLocal, drop_db, init_db  # noqa: E402
from app.features.permissions.catalog import DEFAULT_ROLES  # noqa: E402
from app.features.roles.models import Role  # noqa: E402
from app.features.users.auth import create_access_token  # noqa: E402
from app.features.users.models import User  # noqa: E402
from app.main import app  # noqa: E402


# Test users: id -> (email, name, role_id, is_active)
TEST_USERS = {
    "01HADMIN000000000000000000": ("admin@example.com", "Ana Administradora", "admin", True),
    "01HVIEWER00000000000000000": ("viewer@example.com", "Víctor Visor", "viewer", True),
    "01HMANAGER0000000000000000": ("manager@example.com", "Mónica Gestora", "role-manager", True),
    "01HORPHAN00000000000000000": ("orphan@example.com", "Óscar Huérfano", "deleted-role", True),
    "01HINACTIVE000000000000000": ("inactive@example.com", "Inés Inactiva", "viewer", False),
}

ROLE_MANAGER = {
    "id": "role-manager",
    "name": "Gestor de Roles",
    "permissions": [
        "roles:read", "roles:create", "roles:update", "roles:delete",
        "analytics:read", "analytics:user-permissions:read",
    ],
}


async def _reset_database() -> None:
    await drop_db()
    await init_db()

    async with AsyncSessionLocal() as session:
        for role in [*DEFAULT_ROLES, ROLE_MANAGER]:
            session.add(Role(id=role["id"], name=role["name"], permissions=sorted(set(role["permissions"]))))
        for user_id, (email, name, role_id, is_active) in TEST_USERS.items():
            session.add(User(id=user_id, email=email, name=name, role_id=role_id, is_active=is_active))
        await session.commit()


@pytest.fixture
def database() -> None:
    """Fresh schema seeded with the default roles and the test users."""
    asyncio.run(_reset_database())


@pytest.fixture
def client(database) -> Generator[TestClient, None, None]:
    """FastAPI test client over the seeded database."""
    with TestClient(app) as test_client:
        yield test_client


def auth_headers_for(user_id: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


@pytest.fixture
def admin_headers() -> Dict[str, str]:
    return auth_headers_for("01HADMIN000000000000000000")


@pytest.fixture
def viewer_headers() -> Dict[str, str]:
    return auth_headers_for("01HVIEWER00000000000000000")


@pytest.fixture
def manager_headers() -> Dict[str, str]:
    return auth_headers_for("01HMANAGER0000000000000000")


@pytest.fixture
def orphan_headers() -> Dict[str, str]:
    return auth_headers_for("01HORPHAN00000000000000000")


@pytest.fixture
def inactive_headers() -> Dict[str, str]:
    return auth_headers_for("01HINACTIVE000000000000000")
