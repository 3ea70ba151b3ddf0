"""
Permission checking utilities and dependencies.

Implements:
- Permission checks against a user's role (the admin role holds everything)
- FastAPI dependencies for route protection
- Audit logging helpers
"""
from typing import Any, Dict, Iterable, List, Optional
from fastapi import Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core import config
from app.core.database.engine import get_db
from app.features.permissions.catalog import ADMIN_PERMISSIONS, ALL_PERMISSIONS, ANALYTICS_PERMISSIONS
from app.features.permissions.models import AuditLog
from app.features.roles.models import Role
from app.features.users.dependencies import get_current_user
from app.features.users.models import User
from app.utils import get_logger


log = get_logger(__name__)


# ============================================================================
# Permission Checking Functions
# ============================================================================

def is_admin_role(role: Optional[Role]) -> bool:
    return role is not None and role.id == config.ADMIN_ROLE_ID


def effective_permissions(role: Optional[Role]) -> List[str]:
    """Sorted permissions a role grants; the admin role grants every known permission."""
    if role is None:
        return []
    if is_admin_role(role):
        return sorted(set(ALL_PERMISSIONS) | role.permission_set)
    return sorted(role.permission_set)


def has_permission(role: Optional[Role], permission: str) -> bool:
    """
    Check if a role grants a specific permission.

    Args:
        role: The caller's role, or None when the user's role no longer exists
        permission: Permission id to check

    Returns:
        True if the role has the permission, False otherwise
    """
    if role is None:
        return False
    if is_admin_role(role):
        return True
    return permission in role.permission_set


def has_any_permission(role: Optional[Role], permissions: Iterable[str]) -> bool:
    """
    Check if a role grants at least one of ``permissions``.

    An empty requirement is satisfied by any existing role.
    """
    required = list(permissions)
    if role is None:
        return False
    if not required:
        return True
    return any(has_permission(role, p) for p in required)


def is_admin_section(permissions: Iterable[str]) -> bool:
    """Whether a permission set opens the admin section."""
    return not set(permissions).isdisjoint(ADMIN_PERMISSIONS)


def is_analytics_section(permissions: Iterable[str]) -> bool:
    """Whether a permission set opens the analytics section."""
    return not set(permissions).isdisjoint(ANALYTICS_PERMISSIONS)


async def get_user_role(db: AsyncSession, user: User) -> Optional[Role]:
    return await db.get(Role, user.role_id)


# ============================================================================
# FastAPI Dependencies
# ============================================================================

def require_permission(*permissions: str):
    """
    FastAPI dependency requiring ANY of the given permissions.

    Usage:
        @router.delete("/roles/{role_id}")
        async def delete_role(
            role_id: str,
            user: User = Depends(require_permission("roles:delete"))
        ):
            pass

    Returns:
        Dependency function that returns the current user if authorized

    Raises:
        HTTPException: 403 if the user's role grants none of the permissions
    """
    async def permission_dependency(
        db: AsyncSession = Depends(get_db),
        current_user: User = Depends(get_current_user)
    ) -> User:
        role = await get_user_role(db, current_user)

        if not has_any_permission(role, permissions):
            log.debug(f"User {current_user.id} with role {current_user.role_id!r} denied {list(permissions)}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Permission denied: requires one of {list(permissions)}"
            )

        return current_user

    return permission_dependency


# ============================================================================
# Audit Logging
# ============================================================================

async def create_audit_log(
    db: AsyncSession,
    user_id: Optional[str],
    action: str,
    resource_type: str,
    resource_id: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
    ip_address: Optional[str] = None,
    user_agent: Optional[str] = None
) -> AuditLog:
    """
    Create an audit log entry in the caller's transaction.

    Args:
        db: Database session
        user_id: User performing the action
        action: Action performed (e.g., "create", "update", "delete", "reset")
        resource_type: Type of resource (e.g., "role")
        resource_id: ID of the resource
        details: Additional details
        ip_address: Client IP address
        user_agent: Client user agent

    Returns:
        Created AuditLog object
    """
    audit_log = AuditLog(
        user_id=user_id,
        action=action,
        resource_type=resource_type,
        resource_id=resource_id,
        details=details,
        ip_address=ip_address,
        user_agent=user_agent
    )

    db.add(audit_log)
    await db.flush()

    log.info(f"Audit: user={user_id} action={action} resource={resource_type}:{resource_id}")

    return audit_log
