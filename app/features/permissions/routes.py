"""
Permission API routes.

Provides the permission catalog, closure previews for the role editor,
permission checks for the caller and the audit log.
"""
from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database.engine import get_db
from app.features.permissions.catalog import ALL_PERMISSIONS, PERMISSION_GROUPS, PERMISSION_LABELS
from app.features.permissions.dependencies import (
    effective_permissions,
    get_user_role,
    has_any_permission,
    is_admin_role,
    is_admin_section,
    is_analytics_section,
    require_permission,
)
from app.features.permissions.graph import PermissionGraph, get_permission_graph
from app.features.permissions.models import AuditLog
from app.features.permissions.resolver import toggle
from app.features.permissions.schemas import (
    AuditLogListResponse,
    AuditLogResponse,
    MyPermissionsResponse,
    PermissionCatalogResponse,
    PermissionCheckRequest,
    PermissionCheckResponse,
    PermissionResolveRequest,
    PermissionResolveResponse,
)
from app.features.users.dependencies import get_current_user
from app.features.users.models import User


router = APIRouter()


@router.get("/catalog", response_model=PermissionCatalogResponse)
async def get_catalog(
    graph: PermissionGraph = Depends(get_permission_graph),
    current_user: User = Depends(get_current_user)
):
    """Permission ids, editor groups, display labels and the dependency tree."""
    return PermissionCatalogResponse(
        permissions=ALL_PERMISSIONS,
        groups=PERMISSION_GROUPS,
        labels=PERMISSION_LABELS,
        tree=graph.as_dict(),
    )


@router.post("/resolve", response_model=PermissionResolveResponse)
async def resolve_permissions(
    resolve_request: PermissionResolveRequest,
    graph: PermissionGraph = Depends(get_permission_graph),
    current_user: User = Depends(get_current_user)
):
    """Apply one grant or revoke to a permission set without saving anything."""
    before = frozenset(resolve_request.permissions)
    after = toggle(resolve_request.permission, resolve_request.checked, before, graph)

    return PermissionResolveResponse(
        permissions=sorted(after),
        added=sorted(after - before),
        removed=sorted(before - after),
    )


@router.get("/me", response_model=MyPermissionsResponse)
async def get_my_permissions(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """The caller's role and the permissions it grants."""
    role = await get_user_role(db, current_user)
    permissions = effective_permissions(role)

    return MyPermissionsResponse(
        user_id=current_user.id,
        role_id=current_user.role_id,
        role_name=role.name if role else None,
        is_admin=is_admin_role(role),
        permissions=permissions,
        admin_section=is_admin_section(permissions),
        analytics_section=is_analytics_section(permissions),
    )


@router.post("/check", response_model=PermissionCheckResponse)
async def check_permission(
    check_request: PermissionCheckRequest,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Check if the caller holds at least one of the given permissions."""
    role = await get_user_role(db, current_user)
    if role is None:
        return PermissionCheckResponse(has_permission=False, reason="Role not found")

    has_perm = has_any_permission(role, check_request.permissions)
    return PermissionCheckResponse(
        has_permission=has_perm,
        reason=None if has_perm else "Permission denied"
    )


@router.get("/audit-logs", response_model=AuditLogListResponse)
async def list_audit_logs(
    skip: int = 0,
    limit: int = 50,
    user_id: Optional[str] = None,
    action: Optional[str] = None,
    resource_type: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_permission("admin:logs:read"))
):
    """List audit logs with optional filtering."""
    stmt = select(AuditLog)

    if user_id:
        stmt = stmt.where(AuditLog.user_id == user_id)
    if action:
        stmt = stmt.where(AuditLog.action == action)
    if resource_type:
        stmt = stmt.where(AuditLog.resource_type == resource_type)

    count_stmt = select(func.count()).select_from(stmt.subquery())
    total_result = await db.execute(count_stmt)
    total = total_result.scalar() or 0

    stmt = stmt.order_by(AuditLog.created_at.desc(), AuditLog.id.desc()).offset(skip).limit(limit)
    result = await db.execute(stmt)
    logs = result.scalars().all()

    pages = (total + limit - 1) // limit if limit > 0 else 0
    page = (skip // limit) + 1 if limit > 0 else 1

    return AuditLogListResponse(
        items=[AuditLogResponse.model_validate(entry) for entry in logs],
        total=total,
        page=page,
        page_size=limit,
        pages=pages
    )
