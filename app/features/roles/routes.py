"""
Role management API routes.

Provides endpoints for listing, creating, copying, editing, deleting and
resetting roles, plus the single-permission toggle used by the role editor.
"""
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Body, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database.engine import get_db
from app.features.permissions.dependencies import create_audit_log, require_permission
from app.features.permissions.graph import PermissionGraph, get_permission_graph
from app.features.roles import service
from app.features.roles.schemas import (
    PermissionToggle,
    RoleBase,
    RoleCopy,
    RoleCreate,
    RoleResponse,
    RoleUpdate,
)
from app.features.users.models import User


router = APIRouter()


async def _audit(
    db: AsyncSession,
    request: Request,
    user: User,
    action: str,
    role_id: Optional[str],
    details: Optional[Dict[str, Any]] = None,
) -> None:
    await create_audit_log(
        db=db,
        user_id=user.id,
        action=action,
        resource_type="role",
        resource_id=role_id,
        details=details,
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent")
    )


@router.get("", response_model=List[RoleResponse])
async def list_roles(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_permission("roles:read", "roles:create", "roles:update", "roles:delete"))
):
    """List all roles ordered by id."""
    return await service.list_roles(db)


@router.put("", response_model=List[RoleResponse])
async def save_all_roles(
    request: Request,
    roles: List[RoleBase] = Body(...),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_permission("roles:update"))
):
    """Replace every stored role with the submitted list."""
    saved = await service.save_all_roles(db, roles)
    await _audit(db, request, current_user, "save_all", None, {"roles": [r.id for r in saved]})
    return saved


@router.post("", response_model=RoleResponse, status_code=status.HTTP_201_CREATED)
async def create_role(
    role: RoleCreate,
    request: Request,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_permission("roles:create"))
):
    """Create a new role. The id must not be in use."""
    db_role = await service.create_role(db, role)
    await _audit(db, request, current_user, "create", db_role.id, role.model_dump())
    return db_role


@router.post("/reset", response_model=List[RoleResponse])
async def reset_default_roles(
    request: Request,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_permission("roles:update"))
):
    """Restore the built-in roles to their default permissions."""
    restored = await service.reset_default_roles(db)
    await _audit(db, request, current_user, "reset", None, {"roles": [r.id for r in restored]})
    return restored


@router.get("/{role_id}", response_model=RoleResponse)
async def get_role(
    role_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_permission("roles:read", "roles:create", "roles:update", "roles:delete"))
):
    """Get a specific role."""
    return await service.get_role(db, role_id)


@router.post("/{role_id}/copy", response_model=RoleResponse, status_code=status.HTTP_201_CREATED)
async def copy_role(
    role_id: str,
    request: Request,
    overrides: Optional[RoleCopy] = Body(None),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_permission("roles:create"))
):
    """Duplicate a role, optionally choosing the new id and name."""
    db_role = await service.copy_role(db, role_id, overrides)
    await _audit(db, request, current_user, "copy", db_role.id, {"source": role_id})
    return db_role


@router.put("/{role_id}", response_model=RoleResponse)
async def update_role(
    role_id: str,
    role_update: RoleUpdate,
    request: Request,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_permission("roles:update"))
):
    """Update a role's name and/or permission list."""
    db_role = await service.update_role(db, role_id, role_update)
    await _audit(db, request, current_user, "update", role_id, role_update.model_dump(exclude_unset=True))
    return db_role


@router.patch("/{role_id}/permissions", response_model=RoleResponse)
async def toggle_role_permission(
    role_id: str,
    change: PermissionToggle,
    request: Request,
    db: AsyncSession = Depends(get_db),
    graph: PermissionGraph = Depends(get_permission_graph),
    current_user: User = Depends(require_permission("roles:update"))
):
    """Grant or revoke one permission, pulling in parents or dropping children as needed."""
    db_role = await service.toggle_role_permission(db, role_id, change.permission, change.granted, graph)
    await _audit(db, request, current_user, "grant" if change.granted else "revoke", role_id, change.model_dump())
    return db_role


@router.delete("/{role_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_role(
    role_id: str,
    request: Request,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_permission("roles:delete"))
):
    """Delete a role."""
    db_role = await service.delete_role(db, role_id)
    await _audit(db, request, current_user, "delete", role_id, {"name": db_role.name})
    return None
