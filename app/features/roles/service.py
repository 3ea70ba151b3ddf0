"""
Role persistence and editing.

All functions work inside the caller's session and flush, leaving the commit
to the request (``get_db``) or to the calling script.
"""
from typing import Dict, List, Optional, Sequence

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.features.permissions.catalog import DEFAULT_ROLES
from app.features.permissions.graph import PermissionGraph
from app.features.permissions.resolver import toggle
from app.features.roles.models import Role
from app.features.roles.schemas import (
    RoleBase,
    RoleCopy,
    RoleCreate,
    RoleUpdate,
    normalize_permissions,
)
from app.utils import get_logger


log = get_logger(__name__)


async def list_roles(db: AsyncSession) -> Sequence[Role]:
    result = await db.execute(select(Role).order_by(Role.id))
    return result.scalars().all()


async def get_role(db: AsyncSession, role_id: str) -> Role:
    """
    Get a role by id.

    Raises:
        HTTPException: 404 if the role does not exist
    """
    role = await db.get(Role, role_id)
    if role is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Role not found")
    return role


async def _insert_role(db: AsyncSession, role_id: str, name: str, permissions: List[str]) -> Role:
    if await db.get(Role, role_id) is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Role with id '{role_id}' already exists"
        )

    role = Role(id=role_id, name=name, permissions=normalize_permissions(permissions))
    db.add(role)
    await db.flush()
    await db.refresh(role)
    return role


async def create_role(db: AsyncSession, data: RoleCreate) -> Role:
    role = await _insert_role(db, data.id, data.name, data.permissions)
    log.info("New role created: %s", role.name)
    return role


async def copy_role(db: AsyncSession, source_id: str, overrides: Optional[RoleCopy] = None) -> Role:
    """
    Duplicate a role under a new id.

    Defaults to ``<id>-copia`` / ``<name> (Copia)`` with the same permissions.
    """
    source = await get_role(db, source_id)
    overrides = overrides or RoleCopy()

    role = await _insert_role(
        db,
        overrides.id or f"{source.id}-copia",
        overrides.name or f"{source.name} (Copia)",
        list(source.permissions),
    )
    log.info("Role %s copied from %s", role.id, source.id)
    return role


async def update_role(db: AsyncSession, role_id: str, data: RoleUpdate) -> Role:
    role = await get_role(db, role_id)

    if data.name is not None:
        role.name = data.name
    if data.permissions is not None:
        role.permissions = data.permissions

    await db.flush()
    await db.refresh(role)
    log.info("Role updated: %s", role.name)
    return role


async def toggle_role_permission(
    db: AsyncSession,
    role_id: str,
    permission: str,
    granted: bool,
    graph: PermissionGraph,
) -> Role:
    """
    Grant or revoke one permission on a stored role, keeping the set closed.

    Granting also adds every parent permission; revoking also removes every
    child permission.
    """
    role = await get_role(db, role_id)
    before = role.permission_set
    after = toggle(permission, granted, before, graph)

    if after != before:
        role.permissions = sorted(after)
        await db.flush()
        await db.refresh(role)

    log.info(
        "Role %s: %s %s (+%d/-%d)",
        role.id,
        "granted" if granted else "revoked",
        permission,
        len(after - before),
        len(before - after),
    )
    return role


async def delete_role(db: AsyncSession, role_id: str) -> Role:
    role = await get_role(db, role_id)
    await db.delete(role)
    await db.flush()
    log.warning("Role deleted: %s", role.name)
    return role


async def _replace_roles(db: AsyncSession, incoming: List[Dict], delete_missing: bool) -> List[Role]:
    existing = {role.id: role for role in await list_roles(db)}
    saved: List[Role] = []

    for data in incoming:
        role = existing.pop(data["id"], None)
        permissions = normalize_permissions(data["permissions"])
        if role is None:
            role = Role(id=data["id"], name=data["name"], permissions=permissions)
            db.add(role)
        else:
            role.name = data["name"]
            role.permissions = permissions
        saved.append(role)

    if delete_missing:
        for role in existing.values():
            await db.delete(role)

    await db.flush()
    for role in saved:
        await db.refresh(role)
    return sorted(saved, key=lambda r: r.id)


async def save_all_roles(db: AsyncSession, roles: List[RoleBase]) -> List[Role]:
    """
    Replace the whole role table with ``roles``.

    Raises:
        HTTPException: 400 if two roles share an id
    """
    ids = [role.id for role in roles]
    duplicates = sorted({role_id for role_id in ids if ids.count(role_id) > 1})
    if duplicates:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Duplicate role ids: {duplicates}"
        )

    saved = await _replace_roles(db, [role.model_dump() for role in roles], delete_missing=True)
    log.info("Roles and permissions saved: %s", [role.id for role in saved])
    return saved


async def reset_default_roles(db: AsyncSession) -> List[Role]:
    """Restore the built-in roles, overwriting their stored versions. Other roles are kept."""
    restored = await _replace_roles(db, DEFAULT_ROLES, delete_missing=False)
    log.warning("Default roles restored: %s", [role.id for role in restored])
    return restored
