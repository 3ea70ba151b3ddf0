"""
User feature routes.
"""
from typing import Annotated, List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database.engine import get_db
from app.features.permissions.dependencies import require_permission
from app.features.roles.models import Role
from app.features.users.dependencies import get_current_user
from app.features.users.models import User
from app.features.users.report import build_permissions_report
from app.features.users.schemas import ReportSortKey, SortDirection, UserPermissionRow, UserResponse


router = APIRouter(tags=["users"])


@router.get("/me", response_model=UserResponse)
async def get_current_user_profile(
    user: Annotated[User, Depends(get_current_user)]
):
    """Get current authenticated user's profile."""
    return user


@router.get("/permissions-report", response_model=List[UserPermissionRow])
async def get_permissions_report(
    db: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(require_permission("analytics:user-permissions:read"))],
    search: Optional[str] = None,
    sort_key: ReportSortKey = ReportSortKey.user_name,
    sort_direction: SortDirection = SortDirection.asc,
):
    """Every user with their role and the permissions it grants."""
    users = (await db.execute(select(User))).scalars().all()
    roles = (await db.execute(select(Role))).scalars().all()
    return build_permissions_report(users, roles, search, sort_key, sort_direction)
