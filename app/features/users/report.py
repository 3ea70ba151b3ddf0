"""
User permissions report: every user next to the permissions their role grants.
"""
import unicodedata
from typing import Iterable, List, Optional

from app.features.roles.models import Role
from app.features.users.models import User
from app.features.users.schemas import ReportSortKey, SortDirection, UserPermissionRow


ROLE_NOT_FOUND = "Rol no encontrado"


def normalize_text(text: str) -> str:
    """Lowercase and strip accents so "Gestión" matches "gestion"."""
    decomposed = unicodedata.normalize("NFD", text.lower())
    return "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")


def build_permissions_report(
    users: Iterable[User],
    roles: Iterable[Role],
    search: Optional[str] = None,
    sort_key: ReportSortKey = ReportSortKey.user_name,
    sort_direction: SortDirection = SortDirection.asc,
) -> List[UserPermissionRow]:
    """
    Join users with their role's permissions, then filter and sort.

    Users whose role no longer exists are listed with role name
    ``ROLE_NOT_FOUND`` and no permissions. ``search`` matches user name,
    email or role name, ignoring case and accents.
    """
    roles_by_id = {role.id: role for role in roles}

    rows = []
    for user in users:
        role = roles_by_id.get(user.role_id)
        rows.append(UserPermissionRow(
            user_id=user.id,
            user_name=user.name,
            user_email=user.email,
            role_id=user.role_id,
            role_name=role.name if role else ROLE_NOT_FOUND,
            permissions=sorted(role.permission_set) if role else [],
        ))

    if search:
        needle = normalize_text(search)
        rows = [
            row for row in rows
            if needle in normalize_text(row.user_name)
            or needle in normalize_text(row.user_email)
            or needle in normalize_text(row.role_name)
        ]

    rows.sort(
        key=lambda row: normalize_text(getattr(row, sort_key.value)),
        reverse=sort_direction == SortDirection.desc,
    )
    return rows
