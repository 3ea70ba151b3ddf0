"""
Role model.
"""
from typing import List
from sqlalchemy import String, JSON
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database.base import Base, TimestampMixin


class Role(Base, TimestampMixin):
    """
    Named bundle of permissions assignable to users.

    The id is a readable slug chosen by the administrator ("admin",
    "planner-user"). Permissions are stored as a sorted JSON list of ids.
    """
    __tablename__ = "roles"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    permissions: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)

    @property
    def permission_set(self) -> frozenset[str]:
        return frozenset(self.permissions or [])

    def __repr__(self) -> str:
        return f"<Role(id={self.id!r}, name={self.name!r}, permissions={len(self.permissions or [])})>"
