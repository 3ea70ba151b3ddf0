"""
Pydantic schemas for role management.
"""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator


def normalize_permissions(permissions: List[str]) -> List[str]:
    """Drop blanks and duplicates, return in sorted order."""
    return sorted({p.strip() for p in permissions if p and p.strip()})


def _required(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError('ID and name are required')
    return value


class RoleBase(BaseModel):
    """Base role schema."""
    id: str = Field(..., min_length=1, max_length=64, description="Role identifier (e.g. 'planner-user')")
    name: str = Field(..., min_length=1, max_length=100, description="Display name")
    permissions: List[str] = Field(default_factory=list, description="Permission ids granted by the role")

    @field_validator('id', 'name')
    @classmethod
    def not_blank(cls, v: str) -> str:
        return _required(v)

    @field_validator('permissions')
    @classmethod
    def dedupe_permissions(cls, v: List[str]) -> List[str]:
        return normalize_permissions(v)


class RoleCreate(RoleBase):
    """Schema for creating a new role."""


class RoleUpdate(BaseModel):
    """Schema for updating a role. The id cannot change."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    permissions: Optional[List[str]] = None

    @field_validator('name')
    @classmethod
    def not_blank(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else _required(v)

    @field_validator('permissions')
    @classmethod
    def dedupe_permissions(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return None if v is None else normalize_permissions(v)


class RoleCopy(BaseModel):
    """Overrides for a copied role; defaults derive from the source role."""
    id: Optional[str] = Field(None, min_length=1, max_length=64)
    name: Optional[str] = Field(None, min_length=1, max_length=100)

    @field_validator('id', 'name')
    @classmethod
    def not_blank(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else _required(v)


class PermissionToggle(BaseModel):
    """Switch one permission on a role, the way the role editor checkbox does."""
    permission: str = Field(..., min_length=1)
    granted: bool


class RoleResponse(BaseModel):
    """Schema for role response."""
    id: str
    name: str
    permissions: List[str]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
