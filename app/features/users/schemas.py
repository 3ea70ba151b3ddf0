"""
Pydantic schemas for user-related requests and responses.
"""
from datetime import datetime
from enum import Enum
from typing import List
from pydantic import BaseModel, EmailStr, Field


class UserBase(BaseModel):
    """Base user schema with common fields."""
    email: EmailStr
    name: str = Field(..., min_length=1, max_length=255)


class UserResponse(UserBase):
    """Schema for user responses."""
    id: str
    role_id: str
    is_active: bool
    last_login_at: datetime | None = None
    created_at: datetime

    model_config = {"from_attributes": True}


class ReportSortKey(str, Enum):
    user_name = "user_name"
    role_name = "role_name"


class SortDirection(str, Enum):
    asc = "asc"
    desc = "desc"


class UserPermissionRow(BaseModel):
    """One line of the user permissions report."""
    user_id: str
    user_name: str
    user_email: str
    role_id: str
    role_name: str
    permissions: List[str]
