"""
Pydantic schemas for permission endpoints.

Request and response models for the catalog, closure previews, permission
checks and audit logs.
"""
from datetime import datetime
from typing import Dict, Any, List, Optional
from pydantic import BaseModel, Field, ConfigDict


# ============================================================================
# Catalog Schemas
# ============================================================================

class PermissionCatalogResponse(BaseModel):
    """Everything the role editor needs to render permission checkboxes."""
    permissions: List[str]
    groups: Dict[str, List[str]]
    labels: Dict[str, str]
    tree: Dict[str, List[str]]


# ============================================================================
# Closure Schemas
# ============================================================================

class PermissionResolveRequest(BaseModel):
    """Preview the permission set after ticking or unticking one box."""
    permission: str = Field(..., min_length=1, description="Permission being toggled")
    checked: bool = Field(..., description="True to grant, False to revoke")
    permissions: List[str] = Field(default_factory=list, description="Current permission set")


class PermissionResolveResponse(BaseModel):
    permissions: List[str]
    added: List[str]
    removed: List[str]


# ============================================================================
# Permission Check Schemas
# ============================================================================

class PermissionCheckRequest(BaseModel):
    """Schema for checking if the caller holds any of the given permissions."""
    permissions: List[str] = Field(default_factory=list, description="Authorized if any is held")


class PermissionCheckResponse(BaseModel):
    """Schema for permission check response."""
    has_permission: bool
    reason: Optional[str] = None


class MyPermissionsResponse(BaseModel):
    user_id: str
    role_id: str
    role_name: Optional[str]
    is_admin: bool
    permissions: List[str]
    admin_section: bool
    analytics_section: bool


# ============================================================================
# Audit Log Schemas
# ============================================================================

class AuditLogResponse(BaseModel):
    """Schema for audit log response."""
    id: str
    user_id: Optional[str]
    action: str
    resource_type: str
    resource_id: Optional[str]
    details: Optional[Dict[str, Any]]
    ip_address: Optional[str]
    user_agent: Optional[str]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AuditLogListResponse(BaseModel):
    """Schema for paginated audit log list."""
    items: List[AuditLogResponse]
    total: int
    page: int
    page_size: int
    pages: int
