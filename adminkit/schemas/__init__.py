"""Pydantic request/response schemas for the API."""

from adminkit.schemas.common import PagedResponse
from adminkit.schemas.health import HealthResponse
from adminkit.schemas.menu import MenuQuery, MenuResponse
from adminkit.schemas.permission import (
    CurrentPrincipalResponse,
    PermissionCodesResponse,
    PermissionDefinitionResponse,
    PermissionGroupResponse,
    PermissionQuery,
    PermissionResponse,
)
from adminkit.schemas.role import RoleQuery, RoleResponse
from adminkit.schemas.user import UserQuery, UserResponse

__all__ = [
    "CurrentPrincipalResponse",
    "HealthResponse",
    "MenuQuery",
    "MenuResponse",
    "PagedResponse",
    "PermissionCodesResponse",
    "PermissionDefinitionResponse",
    "PermissionGroupResponse",
    "PermissionQuery",
    "PermissionResponse",
    "RoleQuery",
    "RoleResponse",
    "UserQuery",
    "UserResponse",
]
