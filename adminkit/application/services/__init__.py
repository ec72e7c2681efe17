"""Application services: permission catalog and authorization evaluation."""

from adminkit.application.services.authorization_service import (
    AuthorizationService,
    LoggingAuditSink,
)
from adminkit.application.services.permission_catalog import (
    PermissionCatalog,
    build_catalog,
    get_catalog,
    initialize_catalog,
    reset_catalog,
)

__all__ = [
    "AuthorizationService",
    "LoggingAuditSink",
    "PermissionCatalog",
    "build_catalog",
    "get_catalog",
    "initialize_catalog",
    "reset_catalog",
]
