"""Infrastructure services."""

from adminkit.infrastructure.services.permission_sync_service import (
    PermissionSyncService,
    SyncResult,
)

__all__ = ["PermissionSyncService", "SyncResult"]
