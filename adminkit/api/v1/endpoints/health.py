"""Health check endpoint. No authentication; used for liveness probes."""

from typing import Annotated

from fastapi import APIRouter, Depends

from adminkit.api.v1.dependencies import get_permission_catalog
from adminkit.application.services.permission_catalog import PermissionCatalog
from adminkit.core.config import get_settings
from adminkit.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check(
    catalog: Annotated[PermissionCatalog, Depends(get_permission_catalog)],
) -> HealthResponse:
    """Return ok plus version; 503 until the permission catalog is loaded."""
    return HealthResponse(
        version=get_settings().app_version,
        permission_count=len(catalog.all_codes()),
    )
