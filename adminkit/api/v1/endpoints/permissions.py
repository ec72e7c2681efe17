"""Permissions API: catalog tree and codes, caller's own grants, persisted list."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from adminkit.api.v1.dependencies import (
    get_current_principal,
    get_page_params,
    get_permission_catalog,
    get_permission_repo,
    require_permission,
)
from adminkit.application.dtos.principal import Principal
from adminkit.application.query.pagination import PageParams
from adminkit.application.services.permission_catalog import PermissionCatalog
from adminkit.core.permissions import PermissionPermissions
from adminkit.infrastructure.persistence.models import Permission
from adminkit.infrastructure.persistence.repositories import QueryRepository
from adminkit.schemas.common import PagedResponse
from adminkit.schemas.permission import (
    CurrentPrincipalResponse,
    PermissionCodesResponse,
    PermissionGroupResponse,
    PermissionQuery,
    PermissionResponse,
)

router = APIRouter()


@router.get("/tree", response_model=list[PermissionGroupResponse])
def get_permission_tree(
    _: Annotated[Principal, Depends(require_permission(PermissionPermissions.VIEW))],
    catalog: Annotated[PermissionCatalog, Depends(get_permission_catalog)],
) -> list[PermissionGroupResponse]:
    """Root groups in sort order, each with nested groups and leaf permissions."""
    return [PermissionGroupResponse.from_node(node) for node in catalog.tree()]


@router.get("/codes", response_model=PermissionCodesResponse)
def get_permission_codes(
    _: Annotated[Principal, Depends(require_permission(PermissionPermissions.VIEW))],
    catalog: Annotated[PermissionCatalog, Depends(get_permission_catalog)],
) -> PermissionCodesResponse:
    """Every declared code (groups and leaves), sorted."""
    return PermissionCodesResponse(codes=sorted(catalog.all_codes()))


@router.get("/me", response_model=CurrentPrincipalResponse)
def get_my_permissions(
    principal: Annotated[Principal, Depends(get_current_principal)],
    catalog: Annotated[PermissionCatalog, Depends(get_permission_catalog)],
) -> CurrentPrincipalResponse:
    """Codes carried by the caller's token. Requires authentication only."""
    return CurrentPrincipalResponse(
        id=principal.id,
        name=principal.name,
        permissions=list(principal.held_order),
        unknown_permissions=[c for c in principal.held_order if not catalog.exists(c)],
    )


@router.get("", response_model=PagedResponse[PermissionResponse])
async def list_permissions(
    _: Annotated[Principal, Depends(require_permission(PermissionPermissions.VIEW))],
    query: Annotated[PermissionQuery, Query()],
    params: Annotated[PageParams, Depends(get_page_params)],
    repo: Annotated[QueryRepository[Permission], Depends(get_permission_repo)],
) -> PagedResponse[PermissionResponse]:
    """Persisted permissions matching the query, one page at a time."""
    result = await repo.page_query(query, params)
    return PagedResponse[PermissionResponse].from_result(
        result, PermissionResponse.model_validate
    )
