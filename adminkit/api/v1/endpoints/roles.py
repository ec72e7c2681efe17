"""Roles API: filtered, paged list."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from adminkit.api.v1.dependencies import get_role_repo, get_page_params, require_permission
from adminkit.application.dtos.principal import Principal
from adminkit.application.query.pagination import PageParams
from adminkit.core.permissions import RolePermissions
from adminkit.infrastructure.persistence.models import Role
from adminkit.infrastructure.persistence.repositories import QueryRepository
from adminkit.schemas.common import PagedResponse
from adminkit.schemas.role import RoleQuery, RoleResponse

router = APIRouter()


@router.get("", response_model=PagedResponse[RoleResponse])
async def list_roles(
    _: Annotated[Principal, Depends(require_permission(RolePermissions.VIEW))],
    query: Annotated[RoleQuery, Query()],
    params: Annotated[PageParams, Depends(get_page_params)],
    repo: Annotated[QueryRepository[Role], Depends(get_role_repo)],
) -> PagedResponse[RoleResponse]:
    result = await repo.page_query(query, params)
    return PagedResponse[RoleResponse].from_result(result, RoleResponse.model_validate)
