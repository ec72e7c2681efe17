"""Menus API: filtered, paged list."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from adminkit.api.v1.dependencies import get_menu_repo, get_page_params, require_permission
from adminkit.application.dtos.principal import Principal
from adminkit.application.query.pagination import PageParams
from adminkit.core.permissions import MenuPermissions
from adminkit.infrastructure.persistence.models import Menu
from adminkit.infrastructure.persistence.repositories import QueryRepository
from adminkit.schemas.common import PagedResponse
from adminkit.schemas.menu import MenuQuery, MenuResponse

router = APIRouter()


@router.get("", response_model=PagedResponse[MenuResponse])
async def list_menus(
    _: Annotated[Principal, Depends(require_permission(MenuPermissions.VIEW))],
    query: Annotated[MenuQuery, Query()],
    params: Annotated[PageParams, Depends(get_page_params)],
    repo: Annotated[QueryRepository[Menu], Depends(get_menu_repo)],
) -> PagedResponse[MenuResponse]:
    result = await repo.page_query(query, params)
    return PagedResponse[MenuResponse].from_result(result, MenuResponse.model_validate)
