"""Users API: filtered, paged list."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from adminkit.api.v1.dependencies import get_user_repo, get_page_params, require_permission
from adminkit.application.dtos.principal import Principal
from adminkit.application.query.pagination import PageParams
from adminkit.core.permissions import UserPermissions
from adminkit.infrastructure.persistence.models import User
from adminkit.infrastructure.persistence.repositories import QueryRepository
from adminkit.schemas.common import PagedResponse
from adminkit.schemas.user import UserQuery, UserResponse

router = APIRouter()


@router.get("", response_model=PagedResponse[UserResponse])
async def list_users(
    _: Annotated[Principal, Depends(require_permission(UserPermissions.VIEW))],
    query: Annotated[UserQuery, Query()],
    params: Annotated[PageParams, Depends(get_page_params)],
    repo: Annotated[QueryRepository[User], Depends(get_user_repo)],
) -> PagedResponse[UserResponse]:
    result = await repo.page_query(query, params)
    return PagedResponse[UserResponse].from_result(result, UserResponse.model_validate)
