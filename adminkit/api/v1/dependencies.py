"""Request dependencies (composition root): principal, authorization, repositories."""

from __future__ import annotations

import logging
from collections.abc import Callable, Coroutine
from typing import Annotated, Any

from fastapi import Depends, Query, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from adminkit.application.dtos.principal import Principal
from adminkit.application.query.pagination import PageParams
from adminkit.application.services.authorization_service import AuthorizationService
from adminkit.application.services.permission_catalog import (
    PermissionCatalog,
    get_catalog,
)
from adminkit.domain.exceptions import AuthenticationException, ValidationException
from adminkit.infrastructure.persistence.database import get_db
from adminkit.infrastructure.persistence.models import Menu, Permission, Role, User
from adminkit.infrastructure.persistence.repositories import QueryRepository
from adminkit.infrastructure.security.jwt import principal_from_payload, verify_token

logger = logging.getLogger(__name__)

_http_bearer = HTTPBearer(auto_error=False)
_default_authorization_service = AuthorizationService()


def get_permission_catalog() -> PermissionCatalog:
    """Process-wide permission catalog (built at startup)."""
    return get_catalog()


def get_authorization_service(request: Request) -> AuthorizationService:
    """AuthorizationService from app state, or a logging-only default."""
    service = getattr(request.app.state, "authorization_service", None)
    return service or _default_authorization_service


async def get_current_principal(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> Principal:
    """Principal from the bearer token; 401 when missing or invalid."""
    if credentials is None:
        raise AuthenticationException("Not authenticated")
    try:
        payload = verify_token(credentials.credentials)
    except ValueError as e:
        logger.info("Rejected bearer token: %s", e)
        raise AuthenticationException("Invalid or expired token") from e
    return principal_from_payload(payload)


def require_permission(
    code: str,
) -> Callable[..., Coroutine[Any, Any, Principal]]:
    """Dependency factory: require an authenticated principal holding exactly code."""

    async def _require(
        principal: Annotated[Principal, Depends(get_current_principal)],
        auth_svc: Annotated[AuthorizationService, Depends(get_authorization_service)],
    ) -> Principal:
        return auth_svc.require(principal, code)

    return _require


def get_page_params(
    page_number: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int | None, Query(ge=1)] = None,
    sort_field: str | None = None,
    ascending: bool = False,
) -> PageParams:
    """PageParams from query string; page_size defaults from settings."""
    values: dict[str, Any] = {
        "page_number": page_number,
        "sort_field": sort_field,
        "ascending": ascending,
    }
    if page_size is not None:
        values["page_size"] = page_size
    try:
        return PageParams(**values)
    except ValidationError as e:
        raise ValidationException(e.errors()[0]["msg"], field="page_size") from e


async def get_menu_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> QueryRepository[Menu]:
    return QueryRepository(db, Menu)


async def get_permission_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> QueryRepository[Permission]:
    return QueryRepository(db, Permission)


async def get_role_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> QueryRepository[Role]:
    return QueryRepository(db, Role)


async def get_user_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> QueryRepository[User]:
    return QueryRepository(db, User)
