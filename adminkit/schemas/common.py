"""Shared API schemas: paged list envelope."""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from adminkit.application.query.pagination import PagedResult

ItemT = TypeVar("ItemT", bound=BaseModel)


class PagedResponse(BaseModel, Generic[ItemT]):
    """One page of a list endpoint plus navigation metadata."""

    items: list[ItemT]
    total_count: int = Field(..., ge=0)
    page_number: int = Field(..., ge=1)
    page_size: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0)
    has_previous_page: bool
    has_next_page: bool

    @classmethod
    def from_result(
        cls, result: PagedResult[Any], convert: Callable[[Any], ItemT]
    ) -> "PagedResponse[ItemT]":
        converted = result.map(convert)
        return cls(
            items=converted.items,
            total_count=converted.total_count,
            page_number=converted.page_number,
            page_size=converted.page_size,
            total_pages=converted.total_pages,
            has_previous_page=converted.has_previous_page,
            has_next_page=converted.has_next_page,
        )
