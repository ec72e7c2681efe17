"""Page request parameters and the paged result envelope."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel, Field, model_validator

from adminkit.core.config import get_settings

T = TypeVar("T")
U = TypeVar("U")


class PageParams(BaseModel):
    """Which page to return and how to order it.

    sort_field is validated against the query type's sortable fields by the
    repository caller (QueryFilterRequest.resolve_sort), not here.
    """

    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default_factory=lambda: get_settings().default_page_size, ge=1)
    sort_field: str | None = None
    ascending: bool = False

    @model_validator(mode="after")
    def check_page_size(self) -> PageParams:
        max_size = get_settings().max_page_size
        if self.page_size > max_size:
            raise ValueError(f"page_size must be <= {max_size}")
        return self

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """One page of items plus the total match count."""

    items: list[T]
    total_count: int
    page_number: int
    page_size: int

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1

    @property
    def has_next_page(self) -> bool:
        return self.page_number < self.total_pages

    @property
    def start_index(self) -> int:
        """1-based index of the first item on this page (0 when nothing matched)."""
        if self.total_count == 0:
            return 0
        return (self.page_number - 1) * self.page_size + 1

    @property
    def end_index(self) -> int:
        if self.total_count == 0:
            return 0
        return min(self.start_index + self.page_size - 1, self.total_count)

    def map(self, fn: Callable[[T], U]) -> PagedResult[U]:
        """Return the same page with each item converted by fn."""
        return PagedResult(
            items=[fn(item) for item in self.items],
            total_count=self.total_count,
            page_number=self.page_number,
            page_size=self.page_size,
        )
