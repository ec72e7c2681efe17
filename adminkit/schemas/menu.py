"""Menu API schemas."""

from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from adminkit.application.query.filters import QueryFilterRequest
from adminkit.application.query.predicate import PredicateBuilder
from adminkit.domain.value_objects.core import EntityId


class MenuQuery(QueryFilterRequest):
    """Filters for GET /menus. Text fields match case-insensitively as patterns."""

    sortable_fields: ClassVar[frozenset[str]] = frozenset({"created_at", "name", "sort"})

    parent_id: str | None = None
    is_hide: bool | None = None
    name: str | None = None
    title: str | None = None
    path: str | None = None
    permission_code: str | None = None

    def build_predicate(self, builder: PredicateBuilder) -> None:
        builder.eq("parent_id", EntityId.parse(self.parent_id))
        builder.eq("is_hide", self.is_hide)
        builder.eq("permission_code", self.permission_code or None)
        builder.matches("name", self.name)
        builder.matches("title", self.title)
        builder.matches("path", self.path)


class MenuResponse(BaseModel):
    """Menu list item."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    parent_id: str | None
    name: str
    title: str
    path: str | None
    icon: str | None
    permission_code: str | None
    sort: int
    is_hide: bool
    created_at: datetime
