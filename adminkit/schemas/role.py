"""Role API schemas."""

from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from adminkit.application.query.filters import QueryFilterRequest
from adminkit.application.query.predicate import PredicateBuilder
from adminkit.domain.value_objects.core import EntityId


class RoleQuery(QueryFilterRequest):
    """Filters for GET /roles."""

    sortable_fields: ClassVar[frozenset[str]] = frozenset({"created_at", "name"})

    name: str | None = None
    description: str | None = None
    tenant_id: str | None = None

    def build_predicate(self, builder: PredicateBuilder) -> None:
        builder.matches("name", self.name)
        builder.matches("description", self.description)
        builder.eq("tenant_id", EntityId.parse(self.tenant_id))


class RoleResponse(BaseModel):
    """Role list item."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    tenant_id: str | None
    name: str
    description: str | None
    is_system: bool
    created_at: datetime
