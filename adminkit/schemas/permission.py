"""Permission API schemas: catalog views and the persisted permission list."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

from adminkit.application.query.filters import QueryFilterRequest
from adminkit.application.query.predicate import PredicateBuilder
from adminkit.domain.entities.permission import PermissionDefinition, PermissionGroupNode
from adminkit.domain.value_objects.core import EntityId


class PermissionQuery(QueryFilterRequest):
    """Filters for GET /permissions."""

    sortable_fields: ClassVar[frozenset[str]] = frozenset({"created_at", "code", "sort"})

    name: str | None = None
    display_name: str | None = None
    code: str | None = None
    parent_code: str | None = None
    parent_id: str | None = None

    def build_predicate(self, builder: PredicateBuilder) -> None:
        builder.matches("name", self.name)
        builder.matches("display_name", self.display_name)
        builder.matches("code", self.code)
        builder.eq("parent_code", self.parent_code)
        builder.eq("parent_id", EntityId.parse(self.parent_id))


class PermissionResponse(BaseModel):
    """Persisted permission row."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    code: str
    name: str
    display_name: str
    parent_code: str
    parent_id: str | None
    is_group: bool
    sort: int
    created_at: datetime


class PermissionDefinitionResponse(BaseModel):
    """Leaf permission in the catalog tree."""

    kind: Literal["permission"] = "permission"
    code: str
    display_name: str
    sort: int

    @classmethod
    def from_definition(cls, definition: PermissionDefinition) -> PermissionDefinitionResponse:
        return cls(
            code=definition.code,
            display_name=definition.display_name,
            sort=definition.sort,
        )


class PermissionGroupResponse(BaseModel):
    """Group node in the catalog tree; children are leaves or nested groups."""

    kind: Literal["group"] = "group"
    group_code: str
    display_name: str
    sort: int
    parent_group_code: str
    children: list[PermissionGroupResponse | PermissionDefinitionResponse] = Field(
        default_factory=list
    )

    @classmethod
    def from_node(cls, node: PermissionGroupNode) -> PermissionGroupResponse:
        children: list[PermissionGroupResponse | PermissionDefinitionResponse] = []
        for child in node.children:
            if isinstance(child, PermissionGroupNode):
                children.append(cls.from_node(child))
            else:
                children.append(PermissionDefinitionResponse.from_definition(child))
        return cls(
            group_code=node.group_code,
            display_name=node.display_name,
            sort=node.sort,
            parent_group_code=node.parent_group_code,
            children=children,
        )


class PermissionCodesResponse(BaseModel):
    """Every code known to the catalog."""

    codes: list[str]


class CurrentPrincipalResponse(BaseModel):
    """Caller identity and held codes (GET /permissions/me)."""

    id: str | None
    name: str | None
    permissions: list[str]
    unknown_permissions: list[str] = Field(
        default_factory=list,
        description="Held codes the catalog does not declare",
    )
