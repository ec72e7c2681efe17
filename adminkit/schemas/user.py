"""User API schemas."""

from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from adminkit.application.query.filters import QueryFilterRequest
from adminkit.application.query.predicate import PredicateBuilder


class UserQuery(QueryFilterRequest):
    """Filters for GET /users. email is matched as literal text, not a pattern."""

    sortable_fields: ClassVar[frozenset[str]] = frozenset(
        {"created_at", "user_name", "email"}
    )

    user_name: str | None = None
    email: str | None = None
    department: str | None = None

    def build_predicate(self, builder: PredicateBuilder) -> None:
        builder.matches("user_name", self.user_name)
        builder.matches("email", self.email, literal=True)
        builder.matches("department", self.department)


class UserResponse(BaseModel):
    """User list item."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_name: str
    email: str | None
    department: str | None
    is_active: bool
    created_at: datetime
