"""Role ORM model. Optionally scoped to a tenant."""

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from adminkit.infrastructure.persistence.database import Base
from adminkit.infrastructure.persistence.models.mixins import FilterableModel


class Role(FilterableModel, Base):
    """Role. Table: role. tenant_id NULL for roles shared across tenants."""

    __tablename__ = "role"

    tenant_id: Mapped[str | None] = mapped_column(String(36), nullable=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_system: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
