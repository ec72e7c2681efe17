"""Permission ORM model: persisted copy of catalog groups and leaves."""

from sqlalchemy import Boolean, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from adminkit.infrastructure.persistence.database import Base
from adminkit.infrastructure.persistence.models.mixins import FilterableModel


class Permission(FilterableModel, Base):
    """Permission. Table: permission. Unique code; is_group marks group rows."""

    __tablename__ = "permission"

    code: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    display_name: Mapped[str] = mapped_column(String(255), nullable=False)
    parent_code: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    parent_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("permission.id", ondelete="CASCADE"), nullable=True
    )
    is_group: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    sort: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (UniqueConstraint("code", name="uq_permission_code"),)
