"""User ORM model."""

from sqlalchemy import Boolean, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from adminkit.infrastructure.persistence.database import Base
from adminkit.infrastructure.persistence.models.mixins import FilterableModel


class User(FilterableModel, Base):
    """User. Table: app_user. Unique user_name."""

    __tablename__ = "app_user"

    user_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    department: Mapped[str | None] = mapped_column(String(255), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    __table_args__ = (UniqueConstraint("user_name", name="uq_app_user_user_name"),)
