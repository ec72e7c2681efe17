"""SQLAlchemy mixins for common model patterns.

Provides IdMixin (UUID string primary key) and TimestampMixin
(created_at / updated_at). Every filterable model combines both, since
the base query predicate targets id and created_at.
"""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column

from adminkit.shared.utils.datetime import utc_now
from adminkit.shared.utils.generators import generate_id


class IdMixin:
    """Mixin for models using a generated UUID string as primary key."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String(36), primary_key=True, default=generate_id)


class TimestampMixin:
    """Mixin for created_at and updated_at (timezone-aware, set by the application)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), default=utc_now, nullable=False, index=True
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False
        )


class FilterableModel(IdMixin, TimestampMixin):
    """Combined mixin: id + created_at/updated_at."""

    __abstract__ = True
