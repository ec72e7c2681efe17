"""Menu ORM model. Navigation entries, nested via parent_id."""

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from adminkit.infrastructure.persistence.database import Base
from adminkit.infrastructure.persistence.models.mixins import FilterableModel


class Menu(FilterableModel, Base):
    """Menu. Table: menu. Root entries have parent_id NULL."""

    __tablename__ = "menu"

    parent_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("menu.id", ondelete="CASCADE"), nullable=True, index=True
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    path: Mapped[str | None] = mapped_column(String(500), nullable=True)
    icon: Mapped[str | None] = mapped_column(String(100), nullable=True)
    permission_code: Mapped[str | None] = mapped_column(String(255), nullable=True)
    sort: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_hide: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
