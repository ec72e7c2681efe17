"""SQLAlchemy ORM models. Import here so Base.metadata sees every table."""

from adminkit.infrastructure.persistence.models.menu import Menu
from adminkit.infrastructure.persistence.models.permission import Permission
from adminkit.infrastructure.persistence.models.role import Role
from adminkit.infrastructure.persistence.models.user import User

__all__ = ["Menu", "Permission", "Role", "User"]
