"""Domain value objects."""

from adminkit.domain.value_objects.core import EntityId, PermissionCode

__all__ = ["EntityId", "PermissionCode"]
