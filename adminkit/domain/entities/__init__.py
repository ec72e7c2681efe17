"""Domain entities.

Pure domain models; no ORM or persistence concerns.
"""

from adminkit.domain.entities.permission import (
    PermissionDefinition,
    PermissionGroupDeclaration,
    PermissionGroupNode,
)

__all__ = [
    "PermissionDefinition",
    "PermissionGroupDeclaration",
    "PermissionGroupNode",
]
