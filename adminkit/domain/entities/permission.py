"""Permission domain entities.

Declarations are the build-time source of truth (one per permission group,
each listing its leaf permissions). The catalog turns them into immutable
definitions and a group forest. Nothing here is mutated after construction.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from adminkit.domain.value_objects.core import PermissionCode


@dataclass(frozen=True)
class PermissionGroupDeclaration:
    """Declaration of one permission group and the leaf permissions it owns.

    Attributes:
        code: Group code (e.g. 'Role').
        parent_code: Parent group code; empty string for a root group.
        display_name: Human label for the group (e.g. 'Role Management').
        sort: Ordering among siblings (ascending; ties by declaration order).
        permissions: Ordered (code, label) pairs, e.g. ('Role.View', 'View').
    """

    code: str
    parent_code: str
    display_name: str
    sort: int = 0
    permissions: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        PermissionCode(self.code)
        if self.parent_code:
            PermissionCode(self.parent_code)
        object.__setattr__(self, "permissions", tuple(tuple(p) for p in self.permissions))
        for code, _label in self.permissions:
            PermissionCode(code)

    @property
    def is_root(self) -> bool:
        return not self.parent_code


@dataclass(frozen=True)
class PermissionDefinition:
    """A single grantable permission (leaf of the permission forest)."""

    code: str
    parent_group_code: str
    display_name: str
    sort: int = 0

    @property
    def is_root(self) -> bool:
        return not self.parent_group_code


@dataclass(frozen=True)
class PermissionGroupNode:
    """A group in the permission forest with its ordered children."""

    group_code: str
    display_name: str
    sort: int = 0
    parent_group_code: str = ""
    children: tuple[PermissionGroupNode | PermissionDefinition, ...] = field(
        default_factory=tuple
    )

    def iter_definitions(self) -> Iterator[PermissionDefinition]:
        """Yield every leaf definition below this node, depth-first in tree order."""
        for child in self.children:
            if isinstance(child, PermissionGroupNode):
                yield from child.iter_definitions()
            else:
                yield child

    def iter_groups(self) -> Iterator[PermissionGroupNode]:
        """Yield this node and every descendant group, depth-first in tree order."""
        yield self
        for child in self.children:
            if isinstance(child, PermissionGroupNode):
                yield from child.iter_groups()
