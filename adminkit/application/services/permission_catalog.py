"""Permission catalog: immutable registry of declared permissions and their group forest.

build_catalog() validates a declaration set (unique codes, resolvable parents)
and produces a PermissionCatalog. The process-wide instance is created once by
initialize_catalog() under a lock and is read without locking afterwards.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from adminkit.domain.entities.permission import (
    PermissionDefinition,
    PermissionGroupDeclaration,
    PermissionGroupNode,
)
from adminkit.domain.exceptions import (
    CatalogNotInitializedException,
    DuplicatePermissionCodeException,
    UnknownParentGroupException,
)

logger = logging.getLogger(__name__)


class PermissionCatalog:
    """Read-only view over validated permission definitions and the group forest.

    Codes cover both group codes (e.g. 'Role') and leaf codes (e.g. 'Role.View').
    The forest orders every level by sort ascending, ties by declaration order.
    """

    __slots__ = ("_definitions", "_groups", "_tree", "_codes", "_leaf_index")

    def __init__(
        self,
        definitions: tuple[PermissionDefinition, ...],
        groups: Mapping[str, PermissionGroupNode],
        tree: tuple[PermissionGroupNode, ...],
    ) -> None:
        self._definitions = definitions
        self._groups = MappingProxyType(dict(groups))
        self._tree = tree
        self._leaf_index = MappingProxyType({d.code: d for d in definitions})
        self._codes = frozenset(self._groups) | frozenset(self._leaf_index)

    def all_codes(self) -> frozenset[str]:
        """Return every known code (group and leaf)."""
        return self._codes

    def tree(self) -> tuple[PermissionGroupNode, ...]:
        """Return the root groups of the forest, in display order."""
        return self._tree

    def exists(self, code: str) -> bool:
        """Return True if code is a declared group or leaf code (exact match)."""
        return code in self._codes

    def definitions(self) -> tuple[PermissionDefinition, ...]:
        """Return leaf definitions in declaration order."""
        return self._definitions

    def get_definition(self, code: str) -> PermissionDefinition | None:
        return self._leaf_index.get(code)

    def get_group(self, code: str) -> PermissionGroupNode | None:
        return self._groups.get(code)

    def descendant_codes(self, group_code: str) -> frozenset[str]:
        """Return leaf and group codes below a group (excluding the group itself).

        For administration screens (e.g. "select all under Role Management").
        Authorization never uses this: holding a group code grants nothing below it.
        """
        group = self._groups.get(group_code)
        if group is None:
            return frozenset()
        codes = {g.group_code for g in group.iter_groups() if g is not group}
        codes.update(d.code for d in group.iter_definitions())
        return frozenset(codes)

    def __contains__(self, code: object) -> bool:
        return code in self._codes

    def __iter__(self) -> Iterator[PermissionDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)


def _group_site(decl: PermissionGroupDeclaration, index: int) -> str:
    return f"group '{decl.code}' (declaration #{index})"


def _leaf_site(decl: PermissionGroupDeclaration, index: int) -> str:
    return f"permission in group '{decl.code}' (declaration #{index})"


def _check_parents(declared: Mapping[str, PermissionGroupDeclaration]) -> None:
    """Every non-root parent must be declared, and following parents must reach a root."""
    for decl in declared.values():
        if decl.parent_code and decl.parent_code not in declared:
            raise UnknownParentGroupException(decl.code, decl.parent_code)
    for decl in declared.values():
        seen = {decl.code}
        current = decl
        while current.parent_code:
            if current.parent_code in seen:
                # Cycle: no chain of parents from here ends in a root group.
                raise UnknownParentGroupException(decl.code, decl.parent_code)
            seen.add(current.parent_code)
            current = declared[current.parent_code]


def build_catalog(
    declarations: Iterable[PermissionGroupDeclaration],
) -> PermissionCatalog:
    """Validate declarations and build an immutable catalog with its group forest.

    Raises:
        DuplicatePermissionCodeException: A group or leaf code is declared twice.
        UnknownParentGroupException: A group's parent is not declared, or parents form a cycle.
    """
    sites: dict[str, str] = {}
    declared: dict[str, PermissionGroupDeclaration] = {}
    # Ordinal gives one declaration order across groups and leaves for tie-breaking.
    ordinal: dict[str, int] = {}
    leaves_by_group: dict[str, list[PermissionDefinition]] = {}
    definitions: list[PermissionDefinition] = []
    counter = 0

    for index, decl in enumerate(declarations):
        site = _group_site(decl, index)
        if decl.code in sites:
            raise DuplicatePermissionCodeException(decl.code, sites[decl.code], site)
        sites[decl.code] = site
        declared[decl.code] = decl
        ordinal[decl.code] = counter
        counter += 1

        leaves = leaves_by_group.setdefault(decl.code, [])
        for position, (code, label) in enumerate(decl.permissions):
            leaf_site = _leaf_site(decl, index)
            if code in sites:
                raise DuplicatePermissionCodeException(code, sites[code], leaf_site)
            sites[code] = leaf_site
            ordinal[code] = counter
            counter += 1
            definition = PermissionDefinition(
                code=code,
                parent_group_code=decl.code,
                display_name=f"{decl.display_name}.{label}",
                sort=position,
            )
            leaves.append(definition)
            definitions.append(definition)

    _check_parents(declared)

    child_groups: dict[str, list[str]] = {}
    for decl in declared.values():
        child_groups.setdefault(decl.parent_code, []).append(decl.code)

    nodes: dict[str, PermissionGroupNode] = {}

    def order_key(item: PermissionGroupNode | PermissionDefinition) -> tuple[int, int]:
        code = item.group_code if isinstance(item, PermissionGroupNode) else item.code
        return (item.sort, ordinal[code])

    def build_node(code: str) -> PermissionGroupNode:
        decl = declared[code]
        children: list[PermissionGroupNode | PermissionDefinition] = [
            build_node(child) for child in child_groups.get(code, [])
        ]
        children.extend(leaves_by_group[code])
        children.sort(key=order_key)
        node = PermissionGroupNode(
            group_code=decl.code,
            display_name=decl.display_name,
            sort=decl.sort,
            parent_group_code=decl.parent_code,
            children=tuple(children),
        )
        nodes[code] = node
        return node

    roots = sorted((build_node(code) for code in child_groups.get("", [])), key=order_key)

    return PermissionCatalog(
        definitions=tuple(definitions),
        groups=nodes,
        tree=tuple(roots),
    )


_catalog: PermissionCatalog | None = None
_catalog_lock = threading.Lock()


def initialize_catalog(
    declarations: Iterable[PermissionGroupDeclaration] | None = None,
) -> PermissionCatalog:
    """Build the process-wide catalog once and return it.

    Later calls return the existing instance without rebuilding, whatever
    declarations they pass. Uses the built-in table when declarations is None.
    Build errors propagate; the catalog stays uninitialized.
    """
    global _catalog
    if _catalog is not None:
        return _catalog
    with _catalog_lock:
        if _catalog is None:
            if declarations is None:
                from adminkit.core.permissions import PERMISSION_GROUPS

                declarations = PERMISSION_GROUPS
            catalog = build_catalog(declarations)
            logger.info(
                "Permission catalog initialized: %d groups, %d permissions",
                len(catalog.all_codes()) - len(catalog),
                len(catalog),
            )
            _catalog = catalog
    return _catalog


def get_catalog() -> PermissionCatalog:
    """Return the process-wide catalog. Raises CatalogNotInitializedException before init."""
    if _catalog is None:
        raise CatalogNotInitializedException()
    return _catalog


def reset_catalog() -> None:
    """Drop the process-wide catalog. Test helper; never call while serving."""
    global _catalog
    with _catalog_lock:
        _catalog = None
