"""Mirror the permission catalog into the permission table.

Rows are keyed by code. Missing codes are inserted; existing rows get their
display name, sort, and parent refreshed from the catalog. Rows for codes the
catalog no longer declares are left in place (roles may still reference them).
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from adminkit.application.services.permission_catalog import PermissionCatalog
from adminkit.domain.entities.permission import PermissionDefinition, PermissionGroupNode
from adminkit.domain.value_objects.core import PermissionCode
from adminkit.infrastructure.persistence.models.permission import Permission
from adminkit.shared.telemetry.logging import get_logger
from adminkit.shared.utils.generators import generate_id

logger = get_logger(__name__)


@dataclass(frozen=True)
class SyncResult:
    created: int
    updated: int
    orphaned: tuple[str, ...]


class PermissionSyncService:
    """Upsert catalog groups and leaves as Permission rows (parents before children)."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def sync(self, catalog: PermissionCatalog) -> SyncResult:
        result = await self.db.execute(select(Permission))
        rows: dict[str, Permission] = {row.code: row for row in result.scalars()}
        created = updated = 0

        for root in catalog.tree():
            for group in root.iter_groups():
                c, u = self._upsert(rows, group, is_group=True)
                created += c
                updated += u
                for child in group.children:
                    if isinstance(child, PermissionDefinition):
                        c, u = self._upsert(rows, child, is_group=False)
                        created += c
                        updated += u

        await self.db.flush()
        declared = catalog.all_codes()
        orphaned = tuple(sorted(code for code in rows if code not in declared))
        if orphaned:
            logger.warning("Permission rows not declared in catalog: %s", ", ".join(orphaned))
        logger.info("Permission sync: %d created, %d updated", created, updated)
        return SyncResult(created=created, updated=updated, orphaned=orphaned)

    def _upsert(
        self,
        rows: dict[str, Permission],
        item: PermissionGroupNode | PermissionDefinition,
        *,
        is_group: bool,
    ) -> tuple[int, int]:
        if isinstance(item, PermissionGroupNode):
            code, parent_code = item.group_code, item.parent_group_code
            name = code
        else:
            code, parent_code = item.code, item.parent_group_code
            name = PermissionCode(code).action or code
        parent = rows.get(parent_code) if parent_code else None
        parent_id = parent.id if parent is not None else None

        row = rows.get(code)
        if row is None:
            row = Permission(
                id=generate_id(),
                code=code,
                name=name,
                display_name=item.display_name,
                parent_code=parent_code,
                parent_id=parent_id,
                is_group=is_group,
                sort=item.sort,
            )
            self.db.add(row)
            rows[code] = row
            return 1, 0

        changed = (
            row.display_name != item.display_name
            or row.sort != item.sort
            or row.parent_code != parent_code
            or row.parent_id != parent_id
        )
        if changed:
            row.display_name = item.display_name
            row.sort = item.sort
            row.parent_code = parent_code
            row.parent_id = parent_id
        return 0, int(changed)
