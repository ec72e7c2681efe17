"""Mirror the built-in permission catalog into the permission table.

Usage:
    python -m scripts.seed_permissions
Requires DATABASE_URL. Creates tables that do not exist yet.
"""

import asyncio
import sys

from adminkit.application.services.permission_catalog import initialize_catalog
from adminkit.core.config import get_settings
from adminkit.infrastructure.persistence import database
from adminkit.infrastructure.persistence.database import Base, _ensure_engine
from adminkit.infrastructure.persistence.models import Permission  # noqa: F401
from adminkit.infrastructure.services import PermissionSyncService
from adminkit.shared.telemetry.logging import setup_logging


async def main() -> None:
    """Sync catalog rows and print a summary."""
    setup_logging()
    get_settings()
    _ensure_engine()
    if database.AsyncSessionLocal is None:
        print("DATABASE_URL is not set", file=sys.stderr)
        sys.exit(1)

    catalog = initialize_catalog()
    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            result = await PermissionSyncService(session).sync(catalog)
    await database.dispose_engine()
    print(f"Permissions: {result.created} created, {result.updated} updated")
    if result.orphaned:
        print(f"Not in catalog: {', '.join(result.orphaned)}")


if __name__ == "__main__":
    asyncio.run(main())
