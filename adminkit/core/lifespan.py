"""Application lifespan: startup and shutdown.

Startup builds the permission catalog; a malformed declaration table raises
here and the application never starts serving. Shutdown disposes the SQL
engine if one was created.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from adminkit.application.services.authorization_service import AuthorizationService
from adminkit.application.services.permission_catalog import initialize_catalog
from adminkit.core.config import get_settings
from adminkit.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown."""
    settings = get_settings()

    # ---- Startup ----
    setup_logging()
    catalog = initialize_catalog()
    app.state.permission_catalog = catalog
    app.state.authorization_service = AuthorizationService()
    logger.info(
        "%s %s started with %d permission code(s)",
        settings.app_name,
        settings.app_version,
        len(catalog.all_codes()),
    )

    yield

    # ---- Shutdown ----
    from adminkit.infrastructure.persistence import database

    if database.engine is not None:
        await database.dispose_engine()
        logger.info("Database engine disposed")
