"""Pytest configuration and fixtures for adminkit.

Environment is set before importing adminkit.main so Settings sees a signing
key and no external database. HTTP tests go through httpx ASGITransport (the
lifespan does not run, so fixtures build the catalog themselves). Storage
tests use an in-memory SQLite database via aiosqlite.
"""

import os

os.environ["SECRET_KEY"] = "test-secret-key-not-for-production"
os.environ["DATABASE_URL"] = ""
os.environ.setdefault("DEBUG", "false")

from collections.abc import AsyncIterator, Callable, Iterable  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from adminkit.application.services.permission_catalog import (  # noqa: E402
    PermissionCatalog,
    initialize_catalog,
    reset_catalog,
)
from adminkit.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from adminkit.infrastructure.persistence import database  # noqa: E402
from adminkit.infrastructure.persistence.database import Base  # noqa: E402
from adminkit.infrastructure.persistence.models import (  # noqa: E402, F401
    Menu,
    Permission,
    Role,
    User,
)
from adminkit.infrastructure.security.jwt import create_access_token  # noqa: E402
from adminkit.main import app  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_catalog() -> Iterable[None]:
    """Every test starts and ends without a process-wide catalog."""
    reset_catalog()
    yield
    reset_catalog()


@pytest.fixture
def catalog() -> PermissionCatalog:
    """Process-wide catalog built from the built-in declaration table."""
    return initialize_catalog()


@pytest.fixture
async def sqlite_engine() -> AsyncIterator[None]:
    """In-memory SQLite engine shared by every session of one test, tables created."""
    database.configure_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    await database.dispose_engine()


@pytest.fixture
async def db_session(sqlite_engine: None) -> AsyncIterator[AsyncSession]:
    """Session on the in-memory database. Data committed here is visible to the app."""
    assert database.AsyncSessionLocal is not None
    async with database.AsyncSessionLocal() as session:
        yield session


@pytest.fixture
async def client(catalog: PermissionCatalog) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI), catalog initialized."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth_headers() -> Callable[..., dict[str, str]]:
    """Factory: bearer headers for a token carrying the given permission codes."""

    def _make(*codes: str, subject: str = "user-1", name: str | None = None) -> dict[str, str]:
        token = create_access_token(subject, codes, name=name)
        return {"Authorization": f"Bearer {token}"}

    return _make
