from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from chatter.db.session import Base, get_db
from chatter.main import app

# Fixtures in tests/seeds.py are only visible to pytest once registered here.
pytest_plugins = ["tests.seeds"]

# In-memory SQLite; StaticPool keeps the single connection (and its tables) alive.
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Id sent in X-User-ID by the default client; seeds create this user first.
SIGNED_IN_USER_ID = 1


def _enable_savepoints(engine_sync: object) -> None:
    """Let SQLAlchemy own BEGIN so SAVEPOINT works on the sqlite3 driver."""

    @event.listens_for(engine_sync, "connect")
    def _connect(dbapi_connection, _record):  # type: ignore[no-untyped-def]
        dbapi_connection.isolation_level = None

    @event.listens_for(engine_sync, "begin")
    def _begin(conn):  # type: ignore[no-untyped-def]
        conn.exec_driver_sql("BEGIN")


@pytest_asyncio.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    """Fresh in-memory database with every table created."""
    engine = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    _enable_savepoints(engine.sync_engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    async with async_sessionmaker(engine, expire_on_commit=False)() as session:
        yield session


def _signed_in_client(transport: ASGITransport) -> AsyncClient:
    return AsyncClient(
        transport=transport,
        base_url="http://test",
        headers={"X-User-ID": str(SIGNED_IN_USER_ID)},
    )


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncIterator[AsyncClient]:
    """Signed-in HTTP client that uses the test database session."""

    async def override_get_db() -> AsyncIterator[AsyncSession]:
        yield db

    app.dependency_overrides[get_db] = override_get_db

    async with _signed_in_client(ASGITransport(app=app)) as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def unguarded_client(db: AsyncSession) -> AsyncIterator[AsyncClient]:
    """Like ``client``, but returns the 500 response instead of re-raising app errors."""

    async def override_get_db() -> AsyncIterator[AsyncSession]:
        yield db

    app.dependency_overrides[get_db] = override_get_db

    async with _signed_in_client(ASGITransport(app=app, raise_app_exceptions=False)) as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def committing_client(
    engine: AsyncEngine, monkeypatch: pytest.MonkeyPatch
) -> AsyncIterator[AsyncClient]:
    """Signed-in client going through the real get_db, so each request commits or rolls back.

    Use a separate session on ``engine`` to inspect what was committed.
    """
    monkeypatch.setattr(
        "chatter.db.session.async_session",
        async_sessionmaker(engine, expire_on_commit=False),
    )

    async with _signed_in_client(ASGITransport(app=app)) as client:
        yield client
