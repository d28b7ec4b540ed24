from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import MetaData
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from chatter.config import settings

# Predictable constraint names so Alembic autogenerate stays stable across migrations.
NAMING_CONVENTION: dict[str, str] = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for users, chats, activities, tweets and comments.

    Base.metadata is what Alembic autogenerate and the test fixtures
    create tables from.
    """

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


def engine_options(database_url: str) -> dict[str, Any]:
    """Build create_async_engine kwargs for the configured backend.

    Pool sizing and the asyncpg statement timeout only apply to the
    Postgres server; SQLite (local runs, tests) takes the driver defaults.
    """
    options: dict[str, Any] = {"echo": settings.db_echo}
    if make_url(database_url).get_backend_name() != "postgresql":
        return options
    options.update(
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
        pool_recycle=settings.db_pool_recycle,
        pool_pre_ping=settings.db_pool_pre_ping,
        connect_args={"command_timeout": settings.db_statement_timeout},
    )
    return options


engine = create_async_engine(settings.database_url, **engine_options(settings.database_url))

# expire_on_commit=False keeps loaded users and chats readable after commit
# without triggering lazy (sync) I/O inside a template.
async_session = async_sessionmaker(engine, expire_on_commit=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency that provides a database session per request.

    Commits on success, rolls back on exception. Handlers that need two
    independent writes (a chat and its activity) wrap each one in a
    savepoint instead of committing themselves.
    """
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def shutdown() -> None:
    """Close all pooled database connections on application shutdown."""
    await engine.dispose()
