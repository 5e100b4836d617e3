"""
Database Configuration.

SQLAlchemy async engine and session management for the SQLite todo store.

The engine lives on a Database handle that the application opens once in
its lifespan and keeps on app.state. Endpoints receive sessions through
the get_db_session dependency, so tests can hand in their own handle.
"""

from collections.abc import AsyncGenerator
from typing import Any

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from modules.backend.core.logging import get_logger
from modules.backend.models import todo as _todo_model  # noqa: F401  registers todos
from modules.backend.models.base import Base

logger = get_logger(__name__)


class Database:
    """
    Process-wide storage handle.

    Usage:
        database = Database("sqlite+aiosqlite:///todos.db")
        await database.create_tables()
        async with database.session() as session:
            ...
        await database.dispose()
    """

    def __init__(self, url: str, echo: bool = False, **engine_kwargs: Any) -> None:
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, echo=echo, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        logger.debug("Database engine created", extra={"url": url})

    def session(self) -> AsyncSession:
        """Open a new session. Use as an async context manager."""
        return self._session_factory()

    async def create_tables(self) -> None:
        """Create missing tables. Existing tables and rows are left alone."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.debug("Database tables ensured")

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()
        logger.debug("Database engine disposed")


def get_database(request: Request) -> Database:
    """Return the storage handle attached to the running application."""
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database is not initialised on app.state")
    return database


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency that provides a database session.

    Writes are committed by the service that issues them. Anything left
    uncommitted is rolled back when the request fails.

    Usage in endpoints:
        @router.get("/items")
        async def get_items(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    database = get_database(request)
    async with database.session() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
