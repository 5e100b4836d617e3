"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Test Database Configuration:
    Tests use an in-memory SQLite database shared through a StaticPool, so
    every session in a test sees the same data. A fresh database is created
    for each test, which keeps ids and rows independent between tests.
"""

from collections.abc import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import StaticPool

from modules.backend.core.config import get_app_config, get_settings
from modules.backend.core.database import Database

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(autouse=True)
def _clear_config_cache():
    """Clear lru_cache between tests so each test gets a fresh load."""
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    """
    Provide a storage handle over a fresh in-memory database.

    The todos table is created before the test runs.
    """
    db = Database(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await db.create_tables()
    yield db
    await db.dispose()


@pytest.fixture
async def db_session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    """
    Provide a database session for a single test.

    Usage:
        async def test_insert(db_session: AsyncSession):
            repo = TodoRepository(db_session)
            todo_id = await repo.insert("text")
    """
    async with database.session() as session:
        yield session
