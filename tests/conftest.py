"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- PostgreSQL reachability (tests that need it are skipped otherwise)
- A migrated async connection pool with empty tables
"""

from collections.abc import AsyncGenerator

import psycopg
import pytest
import pytest_asyncio
from psycopg_pool import AsyncConnectionPool, PoolTimeout

from ferro.adapters.repository.postgres import run_migrations
from ferro.config.settings import get_settings

CLEAN_SQL = "TRUNCATE comments, posts, users"


@pytest.fixture(scope="session")
def database_url() -> str:
    """Database URL from settings, or skip if PostgreSQL is unreachable."""
    url = get_settings().database_url
    try:
        with psycopg.connect(url, connect_timeout=3):
            pass
    except psycopg.OperationalError as e:
        pytest.skip(f"PostgreSQL not available: {e}")
    return url


@pytest_asyncio.fixture
async def pool(database_url: str) -> AsyncGenerator[AsyncConnectionPool, None]:
    """Open a migrated pool with empty tables."""
    pool = AsyncConnectionPool(conninfo=database_url, min_size=1, max_size=10, open=False)
    try:
        await pool.open(wait=True, timeout=5)
    except PoolTimeout as e:
        pytest.skip(f"PostgreSQL not available: {e}")

    await run_migrations(pool)
    async with pool.connection() as conn:
        await conn.execute(CLEAN_SQL)
        await conn.commit()

    yield pool
    await pool.close()
