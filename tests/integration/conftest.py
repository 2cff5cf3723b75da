"""
Shared fixtures for integration tests.

Tests in this directory run against a real PostgreSQL (DATABASE_URL).
They are skipped when the database cannot be reached.
"""

from collections.abc import Generator

import psycopg
import pytest


@pytest.fixture
def clean_database(database_url: str) -> Generator[None, None, None]:
    """Empty all tables before a test that drives the app synchronously."""
    with psycopg.connect(database_url) as conn:
        # Tables may not exist before the app's first startup
        conn.execute(
            "DO $$ BEGIN "
            "IF to_regclass('comments') IS NOT NULL THEN TRUNCATE comments, posts, users; END IF; "
            "END $$"
        )
        conn.commit()
    yield
