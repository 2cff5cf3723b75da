"""
PostgreSQL repository adapters - Implement the storage ports.

This module provides the PostgreSQL implementations of the domain's
repository ports using psycopg3 (async) with raw SQL.

Error Translation:
------------------
- UniqueViolation on users.email -> AlreadyExists. This is the
  authoritative uniqueness guarantee; the use case's pre-check is only
  a fast path.
- Any other psycopg.Error -> InfraError.
- Stored values that fail value-object validation on the way back in
  -> InfraError (corrupt or out-of-band data).

All SQL uses parameterized queries. Each call borrows one connection
from the pool and commits explicitly.
"""

import logging
import uuid
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, TypeVar

import psycopg
from psycopg import errors
from psycopg_pool import AsyncConnectionPool

from ferro.domain.aggregates import Comment, Post, User
from ferro.domain.exceptions import AlreadyExists, DomainError, InfraError
from ferro.domain.value_objects import (
    CommentContent,
    Email,
    PasswordHash,
    PostContent,
    PostTitle,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _rehydrate(factory: Callable[[str], T], raw: str, field_name: str) -> T:
    """Build a value object from a stored column, reporting bad data as InfraError."""
    try:
        return factory(raw)
    except DomainError as e:
        raise InfraError(f"Invalid {field_name} in DB: {e}") from e


def _db_error(e: psycopg.Error) -> InfraError:
    return InfraError(f"Database error: {e}")


def _utc(value: datetime) -> datetime:
    # psycopg labels timestamptz with the session TimeZone
    return value.astimezone(timezone.utc)


class PostgresUserRepository:
    """
    Implements UserRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, pool: AsyncConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 AsyncConnectionPool for database connections
        """
        self._pool = pool

    async def save(self, user: User) -> None:
        """
        Insert a user row.

        Raises:
            AlreadyExists: If the email UNIQUE constraint rejects the row
            InfraError: On any other database failure
        """
        sql = """
            INSERT INTO users (id, email, password_hash, created_at)
            VALUES (%s, %s, %s, %s)
        """
        try:
            async with self._pool.connection() as conn:
                await conn.execute(
                    sql, (user.id, user.email.value, user.password_hash.value, user.created_at)
                )
                await conn.commit()
        except errors.UniqueViolation as e:
            raise AlreadyExists("User with this email already exists") from e
        except psycopg.Error as e:
            raise _db_error(e) from e

    async def find_by_id(self, user_id: uuid.UUID) -> User | None:
        sql = """
            SELECT id, email, password_hash, created_at
            FROM users
            WHERE id = %s
        """
        row = await self._fetch_one(sql, (user_id,))
        return self._to_user(row) if row is not None else None

    async def find_by_email(self, email: Email) -> User | None:
        sql = """
            SELECT id, email, password_hash, created_at
            FROM users
            WHERE email = %s
        """
        row = await self._fetch_one(sql, (email.value,))
        return self._to_user(row) if row is not None else None

    async def _fetch_one(self, sql: str, params: tuple[Any, ...]) -> tuple[Any, ...] | None:
        try:
            async with self._pool.connection() as conn, conn.cursor() as cursor:
                await cursor.execute(sql, params)
                return await cursor.fetchone()
        except psycopg.Error as e:
            raise _db_error(e) from e

    @staticmethod
    def _to_user(row: tuple[Any, ...]) -> User:
        user_id, email, password_hash, created_at = row
        return User(
            id=user_id,
            email=_rehydrate(Email, email, "email"),
            # No format check on stored hashes; a bad one fails at verification.
            password_hash=PasswordHash(password_hash),
            created_at=_utc(created_at),
        )


class PostgresPostRepository:
    """
    Implements PostRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    _COLUMNS = "id, title, content, author_id, created_at, updated_at"

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool

    async def save(self, post: Post) -> None:
        sql = """
            INSERT INTO posts (id, title, content, author_id, created_at, updated_at)
            VALUES (%s, %s, %s, %s, %s, %s)
        """
        params = (
            post.id,
            post.title.value,
            post.content.value,
            post.author_id,
            post.created_at,
            post.updated_at,
        )
        try:
            async with self._pool.connection() as conn:
                await conn.execute(sql, params)
                await conn.commit()
        except psycopg.Error as e:
            raise _db_error(e) from e

    async def find_by_id(self, post_id: uuid.UUID) -> Post | None:
        sql = f"SELECT {self._COLUMNS} FROM posts WHERE id = %s"
        rows = await self._fetch_all(sql, (post_id,))
        return self._to_post(rows[0]) if rows else None

    async def find_all(self, limit: int, offset: int) -> list[Post]:
        sql = f"""
            SELECT {self._COLUMNS}
            FROM posts
            ORDER BY created_at DESC
            LIMIT %s OFFSET %s
        """
        rows = await self._fetch_all(sql, (limit, offset))
        return [self._to_post(row) for row in rows]

    async def find_by_author(
        self, author_id: uuid.UUID, limit: int, offset: int
    ) -> list[Post]:
        sql = f"""
            SELECT {self._COLUMNS}
            FROM posts
            WHERE author_id = %s
            ORDER BY created_at DESC
            LIMIT %s OFFSET %s
        """
        rows = await self._fetch_all(sql, (author_id, limit, offset))
        return [self._to_post(row) for row in rows]

    async def _fetch_all(self, sql: str, params: tuple[Any, ...]) -> list[tuple[Any, ...]]:
        try:
            async with self._pool.connection() as conn, conn.cursor() as cursor:
                await cursor.execute(sql, params)
                return await cursor.fetchall()
        except psycopg.Error as e:
            raise _db_error(e) from e

    @staticmethod
    def _to_post(row: tuple[Any, ...]) -> Post:
        post_id, title, content, author_id, created_at, updated_at = row
        return Post(
            id=post_id,
            title=_rehydrate(PostTitle, title, "title"),
            content=_rehydrate(PostContent, content, "content"),
            author_id=author_id,
            created_at=_utc(created_at),
            updated_at=_utc(updated_at),
        )


class PostgresCommentRepository:
    """
    Implements CommentRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    _COLUMNS = "id, content, post_id, author_id, created_at"

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool

    async def save(self, comment: Comment) -> None:
        sql = """
            INSERT INTO comments (id, content, post_id, author_id, created_at)
            VALUES (%s, %s, %s, %s, %s)
        """
        params = (
            comment.id,
            comment.content.value,
            comment.post_id,
            comment.author_id,
            comment.created_at,
        )
        try:
            async with self._pool.connection() as conn:
                await conn.execute(sql, params)
                await conn.commit()
        except psycopg.Error as e:
            raise _db_error(e) from e

    async def find_by_id(self, comment_id: uuid.UUID) -> Comment | None:
        sql = f"SELECT {self._COLUMNS} FROM comments WHERE id = %s"
        rows = await self._fetch_all(sql, (comment_id,))
        return self._to_comment(rows[0]) if rows else None

    async def find_by_post(
        self, post_id: uuid.UUID, limit: int, offset: int
    ) -> list[Comment]:
        sql = f"""
            SELECT {self._COLUMNS}
            FROM comments
            WHERE post_id = %s
            ORDER BY created_at ASC
            LIMIT %s OFFSET %s
        """
        rows = await self._fetch_all(sql, (post_id, limit, offset))
        return [self._to_comment(row) for row in rows]

    async def _fetch_all(self, sql: str, params: tuple[Any, ...]) -> list[tuple[Any, ...]]:
        try:
            async with self._pool.connection() as conn, conn.cursor() as cursor:
                await cursor.execute(sql, params)
                return await cursor.fetchall()
        except psycopg.Error as e:
            raise _db_error(e) from e

    @staticmethod
    def _to_comment(row: tuple[Any, ...]) -> Comment:
        comment_id, content, post_id, author_id, created_at = row
        return Comment(
            id=comment_id,
            content=_rehydrate(CommentContent, content, "content"),
            post_id=post_id,
            author_id=author_id,
            created_at=_utc(created_at),
        )


async def run_migrations(pool: AsyncConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 AsyncConnectionPool instance
    """
    # Structure: ferro/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning("Migrations directory not found: %s", migrations_dir)
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info("Running %d migration(s)", len(sql_files))

    for sql_file in sql_files:
        logger.info("Executing migration: %s", sql_file.name)
        try:
            sql_content = sql_file.read_text()

            async with pool.connection() as conn:
                await conn.execute(sql_content)
                await conn.commit()

            logger.info("Migration complete: %s", sql_file.name)
        except Exception as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
