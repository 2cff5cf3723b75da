"""Repository adapters - Database implementations."""

from .postgres import (
    PostgresCommentRepository,
    PostgresPostRepository,
    PostgresUserRepository,
    run_migrations,
)

__all__ = [
    "PostgresCommentRepository",
    "PostgresPostRepository",
    "PostgresUserRepository",
    "run_migrations",
]
