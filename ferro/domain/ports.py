"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the use cases require
from infrastructure. Adapters implement these protocols structurally;
no inheritance is needed.

Every port failure outside domain logic is raised as InfraError. The one
exception is UserRepository.save, which raises AlreadyExists when the
storage uniqueness constraint on email rejects the insert.
"""

import uuid
from dataclasses import dataclass
from typing import Protocol

from .aggregates import Comment, Post, User
from .value_objects import Email, PasswordHash, PlainPassword


@dataclass(frozen=True)
class Claims:
    """Decoded payload of a signed authentication token."""

    sub: str
    email: str
    iat: int
    exp: int


class UserRepository(Protocol):
    """Port interface for user persistence."""

    async def save(self, user: User) -> None:
        """
        Insert a new user (not an upsert).

        Raises:
            AlreadyExists: If a user with the same email is already stored
            InfraError: On any other storage failure
        """
        ...

    async def find_by_id(self, user_id: uuid.UUID) -> User | None:
        ...

    async def find_by_email(self, email: Email) -> User | None:
        ...


class PostRepository(Protocol):
    """Port interface for post persistence."""

    async def save(self, post: Post) -> None:
        ...

    async def find_by_id(self, post_id: uuid.UUID) -> Post | None:
        ...

    async def find_all(self, limit: int, offset: int) -> list[Post]:
        """Return a page of posts ordered by created_at descending."""
        ...

    async def find_by_author(
        self, author_id: uuid.UUID, limit: int, offset: int
    ) -> list[Post]:
        """Return a page of one author's posts ordered by created_at descending."""
        ...


class CommentRepository(Protocol):
    """Port interface for comment persistence."""

    async def save(self, comment: Comment) -> None:
        ...

    async def find_by_id(self, comment_id: uuid.UUID) -> Comment | None:
        ...

    async def find_by_post(
        self, post_id: uuid.UUID, limit: int, offset: int
    ) -> list[Comment]:
        """Return a page of a post's comments ordered by created_at ascending."""
        ...


class PasswordHasher(Protocol):
    """Port interface for password hashing. May suspend on CPU-bound work."""

    async def hash(self, password: PlainPassword) -> PasswordHash:
        ...


class PasswordVerifier(Protocol):
    """Port interface for password verification."""

    def verify(self, plain_password: str, password_hash: str) -> bool:
        """
        Check a plaintext password against a stored hash.

        Returns:
            True on match, False on a well-formed hash that does not match

        Raises:
            InfraError: If password_hash cannot be parsed
        """
        ...


class TokenIssuer(Protocol):
    """Port interface for issuing signed authentication tokens."""

    def generate(self, user_id: uuid.UUID, email: str) -> str:
        ...


class TokenVerifier(Protocol):
    """
    Port interface for token verification, consumed by the transport layer.

    Malformed, expired and badly signed tokens all raise the same
    InfraError; the caller decides to treat that as an authentication
    failure.
    """

    def verify(self, token: str) -> Claims:
        ...
