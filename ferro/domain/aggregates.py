"""
Aggregates - Identity, timestamps and value objects.

New aggregates are created through the ``create`` factories, which assign
a random UUID and the current UTC time. Direct construction is reserved
for rehydration by storage adapters. Instances are frozen.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from .value_objects import CommentContent, Email, PasswordHash, PostContent, PostTitle


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class User:
    """A registered user. Never holds a plaintext password."""

    id: uuid.UUID
    email: Email
    password_hash: PasswordHash
    created_at: datetime

    @classmethod
    def create(cls, email: Email, password_hash: PasswordHash) -> "User":
        return cls(
            id=uuid.uuid4(),
            email=email,
            password_hash=password_hash,
            created_at=_utcnow(),
        )


@dataclass(frozen=True)
class Post:
    """
    A published post.

    updated_at equals created_at at creation; there is no edit operation,
    so it never moves.
    """

    id: uuid.UUID
    title: PostTitle
    content: PostContent
    author_id: uuid.UUID
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(cls, title: PostTitle, content: PostContent, author_id: uuid.UUID) -> "Post":
        now = _utcnow()
        return cls(
            id=uuid.uuid4(),
            title=title,
            content=content,
            author_id=author_id,
            created_at=now,
            updated_at=now,
        )


@dataclass(frozen=True)
class Comment:
    """A comment attached to a post. Post existence is checked by CreateComment."""

    id: uuid.UUID
    content: CommentContent
    post_id: uuid.UUID
    author_id: uuid.UUID
    created_at: datetime

    @classmethod
    def create(
        cls, content: CommentContent, post_id: uuid.UUID, author_id: uuid.UUID
    ) -> "Comment":
        return cls(
            id=uuid.uuid4(),
            content=content,
            post_id=post_id,
            author_id=author_id,
            created_at=_utcnow(),
        )
