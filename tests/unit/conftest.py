"""
In-memory port fakes for unit tests.

These implement the storage and security protocols without a database,
so use cases can be exercised end-to-end in-process. The user fake
enforces email uniqueness on save the way the PostgreSQL constraint does.
"""

import uuid

import pytest

from ferro.domain.aggregates import Comment, Post, User
from ferro.domain.exceptions import AlreadyExists, InfraError
from ferro.domain.value_objects import Email, PasswordHash, PlainPassword


class InMemoryUserRepository:
    def __init__(self) -> None:
        self.users: dict[uuid.UUID, User] = {}

    async def save(self, user: User) -> None:
        if any(existing.email == user.email for existing in self.users.values()):
            raise AlreadyExists("User with this email already exists")
        self.users[user.id] = user

    async def find_by_id(self, user_id: uuid.UUID) -> User | None:
        return self.users.get(user_id)

    async def find_by_email(self, email: Email) -> User | None:
        return next((u for u in self.users.values() if u.email == email), None)


class InMemoryPostRepository:
    def __init__(self) -> None:
        self.posts: dict[uuid.UUID, Post] = {}

    async def save(self, post: Post) -> None:
        self.posts[post.id] = post

    async def find_by_id(self, post_id: uuid.UUID) -> Post | None:
        return self.posts.get(post_id)

    async def find_all(self, limit: int, offset: int) -> list[Post]:
        ordered = sorted(self.posts.values(), key=lambda p: p.created_at, reverse=True)
        return ordered[offset : offset + limit]

    async def find_by_author(self, author_id: uuid.UUID, limit: int, offset: int) -> list[Post]:
        ordered = sorted(
            (p for p in self.posts.values() if p.author_id == author_id),
            key=lambda p: p.created_at,
            reverse=True,
        )
        return ordered[offset : offset + limit]


class InMemoryCommentRepository:
    def __init__(self) -> None:
        self.comments: dict[uuid.UUID, Comment] = {}

    async def save(self, comment: Comment) -> None:
        self.comments[comment.id] = comment

    async def find_by_id(self, comment_id: uuid.UUID) -> Comment | None:
        return self.comments.get(comment_id)

    async def find_by_post(self, post_id: uuid.UUID, limit: int, offset: int) -> list[Comment]:
        ordered = sorted(
            (c for c in self.comments.values() if c.post_id == post_id),
            key=lambda c: c.created_at,
        )
        return ordered[offset : offset + limit]


class FakePasswordHasher:
    """Reversible stand-in for bcrypt: 'hashed:' + plaintext."""

    PREFIX = "hashed:"

    async def hash(self, password: PlainPassword) -> PasswordHash:
        return PasswordHash(self.PREFIX + password.value)

    def verify(self, plain_password: str, password_hash: str) -> bool:
        if not password_hash.startswith(self.PREFIX):
            raise InfraError("Invalid password hash")
        return password_hash == self.PREFIX + plain_password


class FakeTokenIssuer:
    def generate(self, user_id: uuid.UUID, email: str) -> str:
        return f"token_{user_id}"


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def post_repository() -> InMemoryPostRepository:
    return InMemoryPostRepository()


@pytest.fixture
def comment_repository() -> InMemoryCommentRepository:
    return InMemoryCommentRepository()


@pytest.fixture
def password_hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def token_issuer() -> FakeTokenIssuer:
    return FakeTokenIssuer()
