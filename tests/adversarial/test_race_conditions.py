"""
Adversarial tests for race condition attack prevention.

Verifies that concurrent registrations for the same email cannot create
duplicate accounts. The use case's existence check is advisory; the
users.email UNIQUE constraint is what guarantees a single winner, and
losers must see AlreadyExists rather than an infrastructure error.
"""

import asyncio
import uuid

import pytest
from psycopg_pool import AsyncConnectionPool

from ferro.adapters.repository.postgres import PostgresCommentRepository, PostgresPostRepository
from ferro.application import CreateCommentUseCase, RegisterUserUseCase
from ferro.application.dtos import CreateCommentRequest, RegisterUserRequest
from ferro.domain.aggregates import Post
from ferro.domain.exceptions import AlreadyExists
from ferro.domain.value_objects import PostContent, PostTitle

# Apply adversarial marker to all tests in this module
pytestmark = pytest.mark.adversarial


async def count_users(pool: AsyncConnectionPool, email: str) -> int:
    async with pool.connection() as conn, conn.cursor() as cursor:
        await cursor.execute("SELECT COUNT(*) FROM users WHERE email = %s", (email,))
        row = await cursor.fetchone()
    return row[0]


class TestRaceConditionAttacks:
    """
    Adversarial tests simulating race condition attacks.

    These tests fire many registrations for one email at once, hoping
    several slip past the existence check before any insert lands.
    """

    @pytest.mark.asyncio
    @pytest.mark.parametrize("num_attackers", [5, 20])
    async def test_concurrent_registration_exactly_one_succeeds(
        self,
        pool: AsyncConnectionPool,
        register_use_case: RegisterUserUseCase,
        num_attackers: int,
    ) -> None:
        email = "attack@example.com"

        results = await asyncio.gather(
            *(
                register_use_case.execute(RegisterUserRequest(email, f"password-{i}"))
                for i in range(num_attackers)
            ),
            return_exceptions=True,
        )

        winners = [r for r in results if not isinstance(r, BaseException)]
        losers = [r for r in results if isinstance(r, BaseException)]
        assert len(winners) == 1, f"{len(winners)} registrations succeeded (expected exactly 1)"
        assert all(isinstance(e, AlreadyExists) for e in losers), losers
        assert await count_users(pool, email) == 1

    @pytest.mark.asyncio
    async def test_winner_can_be_identified(
        self, pool: AsyncConnectionPool, register_use_case: RegisterUserUseCase
    ) -> None:
        """The stored row belongs to the one caller that received a token."""
        results = await asyncio.gather(
            *(
                register_use_case.execute(RegisterUserRequest("who@example.com", "password1"))
                for _ in range(5)
            ),
            return_exceptions=True,
        )
        (winner,) = [r for r in results if not isinstance(r, BaseException)]

        async with pool.connection() as conn, conn.cursor() as cursor:
            await cursor.execute("SELECT id FROM users WHERE email = %s", ("who@example.com",))
            (stored_id,) = await cursor.fetchone()

        assert str(stored_id) == winner.user_id

    @pytest.mark.asyncio
    async def test_concurrent_comments_all_persist(self, pool: AsyncConnectionPool) -> None:
        """Concurrent writers on one post never lose a comment."""
        posts = PostgresPostRepository(pool)
        comments = PostgresCommentRepository(pool)
        post = Post.create(PostTitle("T"), PostContent("C"), uuid.uuid4())
        await posts.save(post)
        use_case = CreateCommentUseCase(comment_repository=comments, post_repository=posts)

        await asyncio.gather(
            *(
                use_case.execute(CreateCommentRequest(f"comment {i}"), post.id, uuid.uuid4())
                for i in range(20)
            )
        )

        stored = await comments.find_by_post(post.id, limit=100, offset=0)
        assert len(stored) == 20
