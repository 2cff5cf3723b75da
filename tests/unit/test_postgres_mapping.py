"""
Unit tests for PostgreSQL row-to-aggregate mapping.

psycopg returns timestamptz values in the session's TimeZone; rows are
built here the way a non-UTC server would return them.
"""

import uuid
from datetime import timedelta, timezone

from ferro.adapters.repository.postgres import (
    PostgresCommentRepository,
    PostgresPostRepository,
    PostgresUserRepository,
)
from ferro.application.dtos import CommentResponse, PostResponse
from ferro.domain.aggregates import Comment, Post, User
from ferro.domain.value_objects import CommentContent, Email, PasswordHash, PostContent, PostTitle

BERLIN_WINTER = timezone(timedelta(hours=1))


class TestTimestampRehydration:
    """Rehydrated timestamps are UTC whatever the session time zone."""

    def test_post_projection_round_trips(self) -> None:
        post = Post.create(PostTitle("T"), PostContent("C"), uuid.uuid4())
        row = (
            post.id,
            post.title.value,
            post.content.value,
            post.author_id,
            post.created_at.astimezone(BERLIN_WINTER),
            post.updated_at.astimezone(BERLIN_WINTER),
        )

        stored = PostgresPostRepository._to_post(row)

        assert PostResponse.from_post(stored) == PostResponse.from_post(post)
        assert stored.created_at.tzinfo == timezone.utc
        assert stored.updated_at.tzinfo == timezone.utc

    def test_comment_projection_round_trips(self) -> None:
        comment = Comment.create(CommentContent("nice"), uuid.uuid4(), uuid.uuid4())
        row = (
            comment.id,
            comment.content.value,
            comment.post_id,
            comment.author_id,
            comment.created_at.astimezone(BERLIN_WINTER),
        )

        stored = PostgresCommentRepository._to_comment(row)

        assert CommentResponse.from_comment(stored) == CommentResponse.from_comment(comment)

    def test_user_created_at_is_utc(self) -> None:
        user = User.create(Email("a@b.com"), PasswordHash("hash"))
        row = (
            user.id,
            user.email.value,
            user.password_hash.value,
            user.created_at.astimezone(BERLIN_WINTER),
        )

        stored = PostgresUserRepository._to_user(row)

        assert stored.created_at.isoformat() == user.created_at.isoformat()
