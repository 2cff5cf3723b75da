"""
Use-case input and output shapes.

Outputs are flat projections of aggregates: identifiers as strings and
timestamps as ISO-8601 strings with UTC offset.
"""

from dataclasses import dataclass, field

from ferro.domain.aggregates import Comment, Post


@dataclass(frozen=True)
class RegisterUserRequest:
    email: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class LoginUserRequest:
    email: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class AuthResponse:
    """Returned by both Register and Login."""

    user_id: str
    email: str
    token: str = field(repr=False)


@dataclass(frozen=True)
class CreatePostRequest:
    title: str
    content: str


@dataclass(frozen=True)
class PostResponse:
    id: str
    title: str
    content: str
    author_id: str
    created_at: str
    updated_at: str

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        return cls(
            id=str(post.id),
            title=post.title.value,
            content=post.content.value,
            author_id=str(post.author_id),
            created_at=post.created_at.isoformat(),
            updated_at=post.updated_at.isoformat(),
        )


@dataclass(frozen=True)
class ListPostsResponse:
    """A page of posts. ``count`` is the size of this page, not a total."""

    posts: list[PostResponse]
    count: int


@dataclass(frozen=True)
class CreateCommentRequest:
    content: str


@dataclass(frozen=True)
class CommentResponse:
    id: str
    content: str
    post_id: str
    author_id: str
    created_at: str

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=str(comment.id),
            content=comment.content.value,
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            created_at=comment.created_at.isoformat(),
        )


@dataclass(frozen=True)
class ListCommentsResponse:
    """A page of comments. ``count`` is the size of this page, not a total."""

    comments: list[CommentResponse]
    count: int
