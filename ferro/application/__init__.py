"""
Application layer - Use cases orchestrating aggregates against ports.

Each use case is a small dataclass holding the ports it needs, built per
invocation, with a single ``execute`` coroutine.
"""

from .comments import CreateCommentUseCase, ListCommentsUseCase
from .posts import CreatePostUseCase, GetPostUseCase, ListPostsByAuthorUseCase, ListPostsUseCase
from .users import LoginUserUseCase, RegisterUserUseCase

__all__ = [
    "CreateCommentUseCase",
    "CreatePostUseCase",
    "GetPostUseCase",
    "ListCommentsUseCase",
    "ListPostsByAuthorUseCase",
    "ListPostsUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
]
