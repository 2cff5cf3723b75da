"""
Domain layer - Pure business logic with zero framework imports.

This package contains the value objects, aggregates and error taxonomy
of the publishing backend, plus the port interfaces the application
layer depends on.
"""

from .aggregates import Comment, Post, User
from .exceptions import AlreadyExists, DomainError, InfraError, NotFound, ValidationError
from .ports import (
    Claims,
    CommentRepository,
    PasswordHasher,
    PasswordVerifier,
    PostRepository,
    TokenIssuer,
    TokenVerifier,
    UserRepository,
)
from .value_objects import (
    CommentContent,
    Email,
    PasswordHash,
    PlainPassword,
    PostContent,
    PostTitle,
)

__all__ = [
    "AlreadyExists",
    "Claims",
    "Comment",
    "CommentContent",
    "CommentRepository",
    "DomainError",
    "Email",
    "InfraError",
    "NotFound",
    "PasswordHash",
    "PasswordHasher",
    "PasswordVerifier",
    "PlainPassword",
    "Post",
    "PostContent",
    "PostRepository",
    "PostTitle",
    "TokenIssuer",
    "TokenVerifier",
    "User",
    "UserRepository",
    "ValidationError",
]
