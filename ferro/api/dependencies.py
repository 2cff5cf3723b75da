"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories that bind the storage and
security adapters to the use cases, plus bearer-token authentication.
"""

import logging
import uuid
from dataclasses import dataclass
from functools import lru_cache

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from psycopg_pool import AsyncConnectionPool

from ferro.adapters.repository.postgres import (
    PostgresCommentRepository,
    PostgresPostRepository,
    PostgresUserRepository,
)
from ferro.adapters.security import BcryptPasswordHasher, JwtService
from ferro.application import (
    CreateCommentUseCase,
    CreatePostUseCase,
    GetPostUseCase,
    ListCommentsUseCase,
    ListPostsByAuthorUseCase,
    ListPostsUseCase,
    LoginUserUseCase,
    RegisterUserUseCase,
)
from ferro.config.settings import get_settings
from ferro.domain.exceptions import InfraError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthUser:
    """Identity of the caller, taken from a verified bearer token."""

    user_id: uuid.UUID
    email: str


def get_pool(request: Request) -> AsyncConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


@lru_cache
def get_password_hasher() -> BcryptPasswordHasher:
    """Get bcrypt hasher/verifier (singleton, stateless)."""
    return BcryptPasswordHasher(rounds=get_settings().bcrypt_cost)


@lru_cache
def get_token_service() -> JwtService:
    """Get JWT issuer/verifier configured from settings (singleton)."""
    settings = get_settings()
    return JwtService(
        secret=settings.jwt_secret,
        expiration_hours=settings.jwt_expiration_hours,
        algorithm=settings.jwt_algorithm,
        previous_secrets=settings.jwt_previous_secrets,
    )


def get_user_repository(request: Request) -> PostgresUserRepository:
    return PostgresUserRepository(get_pool(request))


def get_post_repository(request: Request) -> PostgresPostRepository:
    return PostgresPostRepository(get_pool(request))


def get_comment_repository(request: Request) -> PostgresCommentRepository:
    return PostgresCommentRepository(get_pool(request))


def get_register_use_case(
    users: PostgresUserRepository = Depends(get_user_repository),
    hasher: BcryptPasswordHasher = Depends(get_password_hasher),
    tokens: JwtService = Depends(get_token_service),
) -> RegisterUserUseCase:
    return RegisterUserUseCase(user_repository=users, password_hasher=hasher, token_issuer=tokens)


def get_login_use_case(
    users: PostgresUserRepository = Depends(get_user_repository),
    hasher: BcryptPasswordHasher = Depends(get_password_hasher),
    tokens: JwtService = Depends(get_token_service),
) -> LoginUserUseCase:
    return LoginUserUseCase(user_repository=users, password_verifier=hasher, token_issuer=tokens)


def get_create_post_use_case(
    posts: PostgresPostRepository = Depends(get_post_repository),
) -> CreatePostUseCase:
    return CreatePostUseCase(post_repository=posts)


def get_get_post_use_case(
    posts: PostgresPostRepository = Depends(get_post_repository),
) -> GetPostUseCase:
    return GetPostUseCase(post_repository=posts)


def get_list_posts_use_case(
    posts: PostgresPostRepository = Depends(get_post_repository),
) -> ListPostsUseCase:
    return ListPostsUseCase(post_repository=posts)


def get_list_posts_by_author_use_case(
    posts: PostgresPostRepository = Depends(get_post_repository),
) -> ListPostsByAuthorUseCase:
    return ListPostsByAuthorUseCase(post_repository=posts)


def get_create_comment_use_case(
    comments: PostgresCommentRepository = Depends(get_comment_repository),
    posts: PostgresPostRepository = Depends(get_post_repository),
) -> CreateCommentUseCase:
    return CreateCommentUseCase(comment_repository=comments, post_repository=posts)


def get_list_comments_use_case(
    comments: PostgresCommentRepository = Depends(get_comment_repository),
) -> ListCommentsUseCase:
    return ListCommentsUseCase(comment_repository=comments)


# Bearer auth security scheme for OpenAPI documentation
http_bearer = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(http_bearer),
    tokens: JwtService = Depends(get_token_service),
) -> AuthUser:
    """
    Authenticate the caller from an ``Authorization: Bearer`` header.

    Missing header, any token verification failure and a subject that is
    not a UUID all produce the same 401.
    """
    unauthorized = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or missing token",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise unauthorized

    try:
        claims = tokens.verify(credentials.credentials)
        user_id = uuid.UUID(claims.sub)
    except (InfraError, ValueError) as e:
        logger.info("Rejected bearer token: %s", e)
        raise unauthorized from None

    return AuthUser(user_id=user_id, email=claims.email)
