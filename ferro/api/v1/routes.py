"""
API v1 routes.

Defines REST endpoints for accounts, posts and comments. Handlers only
translate between HTTP and use-case shapes; domain errors propagate to
the handlers registered in ferro.api.errors.
"""

import uuid
from dataclasses import asdict

from fastapi import APIRouter, Depends, Query, status

from ferro.api.dependencies import (
    AuthUser,
    get_create_comment_use_case,
    get_create_post_use_case,
    get_current_user,
    get_get_post_use_case,
    get_list_comments_use_case,
    get_list_posts_by_author_use_case,
    get_list_posts_use_case,
    get_login_use_case,
    get_register_use_case,
)
from ferro.api.models import (
    AuthResponse,
    CommentResponse,
    CreateCommentRequest,
    CreatePostRequest,
    ErrorResponse,
    ListCommentsResponse,
    ListPostsResponse,
    LoginRequest,
    PostResponse,
    RegisterRequest,
)
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
from ferro.application import dtos

router = APIRouter(tags=["v1"])

DEFAULT_PAGE_SIZE = 20

_bad_request = {400: {"model": ErrorResponse, "description": "Validation failed"}}
_unauthorized = {401: {"model": ErrorResponse, "description": "Invalid or missing token"}}
_not_found = {404: {"model": ErrorResponse, "description": "Resource not found"}}


@router.post(
    "/auth/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        **_bad_request,
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
    summary="Register a new user",
)
async def register(
    request_data: RegisterRequest,
    use_case: RegisterUserUseCase = Depends(get_register_use_case),
) -> dict:
    """
    Create an account and return an access token.

    - **email**: Email address (must contain '@')
    - **password**: Password (minimum 8 characters)
    """
    result = await use_case.execute(
        dtos.RegisterUserRequest(email=request_data.email, password=request_data.password)
    )
    return asdict(result)


@router.post(
    "/auth/login",
    response_model=AuthResponse,
    responses={**_bad_request, **_not_found},
    summary="Log in with email and password",
)
async def login(
    request_data: LoginRequest,
    use_case: LoginUserUseCase = Depends(get_login_use_case),
) -> dict:
    result = await use_case.execute(
        dtos.LoginUserRequest(email=request_data.email, password=request_data.password)
    )
    return asdict(result)


@router.post(
    "/posts",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**_bad_request, **_unauthorized},
    summary="Publish a post",
)
async def create_post(
    request_data: CreatePostRequest,
    user: AuthUser = Depends(get_current_user),
    use_case: CreatePostUseCase = Depends(get_create_post_use_case),
) -> dict:
    """Publish a post authored by the authenticated caller."""
    result = await use_case.execute(
        dtos.CreatePostRequest(title=request_data.title, content=request_data.content),
        author_id=user.user_id,
    )
    return asdict(result)


@router.get(
    "/posts",
    response_model=ListPostsResponse,
    summary="List posts, newest first",
)
async def list_posts(
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=0),
    offset: int = Query(0, ge=0),
    use_case: ListPostsUseCase = Depends(get_list_posts_use_case),
) -> dict:
    result = await use_case.execute(limit, offset)
    return asdict(result)


@router.get(
    "/posts/{post_id}",
    response_model=PostResponse,
    responses=_not_found,
    summary="Get a post",
)
async def get_post(
    post_id: uuid.UUID,
    use_case: GetPostUseCase = Depends(get_get_post_use_case),
) -> dict:
    result = await use_case.execute(post_id)
    return asdict(result)


@router.get(
    "/users/{author_id}/posts",
    response_model=ListPostsResponse,
    summary="List one author's posts, newest first",
)
async def list_posts_by_author(
    author_id: uuid.UUID,
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=0),
    offset: int = Query(0, ge=0),
    use_case: ListPostsByAuthorUseCase = Depends(get_list_posts_by_author_use_case),
) -> dict:
    result = await use_case.execute(author_id, limit, offset)
    return asdict(result)


@router.post(
    "/posts/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**_bad_request, **_unauthorized, **_not_found},
    summary="Comment on a post",
)
async def create_comment(
    post_id: uuid.UUID,
    request_data: CreateCommentRequest,
    user: AuthUser = Depends(get_current_user),
    use_case: CreateCommentUseCase = Depends(get_create_comment_use_case),
) -> dict:
    result = await use_case.execute(
        dtos.CreateCommentRequest(content=request_data.content),
        post_id=post_id,
        author_id=user.user_id,
    )
    return asdict(result)


@router.get(
    "/posts/{post_id}/comments",
    response_model=ListCommentsResponse,
    summary="List a post's comments, oldest first",
)
async def list_comments(
    post_id: uuid.UUID,
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=0),
    offset: int = Query(0, ge=0),
    use_case: ListCommentsUseCase = Depends(get_list_comments_use_case),
) -> dict:
    result = await use_case.execute(post_id, limit, offset)
    return asdict(result)
