"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Request fields are plain strings: email format, password length and
content rules are enforced by the domain and reported as 400.
"""

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Request model for user registration."""

    email: str
    password: str = Field(..., description="User password (min 8 characters)")


class LoginRequest(BaseModel):
    """Request model for login."""

    email: str
    password: str


class AuthResponse(BaseModel):
    """Response model for successful registration or login."""

    user_id: str
    email: str
    token: str


class CreatePostRequest(BaseModel):
    title: str = Field(..., description="Post title (max 200 characters)")
    content: str


class PostResponse(BaseModel):
    id: str
    title: str
    content: str
    author_id: str
    created_at: str
    updated_at: str


class ListPostsResponse(BaseModel):
    posts: list[PostResponse]
    count: int = Field(..., description="Number of posts in this page")


class CreateCommentRequest(BaseModel):
    content: str = Field(..., description="Comment text (max 2000 characters)")


class CommentResponse(BaseModel):
    id: str
    content: str
    post_id: str
    author_id: str
    created_at: str


class ListCommentsResponse(BaseModel):
    comments: list[CommentResponse]
    count: int = Field(..., description="Number of comments in this page")


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
