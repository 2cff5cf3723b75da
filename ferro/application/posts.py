"""
Post use cases - Create, fetch and list posts.
"""

import logging
import uuid
from dataclasses import dataclass

from ferro.domain.aggregates import Post
from ferro.domain.exceptions import NotFound
from ferro.domain.ports import PostRepository
from ferro.domain.value_objects import PostContent, PostTitle

from .dtos import CreatePostRequest, ListPostsResponse, PostResponse

logger = logging.getLogger(__name__)


@dataclass
class CreatePostUseCase:
    post_repository: PostRepository

    async def execute(self, request: CreatePostRequest, author_id: uuid.UUID) -> PostResponse:
        """
        Publish a post on behalf of an author.

        The author id comes from the caller's authentication result and is
        not checked against stored users.

        Raises:
            ValidationError: If title or content is invalid
            InfraError: On storage failure
        """
        title = PostTitle(request.title)
        content = PostContent(request.content)

        post = Post.create(title, content, author_id)
        await self.post_repository.save(post)
        logger.info("Created post %s by %s", post.id, author_id)

        return PostResponse.from_post(post)


@dataclass
class GetPostUseCase:
    post_repository: PostRepository

    async def execute(self, post_id: uuid.UUID) -> PostResponse:
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise NotFound("Post not found")
        return PostResponse.from_post(post)


@dataclass
class ListPostsUseCase:
    """List posts newest first."""

    post_repository: PostRepository

    async def execute(self, limit: int, offset: int) -> ListPostsResponse:
        posts = await self.post_repository.find_all(limit, offset)
        items = [PostResponse.from_post(post) for post in posts]
        return ListPostsResponse(posts=items, count=len(items))


@dataclass
class ListPostsByAuthorUseCase:
    """List one author's posts newest first."""

    post_repository: PostRepository

    async def execute(self, author_id: uuid.UUID, limit: int, offset: int) -> ListPostsResponse:
        posts = await self.post_repository.find_by_author(author_id, limit, offset)
        items = [PostResponse.from_post(post) for post in posts]
        return ListPostsResponse(posts=items, count=len(items))
