"""
Comment use cases - Attach comments to posts and list them.
"""

import logging
import uuid
from dataclasses import dataclass

from ferro.domain.aggregates import Comment
from ferro.domain.exceptions import NotFound
from ferro.domain.ports import CommentRepository, PostRepository
from ferro.domain.value_objects import CommentContent

from .dtos import CommentResponse, CreateCommentRequest, ListCommentsResponse

logger = logging.getLogger(__name__)


@dataclass
class CreateCommentUseCase:
    comment_repository: CommentRepository
    post_repository: PostRepository

    async def execute(
        self,
        request: CreateCommentRequest,
        post_id: uuid.UUID,
        author_id: uuid.UUID,
    ) -> CommentResponse:
        """
        Comment on an existing post.

        Post existence is checked before the content is validated, so a
        missing post is reported as NotFound whatever the content.

        Raises:
            NotFound: If no post exists for post_id
            ValidationError: If content is invalid
            InfraError: On storage failure
        """
        if await self.post_repository.find_by_id(post_id) is None:
            raise NotFound("Post not found")

        content = CommentContent(request.content)

        comment = Comment.create(content, post_id, author_id)
        await self.comment_repository.save(comment)
        logger.info("Created comment %s on post %s", comment.id, post_id)

        return CommentResponse.from_comment(comment)


@dataclass
class ListCommentsUseCase:
    """List a post's comments oldest first."""

    comment_repository: CommentRepository

    async def execute(self, post_id: uuid.UUID, limit: int, offset: int) -> ListCommentsResponse:
        comments = await self.comment_repository.find_by_post(post_id, limit, offset)
        items = [CommentResponse.from_comment(comment) for comment in comments]
        return ListCommentsResponse(comments=items, count=len(items))
