"""Remove comment use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.post.common import (
    PostResponse,
    parse_post_id,
    parse_user_id,
    to_post_response,
)
from agora.domain.error import CommentNotFoundError
from agora.domain.service import PostService
from agora.domain.value import CommentId


class RemoveCommentRequest(BaseModel):
    """Remove comment request."""

    post_id: str  # UUID string
    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class RemoveCommentUseCase:
    """Use case for removing a comment from a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize remove comment use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: RemoveCommentRequest) -> PostResponse:
        """Execute remove comment flow.

        Raises:
            NotFoundError: If the post does not exist
            CommentNotFoundError: If the comment is not on the post
            AuthorizationError: If comment deletion is restricted and the
                user owns neither the comment nor the post
        """
        post_id = parse_post_id(request.post_id)

        try:
            comment_id = CommentId(UUID(request.comment_id))
        except ValueError:
            # A missing post is reported before a malformed comment ID
            await self.post_service.get_post(post_id)
            raise CommentNotFoundError(request.post_id, request.comment_id)

        post = await self.post_service.remove_comment(
            post_id, comment_id, parse_user_id(request.user_id)
        )
        return to_post_response(post)
