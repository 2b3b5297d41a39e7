"""Add comment use case."""

import logfire
from pydantic import BaseModel

from agora.application.usecase.post.common import (
    PostResponse,
    parse_post_id,
    parse_user_id,
    to_post_response,
)
from agora.domain.service import PostService


class AddCommentRequest(BaseModel):
    """Add comment request."""

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    text: str | None = None
    name: str | None = None
    avatar: str | None = None


class AddCommentUseCase:
    """Use case for commenting on a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize add comment use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: AddCommentRequest) -> PostResponse:
        """Execute add comment flow.

        Steps:
        1. Validate comment text (via PostService)
        2. Load the post, prepend the comment, save it back

        Args:
            request: Add comment request

        Returns:
            The updated post, new comment first

        Raises:
            ValidationError: If the text is invalid
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "add_comment.execute", post_id=request.post_id, user_id=request.user_id
        ):
            post = await self.post_service.add_comment(
                post_id=parse_post_id(request.post_id),
                user_id=parse_user_id(request.user_id),
                text=request.text,
                name=request.name,
                avatar_url=request.avatar,
            )
            return to_post_response(post)
