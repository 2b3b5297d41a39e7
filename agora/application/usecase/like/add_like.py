"""Add like use case."""

from pydantic import BaseModel

from agora.application.usecase.post.common import (
    PostResponse,
    parse_post_id,
    parse_user_id,
    to_post_response,
)
from agora.domain.service import PostService


class AddLikeRequest(BaseModel):
    """Add like request."""

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class AddLikeUseCase:
    """Use case for liking a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize add like use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: AddLikeRequest) -> PostResponse:
        """Execute add like flow.

        Returns:
            The updated post

        Raises:
            NotFoundError: If the post does not exist
            DuplicateLikeError: If the user already liked the post
        """
        post = await self.post_service.add_like(
            parse_post_id(request.post_id), parse_user_id(request.user_id)
        )
        return to_post_response(post)
