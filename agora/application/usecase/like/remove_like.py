"""Remove like use case."""

from pydantic import BaseModel

from agora.application.usecase.post.common import (
    PostResponse,
    parse_post_id,
    parse_user_id,
    to_post_response,
)
from agora.domain.service import PostService


class RemoveLikeRequest(BaseModel):
    """Remove like request."""

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class RemoveLikeUseCase:
    """Use case for unliking a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize remove like use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: RemoveLikeRequest) -> PostResponse:
        """Execute remove like flow.

        Raises:
            NotFoundError: If the post does not exist
            LikeNotFoundError: If the user has not liked the post
        """
        post = await self.post_service.remove_like(
            parse_post_id(request.post_id), parse_user_id(request.user_id)
        )
        return to_post_response(post)
