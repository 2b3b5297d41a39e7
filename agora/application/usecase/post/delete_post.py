"""Delete post use case."""

from pydantic import BaseModel

from agora.domain.service import PostService

from .common import parse_post_id, parse_user_id


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeletePostResponse(BaseModel):
    """Delete post response."""

    success: bool = True


class DeletePostUseCase:
    """Use case for deleting a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post does not exist
            AuthorizationError: If the user is not the post author
        """
        await self.post_service.delete_post(
            parse_post_id(request.post_id), parse_user_id(request.user_id)
        )
        return DeletePostResponse(success=True)
