"""Create post use case."""

import logfire
from pydantic import BaseModel

from agora.domain.service import PostService

from .common import PostResponse, parse_user_id, to_post_response


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # User ID from authenticated user
    text: str | None = None
    name: str | None = None
    avatar: str | None = None


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostResponse:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            The created post

        Raises:
            ValidationError: If the text is invalid
        """
        with logfire.span("create_post.execute", author_id=request.author_id):
            post = await self.post_service.create_post(
                author_id=parse_user_id(request.author_id),
                text=request.text,
                name=request.name,
                avatar_url=request.avatar,
            )
            return to_post_response(post)
