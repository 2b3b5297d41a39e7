"""List posts use case."""

from pydantic import BaseModel

from agora.domain.service import PostService

from .common import PostResponse, to_post_response


class ListPostsRequest(BaseModel):
    """List posts request (no filters; every post is returned)."""


class ListPostsUseCase:
    """Use case for listing all posts, newest first."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> list[PostResponse]:
        """Execute list posts flow."""
        posts = await self.post_service.list_posts()
        return [to_post_response(post) for post in posts]
