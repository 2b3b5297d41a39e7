"""Application layer DI providers."""

from dishka import Scope, provide

from agora.application.usecase.comment import AddCommentUseCase, RemoveCommentUseCase
from agora.application.usecase.like import AddLikeUseCase, RemoveLikeUseCase
from agora.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
)
from agora.domain.service import PostService
from agora.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_add_like_use_case(self, post_service: PostService) -> AddLikeUseCase:
        """Provide add like use case."""
        return AddLikeUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_like_use_case(self, post_service: PostService) -> RemoveLikeUseCase:
        """Provide remove like use case."""
        return RemoveLikeUseCase(post_service=post_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(self, post_service: PostService) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_comment_use_case(
        self, post_service: PostService
    ) -> RemoveCommentUseCase:
        """Provide remove comment use case."""
        return RemoveCommentUseCase(post_service=post_service)
