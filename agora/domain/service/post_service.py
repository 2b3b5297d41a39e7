"""Post domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from agora.config import PostSettings
from agora.domain.error import AuthorizationError, NotFoundError, ValidationError
from agora.domain.model.post import Post
from agora.domain.repository import PostRepository
from agora.domain.validation import validate_comment_input, validate_post_input
from agora.domain.value import CommentId, PostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for the Post aggregate.

    Every mutation is a read-modify-persist cycle: load the post, apply
    the change through the aggregate, save the whole document back.
    There is no optimistic locking, so concurrent writers to the same
    post race and the last save wins.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        post_settings: PostSettings | None = None,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            post_settings: Post behaviour settings (defaults if omitted)
        """
        self.post_repository = post_repository
        self.post_settings = post_settings or PostSettings()

    async def create_post(
        self,
        author_id: UserId,
        text: str | None,
        name: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> Post:
        """Create a new post.

        Args:
            author_id: ID of the creating user
            text: Post text (2-300 characters)
            name: Author display name at creation time
            avatar_url: Author avatar at creation time

        Returns:
            Saved post

        Raises:
            ValidationError: If text is missing or has an invalid length
        """
        with logfire.span("post_service.create_post", author_id=str(author_id)):
            result = validate_post_input(text)
            if not result.is_valid:
                logfire.warn("Post validation failed", errors=result.errors)
                raise ValidationError(result.errors)

            post = Post(
                id=PostId(uuid4()),
                author_id=author_id,
                text=text,
                name=name,
                avatar_url=avatar_url,
                likes=[],
                comments=[],
                created_at=datetime.now(),
            )

            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            return post

    async def list_posts(self) -> list[Post]:
        """List all posts, newest first."""
        with logfire.span("post_service.list_posts"):
            posts = await self.post_repository.find_all()
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def delete_post(self, post_id: PostId, requester_id: UserId) -> None:
        """Delete a post. Only its author may do so.

        Args:
            post_id: Post ID
            requester_id: ID of the user asking for deletion

        Raises:
            NotFoundError: If the post does not exist
            AuthorizationError: If the requester is not the author
        """
        with logfire.span(
            "post_service.delete_post",
            post_id=str(post_id),
            requester_id=str(requester_id),
        ):
            post = await self.get_post(post_id)

            if not post.is_authored_by(requester_id):
                logfire.warn(
                    "Unauthorized post deletion attempt",
                    post_id=str(post_id),
                    requester_id=str(requester_id),
                )
                raise AuthorizationError("post", str(post_id), str(requester_id))

            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id))

    async def add_like(self, post_id: PostId, user_id: UserId) -> Post:
        """Like a post.

        Raises:
            NotFoundError: If the post does not exist
            DuplicateLikeError: If the user already liked the post
        """
        with logfire.span(
            "post_service.add_like", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self.get_post(post_id)
            updated = post.add_like(user_id)

            saved = await self.post_repository.save(updated)
            logfire.info("Post liked", post_id=str(post_id), likes=len(saved.likes))
            return saved

    async def remove_like(self, post_id: PostId, user_id: UserId) -> Post:
        """Remove a user's like from a post.

        Raises:
            NotFoundError: If the post does not exist
            LikeNotFoundError: If the user has not liked the post
        """
        with logfire.span(
            "post_service.remove_like", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self.get_post(post_id)
            updated = post.remove_like(user_id)

            saved = await self.post_repository.save(updated)
            logfire.info("Post unliked", post_id=str(post_id), likes=len(saved.likes))
            return saved

    async def add_comment(
        self,
        post_id: PostId,
        user_id: UserId,
        text: str | None,
        name: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> Post:
        """Add a comment to a post.

        Text is validated before the post is loaded.

        Raises:
            ValidationError: If text is missing or has an invalid length
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "post_service.add_comment", post_id=str(post_id), user_id=str(user_id)
        ):
            result = validate_comment_input(text)
            if not result.is_valid:
                logfire.warn("Comment validation failed", errors=result.errors)
                raise ValidationError(result.errors)

            post = await self.get_post(post_id)
            updated = post.add_comment(
                user_id=user_id, text=text, name=name, avatar_url=avatar_url
            )

            saved = await self.post_repository.save(updated)
            logfire.info(
                "Comment added",
                post_id=str(post_id),
                comment_id=str(saved.comments[0].id),
            )
            return saved

    async def remove_comment(
        self, post_id: PostId, comment_id: CommentId, requester_id: UserId
    ) -> Post:
        """Remove a comment from a post.

        By default any authenticated user may remove any comment. With
        restrict_comment_deletion enabled, only the comment author or the
        post author may.

        Raises:
            NotFoundError: If the post does not exist
            CommentNotFoundError: If the comment is not on the post
            AuthorizationError: If deletion is restricted and the requester
                owns neither the comment nor the post
        """
        with logfire.span(
            "post_service.remove_comment",
            post_id=str(post_id),
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):
            post = await self.get_post(post_id)
            updated = post.remove_comment(comment_id)

            if self.post_settings.restrict_comment_deletion:
                comment = post.find_comment(comment_id)
                if comment.user_id != requester_id and not post.is_authored_by(
                    requester_id
                ):
                    logfire.warn(
                        "Unauthorized comment deletion attempt",
                        comment_id=str(comment_id),
                        requester_id=str(requester_id),
                    )
                    raise AuthorizationError(
                        "comment", str(comment_id), str(requester_id)
                    )

            saved = await self.post_repository.save(updated)
            logfire.info(
                "Comment removed", post_id=str(post_id), comment_id=str(comment_id)
            )
            return saved
