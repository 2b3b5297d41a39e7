"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from agora.domain.model.post import Post
from agora.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    A post is stored as one document together with its embedded likes
    and comments. Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Find all posts, newest first.

        Returns:
            All posts ordered by created_at descending
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or replace the whole document).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete).

        Embedded likes and comments are removed with it.

        Args:
            post_id: The post ID to delete
        """
        pass
