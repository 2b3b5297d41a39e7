"""Post aggregate root.

A post owns two embedded collections, likes and comments, both ordered
newest first. All changes to them go through the methods below, which
return an updated copy (domain models are immutable).
"""

from datetime import datetime
from typing import Optional
from uuid import uuid4

from pydantic import Field

from agora.domain.error import (
    CommentNotFoundError,
    DuplicateLikeError,
    LikeNotFoundError,
)
from agora.domain.model.comment import Comment
from agora.domain.model.common import DomainModel
from agora.domain.model.like import Like
from agora.domain.validation import TEXT_MAX_LENGTH, TEXT_MIN_LENGTH
from agora.domain.value import CommentId, LikeId, PostId, UserId


class Post(DomainModel):
    """Post aggregate root.

    Invariants:
    - likes holds at most one Like per user_id
    - author_id and created_at never change after creation
    - name and avatar_url are captured at creation and never re-synced
    """

    id: PostId
    author_id: UserId
    text: str = Field(min_length=TEXT_MIN_LENGTH, max_length=TEXT_MAX_LENGTH)
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    likes: list[Like] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)

    def is_authored_by(self, user_id: UserId) -> bool:
        """Check whether the given user created this post."""
        return self.author_id == user_id

    def has_liked(self, user_id: UserId) -> bool:
        """Check whether the given user has liked this post."""
        return any(like.user_id == user_id for like in self.likes)

    def find_comment(self, comment_id: CommentId) -> Optional[Comment]:
        """Find an embedded comment by ID."""
        for comment in self.comments:
            if comment.id == comment_id:
                return comment
        return None

    def add_like(self, user_id: UserId) -> "Post":
        """Like the post on behalf of a user.

        Raises:
            DuplicateLikeError: If the user already liked the post
        """
        if self.has_liked(user_id):
            raise DuplicateLikeError(str(self.id), str(user_id))

        like = Like(id=LikeId(uuid4()), user_id=user_id)
        return self.model_copy(update={"likes": [like, *self.likes]})

    def remove_like(self, user_id: UserId) -> "Post":
        """Remove a user's like.

        Only the first matching like is removed.

        Raises:
            LikeNotFoundError: If the user has not liked the post
        """
        index = next(
            (i for i, like in enumerate(self.likes) if like.user_id == user_id),
            None,
        )
        if index is None:
            raise LikeNotFoundError(str(self.id), str(user_id))

        likes = list(self.likes)
        likes.pop(index)
        return self.model_copy(update={"likes": likes})

    def add_comment(
        self,
        user_id: UserId,
        text: str,
        name: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> "Post":
        """Add a comment at the front of the comment list."""
        comment = Comment(
            id=CommentId(uuid4()),
            user_id=user_id,
            text=text,
            name=name,
            avatar_url=avatar_url,
            created_at=datetime.now(),
        )
        return self.model_copy(update={"comments": [comment, *self.comments]})

    def remove_comment(self, comment_id: CommentId) -> "Post":
        """Remove exactly the comment with the given ID.

        Raises:
            CommentNotFoundError: If no such comment exists on the post
        """
        if self.find_comment(comment_id) is None:
            raise CommentNotFoundError(str(self.id), str(comment_id))

        comments = [c for c in self.comments if c.id != comment_id]
        return self.model_copy(update={"comments": comments})
