"""Shared post response models and identifier parsing."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from agora.domain.error import NotFoundError
from agora.domain.model.post import Post
from agora.domain.value import PostId, UserId


class LikeItem(BaseModel):
    """Like as returned by the API."""

    id: str
    user_id: str


class CommentItem(BaseModel):
    """Comment as returned by the API."""

    id: str
    user_id: str
    text: str
    name: str | None
    avatar: str | None
    created_at: datetime


class PostResponse(BaseModel):
    """Post with its embedded likes and comments."""

    id: str
    author_id: str
    text: str
    name: str | None
    avatar: str | None
    likes: list[LikeItem]
    comments: list[CommentItem]
    created_at: datetime


def to_post_response(post: Post) -> PostResponse:
    """Convert a Post aggregate into its API representation."""
    return PostResponse(
        id=str(post.id),
        author_id=str(post.author_id),
        text=post.text,
        name=post.name,
        avatar=post.avatar_url,
        likes=[
            LikeItem(id=str(like.id), user_id=str(like.user_id)) for like in post.likes
        ],
        comments=[
            CommentItem(
                id=str(comment.id),
                user_id=str(comment.user_id),
                text=comment.text,
                name=comment.name,
                avatar=comment.avatar_url,
                created_at=comment.created_at,
            )
            for comment in post.comments
        ],
        created_at=post.created_at,
    )


def parse_post_id(value: str) -> PostId:
    """Parse a post ID; a malformed ID cannot match any post.

    Raises:
        NotFoundError: If the value is not a valid UUID
    """
    try:
        return PostId(UUID(value))
    except ValueError:
        raise NotFoundError("Post", value)


def parse_user_id(value: str) -> UserId:
    """Parse the authenticated user's ID.

    Raises:
        ValueError: If the value is not a valid UUID
    """
    return UserId(UUID(value))
