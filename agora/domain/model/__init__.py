"""Domain model entities for Agora."""

from agora.domain.model.comment import Comment
from agora.domain.model.like import Like
from agora.domain.model.post import Post

__all__ = [
    "Post",
    "Like",
    "Comment",
]
