"""Domain value objects for Agora."""

from agora.domain.value.common import ValueObject
from agora.domain.value.identifiers import CommentId, LikeId, PostId, UserId

__all__ = [
    # Identifiers
    "PostId",
    "UserId",
    "LikeId",
    "CommentId",
    # Base
    "ValueObject",
]
