"""Strongly typed identifiers for Agora domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Aggregate root identifiers
PostId = NewType("PostId", UUID)
UserId = NewType("UserId", UUID)

# Identifiers of entities embedded in a post
LikeId = NewType("LikeId", UUID)
CommentId = NewType("CommentId", UUID)
