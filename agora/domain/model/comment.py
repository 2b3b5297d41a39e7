"""Comment entity.

Comments are embedded in their Post, newest first. They are only ever
created or removed through the owning Post aggregate.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.validation import TEXT_MAX_LENGTH, TEXT_MIN_LENGTH
from agora.domain.value import CommentId, UserId


class Comment(DomainModel):
    """Comment entity.

    name and avatar_url are copied from the commenter at write time and
    are not refreshed when the commenter's profile changes.
    """

    id: CommentId
    user_id: UserId
    text: str = Field(min_length=TEXT_MIN_LENGTH, max_length=TEXT_MAX_LENGTH)
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
