"""Like entity.

Likes live inside a Post and have no lifecycle of their own.
"""

from agora.domain.model.common import DomainModel
from agora.domain.value import LikeId, UserId


class Like(DomainModel):
    """Like entity.

    Business rules:
    - At most one like per user per post (enforced by Post.add_like)
    - Created and removed only through the owning Post
    """

    id: LikeId
    user_id: UserId
