"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

import logfire

from agora.domain.model.post import Post
from agora.domain.value import PostId, UserId

# Keep telemetry local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)


def make_post(
    author_id: UserId | None = None,
    text: str = "Hello world",
    name: str | None = "Alice",
    avatar_url: str | None = None,
    created_at: datetime | None = None,
) -> Post:
    """Helper function to build a post with no likes or comments.

    Args:
        author_id: Author's user ID (random if omitted)
        text: Post text
        name: Author display name
        avatar_url: Author avatar
        created_at: Creation time (now if omitted)

    Returns:
        New Post domain model
    """
    return Post(
        id=PostId(uuid4()),
        author_id=author_id or UserId(uuid4()),
        text=text,
        name=name,
        avatar_url=avatar_url,
        likes=[],
        comments=[],
        created_at=created_at or datetime.now(),
    )
