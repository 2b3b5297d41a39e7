"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Embedded likes and
comments are stored as JSON documents.
"""

from typing import Any, Dict
from uuid import UUID

from agora.domain.model import Comment, Like, Post
from agora.domain.value import PostId, UserId


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_as_uuid(row["id"])),
        author_id=UserId(_as_uuid(row["author_id"])),
        text=row["text"],
        name=row.get("name"),
        avatar_url=row.get("avatar_url"),
        likes=[Like.model_validate(like) for like in row.get("likes") or []],
        comments=[
            Comment.model_validate(comment) for comment in row.get("comments") or []
        ],
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Scalar columns keep their Python types; embedded collections are
    dumped in JSON mode so UUIDs and datetimes become strings.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": post.id,
        "author_id": post.author_id,
        "text": post.text,
        "name": post.name,
        "avatar_url": post.avatar_url,
        "likes": [like.model_dump(mode="json") for like in post.likes],
        "comments": [comment.model_dump(mode="json") for comment in post.comments],
        "created_at": post.created_at,
    }
