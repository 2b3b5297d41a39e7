"""PostgreSQL repository implementations."""

from agora.persistence.repository.post import PostgresPostRepository

__all__ = [
    "PostgresPostRepository",
]
