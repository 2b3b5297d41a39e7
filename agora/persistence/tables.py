"""SQLAlchemy table definitions for Agora.

Each post is stored as a single document: scalar columns for the post
itself and JSONB arrays for its embedded likes and comments.
"""

from sqlalchemy import Column, Index, MetaData, String, Table, Text
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("author_id", UUID(as_uuid=True), nullable=False),
    Column("text", String(300), nullable=False),
    Column("name", String(255), nullable=True),  # Denormalized from author
    Column("avatar_url", Text, nullable=True),  # Denormalized from author
    Column("likes", JSONB, nullable=False, server_default="[]"),  # Newest first
    Column("comments", JSONB, nullable=False, server_default="[]"),  # Newest first
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)
