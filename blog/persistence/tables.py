"""SQLAlchemy table definitions for the blog store.

The schema is owned by the publishing side. These definitions describe the
columns this service reads and are used to build queries only.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("username", String(255), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("title", String(300), nullable=False),
    Column("body", Text, nullable=False),
    Column(
        "created_by", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("slug", String(255), nullable=False),
    Column("photo_url", Text, nullable=True),
    Column("published_at", TIMESTAMP(timezone=True), nullable=True),  # NULL = draft
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    Column("view_count", Integer, nullable=False, server_default="0"),
    Column("like_count", Integer, nullable=False, server_default="0"),
    UniqueConstraint("created_by", "slug", name="uq_posts_author_slug"),
)

Index("idx_posts_published_at", posts_table.c.published_at.desc())
Index("idx_posts_created_by", posts_table.c.created_by)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("name", String(50), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS_TO_TAGS TABLE (junction table for many-to-many relationship)
# ============================================================================
posts_to_tags_table = Table(
    "posts_to_tags",
    metadata,
    Column(
        "post_id",
        UUID,
        ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "tag_id",
        UUID,
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

Index("idx_posts_to_tags_tag_id", posts_to_tags_table.c.tag_id)
