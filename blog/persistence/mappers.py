"""Mappers for converting database rows into domain models.

Rows are passed as dicts (``row._asdict()``). Post rows carry the joined
author's username as ``author_username``.
"""

from typing import Any, Dict
from uuid import UUID

from blog.domain.model import Post, Tag, User
from blog.domain.value import PostId, Slug, TagId, TagName, UserId, Username


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model.

    Args:
        row: Database row as dict

    Returns:
        Tag domain model
    """
    return Tag(
        id=TagId(_uuid(row["id"])),
        name=TagName(row["name"]),
        created_at=row["created_at"],
    )


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert a posts-join-users row to a Post domain model (without tags).

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    author_id = UserId(_uuid(row["created_by"]))
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        body=row["body"],
        author=User(id=author_id, username=Username(row["author_username"])),
        slug=Slug(row["slug"]),
        photo_url=row.get("photo_url"),
        published_at=row["published_at"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        view_count=row.get("view_count", 0),
        like_count=row.get("like_count", 0),
    )
