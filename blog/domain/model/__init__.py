"""Domain model entities for the blog."""

from blog.domain.model.post import Post
from blog.domain.model.tag import Tag
from blog.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Tag",
]
