"""Post read model.

Posts are written by a separate publishing path. This service only reads
published, non-deleted posts together with their author and tags.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.model.tag import Tag
from blog.domain.model.user import User
from blog.domain.value import PostId, Slug


class Post(DomainModel):
    """Published blog post with its author joined in."""

    id: PostId
    title: str
    body: str
    author: User
    slug: Slug
    photo_url: Optional[str] = None
    published_at: datetime
    created_at: datetime
    updated_at: datetime
    view_count: int = Field(default=0, ge=0)
    like_count: int = Field(default=0, ge=0)
    tags: list[Tag] = Field(default_factory=list)

    def with_tags(self, tags: list[Tag]) -> "Post":
        """Return a copy of this post with the given tags attached."""
        return self.model_copy(update={"tags": list(tags)})
