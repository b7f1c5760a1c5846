"""Tag entity for categorizing posts."""

from datetime import datetime, timezone

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import TagId, TagName


class Tag(DomainModel):
    """Tag entity.

    Posts and tags are linked many-to-many through the posts_to_tags table.
    """

    id: TagId
    name: TagName
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
