"""In-memory implementation of Tag repository for testing."""

from collections import defaultdict

from blog.domain.model.tag import Tag
from blog.domain.repository.tag import TagRepository
from blog.domain.value import PostId

from .database import InMemoryDatabase


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    async def find_by_post_ids(self, post_ids: list[PostId]) -> dict[PostId, list[Tag]]:
        """Fetch tags for multiple posts in one recorded round trip."""
        if not post_ids:
            return {}

        self._db.record("tags.by_post_ids")
        pairs = [
            (self._db.tags[tag_id], post_id)
            for post_id in set(post_ids)
            for tag_id in self._db.post_tags.get(post_id, [])
        ]
        pairs.sort(key=lambda pair: (pair[0].name.root, pair[1]))

        tags_by_post: dict[PostId, list[Tag]] = defaultdict(list)
        for tag, post_id in pairs:
            tags_by_post[post_id].append(tag)
        return dict(tags_by_post)

    async def find_all(self, limit: int = 50, offset: int = 0) -> list[Tag]:
        """Find tags ordered by name."""
        self._db.record("tags.page")
        tags = sorted(self._db.tags.values(), key=lambda t: (t.name.root, t.id))
        return tags[offset : offset + limit]

    async def count(self) -> int:
        """Count all tags."""
        self._db.record("tags.count")
        return len(self._db.tags)
