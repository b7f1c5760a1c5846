"""Tag repository interface."""

from abc import ABC, abstractmethod

from blog.domain.model.tag import Tag
from blog.domain.value import PostId


class TagRepository(ABC):
    """Read-only repository for tags."""

    @abstractmethod
    async def find_by_post_ids(self, post_ids: list[PostId]) -> dict[PostId, list[Tag]]:
        """Fetch the tags of many posts in a single query.

        Args:
            post_ids: Post IDs (one page worth, bounded by the page size)

        Returns:
            Dict mapping post_id -> tags ordered by name. Posts without
            tags have no key. Empty input returns {} without a query.
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 50, offset: int = 0) -> list[Tag]:
        """Find tags ordered by name.

        Args:
            limit: Maximum number of tags to return
            offset: Number of tags to skip

        Returns:
            List of tags
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all tags."""
        pass
