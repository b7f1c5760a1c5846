"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.post import Post
from blog.domain.value import PostListCriteria, Slug, Username


class PostRepository(ABC):
    """Read-only repository for published posts.

    Posts returned by this repository carry their author but no tags;
    tags are resolved in one batch by the TagRepository.
    """

    @abstractmethod
    async def find_page(self, criteria: PostListCriteria) -> List[Post]:
        """Find one page of posts matching the criteria.

        Args:
            criteria: Validated filter, sort and page criteria

        Returns:
            At most criteria.limit posts, in criteria order
        """
        pass

    @abstractmethod
    async def count(self, criteria: PostListCriteria) -> int:
        """Count all posts matching the criteria filters.

        Ordering, limit and offset are ignored.

        Args:
            criteria: Validated filter criteria

        Returns:
            Total number of matching posts
        """
        pass

    @abstractmethod
    async def find_random(self, limit: int) -> List[Post]:
        """Find a random sample of posts.

        Args:
            limit: Maximum number of posts to return

        Returns:
            Up to limit posts in random order
        """
        pass

    @abstractmethod
    async def find_by_author_and_slug(
        self, username: Username, slug: Slug
    ) -> Optional[Post]:
        """Find a post by its author's username and its slug.

        Args:
            username: Author username
            slug: Post slug (unique per author)

        Returns:
            The post if found, None otherwise
        """
        pass
