"""In-memory post repository for testing."""

from typing import Optional

from blog.domain.model.post import Post
from blog.domain.repository.post import PostRepository
from blog.domain.value import PostListCriteria, Slug, SortDirection, Username

from .database import InMemoryDatabase


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    def _matching(self, criteria: PostListCriteria) -> list[Post]:
        posts = self._db.visible_posts()

        # Search is a literal, case-insensitive substring match
        if criteria.search:
            needle = criteria.search.lower()
            posts = [
                p
                for p in posts
                if needle in p.title.lower()
                or needle in p.body.lower()
                or needle in p.author.username.root.lower()
            ]

        # Filter by tag
        if criteria.tag is not None:
            posts = [
                p
                for p in posts
                if any(
                    self._db.tags[tag_id].name == criteria.tag
                    for tag_id in self._db.post_tags.get(p.id, [])
                )
            ]

        return posts

    async def find_page(self, criteria: PostListCriteria) -> list[Post]:
        """Find one page of posts matching the criteria."""
        self._db.record("posts.page")
        posts = self._matching(criteria)

        # Sort by the requested field, ties broken by id in the same direction
        field = criteria.order_by.value
        posts.sort(
            key=lambda p: (getattr(p, field), p.id),
            reverse=criteria.direction == SortDirection.DESC,
        )

        # Paginate
        return posts[criteria.offset : criteria.offset + criteria.limit]

    async def count(self, criteria: PostListCriteria) -> int:
        """Count posts matching the criteria filters."""
        self._db.record("posts.count")
        return len(self._matching(criteria))

    async def find_random(self, limit: int) -> list[Post]:
        """Find a random sample of posts."""
        self._db.record("posts.random")
        posts = self._db.visible_posts()
        return self._db.random.sample(posts, min(limit, len(posts)))

    async def find_by_author_and_slug(
        self, username: Username, slug: Slug
    ) -> Optional[Post]:
        """Find a post by author username and slug."""
        self._db.record("posts.by_slug")
        for post in self._db.visible_posts():
            if post.author.username == username and post.slug == slug:
                return post
        return None
