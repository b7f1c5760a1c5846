"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Post
from blog.domain.repository.post import PostRepository
from blog.domain.value import PostListCriteria, Slug, Username
from blog.persistence.error import store_errors
from blog.persistence.mappers import row_to_post
from blog.persistence.query import (
    build_post_by_slug_query,
    build_post_list_query,
    build_random_posts_query,
)


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_page(self, criteria: PostListCriteria) -> List[Post]:
        """Find one page of posts matching the criteria."""
        # Search text stays out of the span; only whether there is one
        with logfire.span(
            "post_repository.find_page",
            order_by=criteria.order_by.value,
            direction=criteria.direction.value,
            has_search=criteria.search is not None,
            tag=criteria.tag.root if criteria.tag else None,
            limit=criteria.limit,
            offset=criteria.offset,
        ):
            stmt = build_post_list_query(criteria).page
            with store_errors("post_repository.find_page"):
                result = await self.session.execute(stmt)
                rows = result.fetchall()

            posts = [row_to_post(row._asdict()) for row in rows]
            logfire.info("Found posts", count=len(posts))
            return posts

    async def count(self, criteria: PostListCriteria) -> int:
        """Count posts matching the criteria filters."""
        with logfire.span(
            "post_repository.count",
            has_search=criteria.search is not None,
            tag=criteria.tag.root if criteria.tag else None,
        ):
            stmt = build_post_list_query(criteria).count
            with store_errors("post_repository.count"):
                result = await self.session.execute(stmt)
                count = result.scalar() or 0

            logfire.info("Post count", count=count)
            return count

    async def find_random(self, limit: int) -> List[Post]:
        """Find a random sample of posts."""
        with logfire.span("post_repository.find_random", limit=limit):
            with store_errors("post_repository.find_random"):
                result = await self.session.execute(build_random_posts_query(limit))
                rows = result.fetchall()

            return [row_to_post(row._asdict()) for row in rows]

    async def find_by_author_and_slug(
        self, username: Username, slug: Slug
    ) -> Optional[Post]:
        """Find a post by author username and slug."""
        with logfire.span(
            "post_repository.find_by_author_and_slug",
            username=str(username),
            slug=str(slug),
        ):
            stmt = build_post_by_slug_query(username, slug)
            with store_errors("post_repository.find_by_author_and_slug"):
                result = await self.session.execute(stmt)
                row = result.fetchone()

            if not row:
                return None

            return row_to_post(row._asdict())
