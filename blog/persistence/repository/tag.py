"""PostgreSQL implementation of Tag repository."""

from collections import defaultdict

import logfire
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model.tag import Tag
from blog.domain.repository.tag import TagRepository
from blog.domain.value import PostId
from blog.persistence.error import store_errors
from blog.persistence.mappers import row_to_tag
from blog.persistence.query import build_tags_for_posts_query
from blog.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def find_by_post_ids(self, post_ids: list[PostId]) -> dict[PostId, list[Tag]]:
        """Fetch tags for multiple posts in a single query."""
        if not post_ids:
            return {}

        with logfire.span("tag_repository.find_by_post_ids", post_count=len(post_ids)):
            stmt = build_tags_for_posts_query(post_ids)
            with store_errors("tag_repository.find_by_post_ids"):
                result = await self.session.execute(stmt)
                rows = result.fetchall()

            # Build lookup: post_id -> [tags], keeping the name order of the query
            tags_by_post: dict[PostId, list[Tag]] = defaultdict(list)
            for row in rows:
                tags_by_post[PostId(row.post_id)].append(row_to_tag(row._asdict()))

            return dict(tags_by_post)

    async def find_all(self, limit: int = 50, offset: int = 0) -> list[Tag]:
        """Find tags ordered by name."""
        with logfire.span("tag_repository.find_all", limit=limit, offset=offset):
            stmt = (
                select(tags_table)
                .order_by(tags_table.c.name, tags_table.c.id)
                .limit(limit)
                .offset(offset)
            )
            with store_errors("tag_repository.find_all"):
                result = await self.session.execute(stmt)
                rows = result.fetchall()
            return [row_to_tag(row._asdict()) for row in rows]

    async def count(self) -> int:
        """Count all tags."""
        with logfire.span("tag_repository.count"):
            stmt = select(func.count()).select_from(tags_table)
            with store_errors("tag_repository.count"):
                result = await self.session.execute(stmt)
                return result.scalar() or 0
