"""Tag domain service."""

import logfire

from blog.domain.model.post import Post
from blog.domain.model.tag import Tag
from blog.domain.repository.tag import TagRepository
from blog.domain.value import PostId

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def resolve_for_posts(
        self, post_ids: list[PostId]
    ) -> dict[PostId, list[Tag]]:
        """Resolve the tags of a page of posts with one query.

        Args:
            post_ids: Post IDs of the page, in page order

        Returns:
            Dict mapping post_id -> tags. Posts without tags have no key.
        """
        if not post_ids:
            return {}

        with logfire.span("tag_service.resolve_for_posts", post_count=len(post_ids)):
            tags_by_post = await self.tag_repository.find_by_post_ids(post_ids)
            logfire.debug(
                "Tags resolved",
                post_count=len(post_ids),
                tagged_posts=len(tags_by_post),
            )
            return tags_by_post

    async def attach_tags(self, posts: list[Post]) -> list[Post]:
        """Return copies of posts with their tags attached.

        Args:
            posts: Posts without tags

        Returns:
            Posts in the same order, each with its (possibly empty) tag list
        """
        tags_by_post = await self.resolve_for_posts([post.id for post in posts])
        return [post.with_tags(tags_by_post.get(post.id, [])) for post in posts]

    async def list_tags(self, limit: int = 50, offset: int = 0) -> tuple[list[Tag], int]:
        """Get one page of tags ordered by name.

        Args:
            limit: Maximum number of tags to return
            offset: Number of tags to skip

        Returns:
            Tuple of (tags, total tag count)
        """
        with logfire.span("tag_service.list_tags", limit=limit, offset=offset):
            total = await self.tag_repository.count()
            tags = await self.tag_repository.find_all(limit=limit, offset=offset)
            logfire.info("Tags retrieved", count=len(tags), total=total)
            return tags, total
