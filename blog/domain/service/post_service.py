"""Post domain service."""

import logfire

from blog.domain.error import NotFoundError
from blog.domain.model.post import Post
from blog.domain.repository import PostRepository
from blog.domain.value import Slug, Username

from .base import Service
from .tag_service import TagService


class PostService(Service):
    """Domain service for reading single posts and samples of posts."""

    def __init__(self, post_repository: PostRepository, tag_service: TagService) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            tag_service: Tag service used to attach tags
        """
        self.post_repository = post_repository
        self.tag_service = tag_service

    async def get_post(self, username: Username, slug: Slug) -> Post:
        """Get a published post by author and slug, with tags.

        Args:
            username: Author username
            slug: Post slug

        Returns:
            The post with its tags attached

        Raises:
            NotFoundError: If no published post matches
        """
        with logfire.span(
            "post_service.get_post", username=str(username), slug=str(slug)
        ):
            post = await self.post_repository.find_by_author_and_slug(username, slug)
            if post is None:
                logfire.warn("Post not found", username=str(username), slug=str(slug))
                raise NotFoundError("Post", f"{slug} by {username}")

            [post] = await self.tag_service.attach_tags([post])
            logfire.info("Post found", post_id=str(post.id), tag_count=len(post.tags))
            return post

    async def get_random_posts(self, limit: int) -> list[Post]:
        """Get a random sample of published posts, with tags.

        Args:
            limit: Maximum number of posts to return

        Returns:
            Up to limit posts
        """
        with logfire.span("post_service.get_random_posts", limit=limit):
            posts = await self.post_repository.find_random(limit)
            posts = await self.tag_service.attach_tags(posts)
            logfire.info("Random posts retrieved", count=len(posts))
            return posts
