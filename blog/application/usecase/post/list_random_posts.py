"""List random posts use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from blog.application.assembler import PostItem, to_post_item
from blog.application.envelope import Envelope
from blog.application.usecase.base import BaseUseCase
from blog.config import PaginationSettings
from blog.domain.service import PostService
from blog.domain.value import MAX_LIMIT, PageMeta


class ListRandomPostsRequest(BaseModel):
    """List random posts request."""

    limit: Optional[int] = Field(default=None, ge=1, le=MAX_LIMIT)


class ListRandomPostsUseCase(BaseUseCase):
    """Use case for a random selection of posts, e.g. for a 'discover' panel."""

    def __init__(self, post_service: PostService, pagination: PaginationSettings) -> None:
        self.post_service = post_service
        self.pagination = pagination

    async def execute(
        self, request: ListRandomPostsRequest
    ) -> Envelope[list[PostItem]]:
        """Execute list random posts flow.

        The metadata counts the returned posts; there is no page to walk.
        """
        limit = (
            request.limit
            if request.limit is not None
            else self.pagination.default_random_limit
        )

        with logfire.span("list_random_posts.execute", limit=limit):
            posts = await self.post_service.get_random_posts(limit)
            items = [
                to_post_item(post, post.tags, self.pagination.excerpt_length)
                for post in posts
            ]
            meta = PageMeta.compute(total_items=len(items), limit=limit, offset=0)
            return Envelope[list[PostItem]](data=items, meta=meta)
