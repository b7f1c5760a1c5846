"""List posts use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from blog.application.assembler import PostItem, assemble_post_page
from blog.application.envelope import Envelope
from blog.application.usecase.base import BaseUseCase
from blog.config import PaginationSettings
from blog.domain.repository.post import PostRepository
from blog.domain.service import TagService
from blog.domain.value import MAX_LIMIT, MAX_OFFSET, PageMeta, PostListCriteria


class ListPostsRequest(BaseModel):
    """List posts request."""

    offset: int = Field(default=0, ge=0, le=MAX_OFFSET)
    limit: Optional[int] = Field(default=None, ge=1, le=MAX_LIMIT)  # None = default
    search: Optional[str] = None
    order_by: Optional[str] = None
    sort_direction: Optional[str] = None
    tag: Optional[str] = None


class ListPostsUseCase(BaseUseCase):
    """Use case for listing posts with search, sorting and pagination."""

    def __init__(
        self,
        post_repository: PostRepository,
        tag_service: TagService,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_repository: Post repository
            tag_service: Tag service for batch tag resolution
            pagination: Pagination defaults
        """
        self.post_repository = post_repository
        self.tag_service = tag_service
        self.pagination = pagination

    async def execute(self, request: ListPostsRequest) -> Envelope[list[PostItem]]:
        """Execute list posts flow.

        Args:
            request: Bounds-checked request values

        Returns:
            Success envelope with the page of posts and its metadata

        Raises:
            ValidationError: If order_by, sort_direction, search or tag is
                invalid. Raised before any query is issued.
        """
        limit = request.limit if request.limit is not None else self.pagination.default_limit

        # Whitelist and search checks happen here, before touching the store
        criteria = PostListCriteria.from_request(
            offset=request.offset,
            limit=limit,
            search=request.search,
            order_by=request.order_by,
            sort_direction=request.sort_direction,
            tag=request.tag,
        )

        with logfire.span(
            "list_posts.execute",
            order_by=criteria.order_by.value,
            direction=criteria.direction.value,
            has_search=criteria.search is not None,
            tag=criteria.tag.root if criteria.tag else None,
            limit=criteria.limit,
            offset=criteria.offset,
        ):
            total = await self.post_repository.count(criteria)
            posts = await self.post_repository.find_page(criteria)

            # One query for the tags of the whole page
            tags_by_post = await self.tag_service.resolve_for_posts(
                [post.id for post in posts]
            )

            meta = PageMeta.compute(
                total_items=total, limit=criteria.limit, offset=criteria.offset
            )
            logfire.info("Posts listed", count=len(posts), total=total)

            return assemble_post_page(
                posts,
                tags_by_post,
                meta,
                excerpt_length=self.pagination.excerpt_length,
            )
