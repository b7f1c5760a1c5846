"""List tags use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from blog.application.assembler import TagItem, assemble_tag_page
from blog.application.envelope import Envelope
from blog.application.usecase.base import BaseUseCase
from blog.config import PaginationSettings
from blog.domain.service import TagService
from blog.domain.value import MAX_LIMIT, MAX_OFFSET, PageMeta


class ListTagsRequest(BaseModel):
    """List tags request."""

    offset: int = Field(default=0, ge=0, le=MAX_OFFSET)
    limit: Optional[int] = Field(default=None, ge=1, le=MAX_LIMIT)


class ListTagsUseCase(BaseUseCase):
    """Use case for listing available tags."""

    def __init__(self, tag_service: TagService, pagination: PaginationSettings) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
            pagination: Pagination defaults
        """
        self.tag_service = tag_service
        self.pagination = pagination

    async def execute(self, request: ListTagsRequest) -> Envelope[list[TagItem]]:
        """Execute list tags flow.

        Args:
            request: List tags request

        Returns:
            Success envelope with one page of tags, ordered by name
        """
        limit = (
            request.limit
            if request.limit is not None
            else self.pagination.default_tag_limit
        )

        with logfire.span("list_tags.execute", limit=limit, offset=request.offset):
            tags, total = await self.tag_service.list_tags(
                limit=limit, offset=request.offset
            )
            meta = PageMeta.compute(total_items=total, limit=limit, offset=request.offset)
            return assemble_tag_page(tags, meta)
