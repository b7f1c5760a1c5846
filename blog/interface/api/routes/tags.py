"""Tag routes."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from blog.application.assembler import TagItem
from blog.application.envelope import Envelope
from blog.application.usecase.tag import ListTagsRequest, ListTagsUseCase

router = APIRouter(
    prefix="/v1/tags",
    tags=["tags"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=Envelope[list[TagItem]],
    summary="List all available tags",
    description="Get one page of tags, ordered by name.",
)
async def list_tags(
    use_case: FromDishka[ListTagsUseCase],
    offset: int = 0,
    limit: Optional[int] = None,
) -> Envelope[list[TagItem]]:
    """List available tags.

    Args:
        use_case: List tags use case (injected)
        offset: Number of tags to skip
        limit: Maximum number of tags to return (1-100, default 50)

    Returns:
        Tag page envelope

    Example:
        GET /v1/tags?limit=10
    """
    with logfire.span("api.list_tags", limit=limit, offset=offset):
        request = ListTagsRequest(offset=offset, limit=limit)
        return await use_case.execute(request)
