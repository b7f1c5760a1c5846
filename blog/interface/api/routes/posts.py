"""Post routes."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from blog.application.assembler import PostItem
from blog.application.envelope import Envelope
from blog.application.usecase.post import (
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    ListRandomPostsRequest,
    ListRandomPostsUseCase,
)

router = APIRouter(prefix="/v1/posts", tags=["posts"], route_class=DishkaRoute)


@router.get("", response_model=Envelope[list[PostItem]])
async def list_posts(
    use_case: FromDishka[ListPostsUseCase],
    offset: int = 0,
    limit: Optional[int] = None,
    search: Optional[str] = None,
    order_by: Optional[str] = None,
    sort_direction: Optional[str] = None,
    tag: Optional[str] = None,
) -> Envelope[list[PostItem]]:
    """List published posts.

    Bounds are checked by ListPostsRequest; order_by and sort_direction
    are checked against the whitelist before any query runs.

    Args:
        use_case: List posts use case from DI
        offset: Number of posts to skip (0-10000)
        limit: Page size (1-100, default 20)
        search: Case-insensitive substring over title, body and author username
        order_by: Sort field (published_at, created_at, updated_at, title,
            view_count, like_count)
        sort_direction: asc or desc
        tag: Only posts carrying this tag name

    Returns:
        Post page envelope

    Example:
        GET /v1/posts?limit=10&order_by=view_count&sort_direction=desc
    """
    request = ListPostsRequest(
        offset=offset,
        limit=limit,
        search=search,
        order_by=order_by,
        sort_direction=sort_direction,
        tag=tag,
    )
    return await use_case.execute(request)


@router.get("/random", response_model=Envelope[list[PostItem]])
async def list_random_posts(
    use_case: FromDishka[ListRandomPostsUseCase],
    limit: Optional[int] = None,
) -> Envelope[list[PostItem]]:
    """List a random sample of published posts."""
    return await use_case.execute(ListRandomPostsRequest(limit=limit))


@router.get("/u/{username}/{slug}", response_model=Envelope[PostItem])
async def get_post(
    username: str,
    slug: str,
    use_case: FromDishka[GetPostUseCase],
) -> Envelope[PostItem]:
    """Get one published post by its author's username and its slug.

    Args:
        username: Author username
        slug: Post slug, unique per author
        use_case: Get post use case from DI

    Returns:
        Envelope with the full post and its tags
    """
    logfire.debug("Fetching post", username=username, slug=slug)
    return await use_case.execute(GetPostRequest(username=username, slug=slug))
