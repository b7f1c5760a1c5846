"""Query construction for post listings and batch tag lookups.

Every value that comes from a request is passed as a bound parameter.
Column names only ever come from the ORDER_COLUMNS whitelist.
"""

from dataclasses import dataclass

from sqlalchemy import ARRAY, Select, and_, any_, bindparam, func, or_, select
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql.elements import ColumnElement

from blog.domain.value import (
    PostId,
    PostListCriteria,
    PostOrderField,
    Slug,
    SortDirection,
    Username,
)
from blog.persistence.tables import (
    posts_table,
    posts_to_tags_table,
    tags_table,
    users_table,
)

LIKE_ESCAPE = "\\"

ORDER_COLUMNS = {
    PostOrderField.PUBLISHED_AT: posts_table.c.published_at,
    PostOrderField.CREATED_AT: posts_table.c.created_at,
    PostOrderField.UPDATED_AT: posts_table.c.updated_at,
    PostOrderField.TITLE: posts_table.c.title,
    PostOrderField.VIEW_COUNT: posts_table.c.view_count,
    PostOrderField.LIKE_COUNT: posts_table.c.like_count,
}


def escape_like(text: str) -> str:
    """Escape LIKE metacharacters so text matches only literally.

    The escape character itself is escaped first, then % and _.
    Use together with ESCAPE LIKE_ESCAPE and a bound parameter.

    Args:
        text: Arbitrary user text

    Returns:
        Text safe to embed in a LIKE pattern
    """
    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE + LIKE_ESCAPE)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def contains_pattern(text: str) -> str:
    """Build a LIKE pattern matching text as a literal substring."""
    return f"%{escape_like(text)}%"


@dataclass(frozen=True)
class PostListQuery:
    """A page query and its count twin, built from the same filters."""

    page: Select
    count: Select


def _posts_with_authors():
    return posts_table.join(users_table, posts_table.c.created_by == users_table.c.id)


def _select_posts() -> Select:
    return select(
        posts_table,
        users_table.c.username.label("author_username"),
    ).select_from(_posts_with_authors())


def _visible() -> ColumnElement[bool]:
    return and_(
        posts_table.c.published_at.is_not(None),
        posts_table.c.deleted_at.is_(None),
    )


def _filters(criteria: PostListCriteria) -> list[ColumnElement[bool]]:
    clauses = [_visible()]

    if criteria.search:
        pattern = bindparam("search_pattern", value=contains_pattern(criteria.search))
        clauses.append(
            or_(
                posts_table.c.title.ilike(pattern, escape=LIKE_ESCAPE),
                posts_table.c.body.ilike(pattern, escape=LIKE_ESCAPE),
                users_table.c.username.ilike(pattern, escape=LIKE_ESCAPE),
            )
        )

    if criteria.tag:
        tagged = (
            select(posts_to_tags_table.c.post_id)
            .join(tags_table, posts_to_tags_table.c.tag_id == tags_table.c.id)
            .where(
                posts_to_tags_table.c.post_id == posts_table.c.id,
                tags_table.c.name == criteria.tag.root,
            )
        )
        clauses.append(tagged.correlate(posts_table).exists())

    return clauses


def build_post_list_query(criteria: PostListCriteria) -> PostListQuery:
    """Build the page query and count query for a post listing.

    The page is ordered by the whitelisted column, then by post id in the
    same direction so that pages are reproducible when values tie.

    Args:
        criteria: Validated listing criteria

    Returns:
        PostListQuery with the page and count statements
    """
    filters = _filters(criteria)

    order_column = ORDER_COLUMNS[criteria.order_by]
    if criteria.direction == SortDirection.DESC:
        ordering = (order_column.desc(), posts_table.c.id.desc())
    else:
        ordering = (order_column.asc(), posts_table.c.id.asc())

    page = (
        _select_posts()
        .where(*filters)
        .order_by(*ordering)
        .limit(criteria.limit)
        .offset(criteria.offset)
    )
    count = select(func.count()).select_from(_posts_with_authors()).where(*filters)

    return PostListQuery(page=page, count=count)


def build_random_posts_query(limit: int) -> Select:
    """Build a query for a random sample of visible posts."""
    return _select_posts().where(_visible()).order_by(func.random()).limit(limit)


def build_post_by_slug_query(username: Username, slug: Slug) -> Select:
    """Build a query for one visible post by author username and slug."""
    return _select_posts().where(
        _visible(),
        users_table.c.username == username.root,
        posts_table.c.slug == slug.root,
    )


def build_tags_for_posts_query(post_ids: list[PostId]) -> Select:
    """Build one query fetching (post_id, tag) pairs for many posts.

    The IDs are bound as a single array parameter: post_id = ANY(:post_ids).

    Args:
        post_ids: Non-empty list of post IDs

    Returns:
        Statement ordered by tag name, then post id
    """
    ids = bindparam("post_ids", value=list(post_ids), type_=ARRAY(UUID(as_uuid=True)))
    return (
        select(
            posts_to_tags_table.c.post_id,
            tags_table.c.id,
            tags_table.c.name,
            tags_table.c.created_at,
        )
        .select_from(posts_to_tags_table)
        .join(tags_table, posts_to_tags_table.c.tag_id == tags_table.c.id)
        .where(posts_to_tags_table.c.post_id == any_(ids))
        .order_by(tags_table.c.name, posts_to_tags_table.c.post_id)
    )
