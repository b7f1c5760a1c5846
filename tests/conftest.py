"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from blog.domain.model import Post, Tag, User
from blog.domain.value import PostId, Slug, TagId, TagName, UserId, Username

# Spans and logs stay in-process during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_user(username: str = "alice") -> User:
    """Build a user with a fresh id."""
    return User(id=UserId(uuid4()), username=Username(username))


def make_tag(name: str) -> Tag:
    """Build a tag with a fresh id."""
    return Tag(id=TagId(uuid4()), name=TagName(name), created_at=BASE_TIME)


def make_post(
    title: str,
    *,
    author: User | None = None,
    body: str | None = None,
    slug: str | None = None,
    day: int = 0,
    view_count: int = 0,
    like_count: int = 0,
) -> Post:
    """Build a published post.

    Args:
        title: Post title, also used for the default body and slug
        author: Post author (a fresh "alice" when omitted)
        body: Post body
        slug: Post slug
        day: Days after BASE_TIME the post was published

    Returns:
        Post without tags
    """
    published_at = BASE_TIME + timedelta(days=day)
    return Post(
        id=PostId(uuid4()),
        title=title,
        body=body if body is not None else f"Body of {title}",
        author=author or make_user(),
        slug=Slug(slug or title.lower().replace(" ", "-")),
        published_at=published_at,
        created_at=published_at,
        updated_at=published_at,
        view_count=view_count,
        like_count=like_count,
    )
