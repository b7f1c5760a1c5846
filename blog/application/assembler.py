"""Response assembly: domain models into outward projections."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from blog.application.envelope import Envelope
from blog.domain.model import Post, Tag
from blog.domain.value import PageMeta, PostId


class AuthorItem(BaseModel):
    """Post author in responses."""

    id: str
    username: str


class TagItem(BaseModel):
    """Tag in responses."""

    id: str
    name: str


class PostItem(BaseModel):
    """Post in responses."""

    id: str
    title: str
    body: str
    slug: str
    photo_url: str | None
    author: AuthorItem
    tags: list[TagItem]
    published_at: datetime
    created_at: datetime
    updated_at: datetime
    view_count: int
    like_count: int


def excerpt(body: str, length: Optional[int]) -> str:
    """Cut body to at most length characters, marking the cut with '...'."""
    if length is None or len(body) <= length:
        return body
    return body[:length].rstrip() + "..."


def to_tag_item(tag: Tag) -> TagItem:
    return TagItem(id=str(tag.id), name=tag.name.root)


def to_post_item(
    post: Post, tags: list[Tag], excerpt_length: Optional[int] = None
) -> PostItem:
    """Project a post and its tags.

    Args:
        post: Post with author joined
        tags: The post's tags (empty list when it has none)
        excerpt_length: Truncate the body to this length (None keeps it whole)

    Returns:
        Outward post projection
    """
    return PostItem(
        id=str(post.id),
        title=post.title,
        body=excerpt(post.body, excerpt_length),
        slug=post.slug.root,
        photo_url=post.photo_url,
        author=AuthorItem(id=str(post.author.id), username=post.author.username.root),
        tags=[to_tag_item(tag) for tag in tags],
        published_at=post.published_at,
        created_at=post.created_at,
        updated_at=post.updated_at,
        view_count=post.view_count,
        like_count=post.like_count,
    )


def assemble_post_page(
    posts: list[Post],
    tags_by_post: dict[PostId, list[Tag]],
    meta: PageMeta,
    excerpt_length: Optional[int] = None,
) -> Envelope[list[PostItem]]:
    """Join posts with their grouped tags and wrap them with page metadata.

    Posts missing from tags_by_post get an empty tag list.
    """
    items = [
        to_post_item(post, tags_by_post.get(post.id, []), excerpt_length)
        for post in posts
    ]
    return Envelope[list[PostItem]](data=items, meta=meta)


def assemble_post(post: Post) -> Envelope[PostItem]:
    """Wrap a single post, with full body and its attached tags."""
    return Envelope[PostItem](data=to_post_item(post, post.tags))


def assemble_tag_page(tags: list[Tag], meta: PageMeta) -> Envelope[list[TagItem]]:
    """Wrap one page of tags with page metadata."""
    return Envelope[list[TagItem]](data=[to_tag_item(tag) for tag in tags], meta=meta)
