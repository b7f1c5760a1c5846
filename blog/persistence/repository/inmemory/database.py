"""Shared in-memory store for the in-memory repositories."""

import random
from typing import Optional

from blog.domain.model import Post, Tag, User
from blog.domain.value import PostId, TagId, UserId


class InMemoryDatabase:
    """In-memory stand-in for the blog tables, for testing.

    Posts are stored without tags; associations live in a separate
    post -> tag ids mapping like the posts_to_tags table. Every repository
    read is recorded in ``queries`` so tests can assert how many round
    trips an operation made.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.users: dict[UserId, User] = {}
        self.posts: dict[PostId, Post] = {}
        self.tags: dict[TagId, Tag] = {}
        self.post_tags: dict[PostId, list[TagId]] = {}
        self.hidden: set[PostId] = set()
        self.queries: list[str] = []
        self.random = random.Random(seed)

    def add_user(self, user: User) -> User:
        """Insert or replace a user."""
        self.users[user.id] = user
        return user

    def add_tag(self, tag: Tag) -> Tag:
        """Insert or replace a tag."""
        self.tags[tag.id] = tag
        return tag

    def add_post(
        self, post: Post, tags: Optional[list[Tag]] = None, visible: bool = True
    ) -> Post:
        """Insert a post, its author and its tag links.

        Args:
            post: Post to store (its own tags field is ignored)
            tags: Tags to link to the post
            visible: False to store it as a draft or deleted post
        """
        self.add_user(post.author)
        self.posts[post.id] = post.with_tags([])
        self.post_tags[post.id] = [self.add_tag(tag).id for tag in tags or []]
        if not visible:
            self.hidden.add(post.id)
        return post

    def visible_posts(self) -> list[Post]:
        """Return published, non-deleted posts."""
        return [p for p in self.posts.values() if p.id not in self.hidden]

    def record(self, query: str) -> None:
        """Record one store round trip."""
        self.queries.append(query)
