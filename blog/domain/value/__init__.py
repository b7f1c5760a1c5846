"""Domain value objects for the blog."""

from blog.domain.value.identifiers import PostId, TagId, UserId
from blog.domain.value.listing import (
    MAX_LIMIT,
    MAX_OFFSET,
    MAX_SEARCH_LENGTH,
    PostListCriteria,
    PostOrderField,
    SortDirection,
)
from blog.domain.value.pagination import PageMeta
from blog.domain.value.types import Slug, TagName, Username

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "TagId",
    # Types
    "Slug",
    "TagName",
    "Username",
    # Listing
    "MAX_LIMIT",
    "MAX_OFFSET",
    "MAX_SEARCH_LENGTH",
    "PostListCriteria",
    "PostOrderField",
    "SortDirection",
    "PageMeta",
]
