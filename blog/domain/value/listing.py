"""Validated criteria for listing posts.

Sorting is restricted to a closed set of fields. Anything a caller sends
outside of that set is rejected here, before the persistence layer sees it.
"""

from enum import Enum
from typing import Optional

from pydantic import Field

from blog.domain.error import ValidationError
from blog.domain.value.common import ValueObject
from blog.domain.value.types import TagName

MAX_OFFSET = 10_000
MAX_LIMIT = 100
MAX_SEARCH_LENGTH = 200


class PostOrderField(str, Enum):
    """Fields a post listing may be ordered by."""

    PUBLISHED_AT = "published_at"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    TITLE = "title"
    VIEW_COUNT = "view_count"
    LIKE_COUNT = "like_count"

    @classmethod
    def parse(cls, value: Optional[str]) -> "PostOrderField":
        """Resolve a raw order_by value against the whitelist.

        Args:
            value: Raw value from the request (None for the default)

        Returns:
            The matching order field

        Raises:
            ValidationError: If the value is not a sortable field
        """
        if value is None:
            return cls.PUBLISHED_AT
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(field.value for field in cls)
            raise ValidationError(
                f"Invalid order_by '{value}'. Allowed values: {allowed}",
                field="order_by",
            ) from None


class SortDirection(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SortDirection":
        """Parse a sort direction, case-insensitively (default: descending)."""
        if value is None:
            return cls.DESC
        try:
            return cls(value.lower())
        except ValueError:
            raise ValidationError(
                f"Invalid sort_direction '{value}'. Allowed values: asc, desc",
                field="sort_direction",
            ) from None


class PostListCriteria(ValueObject):
    """Filter, sort and page criteria for one post listing."""

    offset: int = Field(default=0, ge=0, le=MAX_OFFSET)
    limit: int = Field(ge=1, le=MAX_LIMIT)
    search: Optional[str] = None
    order_by: PostOrderField = PostOrderField.PUBLISHED_AT
    direction: SortDirection = SortDirection.DESC
    tag: Optional[TagName] = None

    @classmethod
    def from_request(
        cls,
        *,
        offset: int,
        limit: int,
        search: Optional[str] = None,
        order_by: Optional[str] = None,
        sort_direction: Optional[str] = None,
        tag: Optional[str] = None,
    ) -> "PostListCriteria":
        """Build criteria from raw request values.

        Blank search text is treated as no search at all.

        Raises:
            ValidationError: If order_by, sort_direction, search or tag is invalid
        """
        order_field = PostOrderField.parse(order_by)
        direction = SortDirection.parse(sort_direction)

        search_text = search.strip() if search else None
        if search_text and len(search_text) > MAX_SEARCH_LENGTH:
            raise ValidationError(
                f"Search text must be at most {MAX_SEARCH_LENGTH} characters",
                field="search",
            )

        tag_name = None
        if tag is not None:
            try:
                tag_name = TagName(tag)
            except ValueError as e:
                raise ValidationError(f"Invalid tag: {tag!r}", field="tag") from e

        return cls(
            offset=offset,
            limit=limit,
            search=search_text or None,
            order_by=order_field,
            direction=direction,
            tag=tag_name,
        )
