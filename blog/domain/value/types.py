"""Domain value objects for the blog.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules for names that arrive from URLs and
query strings.
"""

from pydantic import field_validator

from blog.domain.value.common import RootValueObject


class Username(RootValueObject[str]):
    """Unique username of a post author."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Username must be 1-255 characters")
        return v


class Slug(RootValueObject[str]):
    """URL slug of a post, unique per author.

    Slugs are written by the publishing side, so only the URL-breaking
    characters are rejected here.
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug is a single non-empty path segment."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Slug must be 1-255 characters")
        if "/" in v or any(ch.isspace() for ch in v):
            raise ValueError("Slug must not contain slashes or whitespace")
        return v


class TagName(RootValueObject[str]):
    """Unique tag name, e.g. 'rust' or 'web-development'."""

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name is non-blank and at most 50 characters."""
        if not v.strip():
            raise ValueError("Tag name must not be blank")
        if len(v) > 50:
            raise ValueError("Tag name must be at most 50 characters")
        return v
