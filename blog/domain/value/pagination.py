"""Pagination metadata."""

from pydantic import Field

from blog.domain.value.common import ValueObject


class PageMeta(ValueObject):
    """Metadata describing one page of a listing."""

    total_items: int = Field(ge=0)
    offset: int = Field(ge=0)
    limit: int = Field(ge=1)
    total_pages: int = Field(ge=0)

    @classmethod
    def compute(cls, total_items: int, limit: int, offset: int) -> "PageMeta":
        """Compute metadata for a page.

        Callers guarantee limit >= 1; limit and offset are echoed unchanged.

        Args:
            total_items: Number of rows matching the filters
            limit: Page size
            offset: Number of rows skipped

        Returns:
            Page metadata with total_pages = ceil(total_items / limit)
        """
        return cls(
            total_items=total_items,
            offset=offset,
            limit=limit,
            total_pages=-(-total_items // limit),
        )
