"""Tag use cases."""

from .list_tags import ListTagsRequest, ListTagsUseCase

__all__ = [
    "ListTagsRequest",
    "ListTagsUseCase",
]
