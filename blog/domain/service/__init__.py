"""Domain services."""

from .base import Service
from .post_service import PostService
from .tag_service import TagService

__all__ = [
    "PostService",
    "Service",
    "TagService",
]
