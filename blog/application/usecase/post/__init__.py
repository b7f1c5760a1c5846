"""Post use cases."""

from .get_post import GetPostRequest, GetPostUseCase
from .list_posts import ListPostsRequest, ListPostsUseCase
from .list_random_posts import ListRandomPostsRequest, ListRandomPostsUseCase

__all__ = [
    "GetPostRequest",
    "GetPostUseCase",
    "ListPostsRequest",
    "ListPostsUseCase",
    "ListRandomPostsRequest",
    "ListRandomPostsUseCase",
]
