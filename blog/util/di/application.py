"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.post import (
    GetPostUseCase,
    ListPostsUseCase,
    ListRandomPostsUseCase,
)
from blog.application.usecase.tag import ListTagsUseCase
from blog.config import PaginationSettings
from blog.domain.repository import PostRepository
from blog.domain.service import PostService, TagService
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self,
        post_repository: PostRepository,
        tag_service: TagService,
        pagination: PaginationSettings,
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            post_repository=post_repository,
            tag_service=tag_service,
            pagination=pagination,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_random_posts_use_case(
        self, post_service: PostService, pagination: PaginationSettings
    ) -> ListRandomPostsUseCase:
        """Provide list random posts use case."""
        return ListRandomPostsUseCase(post_service=post_service, pagination=pagination)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(
        self, tag_service: TagService, pagination: PaginationSettings
    ) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service, pagination=pagination)
