"""Get post use case."""

import logfire
from pydantic import BaseModel

from blog.application.assembler import PostItem, assemble_post
from blog.application.envelope import Envelope
from blog.application.usecase.base import BaseUseCase
from blog.domain.error import ValidationError
from blog.domain.service import PostService
from blog.domain.value import Slug, Username


class GetPostRequest(BaseModel):
    """Get post request: author username and post slug from the URL."""

    username: str
    slug: str


class GetPostUseCase(BaseUseCase):
    """Use case for retrieving one published post with its tags."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> Envelope[PostItem]:
        """Execute get post flow.

        Args:
            request: Author username and slug

        Returns:
            Success envelope with the full post

        Raises:
            ValidationError: If username or slug is malformed
            NotFoundError: If no published post matches
        """
        try:
            username = Username(request.username)
        except ValueError as e:
            raise ValidationError(f"Invalid post path: {e}", field="username") from e
        try:
            slug = Slug(request.slug)
        except ValueError as e:
            raise ValidationError(f"Invalid post path: {e}", field="slug") from e

        with logfire.span("get_post.execute", username=request.username, slug=request.slug):
            post = await self.post_service.get_post(username, slug)
            return assemble_post(post)
