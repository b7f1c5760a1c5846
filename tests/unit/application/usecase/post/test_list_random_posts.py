"""Unit tests for ListRandomPostsUseCase."""

import pytest

from blog.application.usecase.post import (
    ListRandomPostsRequest,
    ListRandomPostsUseCase,
)
from blog.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import make_post, make_tag
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListRandomPosts:
    """Tests for random post selection."""

    @pytest.mark.asyncio
    async def test_default_limit_is_six(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListRandomPostsUseCase)
        db = await unit_env.get(InMemoryDatabase)
        for i in range(10):
            db.add_post(make_post(f"Post {i}"))

        # Act
        result = await use_case.execute(ListRandomPostsRequest())

        # Assert
        assert len(result.data) == 6
        assert result.meta.total_items == 6
        assert result.meta.limit == 6

    @pytest.mark.asyncio
    async def test_meta_counts_returned_posts(self, unit_env):
        use_case = await unit_env.get(ListRandomPostsUseCase)
        db = await unit_env.get(InMemoryDatabase)
        db.add_post(make_post("One"), tags=[make_tag("solo")])
        db.add_post(make_post("Two"))

        result = await use_case.execute(ListRandomPostsRequest(limit=5))

        assert len(result.data) == 2
        assert result.meta.total_items == 2
        assert result.meta.total_pages == 1
        tags = {item.title: [t.name for t in item.tags] for item in result.data}
        assert tags == {"One": ["solo"], "Two": []}
