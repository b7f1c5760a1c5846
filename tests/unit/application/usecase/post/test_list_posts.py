"""Unit tests for ListPostsUseCase."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from blog.application.usecase.post import ListPostsRequest, ListPostsUseCase
from blog.domain.error import ValidationError
from blog.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import make_post, make_tag, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListPosts:
    """Tests for listing posts."""

    @pytest.mark.asyncio
    async def test_first_page_newest_first_with_meta(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListPostsUseCase)
        db = await unit_env.get(InMemoryDatabase)
        for day in range(5):
            db.add_post(make_post(f"Post {day}", day=day))

        # Act
        result = await use_case.execute(ListPostsRequest(limit=2))

        # Assert
        assert result.success is True
        assert [item.title for item in result.data] == ["Post 4", "Post 3"]
        assert result.meta.model_dump() == {
            "total_items": 5,
            "offset": 0,
            "limit": 2,
            "total_pages": 3,
        }

    @pytest.mark.asyncio
    async def test_default_limit_is_applied(self, unit_env):
        use_case = await unit_env.get(ListPostsUseCase)
        db = await unit_env.get(InMemoryDatabase)
        for day in range(25):
            db.add_post(make_post(f"Post {day}", day=day))

        result = await use_case.execute(ListPostsRequest())

        assert len(result.data) == 20
        assert result.meta.limit == 20
        assert result.meta.total_pages == 2

    @pytest.mark.asyncio
    async def test_invalid_order_by_is_rejected_before_any_query(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListPostsUseCase)
        db = await unit_env.get(InMemoryDatabase)
        db.add_post(make_post("Post"))

        # Act & Assert
        with pytest.raises(ValidationError, match="Invalid order_by 'drop_table'"):
            await use_case.execute(ListPostsRequest(order_by="drop_table"))
        assert db.queries == []

    @pytest.mark.asyncio
    async def test_tags_resolved_in_one_query_and_untagged_posts_get_empty_list(
        self, unit_env
    ):
        # Arrange
        use_case = await unit_env.get(ListPostsUseCase)
        db = await unit_env.get(InMemoryDatabase)
        rust = make_tag("rust")
        db.add_post(make_post("Newest", day=3), tags=[rust])
        db.add_post(make_post("Middle", day=2), tags=[rust, make_tag("async")])
        db.add_post(make_post("Oldest", day=1))

        # Act
        result = await use_case.execute(ListPostsRequest())

        # Assert
        tags = {item.title: [t.name for t in item.tags] for item in result.data}
        assert tags == {
            "Newest": ["rust"],
            "Middle": ["async", "rust"],
            "Oldest": [],
        }
        assert db.queries.count("tags.by_post_ids") == 1

    @pytest.mark.asyncio
    async def test_empty_page_skips_tag_query(self, unit_env):
        use_case = await unit_env.get(ListPostsUseCase)
        db = await unit_env.get(InMemoryDatabase)

        result = await use_case.execute(ListPostsRequest())

        assert result.data == []
        assert result.meta.total_items == 0
        assert result.meta.total_pages == 0
        assert "tags.by_post_ids" not in db.queries

    @pytest.mark.asyncio
    async def test_search_matches_literally(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListPostsUseCase)
        db = await unit_env.get(InMemoryDatabase)
        db.add_post(make_post("Save 50% today", slug="save-50"))
        db.add_post(make_post("Save 500 today", slug="save-500"))

        # Act
        result = await use_case.execute(ListPostsRequest(search="50%"))

        # Assert
        assert [item.title for item in result.data] == ["Save 50% today"]
        assert result.meta.total_items == 1

    @pytest.mark.asyncio
    async def test_search_covers_author_username(self, unit_env):
        use_case = await unit_env.get(ListPostsUseCase)
        db = await unit_env.get(InMemoryDatabase)
        db.add_post(make_post("Mine", author=make_user("Ferris")))
        db.add_post(make_post("Theirs", author=make_user("gopher")))

        result = await use_case.execute(ListPostsRequest(search="ferris"))

        assert [item.title for item in result.data] == ["Mine"]

    @pytest.mark.asyncio
    async def test_filter_by_tag(self, unit_env):
        use_case = await unit_env.get(ListPostsUseCase)
        db = await unit_env.get(InMemoryDatabase)
        db.add_post(make_post("Tagged"), tags=[make_tag("python")])
        db.add_post(make_post("Other"), tags=[make_tag("go")])

        result = await use_case.execute(ListPostsRequest(tag="python"))

        assert [item.title for item in result.data] == ["Tagged"]
        assert result.meta.total_items == 1

    @pytest.mark.asyncio
    async def test_ties_broken_consistently_across_pages(self, unit_env):
        """Paging through equal sort values visits each post exactly once."""
        # Arrange
        use_case = await unit_env.get(ListPostsUseCase)
        db = await unit_env.get(InMemoryDatabase)
        posts = [db.add_post(make_post(f"Same {i}", view_count=7)) for i in range(5)]

        # Act
        seen = []
        for offset in range(0, 5, 2):
            page = await use_case.execute(
                ListPostsRequest(order_by="view_count", offset=offset, limit=2)
            )
            seen.extend(item.id for item in page.data)

        # Assert
        assert sorted(seen) == sorted(str(p.id) for p in posts)
        assert len(set(seen)) == 5

    @pytest.mark.asyncio
    async def test_hidden_posts_are_excluded(self, unit_env):
        use_case = await unit_env.get(ListPostsUseCase)
        db = await unit_env.get(InMemoryDatabase)
        db.add_post(make_post("Visible"))
        db.add_post(make_post("Draft"), visible=False)

        result = await use_case.execute(ListPostsRequest())

        assert [item.title for item in result.data] == ["Visible"]
        assert result.meta.total_items == 1

    @pytest.mark.asyncio
    async def test_body_is_cut_to_excerpt(self, unit_env):
        use_case = await unit_env.get(ListPostsUseCase)
        db = await unit_env.get(InMemoryDatabase)
        db.add_post(make_post("Long", body="word " * 200))

        result = await use_case.execute(ListPostsRequest())

        assert result.data[0].body.endswith("...")
        assert len(result.data[0].body) <= 283


class TestListPostsRequest:
    """Bounds on the request model."""

    @pytest.mark.parametrize(
        "values",
        [{"offset": -1}, {"offset": 10_001}, {"limit": 0}, {"limit": 101}],
    )
    def test_out_of_range_values_are_rejected(self, values):
        with pytest.raises(PydanticValidationError):
            ListPostsRequest(**values)
