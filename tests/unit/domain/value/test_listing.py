"""Unit tests for post listing criteria."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from blog.domain.error import ValidationError
from blog.domain.value import (
    MAX_SEARCH_LENGTH,
    PostListCriteria,
    PostOrderField,
    SortDirection,
    TagName,
)


class TestPostOrderField:
    """Tests for the order_by whitelist."""

    @pytest.mark.parametrize(
        "value",
        ["published_at", "created_at", "updated_at", "title", "view_count", "like_count"],
    )
    def test_accepts_whitelisted_fields(self, value):
        assert PostOrderField.parse(value).value == value

    def test_defaults_to_published_at(self):
        assert PostOrderField.parse(None) == PostOrderField.PUBLISHED_AT

    @pytest.mark.parametrize(
        "value", ["drop_table", "id; DROP TABLE posts", "TITLE", "body", ""]
    )
    def test_rejects_anything_else(self, value):
        with pytest.raises(ValidationError, match="Invalid order_by"):
            PostOrderField.parse(value)

    def test_error_lists_allowed_values(self):
        with pytest.raises(ValidationError) as exc_info:
            PostOrderField.parse("drop_table")

        assert "like_count" in str(exc_info.value)


class TestSortDirection:
    """Tests for sort direction parsing."""

    def test_defaults_to_descending(self):
        assert SortDirection.parse(None) == SortDirection.DESC

    @pytest.mark.parametrize("value", ["asc", "ASC", "Asc"])
    def test_case_insensitive(self, value):
        assert SortDirection.parse(value) == SortDirection.ASC

    def test_rejects_unknown(self):
        with pytest.raises(ValidationError, match="sort_direction"):
            SortDirection.parse("sideways")


class TestPostListCriteria:
    """Tests for PostListCriteria.from_request."""

    def test_defaults(self):
        # Act
        criteria = PostListCriteria.from_request(offset=0, limit=20)

        # Assert
        assert criteria.order_by == PostOrderField.PUBLISHED_AT
        assert criteria.direction == SortDirection.DESC
        assert criteria.search is None
        assert criteria.tag is None

    def test_search_is_trimmed(self):
        criteria = PostListCriteria.from_request(offset=0, limit=20, search="  rust  ")

        assert criteria.search == "rust"

    @pytest.mark.parametrize("search", ["", "   ", "\t\n"])
    def test_blank_search_is_absent(self, search):
        criteria = PostListCriteria.from_request(offset=0, limit=20, search=search)

        assert criteria.search is None

    def test_search_length_limit_applies_after_trimming(self):
        padded = "  " + "a" * MAX_SEARCH_LENGTH + "  "

        criteria = PostListCriteria.from_request(offset=0, limit=20, search=padded)

        assert len(criteria.search) == MAX_SEARCH_LENGTH

    def test_search_too_long_is_rejected(self):
        with pytest.raises(ValidationError, match="at most 200"):
            PostListCriteria.from_request(
                offset=0, limit=20, search="a" * (MAX_SEARCH_LENGTH + 1)
            )

    def test_tag_becomes_tag_name(self):
        criteria = PostListCriteria.from_request(offset=0, limit=20, tag="rust")

        assert criteria.tag == TagName("rust")

    def test_blank_tag_is_rejected(self):
        with pytest.raises(ValidationError, match="Invalid tag"):
            PostListCriteria.from_request(offset=0, limit=20, tag="  ")

    @pytest.mark.parametrize(
        ("offset", "limit"), [(-1, 20), (10_001, 20), (0, 0), (0, 101)]
    )
    def test_bounds_are_enforced(self, offset, limit):
        with pytest.raises(PydanticValidationError):
            PostListCriteria.from_request(offset=offset, limit=limit)

    def test_criteria_are_immutable(self):
        criteria = PostListCriteria.from_request(offset=0, limit=20)

        with pytest.raises(PydanticValidationError):
            criteria.limit = 50


class TestRejectedFieldIsNamed:
    """Validation errors name the rejected field."""

    @pytest.mark.parametrize(
        ("kwargs", "field"),
        [
            ({"order_by": "nope"}, "order_by"),
            ({"sort_direction": "nope"}, "sort_direction"),
            ({"search": "a" * (MAX_SEARCH_LENGTH + 1)}, "search"),
            ({"tag": " "}, "tag"),
        ],
    )
    def test_field(self, kwargs, field):
        with pytest.raises(ValidationError) as exc_info:
            PostListCriteria.from_request(offset=0, limit=20, **kwargs)

        assert exc_info.value.field == field
