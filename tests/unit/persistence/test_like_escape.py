"""Unit tests for LIKE pattern escaping."""

import pytest
from sqlalchemy import create_engine, literal, select

from blog.persistence.query import LIKE_ESCAPE, contains_pattern, escape_like


@pytest.fixture(scope="module")
def sqlite_engine():
    """SQLite engine used only to evaluate LIKE expressions."""
    engine = create_engine("sqlite://")
    yield engine
    engine.dispose()


def _matches(engine, value: str, search: str) -> bool:
    stmt = select(literal(value).like(contains_pattern(search), escape=LIKE_ESCAPE))
    with engine.connect() as connection:
        return bool(connection.execute(stmt).scalar())


class TestEscapeLike:
    """Tests for escape_like."""

    def test_plain_text_is_unchanged(self):
        """Text without metacharacters passes through."""
        assert escape_like("hello world") == "hello world"

    def test_percent_and_underscore_are_escaped(self):
        """Wildcards are prefixed with the escape character."""
        assert escape_like("50% off_sale") == "50\\% off\\_sale"

    def test_escape_character_is_escaped_first(self):
        """A backslash becomes two, and is not double-escaped afterwards."""
        assert escape_like("a\\%") == "a\\\\\\%"

    def test_empty_string(self):
        assert escape_like("") == ""

    def test_contains_pattern_wraps_in_wildcards(self):
        """contains_pattern matches the text anywhere."""
        assert contains_pattern("a_b") == "%a\\_b%"


class TestEscapedPatternsMatchLiterally:
    """Escaped patterns evaluated by a real LIKE implementation."""

    def test_percent_matches_only_a_literal_percent(self, sqlite_engine):
        """'50%' finds '50% off' but not '500 off'."""
        assert _matches(sqlite_engine, "Get 50% off today", "50%")
        assert not _matches(sqlite_engine, "Get 500 off today", "50%")

    def test_underscore_matches_only_a_literal_underscore(self, sqlite_engine):
        """'a_c' is not a single-character wildcard."""
        assert _matches(sqlite_engine, "snake a_c case", "a_c")
        assert not _matches(sqlite_engine, "abc", "a_c")

    def test_backslash_matches_literally(self, sqlite_engine):
        r"""'\t' means a backslash followed by t."""
        assert _matches(sqlite_engine, "C:\\temp", "\\t")
        assert not _matches(sqlite_engine, "tab", "\\t")

    def test_lone_percent_does_not_match_everything(self, sqlite_engine):
        assert not _matches(sqlite_engine, "no symbols here", "%")

    @pytest.mark.parametrize("text", ["50% off_sale", "\\", "%%", "__", "a\\_b%c"])
    def test_text_always_matches_itself(self, sqlite_engine, text):
        """Any text, escaped, matches a value containing it."""
        assert _matches(sqlite_engine, f"before {text} after", text)
