"""
Tests for the index query parser.

Tests the Lark-based parser for textual index queries.
"""

import pytest
from lark.exceptions import LarkError

from idxquery.exceptions import QueryParseError
from idxquery.parser import IndexQueryParser, parse
from idxquery.parser.ast import BucketRef, IndexQueryExpression


class TestIndexQueryParser:
    """Tests for IndexQueryParser class."""

    @pytest.fixture
    def parser(self):
        """Create a parser instance."""
        return IndexQueryParser()

    # --- FROM clause ---

    def test_parse_bucket_only(self, parser):
        result = parser.parse("FROM users WHERE age_int = 42")

        assert isinstance(result, IndexQueryExpression)
        assert result.bucket == BucketRef(bucket_name="users")
        assert result.bucket.bucket_type is None

    def test_parse_bucket_type_and_bucket(self, parser):
        result = parser.parse("FROM accounts.users WHERE age_int = 42")
        assert result.bucket == BucketRef(bucket_name="users", bucket_type="accounts")

    def test_parse_quoted_bucket(self, parser):
        result = parser.parse("FROM 'my type'.\"my bucket\" WHERE age_int = 1")
        assert result.bucket.bucket_type == "my type"
        assert result.bucket.bucket_name == "my bucket"

    def test_bucket_named_like_keyword(self, parser):
        result = parser.parse("FROM where WHERE age_int = 1")
        assert result.bucket.bucket_name == "where"

    # --- WHERE clause ---

    def test_parse_int_match(self, parser):
        result = parser.parse("FROM users WHERE age_int = 42")

        assert result.index_name == "age_int"
        assert result.predicate.match == 42
        assert not result.predicate.is_range

    def test_parse_negative_int(self, parser):
        result = parser.parse("FROM users WHERE delta_int = -7")
        assert result.predicate.match == -7

    def test_parse_string_match(self, parser):
        result = parser.parse("FROM users WHERE email_bin = 'alice@example.com'")
        assert result.predicate.match == "alice@example.com"

    def test_parse_range(self, parser):
        result = parser.parse("FROM users WHERE name_bin BETWEEN \"aaa\" AND \"zzz\"")

        assert result.predicate.is_range
        assert result.predicate.start == "aaa"
        assert result.predicate.end == "zzz"
        assert result.predicate.literals == ["aaa", "zzz"]

    def test_keywords_case_insensitive(self, parser):
        result = parser.parse("from users where age_int between 1 and 9 limit 3 sorted")

        assert result.predicate.start == 1
        assert result.predicate.end == 9
        assert result.modifiers.limit == 3
        assert result.modifiers.pagination_sort is True

    # --- Modifiers ---

    def test_no_modifiers(self, parser):
        mods = parser.parse("FROM users WHERE age_int = 1").modifiers

        assert mods.limit is None
        assert mods.continuation is None
        assert mods.pagination_sort is False
        assert mods.return_terms is False
        assert mods.term_filter is None

    def test_all_modifiers(self, parser):
        query = (
            "FROM users WHERE name_bin BETWEEN 'a' AND 'n' "
            "MATCHING '^al' AFTER 'g2gC' LIMIT 50 RETURN TERMS SORTED"
        )
        mods = parser.parse(query).modifiers

        assert mods.term_filter == "^al"
        assert mods.continuation == "g2gC"
        assert mods.limit == 50
        assert mods.return_terms is True
        assert mods.pagination_sort is True

    def test_comment_ignored(self, parser):
        result = parser.parse("FROM users WHERE age_int = 1 -- adults only")
        assert result.predicate.match == 1

    # --- Errors ---

    @pytest.mark.parametrize("query", [
        "",
        "FROM users",
        "SELECT * FROM users",
        "FROM users WHERE age_int BETWEEN 1",
        "FROM users WHERE age_int = 1 LIMIT -1",
        "FROM users WHERE age_int = 1 LIMIT",
        "FROM users WHERE age_int = 1.5",
    ])
    def test_invalid_query(self, parser, query):
        with pytest.raises(QueryParseError) as exc_info:
            parser.parse(query)
        assert exc_info.value.query_string == query
        assert isinstance(exc_info.value.original_error, LarkError)

    @pytest.mark.parametrize("query", [
        "FROM users WHERE age_int = 1 LIMIT 1 LIMIT 2",
        "FROM users WHERE age_int = 1 SORTED SORTED",
        "FROM users WHERE name_bin = 'a' MATCHING 'x' MATCHING 'y'",
        "FROM users WHERE age_int = 1 AFTER 'a' LIMIT 3 AFTER 'b'",
    ])
    def test_repeated_modifier(self, parser, query):
        with pytest.raises(QueryParseError, match="duplicate") as exc_info:
            parser.parse(query)
        assert exc_info.value.query_string == query


def test_parse_convenience_function():
    result = parse("FROM users WHERE age_int = 42")
    assert result.index_name == "age_int"
