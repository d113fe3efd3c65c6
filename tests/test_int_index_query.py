# -*- encoding: utf-8 -*-
"""
Tests for integer index queries.

Covers IntIndexQuery and BigIntIndexQuery builders and their descriptors.
"""

import dataclasses

import pytest

from idxquery import (
    BigIntIndexQuery,
    BinaryValue,
    IllegalConfiguration,
    IndexKind,
    IntIndexQuery,
    Location,
    MissingRequiredField,
    TypeMismatchError,
)
from idxquery.indexes import INT64_MAX, INT64_MIN

INT32_MAX = 2 ** 31 - 1


@pytest.fixture
def loc():
    return Location("bucket_name", "bucket_type")


class TestIntIndexQueryMatch:
    """Exact-match integer queries."""

    def test_builds_correctly(self, loc):
        """All options carry through to the descriptor unchanged."""
        query = (
            IntIndexQuery.Builder(loc, "test_index", INT64_MAX)
            .with_key_and_index(True)
            .with_continuation(BinaryValue.create("continuation"))
            .with_max_results(INT32_MAX)
            .with_pagination_sort(True)
            .build()
        )

        core = query.create_core_query()

        assert core.location == loc
        assert core.index_name == "test_index_int"
        assert int(str(core.index_key)) == INT64_MAX
        assert core.range_start is None
        assert core.range_end is None
        assert core.continuation == BinaryValue.create("continuation")
        assert core.max_results == INT32_MAX
        assert core.pagination_sort is True
        assert core.return_key_and_index is True
        assert core.term_filter is None

    def test_defaults(self, loc):
        core = IntIndexQuery.Builder(loc, "age", 42).build().create_core_query()
        assert core.continuation is None
        assert core.max_results is None
        assert core.pagination_sort is False
        assert core.return_key_and_index is False

    @pytest.mark.parametrize("value", [0, -1, 17, INT64_MIN, INT64_MAX])
    def test_key_decimal_round_trip(self, loc, value):
        core = IntIndexQuery.Builder(loc, "age", value).build().create_core_query()
        assert int(str(core.index_key)) == value

    def test_keyword_match(self, loc):
        query = IntIndexQuery.Builder(loc, "age", match=7).build()
        assert query.match == 7
        assert not query.is_range

    def test_built_query_is_immutable(self, loc):
        query = IntIndexQuery.Builder(loc, "age", 7).build()
        assert query.kind is IndexKind.INTEGER
        assert query.index_name == "age"
        assert query.canonical_index_name == "age_int"
        with pytest.raises(dataclasses.FrozenInstanceError):
            query.max_results = 10

    def test_create_core_query_is_repeatable(self, loc):
        query = IntIndexQuery.Builder(loc, "age", 7).with_max_results(3).build()
        assert query.create_core_query() == query.create_core_query()


class TestIntIndexQueryRange:
    """Range integer queries."""

    def test_builds_correctly(self, loc):
        query = (
            IntIndexQuery.Builder(loc, "test_index", INT64_MIN, INT64_MAX)
            .with_key_and_index(True)
            .with_continuation(BinaryValue.create("continuation"))
            .with_max_results(INT32_MAX)
            .with_pagination_sort(True)
            .build()
        )

        core = query.create_core_query()

        assert core.location == loc
        assert core.index_name == "test_index_int"
        assert core.index_key is None
        assert int(str(core.range_start)) == INT64_MIN
        assert int(str(core.range_end)) == INT64_MAX
        assert core.continuation == BinaryValue.create("continuation")
        assert core.max_results == INT32_MAX
        assert core.pagination_sort is True
        assert core.return_key_and_index is True
        assert core.is_range

    def test_keyword_range(self, loc):
        query = IntIndexQuery.Builder(loc, "age", start=1, end=5).build()
        assert (query.range_start, query.range_end) == (1, 5)

    def test_term_filter_rejected(self, loc):
        """A regex term filter is never valid on an _int index."""
        builder = (
            IntIndexQuery.Builder(loc, "test_index", INT64_MIN, INT64_MAX)
            .with_regex_term_filter("filter")
        )
        with pytest.raises(IllegalConfiguration) as exc_info:
            builder.build()
        assert exc_info.value.option == "term_filter"

    @pytest.mark.parametrize("configure", [
        lambda b: b,
        lambda b: b.with_max_results(10),
        lambda b: b.with_pagination_sort(True).with_key_and_index(True),
        lambda b: b.with_continuation(b"c").with_max_results(1),
    ])
    def test_term_filter_rejected_with_any_options(self, loc, configure):
        builder = configure(IntIndexQuery.Builder(loc, "age", 7))
        builder.with_regex_term_filter(".*")
        with pytest.raises(IllegalConfiguration):
            builder.build()

    def test_term_filter_stored_until_build(self, loc):
        """Setting the filter does not raise; build() does."""
        builder = IntIndexQuery.Builder(loc, "age", 7)
        assert builder.with_regex_term_filter("x") is builder


class TestIntIndexQueryErrors:
    """Constructor and build errors."""

    @pytest.mark.parametrize("value", ["42", b"42", 4.2, True])
    def test_wrong_key_type(self, loc, value):
        with pytest.raises(TypeMismatchError) as exc_info:
            IntIndexQuery.Builder(loc, "age", value)
        assert exc_info.value.option == "match"

    def test_wrong_range_end_type(self, loc):
        with pytest.raises(TypeMismatchError) as exc_info:
            IntIndexQuery.Builder(loc, "age", 1, "9")
        assert exc_info.value.option == "range_end"

    def test_type_mismatch_is_type_error(self, loc):
        with pytest.raises(TypeError):
            IntIndexQuery.Builder(loc, "age", "not a number")

    @pytest.mark.parametrize("value", [INT64_MAX + 1, INT64_MIN - 1])
    def test_out_of_64_bit_range(self, loc, value):
        with pytest.raises(IllegalConfiguration):
            IntIndexQuery.Builder(loc, "age", value).build()

    def test_too_many_positional_keys(self, loc):
        with pytest.raises(TypeError):
            IntIndexQuery.Builder(loc, "age", 1, 2, 3)

    def test_duplicate_match(self, loc):
        with pytest.raises(TypeError):
            IntIndexQuery.Builder(loc, "age", 1, match=2)


class TestBigIntIndexQuery:
    """Unbounded integer queries."""

    def test_accepts_values_beyond_64_bits(self, loc):
        big = 2 ** 100
        query = BigIntIndexQuery.Builder(loc, "counter", -big, big).build()
        core = query.create_core_query()

        assert isinstance(query, BigIntIndexQuery)
        assert isinstance(query, IntIndexQuery)
        assert core.index_name == "counter_int"
        assert int(str(core.range_start)) == -big
        assert int(str(core.range_end)) == big

    def test_still_rejects_term_filter(self, loc):
        builder = BigIntIndexQuery.Builder(loc, "counter", 1).with_regex_term_filter("x")
        with pytest.raises(IllegalConfiguration):
            builder.build()

    def test_still_rejects_strings(self, loc):
        with pytest.raises(TypeMismatchError):
            BigIntIndexQuery.Builder(loc, "counter", "1")

    def test_missing_location(self):
        with pytest.raises(MissingRequiredField):
            BigIntIndexQuery.Builder(None, "counter", 1).build()
