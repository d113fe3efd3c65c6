"""
Index query compiler - turns parsed index queries into built queries.

The compiler does not validate anything itself. It picks the builder
variant, replays the modifiers as builder calls, and lets build() run
the same rules a hand-written builder chain would.

Kind resolution:
    age_int  -> INTEGER, base name "age"
    name_bin -> BINARY, base name "name"
    other    -> INTEGER if every key literal is an int, else BINARY
"""

import logging
from typing import Optional

from idxquery.config import Settings
from idxquery.core.kinds import IndexKind, split_canonical_name
from idxquery.core.location import Location
from idxquery.indexes import (
    BigIntIndexQuery,
    BinIndexQuery,
    IndexQueryBuilder,
    IntIndexQuery,
    SecondaryIndexQuery,
)
from idxquery.indexes.validation import INT64_MAX, INT64_MIN, is_integer_key
from idxquery.parser.ast import IndexQueryExpression, IndexPredicate
from idxquery.parser.parser import IndexQueryParser

logger = logging.getLogger(__name__)


class QueryCompiler:
    """
    Compiles IndexQueryExpression ASTs into SecondaryIndexQuery objects.

    Example:
        compiler = QueryCompiler()
        query = compiler.compile(parse("FROM users WHERE age_int = 42"))
        descriptor = query.create_core_query()
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or Settings()

    def resolve_kind(self, expression: IndexQueryExpression) -> tuple[str, IndexKind]:
        """
        Determine base index name and kind for an expression.

        Returns:
            (base_name, kind)
        """
        base_name, kind = split_canonical_name(expression.index_name)
        if kind is None:
            literals = expression.predicate.literals
            if all(is_integer_key(v) for v in literals):
                kind = IndexKind.INTEGER
            else:
                kind = IndexKind.BINARY
        return base_name, kind

    def location_for(self, expression: IndexQueryExpression) -> Location:
        bucket = expression.bucket
        return Location(
            bucket_name=bucket.bucket_name,
            bucket_type=bucket.bucket_type or self._settings.default_bucket_type,
        )

    def builder_for(self, expression: IndexQueryExpression) -> IndexQueryBuilder:
        """
        Create the builder that the expression compiles to, modifiers applied.

        Raises:
            TypeMismatchError: If a key literal does not fit the index kind
        """
        base_name, kind = self.resolve_kind(expression)
        location = self.location_for(expression)
        predicate = expression.predicate

        if kind is IndexKind.BINARY:
            builder_type = BinIndexQuery.Builder
        elif _needs_big_int(predicate):
            builder_type = BigIntIndexQuery.Builder
        else:
            builder_type = IntIndexQuery.Builder

        if predicate.is_range:
            builder = builder_type(
                location, base_name, predicate.start, predicate.end,
                settings=self._settings,
            )
        else:
            builder = builder_type(
                location, base_name, predicate.match, settings=self._settings
            )

        mods = expression.modifiers
        if mods.limit is not None:
            builder.with_max_results(mods.limit)
        if mods.continuation is not None:
            builder.with_continuation(mods.continuation)
        if mods.pagination_sort:
            builder.with_pagination_sort(True)
        if mods.return_terms:
            builder.with_key_and_index(True)
        if mods.term_filter is not None:
            builder.with_regex_term_filter(mods.term_filter)
        return builder

    def compile(self, expression: IndexQueryExpression) -> SecondaryIndexQuery:
        """
        Compile an expression into a built query.

        Raises:
            ValidationError: Whatever build() raises for the equivalent
                builder chain
        """
        query = self.builder_for(expression).build()
        logger.debug(
            "Compiled %s to %s", expression.index_name, type(query).__name__
        )
        return query


def _needs_big_int(predicate: IndexPredicate) -> bool:
    return any(
        is_integer_key(v) and not INT64_MIN <= v <= INT64_MAX
        for v in predicate.literals
    )


def parse_query(query_string: str, settings: Optional[Settings] = None) -> SecondaryIndexQuery:
    """
    Parse and compile a textual index query in one call.

    Args:
        query_string: e.g. "FROM users WHERE age_int BETWEEN 18 AND 65"
        settings: Defaults to Settings(); pass Settings.from_env() to
            pick up environment overrides

    Returns:
        Built query, ready for create_core_query()

    Raises:
        QueryParseError: If the text does not parse
        ValidationError: If the query it describes is not valid
    """
    expression = IndexQueryParser().parse(query_string)
    return QueryCompiler(settings).compile(expression)
