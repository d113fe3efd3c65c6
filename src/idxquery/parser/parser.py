"""
Index query parser - Lark-based parser for textual secondary index queries.

Parses query strings into IndexQueryExpression AST nodes that the
compiler turns into builder calls.
"""

import logging

from lark import Lark, Transformer
from lark.exceptions import LarkError, VisitError

from idxquery.exceptions import QueryParseError
from idxquery.parser.ast import (
    BucketRef,
    IndexPredicate,
    IndexQueryExpression,
    QueryModifiers,
)
from idxquery.parser.grammar import get_grammar

logger = logging.getLogger(__name__)


class IndexQueryTransformer(Transformer):
    """
    Lark Transformer that converts the parse tree to index query AST nodes.
    """

    # --- Terminal handling ---

    def NAME(self, token):
        return str(token)

    def STRING(self, token):
        # Remove surrounding quotes
        s = str(token)
        return s[1:-1]

    def INT(self, token):
        return int(token)

    def SIGNED_INT(self, token):
        return int(token)

    # --- Location ---

    def bucket_part(self, items):
        return items[0]

    def bucket_ref(self, items):
        if len(items) == 2:
            return BucketRef(bucket_name=items[1], bucket_type=items[0])
        return BucketRef(bucket_name=items[0])

    def from_clause(self, items):
        return items[0]

    # --- Keys ---

    def int_key(self, items):
        return items[0]

    def bin_key(self, items):
        return items[0]

    # --- Predicate ---

    def match_predicate(self, items):
        return IndexPredicate(match=items[0])

    def range_predicate(self, items):
        return IndexPredicate(start=items[0], end=items[1])

    def where_clause(self, items):
        return ("where", items[0], items[1])

    # --- Modifiers ---

    def limit_mod(self, items):
        return ("limit", items[0])

    def continuation_mod(self, items):
        return ("continuation", items[0])

    def sort_mod(self, _):
        return ("pagination_sort", True)

    def terms_mod(self, _):
        return ("return_terms", True)

    def filter_mod(self, items):
        return ("term_filter", items[0])

    # --- Top-level query ---

    def query(self, items):
        bucket = items[0]
        _, index_name, predicate = items[1]

        modifiers = QueryModifiers()
        seen = set()
        for name, value in items[2:]:
            if name in seen:
                raise QueryParseError(f"duplicate {name} modifier")
            seen.add(name)
            setattr(modifiers, name, value)

        return IndexQueryExpression(
            bucket=bucket,
            index_name=index_name,
            predicate=predicate,
            modifiers=modifiers,
        )

    def start(self, items):
        return items[0]


class IndexQueryParser:
    """
    Index query parser using Lark.

    Example:
        parser = IndexQueryParser()
        expr = parser.parse("FROM users WHERE age_int BETWEEN 18 AND 65")
    """

    def __init__(self):
        self._parser = Lark(
            get_grammar(),
            parser='lalr',
            transformer=IndexQueryTransformer(),
        )

    def parse(self, query_string: str) -> IndexQueryExpression:
        """
        Parse an index query string into an AST.

        Args:
            query_string: The query to parse

        Returns:
            IndexQueryExpression AST node

        Raises:
            QueryParseError: If the string is not a valid index query
        """
        try:
            result = self._parser.parse(query_string)
        except QueryParseError as e:
            e.query_string = query_string
            raise
        except VisitError as e:
            if isinstance(e.orig_exc, QueryParseError):
                e.orig_exc.query_string = query_string
                raise e.orig_exc from e
            raise QueryParseError(
                f"Invalid index query: {e.orig_exc}",
                query_string=query_string,
                original_error=e,
            ) from e
        except LarkError as e:
            raise QueryParseError(
                f"Invalid index query: {e}",
                query_string=query_string,
                original_error=e,
            ) from e

        logger.debug("Parsed index query on %s", result.index_name)
        return result


def parse(query_string: str) -> IndexQueryExpression:
    """
    Convenience function to parse an index query.

    Creates a parser instance and parses the query string.
    For repeated parsing, use IndexQueryParser directly for better performance.

    Args:
        query_string: The query to parse

    Returns:
        IndexQueryExpression AST node
    """
    parser = IndexQueryParser()
    return parser.parse(query_string)
