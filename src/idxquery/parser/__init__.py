"""idxquery parser module - Grammar, AST nodes, and Lark parser."""

from idxquery.parser.ast import (
    BucketRef,
    IndexPredicate,
    IndexQueryExpression,
    QueryModifiers,
)
from idxquery.parser.parser import IndexQueryParser, parse

__all__ = [
    "IndexQueryParser",
    "parse",
    "BucketRef",
    "IndexPredicate",
    "IndexQueryExpression",
    "QueryModifiers",
]
