"""idxquery translator module - compiles parsed queries into builder calls."""

from idxquery.translator.compiler import QueryCompiler, parse_query

__all__ = [
    "QueryCompiler",
    "parse_query",
]
