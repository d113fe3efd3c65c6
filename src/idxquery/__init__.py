"""
idxquery - Secondary index query construction for key-value stores

Builds and validates secondary index (2i) lookups and translates them
into a canonical, wire-ready QueryDescriptor for a transport layer.
Nothing here talks to the network.

Components:
- idxquery.indexes: IntIndexQuery, BigIntIndexQuery, BinIndexQuery, RawIndexQuery
- idxquery.core: Location, BinaryValue, IndexKind, QueryDescriptor
- idxquery.parser / idxquery.translator: textual queries compiled to builders

Usage:
    from idxquery import IntIndexQuery, Location

    loc = Location("users", bucket_type="accounts")
    query = (
        IntIndexQuery.Builder(loc, "age", 18, 65)
        .with_max_results(100)
        .with_pagination_sort(True)
        .build()
    )
    descriptor = query.create_core_query()   # index_name == "age_int"

    # Or from text
    query = parse_query("FROM accounts.users WHERE age_int BETWEEN 18 AND 65 LIMIT 100")
"""

from idxquery.config import Settings
from idxquery.core import (
    BinaryValue,
    IndexKind,
    Location,
    QueryDescriptor,
    canonicalize,
)
from idxquery.exceptions import (
    IllegalConfiguration,
    IndexQueryError,
    MissingRequiredField,
    QueryParseError,
    TypeMismatchError,
    ValidationError,
)
from idxquery.indexes import (
    BigIntIndexQuery,
    BinIndexQuery,
    IntIndexQuery,
    RawIndexQuery,
    SecondaryIndexQuery,
)
from idxquery.translator import QueryCompiler, parse_query

__all__ = [
    # Queries
    "SecondaryIndexQuery",
    "IntIndexQuery",
    "BigIntIndexQuery",
    "BinIndexQuery",
    "RawIndexQuery",
    # Core types
    "BinaryValue",
    "IndexKind",
    "Location",
    "QueryDescriptor",
    "canonicalize",
    # Text queries
    "QueryCompiler",
    "parse_query",
    # Config
    "Settings",
    # Errors
    "IndexQueryError",
    "ValidationError",
    "IllegalConfiguration",
    "TypeMismatchError",
    "MissingRequiredField",
    "QueryParseError",
]

__version__ = "0.1.0"
