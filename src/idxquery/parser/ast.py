"""
Index query AST - dataclasses for parsed textual index queries.

The AST mirrors the surface syntax. Turning it into a built query,
including kind resolution and validation, is the compiler's job
(idxquery.translator).
"""

from dataclasses import dataclass, field
from typing import Optional, Union

KeyLiteral = Union[int, str]


@dataclass
class BucketRef:
    """
    Bucket named in the FROM clause.

    Represents: bucket or bucket_type.bucket
    """
    bucket_name: str
    bucket_type: Optional[str] = None


@dataclass
class IndexPredicate:
    """
    WHERE clause predicate.

    Either match is set (index = key) or both start and end are set
    (index BETWEEN start AND end).
    """
    match: Optional[KeyLiteral] = None
    start: Optional[KeyLiteral] = None
    end: Optional[KeyLiteral] = None

    @property
    def is_range(self) -> bool:
        return self.match is None

    @property
    def literals(self) -> list[KeyLiteral]:
        """All key literals in the predicate."""
        if self.is_range:
            return [self.start, self.end]
        return [self.match]


@dataclass
class QueryModifiers:
    """Optional trailing clauses."""
    limit: Optional[int] = None
    continuation: Optional[str] = None
    pagination_sort: bool = False
    return_terms: bool = False
    term_filter: Optional[str] = None


@dataclass
class IndexQueryExpression:
    """
    Complete parsed index query.

    index_name is exactly as written, suffix included when present.
    """
    bucket: BucketRef
    index_name: str
    predicate: IndexPredicate
    modifiers: QueryModifiers = field(default_factory=QueryModifiers)
