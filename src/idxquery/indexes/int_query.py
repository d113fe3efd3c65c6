# -*- encoding: utf-8 -*-
"""
Integer index queries.

IntIndexQuery keys are signed 64-bit integers, the range the store uses
for _int indexes. BigIntIndexQuery lifts that bound for callers whose
index values are arbitrary-precision integers.

Example:
    >>> loc = Location("users", "accounts")
    >>> query = IntIndexQuery.Builder(loc, "age", 18, 65).build()
    >>> query.create_core_query().index_name
    'age_int'
"""

from dataclasses import dataclass

from idxquery.core.binary import BinaryValue
from idxquery.core.kinds import IndexKind
from idxquery.indexes import validation
from idxquery.indexes.base import IndexQueryBuilder, SecondaryIndexQuery


@dataclass(frozen=True)
class IntIndexQuery(SecondaryIndexQuery):
    """Query against an _int index with 64-bit integer keys."""

    def _encode_key(self, value: int) -> BinaryValue:
        return BinaryValue.create(str(value))

    class Builder(IndexQueryBuilder):
        """Builder for IntIndexQuery. Keys must be int."""

        kind = IndexKind.INTEGER

        def _query_type(self) -> type:
            return IntIndexQuery


@dataclass(frozen=True)
class BigIntIndexQuery(IntIndexQuery):
    """Query against an _int index with unbounded integer keys."""

    class Builder(IntIndexQuery.Builder):
        """Builder for BigIntIndexQuery. Keys must be int, any magnitude."""

        def _check_key_values(self, kind: IndexKind) -> None:
            validation.check_key_values(kind, self._key_values(), bounded=False)

        def _query_type(self) -> type:
            return BigIntIndexQuery
