# -*- encoding: utf-8 -*-
"""
Secondary index query variants.

- IntIndexQuery: exact match or range on an _int index (64-bit keys)
- BigIntIndexQuery: same, without the 64-bit bound
- BinIndexQuery: exact match or range on a _bin index, optional regex filter
- RawIndexQuery: explicit kind, keys already in wire form
"""

from idxquery.indexes.base import IndexQueryBuilder, SecondaryIndexQuery
from idxquery.indexes.bin_query import BinIndexQuery
from idxquery.indexes.int_query import BigIntIndexQuery, IntIndexQuery
from idxquery.indexes.raw_query import RawIndexQuery
from idxquery.indexes.validation import INT64_MAX, INT64_MIN

__all__ = [
    "IndexQueryBuilder",
    "SecondaryIndexQuery",
    "IntIndexQuery",
    "BigIntIndexQuery",
    "BinIndexQuery",
    "RawIndexQuery",
    "INT64_MAX",
    "INT64_MIN",
]
