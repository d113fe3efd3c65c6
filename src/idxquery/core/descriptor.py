# -*- encoding: utf-8 -*-
"""
QueryDescriptor - the wire-ready form of a secondary index query.

A descriptor is what the transport layer serializes. It is a flat,
already-validated projection of a built query: canonical index name,
either a single key or a (start, end) pair as opaque byte strings, and
the paging options.
"""

from dataclasses import dataclass
from typing import Any, Optional

from idxquery.core.binary import BinaryValue
from idxquery.core.location import Location


@dataclass(frozen=True)
class QueryDescriptor:
    """
    Immutable transport-facing query.

    Exactly one of index_key or (range_start, range_end) is set.

    Attributes:
        location: Bucket the query targets
        index_name: Canonical index name (e.g. "age_int")
        index_key: Key for an exact-match query
        range_start: Inclusive lower bound for a range query
        range_end: Inclusive upper bound for a range query
        continuation: Cursor from a previous page, or None
        max_results: Page size, or None for the server default
        pagination_sort: Ask the server to sort results
        return_key_and_index: Return index values alongside object keys
        term_filter: Regex applied server-side to binary index values
        charset: Encoding the key bytes were produced with
    """
    location: Location
    index_name: str
    index_key: Optional[BinaryValue] = None
    range_start: Optional[BinaryValue] = None
    range_end: Optional[BinaryValue] = None
    continuation: Optional[BinaryValue] = None
    max_results: Optional[int] = None
    pagination_sort: bool = False
    return_key_and_index: bool = False
    term_filter: Optional[str] = None
    charset: str = "utf-8"

    @property
    def is_range(self) -> bool:
        """True for a range query, False for an exact match."""
        return self.index_key is None

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to a plain dictionary.

        Keys are decoded with the descriptor charset and the continuation
        as utf-8, both losslessly (see BinaryValue.to_string); absent
        options are omitted.
        """
        d: dict[str, Any] = {
            "bucket_type": self.location.bucket_type,
            "bucket": self.location.bucket_name,
            "index": self.index_name,
            "pagination_sort": self.pagination_sort,
            "return_terms": self.return_key_and_index,
        }
        if self.index_key is not None:
            d["key"] = self.index_key.to_string(self.charset)
        else:
            d["range_min"] = self.range_start.to_string(self.charset)
            d["range_max"] = self.range_end.to_string(self.charset)
        if self.continuation is not None:
            d["continuation"] = str(self.continuation)
        if self.max_results is not None:
            d["max_results"] = self.max_results
        if self.term_filter is not None:
            d["term_regex"] = self.term_filter
        return d
