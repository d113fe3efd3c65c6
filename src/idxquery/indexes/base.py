# -*- encoding: utf-8 -*-
"""
Secondary index query base types.

A query is assembled with a mutable Builder and frozen by build():

    query = (
        IntIndexQuery.Builder(location, "age", 18, 65)
        .with_max_results(100)
        .with_pagination_sort(True)
        .build()
    )
    descriptor = query.create_core_query()

Builders accept either a single match value or a (start, end) pair,
positionally or as match=/start=/end= keywords. All cross-field rules
are checked once, in build(); see idxquery.indexes.validation.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from idxquery.config import Settings
from idxquery.core.binary import BinaryLike, BinaryValue
from idxquery.core.descriptor import QueryDescriptor
from idxquery.core.kinds import IndexKind, canonicalize
from idxquery.core.location import Location
from idxquery.indexes import validation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SecondaryIndexQuery:
    """
    Built, validated secondary index query.

    Instances come from a variant's Builder and are immutable. Key values
    are kept in the variant's native type (int for integer indexes, text
    or bytes for binary ones) and encoded when the descriptor is created.

    Attributes:
        location: Bucket the query targets
        index_name: Index name as given by the caller
        canonical_index_name: index_name plus the kind suffix
        kind: INTEGER or BINARY
        match: Key for an exact-match query
        range_start: Lower bound for a range query
        range_end: Upper bound for a range query
        continuation: Cursor from a previous page
        max_results: Page size
        pagination_sort: Ask for sorted results
        return_key_and_index: Return index values along with keys
        term_filter: Regex filter (binary indexes only)
    """
    location: Location
    index_name: str
    canonical_index_name: str
    kind: IndexKind
    match: Optional[Any] = None
    range_start: Optional[Any] = None
    range_end: Optional[Any] = None
    continuation: Optional[BinaryValue] = None
    max_results: Optional[int] = None
    pagination_sort: Optional[bool] = None
    return_key_and_index: bool = False
    term_filter: Optional[str] = None

    @property
    def is_range(self) -> bool:
        """True for a range query, False for an exact match."""
        return self.match is None

    def _encode_key(self, value: Any) -> BinaryValue:
        """Render a key value into its wire bytes."""
        return BinaryValue.create(value)

    def _key_charset(self) -> str:
        """Encoding of the key bytes, recorded on the descriptor."""
        return "utf-8"

    def create_core_query(self) -> QueryDescriptor:
        """
        Translate into the transport-facing QueryDescriptor.

        Pure and infallible: everything was validated by build().
        """
        if self.is_range:
            keys = {
                "range_start": self._encode_key(self.range_start),
                "range_end": self._encode_key(self.range_end),
            }
        else:
            keys = {"index_key": self._encode_key(self.match)}

        return QueryDescriptor(
            location=self.location,
            index_name=self.canonical_index_name,
            continuation=self.continuation,
            max_results=self.max_results,
            pagination_sort=bool(self.pagination_sort),
            return_key_and_index=self.return_key_and_index,
            term_filter=self.term_filter,
            charset=self._key_charset(),
            **keys,
        )


class IndexQueryBuilder(ABC):
    """
    Mutable accumulator for a secondary index query.

    Subclasses fix the index kind and supply the query class. Chained
    with_* calls only record values; validation happens in build().
    """

    kind: Optional[IndexKind] = None

    def __init__(
        self,
        location: Location,
        index_name: str,
        *values: Any,
        match: Any = None,
        start: Any = None,
        end: Any = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the builder.

        Args:
            location: Bucket to query
            index_name: Index name without kind suffix
            *values: One match value, or a start and an end value
            match: Match value (keyword form)
            start: Range start (keyword form)
            end: Range end (keyword form)
            settings: Defaults to Settings(); pass Settings.from_env()
                to pick up environment overrides

        Raises:
            TypeError: If more than two positional key values are given, or
                a key is given both positionally and by keyword
            TypeMismatchError: If a key value does not fit the index kind
        """
        if len(values) == 1:
            if match is not None:
                raise TypeError("match value given both positionally and by keyword")
            match = values[0]
        elif len(values) == 2:
            if start is not None or end is not None:
                raise TypeError("range given both positionally and by keyword")
            start, end = values
        elif len(values) > 2:
            raise TypeError(
                f"expected a match value or a start and end value, got {len(values)} values"
            )

        self._settings = settings or Settings()
        self._location = location
        self._index_name = index_name
        self._match = self._accept_key(match, "match")
        self._start = self._accept_key(start, "range_start")
        self._end = self._accept_key(end, "range_end")
        self._continuation: Optional[BinaryValue] = None
        self._max_results: Optional[int] = None
        self._pagination_sort: Optional[bool] = None
        self._return_key_and_index = False
        self._term_filter: Optional[str] = None

    def _accept_key(self, value: Any, option: str) -> Any:
        """Constructor-time key check; returns the value to store."""
        if value is not None:
            validation.ensure_key_type(self.kind, value, option)
        if isinstance(value, bytearray):
            value = bytes(value)
        return value

    # --- Options ---

    def with_continuation(self, continuation: Optional[BinaryLike]) -> "IndexQueryBuilder":
        """Resume from the cursor returned with a previous page. None clears it."""
        self._continuation = None if continuation is None else BinaryValue.create(continuation)
        return self

    def with_max_results(self, max_results: int) -> "IndexQueryBuilder":
        """Limit the page size. Must be positive; checked at build()."""
        self._max_results = max_results
        return self

    def with_pagination_sort(self, pagination_sort: bool) -> "IndexQueryBuilder":
        """Ask the server to sort results so pages are stable."""
        self._pagination_sort = pagination_sort
        return self

    def with_key_and_index(self, return_key_and_index: bool) -> "IndexQueryBuilder":
        """Return the matching index value together with each object key."""
        self._return_key_and_index = return_key_and_index
        return self

    def with_regex_term_filter(self, term_filter: str) -> "IndexQueryBuilder":
        """Filter index values server-side. Binary indexes only."""
        self._term_filter = term_filter
        return self

    # --- Build ---

    def _resolve_kind(self) -> IndexKind:
        return self.kind

    def _key_values(self) -> list[tuple[str, Any]]:
        return [
            ("match", self._match),
            ("range_start", self._start),
            ("range_end", self._end),
        ]

    def _check_key_values(self, kind: IndexKind) -> None:
        validation.check_key_values(kind, self._key_values())

    def _extra_fields(self) -> dict[str, Any]:
        """Variant-specific fields passed to the query class."""
        return {}

    @abstractmethod
    def _query_type(self) -> type:
        """Query class this builder produces."""
        ...

    def build(self) -> SecondaryIndexQuery:
        """
        Validate the accumulated options and freeze them into a query.

        Returns:
            Immutable query of the builder's variant

        Raises:
            MissingRequiredField: location, index name, or a key is missing
            IllegalConfiguration: options conflict with each other or with
                the index kind
            TypeMismatchError: a key value does not fit the index kind
        """
        validation.check_required(self._location, self._index_name)
        kind = self._resolve_kind()
        validation.check_match_or_range(self._match, self._start, self._end)
        self._check_key_values(kind)
        validation.check_term_filter(kind, self._term_filter)
        validation.check_max_results(self._max_results)

        query = self._query_type()(
            location=self._location,
            index_name=self._index_name,
            canonical_index_name=canonicalize(self._index_name, kind),
            kind=kind,
            match=self._match,
            range_start=self._start,
            range_end=self._end,
            continuation=self._continuation,
            max_results=self._max_results,
            pagination_sort=self._pagination_sort,
            return_key_and_index=self._return_key_and_index,
            term_filter=self._term_filter,
            **self._extra_fields(),
        )
        logger.debug(
            "Built %s %s query on %s",
            query.canonical_index_name,
            "range" if query.is_range else "match",
            query.location,
        )
        return query
