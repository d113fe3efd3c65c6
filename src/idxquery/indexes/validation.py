# -*- encoding: utf-8 -*-
"""
Build-time validation rules for secondary index queries.

Every rule is a plain function of the index kind and the accumulated
builder values. IndexQueryBuilder.build() runs them in this order and
stops at the first failure:

    required fields   location and index name present
    (a) key shape     exactly one of match / (start, end)
    (b) key kind      key values belong to the index kind
    (c) term filter   only binary indexes accept a regex filter
    (d) max results   positive integer when set
"""

import re
from typing import Any, Iterable, Optional

from idxquery.core.binary import BinaryValue
from idxquery.core.kinds import IndexKind
from idxquery.exceptions import (
    IllegalConfiguration,
    MissingRequiredField,
    TypeMismatchError,
)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_DECIMAL = re.compile(rb"[-+]?[0-9]+")


def is_integer_key(value: Any) -> bool:
    """True for int values; bool is rejected even though it subclasses int."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_binary_key(value: Any) -> bool:
    """True for text or byte-string values."""
    return isinstance(value, (BinaryValue, bytes, bytearray, str))


def ensure_key_type(kind: IndexKind, value: Any, option: str) -> None:
    """
    Check that value belongs to the key union case for kind.

    Raises:
        TypeMismatchError: If an INTEGER index gets a non-int or a BINARY
            index gets something other than text or bytes
    """
    if kind is IndexKind.INTEGER and not is_integer_key(value):
        raise TypeMismatchError(
            f"{option} for an integer index must be an int, "
            f"got {type(value).__name__}",
            option=option,
            value=value,
        )
    if kind is IndexKind.BINARY and not is_binary_key(value):
        raise TypeMismatchError(
            f"{option} for a binary index must be str or bytes, "
            f"got {type(value).__name__}",
            option=option,
            value=value,
        )


def ensure_raw_key(value: Any, option: str) -> None:
    """Raw queries take byte-string keys regardless of index kind."""
    if not is_binary_key(value):
        raise TypeMismatchError(
            f"{option} for a raw index query must be binary content, "
            f"got {type(value).__name__}",
            option=option,
            value=value,
        )


def check_required(location: Any, index_name: Optional[str]) -> None:
    """Location and a non-empty index name are mandatory."""
    if location is None:
        raise MissingRequiredField("location is required", option="location")
    if not index_name:
        raise MissingRequiredField("index name is required", option="index_name")


def check_match_or_range(match: Any, start: Any, end: Any) -> None:
    """
    Rule (a): exactly one of a match value or a complete range.

    Raises:
        IllegalConfiguration: If both a match value and a range bound are set
        MissingRequiredField: If nothing is set, or a range lacks a bound
    """
    has_range = start is not None or end is not None
    if match is not None and has_range:
        raise IllegalConfiguration(
            "match value and range cannot both be set", option="match"
        )
    if match is None and not has_range:
        raise MissingRequiredField(
            "either a match value or a range is required", option="match"
        )
    if has_range and start is None:
        raise MissingRequiredField("range start is required", option="range_start")
    if has_range and end is None:
        raise MissingRequiredField("range end is required", option="range_end")


def check_key_values(
    kind: IndexKind,
    values: Iterable[tuple[str, Any]],
    bounded: bool = True,
) -> None:
    """
    Rule (b): key values agree with the index kind.

    Args:
        kind: Index kind of the query
        values: (option name, value) pairs; None values are skipped
        bounded: Keep integer keys within the signed 64-bit range
    """
    for option, value in values:
        if value is None:
            continue
        ensure_key_type(kind, value, option)
        if kind is IndexKind.INTEGER and bounded and not INT64_MIN <= value <= INT64_MAX:
            raise IllegalConfiguration(
                f"{option} {value} is outside the 64-bit integer range",
                option=option,
            )


def check_raw_integer_values(values: Iterable[tuple[str, Optional[BinaryValue]]]) -> None:
    """Strict mode for raw INTEGER queries: keys must be decimal digits."""
    for option, value in values:
        if value is not None and not _DECIMAL.fullmatch(value.value):
            raise IllegalConfiguration(
                f"{option} {value.value!r} is not a decimal integer",
                option=option,
            )


def check_term_filter(kind: IndexKind, term_filter: Optional[str]) -> None:
    """Rule (c): regex term filters only apply to binary indexes."""
    if term_filter is not None and kind is not IndexKind.BINARY:
        raise IllegalConfiguration(
            "regex term filter is only valid on a binary (_bin) index",
            option="term_filter",
        )


def check_max_results(max_results: Any) -> None:
    """Rule (d): max results, if set, is a positive int."""
    if max_results is None:
        return
    if not is_integer_key(max_results) or max_results <= 0:
        raise IllegalConfiguration(
            f"max results must be a positive integer, got {max_results!r}",
            option="max_results",
        )
