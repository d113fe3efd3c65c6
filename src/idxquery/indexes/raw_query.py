# -*- encoding: utf-8 -*-
"""
Raw index queries.

A RawIndexQuery takes the index kind explicitly and keys that are
already in wire form, which is what a caller has when re-issuing a query
built from a previous response. Keys are placed on the descriptor
byte-for-byte.

For INTEGER raw queries the keys are not checked for numeric shape
unless strict mode is on (Builder(strict=True), or settings from
Settings.from_env() with IDXQUERY_STRICT_RAW_INTEGERS set); without it a malformed number is only
rejected by the server.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union

from idxquery.core.binary import BinaryValue
from idxquery.core.kinds import IndexKind
from idxquery.core.location import Location
from idxquery.exceptions import IllegalConfiguration, MissingRequiredField
from idxquery.indexes import validation
from idxquery.indexes.base import IndexQueryBuilder, SecondaryIndexQuery


@dataclass(frozen=True)
class RawIndexQuery(SecondaryIndexQuery):
    """Query whose keys are opaque BinaryValues."""

    class Builder(IndexQueryBuilder):
        """
        Builder for RawIndexQuery.

        Example:
            >>> RawIndexQuery.Builder(
            ...     loc, "test_index", IndexKind.INTEGER, BinaryValue.create("42")
            ... ).build()
        """

        def __init__(
            self,
            location: Location,
            index_name: str,
            kind: Union[IndexKind, str, None],
            *values: Any,
            strict: Optional[bool] = None,
            **kwargs: Any,
        ):
            self._kind_arg = kind
            super().__init__(location, index_name, *values, **kwargs)
            self._strict = self._settings.strict_raw_integers if strict is None else strict

        def _accept_key(self, value: Any, option: str) -> Optional[BinaryValue]:
            if value is None:
                return None
            validation.ensure_raw_key(value, option)
            return BinaryValue.create(value)

        def _resolve_kind(self) -> IndexKind:
            if self._kind_arg is None:
                raise MissingRequiredField("index kind is required", option="kind")
            try:
                return IndexKind(self._kind_arg)
            except ValueError:
                raise IllegalConfiguration(
                    f"unknown index kind {self._kind_arg!r}", option="kind"
                ) from None

        def _check_key_values(self, kind: IndexKind) -> None:
            if kind is IndexKind.INTEGER and self._strict:
                validation.check_raw_integer_values(self._key_values())

        def _query_type(self) -> type:
            return RawIndexQuery
