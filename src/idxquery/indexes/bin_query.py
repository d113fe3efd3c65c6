# -*- encoding: utf-8 -*-
"""
Binary index queries.

Keys on a _bin index are byte strings. Text keys are encoded with the
query's charset (utf-8 unless configured otherwise). Binary indexes are
the only kind that accept a regex term filter.
"""

import codecs
from dataclasses import dataclass
from typing import Any, Optional

from idxquery.core.binary import BinaryValue
from idxquery.core.kinds import IndexKind
from idxquery.exceptions import IllegalConfiguration
from idxquery.indexes import validation
from idxquery.indexes.base import IndexQueryBuilder, SecondaryIndexQuery


@dataclass(frozen=True)
class BinIndexQuery(SecondaryIndexQuery):
    """
    Query against a _bin index.

    Attributes:
        charset: Encoding applied to str keys
    """
    charset: str = "utf-8"

    def _encode_key(self, value: Any) -> BinaryValue:
        return BinaryValue.create(value, self.charset)

    def _key_charset(self) -> str:
        return self.charset

    class Builder(IndexQueryBuilder):
        """Builder for BinIndexQuery. Keys must be str or bytes."""

        kind = IndexKind.BINARY

        def __init__(self, *args: Any, **kwargs: Any):
            super().__init__(*args, **kwargs)
            self._charset: Optional[str] = None

        def with_charset(self, charset: str) -> "BinIndexQuery.Builder":
            """Encode str keys with charset instead of the default."""
            self._charset = charset
            return self

        def _effective_charset(self) -> str:
            return self._charset or self._settings.default_charset

        def _check_key_values(self, kind: IndexKind) -> None:
            validation.check_key_values(kind, self._key_values())
            charset = self._effective_charset()
            try:
                codecs.lookup(charset)
            except LookupError:
                raise IllegalConfiguration(
                    f"unknown charset {charset!r}", option="charset"
                ) from None
            for option, value in self._key_values():
                if isinstance(value, str):
                    try:
                        value.encode(charset)
                    except UnicodeEncodeError as e:
                        raise IllegalConfiguration(
                            f"{option} cannot be encoded as {charset}: {e.reason}",
                            option=option,
                        ) from e

        def _extra_fields(self) -> dict[str, Any]:
            return {"charset": self._effective_charset()}

        def _query_type(self) -> type:
            return BinIndexQuery
