# -*- encoding: utf-8 -*-
"""
Index kinds and index-name canonicalization.

A secondary index is either an integer index or a binary index. On the
wire the kind is carried by a suffix on the index name:

    "age"   + INTEGER -> "age_int"
    "email" + BINARY  -> "email_bin"
"""

from enum import Enum
from typing import Optional


class IndexKind(str, Enum):
    """Closed set of secondary index kinds."""
    INTEGER = "int"
    BINARY = "bin"

    @property
    def suffix(self) -> str:
        """Wire suffix appended to the index name."""
        return f"_{self.value}"


def canonicalize(index_name: str, kind: IndexKind) -> str:
    """
    Return the wire-level index name for index_name.

    Not idempotent: a name that already carries a suffix gets a second one.
    Builders call this exactly once, from build().

    Examples:
        >>> canonicalize("test_index", IndexKind.INTEGER)
        'test_index_int'
        >>> canonicalize("test_index", IndexKind.BINARY)
        'test_index_bin'
    """
    return index_name + kind.suffix


def split_canonical_name(name: str) -> tuple[str, Optional[IndexKind]]:
    """
    Split a wire-level index name into base name and kind.

    Returns:
        (base_name, kind), or (name, None) if name has no known suffix
        or the suffix is all there is.
    """
    for kind in IndexKind:
        if name.endswith(kind.suffix) and len(name) > len(kind.suffix):
            return name[: -len(kind.suffix)], kind
    return name, None
