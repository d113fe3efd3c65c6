"""idxquery core value types - locations, byte strings, kinds, descriptors."""

from idxquery.core.binary import BinaryValue
from idxquery.core.descriptor import QueryDescriptor
from idxquery.core.kinds import IndexKind, canonicalize, split_canonical_name
from idxquery.core.location import Location

__all__ = [
    "BinaryValue",
    "IndexKind",
    "Location",
    "QueryDescriptor",
    "canonicalize",
    "split_canonical_name",
]
