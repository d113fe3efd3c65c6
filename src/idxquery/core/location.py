"""Bucket address targeted by an index query."""

from dataclasses import dataclass

from idxquery.config import DEFAULT_BUCKET_TYPE


@dataclass(frozen=True)
class Location:
    """
    Bucket (and bucket type) an index query runs against.

    Treated as an opaque, already-validated value: the query layer only
    carries it and compares it by equality.
    """
    bucket_name: str
    bucket_type: str = DEFAULT_BUCKET_TYPE

    def __str__(self) -> str:
        return f"{self.bucket_type}/{self.bucket_name}"
