"""
Opaque byte strings.

Index keys and continuation tokens travel to the transport as raw bytes.
BinaryValue wraps them so they compare by content and have a stable
textual form.
"""

from dataclasses import dataclass
from typing import Union

BinaryLike = Union["BinaryValue", bytes, bytearray, str]


@dataclass(frozen=True)
class BinaryValue:
    """
    Immutable byte string.

    Example:
        >>> bv = BinaryValue.create("continuation")
        >>> str(bv)
        'continuation'
        >>> bv == BinaryValue.create(b"continuation")
        True
    """
    value: bytes

    @classmethod
    def create(cls, data: BinaryLike, charset: str = "utf-8") -> "BinaryValue":
        """
        Wrap str or bytes content.

        Args:
            data: Text (encoded with charset), bytes, or a BinaryValue
            charset: Encoding used when data is a str

        Returns:
            BinaryValue holding the bytes

        Raises:
            TypeError: If data is not text or bytes
        """
        if isinstance(data, BinaryValue):
            return data
        if isinstance(data, str):
            return cls(data.encode(charset))
        if isinstance(data, (bytes, bytearray)):
            return cls(bytes(data))
        raise TypeError(
            f"BinaryValue requires str or bytes, got {type(data).__name__}"
        )

    def to_string(self, charset: str = "utf-8", errors: str = "surrogateescape") -> str:
        """
        Decode the bytes using charset.

        Undecodable bytes become lone surrogates by default, so
        text.encode(charset, "surrogateescape") gives the original bytes back.
        """
        return self.value.decode(charset, errors)

    def __str__(self) -> str:
        return self.to_string()

    def __bytes__(self) -> bytes:
        return self.value

    def __len__(self) -> int:
        return len(self.value)
