"""The Ulys identifier type.

This module provides:
- Ulys: a 128-bit lexicographically sortable identifier
- RandomSource: the protocol a random number generator has to satisfy

Of the 128 bits, the upper 48 are a Unix timestamp in milliseconds and the
lower 80 are random. Sorting identifiers as integers, as big-endian bytes or
as canonical strings all give the same order.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from random import SystemRandom
from typing import Optional, Protocol
from uuid import UUID

from . import base32, time_utils
from .constants import MAX_VALUE, RAND_BITS, RAND_MASK, TIME_BITS, TIME_MASK


class RandomSource(Protocol):
    """Anything that can produce ``k`` uniformly random bits."""

    def getrandbits(self, k: int) -> int: ...


@dataclass(frozen=True, order=True, slots=True)
class Ulys:
    """A unique 128-bit lexicographically sortable identifier.

    Canonically represented as a 26-character Base32 string.
    ``Ulys()`` is the nil identifier.
    """

    value: int = 0

    TIME_BITS = TIME_BITS
    RAND_BITS = RAND_BITS

    def __post_init__(self):
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"Ulys value must be an int, got {type(self.value).__name__}")
        if not 0 <= self.value <= MAX_VALUE:
            raise ValueError(f"{self.value} does not fit into 128 unsigned bits")

    @classmethod
    def from_parts(cls, timestamp_ms: int, random: int) -> Ulys:
        """Packs a timestamp and random bits together.

        Overflow bits in either argument are discarded.
        """
        return cls(((timestamp_ms & TIME_MASK) << RAND_BITS) | (random & RAND_MASK))

    @classmethod
    def nil(cls) -> Ulys:
        """The identifier with all 128 bits set to zero."""
        return cls(0)

    @classmethod
    def new(cls, source: Optional[RandomSource] = None) -> Ulys:
        """Creates a Ulys for the current time.

        Does not guarantee monotonic order, use a ``Generator`` for that.
        """
        return cls.from_datetime(time_utils.now(), source)

    @classmethod
    def from_datetime(cls, moment: datetime, source: Optional[RandomSource] = None) -> Ulys:
        """Creates a Ulys for ``moment`` with fresh random bits.

        Moments before the Unix epoch are clamped to it.

        Args:
            moment (datetime): The time to embed, naive values are read as UTC
            source (RandomSource): Where to draw random bits from,
                a ``SystemRandom`` if omitted
        """
        return cls.from_timestamp_ms(time_utils.to_millis(moment), source)

    @classmethod
    def from_timestamp_ms(cls, timestamp_ms: int, source: Optional[RandomSource] = None) -> Ulys:
        """Creates a Ulys for a raw millisecond timestamp with fresh random bits."""
        if source is None:
            source = SystemRandom()
        msb = ((timestamp_ms & TIME_MASK) << 16) | source.getrandbits(16)
        lsb = source.getrandbits(64)
        return cls.from_words((msb, lsb))

    @classmethod
    def from_string(cls, encoded) -> Ulys:
        """Decodes a canonical string, in any case.

        Raises:
            InvalidLengthError: If the string is not 26 characters long
            InvalidCharError: If the string has a character outside the alphabet
        """
        return cls(base32.decode(encoded))

    @classmethod
    def from_int(cls, value: int) -> Ulys:
        return cls(value)

    @classmethod
    def from_bytes(cls, data: bytes) -> Ulys:
        """Reads 16 big-endian bytes."""
        if len(data) != 16:
            raise ValueError(f"expected 16 bytes, got {len(data)}")
        return cls(int.from_bytes(data, "big"))

    @classmethod
    def from_words(cls, words: tuple[int, int]) -> Ulys:
        """Joins a ``(most significant, least significant)`` pair of 64-bit words."""
        msb, lsb = words
        if not (0 <= msb < 1 << 64 and 0 <= lsb < 1 << 64):
            raise ValueError("both words must fit into 64 unsigned bits")
        return cls((msb << 64) | lsb)

    @classmethod
    def from_uuid(cls, uuid: UUID) -> Ulys:
        """Reinterprets the bits of a UUID.

        No validation happens: a random UUID gives a Ulys with a meaningless timestamp.
        """
        return cls(uuid.int)

    @property
    def timestamp_ms(self) -> int:
        return self.value >> RAND_BITS

    @property
    def random(self) -> int:
        return self.value & RAND_MASK

    @property
    def datetime(self) -> datetime:
        """The creation time, accurate to a millisecond.

        Raises:
            OverflowError: If the timestamp lies past the year 9999
        """
        return time_utils.from_millis(self.timestamp_ms)

    def is_nil(self) -> bool:
        return self.value == 0

    def increment(self) -> Optional[Ulys]:
        """Adds one, as long as the carry stays out of the timestamp.

        Returns:
            Ulys: The next identifier, or None if the random bits are all ones
        """
        if self.value & RAND_MASK == RAND_MASK:
            return None
        return Ulys(self.value + 1)

    def to_string(self) -> str:
        return base32.encode(self.value)

    def to_bytes(self) -> bytes:
        return self.value.to_bytes(16, "big")

    def to_words(self) -> tuple[int, int]:
        return self.value >> 64, self.value & 0xFFFF_FFFF_FFFF_FFFF

    def to_uuid(self) -> UUID:
        """Reinterprets the bits as a UUID. The result is not a valid RFC 4122 UUID."""
        return UUID(int=self.value)

    def __str__(self):
        return self.to_string()

    def __int__(self):
        return self.value

    def __bytes__(self):
        return self.to_bytes()
