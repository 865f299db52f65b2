"""Errors tailored for this project.

This module provides:
- DecodeError: a base error for strings that can't be turned into a Ulys
- InvalidLengthError: the string is not 26 characters long
- InvalidCharError: the string has a character outside the alphabet
- EncodeError: a base error for the legacy buffer encoder
- BufferTooSmallError: the destination buffer can't hold 26 bytes
- MonotonicError: a base error for the monotonic generator
- MonotonicOverflowError: the random bits would overflow into the timestamp
"""


class DecodeError(ValueError):
    """A string could not be decoded into a Ulys."""

class InvalidLengthError(DecodeError):
    """The string is not exactly 26 characters long."""

    def __init__(self, message="invalid length"):
        super().__init__(message)

class InvalidCharError(DecodeError):
    """The string contains a character outside the Base32 alphabet."""

    def __init__(self, message="invalid character"):
        super().__init__(message)

class EncodeError(ValueError):
    """A Ulys could not be written into a buffer."""

class BufferTooSmallError(EncodeError):
    """The destination buffer is shorter than 26 bytes."""

    def __init__(self, message="buffer too small"):
        super().__init__(message)

class MonotonicError(RuntimeError):
    """A monotonic Ulys could not be generated."""

class MonotonicOverflowError(MonotonicError):
    """The random bits would overflow into the next millisecond.

    The generator is left untouched, so retrying after the clock ticks is safe.
    """

    def __init__(self, message="Ulys random bits would overflow"):
        super().__init__(message)
