"""Crockford-style Base32 codec for 128-bit values.

This module provides:
- encode: turns a 128-bit integer into its 26-character canonical string
- encode_to: the legacy encoder writing into a caller-supplied buffer
- decode: turns a 26-character string (any case) back into an integer
- LOOKUP: the 256-entry reverse table used by ``decode``

Nothing in here keeps state, so every function is safe to call from any thread.
"""

import warnings

from .constants import ALPHABET, MAX_VALUE, NO_VALUE, ULYS_LEN
from .utils.errors import BufferTooSmallError, InvalidCharError, InvalidLengthError


def _build_lookup():
    table = [NO_VALUE] * 256
    for index, char in enumerate(ALPHABET):
        table[ord(char)] = index
        table[ord(char.upper())] = index
    return tuple(table)


LOOKUP = _build_lookup()
_ALPHABET_BYTES = ALPHABET.encode("ascii")


def _check_range(value: int):
    if not 0 <= value <= MAX_VALUE:
        raise ValueError(f"{value} does not fit into 128 unsigned bits")


def encode(value: int) -> str:
    """Encodes a 128-bit integer as a lowercase 26-character string.

    The value is read as 130 bits (two leading zeros), five bits at a time,
    starting from the most significant end.

    Args:
        value (int): An integer in ``[0, 2**128)``

    Returns:
        str: The canonical string
    """
    _check_range(value)
    chars = []
    for _ in range(ULYS_LEN):
        chars.append(ALPHABET[value & 0x1F])
        value >>= 5
    return "".join(reversed(chars))


def encode_to(value: int, buffer) -> int:
    """Writes the canonical string as ASCII bytes into ``buffer``.

    Deprecated, use ``encode`` instead.

    Args:
        value (int): An integer in ``[0, 2**128)``
        buffer (bytearray | memoryview): A writable buffer of at least 26 bytes

    Returns:
        int: The amount of bytes written, always 26

    Raises:
        BufferTooSmallError: If the buffer is shorter than 26 bytes
    """
    warnings.warn(
        "encode_to is deprecated, use the infallible encode instead.",
        DeprecationWarning,
        stacklevel=2,
    )
    if len(buffer) < ULYS_LEN:
        raise BufferTooSmallError()
    _check_range(value)
    for i in range(ULYS_LEN):
        buffer[ULYS_LEN - 1 - i] = _ALPHABET_BYTES[value & 0x1F]
        value >>= 5
    return ULYS_LEN


def decode(encoded) -> int:
    """Decodes a 26-character string into a 128-bit integer.

    Upper and lower case are both accepted. Bits above the 128th are
    dropped, so a leading character past ``7`` wraps around.

    Args:
        encoded (str | bytes): The string to decode

    Returns:
        int: The decoded value

    Raises:
        InvalidLengthError: If the input is not 26 bytes long
        InvalidCharError: If the input has a byte outside the alphabet
    """
    if isinstance(encoded, str):
        encoded = encoded.encode("utf-8", errors="surrogatepass")
    if len(encoded) != ULYS_LEN:
        raise InvalidLengthError()

    value = 0
    for byte in encoded:
        digit = LOOKUP[byte]
        if digit == NO_VALUE:
            raise InvalidCharError()
        value = (value << 5) | digit
    return value & MAX_VALUE
