"""Layout and alphabet constants shared by the codec and the identifier.

This module provides:
- ULYS_LEN: the length of a canonical string
- TIME_BITS, RAND_BITS: widths of the timestamp and random fields
- TIME_MASK, RAND_MASK, MAX_VALUE: right-aligned bitmasks
- ALPHABET: the Crockford-style Base32 alphabet, lowercase
"""

ULYS_LEN = 26

TIME_BITS = 48
RAND_BITS = 80
TOTAL_BITS = TIME_BITS + RAND_BITS  # 128

TIME_MASK = (1 << TIME_BITS) - 1
RAND_MASK = (1 << RAND_BITS) - 1
MAX_VALUE = (1 << TOTAL_BITS) - 1

# no i, l, o, u
ALPHABET = "0123456789abcdefghjkmnpqrstvwxyz"
NO_VALUE = 255
