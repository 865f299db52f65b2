import pytest

from ulys import base32
from ulys.constants import ALPHABET, NO_VALUE, ULYS_LEN
from ulys.utils.errors import BufferTooSmallError, InvalidCharError, InvalidLengthError


def test_known_values():
    val = 0x4141_4141_4141_4141_4141_4141_4141_4141
    assert base32.decode("21850m2ga1850m2ga1850m2ga1") == val
    assert base32.encode(val) == "21850m2ga1850m2ga1850m2ga1"

    val = 0x4D4E_3850_5144_4A59_4542_3433_5A41_3756
    enc = "2d9rw50ma499cmaghm6dd42dtp"
    assert base32.encode(val) == enc
    assert base32.decode(enc) == val
    assert base32.decode(enc.upper()) == val


def test_extremes():
    assert base32.encode(0) == "0" * ULYS_LEN
    assert base32.encode((1 << 128) - 1) == "7" + "z" * 25
    assert base32.decode("7" + "z" * 25) == (1 << 128) - 1


def test_mixed_case_decodes_and_reencodes_lowercase():
    text = "01FkMg6GaG0pJaNmWfN84TnXcD"
    assert base32.encode(base32.decode(text)) == text.lower()


def test_round_trip(rng):
    for _ in range(200):
        value = rng.getrandbits(128)
        assert base32.decode(base32.encode(value)) == value


def test_length():
    for value in (0, (1 << 128) - 1, 0x0F0F_0F0F_0F0F_0F0F_0F0F_0F0F_0F0F_0F0F):
        assert len(base32.encode(value)) == ULYS_LEN

    for text in ("", "2d9rw50ma499cmaghm6dd42dt", "2d9rw50ma499cmaghm6dd42dtpP"):
        with pytest.raises(InvalidLengthError):
            base32.decode(text)


@pytest.mark.parametrize(
    "text",
    [
        "2d9rw50[a499cmaghm6dd42dtp",
        "2d9rw50la499cmaghm6dd42dtp",
        "2d9rw50ia499cmaghm6dd42dtp",
        "2d9rw50Oa499cmaghm6dd42dtp",
        "2d9rw50ua499cmaghm6dd42dtp",
        "2d9rw50 a499cmaghm6dd42dtp",
    ],
)
def test_invalid_chars(text):
    with pytest.raises(InvalidCharError):
        base32.decode(text)


def test_decode_accepts_bytes():
    assert base32.decode(b"21850M2GA1850M2GA1850M2GA1") == 0x4141_4141_4141_4141_4141_4141_4141_4141


def test_encoded_chars_are_in_alphabet(rng):
    for _ in range(20):
        assert set(base32.encode(rng.getrandbits(128))) <= set(ALPHABET)


def test_lookup_table():
    assert len(base32.LOOKUP) == 256
    for index, char in enumerate(ALPHABET):
        assert base32.LOOKUP[ord(char)] == index
        assert base32.LOOKUP[ord(char.upper())] == index
    for char in "ILOUilou!{[":
        assert base32.LOOKUP[ord(char)] == NO_VALUE


def test_encode_rejects_out_of_range():
    with pytest.raises(ValueError):
        base32.encode(1 << 128)
    with pytest.raises(ValueError):
        base32.encode(-1)


def test_encode_to_buffer():
    buffer = bytearray(32)
    with pytest.warns(DeprecationWarning):
        written = base32.encode_to(0x4141_4141_4141_4141_4141_4141_4141_4141, buffer)
    assert written == ULYS_LEN
    assert buffer[:ULYS_LEN].decode("ascii") == "21850m2ga1850m2ga1850m2ga1"


def test_encode_to_small_buffer():
    with pytest.warns(DeprecationWarning):
        with pytest.raises(BufferTooSmallError):
            base32.encode_to(0, bytearray(ULYS_LEN - 1))
