import pytest
from hypothesis import given
from hypothesis import strategies as st

from hpackkit import huffman
from hpackkit.integer import encode_string_length
from hpackkit.constants import StringFlag
from hpackkit.literal import DecodedString, decode


def _huffman_pack(data: bytes) -> bytes:
    bits = "".join(
        f"{huffman.encode(b).code >> (32 - huffman.encode(b).bit_length):0{huffman.encode(b).bit_length}b}"
        for b in data
    )
    if len(bits) % 8:
        bits += "1" * (8 - len(bits) % 8)
    return bytes(int(bits[i : i + 8], 2) for i in range(0, len(bits), 8))


def test_rfc_huffman_example():
    encoded = bytes.fromhex("8cf1e3c2e5f23a6ba0ab90f4ff")
    result = decode(encoded)
    assert result == DecodedString(len(encoded), b"www.example.com")


def test_plain_literal():
    result = decode(b"\x03abcXYZ")
    assert result.value == b"abc"
    assert result.used_bytes == 4


def test_empty_plain_literal():
    result = decode(b"\x00")
    assert result.value == b""
    assert result.used_bytes == 1


def test_empty_input_raises():
    with pytest.raises(ValueError):
        decode(b"")


def test_short_input_raises():
    with pytest.raises(ValueError):
        decode(b"\x05ab")


def test_invalid_huffman_raises():
    with pytest.raises(ValueError):
        decode(b"\x81\x00")


def test_long_plain_literal_uses_multibyte_length():
    payload = b"x" * 300
    encoded = encode_string_length(StringFlag.INPLACE, len(payload)) + payload
    result = decode(encoded)
    assert result.value == payload
    assert result.used_bytes == len(encoded)


@given(st.binary(max_size=64))
def test_plain_round_trip(payload):
    encoded = encode_string_length(StringFlag.INPLACE, len(payload)) + payload
    result = decode(encoded + b"tail")
    assert result.value == payload
    assert result.used_bytes == len(encoded)


@given(st.binary(min_size=1, max_size=64))
def test_huffman_round_trip(payload):
    packed = _huffman_pack(payload)
    encoded = encode_string_length(StringFlag.ENCODED, len(packed)) + packed
    result = decode(encoded)
    assert result.value == payload
    assert result.used_bytes == len(encoded)