"""HPACK prefixed integer representation."""

from __future__ import annotations

from dataclasses import dataclass

from .buffer import make_mask
from .constants import Command, StringFlag, command_info

MAX_HPACK_INT = (1 << 24) - 16


@dataclass(frozen=True)
class DecodedInteger:
    """A decoded integer and the number of bytes it occupied."""

    used_bytes: int
    value: int


def encode(init: int, bitlen: int, value: int) -> bytes:
    """Encode ``value`` after ``bitlen`` leading bits taken from ``init``."""
    if value < 0:
        raise ValueError("A value can't be negative")
    if value > MAX_HPACK_INT:
        raise OverflowError("A value must be less than 2^24-1")

    mask = make_mask(8 - bitlen)
    first = init & 0xFF
    if value < mask:
        return bytes([first | (value & mask)])

    out = bytearray([first | mask])
    value -= mask
    while value >= 0x80:
        out.append((value & 0x7F) | 0x80)
        value //= 128
    out.append(value & 0x7F)
    return bytes(out)


def encode_command(command: Command, value: int) -> bytes:
    """Encode ``value`` with the prefix of ``command``."""
    info = command_info(command)
    return encode(info.value, info.bitlen, value)


def encode_string_length(flag: StringFlag, value: int) -> bytes:
    """Encode a string length with its Huffman flag bit."""
    return encode(int(flag), 1, value)


def decode(prefix_len: int, data) -> DecodedInteger:
    """Decode an integer whose first byte starts with ``prefix_len`` flag bits."""
    data = bytes(data)
    if not data or prefix_len > 4 or prefix_len == 0:
        raise ValueError("A source can't be empty. A suffix len can't be greater 4")

    mask = make_mask(8 - prefix_len)
    value = data[0] & mask
    if value < mask:
        return DecodedInteger(1, value)

    shift = 0
    for used, byte in enumerate(data[1:], start=2):
        value += (byte & 0x7F) << shift
        if value > MAX_HPACK_INT:
            raise OverflowError("An overflow in HPACK int decoding")
        shift += 7
        if not byte & 0x80:
            return DecodedInteger(used, value)
    raise ValueError("A src has not enough data")