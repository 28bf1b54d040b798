"""HPACK string literal decoding."""

from __future__ import annotations

from dataclasses import dataclass

from . import huffman, integer
from .bitstream import BitReader
from .buffer import make_mask
from .constants import StringFlag


@dataclass(frozen=True)
class DecodedString:
    """A decoded string literal and the number of bytes it occupied."""

    used_bytes: int
    value: bytes


def _read_huffman(data: bytes) -> bytes:
    reader = BitReader(data)
    result = bytearray()
    lengths = huffman.allowed_code_lengths()

    while not reader.empty():
        remaining = reader.remaining()
        if remaining < 8:
            mask = make_mask(remaining)
            if data[-1] & mask == mask:
                return bytes(result)

        symbol = None
        code_len = 0
        for bit_len in lengths:
            if bit_len > remaining:
                break
            symbol = huffman.decode(huffman.HuffmanCode(reader.take_bits(bit_len), bit_len))
            if symbol is not None:
                code_len = bit_len
                break

        if symbol is None:
            raise ValueError("Can't decode huffman code")
        if symbol == huffman.EOS:
            return bytes(result)
        result.append(symbol)
        reader.commit_bits(code_len)

    return bytes(result)


def decode(data) -> DecodedString:
    """Decode a string literal, plain or Huffman coded, at the start of ``data``."""
    data = bytes(data)
    if not data:
        raise ValueError("A source can't be empty")

    is_huffman = bool(data[0] & StringFlag.ENCODED)
    length = integer.decode(1, data)
    rest = data[length.used_bytes :]
    if len(rest) < length.value:
        raise ValueError("Not enough input data for string")

    payload = rest[: length.value]
    value = _read_huffman(payload) if is_huffman else payload
    return DecodedString(length.used_bytes + length.value, value)