"""Output stream used while encoding a header block."""

from __future__ import annotations

from . import huffman
from .buffer import Buffer, StreamBuf, make_mask
from .constants import StringFlag


def huffman_encode(data) -> bytes:
    """Huffman encode ``data``, padding the last byte with ones."""
    bits = 0
    length = 0
    for byte in bytes(data):
        code = huffman.encode(byte)
        bits = (bits << code.bit_length) | (code.code >> (32 - code.bit_length))
        length += code.bit_length
    padding = -length % 8
    bits = (bits << padding) | make_mask(padding)
    return bits.to_bytes((length + padding) // 8, "big")


class EncoderStream:
    """Collects encoded bytes, tracking a byte budget for :meth:`push_back`."""

    def __init__(self, max_size: int) -> None:
        self._stream = StreamBuf()
        self._max_size = max_size
        self._left = max_size

    def push_back(self, data) -> bool:
        """Append ``data`` if it fits in the budget; return whether it did."""
        data = bytes(data)
        if len(data) > self._left:
            return False
        self._left -= len(data)
        self._stream.push_back(data)
        return True

    def write_string(self, estimation: tuple[int, StringFlag], encoded_size, data) -> None:
        """Write a string literal: its encoded length, then its bytes.

        ``estimation`` tells whether the string goes Huffman coded; the
        budget is not charged, the caller has accounted for it.
        """
        _, flag = estimation
        self._stream.push_back(bytes(encoded_size))
        if flag == StringFlag.ENCODED:
            encoded = huffman_encode(data)
            if encoded:
                self._stream.push_back(encoded)
        else:
            data = bytes(data)
            if data:
                self._stream.push_back(data)

    def flush(self) -> list[Buffer]:
        """Return the collected buffers and restore the full budget."""
        self._left = self._max_size
        return self._stream.flush()

    def bytes_left(self) -> int:
        """Return what is left of the budget."""
        return self._left