"""Bit-level reading of HPACK data."""

from __future__ import annotations

from .buffer import make_mask

_WORD_BITS = 32


class BitReader:
    """Reads runs of bits from a byte string, most significant bit first.

    Bits are looked at with :meth:`take_bits` and consumed with
    :meth:`commit_bits`.
    """

    __slots__ = ("_data", "_offset")

    def __init__(self, data) -> None:
        self._data = bytes(data)
        self._offset = 0

    def pos(self) -> int:
        """Return the number of bits consumed so far."""
        return self._offset

    def empty(self) -> bool:
        """Return whether every bit has been consumed."""
        return self._offset == len(self._data) * 8

    def remaining(self) -> int:
        """Return the number of bits not yet consumed."""
        return len(self._data) * 8 - self._offset

    def take_bits(self, length: int) -> int:
        """Return the next ``length`` bits left-aligned in a 32-bit integer.

        The position is not moved. Bits past the end of the data read as zero.
        """
        if not 0 <= length <= _WORD_BITS:
            raise ValueError("A bit length must be between 0 and 32")
        if length == 0:
            return 0
        total = len(self._data) * 8
        available = min(length, total - self._offset)
        if available <= 0:
            return 0
        first_byte = self._offset // 8
        last_byte = (self._offset + available + 7) // 8
        chunk = int.from_bytes(self._data[first_byte:last_byte], "big")
        chunk_bits = (last_byte - first_byte) * 8
        shift = chunk_bits - (self._offset - first_byte * 8) - available
        bits = (chunk >> shift) & make_mask(available)
        return bits << (_WORD_BITS - available)

    def commit_bits(self, length: int) -> None:
        """Consume ``length`` bits, stopping at the end of the data."""
        if length < 0:
            raise ValueError("A bit length can't be negative")
        self._offset = min(self._offset + length, len(self._data) * 8)