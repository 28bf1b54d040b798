"""Fixed-size byte buffers and a growable stream of them."""

from __future__ import annotations

from collections import deque

_MIN_BUFFER_SIZE = 64
_MAX_BUFFER_SIZE = 4096


def make_mask(n: int) -> int:
    """Return an integer whose lowest ``n`` bits are set."""
    if n < 0:
        raise ValueError("bit count can't be negative")
    return (1 << n) - 1


def ceil_order2(value: int, order: int) -> int:
    """Round ``value`` up to the nearest multiple of ``2**order``."""
    mask = make_mask(order)
    return (value + mask) & ~mask


def _as_bytes_view(data) -> memoryview:
    return memoryview(data).cast("B")


class Buffer:
    """A byte buffer of fixed capacity.

    A producer writes through :meth:`prepare` and :meth:`commit` (or simply
    :meth:`write`); a consumer reads with :meth:`data_view` and drops leading
    bytes with :meth:`consume`. A zero-sized buffer is allowed.
    """

    __slots__ = ("_memory", "_offset")

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("buffer size can't be negative")
        self._memory = bytearray(size)
        self._offset = 0

    def prepare(self) -> memoryview:
        """Return a writable view of the free space after the stored data."""
        return memoryview(self._memory)[self._offset :]

    def commit(self, count: int) -> int:
        """Mark ``count`` bytes written into :meth:`prepare` as stored.

        At most the free space is committed; the committed count is returned.
        """
        delta = min(len(self._memory) - self._offset, max(count, 0))
        self._offset += delta
        return delta

    def write(self, data) -> int:
        """Copy as much of ``data`` as fits and return the number of bytes stored."""
        view = _as_bytes_view(data)
        count = min(len(self._memory) - self._offset, len(view))
        self._memory[self._offset : self._offset + count] = view[:count]
        self._offset += count
        return count

    def data_view(self) -> bytes:
        """Return the stored bytes."""
        return bytes(self._memory[: self._offset])

    def consume(self, count: int) -> None:
        """Drop the first ``count`` stored bytes."""
        count = min(self._offset, max(count, 0))
        if 0 < count < self._offset:
            self._memory[: self._offset - count] = self._memory[count : self._offset]
        self._offset -= count

    def max_size(self) -> int:
        """Return the capacity of the buffer."""
        return len(self._memory)

    def __repr__(self) -> str:
        return f"Buffer(stored={self._offset}, max_size={len(self._memory)})"


def _align_size(size: int) -> int:
    if size > _MAX_BUFFER_SIZE:
        return ceil_order2(size, 12)
    return ceil_order2(size, 6)


class StreamBuf:
    """An unbounded byte sink backed by a sequence of :class:`Buffer` objects.

    The smallest buffer is 64 bytes; buffers grow by doubling up to 4096
    bytes, or to a multiple of 4096 when a larger write needs it.
    """

    def __init__(self) -> None:
        self._buffers: deque[Buffer] = deque()

    def push_back(self, data) -> None:
        """Append ``data`` to the stream."""
        view = _as_bytes_view(data)
        while len(view) > 0:
            self._ensure_space(len(view))
            written = self._buffers[-1].write(view)
            view = view[written:]

    def flush(self) -> list[Buffer]:
        """Return every stored buffer and leave the stream empty."""
        buffers = list(self._buffers)
        self._buffers.clear()
        return buffers

    def _ensure_space(self, size: int) -> None:
        if not self._buffers:
            self._buffers.append(Buffer(max(_align_size(size), _MIN_BUFFER_SIZE)))
            return
        last = self._buffers[-1]
        if len(last.prepare()) == 0:
            next_size = min(last.max_size() * 2, _MAX_BUFFER_SIZE)
            self._buffers.append(Buffer(max(_align_size(size), next_size)))