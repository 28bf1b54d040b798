"""HPACK dynamic header tables."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

_ENTRY_OVERHEAD = 32


@dataclass(slots=True)
class _Record:
    name: bytes
    value: bytes
    serial: int

    @property
    def hpack_size(self) -> int:
        return len(self.name) + len(self.value) + _ENTRY_OVERHEAD


class DynamicTable:
    """A first-in first-out table of header fields bounded by HPACK size.

    Index 1 is the most recently inserted entry. Inserting or shrinking
    evicts the oldest entries until the table fits.
    """

    def __init__(self, max_size: int) -> None:
        if max_size < 0:
            raise ValueError("A table size can't be negative")
        self._max_size = max_size
        self._size = 0
        self._records: deque[_Record] = deque()
        self._next_serial = 0

    def at(self, index: int) -> tuple[bytes, bytes]:
        """Return the name and value at the 1-based ``index``."""
        if not 1 <= index <= len(self._records):
            raise IndexError(f"Invalid dynamic table index {index}")
        record = self._records[index - 1]
        return record.name, record.value

    def insert(self, name, value) -> None:
        """Add a field as the newest entry, evicting old entries as needed."""
        record = self._new_record(name, value)
        self._shrink_to(max(self._max_size - record.hpack_size, 0))
        self._push(record)

    def update_size(self, size: int) -> None:
        """Set a new maximum size, evicting entries that no longer fit."""
        if size < 0:
            raise ValueError("A table size can't be negative")
        self._shrink_to(size)
        self._max_size = size

    def max_size(self) -> int:
        """Return the maximum HPACK size of the table."""
        return self._max_size

    def size(self) -> int:
        """Return the current HPACK size of all entries."""
        return self._size

    def __len__(self) -> int:
        return len(self._records)

    def _new_record(self, name, value) -> _Record:
        return _Record(bytes(name), bytes(value), self._next_serial)

    def _push(self, record: _Record) -> None:
        self._records.appendleft(record)
        self._size += record.hpack_size
        self._next_serial += 1

    def _shrink_to(self, size: int) -> list[_Record]:
        evicted = []
        while self._records and self._size > size:
            record = self._records.pop()
            self._size -= record.hpack_size
            evicted.append(record)
        return evicted

    def _index_of(self, record: _Record) -> int:
        return self._next_serial - record.serial


class IndexedDynamicTable(DynamicTable):
    """A dynamic table that can also look entries up by name and value."""

    def __init__(self, max_size: int) -> None:
        super().__init__(max_size)
        self._by_field: dict[tuple[bytes, bytes], _Record] = {}
        self._by_name: dict[bytes, _Record] = {}

    def insert(self, name, value) -> None:
        """Add a field as the newest entry, evicting old entries as needed."""
        record = self._new_record(name, value)
        for evicted in self._shrink_to(max(self._max_size - record.hpack_size, 0)):
            self._unindex(evicted)
        self._push(record)
        self._by_field[(record.name, record.value)] = record
        self._by_name[record.name] = record

    def update_size(self, size: int) -> None:
        """Set a new maximum size, evicting entries that no longer fit."""
        if size < 0:
            raise ValueError("A table size can't be negative")
        for evicted in self._shrink_to(size):
            self._unindex(evicted)
        self._max_size = size

    def field_index(self, name, value) -> tuple[int, bool]:
        """Look up a header field.

        Returns the 1-based index of an entry with both ``name`` and ``value``
        and ``True``; otherwise the index of an entry with ``name`` and
        ``False``; or ``(-1, False)`` when the name is absent.
        """
        name = bytes(name)
        record = self._by_field.get((name, bytes(value)))
        if record is not None:
            return self._index_of(record), True
        record = self._by_name.get(name)
        if record is not None:
            return self._index_of(record), False
        return -1, False

    def _unindex(self, record: _Record) -> None:
        key = (record.name, record.value)
        if self._by_field.get(key) is record:
            del self._by_field[key]
        if self._by_name.get(record.name) is record:
            del self._by_name[record.name]