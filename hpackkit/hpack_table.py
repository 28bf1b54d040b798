"""The combined static and dynamic HPACK table."""

from __future__ import annotations

from . import static_table
from .dynamic_table import DynamicTable, IndexedDynamicTable


class HpackTable:
    """The HPACK index space: static entries first, then dynamic ones."""

    def __init__(self, dynamic_table: DynamicTable) -> None:
        self._dynamic = dynamic_table

    def at(self, index: int) -> tuple[bytes, bytes]:
        """Return the name and value at the 1-based ``index``."""
        if index == 0:
            raise IndexError("Invalid index value 0")
        if index <= static_table.size():
            return static_table.at(index)
        return self._dynamic.at(index - static_table.size())

    def insert(self, name, value) -> None:
        """Add a field to the dynamic part."""
        self._dynamic.insert(name, value)

    def update_size(self, size: int) -> None:
        """Change the maximum size of the dynamic part."""
        self._dynamic.update_size(size)

    def field_index(self, name, value) -> tuple[int, bool]:
        """Look up a field in both parts.

        A full match wins, static first. Otherwise a name match is returned
        with ``False``, static first, or ``(-1, False)``.
        """
        if not isinstance(self._dynamic, IndexedDynamicTable):
            raise TypeError("The dynamic table doesn't support lookups")
        index, exact = static_table.field_index(name, value)
        if exact:
            return index, True
        dyn_index, dyn_exact = self._dynamic.field_index(name, value)
        if dyn_exact:
            return dyn_index + static_table.size(), True
        if index != -1:
            return index, False
        if dyn_index != -1:
            return dyn_index + static_table.size(), False
        return -1, False

    def max_size(self) -> int:
        """Return the maximum size of the dynamic part."""
        return self._dynamic.max_size()


class DecoderTable(HpackTable):
    """The table a decoder keeps."""

    def __init__(self, max_size: int) -> None:
        super().__init__(DynamicTable(max_size))


class EncoderTable(HpackTable):
    """The table an encoder keeps, with field lookup."""

    def __init__(self, max_size: int) -> None:
        super().__init__(IndexedDynamicTable(max_size))