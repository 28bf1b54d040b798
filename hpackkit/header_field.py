"""A single HTTP header field as handled by HPACK."""

from __future__ import annotations

from enum import Enum

_MAX_FRAME_PAYLOAD = (1 << 24) - 1


class IndexType(Enum):
    """How an encoder may index a header field."""

    DEFAULT = 0
    WITHOUT_INDEX = 1
    NEVER_INDEX = 2


def _to_bytes(data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class HeaderField:
    """A header name and value, both held as bytes.

    Names and values are not restricted in content. Raises ``OverflowError``
    when the field could never fit into a frame even with Huffman coding.
    """

    __slots__ = ("_name", "_value", "_index_type")

    def __init__(self, name, value, index_type: IndexType = IndexType.DEFAULT) -> None:
        name_bytes = _to_bytes(name)
        value_bytes = _to_bytes(value)
        if (len(name_bytes) + len(value_bytes)) * 8 // 5 >= _MAX_FRAME_PAYLOAD:
            raise OverflowError("Header is to big to be in the frame")
        self._name = name_bytes
        self._value = value_bytes
        self._index_type = IndexType(index_type)

    @property
    def name(self) -> bytes:
        return self._name

    @property
    def value(self) -> bytes:
        return self._value

    @property
    def index_type(self) -> IndexType:
        return self._index_type

    def name_str(self) -> str:
        """Return the name as text."""
        return self._name.decode("utf-8", errors="surrogateescape")

    def value_str(self) -> str:
        """Return the value as text."""
        return self._value.decode("utf-8", errors="surrogateescape")

    def hpack_size(self) -> int:
        """Return the size the field takes in an HPACK dynamic table."""
        return len(self._name) + len(self._value) + 32

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HeaderField):
            return NotImplemented
        return (self._name, self._value, self._index_type) == (
            other._name,
            other._value,
            other._index_type,
        )

    def __hash__(self) -> int:
        return hash((self._name, self._value, self._index_type))

    def __repr__(self) -> str:
        return f"HeaderField({self._name!r}, {self._value!r}, {self._index_type.name})"