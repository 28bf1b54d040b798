"""HPACK header block decoding."""

from __future__ import annotations

from . import integer, literal
from .constants import Command, command_info
from .header_field import HeaderField, IndexType
from .hpack_table import DecoderTable

_DEFAULT_TABLE_SIZE = 4096


def _decode_command(byte: int) -> Command:
    if byte & command_info(Command.INDEX).value:
        return Command.INDEX
    info = command_info(Command.LITERAL_INCREMENTAL_INDEX)
    if byte & info.mask == info.value:
        return Command.LITERAL_INCREMENTAL_INDEX
    info = command_info(Command.CHANGE_TABLE_SIZE)
    if byte & info.value == info.value:
        return Command.CHANGE_TABLE_SIZE
    info = command_info(Command.LITERAL_WITHOUT_INDEX)
    if byte & info.mask == info.value:
        return Command.LITERAL_WITHOUT_INDEX
    return Command.LITERAL_NEVER_INDEX


class Decoder:
    """Decodes HPACK header blocks, keeping the dynamic table between calls."""

    def __init__(self) -> None:
        self._table = DecoderTable(_DEFAULT_TABLE_SIZE)

    def decode(self, data) -> list[HeaderField]:
        """Decode a whole header block into its header fields.

        Raises ``ValueError`` on malformed data and ``IndexError`` on a
        reference to a missing table entry.
        """
        data = memoryview(bytes(data))
        fields: list[HeaderField] = []
        pos = 0
        while pos < len(data):
            rest = data[pos:]
            command = _decode_command(rest[0])
            if command is Command.INDEX:
                pos += self._indexed(rest, fields)
            elif command is Command.CHANGE_TABLE_SIZE:
                pos += self._change_table_size(rest)
            elif command is Command.LITERAL_INCREMENTAL_INDEX:
                pos += self._literal(rest, fields, IndexType.DEFAULT, command)
                last = fields[-1]
                self._table.insert(last.name, last.value)
            elif command is Command.LITERAL_WITHOUT_INDEX:
                pos += self._literal(rest, fields, IndexType.WITHOUT_INDEX, command)
            else:
                pos += self._literal(rest, fields, IndexType.NEVER_INDEX, command)
        return fields

    def _indexed(self, data, fields: list[HeaderField]) -> int:
        index = integer.decode(command_info(Command.INDEX).bitlen, data)
        if index.value == 0:
            raise ValueError("Invalid index value")
        name, value = self._table.at(index.value)
        fields.append(HeaderField(name, value))
        return index.used_bytes

    def _change_table_size(self, data) -> int:
        size = integer.decode(command_info(Command.CHANGE_TABLE_SIZE).bitlen, data)
        self._table.update_size(size.value)
        return size.used_bytes

    def _literal(self, data, fields: list[HeaderField], index_type: IndexType, command: Command) -> int:
        index = integer.decode(command_info(command).bitlen, data)
        used = index.used_bytes

        if index.value == 0:
            decoded_name = literal.decode(data[used:])
            used += decoded_name.used_bytes
            name = decoded_name.value
        else:
            name, _ = self._table.at(index.value)

        decoded_value = literal.decode(data[used:])
        used += decoded_value.used_bytes
        fields.append(HeaderField(name, decoded_value.value, index_type))
        return used