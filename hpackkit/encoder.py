"""HPACK header block encoding."""

from __future__ import annotations

from dataclasses import dataclass

from . import huffman, integer
from .buffer import Buffer, ceil_order2
from .constants import Command, StringFlag, command_info
from .encoder_stream import EncoderStream
from .header_field import HeaderField, IndexType
from .hpack_table import EncoderTable

_LITERAL_COMMANDS = {
    IndexType.DEFAULT: Command.LITERAL_INCREMENTAL_INDEX,
    IndexType.WITHOUT_INDEX: Command.LITERAL_WITHOUT_INDEX,
    IndexType.NEVER_INDEX: Command.LITERAL_NEVER_INDEX,
}


@dataclass
class EncoderConfig:
    """Tuning of an :class:`Encoder`.

    ``max_header_list_size`` of 0 means unlimited; rates are in percent.
    """

    init_table_size: int = 4096
    max_table_size: int = 4096 * 4
    max_header_list_size: int = 0
    min_huffman_rate: int = 90
    min_dyntable_value_rate: int = 90


class Encoder:
    """Encodes header fields into HPACK header blocks.

    The encoder keeps its dynamic table between calls, so one encoder must
    be paired with one decoder for the whole connection.
    """

    def __init__(self, config: EncoderConfig | None = None) -> None:
        self._config = config if config is not None else EncoderConfig()
        self._table = EncoderTable(self._config.init_table_size)

    @property
    def config(self) -> EncoderConfig:
        return self._config

    def encode(self, fields, size_limit: int) -> tuple[list[Buffer], int]:
        """Encode as many leading ``fields`` as fit into ``size_limit`` bytes.

        Returns the encoded buffers and the number of fields encoded.
        """
        out = EncoderStream(size_limit)
        encoded_fields = 0
        bytes_left = size_limit

        for field in fields:
            if not isinstance(field, HeaderField):
                field = HeaderField(*field)
            index, exact = self._table.field_index(field.name, field.value)
            if field.index_type is not IndexType.DEFAULT:
                exact = False

            if index != -1 and exact:
                prefix = integer.encode_command(Command.INDEX, index)
                if len(prefix) > bytes_left:
                    break
                out.push_back(prefix)
                bytes_left -= len(prefix)
                encoded_fields += 1
                continue

            command = _LITERAL_COMMANDS[field.index_type]
            if index != -1:
                prefix = integer.encode_command(command, index)
                strings = (field.value,)
            else:
                prefix = bytes([command_info(command).value])
                strings = (field.name, field.value)

            field_size = len(prefix)
            pieces = []
            for data in strings:
                estimation = self.estimate_string_size(data)
                length = integer.encode_string_length(estimation[1], estimation[0])
                field_size += estimation[0] + len(length)
                pieces.append((estimation, length, data))
            if field_size > bytes_left:
                break

            out.push_back(prefix)
            for estimation, length, data in pieces:
                out.write_string(estimation, length, data)

            if command is Command.LITERAL_INCREMENTAL_INDEX:
                self._table.insert(field.name, field.value)

            bytes_left -= field_size
            encoded_fields += 1

        return out.flush(), encoded_fields

    def estimate_string_size(self, data) -> tuple[int, StringFlag]:
        """Choose how a string goes on the wire and return its byte size.

        Huffman coding is used when it is shorter and either the string is
        short or the saving reaches the configured rate.
        """
        data = bytes(data)
        encoded_len = ceil_order2(huffman.estimate_len(data), 3) // 8
        src_len = len(data)
        if encoded_len < src_len and (
            src_len < 10 or 100 * encoded_len // src_len <= self._config.min_huffman_rate
        ):
            return encoded_len, StringFlag.ENCODED
        return src_len, StringFlag.INPLACE