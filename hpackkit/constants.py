"""HPACK representation prefixes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class StringFlag(IntEnum):
    """Whether a string literal is sent as is or Huffman encoded."""

    INPLACE = 0x00
    ENCODED = 0x80


class Command(IntEnum):
    """The kinds of HPACK header field representation."""

    INDEX = 0
    LITERAL_INCREMENTAL_INDEX = 1
    CHANGE_TABLE_SIZE = 2
    LITERAL_WITHOUT_INDEX = 3
    LITERAL_NEVER_INDEX = 4


@dataclass(frozen=True)
class CommandInfo:
    """Prefix bits of a representation: their value, count and mask."""

    value: int
    bitlen: int
    mask: int


_COMMAND_INFOS = {
    Command.INDEX: CommandInfo(0x80, 1, 0x80),
    Command.LITERAL_INCREMENTAL_INDEX: CommandInfo(0x40, 2, 0xC0),
    Command.CHANGE_TABLE_SIZE: CommandInfo(0x20, 3, 0xE0),
    Command.LITERAL_WITHOUT_INDEX: CommandInfo(0x00, 4, 0xF0),
    Command.LITERAL_NEVER_INDEX: CommandInfo(0x10, 4, 0xF0),
}


def command_info(command: Command | int) -> CommandInfo:
    """Return the prefix description of ``command``."""
    return _COMMAND_INFOS[Command(command)]