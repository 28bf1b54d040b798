import pytest

from hpackkit.constants import Command, CommandInfo, StringFlag, command_info


def test_index_info():
    assert command_info(Command.INDEX) == CommandInfo(0x80, 1, 0x80)


def test_never_index_info():
    assert command_info(Command.LITERAL_NEVER_INDEX) == CommandInfo(0x10, 4, 0xF0)


def test_string_flags():
    assert StringFlag(0x80) is StringFlag.ENCODED
    assert StringFlag(0) is StringFlag.INPLACE
    with pytest.raises(ValueError):
        StringFlag(0x40)


@pytest.mark.parametrize("command", list(Command))
def test_value_inside_mask(command):
    info = command_info(command)
    assert info.value & ~info.mask == 0
    assert bin(info.mask).count("1") == info.bitlen


def test_prefixes_are_distinct():
    pairs = {(command_info(c).value, command_info(c).bitlen) for c in Command}
    assert len(pairs) == len(Command)


def test_accepts_int():
    assert command_info(2) == command_info(Command.CHANGE_TABLE_SIZE)


def test_unknown_command_raises():
    with pytest.raises(ValueError):
        command_info(9)