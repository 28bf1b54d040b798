import pytest

from hpackkit import static_table
from hpackkit.hpack_table import DecoderTable, EncoderTable


def test_zero_index_raises():
    with pytest.raises(IndexError):
        DecoderTable(4096).at(0)


def test_static_entries_come_first():
    table = DecoderTable(4096)
    assert table.at(2) == (b":method", b"GET")
    assert table.at(static_table.size()) == static_table.at(static_table.size())


def test_dynamic_entries_follow_static():
    table = DecoderTable(4096)
    table.insert(b"custom-key", b"custom-header")
    assert table.at(static_table.size() + 1) == (b"custom-key", b"custom-header")
    with pytest.raises(IndexError):
        table.at(static_table.size() + 2)


def test_update_size_evicts_dynamic_entries():
    table = DecoderTable(4096)
    table.insert(b"a", b"b")
    table.update_size(0)
    assert table.max_size() == 0
    with pytest.raises(IndexError):
        table.at(static_table.size() + 1)


def test_field_index_static_exact():
    table = EncoderTable(4096)
    assert table.field_index(b":method", b"GET") == (2, True)


def test_field_index_dynamic_exact():
    table = EncoderTable(4096)
    table.insert(b"x-custom", b"yes")
    assert table.field_index(b"x-custom", b"yes") == (static_table.size() + 1, True)


def test_field_index_dynamic_exact_beats_static_name():
    table = EncoderTable(4096)
    table.insert(b":method", b"PUT")
    assert table.field_index(b":method", b"PUT") == (static_table.size() + 1, True)


def test_field_index_static_name_only():
    table = EncoderTable(4096)
    assert table.field_index(b":method", b"PATCH") == (2, False)


def test_field_index_dynamic_name_only():
    table = EncoderTable(4096)
    table.insert(b"x-custom", b"yes")
    index, exact = table.field_index(b"x-custom", b"no")
    assert not exact
    assert table.at(index)[0] == b"x-custom"


def test_field_index_missing():
    assert EncoderTable(4096).field_index(b"x-none", b"v") == (-1, False)


def test_decoder_table_has_no_lookup():
    with pytest.raises(TypeError):
        DecoderTable(4096).field_index(b":method", b"GET")