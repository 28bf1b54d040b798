import pytest

from hpackkit.decoder import Decoder
from hpackkit.encoder import Encoder
from hpackkit.header_field import HeaderField, IndexType

FIRST_REQUEST = bytes.fromhex("828684418cf1e3c2e5f23a6ba0ab90f4ff")


def _pairs(fields):
    return [(f.name_str(), f.value_str()) for f in fields]


def test_literal_with_indexing_worked_example():
    data = bytes.fromhex("400a637573746f6d2d6b65790d637573746f6d2d686561646572")
    assert Decoder().decode(data) == [HeaderField("custom-key", "custom-header")]


def test_incremental_literal_is_added_to_table():
    decoder = Decoder()
    decoder.decode(bytes.fromhex("400a637573746f6d2d6b65790d637573746f6d2d686561646572"))
    assert decoder.decode(b"\xbe") == [HeaderField("custom-key", "custom-header")]


def test_first_request_worked_example():
    assert _pairs(Decoder().decode(FIRST_REQUEST)) == [
        (":method", "GET"),
        (":scheme", "http"),
        (":path", "/"),
        (":authority", "www.example.com"),
    ]


def test_empty_block_decodes_to_nothing():
    assert Decoder().decode(b"") == []


def test_index_zero_is_rejected():
    with pytest.raises(ValueError):
        Decoder().decode(b"\x80")


def test_missing_dynamic_entry_is_rejected():
    with pytest.raises(IndexError):
        Decoder().decode(b"\xbe")


def test_table_size_update_evicts_entries():
    decoder = Decoder()
    decoder.decode(FIRST_REQUEST)
    assert decoder.decode(b"\xbe")[0].value_str() == "www.example.com"
    decoder.decode(b"\x20")
    with pytest.raises(IndexError):
        decoder.decode(b"\xbe")


def test_literal_without_index_keeps_type():
    fields = Decoder().decode(b"\x00\x03abc\x03def")
    assert fields == [HeaderField("abc", "def", IndexType.WITHOUT_INDEX)]


def test_literal_never_index_keeps_type():
    fields = Decoder().decode(b"\x10\x03abc\x03def")
    assert fields == [HeaderField("abc", "def", IndexType.NEVER_INDEX)]


def test_literal_without_index_is_not_added_to_table():
    decoder = Decoder()
    decoder.decode(b"\x00\x03abc\x03def")
    with pytest.raises(IndexError):
        decoder.decode(b"\xbe")


def test_truncated_string_is_rejected():
    with pytest.raises(ValueError):
        Decoder().decode(b"\x40\x05ab")


def test_truncated_integer_is_rejected():
    with pytest.raises(ValueError):
        Decoder().decode(b"\xff")


def test_decodes_encoder_output():
    fields = [
        HeaderField(":method", "POST"),
        HeaderField("content-type", "application/json"),
        HeaderField("x-request-id", "abc-123"),
        HeaderField("authorization", "Bearer token", IndexType.NEVER_INDEX),
    ]
    buffers, count = Encoder().encode(fields, 4096)
    data = b"".join(b.data_view() for b in buffers)
    assert count == len(fields)
    assert Decoder().decode(data) == fields