from hypothesis import given
from hypothesis import strategies as st

from hpackkit import huffman, literal
from hpackkit.constants import StringFlag
from hpackkit.encoder_stream import EncoderStream, huffman_encode
from hpackkit.integer import encode_string_length


def _joined(stream):
    return b"".join(buf.data_view() for buf in stream.flush())


def test_huffman_known_value():
    assert huffman_encode(b"www.example.com") == bytes.fromhex("f1e3c2e5f23a6ba0ab90f4ff")


def test_huffman_no_cache():
    assert huffman_encode(b"no-cache") == bytes.fromhex("a8eb10649cbf")


def test_huffman_empty():
    assert huffman_encode(b"") == b""


@given(st.binary(max_size=200))
def test_huffman_length_matches_estimate(data):
    encoded = huffman_encode(data)
    assert 0 <= len(encoded) * 8 - huffman.estimate_len(data) < 8


@given(st.binary(min_size=1, max_size=200))
def test_huffman_round_trip(data):
    encoded = huffman_encode(data)
    decoded = literal.decode(encode_string_length(StringFlag.ENCODED, len(encoded)) + encoded)
    assert decoded.value == data


def test_push_back_within_budget():
    stream = EncoderStream(10)
    assert stream.push_back(b"abcd")
    assert stream.bytes_left() == 10 - len(b"abcd")
    assert _joined(stream) == b"abcd"


def test_push_back_over_budget_is_refused():
    stream = EncoderStream(3)
    assert not stream.push_back(b"abcd")
    assert stream.bytes_left() == 3
    assert _joined(stream) == b""


def test_flush_restores_budget():
    stream = EncoderStream(8)
    stream.push_back(b"12345678")
    assert stream.bytes_left() == 0
    assert _joined(stream) == b"12345678"
    assert stream.bytes_left() == 8
    assert _joined(stream) == b""


def test_write_string_inplace():
    stream = EncoderStream(100)
    size = encode_string_length(StringFlag.INPLACE, 3)
    stream.write_string((3, StringFlag.INPLACE), size, b"abc")
    out = _joined(stream)
    assert out == size + b"abc"
    assert literal.decode(out).value == b"abc"


def test_write_string_encoded_round_trip():
    data = b"custom-value"
    encoded = huffman_encode(data)
    size = encode_string_length(StringFlag.ENCODED, len(encoded))
    stream = EncoderStream(100)
    stream.write_string((len(encoded), StringFlag.ENCODED), size, data)
    out = _joined(stream)
    decoded = literal.decode(out)
    assert decoded.value == data
    assert decoded.used_bytes == len(out)


def test_large_data_spans_buffers():
    data = bytes(range(256)) * 40
    stream = EncoderStream(len(data))
    assert stream.push_back(data)
    assert _joined(stream) == data