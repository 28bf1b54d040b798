# hpackkit

HPACK header compression for HTTP/2 (RFC 7541), together with a small
`Request` class that builds the HTTP/2 pseudo-headers, header fields and body
slices of a request.

## Modules

- `hpackkit.integer`: HPACK prefixed integers (`encode`, `encode_command`,
  `encode_string_length`, `decode`).
- `hpackkit.literal`: decoding of string literals, plain or Huffman coded
  (`decode`, returning a `DecodedString`).
- `hpackkit.huffman`: the static Huffman code (`encode`, `decode`,
  `estimate_len`, `allowed_code_lengths`, `EOS`).
- `hpackkit.bitstream`: `BitReader`, bit-level reading used by the Huffman
  decoder.
- `hpackkit.static_table`: the 61-entry static table (`size`, `at`,
  `name_index`, `field_index`).
- `hpackkit.dynamic_table`: `DynamicTable` and the searchable
  `IndexedDynamicTable`.
- `hpackkit.hpack_table`: `HpackTable`, `DecoderTable` and `EncoderTable`, the
  combined index space of static and dynamic entries.
- `hpackkit.encoder_stream`: `EncoderStream` and `huffman_encode`.
- `hpackkit.encoder`: `Encoder` and `EncoderConfig`.
- `hpackkit.decoder`: `Decoder`.
- `hpackkit.header_field`: `HeaderField` and `IndexType`.
- `hpackkit.method`: the `Method` enumeration and `to_string`.
- `hpackkit.request`: `Request`.
- `hpackkit.buffer`: `Buffer`, a fixed-capacity byte buffer, and `StreamBuf`,
  a growable sequence of them.

## Installation

```
pip install hpackkit
```

## Encoding and decoding a header list

```python
from hpackkit.encoder import Encoder
from hpackkit.decoder import Decoder
from hpackkit.header_field import HeaderField

fields = [
    HeaderField(":method", "GET"),
    HeaderField(":path", "/index.html"),
    HeaderField("user-agent", "hpackkit"),
]

encoder = Encoder()
buffers, count = encoder.encode(fields, 4096)
block = b"".join(b.data_view() for b in buffers)

decoder = Decoder()
for field in decoder.decode(block):
    print(field.name_str(), field.value_str())
```

`Encoder.encode(fields, size_limit)` writes as many leading fields as fit
within `size_limit` bytes and returns the list of `Buffer` objects together
with the number of fields written, so a caller can spread a long header list
over several blocks. Plain `(name, value)` pairs are accepted in place of
`HeaderField` objects.

The encoder chooses for each string whether to send it as is or Huffman coded:
Huffman coding is used when it is shorter and either the string is under ten
bytes or the coded size is at most `EncoderConfig.min_huffman_rate` percent of
the original (90 by default). The initial dynamic table size is
`EncoderConfig.init_table_size` (4096 by default).

A `HeaderField` created with `IndexType.WITHOUT_INDEX` or
`IndexType.NEVER_INDEX` is never added to the encoder's dynamic table and is
never sent as a fully indexed field. The decoder reports such fields with the
same index type.

Both `Encoder` and `Decoder` keep their dynamic tables between calls, so one
encoder and one decoder belong together for the life of a connection.
`Decoder.decode` raises `ValueError` on malformed data and `IndexError` on a
reference to a table entry that does not exist. A `HeaderField` too large to
fit into any frame raises `OverflowError`.

## Building a request

```python
from datetime import timedelta

from hpackkit.request import Request
from hpackkit.method import Method
from hpackkit.header_field import HeaderField

request = Request("https://example.com/upload?x=1", Method.POST)
request.header(HeaderField("content-type", "text/plain"))
request.body("hello, ").body(b"world")
request.timeout = timedelta(seconds=10)

print([f.name_str() for f in request.raw_headers()])
# [':scheme', ':authority', ':path', ':method', 'content-type']
print(request.body_size())
# 12
```

The URL must have a scheme, an authority and a path; otherwise `ValueError`
is raised. The query and fragment become part of `:path`. Further header
fields are added without any checks. Text body slices are stored as UTF-8.
`commit_headers(count)` and `commit_body(count)` drop fields or slices from the
front once they have been sent. The `timeout` attribute defaults to 30
seconds and is only stored.

## What the package does not do

hpackkit does not open connections or send anything over a network. There is
no HTTP/2 framing, no stream or flow-control handling, no SETTINGS exchange and
no response type: `Request` only holds what a request is made of, and the
encoder and decoder work on header blocks handed to them as bytes.

## Running the tests

```
pip install -e ".[test]"
pytest
```