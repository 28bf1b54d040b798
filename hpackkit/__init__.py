"""HPACK header compression (RFC 7541): integer, string and Huffman coding, tables, encoder and decoder, plus an HTTP/2 request builder."""

__version__ = "0.1.0"