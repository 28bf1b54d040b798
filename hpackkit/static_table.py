"""The HPACK static header table."""

from __future__ import annotations

_FIELDS: tuple[tuple[bytes, bytes], ...] = (
    (b":authority", b""),
    (b":method", b"GET"),
    (b":method", b"POST"),
    (b":path", b"/"),
    (b":path", b"/index.html"),
    (b":scheme", b"http"),
    (b":scheme", b"https"),
    (b":status", b"200"),
    (b":status", b"204"),
    (b":status", b"206"),
    (b":status", b"304"),
    (b":status", b"400"),
    (b":status", b"404"),
    (b":status", b"500"),
    (b"accept-charset", b""),
    (b"accept-encoding", b"gzip, deflate"),
    (b"accept-language", b""),
    (b"accept-ranges", b""),
    (b"accept", b""),
    (b"access-control-allow-origin", b""),
    (b"age", b""),
    (b"allow", b""),
    (b"authorization", b""),
    (b"cache-control", b""),
    (b"content-disposition", b""),
    (b"content-encoding", b""),
    (b"content-language", b""),
    (b"content-length", b""),
    (b"content-location", b""),
    (b"content-range", b""),
    (b"content-type", b""),
    (b"cookie", b""),
    (b"date", b""),
    (b"etag", b""),
    (b"expect", b""),
    (b"expires", b""),
    (b"from", b""),
    (b"host", b""),
    (b"if-match", b""),
    (b"if-modified-since", b""),
    (b"if-none-match", b""),
    (b"if-range", b""),
    (b"if-unmodified-since", b""),
    (b"last-modified", b""),
    (b"link", b""),
    (b"location", b""),
    (b"max-forwards", b""),
    (b"proxy-authenticate", b""),
    (b"proxy-authorization", b""),
    (b"range", b""),
    (b"referer", b""),
    (b"refresh", b""),
    (b"retry-after", b""),
    (b"server", b""),
    (b"set-cookie", b""),
    (b"strict-transport-security", b""),
    (b"transfer-encoding", b""),
    (b"user-agent", b""),
    (b"vary", b""),
    (b"via", b""),
    (b"www-authenticate", b""),
)


def _build_name_ranges() -> dict[bytes, tuple[int, int]]:
    ranges: dict[bytes, tuple[int, int]] = {}
    for position, (name, _) in enumerate(_FIELDS):
        start, _end = ranges.get(name, (position, position))
        ranges[name] = (start, position)
    return ranges


# Zero-based first and last positions of every name.
_NAME_RANGES = _build_name_ranges()


def size() -> int:
    """Return the number of entries in the static table."""
    return len(_FIELDS)


def at(index: int) -> tuple[bytes, bytes]:
    """Return the name and value at the 1-based ``index``."""
    if not 1 <= index <= len(_FIELDS):
        raise IndexError(f"Invalid static table index {index}")
    return _FIELDS[index - 1]


def name_index(name) -> int:
    """Return the 1-based index of the first entry named ``name``, or -1."""
    found = _NAME_RANGES.get(bytes(name))
    if found is None:
        return -1
    return found[0] + 1


def field_index(name, value) -> tuple[int, bool]:
    """Look up a header field.

    Returns the 1-based index of the entry with both ``name`` and ``value``
    and ``True``; otherwise the index of the first entry with ``name`` and
    ``False``; or ``(-1, False)`` when the name is absent.
    """
    found = _NAME_RANGES.get(bytes(name))
    if found is None:
        return -1, False
    start, end = found
    value = bytes(value)
    for position in range(start, end + 1):
        if _FIELDS[position][1] == value:
            return position + 1, True
    return start + 1, False