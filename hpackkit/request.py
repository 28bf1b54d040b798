"""An HTTP/2 request: pseudo-headers, header fields and a body."""

from __future__ import annotations

from collections import deque
from datetime import timedelta
from urllib.parse import urlsplit

from .header_field import HeaderField
from .method import Method, to_string

_DEFAULT_TIMEOUT = timedelta(seconds=30)


def _as_field(field) -> HeaderField:
    if isinstance(field, HeaderField):
        return field
    return HeaderField(*field)


class Request:
    """An HTTP/2 request built from a URL and a method.

    The URL must have a scheme, an authority and a path; they become the
    ``:scheme``, ``:authority`` and ``:path`` pseudo-headers, followed by
    ``:method``. Further header fields are added without any checks. The
    body is a sequence of byte slices kept in the order they were added.
    """

    def __init__(self, url: str, method: Method = Method.GET) -> None:
        parts = urlsplit(url)
        if not parts.scheme:
            raise ValueError("Empty scheme")
        if not parts.netloc:
            raise ValueError("Empty authority")
        if not parts.path:
            raise ValueError("Empty path")

        resource = parts.path
        if parts.query:
            resource += "?" + parts.query
        if parts.fragment:
            resource += "#" + parts.fragment

        self._headers: deque[HeaderField] = deque()
        self._body: deque[bytes] = deque()
        self._size = 0
        self.timeout: timedelta = _DEFAULT_TIMEOUT

        self.header(HeaderField(":scheme", parts.scheme))
        self.header(HeaderField(":authority", parts.netloc))
        self.header(HeaderField(":path", resource))
        self.header(HeaderField(":method", to_string(method)))

    def header(self, field) -> Request:
        """Append one header field; a ``(name, value)`` pair is accepted too."""
        self._headers.append(_as_field(field))
        return self

    def headers(self, fields) -> Request:
        """Append several header fields in order."""
        self._headers.extend(_as_field(field) for field in fields)
        return self

    def body(self, data) -> Request:
        """Append a body slice; text is stored as UTF-8."""
        chunk = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        self._body.append(chunk)
        self._size += len(chunk)
        return self

    def bodies(self, items) -> Request:
        """Append several body slices in order."""
        for item in items:
            self.body(item)
        return self

    def raw_headers(self) -> list[HeaderField]:
        """Return the header fields not yet sent."""
        return list(self._headers)

    def raw_body(self) -> list[bytes]:
        """Return the body slices not yet sent."""
        return list(self._body)

    def body_size(self) -> int:
        """Return the total size of every body slice ever added."""
        return self._size

    def commit_headers(self, count: int) -> None:
        """Drop the first ``count`` header fields, which have been sent."""
        if count > len(self._headers):
            raise IndexError("Not so many header fields to commit")
        for _ in range(count):
            self._headers.popleft()

    def commit_body(self, count: int) -> None:
        """Drop the first ``count`` body slices, which have been sent."""
        if count > len(self._body):
            raise IndexError("Not so many body slices to commit")
        for _ in range(count):
            self._body.popleft()