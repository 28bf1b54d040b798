"""HTTP request methods."""

from __future__ import annotations

from enum import IntEnum


class Method(IntEnum):
    """HTTP request methods, numbered in alphabetical order."""

    ACL = 0
    BASELINE_CONTROL = 1
    BIND = 2
    CHECKIN = 3
    CHECKOUT = 4
    CONNECT = 5
    COPY = 6
    DELETE = 7
    GET = 8
    HEAD = 9
    LABEL = 10
    LINK = 11
    LOCK = 12
    MERGE = 13
    MKACTIVITY = 14
    MKCALENDAR = 15
    MKCOL = 16
    MKREDIRECTREF = 17
    MKWORKSPACE = 18
    MOVE = 19
    OPTIONS = 20
    ORDERPATCH = 21
    PATCH = 22
    POST = 23
    PRI = 24
    PROPFIND = 25
    PROPPATCH = 26
    PUT = 27
    REBIND = 28
    REPORT = 29
    SEARCH = 30
    TRACE = 31
    UNBIND = 32
    UNCHECKOUT = 33
    UNLINK = 34
    UNLOCK = 35
    UPDATE = 36
    UPDATEREDIRECTREF = 37
    VERSION_CONTROL = 38


def to_string(method: Method | int) -> str:
    """Return the textual name of ``method``."""
    return Method(method).name