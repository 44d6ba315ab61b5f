"""JSON rendering of table rows, one object per line."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum
from typing import Any

from mdbkit.b64 import base64_encode

_QUOTE = '"'
_ESCAPE = "\\"
_SEPARATOR = ":"
_DELIMITER = ","
_ROW_START = "{"
_ROW_END = "}\n"


class ColType(IntEnum):
    """Column data types of a database table."""

    BOOL = 0x01
    BYTE = 0x02
    INT = 0x03
    LONGINT = 0x04
    MONEY = 0x05
    FLOAT = 0x06
    DOUBLE = 0x07
    DATETIME = 0x08
    BINARY = 0x09
    TEXT = 0x0A
    OLE = 0x0B
    MEMO = 0x0C
    REPID = 0x0F
    NUMERIC = 0x10
    COMPLEX = 0x12


_QUOTE_TYPES = {
    ColType.TEXT,
    ColType.OLE,
    ColType.MEMO,
    ColType.DATETIME,
    ColType.BINARY,
    ColType.REPID,
}
_BINARY_TYPES = {ColType.OLE, ColType.BINARY, ColType.REPID}


def is_quote_type(col_type: int) -> bool:
    """True for types written as JSON strings."""
    return col_type in _QUOTE_TYPES


def is_binary_type(col_type: int) -> bool:
    """True for types written as base64 binary objects."""
    return col_type in _BINARY_TYPES


def quote_value(value: str, drop_nonascii: bool = False) -> str:
    """Quote a string, escaping quotes, backslashes and control characters."""
    out = [_QUOTE]
    for ch in value:
        if ch == _QUOTE or ch == _ESCAPE:
            out.append(_ESCAPE + ch)
        elif ord(ch) < 0x20:
            out.append(" " if drop_nonascii else f"\\u00{ord(ch):02x}")
        else:
            out.append(ch)
    out.append(_QUOTE)
    return "".join(out)


def binary_value(data: bytes) -> str:
    """Render binary data as an extended-JSON binary object."""
    encoded = base64_encode(data, (len(data) // 3 + 1) * 4 + 1)
    return f'{{"$binary": "{encoded}", "$type": "00"}}'


def format_column(
    name: str, value: Any, col_type: int, drop_nonascii: bool = False
) -> str:
    """Render one ``"name":value`` pair."""
    head = quote_value(name, drop_nonascii) + _SEPARATOR
    if is_binary_type(col_type):
        data = value.encode("utf-8") if isinstance(value, str) else bytes(value)
        return head + binary_value(data)
    if is_quote_type(col_type):
        return head + quote_value(str(value), drop_nonascii)
    return head + str(value)


def _is_null(value: Any) -> bool:
    return value is None or (isinstance(value, (str, bytes)) and not value)


def format_row(
    columns: Iterable[tuple[str, Any, int]], drop_nonascii: bool = False
) -> str:
    """Render a row of ``(name, value, col_type)`` triples, leaving out empty values."""
    pairs = (
        format_column(name, value, col_type, drop_nonascii)
        for name, value, col_type in columns
        if not _is_null(value)
    )
    return _ROW_START + _DELIMITER.join(pairs) + _ROW_END