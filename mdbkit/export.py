"""Option handling for exporting table data as CSV or INSERT statements."""

from __future__ import annotations

from enum import Enum

from mdbkit.jsonout import is_binary_type

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}

# How a hexadecimal binary value is wrapped for backends with a blob literal
# syntax: text before the value, quote around it, text after it.
_BINARY_WRAPPERS = {
    "sqlite": ("X", "'", ""),
    "mysql": ("0x", "", ""),
    "postgres": ("decode(", "'", ", 'hex')"),
}


class BinMode(Enum):
    """How binary column data is written out."""

    STRIP = "strip"
    RAW = "raw"
    OCTAL = "octal"
    HEXADECIMAL = "hex"


def unescape(text: str) -> str:
    """Expand ``\\n``, ``\\t`` and ``\\r``; keep other backslash pairs as they are.

    A single backslash at the very end is dropped.
    """
    out = []
    pending = False
    for ch in text:
        if pending:
            out.append(_ESCAPES.get(ch, "\\" + ch))
            pending = False
        elif ch == "\\":
            pending = True
        else:
            out.append(ch)
    return "".join(out)


def parse_bin_mode(name: str | None) -> BinMode:
    """Look up a binary export mode by name; no name means raw output."""
    if name is None:
        return BinMode.RAW
    try:
        return BinMode(name)
    except ValueError:
        raise ValueError("Invalid binary mode") from None


def binary_wrapper(
    backend_name: str, col_type: int, bin_mode: BinMode
) -> tuple[str, str, str] | None:
    """Return ``(prefix, quote, suffix)`` for a backend's hex blob literal.

    None is returned when the value needs no special treatment.
    """
    if bin_mode is not BinMode.HEXADECIMAL or not is_binary_type(col_type):
        return None
    return _BINARY_WRAPPERS.get(backend_name)