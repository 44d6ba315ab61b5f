"""Conversion of delimited text rows into typed fields for insertion into a table."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from mdbkit.jsonout import ColType

# strtol(…, 16): optional space, sign and 0x prefix, then hex digits to the end.
_HEX_NUMBER = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")

# Width in bytes and struct-free packing details of the supported integer types.
_FIXED_SIZES = {
    ColType.BYTE: 1,
    ColType.INT: 2,
    ColType.LONGINT: 4,
}


class RowFormatError(ValueError):
    """Raised when a row of input cannot be turned into table fields."""


@dataclass
class ImportColumn:
    """A column of the target table."""

    name: str
    col_type: int
    col_num: int = 0
    is_fixed: bool = False

    @property
    def fixed_size(self) -> int:
        """Storage size of a fixed-width column, 0 for variable-width types."""
        return _FIXED_SIZES.get(self.col_type, 0)


@dataclass
class Field:
    """A value ready to be packed into a row."""

    colnum: int
    is_fixed: bool
    value: bytes = b""
    is_null: bool = False

    @property
    def siz(self) -> int:
        """Size of the value in bytes."""
        return len(self.value)


def _parse_hex(text: str) -> int:
    if not text:
        return 0
    match = _HEX_NUMBER.fullmatch(text)
    if match is None:
        raise RowFormatError(f"{text!r} is not a hexadecimal number")
    sign, digits = match.groups()
    value = int(digits, 16)
    return -value if sign == "-" else value


def convert_field(column: ImportColumn, text: str) -> Field:
    """Convert the text of one cell into a field for ``column``.

    Integers are read as hexadecimal and stored little-endian in the
    column's fixed width.
    """
    field = Field(colnum=column.col_num, is_fixed=column.is_fixed)
    col_type = column.col_type
    if col_type == ColType.TEXT:
        field.value = text.encode("utf-8")
        return field
    if col_type in _FIXED_SIZES:
        size = _FIXED_SIZES[col_type]
        number = _parse_hex(text) & ((1 << (8 * size)) - 1)
        field.value = number.to_bytes(size, "little")
        return field
    if col_type == ColType.BOOL and text[:1] not in ("0", "1"):
        raise RowFormatError(
            f"{text[:1]} is not a valid value for type BOOLEAN"
        )
    raise RowFormatError(f"Conversion of type {int(col_type):02x} not supported yet.")


def split_row(line: str, delimiter: str) -> list[str]:
    """Split a line on any of the delimiter characters and on newlines."""
    if not line:
        return []
    table = str.maketrans({ch: "\n" for ch in delimiter})
    return line.translate(table).split("\n")


def _unquote(text: str) -> str:
    if text.startswith('"') and text.endswith('"'):
        return text[1:-1]
    return text


def prep_row(
    columns: Sequence[ImportColumn], line: str, delimiter: str = ","
) -> list[Field | None]:
    """Turn one input line into fields, one slot per table column.

    Empty cells leave their column's slot as None.  Every piece of the
    split line, empty ones included, counts towards the number of columns
    the row is seen to have.
    """
    fields: list[Field | None] = [None] * len(columns)
    pieces = split_row(line, delimiter)
    for index, piece in enumerate(pieces):
        if not piece:
            continue
        if index >= len(columns):
            raise RowFormatError("Number of columns in file exceeds number in table.")
        try:
            fields[index] = convert_field(columns[index], _unquote(piece))
        except RowFormatError as exc:
            raise RowFormatError(f"Format error in column {index + 1}: {exc}") from exc
    if len(pieces) < len(columns):
        raise RowFormatError(
            f"Row has {len(pieces)} columns, but table has {len(columns)}"
        )
    return fields