"""Generation of C type declarations and dump functions for user tables."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from mdbkit.jsonout import ColType

_GENERATED = (
    "/******************************************************************/\n"
    "/* THIS IS AN AUTOMATICALLY GENERATED FILE.  DO NOT EDIT IT!!!!!! */\n"
    "/******************************************************************/\n"
)

# Column type -> (C declaration prefix, dump call prefix)
_TYPE_MAP = {
    ColType.INT: ("\tint\t", "\tdump_int (x."),
    ColType.LONGINT: ("\tlong\t", "\tdump_long (x."),
    ColType.TEXT: ("\tchar *\t", "\tdump_string (x."),
    ColType.MEMO: ("\tchar *\t", "\tdump_string (x."),
}


def _ascii_lower(text: str) -> str:
    return "".join(chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in text)


@dataclass
class Column:
    """A table column: its name and data type."""

    name: str
    col_type: int


@dataclass
class GeneratedHeaders:
    """Contents of types.h, dumptypes.h and dumptypes.c."""

    types_h: str
    dumptypes_h: str
    dumptypes_c: str
    unsupported: list[tuple[str, str, int]] = field(default_factory=list)


def generate(tables: Iterable[tuple[str, Sequence[Column]]]) -> GeneratedHeaders:
    """Generate C sources for ``(table_name, columns)`` pairs.

    Columns of unsupported types are recorded in ``unsupported`` as
    ``(table, column, col_type)`` and declared without a type.
    """
    types = [_GENERATED]
    header = [_GENERATED, '#include "types.h"\n']
    source = [_GENERATED, "#include <stdio.h>\n", '#include "dumptypes.h"\n']
    unsupported: list[tuple[str, str, int]] = []

    for table, columns in tables:
        types.append(f"typedef struct _{table}\n{{\n")
        header.append(f"void dump_{table} ({table} x);\n")
        source.append(f"void dump_{table} ({table} x)\n{{\n")
        source.append(
            f'\tfprintf (stdout, "**************** {table} ****************\\n");\n'
        )
        for column in columns:
            lower = _ascii_lower(column.name)
            source.append(f'\tfprintf (stdout, "x.{lower} = ");\n')
            prefixes = _TYPE_MAP.get(column.col_type)
            if prefixes is None:
                unsupported.append((table, column.name, int(column.col_type)))
            else:
                types.append(prefixes[0])
                source.append(prefixes[1])
            types.append(f"{lower};\n")
            source.append(f"{lower});\n")
        types.append(f"\n}} {table} ;\n\n")
        source.append("}\n\n")

    return GeneratedHeaders(
        types_h="".join(types),
        dumptypes_h="".join(header),
        dumptypes_c="".join(source),
        unsupported=unsupported,
    )