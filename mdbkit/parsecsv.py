"""Conversion of exported comma-separated text into a C array definition."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence

_GENERATED = (
    "/******************************************************************/\n"
    "/* THIS IS AN AUTOMATICALLY GENERATED FILE.  DO NOT EDIT IT!!!!!! */\n"
    "/******************************************************************/\n"
)
_ENCODING = "latin-1"


def _records(text: str) -> Iterator[str]:
    """Split on carriage returns; the character after each one is dropped."""
    pos = 0
    while True:
        end = text.find("\r", pos)
        if end == -1:
            if text[pos:]:
                yield text[pos:]
            return
        if end > pos:
            yield text[pos:end]
        if end + 1 >= len(text):
            return
        pos = end + 2


def convert_record(record: str) -> str:
    """Turn one comma-separated record into the body of a C initialiser."""
    out = []
    in_string = False
    last_comma = False
    for ch in record:
        if in_string:
            if ch == "\\":
                out.append("\\\\")
            elif ch == "\n":
                out.append("\\n")
            elif ch != "\r":
                out.append(ch)
            if ch == '"':
                in_string = False
                last_comma = False
        elif ch == ",":
            if last_comma:
                out.append('""')
            out.append(",\n\t")
            last_comma = True
        elif ch == '"':
            out.append(ch)
            last_comma = False
            in_string = True
        else:
            out.append(ch)
            last_comma = False
    if last_comma:
        out.append('""\n')
    return "".join(out)


def convert(text: str, name: str) -> tuple[str, int]:
    """Render text as a C source file defining ``name``_array; returns source and row count."""
    entries = [
        f"{{\t\t\t\t/* {count:6d} */\n\t" + convert_record(record) + "\n}"
        for count, record in enumerate(_records(text))
    ]
    source = (
        _GENERATED
        + "\n"
        + "#include <stdio.h>\n"
        + '#include "types.h"\n'
        + '#include "mdbsupport.h"\n'
        + "\n"
        + f"const {name} {name}_array [] = {{\n"
        + ",\n".join(entries)
        + "\n};\n"
        + f"\nconst int {name}_array_length = {len(entries)};\n"
    )
    return source, len(entries)


def _read(path: str) -> str:
    with open(path, encoding=_ENCODING, newline="") as handle:
        return handle.read()


def main(argv: Sequence[str] | None = None) -> int:
    """Convert ``<file>`` (or ``<file>.txt``) into ``<file>.c``."""
    args = list(sys.argv[1:] if argv is None else argv)
    sys.stderr.write(
        "mdb-parsecsv is deprecated and will disappear in a future version.\n\n"
    )
    if not args:
        sys.stderr.write("Usage: mdb-parsecsv <file> (assumed extension .txt)\n")
        return 1
    name = args[0]
    try:
        text = _read(name)
    except OSError:
        try:
            text = _read(name + ".txt")
        except OSError:
            return 1
    source, count = convert(text, name)
    with open(name + ".c", "w", encoding=_ENCODING, newline="") as handle:
        handle.write(source)
    print(f"count = {count}")
    return 0