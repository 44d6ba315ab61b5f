"""Helpers for the interactive SQL shell: settings, statement splitting and result layout."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_SET_USAGE = "Usage: set [stats|showplan|noexec] [on|off]\n"


def _option_usage(option: str) -> str:
    return f"Usage: set {option} [on|off]\n"


@dataclass
class ShellSettings:
    """Output and execution switches of the SQL shell."""

    headers: bool = True
    footers: bool = True
    pretty_print: bool = True
    showplan: bool = False
    noexec: bool = False
    stats: bool = False

    def apply_set(self, args: str) -> str:
        """Apply the arguments of a ``set`` command.

        Returns the message the shell shows the user; an empty string means
        the setting was applied.
        """
        tokens = args.split()
        if not tokens:
            return _SET_USAGE
        option = tokens[0]
        if option not in ("stats", "showplan", "noexec"):
            return f"Unknown set command {option}\n" + _SET_USAGE
        if len(tokens) < 2:
            return _option_usage(option)
        value = tokens[1]
        if value not in ("on", "off"):
            return f"Unknown {option} option {value}\n" + _option_usage(option)
        setattr(self, option, value == "on")
        return ""


def find_sql_terminator(text: str) -> int | None:
    """Index of a ``;`` that ends the text apart from trailing whitespace."""
    if not text:
        return None
    pos = len(text) - 1
    while pos > 0 and text[pos].isspace():
        pos -= 1
    return pos if text[pos] == ";" else None


def display_width(text: str | bytes) -> int:
    """Number of characters in text, counting UTF-8 bytes as characters."""
    if isinstance(text, (bytes, bytearray)):
        return sum(1 for byte in text if (byte & 0xC0) != 0x80)
    return len(text)


def format_break(size: int, first: bool) -> str:
    """A horizontal rule segment for a column of the given width."""
    return ("+" if first else "") + "-" * size + "+"


def format_value(value: str, size: int, first: bool) -> str:
    """A value padded to the column width between bars."""
    padding = " " * max(0, size - display_width(value))
    return ("|" if first else "") + value + padding + "|"


def rows_retrieved(count: int) -> str:
    """The footer line reporting how many rows were fetched."""
    if not count:
        return "No Rows retrieved\n"
    if count == 1:
        return "1 Row retrieved\n"
    return f"{count} Rows retrieved\n"


def _rule(widths: Sequence[int]) -> str:
    return "".join(format_break(w, not i) for i, w in enumerate(widths)) + "\n"


def _line(values: Sequence[str], widths: Sequence[int]) -> str:
    cells = (format_value(v, w, not i) for i, (v, w) in enumerate(zip(values, widths)))
    return "".join(cells) + "\n"


def format_table(
    columns: Sequence[str],
    widths: Sequence[int],
    rows: Iterable[Sequence[str]],
    headers: bool = True,
    footers: bool = True,
) -> str:
    """Lay out rows as a boxed table."""
    widths = list(widths)
    parts = []
    if headers:
        widths = [
            max(width, len(name.encode("utf-8")))
            for name, width in zip(columns, widths)
        ]
        parts.append(_rule(widths))
        parts.append(_line(columns, widths))
    parts.append(_rule(widths))
    count = 0
    for row in rows:
        parts.append(_line(row, widths))
        count += 1
    parts.append(_rule(widths))
    if footers:
        parts.append(rows_retrieved(count))
    return "".join(parts)


def format_delimited(
    columns: Sequence[str],
    rows: Iterable[Sequence[str]],
    delimiter: str | None = None,
    headers: bool = True,
    footers: bool = True,
) -> str:
    """Lay out rows as delimited text; the default delimiter is a tab."""
    sep = "\t" if delimiter is None else delimiter
    parts = []
    if headers:
        parts.append(sep.join(columns) + "\n")
    count = 0
    for row in rows:
        parts.append(sep.join(row) + "\n")
        count += 1
    if footers:
        parts.append(rows_retrieved(count))
    return "".join(parts)