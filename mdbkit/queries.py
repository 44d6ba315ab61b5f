"""Reconstruction of stored query SQL from query-definition rows."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")

_PREDICATE = 3
_TABLE = 5
_COLUMN = 6
_JOIN = 7
_WHERE = 8
_SORT = 11

_FLAG_TOP = 0x30
_FLAG_PERCENT = 0x20
_FLAG_DISTINCTROW = 0x8
_FLAG_DISTINCT = 0x2


def _as_int(value: int | str | None) -> int:
    if value is None:
        return 0
    if isinstance(value, int):
        return value
    match = _INT_PREFIX.match(value)
    return int(match.group(1)) if match else 0


@dataclass
class QueryParts:
    """The pieces of a SELECT statement gathered from definition rows."""

    predicate: str = ""
    tables: list[str] = field(default_factory=list)
    columns: list[str] = field(default_factory=list)
    where: str = ""
    sorting: str = ""

    def add_row(
        self,
        attribute: int | str,
        flag: int | str,
        name1: str,
        expression: str,
    ) -> None:
        """Take one definition row into account."""
        kind = _as_int(attribute)
        flags = _as_int(flag)
        if kind == _PREDICATE:
            if flags & _FLAG_TOP:
                self.predicate = f" TOP {name1}"
                if flags & _FLAG_PERCENT:
                    self.predicate += " PERCENT"
            elif flags & _FLAG_DISTINCTROW:
                self.predicate = " DISTINCTROW"
            elif flags & _FLAG_DISTINCT:
                self.predicate = " DISTINCT"
        elif kind == _TABLE:
            self.tables.append(f"[{name1}]")
        elif kind == _COLUMN:
            self.columns.append(expression)
        elif kind == _WHERE:
            self.where = expression
        elif kind == _SORT:
            if not self.sorting:
                self.sorting = f"ORDER BY {expression}"
                if name1 == "D":
                    self.sorting += " DESCENDING"
        # Join rows and anything else carry nothing the statement needs.

    def sql(self) -> str:
        """The SELECT statement these parts describe."""
        columns = ",".join(self.columns)
        tables = ",".join(self.tables)
        if self.where:
            return (
                f"SELECT{self.predicate} {columns} FROM {tables} "
                f"WHERE {self.where} {self.sorting}"
            )
        return f"SELECT{self.predicate} {columns} FROM {tables} {self.sorting}"


def build_query(rows: Iterable[tuple[int | str, int | str, str, str]]) -> str:
    """Build the SQL of a query from ``(attribute, flag, name1, expression)`` rows."""
    parts = QueryParts()
    for attribute, flag, name1, expression in rows:
        parts.add_row(attribute, flag, name1, expression)
    return parts.sql()


def list_queries(
    names: Iterable[str], line_break: bool = False, delimiter: str | None = None
) -> str:
    """Render query names one per line, or separated by a delimiter or space."""
    parts = []
    for name in names:
        if line_break:
            parts.append(f"{name}\n")
        elif delimiter is not None:
            parts.append(f"{name}{delimiter}")
        else:
            parts.append(f"{name} ")
    if not line_break:
        parts.append("\n")
    return "".join(parts)