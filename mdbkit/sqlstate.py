"""State collected while a SQL statement is parsed and executed."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime

from mdbkit.sargs import SargBuilder, SqlError

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_JET_EPOCH = datetime(1899, 12, 30)
_DAY_DIRECTIVE = re.compile(r"%[dejDFcx]")


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _unquote(text: str, message: str) -> str:
    if len(text) < 2 or not (text.startswith("'") and text.endswith("'")):
        raise SqlError(message)
    return text[1:-1]


@dataclass
class SqlColumn:
    """A column named in a SELECT list."""

    name: str
    disp_size: int = 0


@dataclass
class SqlTable:
    """A table named in a FROM clause."""

    name: str
    alias: str | None = None


@dataclass
class SqlState:
    """Columns, tables, limits and search arguments of one statement."""

    columns: list[SqlColumn] = field(default_factory=list)
    tables: list[SqlTable] = field(default_factory=list)
    all_columns: bool = False
    sel_count: bool = False
    max_rows: int = -1
    limit: int = -1
    limit_percent: bool = False
    row_count: int = 0
    sargs: SargBuilder = field(default_factory=SargBuilder)

    def add_column(self, name: str) -> SqlColumn:
        """Add a column to the select list."""
        column = SqlColumn(name)
        self.columns.append(column)
        return column

    def add_table(self, name: str) -> SqlTable:
        """Add a table to the FROM list."""
        table = SqlTable(name)
        self.tables.append(table)
        return table

    def select_all(self) -> None:
        """Select every column of the table."""
        self.all_columns = True

    def select_count(self) -> None:
        """Select only the row count."""
        self.sel_count = True

    def add_limit(self, limit: str, percent: bool) -> None:
        """Set a row limit; a percentage must lie between 0 and 100."""
        self.limit = _atoi(limit)
        self.limit_percent = bool(percent)
        if self.limit_percent and not 0 <= self.limit <= 100:
            raise SqlError(f"Invalid percentage limit {self.limit}")

    def set_maxrow(self, maxrow: int) -> None:
        """Set the maximum number of rows."""
        self.max_rows = maxrow

    def apply_percent_limit(self, num_rows: int) -> int:
        """Turn a percentage limit into a row count once the table size is known."""
        if self.limit != -1 and self.limit_percent:
            self.limit = int(num_rows / 100 * self.limit)
            self.limit_percent = False
        return self.limit

    def count_row(self) -> bool:
        """Account for one fetched row; False once the limit is reached."""
        if self.limit >= 0 and self.row_count + 1 > self.limit:
            return False
        self.row_count += 1
        return True

    def reset(self) -> None:
        """Forget the current statement."""
        self.columns = []
        self.tables = []
        self.sargs.clear()
        self.all_columns = False
        self.sel_count = False
        self.max_rows = -1
        self.row_count = 0
        self.limit = -1

    def dump(self) -> str:
        """List the selected columns and tables."""
        lines = [f"column = {c.name}\n" for c in self.columns]
        lines += [f"table = {t.name}\n" for t in self.tables]
        return "".join(lines)

    def strptime(self, data: str, fmt: str) -> str:
        """Parse a quoted date with a quoted format into a JET date literal."""
        try:
            text = _unquote(
                data, "First parameter of strptime (data) must be a string."
            )
            pattern = _unquote(
                fmt, "Second parameter of strptime (format) must be a string."
            )
            try:
                moment = datetime.strptime(text, pattern)
            except ValueError:
                raise SqlError(f"strptime('{text}','{pattern}') failed.") from None
        except SqlError:
            self.reset()
            raise
        delta = moment - _JET_EPOCH
        date = delta.days + delta.seconds / 86400 + delta.microseconds / 86400e6
        if not _DAY_DIRECTIVE.search(pattern):
            # Without a day the value is a pure time offset.
            date -= delta.days
        return f"{date:f}"