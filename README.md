# mdbkit

Building blocks for tools that query and export Microsoft Access (JET)
database content. The package provides the logic that sits around a database
reader: building SQL search-argument trees, keeping the state of a SQL
statement, formatting rows as JSON, delimited text or boxed tables, choosing
binary literal syntax for `INSERT` output, rebuilding stored queries as SQL
text, listing catalog entries, generating C headers and arrays, and converting
delimited text rows into typed fields for import.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

| Module | What it does |
| --- | --- |
| `mdbkit.sargs` | `SargBuilder` builds a tree of `SargNode` search arguments bottom-up from a stack (`push`, `pop`, `add_sarg`, `add_and`, `add_or`, `add_not`, `clear`). `eval_expr` compares two literals (both quoted strings or both numbers) and pushes a node holding 1 or 0. `Op` and `ValueType` name operators and constant types; `dump_node` renders a tree as indented text. Errors raise `SqlError`. |
| `mdbkit.b64` | `base64_encode(data, result_size=None)`: padded Base64; raises `ValueError` when the result plus a terminator does not fit in `result_size`. |
| `mdbkit.sqlstate` | `SqlState` holds the selected columns (`SqlColumn`) and tables (`SqlTable`), the `SELECT *` and count flags, a plain or percentage row limit, the row count and a `SargBuilder`. `apply_percent_limit` turns a percentage into rows, `count_row` enforces the limit, `reset` clears the statement, `dump` lists columns and tables, and `strptime` turns a quoted date and quoted format into a JET day-number literal. |
| `mdbkit.jsonout` | One JSON object per row: `quote_value`, `binary_value` (a `{"$binary": ..., "$type": "00"}` object), `format_column` and `format_row`, which leaves out empty values. `ColType` names column types; `is_quote_type` and `is_binary_type` classify them. |
| `mdbkit.export` | `unescape` expands `\n`, `\t` and `\r` in delimiter options, `parse_bin_mode` reads `strip`, `raw`, `octal` or `hex` into a `BinMode`, and `binary_wrapper` gives the prefix, quote and suffix of a hex blob literal for the `sqlite`, `mysql` and `postgres` backends. |
| `mdbkit.tables` | `ObjectType`, `valid_types`, `object_type` for names such as `table`, `query` or `any` (case-insensitive), and `format_listing` for catalog listings of `(name, type, is_system)` entries. |
| `mdbkit.shell` | Pieces of an interactive SQL shell: `ShellSettings.apply_set` for `stats`, `showplan` and `noexec` `on`/`off`, `find_sql_terminator`, `display_width`, `format_break`, `format_value`, `rows_retrieved`, and boxed (`format_table`) or delimited (`format_delimited`) result output. |
| `mdbkit.queries` | `QueryParts.add_row` collects query-definition rows (predicate, tables, columns, WHERE, ORDER BY) and `sql()` renders the SELECT statement; `build_query` does both in one call, `list_queries` lists query names. |
| `mdbkit.header` | `generate(tables)` produces the text of `types.h`, `dumptypes.h` and `dumptypes.c` for tables described by `Column` values, returned as `GeneratedHeaders`, with columns of unsupported types recorded in `unsupported`. |
| `mdbkit.importer` | `split_row`, `convert_field` and `prep_row` turn a delimited line into `Field` values for a table's `ImportColumn` list. Text is stored as UTF-8; byte, int and long int cells are read as hexadecimal and stored little-endian. Bad input raises `RowFormatError`. |
| `mdbkit.parsecsv` | `convert_record` and `convert` turn comma-separated text into a C source file holding an array of structs; `main` is the command below. |

## Command

`mdb-parsecsv` converts a comma-separated text file into a C array definition:

```
mdb-parsecsv Orders
```

It reads `Orders` (or `Orders.txt` when `Orders` cannot be opened), treats each
carriage return as the end of a record, writes `Orders.c` containing
`const Orders Orders_array [] = { ... };` and `Orders_array_length`, and prints
`count = N` with the number of records converted.

## What this package does not do

mdbkit does not open or read `.mdb` or `.accdb` files, and does not write to
them. It has no SQL parser, no interactive shell loop and no export, schema,
listing or import commands: the modules above format, check and convert data
that a database reader supplies, and `mdb-parsecsv` is the only command.