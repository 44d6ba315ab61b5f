import pytest

from mdbkit.queries import QueryParts, build_query, list_queries


def test_simple_select():
    rows = [(6, 0, "", "a"), (6, 0, "", "b"), (5, 0, "T", "")]
    assert build_query(rows) == "SELECT a,b FROM [T] "


def test_multiple_tables_joined_with_comma():
    rows = [(6, 0, "", "x"), (5, 0, "A", ""), (5, 0, "B", "")]
    assert " FROM [A],[B] " in build_query(rows)


def test_where_clause():
    rows = [(6, 0, "", "x"), (5, 0, "T", ""), (8, 0, "", "x>1")]
    sql = build_query(rows)
    assert " WHERE x>1 " in sql
    assert sql.startswith("SELECT x FROM [T] WHERE")


def test_where_is_overwritten_by_later_row():
    rows = [(8, 0, "", "first"), (8, 0, "", "second")]
    sql = build_query(rows)
    assert "second" in sql
    assert "first" not in sql


@pytest.mark.parametrize(
    "flag,expected",
    [(0x10, " TOP 10"), (0x30, " TOP 10 PERCENT"), (0x8, " DISTINCTROW"), (0x2, " DISTINCT")],
)
def test_predicate(flag, expected):
    sql = build_query([(3, flag, "10", ""), (6, 0, "", "c"), (5, 0, "T", "")])
    assert sql.startswith("SELECT" + expected + " c FROM")


def test_only_first_sort_used():
    rows = [(6, 0, "", "a"), (5, 0, "T", ""), (11, 0, "D", "a"), (11, 0, "", "b")]
    sql = build_query(rows)
    assert sql.endswith("ORDER BY a DESCENDING")
    assert "b" not in sql.split("ORDER BY", 1)[1]


def test_ascending_sort_has_no_suffix():
    sql = build_query([(11, 0, "", "a")])
    assert sql.endswith("ORDER BY a")


def test_join_rows_are_ignored():
    base = [(6, 0, "", "a"), (5, 0, "T", "")]
    assert build_query(base + [(7, 0, "T", "T.a=U.a")]) == build_query(base)


def test_string_attributes_are_accepted():
    parts = QueryParts()
    parts.add_row("6", "0", "", "col")
    parts.add_row("5", "0", "T", "")
    assert parts.columns == ["col"]
    assert parts.tables == ["[T]"]


def test_list_queries_line_break():
    assert list_queries(["q1", "q2"], line_break=True) == "q1\nq2\n"


def test_list_queries_delimiter():
    assert list_queries(["q1", "q2"], delimiter=";") == "q1;q2;\n"


def test_list_queries_default_space():
    assert list_queries(["q1", "q2"]) == "q1 q2 \n"


def test_list_queries_empty():
    assert list_queries([], line_break=True) == ""
    assert list_queries([]) == "\n"