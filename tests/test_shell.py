import pytest

from mdbkit.shell import (
    ShellSettings,
    display_width,
    find_sql_terminator,
    format_break,
    format_delimited,
    format_table,
    format_value,
    rows_retrieved,
)


def test_terminator_found_before_whitespace():
    text = "select * from t;  \n"
    assert find_sql_terminator(text) == text.index(";")


def test_terminator_absent():
    assert find_sql_terminator("select * from t\n") is None


def test_terminator_empty():
    assert find_sql_terminator("") is None


def test_terminator_only_semicolon():
    assert find_sql_terminator(";") == 0


def test_display_width_str_and_bytes():
    word = "h\u00e9llo"
    assert display_width(word) == len(word)
    assert display_width(word.encode("utf-8")) == len(word)


def test_format_break():
    assert format_break(3, True) == "+" + "-" * 3 + "+"
    assert format_break(3, False) == "-" * 3 + "+"


def test_format_value_pads():
    assert format_value("ab", 4, True) == "|" + "ab" + " " * 2 + "|"
    assert format_value("ab", 1, False) == "ab|"


def test_rows_retrieved():
    assert rows_retrieved(0) == "No Rows retrieved\n"
    assert rows_retrieved(1) == "1 Row retrieved\n"
    assert rows_retrieved(5) == "5 Rows retrieved\n"


def test_format_table_no_headers_keeps_widths():
    out = format_table(["longname"], [2], [["x"]], headers=False, footers=False)
    assert out.splitlines() == [format_break(2, True), format_value("x", 2, True), format_break(2, True)]


def test_format_delimited_default_tab():
    out = format_delimited(["a", "b"], [["1", "2"]])
    assert out == "a\tb\n1\t2\n" + rows_retrieved(1)


def test_format_delimited_custom_no_footer():
    out = format_delimited(["a", "b"], [], delimiter=",", footers=False)
    assert out == "a,b\n"


@pytest.mark.parametrize("option", ["showplan", "noexec", "stats"])
def test_apply_set_toggles(option):
    settings = ShellSettings()
    assert settings.apply_set(f" {option} on") == ""
    assert getattr(settings, option) is True
    assert settings.apply_set(f" {option} off") == ""
    assert getattr(settings, option) is False


def test_apply_set_empty_gives_usage():
    assert ShellSettings().apply_set("") == "Usage: set [stats|showplan|noexec] [on|off]\n"


def test_apply_set_unknown_command():
    message = ShellSettings().apply_set(" colour on")
    assert message.startswith("Unknown set command colour\n")


def test_apply_set_missing_value():
    assert ShellSettings().apply_set(" showplan") == "Usage: set showplan [on|off]\n"


def test_apply_set_bad_value_leaves_setting():
    settings = ShellSettings()
    message = settings.apply_set(" noexec maybe")
    assert message.startswith("Unknown noexec option maybe\n")
    assert settings.noexec is False