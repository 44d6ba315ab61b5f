import base64
import json

from mdbkit.jsonout import (
    ColType,
    binary_value,
    format_column,
    format_row,
    is_binary_type,
    is_quote_type,
    quote_value,
)


def test_type_classes():
    assert is_quote_type(ColType.TEXT) and is_quote_type(ColType.DATETIME)
    assert not is_quote_type(ColType.LONGINT)
    assert is_binary_type(ColType.OLE) and is_binary_type(ColType.REPID)
    assert not is_binary_type(ColType.MEMO)


def test_quote_escapes_quote_and_backslash():
    assert quote_value('a"b\\c') == '"a\\"b\\\\c"'


def test_quote_escapes_control_chars():
    assert quote_value("a\x01") == '"a\\u0001"'
    assert quote_value("a\x1f", drop_nonascii=True) == '"a "'


def test_quote_is_valid_json():
    text = 'x"y\\z\n\tw é'
    assert json.loads(quote_value(text)) == text


def test_binary_value_round_trip():
    data = bytes(range(10))
    parsed = json.loads(binary_value(data))
    assert parsed["$type"] == "00"
    assert base64.b64decode(parsed["$binary"]) == data


def test_binary_value_empty():
    assert json.loads(binary_value(b""))["$binary"] == ""


def test_format_column_plain_number():
    assert format_column("n", "5", ColType.LONGINT) == '"n":5'


def test_format_column_datetime_quoted():
    assert json.loads("{" + format_column("d", "01/02/03", ColType.DATETIME) + "}") == {
        "d": "01/02/03"
    }


def test_format_column_binary():
    parsed = json.loads("{" + format_column("b", b"\x00\xff", ColType.BINARY) + "}")
    assert base64.b64decode(parsed["b"]["$binary"]) == b"\x00\xff"


def test_format_row_skips_nulls():
    row = format_row(
        [
            ("id", "1", ColType.LONGINT),
            ("name", None, ColType.TEXT),
            ("empty", "", ColType.TEXT),
            ("note", "hi", ColType.MEMO),
        ]
    )
    assert row.endswith("}\n")
    assert json.loads(row) == {"id": 1, "note": "hi"}


def test_format_row_empty():
    assert format_row([("a", None, ColType.TEXT)]) == "{}\n"