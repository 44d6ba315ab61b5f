from mdbkit.header import Column, generate
from mdbkit.jsonout import ColType

BANNER = (
    "/******************************************************************/\n"
    "/* THIS IS AN AUTOMATICALLY GENERATED FILE.  DO NOT EDIT IT!!!!!! */\n"
    "/******************************************************************/\n"
)


def test_no_tables_gives_only_preambles():
    result = generate([])
    assert result.types_h == BANNER
    assert result.dumptypes_h == BANNER + '#include "types.h"\n'
    assert result.dumptypes_c == BANNER + "#include <stdio.h>\n" + '#include "dumptypes.h"\n'
    assert result.unsupported == []


def test_struct_declaration():
    result = generate([("Person", [Column("ID", ColType.INT), Column("Age", ColType.LONGINT)])])
    assert "typedef struct _Person\n{\n" in result.types_h
    assert "\tint\tid;\n" in result.types_h
    assert "\tlong\tage;\n" in result.types_h
    assert result.types_h.endswith("\n} Person ;\n\n")


def test_text_and_memo_are_strings():
    result = generate([("T", [Column("Name", ColType.TEXT), Column("Notes", ColType.MEMO)])])
    assert "\tchar *\tname;\n" in result.types_h
    assert "\tdump_string (x.name);\n" in result.dumptypes_c
    assert "\tdump_string (x.notes);\n" in result.dumptypes_c


def test_prototype_and_function():
    result = generate([("Orders", [Column("Qty", ColType.INT)])])
    assert "void dump_Orders (Orders x);\n" in result.dumptypes_h
    assert "void dump_Orders (Orders x)\n{\n" in result.dumptypes_c
    assert '\tfprintf (stdout, "x.qty = ");\n' in result.dumptypes_c
    assert "\tdump_int (x.qty);\n" in result.dumptypes_c
    assert result.dumptypes_c.endswith("}\n\n")


def test_unsupported_type_recorded():
    result = generate([("T", [Column("Price", ColType.MONEY)])])
    assert result.unsupported == [("T", "Price", int(ColType.MONEY))]
    assert "{\nprice;\n" in result.types_h
    assert "dump_" not in result.dumptypes_c.split("x.price = ")[1]


def test_only_ascii_is_lowered():
    result = generate([("T", [Column("ÄBC", ColType.INT)])])
    assert "\tint\tÄbc;\n" in result.types_h


def test_tables_in_order():
    result = generate([("A", []), ("B", [])])
    assert result.dumptypes_h.index("dump_A") < result.dumptypes_h.index("dump_B")
    assert result.types_h.count("typedef struct") == 2