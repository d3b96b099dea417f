import pytest

from dxfdraw.formatter import AsciiFormatter
from dxfdraw.layer import Layer
from dxfdraw.symbols import AppID, DimStyle, HandleCounter
from dxfdraw.tables import Table, Tables, TableType, table_type_from_name


def _pairs(text):
    lines = text.split("\n")[:-1]
    return list(zip(lines[::2], lines[1::2]))


def test_table_type_from_name():
    assert table_type_from_name("LAYER") is TableType.LAYER
    assert table_type_from_name("BLOCK_RECORD") is TableType.BLOCK_RECORD


def test_table_type_from_unknown_name():
    with pytest.raises(ValueError):
        table_type_from_name("NOPE")


def test_default_tables_order_and_contents():
    tables = Tables()
    assert [t.name for t in tables] == [k.name for k in TableType]
    ltype_names = [r.name for r in tables[TableType.LTYPE]]
    assert ltype_names == ["ByLayer", "ByBlock", "Continuous", "HIDDEN", "DASHDOT"]
    assert [r.name for r in tables[TableType.LAYER]] == ["0"]
    assert [r.name for r in tables[TableType.BLOCK_RECORD]] == [
        "*Model_Space",
        "*Paper_Space",
        "*Paper_Space0",
    ]


def test_add_sets_owner_and_find_ignores_case():
    table = Table("APPID")
    record = AppID("MyApp")
    table.add(record)
    assert record.owner is table
    assert table.find("myapp") is record
    assert len(table) == 1


def test_find_missing_raises():
    table = Table("APPID")
    with pytest.raises(KeyError):
        table.find("missing")


def test_clear_removes_records():
    table = Table("APPID")
    table.add(AppID("A"))
    table.clear()
    assert len(table) == 0
    assert table.records == ()


def test_set_handle_is_consecutive():
    table = Table("APPID")
    first, second = AppID("A"), AppID("B")
    table.add(first)
    table.add(second)
    counter = HandleCounter(5)
    table.set_handle(counter)
    assert (table.handle, first.handle, second.handle) == (5, 6, 7)
    assert counter.value == 8


def test_dimstyle_table_lists_record_handles():
    table = Table("DIMSTYLE")
    record = DimStyle("Standard")
    table.add(record)
    table.set_handle(HandleCounter(10))
    pairs = _pairs(table.format_string(AsciiFormatter()))
    assert ("100", "AcDbDimStyleTable") in pairs
    assert ("340", f"{record.handle:X}") in pairs
    assert pairs[-1] == ("0", "ENDTAB")


def test_other_tables_have_no_dimstyle_part():
    table = Table("APPID")
    table.add(AppID("A"))
    pairs = _pairs(table.format_string(AsciiFormatter()))
    assert pairs[:2] == [("0", "TABLE"), ("2", "APPID")]
    assert all(code != "340" for code, _ in pairs)


def test_tables_section_format():
    pairs = _pairs(Tables().format_string(AsciiFormatter()))
    assert pairs[:2] == [("0", "SECTION"), ("2", "TABLES")]
    assert pairs[-1] == ("0", "ENDSEC")
    assert pairs.count(("0", "TABLE")) == len(TableType)
    assert pairs.count(("0", "ENDTAB")) == len(TableType)


def test_add_layer_goes_to_layer_table():
    tables = Tables()
    layer = Layer("walls")
    tables.add_layer(layer)
    assert tables[TableType.LAYER].find("WALLS") is layer
    assert layer.owner is tables[TableType.LAYER]


def test_tables_add_appends_table():
    tables = Tables()
    extra = Table("EXTRA")
    tables.add(extra)
    assert len(tables) == len(TableType) + 1
    assert tables[-1] is extra