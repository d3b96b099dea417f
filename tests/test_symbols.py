import pytest

from dxfdraw.formatter import AsciiFormatter
from dxfdraw.symbols import (
    STANDARD_STYLE,
    AppID,
    BlockRecord,
    DimStyle,
    HandleCounter,
    Handler,
    Style,
    Ucs,
    View,
)


def _pairs(text):
    lines = text.split("\n")
    assert lines[-1] == ""
    lines = lines[:-1]
    assert len(lines) % 2 == 0
    return list(zip(lines[::2], lines[1::2]))


def test_counter_starts_at_one_and_advances():
    counter = HandleCounter()
    taken = [counter.take() for _ in range(3)]
    assert taken == [1, 2, 3]
    assert counter.value == taken[-1] + 1


def test_set_handle_takes_from_counter():
    counter = HandleCounter(value=7)
    first = AppID("A")
    second = Ucs("B")
    first.set_handle(counter)
    second.set_handle(counter)
    assert first.handle == 7
    assert second.handle == first.handle + 1
    assert counter.value == second.handle + 1


def test_appid_format():
    assert _pairs(str(AppID("ACAD"))) == [
        ("0", "APPID"),
        ("5", "0"),
        ("100", "AcDbSymbolTableRecord"),
        ("100", "AcDbRegAppTableRecord"),
        ("2", "ACAD"),
        ("70", "0"),
    ]


def test_handle_written_in_hex():
    record = AppID("ACAD")
    record.set_handle(HandleCounter(value=255))
    assert ("5", "FF") in _pairs(str(record))


def test_owner_handle_written_with_code_330():
    owner = BlockRecord("*Model_Space")
    owner.set_handle(HandleCounter(value=42))
    record = View("front", owner=owner)
    pairs = _pairs(str(record))
    assert ("330", format(owner.handle, "X")) in pairs
    assert pairs.index(("100", "AcDbSymbolTableRecord")) > pairs.index(
        ("330", format(owner.handle, "X"))
    )


def test_no_owner_no_330():
    codes = [code for code, _ in _pairs(str(Ucs("u")))]
    assert "330" not in codes


def test_block_record_format():
    pairs = _pairs(str(BlockRecord("*Paper_Space")))
    assert pairs[0] == ("0", "BLOCK_RECORD")
    assert ("100", "AcDbBlockTableRecord") in pairs
    assert ("2", "*Paper_Space") in pairs
    assert pairs[-2:] == [("280", "1"), ("281", "0")]


def test_dimstyle_uses_code_105_for_handle():
    record = DimStyle("STANDARD")
    record.set_handle(HandleCounter(value=3))
    pairs = _pairs(str(record))
    assert pairs[0] == ("0", "DIMSTYLE")
    assert pairs[1] == ("105", "3")
    assert ("100", "AcDbDimStyleTableRecord") in pairs


@pytest.mark.parametrize(
    "record, kind, subclass",
    [
        (Ucs("world"), "UCS", "AcDbUCSTableRecord"),
        (View("top"), "VIEW", "AcDbViewTableRecord"),
    ],
)
def test_ucs_and_view_end_with_name(record, kind, subclass):
    pairs = _pairs(str(record))
    assert pairs[0] == ("0", kind)
    assert ("100", subclass) in pairs
    assert pairs[-1] == ("2", record.name)


def test_style_defaults():
    style = Style("Mine")
    assert style.font_name == "arial.ttf"
    assert style.big_font_name == ""
    assert style.width_factor == 1.0
    assert style.last_height_used == 100.0
    assert style.fixed_text_height == 0.0


def test_style_format_values():
    style = Style("Mine", font_name="romans.shx", big_font_name="big.shx")
    style.width_factor = 0.75
    style.last_height_used = 2.5
    pairs = _pairs(str(style))
    values = dict(pairs[5:])
    assert pairs[0] == ("0", "STYLE")
    assert ("100", "AcDbTextStyleTableRecord") in pairs
    assert float(values["41"]) == 0.75
    assert float(values["42"]) == 2.5
    assert values["3"] == "romans.shx"
    assert values["4"] == "big.shx"
    assert [code for code, _ in pairs[-2:]] == ["3", "4"]


def test_float_precision_follows_formatter():
    style = Style("Mine")
    formatter = AsciiFormatter()
    formatter.set_precision(2)
    values = dict(_pairs(style.format_string(formatter))[5:])
    assert values["41"] == "1.00"
    assert formatter.output() == ""


def test_standard_style_name():
    pairs = _pairs(STANDARD_STYLE.format_string(AsciiFormatter()))
    assert pairs[0] == ("0", "STYLE")
    assert ("2", "Standard") in pairs


def test_records_are_handlers():
    counter = HandleCounter()
    records = [AppID("a"), Style("s")]
    for record in records:
        assert isinstance(record, Handler)
        record.set_handle(counter)
    assert [record.handle for record in records] == [1, 2]
    assert counter.value == 3


def test_records_compare_by_identity():
    record = AppID("same")
    candidates = [AppID("same"), record, AppID("same")]
    assert candidates.index(record) == 1
    assert candidates.count(record) == 1