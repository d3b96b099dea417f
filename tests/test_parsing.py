import pytest

from dxfdraw.drawing import Drawing
from dxfdraw.layer import Layer, LineType
from dxfdraw.parsing import (
    DxfError,
    parse_appid,
    parse_block_record,
    parse_dimstyle,
    parse_layer,
    parse_ltype,
    parse_style,
    parse_table,
    parse_tables,
    parse_ucs,
    parse_view,
    parse_viewport,
)
from dxfdraw.symbols import AppID, BlockRecord, DimStyle, Style, Ucs, View
from dxfdraw.tables import TableType

TABLES_DATA = [
    ("0", "TABLE"),
    ("2", "LTYPE"),
    ("0", "LTYPE"),
    ("2", "DASHED"),
    ("3", "Dashed line"),
    ("73", "2"),
    ("49", "0.5"),
    ("49", "-0.25"),
    ("0", "ENDTAB"),
    ("0", "TABLE"),
    ("2", "LAYER"),
    ("0", "LAYER"),
    ("2", "Walls"),
    ("70", "4"),
    ("62", "1"),
    ("6", "DASHED"),
    ("370", "25"),
    ("0", "ENDTAB"),
]


def test_parse_tables_builds_linetypes_and_layers():
    d = Drawing()
    parse_tables(d, 4, TABLES_DATA)
    ltypes = d.tables[TableType.LTYPE]
    assert [r.name for r in ltypes] == ["DASHED"]
    dashed = ltypes.find("dashed")
    assert isinstance(dashed, LineType)
    assert dashed.lengths == [0.5, -0.25]
    walls = d.layers["Walls"]
    assert walls in d.tables[TableType.LAYER].records
    assert walls.line_type is dashed
    assert walls.color == 1
    assert walls.flag == 4
    assert walls.line_width == 25
    assert walls.plot_style is d.plot_style


def test_parse_tables_invalid_group_code():
    d = Drawing()
    with pytest.raises(DxfError, match="invalid group code: 5"):
        parse_tables(d, 4, [("0", "TABLE"), ("5", "LAYER")])


def test_parse_tables_unknown_table_type():
    d = Drawing()
    with pytest.raises(DxfError, match="unknown table type: BOGUS"):
        parse_tables(d, 4, [("0", "TABLE"), ("2", "BOGUS")])


def test_parse_tables_unterminated_error_has_line_prefix():
    d = Drawing()
    data = [("0", "TABLE"), ("2", "LAYER"), ("0", "LAYER"), ("2", "X"), ("6", "NOPE")]
    with pytest.raises(DxfError, match=r"^line \d+: linetype NOPE"):
        parse_tables(d, 4, data)


def test_parse_table_skips_pairs_before_first_record():
    d = Drawing()
    data = [("5", "ABC"), ("70", "2"), ("0", "APPID"), ("2", "MYAPP"), ("0", "APPID"), ("2", "OTHER")]
    parse_table(d, data, TableType.APPID, parse_appid)
    assert [r.name for r in d.tables[TableType.APPID]] == ["MYAPP", "OTHER"]
    assert all(r.owner is d.tables[TableType.APPID] for r in d.tables[TableType.APPID])


def test_parse_table_without_parser():
    d = Drawing()
    with pytest.raises(DxfError):
        parse_table(d, [("0", "X"), ("2", "Y")], TableType.VIEW, None)


def test_parse_viewport():
    vp = parse_viewport(
        Drawing(),
        [("2", "*Active"), ("14", "2.0"), ("24", "3.0"), ("15", "10.0"), ("40", "250.0"), ("37", "7.5")],
    )
    assert vp.name == "*Active"
    assert vp.snap_spacing == [2.0, 3.0]
    assert vp.grid_spacing == [10.0, 10.0]
    assert vp.height == 250.0
    assert vp.view_target == [0.0, 0.0, 7.5]
    assert vp.lens_length == 50.0


def test_parse_viewport_bad_float():
    with pytest.raises(DxfError, match="code 40"):
        parse_viewport(Drawing(), [("40", "tall")])


def test_parse_ltype_too_long():
    with pytest.raises(DxfError, match="ltype too long"):
        parse_ltype(Drawing(), [("2", "X"), ("73", "1"), ("49", "1.0"), ("49", "2.0")])


def test_parse_ltype_bad_count():
    with pytest.raises(DxfError):
        parse_ltype(Drawing(), [("73", "two")])


def test_parse_layer_unknown_linetype():
    with pytest.raises(DxfError, match="linetype NOPE"):
        parse_layer(Drawing(), [("2", "L"), ("6", "NOPE")])


def test_parse_layer_defaults():
    d = Drawing()
    layer = parse_layer(d, [("2", "Plain"), ("6", "continuous")])
    assert isinstance(layer, Layer)
    assert layer.line_type.name == "Continuous"
    assert layer.plot_style is d.plot_style
    assert layer.flag == 0


def test_parse_style():
    style = parse_style(Drawing(), [("2", "Title"), ("3", "txt.shx"), ("4", "big.shx")])
    assert isinstance(style, Style)
    assert (style.name, style.font_name, style.big_font_name) == ("Title", "txt.shx", "big.shx")


@pytest.mark.parametrize(
    "parser, cls",
    [
        (parse_view, View),
        (parse_ucs, Ucs),
        (parse_appid, AppID),
        (parse_dimstyle, DimStyle),
        (parse_block_record, BlockRecord),
    ],
)
def test_named_records(parser, cls):
    record = parser(Drawing(), [("5", "1F"), ("2", "Named"), ("70", "0")])
    assert type(record) is cls
    assert record.name == "Named"