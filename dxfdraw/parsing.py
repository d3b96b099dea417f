"""Parsing of the TABLES section of a DXF file."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from typing import Optional

from dxfdraw.drawing import Drawing
from dxfdraw.layer import Layer, LineType
from dxfdraw.symbols import (
    AppID,
    BlockRecord,
    DimStyle,
    Style,
    SymbolTableRecord,
    Ucs,
    View,
)
from dxfdraw.tables import TableType, table_type_from_name
from dxfdraw.viewport import Viewport

Pair = tuple[str, str]
RecordParser = Callable[[Drawing, Sequence[Pair]], SymbolTableRecord]

_INTEGER = re.compile(r"[+-]?\d+")


class DxfError(ValueError):
    """Raised when DXF input cannot be parsed."""


def _to_float(code: str, value: str) -> float:
    try:
        return float(value.strip())
    except ValueError as exc:
        raise DxfError(f"code {code}: {exc}") from None


def _to_int(code: str, value: str) -> int:
    text = value.strip()
    if not _INTEGER.fullmatch(text):
        raise DxfError(f"code {code}: invalid integer {value!r}")
    return int(text)


def _name_of(data: Sequence[Pair]) -> str:
    name = ""
    for code, value in data:
        if code == "2":
            name = value
    return name


def parse_tables(drawing: Drawing, line: int, data: Sequence[Pair]) -> None:
    """Parse the TABLES section; ``line`` is the line number it starts at."""
    pending: list[Pair] = []
    expect_name = False
    parser: Optional[RecordParser] = None
    index = TableType.VPORT
    for position, (code, value) in enumerate(data):
        if expect_name:
            if code != "2":
                raise DxfError(
                    f"line {line + 2 * position}: invalid group code: {code}"
                )
            try:
                index = table_type_from_name(value.upper())
            except ValueError:
                raise DxfError(
                    f"line {line + 2 * position}: unknown table type: {value}"
                ) from None
            parser = _PARSERS[index]
            expect_name = False
        elif code == "0" and value.upper() == "TABLE":
            expect_name = True
        elif code == "0" and value.upper() == "ENDTAB":
            if pending:
                parse_table(drawing, pending, index, parser)
                pending = []
        else:
            pending.append((code, value))
    if pending:
        try:
            parse_table(drawing, pending, index, parser)
        except DxfError as exc:
            raise DxfError(f"line {line + 2 * len(data)}: {exc}") from None


def parse_table(
    drawing: Drawing,
    data: Sequence[Pair],
    index: int,
    parser: Optional[RecordParser],
) -> None:
    """Replace the records of table ``index`` with those parsed from ``data``.

    Pairs before the first group code 0 are skipped.
    """
    if parser is None:
        raise DxfError("table data without a table type")
    table = drawing.tables[index]
    table.clear()

    def flush(record_data: Sequence[Pair]) -> None:
        record = parser(drawing, record_data)
        table.add(record)
        if isinstance(record, Layer):
            drawing.layers[record.name] = record

    pending: list[Pair] = []
    started = False
    for code, value in data:
        if code == "0":
            if pending:
                flush(pending)
                pending = []
            started = True
        elif started:
            pending.append((code, value))
    if pending:
        flush(pending)


_VIEWPORT_POINTS: dict[str, tuple[str, tuple[int, ...]]] = {
    "10": ("lower_left", (0,)),
    "20": ("lower_left", (1,)),
    "11": ("upper_right", (0,)),
    "21": ("upper_right", (1,)),
    "12": ("view_center", (0,)),
    "22": ("view_center", (1,)),
    "13": ("snap_base", (0,)),
    "23": ("snap_base", (1,)),
    "14": ("snap_spacing", (0, 1)),
    "24": ("snap_spacing", (1,)),
    "15": ("grid_spacing", (0, 1)),
    "25": ("grid_spacing", (1,)),
    "16": ("view_direction", (0,)),
    "26": ("view_direction", (1,)),
    "36": ("view_direction", (2,)),
    "17": ("view_target", (0,)),
    "27": ("view_target", (1,)),
    "37": ("view_target", (2,)),
}

_VIEWPORT_SCALARS: dict[str, str] = {
    "40": "height",
    "41": "aspect_ratio",
    "42": "lens_length",
    "43": "front_clip",
    "44": "back_clip",
    "50": "snap_angle",
    "51": "twist_angle",
}


def parse_viewport(drawing: Drawing, data: Sequence[Pair]) -> Viewport:
    """Parse a VPORT record."""
    viewport = Viewport("")
    for code, value in data:
        if code == "2":
            viewport.name = value
        elif code in _VIEWPORT_POINTS:
            attribute, axes = _VIEWPORT_POINTS[code]
            number = _to_float(code, value)
            coords = getattr(viewport, attribute)
            for axis in axes:
                coords[axis] = number
        elif code in _VIEWPORT_SCALARS:
            setattr(viewport, _VIEWPORT_SCALARS[code], _to_float(code, value))
    return viewport


def parse_ltype(drawing: Drawing, data: Sequence[Pair]) -> LineType:
    """Parse an LTYPE record."""
    name = ""
    description = ""
    lengths: list[float] = []
    filled = 0
    for code, value in data:
        if code == "2":
            name = value
        elif code == "3":
            description = value
        elif code == "73":
            lengths = [0.0] * _to_int(code, value)
        elif code == "49":
            if filled >= len(lengths):
                raise DxfError("ltype too long")
            lengths[filled] = _to_float(code, value)
            filled += 1
    return LineType(name, description, lengths)


def parse_layer(drawing: Drawing, data: Sequence[Pair]) -> Layer:
    """Parse a LAYER record; its line type must already be known."""
    name = ""
    flag = 0
    color = 0
    line_type: Optional[LineType] = None
    line_width = 0
    for code, value in data:
        if code == "2":
            name = value
        elif code == "70":
            flag = _to_int(code, value)
        elif code == "62":
            color = _to_int(code, value) % 256
        elif code == "6":
            try:
                line_type = drawing.line_type(value)
            except KeyError as exc:
                raise DxfError(str(exc.args[0])) from None
        elif code == "370":
            line_width = _to_int(code, value)
    layer = Layer(name, color=color, line_type=line_type)
    layer.flag = flag
    layer.set_line_width(line_width)
    layer.plot_style = drawing.plot_style
    return layer


def parse_style(drawing: Drawing, data: Sequence[Pair]) -> Style:
    """Parse a STYLE record."""
    name = ""
    font = ""
    big_font = ""
    for code, value in data:
        if code == "2":
            name = value
        elif code == "3":
            font = value
        elif code == "4":
            big_font = value
    return Style(name, font_name=font, big_font_name=big_font)


def parse_view(drawing: Drawing, data: Sequence[Pair]) -> View:
    """Parse a VIEW record."""
    return View(_name_of(data))


def parse_ucs(drawing: Drawing, data: Sequence[Pair]) -> Ucs:
    """Parse a UCS record."""
    return Ucs(_name_of(data))


def parse_appid(drawing: Drawing, data: Sequence[Pair]) -> AppID:
    """Parse an APPID record."""
    return AppID(_name_of(data))


def parse_dimstyle(drawing: Drawing, data: Sequence[Pair]) -> DimStyle:
    """Parse a DIMSTYLE record."""
    return DimStyle(_name_of(data))


def parse_block_record(drawing: Drawing, data: Sequence[Pair]) -> BlockRecord:
    """Parse a BLOCK_RECORD record."""
    return BlockRecord(_name_of(data))


_PARSERS: dict[TableType, RecordParser] = {
    TableType.VPORT: parse_viewport,
    TableType.LTYPE: parse_ltype,
    TableType.LAYER: parse_layer,
    TableType.STYLE: parse_style,
    TableType.VIEW: parse_view,
    TableType.UCS: parse_ucs,
    TableType.APPID: parse_appid,
    TableType.DIMSTYLE: parse_dimstyle,
    TableType.BLOCK_RECORD: parse_block_record,
}