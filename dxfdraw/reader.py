"""Reading DXF documents: section splitting and the non-table parsers."""

from __future__ import annotations

import io
import re
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import IO, Optional, Union

from dxfdraw.blocks import Block
from dxfdraw.drawing import Drawing
from dxfdraw.entity import Entity
from dxfdraw.figures import LwPolyline, Text, ThreeDFace
from dxfdraw.header import SectionType, section_type_from_name
from dxfdraw.insunit import Unit, UnitType
from dxfdraw.layer import LT_CONTINUOUS
from dxfdraw.parsing import DxfError, parse_tables
from dxfdraw.shapes import Arc, Circle, Line, Point

Pair = tuple[str, str]
SectionParser = Callable[[Drawing, int, Sequence[Pair]], object]
EntityParser = Callable[[Drawing, Sequence[Pair]], Entity]

DEFAULT_COLOR = 7  # white
DEFAULT_LINE_TYPE = LT_CONTINUOUS

_INTEGER = re.compile(r"[+-]?\d+")
_AXES = {"10": 0, "20": 1, "30": 2}


def _to_float(code: str, value: str) -> float:
    text = value.strip()
    try:
        if "_" in text:
            raise ValueError
        return float(text)
    except ValueError:
        raise DxfError(f"code {code}: invalid number {value!r}") from None


def _to_int(code: str, value: str) -> int:
    text = value.strip()
    if not _INTEGER.fullmatch(text):
        raise DxfError(f"code {code}: invalid integer {value!r}")
    return int(text)


def new_drawing() -> Drawing:
    """Create an empty drawing."""
    return Drawing()


def _lines(stream: Iterable[Union[str, bytes]]) -> Iterator[str]:
    for raw in stream:
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8", errors="replace")
        if raw.endswith("\n"):
            raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]
        yield raw


def _run_section(
    parser: Optional[SectionParser],
    drawing: Drawing,
    line: int,
    data: Sequence[Pair],
) -> None:
    if parser is None:
        raise DxfError(f"line {line}: data outside of a section")
    parser(drawing, line, data)


def from_reader(stream: Iterable[Union[str, bytes]]) -> Drawing:
    """Build a drawing from the lines of an ASCII DXF stream."""
    drawing = new_drawing()
    data: list[Pair] = []
    expect_name = False
    parser: Optional[SectionParser] = None
    start_line = 0
    code = ""
    for number, text in enumerate(_lines(stream), start=1):
        if number % 2 == 1:
            code = text.strip()
            continue
        if expect_name:
            if code != "2":
                raise DxfError(f"line {number}: invalid group code: {code}")
            try:
                kind = section_type_from_name(text.upper())
            except ValueError:
                raise DxfError(
                    f"line {number}: unknown section name: {text}"
                ) from None
            parser = _SECTION_PARSERS[kind]
            start_line = number + 1
            expect_name = False
            continue
        keyword = text.upper() if code == "0" else None
        if keyword == "EOF":
            return drawing
        if keyword == "SECTION":
            expect_name = True
        elif keyword == "ENDSEC":
            _run_section(parser, drawing, start_line, data)
            data = []
            start_line = number + 1
        else:
            data.append((code, text))
    if data:
        _run_section(parser, drawing, start_line, data)
    return drawing


def from_file(filename: str) -> Drawing:
    """Read a drawing from the DXF file ``filename``."""
    with open(filename, "rb") as stream:
        return from_reader(stream)


def from_string(data: str) -> Drawing:
    """Read a drawing from DXF text."""
    return from_reader(io.StringIO(data, newline="\n"))


# HEADER

_HEADER_POINTS = {"$INSBASE": "ins_base", "$EXTMIN": "ext_min", "$EXTMAX": "ext_max"}


def parse_header(drawing: Drawing, line: int, data: Sequence[Pair]) -> None:
    """Parse the HEADER section variables this library knows."""
    header = drawing.header
    name = ""
    for code, value in data:
        if code == "9":
            name = value
        elif code == "1":
            if name == "$ACADVER":
                header.version = value
        elif code in _AXES:
            attribute = _HEADER_POINTS.get(name)
            if attribute is not None:
                getattr(header, attribute)[_AXES[code]] = _to_float(code, value)
        elif code == "40":
            if name == "$LTSCALE":
                header.lt_scale = _to_float(code, value)
        elif code == "70":
            if name == "$INSUNITS":
                number = _to_int(code, value)
                try:
                    header.ins_unit = Unit(number)
                except ValueError:
                    raise DxfError(f"code {code}: unknown unit {number}") from None
            elif name == "$LUNITS":
                number = _to_int(code, value)
                try:
                    header.ins_lunit = UnitType(number - 2)
                except ValueError:
                    raise DxfError(
                        f"code {code}: unknown unit type {number}"
                    ) from None


def parse_classes(drawing: Drawing, line: int, data: Sequence[Pair]) -> None:
    """The CLASSES section is skipped."""


def parse_objects(drawing: Drawing, line: int, data: Sequence[Pair]) -> None:
    """The OBJECTS section is skipped."""


# BLOCKS


def parse_blocks(drawing: Drawing, line: int, data: Sequence[Pair]) -> list[Block]:
    """Parse every BLOCK of the BLOCKS section and return them."""
    blocks: list[Block] = []
    pending: list[Pair] = []
    adding = True
    for position, (code, value) in enumerate(data):
        keyword = value.upper() if code == "0" else None
        if keyword == "BLOCK":
            adding = True
        elif keyword == "ENDBLK":
            if pending:
                try:
                    blocks.append(parse_block(drawing, pending))
                except DxfError as exc:
                    raise DxfError(f"line {line + 2 * position}: {exc}") from None
                pending = []
            adding = False
        elif adding:
            pending.append((code, value))
    if pending:
        try:
            blocks.append(parse_block(drawing, pending))
        except DxfError as exc:
            raise DxfError(f"line {line + 2 * len(data)}: {exc}") from None
    return blocks


def _set_layer(drawing: Drawing, target, name: str) -> None:
    try:
        target.layer = drawing.layer(name)
    except KeyError:
        pass


def parse_block(drawing: Drawing, data: Sequence[Pair]) -> Block:
    """Parse one BLOCK."""
    block = Block()
    for code, value in data:
        if code == "2":
            block.name = value
        elif code == "1":
            block.description = value
        elif code == "8":
            _set_layer(drawing, block, value)
        elif code in _AXES:
            block.coord[_AXES[code]] = _to_float(code, value)
        elif code == "70":
            block.flag = _to_int(code, value)
    return block


# ENTITIES


def parse_entities(drawing: Drawing, line: int, data: Sequence[Pair]) -> None:
    """Parse the ENTITIES section and add each entity to ``drawing``."""
    pending: list[Pair] = []
    for position, pair in enumerate(data):
        if pair[0] == "0" and pending:
            try:
                entity = parse_entity(drawing, pending)
            except DxfError as exc:
                raise DxfError(f"line {line + 2 * position}: {exc}") from None
            drawing.add_entity(entity)
            pending = []
        pending.append(pair)
    if pending:
        try:
            entity = parse_entity(drawing, pending)
        except DxfError as exc:
            raise DxfError(f"line {line + 2 * len(data)}: {exc}") from None
        drawing.add_entity(entity)


def parse_entity(drawing: Drawing, data: Sequence[Pair]) -> Entity:
    """Parse one entity; its first pair names the entity type."""
    if not data:
        raise DxfError("no data")
    code, name = data[0]
    if code != "0":
        raise DxfError(f'invalid group code: "{code}"')
    return parse_entity_func(name)(drawing, data)


def parse_entity_func(name: str) -> EntityParser:
    """Return the parser for the entity type ``name``."""
    try:
        return _ENTITY_PARSERS[name]
    except KeyError:
        raise DxfError("unknown entity type") from None


def _apply_common(drawing: Drawing, entity: Entity, code: str, value: str) -> bool:
    if code == "8":
        _set_layer(drawing, entity, value)
        return True
    if code == "48":
        entity.ltscale = _to_float(code, value)
        return True
    return False


def _point_codes(offset: int) -> dict[str, int]:
    return {f"{axis + 1}{offset}": axis for axis in range(3)}


_FIRST = _point_codes(0)
_SECOND = _point_codes(1)
_DIRECTION = {"210": 0, "220": 1, "230": 2}


def parse_line(drawing: Drawing, data: Sequence[Pair]) -> Line:
    """Parse a LINE entity."""
    line = Line()
    for code, value in data:
        if _apply_common(drawing, line, code, value):
            continue
        if code in _FIRST:
            line.start[_FIRST[code]] = _to_float(code, value)
        elif code in _SECOND:
            line.end[_SECOND[code]] = _to_float(code, value)
    return line


_FACE_CODES = {
    f"{axis + 1}{corner}": (corner, axis) for corner in range(4) for axis in range(3)
}


def parse_three_d_face(drawing: Drawing, data: Sequence[Pair]) -> ThreeDFace:
    """Parse a 3DFACE; a missing fourth corner repeats the third."""
    face = ThreeDFace()
    fourth = 0
    for code, value in data:
        if _apply_common(drawing, face, code, value):
            continue
        if code in _FACE_CODES:
            corner, axis = _FACE_CODES[code]
            face.points[corner][axis] = _to_float(code, value)
            if corner == 3:
                fourth |= 1 << axis
        elif code == "70":
            face.flag = _to_int(code, value)
    if fourth != 7:
        face.points[3] = list(face.points[2])
    return face


def parse_lw_polyline(drawing: Drawing, data: Sequence[Pair]) -> LwPolyline:
    """Parse a LWPOLYLINE; the vertex count must match the vertices given."""
    polyline = LwPolyline()
    index = 0
    read = 0
    for code, value in data:
        if _apply_common(drawing, polyline, code, value):
            continue
        if code == "90":
            count = _to_int(code, value)
            polyline.num = count
            polyline.vertices = [[0.0, 0.0] for _ in range(count)]
        elif code in ("10", "20"):
            if polyline.num <= index:
                raise DxfError("LWPOLYLINE extra vertices")
            axis = 0 if code == "10" else 1
            polyline.vertices[index][axis] = _to_float(code, value)
            read |= 1 << axis
        elif code == "70":
            if _to_int(code, value) == 1:
                polyline.close()
        if read == 3:
            read = 0
            index += 1
    if index != polyline.num:
        raise DxfError("LWPOLYLINE not enough vertices")
    return polyline


def _apply_circle(circle: Circle, code: str, value: str) -> bool:
    if code in _FIRST:
        circle.center[_FIRST[code]] = _to_float(code, value)
    elif code == "40":
        circle.radius = _to_float(code, value)
    elif code in _DIRECTION:
        circle.direction[_DIRECTION[code]] = _to_float(code, value)
    else:
        return False
    return True


def parse_circle(drawing: Drawing, data: Sequence[Pair]) -> Circle:
    """Parse a CIRCLE entity."""
    circle = Circle()
    for code, value in data:
        if not _apply_common(drawing, circle, code, value):
            _apply_circle(circle, code, value)
    return circle


def parse_arc(drawing: Drawing, data: Sequence[Pair]) -> Arc:
    """Parse an ARC entity."""
    circle = Circle()
    angle = [0.0, 0.0]
    for code, value in data:
        if _apply_common(drawing, circle, code, value):
            continue
        if _apply_circle(circle, code, value):
            continue
        if code == "50":
            angle[0] = _to_float(code, value)
        elif code == "51":
            angle[1] = _to_float(code, value)
    arc = Arc.from_circle(circle)
    arc.angle = angle
    return arc


def parse_point(drawing: Drawing, data: Sequence[Pair]) -> Point:
    """Parse a POINT entity."""
    point = Point()
    for code, value in data:
        if _apply_common(drawing, point, code, value):
            continue
        if code in _FIRST:
            point.coord[_FIRST[code]] = _to_float(code, value)
    return point


_TEXT_FLOATS = {"40": "height", "50": "rotation"}
_TEXT_INTS = {"71": "gen_flag", "72": "horizontal_flag", "73": "vertical_flag"}


def parse_text(drawing: Drawing, data: Sequence[Pair]) -> Text:
    """Parse a TEXT entity."""
    text = Text()
    for code, value in data:
        if _apply_common(drawing, text, code, value):
            continue
        if code in _FIRST:
            text.coord1[_FIRST[code]] = _to_float(code, value)
        elif code in _SECOND:
            text.coord2[_SECOND[code]] = _to_float(code, value)
        elif code in _TEXT_FLOATS:
            setattr(text, _TEXT_FLOATS[code], _to_float(code, value))
        elif code in _TEXT_INTS:
            setattr(text, _TEXT_INTS[code], _to_int(code, value))
        elif code == "1":
            text.value = value
        elif code == "7":
            style = drawing.styles.get(value)
            if style is not None:
                text.style = style
    return text


_ENTITY_PARSERS: dict[str, EntityParser] = {
    "LINE": parse_line,
    "3DFACE": parse_three_d_face,
    "LWPOLYLINE": parse_lw_polyline,
    "CIRCLE": parse_circle,
    "ARC": parse_arc,
    "POINT": parse_point,
    "TEXT": parse_text,
}

_SECTION_PARSERS: dict[SectionType, SectionParser] = {
    SectionType.HEADER: parse_header,
    SectionType.CLASSES: parse_classes,
    SectionType.TABLES: parse_tables,
    SectionType.BLOCKS: parse_blocks,
    SectionType.ENTITIES: parse_entities,
    SectionType.OBJECTS: parse_objects,
}

StreamLike = Union[IO[str], IO[bytes]]