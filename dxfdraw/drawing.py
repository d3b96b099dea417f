"""The Drawing: a whole DXF document built from its six sections."""

from __future__ import annotations

import io
from collections.abc import Sequence
from typing import IO, Optional, Union

from dxfdraw.blocks import Blocks, Classes
from dxfdraw.entity import Entities, Entity
from dxfdraw.figures import LwPolyline, Polyline, Text, ThreeDFace
from dxfdraw.formatter import AsciiFormatter
from dxfdraw.header import Header, Section
from dxfdraw.layer import LAYER_0, Layer, LineType
from dxfdraw.objects import (
    Dictionary,
    DxfObject,
    Group,
    Objects,
    new_dictionary_with_default,
)
from dxfdraw.shapes import Arc, Circle, Line, Point
from dxfdraw.symbols import STANDARD_STYLE, HandleCounter, Handler, Style
from dxfdraw.tables import Tables, TableType

Stream = Union[IO[str], IO[bytes]]

_FLOAT_PRECISION = 16


class Drawing:
    """DXF drawing data: sections, layers, styles and groups."""

    def __init__(self) -> None:
        self.file_name = ""
        self.layers: dict[str, Layer] = {"0": LAYER_0}
        self.groups: dict[str, Group] = {}
        self.styles: dict[str, Style] = {"STANDARD": STANDARD_STYLE}
        self.current_layer: Layer = self.layers["0"]
        self.current_style: Style = self.styles["STANDARD"]
        self._formatter = AsciiFormatter(precision=_FLOAT_PRECISION)
        self.header = Header()
        self.classes = Classes()
        self.tables = Tables()
        self.blocks = Blocks()
        self.entities = Entities()
        self.objects = Objects()
        self._read_buffer: Optional[io.BytesIO] = None

        self._dictionary = Dictionary()
        self._add_object(self._dictionary)
        plot_styles, placeholder = new_dictionary_with_default(self._dictionary)
        self._dictionary.add_item("ACAD_PLOTSTYLENAME", plot_styles)
        self._add_object(plot_styles)
        self._add_object(placeholder)
        self._group_dictionary = Dictionary()
        self._add_object(self._group_dictionary)
        self._dictionary.add_item("ACAD_GROUP", self._group_dictionary)
        self.plot_style: Handler = placeholder
        self.layers["0"].plot_style = self.plot_style

    @property
    def sections(self) -> tuple[Section, ...]:
        """The sections in file order."""
        return (
            self.header,
            self.classes,
            self.tables,
            self.blocks,
            self.entities,
            self.objects,
        )

    # Saving

    def _save_file(self, filename: str) -> None:
        with open(filename, "wb") as stream:
            self.write_to(stream)

    def save(self) -> None:
        """Save to ``file_name``; use :meth:`save_as` the first time."""
        if not self.file_name:
            raise ValueError("filename is blank, use save_as(filename)")
        self._save_file(self.file_name)

    def save_as(self, filename: str) -> None:
        """Save under ``filename`` and remember it."""
        self.file_name = filename
        self._save_file(filename)

    def _set_handles(self) -> None:
        counter = HandleCounter(1)
        for section in self.sections[1:]:
            section.set_handle(counter)
        self.header.set_handle(counter)

    # Layers, styles and line types

    def layer(self, name: str, set_current: bool = False) -> Layer:
        """Return the named layer, optionally making it current."""
        try:
            found = self.layers[name]
        except KeyError:
            raise KeyError(f"layer {name} doesn't exist") from None
        if set_current:
            self.current_layer = found
        return found

    def add_layer(
        self,
        name: str,
        color: int,
        line_type: Optional[LineType],
        set_current: bool = False,
    ) -> Layer:
        """Add a new layer; an existing name raises ValueError."""
        existing = self.layers.get(name)
        if existing is not None:
            if set_current:
                self.current_layer = existing
            raise ValueError(f"layer {name} already exists")
        new_layer = Layer(name, color=color, line_type=line_type)
        new_layer.plot_style = self.plot_style
        self.layers[name] = new_layer
        self.tables.add_layer(new_layer)
        if set_current:
            self.current_layer = new_layer
        return new_layer

    def change_layer(self, name: str) -> None:
        """Make the named layer current."""
        self.layer(name, set_current=True)

    def style(self, name: str, set_current: bool = False) -> Style:
        """Return the named text style, optionally making it current."""
        try:
            found = self.styles[name]
        except KeyError:
            raise KeyError(f"style {name} doesn't exist") from None
        if set_current:
            self.current_style = found
        return found

    def add_style(
        self,
        name: str,
        font_name: str,
        big_font_name: str,
        set_current: bool = False,
    ) -> Style:
        """Add a new text style; an existing name raises ValueError."""
        existing = self.styles.get(name)
        if existing is not None:
            if set_current:
                self.current_style = existing
            raise ValueError(f"style {name} already exists")
        new_style = Style(name, font_name=font_name, big_font_name=big_font_name)
        self.styles[name] = new_style
        self.tables[TableType.STYLE].add(new_style)
        if set_current:
            self.current_style = new_style
        return new_style

    def line_type(self, name: str) -> LineType:
        """Return the named line type (case is ignored)."""
        try:
            found = self.tables[TableType.LTYPE].find(name)
        except KeyError:
            raise KeyError(f"linetype {name} doesn't exist") from None
        return found  # type: ignore[return-value]

    def add_line_type(self, name: str, description: str, *args: float) -> LineType:
        """Add a line type with pattern lengths ``args``."""
        table = self.tables[TableType.LTYPE]
        try:
            table.find(name)
        except KeyError:
            pass
        else:
            raise ValueError(f"linetype {name} already exists")
        new_type = LineType(name, description, list(args))
        table.add(new_type)
        return new_type

    # Entities

    def add_entity(self, entity: Entity) -> None:
        """Append an entity to the ENTITIES section."""
        self.entities.add(entity)

    def point(self, x: float, y: float, z: float) -> Point:
        """Create a POINT at (x, y, z)."""
        created = Point(coord=[x, y, z], layer=self.current_layer)
        self.add_entity(created)
        return created

    def line(
        self, x1: float, y1: float, z1: float, x2: float, y2: float, z2: float
    ) -> Line:
        """Create a LINE from (x1, y1, z1) to (x2, y2, z2)."""
        created = Line(start=[x1, y1, z1], end=[x2, y2, z2], layer=self.current_layer)
        self.add_entity(created)
        return created

    def circle(self, x: float, y: float, z: float, r: float) -> Circle:
        """Create a CIRCLE at (x, y, z) with radius ``r``."""
        created = Circle(center=[x, y, z], radius=r, layer=self.current_layer)
        self.add_entity(created)
        return created

    def arc(
        self, x: float, y: float, z: float, r: float, start: float, end: float
    ) -> Arc:
        """Create an ARC at (x, y, z) with radius ``r`` from ``start`` to ``end``."""
        created = Arc(
            center=[x, y, z],
            radius=r,
            angle=[start, end],
            layer=self.current_layer,
        )
        self.add_entity(created)
        return created

    def polyline(self, closed: bool, *args: Sequence[float]) -> Polyline:
        """Create a 3D POLYLINE through the given vertices."""
        created = Polyline(layer=self.current_layer)
        for vertex in args:
            created.add_vertex(vertex[0], vertex[1], vertex[2])
        if closed:
            created.close()
        self.add_entity(created)
        return created

    def lw_polyline(self, closed: bool, *args: Sequence[float]) -> LwPolyline:
        """Create a LWPOLYLINE through the given vertices."""
        created = LwPolyline(
            num=len(args),
            vertices=[list(vertex) for vertex in args],
            layer=self.current_layer,
        )
        if closed:
            created.close()
        self.add_entity(created)
        return created

    def three_d_face(self, points: Sequence[Sequence[float]]) -> ThreeDFace:
        """Create a 3DFACE; with three points the third is repeated."""
        if len(points) < 3:
            raise ValueError("3DFace needs 3 or more points")
        corners = [list(points[i]) for i in range(3)]
        corners.append(list(points[3] if len(points) >= 4 else points[2]))
        created = ThreeDFace(points=corners, layer=self.current_layer)
        self.add_entity(created)
        return created

    def text(self, value: str, x: float, y: float, z: float, height: float) -> Text:
        """Create a TEXT ``value`` at (x, y, z) in the current style."""
        style = self.current_style
        created = Text(
            coord1=[x, y, z],
            height=height,
            value=value,
            style=style,
            width_factor=style.width_factor,
            oblique_angle=style.oblique_angle,
            layer=self.current_layer,
        )
        style.last_height_used = height
        self.add_entity(created)
        return created

    # Objects

    def _add_object(self, obj: DxfObject) -> None:
        self.objects.add(obj)

    def group(self, name: str, description: str, *args: Entity) -> Group:
        """Create a named group of entities.

        If the group exists, the entities are added to it and ValueError
        is raised.
        """
        existing = self.groups.get(name)
        if existing is not None:
            existing.add_entity(*args)
            raise ValueError(f"group {name} already exists")
        created = Group(name, description, args)
        self.groups[name] = created
        created.set_owner(self._group_dictionary)
        self._add_object(created)
        return created

    def add_to_group(self, name: str, *args: Entity) -> None:
        """Add entities to an existing group."""
        try:
            existing = self.groups[name]
        except KeyError:
            raise KeyError(f"group {name} doesn't exist") from None
        existing.add_entity(*args)

    # Output

    def write_to(self, stream: Stream) -> int:
        """Write the DXF document to ``stream``; return the byte count."""
        self._set_handles()
        self._formatter.reset()
        for section in self.sections:
            section.format(self._formatter)
        self._formatter.write_string(0, "EOF")
        return self._formatter.write_to(stream)

    def read(self, size: int = -1) -> bytes:
        """Read the rendered document; it is rendered on the first call."""
        if self._read_buffer is None:
            buffer = io.BytesIO()
            self.write_to(buffer)
            buffer.seek(0)
            self._read_buffer = buffer
        return self._read_buffer.read(size)

    def close(self) -> None:
        """Drop the buffer used by :meth:`read`."""
        self._read_buffer = None

    def __enter__(self) -> "Drawing":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def set_ext(self) -> None:
        """Set $EXTMIN and $EXTMAX from the entities' bounding boxes."""
        mins = [1e16, 1e16, 1e16]
        maxs = [-1e16, -1e16, -1e16]
        for entity in self.entities:
            low, high = entity.bbox()
            for axis in range(3):
                mins[axis] = min(mins[axis], low[axis])
                maxs[axis] = max(maxs[axis], high[axis])
        self.header.ext_min = mins
        self.header.ext_max = maxs