"""3DFACE, LWPOLYLINE, POLYLINE, VERTEX, SPLINE and TEXT entities."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar

from dxfdraw.entity import Entity, EntityType
from dxfdraw.formatter import Formatter
from dxfdraw.symbols import STANDARD_STYLE, HandleCounter, Style


def _zeros() -> list[float]:
    return [0.0, 0.0, 0.0]


def _z_axis() -> list[float]:
    return [0.0, 0.0, 1.0]


def _four_corners() -> list[list[float]]:
    return [_zeros() for _ in range(4)]


def _write_point(formatter: Formatter, point: list[float], offset: int = 0) -> None:
    for axis, value in enumerate(point[:3], start=1):
        formatter.write_float(axis * 10 + offset, value)


def _bbox_from_origin(points) -> tuple[list[float], list[float]]:
    """Bounding box of ``points`` that always contains the origin."""
    mins = _zeros()
    maxs = _zeros()
    for point in points:
        for axis, value in enumerate(point[:3]):
            mins[axis] = min(mins[axis], value)
            maxs[axis] = max(maxs[axis], value)
    return mins, maxs


@dataclass(eq=False)
class ThreeDFace(Entity):
    """3DFACE entity with four corner points."""

    entity_type: ClassVar[EntityType] = EntityType.THREEDFACE

    points: list[list[float]] = field(default_factory=_four_corners)
    flag: int = 0

    def format(self, formatter: Formatter) -> None:
        super().format(formatter)
        formatter.write_string(100, "AcDbFace")
        for corner, point in enumerate(self.points[:4]):
            _write_point(formatter, point, corner)
        if self.flag != 0:
            formatter.write_int(70, self.flag)

    def bbox(self) -> tuple[list[float], list[float]]:
        return _bbox_from_origin(self.points)


@dataclass(eq=False)
class LwPolyline(Entity):
    """LWPOLYLINE entity: a two dimensional polyline."""

    entity_type: ClassVar[EntityType] = EntityType.LWPOLYLINE

    num: int = 0
    closed: bool = False
    vertices: list[list[float]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.vertices:
            self.vertices = [[0.0, 0.0] for _ in range(self.num)]
        elif self.num == 0:
            self.num = len(self.vertices)

    def format(self, formatter: Formatter) -> None:
        super().format(formatter)
        formatter.write_string(100, "AcDbPolyline")
        formatter.write_int(90, self.num)
        formatter.write_int(70, 1 if self.closed else 0)
        for vertex in self.vertices[: self.num]:
            for axis, value in enumerate(vertex[:2], start=1):
                formatter.write_float(axis * 10, value)

    def close(self) -> None:
        """Mark the polyline as closed."""
        self.closed = True

    def bbox(self) -> tuple[list[float], list[float]]:
        return _bbox_from_origin(self.vertices)


@dataclass(eq=False)
class Vertex(Entity):
    """VERTEX entity belonging to a 3D POLYLINE."""

    entity_type: ClassVar[EntityType] = EntityType.VERTEX

    coord: list[float] = field(default_factory=_zeros)
    flag: int = 32

    def format(self, formatter: Formatter) -> None:
        super().format(formatter)
        formatter.write_string(100, "AcDbVertex")
        formatter.write_string(100, "AcDb3dPolylineVertex")
        _write_point(formatter, self.coord)
        formatter.write_int(70, self.flag)

    def bbox(self) -> tuple[list[float], list[float]]:
        return list(self.coord[:3]), list(self.coord[:3])


@dataclass(eq=False)
class Polyline(Entity):
    """3D POLYLINE entity followed by its vertices and a SEQEND."""

    entity_type: ClassVar[EntityType] = EntityType.POLYLINE

    flag: int = 8
    vertices: list[Vertex] = field(default_factory=list)
    end_handle: int = field(default=0, kw_only=True, repr=False)

    def format(self, formatter: Formatter) -> None:
        super().format(formatter)
        formatter.write_string(100, "AcDb3dPolyline")
        formatter.write_int(66, 1)
        formatter.write_string(10, "0.0")
        formatter.write_string(20, "0.0")
        formatter.write_string(30, "0.0")
        formatter.write_int(70, self.flag)
        for vertex in self.vertices:
            vertex.format(formatter)
        formatter.write_string(0, "SEQEND")
        formatter.write_hex(5, self.end_handle)
        formatter.write_string(100, "AcDbEntity")
        formatter.write_string(8, self.layer.name)

    def close(self) -> None:
        """Mark the polyline as closed."""
        self.flag |= 1

    def add_vertex(self, x: float, y: float, z: float) -> Vertex:
        """Append a vertex at (x, y, z) on this polyline's layer."""
        vertex = Vertex(coord=[x, y, z], layer=self.layer, owner=self)
        self.vertices.append(vertex)
        return vertex

    def set_handle(self, counter: HandleCounter) -> None:
        """Take handles for the polyline, each vertex and the SEQEND."""
        super().set_handle(counter)
        for vertex in self.vertices:
            vertex.set_handle(counter)
        self.end_handle = counter.take()

    def bbox(self) -> tuple[list[float], list[float]]:
        return _bbox_from_origin(vertex.coord for vertex in self.vertices)


@dataclass(eq=False)
class Spline(Entity):
    """SPLINE entity."""

    entity_type: ClassVar[EntityType] = EntityType.SPLINE

    normal: list[float] = field(default_factory=_z_axis)
    flag: int = 1064
    degree: int = 3
    knots: list[float] = field(default_factory=list)
    controls: list[list[float]] = field(default_factory=list)
    fits: list[list[float]] = field(default_factory=list)
    tolerance: list[float] = field(
        default_factory=lambda: [0.000000001, 0.0000000001, 0.0000000001]
    )

    def format(self, formatter: Formatter) -> None:
        super().format(formatter)
        formatter.write_string(100, "AcDbSpline")
        _write_point(formatter, self.normal, 200)
        formatter.write_int(70, self.flag)
        formatter.write_int(71, self.degree)
        formatter.write_int(72, len(self.knots))
        formatter.write_int(73, len(self.controls))
        formatter.write_int(74, len(self.fits))
        for offset, value in enumerate(self.tolerance[:3]):
            formatter.write_float(42 + offset, value)
        for knot in self.knots:
            formatter.write_float(40, knot)
        for control in self.controls:
            _write_point(formatter, control)
        for fit in self.fits:
            _write_point(formatter, fit, 1)

    def bbox(self) -> tuple[list[float], list[float]]:
        points = [list(p[:3]) for p in (*self.controls, *self.fits)]
        if not points:
            return _zeros(), _zeros()
        mins = [min(values) for values in zip(*points)]
        maxs = [max(values) for values in zip(*points)]
        return mins, maxs


class TextAnchor(enum.IntEnum):
    """Anchor points of a TEXT entity."""

    LEFT_BASE = 0
    CENTER_BASE = 1
    RIGHT_BASE = 2
    LEFT_BOTTOM = 3
    CENTER_BOTTOM = 4
    RIGHT_BOTTOM = 5
    LEFT_CENTER = 6
    CENTER_CENTER = 7
    RIGHT_CENTER = 8
    LEFT_TOP = 9
    CENTER_TOP = 10
    RIGHT_TOP = 11


_ANCHOR_FLAGS: dict[TextAnchor, tuple[int, int]] = {
    TextAnchor.LEFT_BASE: (0, 0),
    TextAnchor.CENTER_BASE: (1, 0),
    TextAnchor.RIGHT_BASE: (2, 0),
    TextAnchor.LEFT_BOTTOM: (0, 1),
    TextAnchor.CENTER_BOTTOM: (1, 1),
    TextAnchor.RIGHT_BOTTOM: (2, 1),
    TextAnchor.LEFT_CENTER: (0, 2),
    TextAnchor.CENTER_CENTER: (1, 2),
    TextAnchor.RIGHT_CENTER: (2, 2),
    TextAnchor.LEFT_TOP: (0, 3),
    TextAnchor.CENTER_TOP: (1, 3),
    TextAnchor.RIGHT_TOP: (2, 3),
}

_MIRROR_X = 2
_MIRROR_Y = 4


@dataclass(eq=False)
class Text(Entity):
    """TEXT entity: a single line of text."""

    entity_type: ClassVar[EntityType] = EntityType.TEXT

    coord1: list[float] = field(default_factory=_zeros)
    coord2: list[float] = field(default_factory=_zeros)
    height: float = 1.0
    rotation: float = 0.0
    width_factor: float = 0.0
    oblique_angle: float = 0.0
    value: str = ""
    style: Style = field(default=STANDARD_STYLE, repr=False)
    gen_flag: int = 0
    horizontal_flag: int = 0
    vertical_flag: int = 0

    def format(self, formatter: Formatter) -> None:
        super().format(formatter)
        formatter.write_string(100, "AcDbText")
        _write_point(formatter, self.coord1)
        formatter.write_float(40, self.height)
        formatter.write_float(50, self.rotation)
        formatter.write_float(41, self.width_factor)
        formatter.write_float(51, self.oblique_angle)
        formatter.write_string(1, self.value)
        formatter.write_string(7, self.style.name)
        if self.gen_flag != 0:
            formatter.write_int(71, self.gen_flag)
        if self.horizontal_flag != 0:
            formatter.write_int(72, self.horizontal_flag)
            if self.vertical_flag != 0:
                _write_point(formatter, self.coord1, 1)
        formatter.write_string(100, "AcDbText")
        if self.vertical_flag != 0:
            formatter.write_int(73, self.vertical_flag)

    def flip_horizontal(self) -> None:
        """Toggle horizontal mirroring."""
        self.gen_flag ^= _MIRROR_X

    def flip_vertical(self) -> None:
        """Toggle vertical mirroring."""
        self.gen_flag ^= _MIRROR_Y

    def anchor(self, position: int) -> None:
        """Set the justification flags for ``position``; unknown ones are ignored."""
        try:
            flags = _ANCHOR_FLAGS[TextAnchor(position)]
        except ValueError:
            return
        self.horizontal_flag, self.vertical_flag = flags

    def bbox(self) -> tuple[list[float], list[float]]:
        # Text length and anchor point are not taken into account.
        x, y, z = self.coord1[:3]
        return [x, y, z], [x, y + self.height, z]