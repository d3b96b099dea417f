"""LINE, POINT, CIRCLE and ARC entities."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar, Optional

from dxfdraw.entity import Entity, EntityType
from dxfdraw.formatter import Formatter


def _zeros() -> list[float]:
    return [0.0, 0.0, 0.0]


def _z_axis() -> list[float]:
    return [0.0, 0.0, 1.0]


def _write_point(formatter: Formatter, point: list[float], offset: int = 0) -> None:
    for axis, value in enumerate(point[:3], start=1):
        formatter.write_float(axis * 10 + offset, value)


@dataclass(eq=False)
class Line(Entity):
    """LINE entity from ``start`` to ``end``."""

    entity_type: ClassVar[EntityType] = EntityType.LINE

    start: list[float] = field(default_factory=_zeros)
    end: list[float] = field(default_factory=_zeros)

    def format(self, formatter: Formatter) -> None:
        super().format(formatter)
        formatter.write_string(100, "AcDbLine")
        _write_point(formatter, self.start)
        _write_point(formatter, self.end, 1)

    def bbox(self) -> tuple[list[float], list[float]]:
        mins = [min(a, b) for a, b in zip(self.start, self.end)]
        maxs = [max(a, b) for a, b in zip(self.start, self.end)]
        return mins, maxs

    def length(self) -> float:
        """Return the distance between the end points."""
        return math.sqrt(sum((b - a) ** 2 for a, b in zip(self.start, self.end)))

    def direction(self, normalize: bool = False) -> list[float]:
        """Return the vector from start to end, optionally of unit length."""
        divisor = 1.0
        if normalize:
            divisor = self.length() or 1.0
        return [(b - a) / divisor for a, b in zip(self.start, self.end)]

    def move(self, x: float, y: float, z: float) -> None:
        """Translate both end points."""
        for index, offset in enumerate((x, y, z)):
            self.start[index] += offset
            self.end[index] += offset


@dataclass(eq=False)
class Point(Entity):
    """POINT entity; short coordinates are padded with zeros."""

    entity_type: ClassVar[EntityType] = EntityType.POINT

    coord: list[float] = field(default_factory=_zeros)

    def __post_init__(self) -> None:
        coord = [float(c) for c in self.coord[:3]]
        coord.extend([0.0] * (3 - len(coord)))
        self.coord = coord

    def format(self, formatter: Formatter) -> None:
        super().format(formatter)
        formatter.write_string(100, "AcDbPoint")
        _write_point(formatter, self.coord)

    def bbox(self) -> tuple[list[float], list[float]]:
        return list(self.coord), list(self.coord)


@dataclass(eq=False)
class Circle(Entity):
    """CIRCLE entity with an extrusion direction."""

    entity_type: ClassVar[EntityType] = EntityType.CIRCLE

    center: list[float] = field(default_factory=_zeros)
    radius: float = 0.0
    direction: list[float] = field(default_factory=_z_axis)

    @property
    def coord(self) -> list[float]:
        """The centre, as the point moved by a change of extrusion."""
        return self.center

    @coord.setter
    def coord(self, value: list[float]) -> None:
        self.center = list(value)

    def format(self, formatter: Formatter) -> None:
        super().format(formatter)
        formatter.write_string(100, "AcDbCircle")
        _write_point(formatter, self.center)
        formatter.write_float(40, self.radius)
        _write_point(formatter, self.direction, 200)

    def bbox(self) -> tuple[list[float], list[float]]:
        # The extrusion direction is not taken into account.
        x, y, z = self.center[:3]
        r = self.radius
        return [x - r, y - r, z], [x + r, y + r, z]


@dataclass(eq=False)
class Arc(Circle):
    """ARC entity: a circle with start and end angles in degrees."""

    entity_type: ClassVar[EntityType] = EntityType.ARC

    angle: list[float] = field(default_factory=lambda: [0.0, 180.0])

    @classmethod
    def from_circle(cls, circle: Optional[Circle] = None) -> "Arc":
        """Make an arc sharing the geometry and attributes of ``circle``."""
        if circle is None:
            circle = Circle()
        return cls(
            center=circle.center,
            radius=circle.radius,
            direction=circle.direction,
            handle=circle.handle,
            block_record=circle.block_record,
            owner=circle.owner,
            layer=circle.layer,
            ltscale=circle.ltscale,
        )

    def format(self, formatter: Formatter) -> None:
        super().format(formatter)
        formatter.write_string(100, "AcDbArc")
        formatter.write_float(50, self.angle[0])
        formatter.write_float(51, self.angle[1])