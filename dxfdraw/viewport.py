"""VPORT table record."""

from __future__ import annotations

from dataclasses import dataclass, field

from dxfdraw.formatter import Formatter
from dxfdraw.symbols import SymbolTableRecord


def _pair() -> list[float]:
    return [0.0, 0.0]


def _triple() -> list[float]:
    return [0.0, 0.0, 0.0]


@dataclass(eq=False)
class Viewport(SymbolTableRecord):
    """VPORT record describing a viewport configuration."""

    lower_left: list[float] = field(default_factory=_pair)
    upper_right: list[float] = field(default_factory=_pair)
    view_center: list[float] = field(default_factory=_pair)
    snap_base: list[float] = field(default_factory=_pair)
    snap_spacing: list[float] = field(default_factory=_pair)
    grid_spacing: list[float] = field(default_factory=_pair)
    view_direction: list[float] = field(default_factory=_triple)
    view_target: list[float] = field(default_factory=_triple)
    height: float = 400.0
    aspect_ratio: float = 1.0
    lens_length: float = 50.0
    front_clip: float = 0.0
    back_clip: float = 0.0
    snap_angle: float = 0.0
    twist_angle: float = 0.0

    def format(self, formatter: Formatter) -> None:
        self._write_start(formatter, "VPORT", "AcDbViewportTableRecord")
        formatter.write_int(70, 0)
        points = (
            (0, self.lower_left, 2),
            (1, self.upper_right, 2),
            (2, self.view_center, 2),
            (3, self.snap_base, 2),
            (4, self.snap_spacing, 2),
            (5, self.grid_spacing, 2),
            (6, self.view_direction, 3),
            (7, self.view_target, 3),
        )
        for offset, coords, count in points:
            for axis, value in enumerate(coords[:count], start=1):
                formatter.write_float(axis * 10 + offset, value)
        formatter.write_float(40, self.height)
        formatter.write_float(41, self.aspect_ratio)
        formatter.write_float(42, self.lens_length)
        formatter.write_float(43, self.front_clip)
        formatter.write_float(44, self.back_clip)
        formatter.write_float(50, self.snap_angle)
        formatter.write_float(51, self.twist_angle)