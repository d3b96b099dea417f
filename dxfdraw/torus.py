"""Command that writes a torus drawn with circles to a DXF file."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Optional, Sequence

from dxfdraw.drawing import Drawing
from dxfdraw.geometry import set_extrusion
from dxfdraw.layer import LT_HIDDEN
from dxfdraw.reader import DEFAULT_COLOR, DEFAULT_LINE_TYPE, new_drawing

RED = 1

_MINOR_RADIUS = 200.0
_MAJOR_RADIUS = 500.0
_DIVISIONS = 16


def build_torus() -> Drawing:
    """Return a drawing of a torus made of toroidal and poloidal circles."""
    drawing = new_drawing()
    drawing.header.lt_scale = 100.0
    drawing.add_layer("Toroidal", DEFAULT_COLOR, DEFAULT_LINE_TYPE, True)
    drawing.add_layer("Poloidal", RED, LT_HIDDEN, True)
    z = 0.0
    step = 2.0 * math.pi / _DIVISIONS
    theta = 0.0
    for _ in range(_DIVISIONS):
        drawing.change_layer("Toroidal")
        drawing.circle(
            0.0,
            0.0,
            z + _MINOR_RADIUS * math.cos(theta),
            _MAJOR_RADIUS - _MINOR_RADIUS * math.sin(theta),
        )
        drawing.change_layer("Poloidal")
        circle = drawing.circle(
            _MAJOR_RADIUS * math.cos(theta),
            _MAJOR_RADIUS * math.sin(theta),
            0.0,
            _MINOR_RADIUS,
        )
        set_extrusion(circle, [-1.0 * math.sin(theta), math.cos(theta), 0.0])
        theta += step
    return drawing


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Write a torus drawn with circles as a DXF file."
    )
    parser.add_argument("output", nargs="?", default="torus.dxf")
    args = parser.parse_args(argv)
    try:
        build_torus().save_as(args.output)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())