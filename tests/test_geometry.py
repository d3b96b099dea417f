import math
from dataclasses import dataclass, field

import pytest

from dxfdraw.geometry import arbitrary_axis, set_extrusion


@dataclass
class _Disc:
    coord: list = field(default_factory=lambda: [0.0, 0.0, 0.0])
    direction: list = field(default_factory=lambda: [0.0, 0.0, 1.0])


def _dot(a, b):
    return sum(x * y for x, y in zip(a, b))


def _unit(theta, phi):
    return (
        math.sin(phi) * math.cos(theta),
        math.sin(phi) * math.sin(theta),
        math.cos(phi),
    )


DIRECTIONS = [
    (0.0, 0.0, 1.0),
    (0.0, 0.0, -1.0),
    (1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    _unit(0.3, 1.1),
    _unit(2.0, 0.005),
    _unit(-1.2, 2.5),
]


def test_world_z_gives_world_axes():
    ax, ay = arbitrary_axis((0.0, 0.0, 1.0))
    assert ax == pytest.approx((1.0, 0.0, 0.0))
    assert ay == pytest.approx((0.0, 1.0, 0.0))


def test_short_direction_rejected():
    with pytest.raises(ValueError):
        arbitrary_axis((0.0, 1.0))


def test_same_direction_keeps_coord():
    disc = _Disc(coord=[3.0, -4.0, 5.0])
    set_extrusion(disc, [0.0, 0.0, 1.0])
    assert disc.coord == pytest.approx([3.0, -4.0, 5.0])
    assert disc.direction == [0.0, 0.0, 1.0]


def test_invalid_direction_leaves_extruder_unchanged():
    disc = _Disc(coord=[1.0, 2.0, 3.0])
    set_extrusion(disc, [1.0, 0.0])
    assert disc.coord == [1.0, 2.0, 3.0]
    assert disc.direction == [0.0, 0.0, 1.0]