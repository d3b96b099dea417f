"""Geometric helpers: the arbitrary axis algorithm and OCS extrusion."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Protocol

Vector = tuple[float, float, float]

_THRESHOLD = 1.0 / 64.0


class Extruder(Protocol):
    """An entity with an extrusion direction (codes 210/220/230).

    ``coord`` is the entity's reference point in its object coordinate system.
    """

    direction: Sequence[float]
    coord: Sequence[float]


def _divide(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator)


def arbitrary_axis(direction: Sequence[float]) -> tuple[Vector, Vector]:
    """Return the X and Y axes for the Z axis ``direction``.

    ``direction`` is taken to be a unit vector.
    """
    if len(direction) < 3:
        raise ValueError("direction needs three components")
    dx, dy, dz = (float(c) for c in direction[:3])
    if abs(dx) < _THRESHOLD and abs(dy) < _THRESHOLD:
        norm = math.sqrt(dy * dy + dz * dz)
        ax = (_divide(dz, norm), 0.0, _divide(-dy, norm))
    else:
        norm = math.sqrt(dx * dx + dy * dy)
        ax = (_divide(-dy, norm), _divide(dx, norm), 0.0)
    ay = (
        dy * ax[2] - dz * ax[1],
        dz * ax[0] - dx * ax[2],
        dx * ax[1] - dy * ax[0],
    )
    return ax, ay


def set_extrusion(extruder: Extruder, direction: Sequence[float]) -> None:
    """Give ``extruder`` a new extrusion direction, keeping its point in place.

    An unusable ``direction`` leaves the extruder unchanged.
    """
    try:
        new_x, new_y = arbitrary_axis(direction)
    except ValueError:
        return
    old_z = tuple(extruder.direction)
    old_x, old_y = arbitrary_axis(old_z)
    new_z = tuple(float(c) for c in direction[:3])
    extruder.direction = list(direction)
    point = extruder.coord
    before = (old_x, old_y, old_z)
    after = (new_x, new_y, new_z)
    extruder.coord = [
        sum(
            point[j] * before[j][k] * axis[k]
            for j in range(3)
            for k in range(3)
        )
        for axis in after
    ]