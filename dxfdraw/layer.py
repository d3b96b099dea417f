"""LTYPE and LAYER table records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from dxfdraw.color import WHITE
from dxfdraw.formatter import Formatter
from dxfdraw.symbols import Handler, SymbolTableRecord

# Allowed line weights (group code 370) in hundredths of a millimetre.
LINE_WIDTHS: dict[int, float] = {
    5: 0.05,
    9: 0.09,
    13: 0.13,
    15: 0.15,
    18: 0.18,
    20: 0.20,
    25: 0.25,
    30: 0.30,
    35: 0.35,
    40: 0.40,
    50: 0.50,
    53: 0.53,
    60: 0.60,
    70: 0.70,
    80: 0.80,
    90: 0.90,
    100: 1.00,
    106: 1.06,
    120: 1.20,
    140: 1.40,
    158: 1.58,
    200: 2.00,
    211: 2.11,
}

_MAX_LINE_WIDTH = 211
_DEFAULT_LINE_WIDTH = -3

_FROZEN = 1
_LOCKED = 4


@dataclass(eq=False)
class LineType(SymbolTableRecord):
    """LTYPE record.

    Pattern lengths: positive is a dash, zero a dot, negative a space.
    """

    description: str = ""
    lengths: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.lengths = list(self.lengths)

    def format(self, formatter: Formatter) -> None:
        self._write_start(formatter, "LTYPE", "AcDbLinetypeTableRecord")
        formatter.write_int(70, 0)
        formatter.write_string(3, self.description)
        formatter.write_int(72, 65)
        formatter.write_int(73, len(self.lengths))
        formatter.write_float(40, self.total_length())
        for length in self.lengths:
            formatter.write_float(49, length)
            formatter.write_int(74, 0)

    def total_length(self) -> float:
        """Return the total pattern length (group code 40)."""
        return sum(abs(length) for length in self.lengths)


LT_CONTINUOUS = LineType("Continuous", "Solid Line")
LT_BYLAYER = LineType("ByLayer", "")
LT_BYBLOCK = LineType("ByBlock", "")
LT_HIDDEN = LineType(
    "HIDDEN",
    "Hidden __ __ __ __ __ __ __ __ __ __ __ __ __ _",
    [0.25, -0.125],
)
LT_DASHDOT = LineType(
    "DASHDOT",
    "Dash dot __ . __ . __ . __ . __ . __ . __ . __",
    [0.5, -0.25, 0.0, -0.25],
)

DEFAULT_LINE_TYPE = LT_CONTINUOUS


@dataclass(eq=False)
class Layer(SymbolTableRecord):
    """LAYER record."""

    color: int = WHITE
    line_type: Optional[LineType] = LT_CONTINUOUS
    flag: int = 0
    line_width: int = _DEFAULT_LINE_WIDTH
    plot_style: Optional[Handler] = field(default=None, kw_only=True, repr=False)

    def __post_init__(self) -> None:
        if self.line_type is None:
            self.line_type = LT_CONTINUOUS
        self.set_line_width(self.line_width)

    def format(self, formatter: Formatter) -> None:
        self._write_start(formatter, "LAYER", "AcDbLayerTableRecord")
        formatter.write_int(70, self.flag)
        formatter.write_int(62, int(self.color))
        formatter.write_string(6, self.line_type.name)
        formatter.write_int(370, self.line_width)
        if self.plot_style is not None:
            formatter.write_hex(390, self.plot_style.handle)

    def set_line_width(self, width: int) -> int:
        """Set the line weight, snapped to a value DXF allows; return it.

        Unknown weights go up to the next allowed one, weights above the
        largest become the largest, and negative ones the default.
        """
        if width in LINE_WIDTHS:
            actual = width
        elif width > _MAX_LINE_WIDTH:
            actual = _MAX_LINE_WIDTH
        elif width < 0:
            actual = _DEFAULT_LINE_WIDTH
        else:
            actual = min(
                (known for known in LINE_WIDTHS if known > width),
                default=_DEFAULT_LINE_WIDTH,
            )
        self.line_width = actual
        return actual

    def freeze(self) -> None:
        """Freeze the layer."""
        self.flag |= _FROZEN

    def unfreeze(self) -> None:
        """Thaw the layer."""
        self.flag &= ~_FROZEN

    def lock(self) -> None:
        """Lock the layer."""
        self.flag |= _LOCKED

    def unlock(self) -> None:
        """Unlock the layer."""
        self.flag &= ~_LOCKED


LAYER_0 = Layer("0", WHITE, LT_CONTINUOUS)