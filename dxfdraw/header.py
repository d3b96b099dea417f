"""Section kinds and the HEADER section."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from dxfdraw.formatter import DxfFormattable, Formatter
from dxfdraw.insunit import Unit, UnitType
from dxfdraw.symbols import HandleCounter


@runtime_checkable
class Section(Protocol):
    """A top-level DXF section."""

    def format(self, formatter: Formatter) -> None:
        """Write the section to ``formatter``."""

    def set_handle(self, counter: HandleCounter) -> None:
        """Give handles to everything in the section."""


class SectionType(enum.IntEnum):
    """Section names (group code 2), in file order."""

    HEADER = 0
    CLASSES = 1
    TABLES = 2
    BLOCKS = 3
    ENTITIES = 4
    OBJECTS = 5


def section_type_from_name(name: str) -> SectionType:
    """Return the section type called ``name`` (exact, upper case)."""
    try:
        return SectionType[name]
    except KeyError:
        raise ValueError(f"unknown section name: {name}") from None


def _zeros() -> list[float]:
    return [0.0, 0.0, 0.0]


@dataclass(eq=False)
class Header(DxfFormattable):
    """Variables written in the HEADER section."""

    version: str = "AC1024"
    ins_base: list[float] = field(default_factory=_zeros)
    ins_unit: Unit = Unit.UNITLESS
    ins_lunit: UnitType = UnitType.DECIMAL
    ext_min: list[float] = field(default_factory=_zeros)
    ext_max: list[float] = field(default_factory=_zeros)
    lt_scale: float = 1.0
    handseed: int = 0

    def format(self, formatter: Formatter) -> None:
        formatter.write_string(0, "SECTION")
        formatter.write_string(2, "HEADER")
        formatter.write_string(9, "$ACADVER")
        formatter.write_string(1, self.version)
        formatter.write_string(9, "$INSBASE")
        self._write_point(formatter, self.ins_base)
        formatter.write_string(9, "$INSUNITS")
        Unit(self.ins_unit).format(formatter)
        formatter.write_string(9, "$LUNITS")
        UnitType(self.ins_lunit).format(formatter)
        formatter.write_string(9, "$EXTMIN")
        self._write_point(formatter, self.ext_min)
        formatter.write_string(9, "$EXTMAX")
        self._write_point(formatter, self.ext_max)
        formatter.write_string(9, "$LTSCALE")
        formatter.write_float(40, self.lt_scale)
        formatter.write_string(9, "$HANDSEED")
        formatter.write_hex(5, self.handseed)
        formatter.write_string(0, "ENDSEC")

    @staticmethod
    def _write_point(formatter: Formatter, point: list[float]) -> None:
        for axis, value in enumerate(point[:3], start=1):
            formatter.write_float(axis * 10, value)

    def set_handle(self, counter: HandleCounter) -> None:
        """Record the next free handle as $HANDSEED without taking it."""
        self.handseed = counter.value