"""Drawing units ($INSUNITS) and linear unit formats ($LUNITS)."""

from __future__ import annotations

import enum

from dxfdraw.formatter import Formatter


class _LabelledIntEnum(enum.IntEnum):
    """IntEnum that tolerates unknown integer values and has text labels."""

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, int):
            return None
        member = int.__new__(cls, value)
        member._name_ = f"UNKNOWN_{value}"
        member._value_ = value
        return member

    @classmethod
    def _labels(cls) -> dict[int, str]:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._labels().get(int(self), "unknown")


class Unit(_LabelledIntEnum):
    """Drawing unit for DesignCenter blocks."""

    UNITLESS = 0
    INCHES = 1
    FEET = 2
    MILES = 3
    MILLIMETERS = 4
    CENTIMETERS = 5
    METERS = 6
    KILOMETERS = 7
    MICROINCHES = 8
    MILS = 9
    YARDS = 10
    ANGSTROMS = 11
    NANOMETERS = 12
    MICRONS = 13
    DECIMETERS = 14
    DECAMETERS = 15
    HECTOMETERS = 16
    GIGAMETERS = 17
    ASTRONOMICAL = 18
    LIGHT_YEARS = 19
    PARSECS = 20

    @classmethod
    def _labels(cls) -> dict[int, str]:
        return _UNIT_LABELS

    def format(self, formatter: Formatter) -> None:
        """Write the unit as group code 70."""
        formatter.write_int(70, int(self))


class UnitType(_LabelledIntEnum):
    """Linear unit format; DECIMAL is the zero value, DXF stores value + 2."""

    SCIENTIFIC = -1
    DECIMAL = 0
    ENGINEERING = 1
    ARCHITECTURAL = 2
    FRACTIONAL = 3
    WINDOWS_DESKTOP = 4

    @classmethod
    def _labels(cls) -> dict[int, str]:
        return _TYPE_LABELS

    def format(self, formatter: Formatter) -> None:
        """Write the format as group code 70, shifted to the DXF numbering."""
        formatter.write_int(70, int(self) + 2)


_UNIT_LABELS: dict[int, str] = {
    Unit.UNITLESS: "none",
    Unit.INCHES: "inches",
    Unit.FEET: "feet",
    Unit.MILES: "miles",
    Unit.MILLIMETERS: "millimeters",
    Unit.CENTIMETERS: "centimeters",
    Unit.METERS: "meters",
    Unit.KILOMETERS: "kilometers",
    Unit.MICROINCHES: "microinches",
    Unit.MILS: "mils",
    Unit.YARDS: "yards",
    Unit.ANGSTROMS: "angstroms",
    Unit.NANOMETERS: "nanometers",
    Unit.MICRONS: "microns",
    Unit.DECIMETERS: "decimeters",
    Unit.DECAMETERS: "decameters",
    Unit.HECTOMETERS: "hectometers",
    Unit.GIGAMETERS: "gigameters",
    Unit.ASTRONOMICAL: "astronomical",
    Unit.LIGHT_YEARS: "light years",
    Unit.PARSECS: "parsecs",
}

_TYPE_LABELS: dict[int, str] = {
    UnitType.SCIENTIFIC: "scientific",
    UnitType.DECIMAL: "decimal",
    UnitType.ENGINEERING: "engineering:",
    UnitType.ARCHITECTURAL: "architectural:",
    UnitType.FRACTIONAL: "fractional:",
    UnitType.WINDOWS_DESKTOP: "windows desktop",
}

_STR_TO_UNIT: dict[str, Unit] = {
    "none": Unit.UNITLESS,
    "unitless": Unit.UNITLESS,
    "inches": Unit.INCHES,
    "feet": Unit.FEET,
    "miles": Unit.MILES,
    "millimeters": Unit.MILLIMETERS,
    "centimeters": Unit.CENTIMETERS,
    "meters": Unit.METERS,
    "kilometers": Unit.KILOMETERS,
    "microinches": Unit.MICROINCHES,
    "mils": Unit.MILS,
    "yards": Unit.YARDS,
    "angstroms": Unit.ANGSTROMS,
    "nanometers": Unit.NANOMETERS,
    "microns": Unit.MICRONS,
    "decimeters": Unit.DECIMETERS,
    "decameters": Unit.DECAMETERS,
    "hectometers": Unit.HECTOMETERS,
    "gigameters": Unit.GIGAMETERS,
    "astronomical": Unit.ASTRONOMICAL,
    "light years": Unit.LIGHT_YEARS,
    "lightyears": Unit.LIGHT_YEARS,
    "light-years": Unit.LIGHT_YEARS,
    "parsecs": Unit.PARSECS,
}

_STR_TO_TYPE: dict[str, UnitType] = {
    "scientific": UnitType.SCIENTIFIC,
    "decimal": UnitType.DECIMAL,
    "engineering": UnitType.ENGINEERING,
    "architectural": UnitType.ARCHITECTURAL,
    "fractional": UnitType.FRACTIONAL,
    "windows desktop": UnitType.WINDOWS_DESKTOP,
    "windowsdesktop": UnitType.WINDOWS_DESKTOP,
}


def unit_from_string(text: str) -> Unit:
    """Look up a unit by name, ignoring case and surrounding blanks."""
    try:
        return _STR_TO_UNIT[text.strip().lower()]
    except KeyError:
        raise ValueError(f"unknown unit: {text!r}") from None


def type_from_string(text: str) -> UnitType:
    """Look up a linear unit format by name, ignoring case and blanks."""
    try:
        return _STR_TO_TYPE[text.strip().lower()]
    except KeyError:
        raise ValueError(f"unknown unit type: {text!r}") from None