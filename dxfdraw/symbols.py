"""Handles and the simple symbol table records (APPID, BLOCK_RECORD, ...)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, runtime_checkable

from dxfdraw.formatter import DxfFormattable, Formatter


@dataclass
class HandleCounter:
    """Source of consecutive handle values, starting at ``value``."""

    value: int = 1

    def take(self) -> int:
        """Return the next free handle and advance the counter."""
        current = self.value
        self.value += 1
        return current


@runtime_checkable
class Handler(Protocol):
    """Anything that owns a handle (group code 5, 105, 330, ...)."""

    handle: int

    def set_handle(self, counter: HandleCounter) -> None:
        """Take handle values from ``counter``."""


@dataclass(eq=False)
class SymbolTableRecord(DxfFormattable):
    """Common part of records stored in a TABLE (AcDbSymbolTableRecord)."""

    name: str = ""
    handle: int = field(default=0, kw_only=True, repr=False)
    owner: Optional[Handler] = field(default=None, kw_only=True, repr=False)

    def set_handle(self, counter: HandleCounter) -> None:
        """Take one handle from ``counter``."""
        self.handle = counter.take()

    def _write_start(
        self,
        formatter: Formatter,
        record_type: str,
        subclass: str,
        handle_code: int = 5,
    ) -> None:
        formatter.write_string(0, record_type)
        formatter.write_hex(handle_code, self.handle)
        if self.owner is not None:
            formatter.write_hex(330, self.owner.handle)
        formatter.write_string(100, "AcDbSymbolTableRecord")
        formatter.write_string(100, subclass)
        formatter.write_string(2, self.name)


@dataclass(eq=False)
class AppID(SymbolTableRecord):
    """APPID record: a registered application name."""

    def format(self, formatter: Formatter) -> None:
        self._write_start(formatter, "APPID", "AcDbRegAppTableRecord")
        formatter.write_int(70, 0)


@dataclass(eq=False)
class BlockRecord(SymbolTableRecord):
    """BLOCK_RECORD record."""

    def format(self, formatter: Formatter) -> None:
        self._write_start(formatter, "BLOCK_RECORD", "AcDbBlockTableRecord")
        formatter.write_int(70, 0)
        formatter.write_int(280, 1)
        formatter.write_int(281, 0)


@dataclass(eq=False)
class DimStyle(SymbolTableRecord):
    """DIMSTYLE record; its handle is written with group code 105."""

    def format(self, formatter: Formatter) -> None:
        self._write_start(
            formatter, "DIMSTYLE", "AcDbDimStyleTableRecord", handle_code=105
        )
        formatter.write_int(70, 0)


@dataclass(eq=False)
class Ucs(SymbolTableRecord):
    """UCS record."""

    def format(self, formatter: Formatter) -> None:
        self._write_start(formatter, "UCS", "AcDbUCSTableRecord")


@dataclass(eq=False)
class View(SymbolTableRecord):
    """VIEW record."""

    def format(self, formatter: Formatter) -> None:
        self._write_start(formatter, "VIEW", "AcDbViewTableRecord")


@dataclass(eq=False)
class Style(SymbolTableRecord):
    """STYLE record: a text style."""

    font_name: str = "arial.ttf"
    big_font_name: str = ""
    fixed_text_height: float = 0.0
    width_factor: float = 1.0
    last_height_used: float = 100.0
    oblique_angle: float = 0.0

    def format(self, formatter: Formatter) -> None:
        self._write_start(formatter, "STYLE", "AcDbTextStyleTableRecord")
        formatter.write_int(70, 0)
        formatter.write_float(40, self.fixed_text_height)
        formatter.write_float(41, self.width_factor)
        formatter.write_float(50, self.oblique_angle)
        formatter.write_int(71, 0)
        formatter.write_float(42, self.last_height_used)
        formatter.write_string(3, self.font_name)
        formatter.write_string(4, self.big_font_name)


STANDARD_STYLE = Style("Standard")