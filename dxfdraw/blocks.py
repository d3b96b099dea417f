"""The BLOCKS and CLASSES sections."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from dxfdraw.formatter import DxfFormattable, Formatter
from dxfdraw.layer import LAYER_0, Layer
from dxfdraw.symbols import HandleCounter


def _origin() -> list[float]:
    return [0.0, 0.0, 0.0]


@dataclass(eq=False)
class Block(DxfFormattable):
    """A BLOCK with its closing ENDBLK."""

    name: str = ""
    description: str = ""
    flag: int = 0
    coord: list[float] = field(default_factory=_origin)
    layer: Layer = field(default=LAYER_0, repr=False)
    handle: int = field(default=0, kw_only=True, repr=False)
    end_handle: int = field(default=0, kw_only=True, repr=False)

    def format(self, formatter: Formatter) -> None:
        formatter.write_string(0, "BLOCK")
        formatter.write_hex(5, self.handle)
        formatter.write_string(100, "AcDbEntity")
        formatter.write_string(8, self.layer.name)
        formatter.write_string(100, "AcDbBlockBegin")
        formatter.write_string(2, self.name)
        formatter.write_int(70, self.flag)
        for axis, value in enumerate(self.coord[:3], start=1):
            formatter.write_float(axis * 10, value)
        formatter.write_string(3, self.name)
        formatter.write_string(1, self.description)
        formatter.write_string(0, "ENDBLK")
        formatter.write_hex(5, self.end_handle)
        formatter.write_string(100, "AcDbEntity")
        formatter.write_string(8, self.layer.name)
        formatter.write_string(100, "AcDbBlockEnd")

    def set_handle(self, counter: HandleCounter) -> None:
        """Take handles for BLOCK and ENDBLK."""
        self.handle = counter.take()
        self.end_handle = counter.take()


class Blocks(DxfFormattable):
    """The BLOCKS section; by default the model and paper space blocks."""

    def __init__(self, blocks: Iterable[Block] | None = None) -> None:
        if blocks is None:
            blocks = (
                Block("*Model_Space"),
                Block("*Paper_Space"),
                Block("*Paper_Space0"),
            )
        self._blocks: list[Block] = list(blocks)

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self._blocks)

    def __getitem__(self, index: int) -> Block:
        return self._blocks[index]

    def format(self, formatter: Formatter) -> None:
        formatter.write_string(0, "SECTION")
        formatter.write_string(2, "BLOCKS")
        for block in self._blocks:
            block.format(formatter)
        formatter.write_string(0, "ENDSEC")

    def add(self, block: Block) -> None:
        """Append a block."""
        self._blocks.append(block)

    def set_handle(self, counter: HandleCounter) -> None:
        """Give handles to every block."""
        for block in self._blocks:
            block.set_handle(counter)


class DxfClass(DxfFormattable):
    """A CLASS entry."""

    def format(self, formatter: Formatter) -> None:
        formatter.write_string(0, "CLASS")


class Classes(DxfFormattable):
    """The CLASSES section."""

    def __init__(self, classes: Iterable[DxfClass] = ()) -> None:
        self._classes: list[DxfClass] = list(classes)

    def __len__(self) -> int:
        return len(self._classes)

    def __iter__(self) -> Iterator[DxfClass]:
        return iter(self._classes)

    def format(self, formatter: Formatter) -> None:
        formatter.write_string(0, "SECTION")
        formatter.write_string(2, "CLASSES")
        for entry in self._classes:
            entry.format(formatter)
        formatter.write_string(0, "ENDSEC")

    def set_handle(self, counter: HandleCounter) -> None:
        """Classes carry no handles."""