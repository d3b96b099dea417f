"""Entity kinds, the common entity part and the ENTITIES section."""

from __future__ import annotations

import abc
import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import ClassVar, Optional

from dxfdraw.formatter import DxfFormattable, Formatter
from dxfdraw.layer import LAYER_0, Layer
from dxfdraw.symbols import HandleCounter, Handler


class EntityType(enum.IntEnum):
    """Entity kinds (group code 0)."""

    LINE = 0
    THREEDFACE = 1
    LWPOLYLINE = 2
    CIRCLE = 3
    POLYLINE = 4
    VERTEX = 5
    POINT = 6
    ARC = 7
    TEXT = 8
    SPLINE = 9

    @property
    def dxf_name(self) -> str:
        """The name written in the DXF file."""
        return "3DFACE" if self is EntityType.THREEDFACE else self.name


_BY_DXF_NAME = {kind.dxf_name: kind for kind in EntityType}


def entity_type_from_name(name: str) -> EntityType:
    """Return the entity type whose DXF name is ``name``."""
    try:
        return _BY_DXF_NAME[name]
    except KeyError:
        raise ValueError(f"unknown entity type: {name}") from None


@dataclass(eq=False)
class Entity(DxfFormattable):
    """Common part of all entities."""

    entity_type: ClassVar[EntityType]

    handle: int = field(default=0, kw_only=True, repr=False)
    block_record: Optional[Handler] = field(default=None, kw_only=True, repr=False)
    owner: Optional[Handler] = field(default=None, kw_only=True, repr=False)
    layer: Layer = field(default=LAYER_0, kw_only=True, repr=False)
    ltscale: float = field(default=1.0, kw_only=True)

    def format(self, formatter: Formatter) -> None:
        formatter.write_string(0, self.entity_type.dxf_name)
        formatter.write_hex(5, self.handle)
        if self.block_record is not None:
            formatter.write_string(102, "{ACAD_REACTORS")
            formatter.write_hex(330, self.block_record.handle)
            formatter.write_string(102, "}")
        if self.owner is not None:
            formatter.write_hex(330, self.owner.handle)
        formatter.write_string(100, "AcDbEntity")
        formatter.write_string(8, self.layer.name)
        if self.ltscale != 1.0:
            formatter.write_float(48, self.ltscale)

    def set_handle(self, counter: HandleCounter) -> None:
        """Take one handle from ``counter``."""
        self.handle = counter.take()

    @abc.abstractmethod
    def bbox(self) -> tuple[list[float], list[float]]:
        """Return the minimum and maximum corners of the bounding box."""


class Entities(DxfFormattable):
    """The ENTITIES section."""

    def __init__(self, entities: Iterable[Entity] = ()) -> None:
        self._entities: list[Entity] = list(entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def __getitem__(self, index: int) -> Entity:
        return self._entities[index]

    def format(self, formatter: Formatter) -> None:
        formatter.write_string(0, "SECTION")
        formatter.write_string(2, "ENTITIES")
        for entity in self._entities:
            entity.format(formatter)
        formatter.write_string(0, "ENDSEC")

    def add(self, entity: Entity) -> None:
        """Append an entity."""
        self._entities.append(entity)

    def set_handle(self, counter: HandleCounter) -> None:
        """Give handles to every entity."""
        for entity in self._entities:
            entity.set_handle(counter)