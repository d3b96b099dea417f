"""Non-graphical objects and the OBJECTS section."""

from __future__ import annotations

import contextlib
from collections.abc import Iterable, Iterator
from typing import Optional

from dxfdraw.entity import Entity
from dxfdraw.formatter import DxfFormattable, Formatter
from dxfdraw.symbols import HandleCounter, Handler


class DxfObject(DxfFormattable):
    """Common part of objects in the OBJECTS section."""

    def __init__(self) -> None:
        self.handle = 0

    def set_handle(self, counter: HandleCounter) -> None:
        """Take one handle from ``counter``."""
        self.handle = counter.take()


def _write_reactors(formatter: Formatter, owner: Handler) -> None:
    formatter.write_string(102, "{ACAD_REACTORS")
    formatter.write_hex(330, owner.handle)
    formatter.write_string(102, "}")
    formatter.write_hex(330, owner.handle)


class AcDbPlaceHolder(DxfObject):
    """ACDBPLACEHOLDER object."""

    def __init__(self, owner: Optional[Handler] = None) -> None:
        super().__init__()
        self.owner = owner

    def format(self, formatter: Formatter) -> None:
        formatter.write_string(0, "ACDBPLACEHOLDER")
        formatter.write_hex(5, self.handle)
        if self.owner is not None:
            _write_reactors(formatter, self.owner)


def _add_unique(items: dict[str, Handler], key: str, value: Handler) -> None:
    if key in items:
        raise ValueError(f"key {key} already exists")
    items[key] = value


class Dictionary(DxfObject):
    """DICTIONARY object mapping names to owned objects."""

    def __init__(self) -> None:
        super().__init__()
        self._items: dict[str, Handler] = {}

    @property
    def items(self) -> dict[str, Handler]:
        return dict(self._items)

    def format(self, formatter: Formatter) -> None:
        formatter.write_string(0, "DICTIONARY")
        formatter.write_hex(5, self.handle)
        formatter.write_string(100, "AcDbDictionary")
        formatter.write_int(281, 1)
        for key in sorted(self._items):
            formatter.write_string(3, key)
            formatter.write_hex(350, self._items[key].handle)

    def set_handle(self, counter: HandleCounter) -> None:
        """Take a handle, then give handles to every item."""
        super().set_handle(counter)
        for item in self._items.values():
            item.set_handle(counter)

    def add_item(self, key: str, value: Handler) -> None:
        """Add ``value`` under ``key``; the key must be new."""
        _add_unique(self._items, key, value)


class AcDbDictionaryWDFLT(DxfObject):
    """ACDBDICTIONARYWDFLT object: a dictionary with a default entry."""

    def __init__(
        self,
        owner: Optional[Handler],
        default: Handler,
        items: Optional[dict[str, Handler]] = None,
    ) -> None:
        super().__init__()
        self.owner = owner
        self.default = default
        self._items: dict[str, Handler] = dict(items or {})

    @property
    def items(self) -> dict[str, Handler]:
        return dict(self._items)

    def format(self, formatter: Formatter) -> None:
        formatter.write_string(0, "ACDBDICTIONARYWDFLT")
        formatter.write_hex(5, self.handle)
        if self.owner is not None:
            _write_reactors(formatter, self.owner)
        formatter.write_string(100, "AcDbDictionary")
        formatter.write_int(281, 1)
        for key, value in self._items.items():
            formatter.write_string(3, key)
            formatter.write_hex(350, value.handle)
        formatter.write_string(100, "AcDbDictionaryWithDefault")
        formatter.write_hex(340, self.default.handle)

    def add_item(self, key: str, value: Handler) -> None:
        """Add ``value`` under ``key``; the key must be new."""
        _add_unique(self._items, key, value)


def new_dictionary_with_default(
    owner: Optional[Handler],
) -> tuple[AcDbDictionaryWDFLT, AcDbPlaceHolder]:
    """Create a plot style dictionary whose "Normal" default is a placeholder."""
    placeholder = AcDbPlaceHolder()
    dictionary = AcDbDictionaryWDFLT(owner, placeholder, {"Normal": placeholder})
    placeholder.owner = dictionary
    return dictionary, placeholder


class Group(DxfObject):
    """GROUP object collecting entities."""

    def __init__(
        self,
        name: str,
        description: str = "",
        entities: Iterable[Entity] = (),
    ) -> None:
        super().__init__()
        self.name = name
        self.description = description
        self.owner: Optional[Dictionary] = None
        self.entities: list[Entity] = list(entities)
        self.selectable = True

    def set_owner(self, dictionary: Dictionary) -> None:
        """Make ``dictionary`` the owner and register the group in it."""
        self.owner = dictionary
        with contextlib.suppress(ValueError):
            dictionary.add_item(self.name, self)

    def format(self, formatter: Formatter) -> None:
        if self.owner is None:
            raise ValueError(f"group {self.name} has no owner")
        formatter.write_string(0, "GROUP")
        formatter.write_hex(5, self.handle)
        _write_reactors(formatter, self.owner)
        formatter.write_string(100, "AcDbGroup")
        formatter.write_string(300, self.description)
        formatter.write_int(70, 0)
        formatter.write_int(71, 1 if self.selectable else 0)
        for entity in self.entities:
            formatter.write_hex(340, entity.handle)

    def add_entity(self, *args: Entity) -> None:
        """Add entities, making this group their reactor."""
        for entity in args:
            entity.block_record = self
        self.entities.extend(args)


class Objects(DxfFormattable):
    """The OBJECTS section."""

    def __init__(self, objects: Iterable[DxfObject] = ()) -> None:
        self._objects: list[DxfObject] = list(objects)

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[DxfObject]:
        return iter(self._objects)

    def __getitem__(self, index: int) -> DxfObject:
        return self._objects[index]

    def format(self, formatter: Formatter) -> None:
        formatter.write_string(0, "SECTION")
        formatter.write_string(2, "OBJECTS")
        for obj in self._objects:
            obj.format(formatter)
        formatter.write_string(0, "ENDSEC")

    def add(self, obj: DxfObject) -> None:
        """Append an object."""
        self._objects.append(obj)

    def set_handle(self, counter: HandleCounter) -> None:
        """Give handles to every object."""
        for obj in self._objects:
            obj.set_handle(counter)