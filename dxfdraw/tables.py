"""TABLE containers and the TABLES section."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator

from dxfdraw.formatter import DxfFormattable, Formatter
from dxfdraw.layer import (
    LAYER_0,
    LT_BYBLOCK,
    LT_BYLAYER,
    LT_CONTINUOUS,
    LT_DASHDOT,
    LT_HIDDEN,
    Layer,
)
from dxfdraw.symbols import (
    STANDARD_STYLE,
    AppID,
    BlockRecord,
    HandleCounter,
    SymbolTableRecord,
)


class TableType(enum.IntEnum):
    """Table names (group code 2), in the order they appear in TABLES."""

    VPORT = 0
    LTYPE = 1
    LAYER = 2
    STYLE = 3
    VIEW = 4
    UCS = 5
    APPID = 6
    DIMSTYLE = 7
    BLOCK_RECORD = 8


def table_type_from_name(name: str) -> TableType:
    """Return the table type called ``name`` (exact, upper case)."""
    try:
        return TableType[name]
    except KeyError:
        raise ValueError(f"unknown table type: {name}") from None


class Table(DxfFormattable):
    """A TABLE holding symbol table records of one kind."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.handle = 0
        self._records: list[SymbolTableRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[SymbolTableRecord]:
        return iter(self._records)

    @property
    def records(self) -> tuple[SymbolTableRecord, ...]:
        return tuple(self._records)

    def format(self, formatter: Formatter) -> None:
        size = len(self._records)
        formatter.write_string(0, "TABLE")
        formatter.write_string(2, self.name)
        formatter.write_hex(5, self.handle)
        formatter.write_string(100, "AcDbSymbolTable")
        formatter.write_int(70, size)
        if self.name == "DIMSTYLE":
            formatter.write_string(100, "AcDbDimStyleTable")
            formatter.write_int(71, size)
            for record in self._records:
                formatter.write_hex(340, record.handle)
        for record in self._records:
            record.format(formatter)
        formatter.write_string(0, "ENDTAB")

    def set_handle(self, counter: HandleCounter) -> None:
        """Take a handle for the table, then one for each record."""
        self.handle = counter.take()
        for record in self._records:
            record.set_handle(counter)

    def add(self, record: SymbolTableRecord) -> None:
        """Append ``record`` and make this table its owner."""
        self._records.append(record)
        record.owner = self

    def clear(self) -> None:
        """Remove every record."""
        self._records.clear()

    def find(self, name: str) -> SymbolTableRecord:
        """Return the record called ``name``, ignoring case."""
        wanted = name.casefold()
        for record in self._records:
            if record.name.casefold() == wanted:
                return record
        raise KeyError(f"{name} doesn't exist")


def _default_tables() -> list[Table]:
    tables = [Table(kind.name) for kind in TableType]
    for line_type in (LT_BYLAYER, LT_BYBLOCK, LT_CONTINUOUS, LT_HIDDEN, LT_DASHDOT):
        tables[TableType.LTYPE].add(line_type)
    tables[TableType.LAYER].add(LAYER_0)
    tables[TableType.STYLE].add(STANDARD_STYLE)
    tables[TableType.APPID].add(AppID("ACAD"))
    for name in ("*Model_Space", "*Paper_Space", "*Paper_Space0"):
        tables[TableType.BLOCK_RECORD].add(BlockRecord(name))
    return tables


class Tables(DxfFormattable):
    """The TABLES section; by default the nine standard tables."""

    def __init__(self, tables: Iterable[Table] | None = None) -> None:
        self._tables: list[Table] = (
            _default_tables() if tables is None else list(tables)
        )

    def __len__(self) -> int:
        return len(self._tables)

    def __iter__(self) -> Iterator[Table]:
        return iter(self._tables)

    def __getitem__(self, index: int) -> Table:
        return self._tables[index]

    def format(self, formatter: Formatter) -> None:
        formatter.write_string(0, "SECTION")
        formatter.write_string(2, "TABLES")
        for table in self._tables:
            table.format(formatter)
        formatter.write_string(0, "ENDSEC")

    def add(self, table: Table) -> None:
        """Append a table to the section."""
        self._tables.append(table)

    def set_handle(self, counter: HandleCounter) -> None:
        """Give handles to every table and its records."""
        for table in self._tables:
            table.set_handle(counter)

    def add_layer(self, layer: Layer) -> None:
        """Add ``layer`` to the LAYER table."""
        self._tables[TableType.LAYER].add(layer)