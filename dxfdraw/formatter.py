"""Output formatters that turn DXF group codes and values into text."""

from __future__ import annotations

import abc
import io
from typing import IO, Union

Stream = Union[IO[str], IO[bytes]]


class Formatter(abc.ABC):
    """Interface for writers of DXF group-code/value pairs."""

    @abc.abstractmethod
    def reset(self) -> None:
        """Discard everything buffered so far."""

    @abc.abstractmethod
    def write_to(self, stream: Stream) -> int:
        """Write the buffered data to ``stream`` and return the byte count."""

    @abc.abstractmethod
    def set_precision(self, precision: int) -> None:
        """Set the number of decimals used for floating point values."""

    @abc.abstractmethod
    def output(self) -> str:
        """Return the buffered data and empty the buffer."""

    @abc.abstractmethod
    def format_string(self, code: int, value: str) -> str:
        """Render a code with a string value."""

    @abc.abstractmethod
    def format_hex(self, code: int, value: int) -> str:
        """Render a code with a hexadecimal (handle) value."""

    @abc.abstractmethod
    def format_int(self, code: int, value: int) -> str:
        """Render a code with an integer value."""

    @abc.abstractmethod
    def format_float(self, code: int, value: float) -> str:
        """Render a code with a floating point value."""

    @abc.abstractmethod
    def write_string(self, code: int, value: str) -> None:
        """Buffer a code with a string value."""

    @abc.abstractmethod
    def write_hex(self, code: int, value: int) -> None:
        """Buffer a code with a hexadecimal value."""

    @abc.abstractmethod
    def write_int(self, code: int, value: int) -> None:
        """Buffer a code with an integer value."""

    @abc.abstractmethod
    def write_float(self, code: int, value: float) -> None:
        """Buffer a code with a floating point value."""


class AsciiFormatter(Formatter):
    """Formatter producing the ASCII flavour of DXF."""

    def __init__(self, precision: int = 6) -> None:
        self._chunks: list[str] = []
        self._precision = 0
        self.set_precision(precision)

    @property
    def precision(self) -> int:
        return self._precision

    def reset(self) -> None:
        self._chunks.clear()

    def write_to(self, stream: Stream) -> int:
        text = "".join(self._chunks)
        self._chunks.clear()
        data = text.encode("utf-8")
        if isinstance(stream, io.TextIOBase):
            stream.write(text)
        else:
            stream.write(data)
        return len(data)

    def set_precision(self, precision: int) -> None:
        if precision < 0:
            raise ValueError(f"precision must not be negative: {precision}")
        self._precision = precision

    def output(self) -> str:
        text = "".join(self._chunks)
        self._chunks.clear()
        return text

    def format_string(self, code: int, value: str) -> str:
        return f"{code}\n{value}\n"

    def format_hex(self, code: int, value: int) -> str:
        return f"{code}\n{value:X}\n"

    def format_int(self, code: int, value: int) -> str:
        return f"{code}\n{value}\n"

    def format_float(self, code: int, value: float) -> str:
        return f"{code}\n{value:.{self._precision}f}\n"

    def write_string(self, code: int, value: str) -> None:
        self._chunks.append(self.format_string(code, value))

    def write_hex(self, code: int, value: int) -> None:
        self._chunks.append(self.format_hex(code, value))

    def write_int(self, code: int, value: int) -> None:
        self._chunks.append(self.format_int(code, value))

    def write_float(self, code: int, value: float) -> None:
        self._chunks.append(self.format_float(code, value))


class DxfFormattable(abc.ABC):
    """Mixin for anything that can write itself to a formatter."""

    @abc.abstractmethod
    def format(self, formatter: Formatter) -> None:
        """Write this item's group codes to ``formatter``."""

    def format_string(self, formatter: Formatter) -> str:
        """Write this item to ``formatter`` and return the drained output."""
        self.format(formatter)
        return formatter.output()

    def __str__(self) -> str:
        return self.format_string(AsciiFormatter())