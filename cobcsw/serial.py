"""Fixed-size binary serialization of primitive values and composite layouts.

Values are encoded in little-endian byte order, matching the memory layout of
the on-board computer. Every serializable kind has a fixed serial size; kinds
without one (size 0) cannot be serialized.
"""

from __future__ import annotations

import struct
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Union


def _check_length(data: bytes | bytearray | memoryview, expected: int, what: str) -> None:
    if len(data) != expected:
        raise ValueError(f"{what} needs exactly {expected} bytes, got {len(data)}")


@dataclass(frozen=True)
class Primitive:
    """A trivially serializable value described by a struct format character."""

    name: str
    format: str
    _struct: struct.Struct = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_struct", struct.Struct("<" + self.format))

    @property
    def size(self) -> int:
        """Number of bytes a serialized value occupies."""
        return self._struct.size

    def serialize(self, value: Any) -> bytes:
        """Encode ``value`` as exactly ``size`` bytes."""
        if self.format == "c" and isinstance(value, str):
            value = value.encode("latin-1")
        try:
            return self._struct.pack(value)
        except struct.error as error:
            raise ValueError(f"cannot serialize {value!r} as {self.name}: {error}") from error

    def deserialize(self, data: bytes | bytearray | memoryview) -> Any:
        """Decode a value from exactly ``size`` bytes."""
        _check_length(data, self.size, self.name)
        (value,) = self._struct.unpack(bytes(data))
        if self.format == "c":
            return value.decode("latin-1")
        return value


BYTE = Primitive("byte", "B")
CHAR = Primitive("char", "c")
BOOL = Primitive("bool", "?")
INT8 = Primitive("int8", "b")
UINT8 = Primitive("uint8", "B")
INT16 = Primitive("int16", "h")
UINT16 = Primitive("uint16", "H")
INT32 = Primitive("int32", "i")
UINT32 = Primitive("uint32", "I")
INT64 = Primitive("int64", "q")
UINT64 = Primitive("uint64", "Q")
FLOAT = Primitive("float", "f")
DOUBLE = Primitive("double", "d")


def _field_value(value: Any, name: str) -> Any:
    if isinstance(value, Mapping):
        return value[name]
    return getattr(value, name)


@dataclass(frozen=True)
class Layout:
    """A user-defined kind: named fields serialized one after another.

    ``factory`` is called with the decoded fields as keyword arguments.
    """

    fields: tuple[tuple[str, "Kind"], ...]
    factory: Callable[..., Any] = dict

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(tuple(entry) for entry in self.fields))

    @property
    def size(self) -> int:
        """Sum of the serial sizes of all fields."""
        return total_serial_size(*(kind for _, kind in self.fields))

    def serialize(self, value: Any) -> bytes:
        """Encode the fields of ``value`` (attributes or mapping keys) in order."""
        buffer = bytearray(self.size)
        offset = 0
        for name, kind in self.fields:
            offset = serialize_to(buffer, offset, _field_value(value, name), kind)
        return bytes(buffer)

    def deserialize(self, data: bytes | bytearray | memoryview) -> Any:
        """Decode all fields from exactly ``size`` bytes and build the value."""
        _check_length(data, self.size, "layout")
        values = {}
        offset = 0
        for name, kind in self.fields:
            values[name], offset = deserialize_from(data, offset, kind)
        return self.factory(**values)


Kind = Union[Primitive, Layout]


def byte(number: int) -> int:
    """Return ``number`` as a byte value, keeping only its lowest eight bits."""
    if number < 0:
        raise ValueError(f"byte literal must not be negative: {number}")
    return number & 0xFF


def is_trivially_serializable(kind: Any) -> bool:
    """Tell whether ``kind`` is a primitive that is copied byte for byte."""
    return isinstance(kind, Primitive)


def serial_size(kind: Any) -> int:
    """Serial size of ``kind``; 0 for anything that is not serializable."""
    if isinstance(kind, (Primitive, Layout)):
        return kind.size
    return 0


def total_serial_size(*args: Any) -> int:
    """Sum of the serial sizes of all given kinds."""
    return sum(serial_size(kind) for kind in args)


def _require_size(kind: Any) -> int:
    size = serial_size(kind)
    if size == 0:
        raise TypeError(f"{kind!r} is not serializable")
    return size


def serialize_to(buffer: bytearray, offset: int, value: Any, kind: Kind) -> int:
    """Write ``value`` into ``buffer`` at ``offset``; return the next free offset."""
    encoded = serialize(value, kind)
    end = offset + len(encoded)
    if offset < 0 or end > len(buffer):
        raise ValueError(f"{len(encoded)} bytes do not fit into the buffer at offset {offset}")
    buffer[offset:end] = encoded
    return end


def deserialize_from(
    data: bytes | bytearray | memoryview, offset: int, kind: Kind
) -> tuple[Any, int]:
    """Read a value of ``kind`` at ``offset``; return it with the next offset."""
    size = _require_size(kind)
    end = offset + size
    if offset < 0 or end > len(data):
        raise ValueError(f"not enough data for {size} bytes at offset {offset}")
    return kind.deserialize(data[offset:end]), end


def serialize(value: Any, kind: Kind) -> bytes:
    """Encode ``value`` as ``kind`` into a new buffer of its serial size."""
    _require_size(kind)
    return kind.serialize(value)


def deserialize(kind: Kind, data: bytes | bytearray | memoryview) -> Any:
    """Decode a value of ``kind`` from a buffer of exactly its serial size."""
    _require_size(kind)
    return kind.deserialize(data)