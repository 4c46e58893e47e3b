"""Ground-station command identifiers and the command header format."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from cobcsw.serial import CHAR, INT8, INT16, INT32, Layout, deserialize, deserialize_from


class CommandId(enum.Enum):
    """Commands the ground station can send, identified by a character."""

    TURN_EDU_ON = "1"
    TURN_EDU_OFF = "2"
    BUILD_QUEUE = "4"


HEADER_LAYOUT = Layout(
    (
        ("start_character", CHAR),
        ("utc", INT32),
        ("command_id", INT8),
        ("length", INT16),
    )
)


@dataclass(frozen=True)
class GsCommandHeader:
    """Header that precedes every ground-station command."""

    start_character: str
    utc: int
    command_id: int
    length: int

    @classmethod
    def deserialize(cls, data: bytes | bytearray | memoryview) -> "GsCommandHeader":
        """Decode a header from exactly its serial size in bytes."""
        return cls(**deserialize(HEADER_LAYOUT, data))

    @classmethod
    def deserialize_from(
        cls, data: bytes | bytearray | memoryview, offset: int
    ) -> tuple["GsCommandHeader", int]:
        """Decode a header at ``offset``; return it with the offset after it."""
        values, end = deserialize_from(data, offset, HEADER_LAYOUT)
        return cls(**values), end