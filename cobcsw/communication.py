"""Blocking helpers for byte-oriented communication interfaces (UART, SPI).

An interface is any object with these methods:

* ``write(data: bytes) -> int``: send some prefix of ``data``. Returns how many
  bytes were sent. A negative value signals an error.
* ``read(size: int) -> bytes``: receive at most ``size`` bytes.
* ``write_read(data: bytes, capacity: int) -> bytes``: send ``data`` and
  receive at most ``capacity`` bytes in the same transaction.
"""

from __future__ import annotations

from typing import NamedTuple, Protocol, Union

Data = Union[bytes, bytearray, memoryview, str]


class CommunicationInterface(Protocol):
    """What the helpers in this module expect from a communication interface."""

    def write(self, data: bytes) -> int: ...

    def read(self, size: int) -> bytes: ...

    def write_read(self, data: bytes, capacity: int) -> bytes: ...


class WriteReadResult(NamedTuple):
    """Outcome of a combined write/read transaction."""

    n_received: int
    answer: str


def _as_bytes(data: Data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def write_to(interface: CommunicationInterface, data: Data) -> None:
    """Send all of ``data``, calling ``interface.write`` until nothing is left."""
    payload = memoryview(_as_bytes(data))
    n_sent = 0
    while n_sent < len(payload):
        sent = interface.write(bytes(payload[n_sent:]))
        if sent < 0:
            raise OSError(f"writing to {interface!r} failed with {sent}")
        n_sent += sent


def read_from(interface: CommunicationInterface, size: int) -> bytes:
    """Receive exactly ``size`` bytes, calling ``interface.read`` as often as needed."""
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    received = bytearray()
    while len(received) < size:
        received += interface.read(size - len(received))
    return bytes(received[:size])


def write_to_read_from(
    interface: CommunicationInterface, message: Data, capacity: int
) -> WriteReadResult:
    """Send ``message`` and receive an answer of at most ``capacity`` characters.

    The answer ends at the first NUL byte, like a C string.
    """
    if capacity < 0:
        raise ValueError(f"capacity must not be negative: {capacity}")
    received = bytes(interface.write_read(_as_bytes(message), capacity))[:capacity]
    text, _, _ = received.partition(b"\x00")
    return WriteReadResult(len(received), text.decode("utf-8", errors="replace"))


def transfer(interface: CommunicationInterface, data: bytes | bytearray | memoryview) -> bytes:
    """Send ``data`` and receive as many bytes back; missing bytes read as zero."""
    payload = bytes(data)
    received = bytes(interface.write_read(payload, len(payload)))[: len(payload)]
    return received.ljust(len(payload), b"\x00")