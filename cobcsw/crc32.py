"""CRC-32/MPEG-2 checksum."""

from __future__ import annotations

from collections.abc import Iterable

CRC32_POLYNOMIAL = 0x04C11DB7
CRC32_INITIAL_VALUE = 0xFFFFFFFF
_MASK = 0xFFFFFFFF


def _make_table() -> tuple[int, ...]:
    table = []
    for index in range(256):
        crc = index << 24
        for _ in range(8):
            crc = (crc << 1) ^ CRC32_POLYNOMIAL if crc & 0x80000000 else crc << 1
            crc &= _MASK
        table.append(crc)
    return tuple(table)


_TABLE = _make_table()


def crc32(data: bytes | bytearray | memoryview | Iterable[int]) -> int:
    """Return the CRC-32/MPEG-2 checksum of ``data``.

    The algorithm is not reflected and applies no final XOR.
    """
    crc = CRC32_INITIAL_VALUE
    for value in bytes(data):
        crc = ((crc << 8) & _MASK) ^ _TABLE[((crc >> 24) ^ value) & 0xFF]
    return crc