"""Conversions between Unix time and the on-board clock (ns since 2000-01-01)."""

from __future__ import annotations

from datetime import datetime, timedelta

SECONDS = 1_000_000_000
RODOS_UNIX_OFFSET = 946_684_800 * SECONDS
_EPOCH_2000 = datetime(2000, 1, 1)
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _to_int32(value: int) -> int:
    return (value - _INT32_MIN) % 2**32 + _INT32_MIN


def unix_to_rodos_time(unix_time_seconds: int) -> int:
    """Convert seconds since 1970-01-01 to nanoseconds since 2000-01-01."""
    if not _INT32_MIN <= unix_time_seconds <= _INT32_MAX:
        raise ValueError(f"Unix time does not fit into 32 bits: {unix_time_seconds}")
    return unix_time_seconds * SECONDS - RODOS_UNIX_OFFSET


def unix_utc(rodos_utc: int) -> int:
    """Convert nanoseconds since 2000-01-01 to whole seconds since 1970 (32-bit)."""
    total = rodos_utc + RODOS_UNIX_OFFSET
    seconds = abs(total) // SECONDS
    return _to_int32(seconds if total >= 0 else -seconds)


def format_utc(rodos_utc: int) -> str:
    """Render a clock value as a human-readable UTC date and time."""
    moment = _EPOCH_2000 + timedelta(microseconds=rodos_utc // 1000)
    return (
        "DateUTC(DD/MM/YYYY HH:MIN:SS) : "
        f"{moment.day:02d}/{moment.month:02d}/{moment.year} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )


def print_formatted_utc(rodos_utc: int) -> None:
    """Print the formatted UTC time of ``rodos_utc``."""
    print(format_utc(rodos_utc))