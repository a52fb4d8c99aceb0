"""Timestamps in .NET ticks (100ns units since 0001-01-01T00:00:00Z)."""
from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Union

# ticks between 0001-01-01 and 1970-01-01
UNIX_EPOCH_TICKS = 621355968000000000
NS_PER_TICK = 100

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

Instant = Union[datetime, int]


def unix_ns(instant: datetime) -> int:
    """Exact nanoseconds since the Unix epoch; naive datetimes are taken as UTC."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    delta = instant - _UNIX_EPOCH
    return (delta.days * 86400 + delta.seconds) * 1_000_000_000 + delta.microseconds * 1000


def dotnet_ticks(instant: Instant) -> int:
    """Convert a datetime or a Unix nanosecond count to protocol ticks.

    Sub-tick precision is truncated toward zero, also for instants before 1970.
    """
    ns = unix_ns(instant) if isinstance(instant, datetime) else int(instant)
    ticks = abs(ns) // NS_PER_TICK
    return (ticks if ns >= 0 else -ticks) + UNIX_EPOCH_TICKS


def now_ticks() -> int:
    return dotnet_ticks(time.time_ns())


__all__ = ["UNIX_EPOCH_TICKS", "dotnet_ticks", "now_ticks", "unix_ns"]
