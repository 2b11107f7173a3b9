from __future__ import annotations
import time
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Optional

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def to_jdn(year: int, month: int, day: int) -> int:
    """Convert a proleptic Gregorian date (1-based month) to its Julian Day Number."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045

def day_of_week(year: int, month: int, day: int) -> int:
    """Weekday of a civil date (1-based month), 0=Sun..6=Sat. Valid for any integer year."""
    return (to_jdn(year, month, day) + 1) % 7


# ============================================================
# Host clock / zone queries
# ============================================================

def now_ms() -> int:
    """Current host wall-clock time as epoch milliseconds."""
    return time.time_ns() // 1_000_000

def host_today() -> date:
    return datetime.now().date()

def utc_from_epoch_ms(ms: int) -> datetime:
    return UNIX_EPOCH + timedelta(milliseconds=ms)

def epoch_ms_of(aware: datetime) -> int:
    """Floor of the milliseconds elapsed since the Unix epoch."""
    return (aware - UNIX_EPOCH) // _ONE_MS

def localize(aware: datetime, tz: Optional[tzinfo]) -> datetime:
    """Project an aware datetime into `tz`, or into the host's local rules when tz is None."""
    return aware.astimezone(tz) if tz is not None else aware.astimezone()

def attach_zone(naive: datetime, tz: Optional[tzinfo]) -> datetime:
    """Interpret a naive datetime as wall time in `tz` (host local rules when None)."""
    return naive.replace(tzinfo=tz) if tz is not None else naive.astimezone()

def minutes_behind_utc(aware: datetime) -> int:
    """Offset in minutes the datetime's zone is behind UTC (negative = ahead)."""
    off = aware.utcoffset()
    if off is None:
        return 0
    return -round(off.total_seconds() / 60)

def midnight_offset_minutes(year: int, month: int, day: int, tz: Optional[tzinfo]) -> int:
    """Minutes behind UTC at local midnight of a civil date (1-based month)."""
    return minutes_behind_utc(attach_zone(datetime(year, month, day), tz))
