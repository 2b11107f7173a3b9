"""
phpdate.engines.calendar_math
-----------------------------
Derived calendar facts for an Instant: leap years, month lengths, ordinal days,
ISO-8601 week dates, zone offsets and daylight-saving inference.

Months are 0-based throughout (0=Jan..11=Dec) to match Instant.month.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional

from phpdate.core.time import day_of_week, host_today, midnight_offset_minutes

if TYPE_CHECKING:
    from phpdate.core.types import Instant

_THIRTY_DAY_MONTHS = frozenset({3, 5, 8, 10})  # Apr, Jun, Sep, Nov


def is_leap_year(year: Optional[int] = None) -> bool:
    """Gregorian leap-year rule. Defaults to the host's current year."""
    year = host_today().year if year is None else year
    return year % 4 == 0 and year % 100 != 0 or year % 400 == 0

def days_in_month(month: Optional[int] = None, year: Optional[int] = None) -> int:
    """Length of a 0-based month. Missing arguments default to the host's current month/year."""
    if month is None or year is None:
        today = host_today()
        month = today.month - 1 if month is None else month
        year = today.year if year is None else year
    if month == 1:
        return 29 if is_leap_year(year) else 28
    return 30 if month in _THIRTY_DAY_MONTHS else 31

def day_of_year(d: Instant) -> int:
    """0-based ordinal day within the instant's year."""
    return sum(days_in_month(m, d.year) for m in range(d.month)) + d.day - 1

def weekday_of(year: int, month: int, day: int) -> int:
    """Weekday (0=Sun..6=Sat) of a civil date with 0-based month."""
    return day_of_week(year, month + 1, day)

def _iso(weekday: int) -> int:
    return 7 if weekday == 0 else weekday

def iso_weekday(d: Instant) -> int:
    """ISO numbering: Monday=1 .. Sunday=7."""
    return _iso(d.weekday)

def _day1(year: int) -> int:
    # Jan 1 of `year` as days since Monday (0..6)
    return _iso(weekday_of(year, 0, 1)) - 1

def iso_week_number(d: Instant) -> int:
    """ISO-8601 week of the year (1..53).

    Early January days can belong to the last week of the previous year, and the
    last days of December to week 1 of the next one.
    """
    day1 = _day1(d.year)
    doy = day_of_year(d)

    days = doy - (7 - day1) if day1 > 3 else doy + day1
    if days < 0:
        return 53 if day1 == 4 or _day1(d.year - 1) == 3 else 52

    week = days // 7 + 1
    if days > 360 and week > 52:
        week = 53 if day1 == 3 or _day1(d.year + 1) == 4 else 1
    return week

def iso_year(d: Instant) -> int:
    """Year owning the instant's ISO week."""
    week = iso_week_number(d)
    if week == 1 and d.month == 11:
        return d.year + 1
    if week >= 52 and d.month == 0:
        return d.year - 1
    return d.year

def timezone_offset_minutes(d: Instant) -> int:
    return d.offset_minutes

def is_daylight_saving_active(d: Instant) -> int:
    """1 if the instant falls in its zone's daylight-saving period, else 0.

    The zone's offsets at local midnight of January 1 and July 1 are compared; the
    one further ahead of UTC is the summer offset. Zones with equal offsets observe
    no DST that year. When either reference midnight lies outside the representable
    range (year 1 west of UTC, year 9999 east of it) the answer is 0.
    """
    try:
        off_jul = -midnight_offset_minutes(d.year, 7, 1, d.tz)
        off_jan = -midnight_offset_minutes(d.year, 1, 1, d.tz)
    except (OverflowError, ValueError, OSError):
        return 0

    if off_jul == off_jan:
        return 0
    summer = max(off_jul, off_jan)
    return 1 if -d.offset_minutes == summer else 0

def swatch_beat(d: Instant) -> int:
    """Swatch Internet Time (Biel Mean Time, UTC+1) in beats of 86.4 s, 0..999."""
    return (d.utc_seconds_of_day + 3600) * 10 // 864 % 1000
