"""
phpdate.engines.directives
--------------------------
The directive catalogue: one pure function per format character.

The composite directives `c` and `r` are not listed here; they re-enter a
FormatEngine and are bound by it (see formatter.py).
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Callable, Mapping

from phpdate.core.types import Instant
from phpdate.engines import calendar_math as cm

Directive = Callable[[Instant], str]

WEEKDAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def _pad(value: int, width: int = 2) -> str:
    return f"{value:0{width}d}"

def _year(year: int) -> str:
    return _pad(year, 4) if year >= 0 else "-" + _pad(-year, 4)

def _hour12(d: Instant) -> int:
    return d.hour % 12 or 12

# ------------------------------------------------------------
# Day
# ------------------------------------------------------------

def ordinal_suffix(d: Instant) -> str:
    day = d.day
    if day in (1, 21, 31):
        return "st"
    if day in (2, 22):
        return "nd"
    if day in (3, 23):
        return "rd"
    return "th"

# ------------------------------------------------------------
# Timezone
# ------------------------------------------------------------

def offset_with_colon(d: Instant) -> str:
    """+HH:MM; the sign is '+' east of UTC and for UTC itself."""
    sign = "+" if d.offset_minutes <= 0 else "-"
    hours, minutes = divmod(abs(d.offset_minutes), 60)
    return f"{sign}{_pad(hours)}:{_pad(minutes)}"

def offset_compact(d: Instant) -> str:
    return offset_with_colon(d).replace(":", "", 1)


BASE_DIRECTIVES: Mapping[str, Directive] = MappingProxyType({
    # Day
    "d": lambda d: _pad(d.day),
    "D": lambda d: WEEKDAY_NAMES[d.weekday][:3],
    "j": lambda d: str(d.day),
    "l": lambda d: WEEKDAY_NAMES[d.weekday],
    "N": lambda d: str(cm.iso_weekday(d)),
    "S": ordinal_suffix,
    "w": lambda d: str(d.weekday),
    "z": lambda d: str(cm.day_of_year(d)),

    # Week
    "W": lambda d: _pad(cm.iso_week_number(d)),

    # Month
    "F": lambda d: MONTH_NAMES[d.month],
    "m": lambda d: _pad(d.month + 1),
    "M": lambda d: MONTH_NAMES[d.month][:3],
    "n": lambda d: str(d.month + 1),
    "t": lambda d: str(cm.days_in_month(d.month, d.year)),

    # Year
    "L": lambda d: "1" if cm.is_leap_year(d.year) else "0",
    "o": lambda d: _year(cm.iso_year(d)),
    "Y": lambda d: _year(d.year),
    "y": lambda d: _pad(abs(d.year) % 100),

    # Time
    "a": lambda d: "am" if d.hour < 12 else "pm",
    "A": lambda d: "AM" if d.hour < 12 else "PM",
    "B": lambda d: _pad(cm.swatch_beat(d), 3),
    "g": lambda d: str(_hour12(d)),
    "G": lambda d: str(d.hour),
    "h": lambda d: _pad(_hour12(d)),
    "H": lambda d: _pad(d.hour),
    "i": lambda d: _pad(d.minute),
    "s": lambda d: _pad(d.second),
    "u": lambda d: _pad(d.millisecond, 3) + "000",
    "v": lambda d: _pad(d.millisecond, 3),

    # Timezone (e and T are not supported and pass through)
    "I": lambda d: str(cm.is_daylight_saving_active(d)),
    "O": offset_compact,
    "P": offset_with_colon,
    "Z": lambda d: str(d.offset_seconds),

    # Full Date/Time
    "U": lambda d: str(d.epoch_ms // 1000),
})
