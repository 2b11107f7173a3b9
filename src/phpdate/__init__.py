"""phpdate public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    DIRECTIVES,
    default_engine,
    format,
    format_timestamp,
    to_instant,
)
from .core.errors import InvalidArgumentError, PhpDateError
from .core.types import Instant
from .engines.calendar_math import (
    day_of_year,
    days_in_month,
    is_daylight_saving_active,
    is_leap_year,
    iso_week_number,
    iso_weekday,
    iso_year,
    timezone_offset_minutes,
)
from .engines.formatter import FormatEngine, ISO_8601, RFC_2822

__all__ = [
    "format",
    "format_timestamp",
    "to_instant",
    "default_engine",
    "DIRECTIVES",
    "FormatEngine",
    "ISO_8601",
    "RFC_2822",
    "Instant",
    "is_leap_year",
    "days_in_month",
    "day_of_year",
    "iso_weekday",
    "iso_week_number",
    "iso_year",
    "timezone_offset_minutes",
    "is_daylight_saving_active",
    "PhpDateError",
    "InvalidArgumentError",
]
