from __future__ import annotations
import math
from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from decimal import Decimal
from typing import Optional

from .errors import InvalidArgumentError
from .time import (
    attach_zone,
    day_of_week,
    epoch_ms_of,
    localize,
    minutes_behind_utc,
    now_ms,
    utc_from_epoch_ms,
)

_RANGES = {
    "month": (0, 11),
    "day": (1, 31),
    "hour": (0, 23),
    "minute": (0, 59),
    "second": (0, 59),
    "millisecond": (0, 999),
    "weekday": (0, 6),
}

def _is_int(v: object) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)

@dataclass(frozen=True)
class Instant:
    """A point in time resolved to local calendar fields.

    month is 0-based (0=Jan..11=Dec), weekday is 0=Sun..6=Sat and offset_minutes is
    the number of minutes the zone is behind UTC (negative east of Greenwich).
    tz carries the zone rules used for daylight-saving inference; None means the
    host's local rules.
    """
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int
    weekday: int
    offset_minutes: int
    epoch_ms: int
    tz: Optional[tzinfo] = None

    def __post_init__(self) -> None:
        for name in ("year", "offset_minutes", "epoch_ms", *_RANGES):
            v = getattr(self, name)
            if not _is_int(v):
                raise InvalidArgumentError(f"Instant.{name} must be an int, got {v!r}")
        for name, (lo, hi) in _RANGES.items():
            v = getattr(self, name)
            if not lo <= v <= hi:
                raise InvalidArgumentError(f"Instant.{name}={v} outside {lo}..{hi}")

        from ..engines.calendar_math import days_in_month
        if self.day > days_in_month(self.month, self.year):
            raise InvalidArgumentError(
                f"Day {self.day} does not exist in month {self.month + 1} of {self.year}")
        if self.weekday != day_of_week(self.year, self.month + 1, self.day):
            raise InvalidArgumentError(
                f"Weekday {self.weekday} does not match {self.year}-{self.month + 1}-{self.day}")
        if self.tz is not None and not isinstance(self.tz, tzinfo):
            raise InvalidArgumentError(f"Instant.tz must be a tzinfo, got {self.tz!r}")

    # ------------------------------------------------------------
    # UTC-resolved clock fields
    # ------------------------------------------------------------

    @property
    def utc_seconds_of_day(self) -> int:
        return self.epoch_ms // 1000 % 86400

    @property
    def utc_hour(self) -> int:
        return self.utc_seconds_of_day // 3600

    @property
    def utc_minute(self) -> int:
        return self.utc_seconds_of_day // 60 % 60

    @property
    def utc_second(self) -> int:
        return self.utc_seconds_of_day % 60

    @property
    def offset_seconds(self) -> int:
        """Seconds east of UTC (PHP's `Z`)."""
        return -self.offset_minutes * 60

    # ------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------

    @classmethod
    def _from_aware(cls, local: datetime, tz: Optional[tzinfo], epoch_ms: int) -> Instant:
        return cls(
            year=local.year,
            month=local.month - 1,
            day=local.day,
            hour=local.hour,
            minute=local.minute,
            second=local.second,
            millisecond=local.microsecond // 1000,
            weekday=local.isoweekday() % 7,
            offset_minutes=minutes_behind_utc(local),
            epoch_ms=epoch_ms,
            tz=tz,
        )

    @classmethod
    def from_epoch_ms(cls, ms: int, tz: Optional[tzinfo] = None) -> Instant:
        """Resolve epoch milliseconds in `tz` (host local rules when None)."""
        if not _is_int(ms):
            raise InvalidArgumentError(f"Epoch milliseconds must be an int, got {ms!r}")
        try:
            local = localize(utc_from_epoch_ms(ms), tz)
        except (OverflowError, ValueError, OSError) as e:
            raise InvalidArgumentError(f"Epoch value {ms} ms is not representable") from e
        return cls._from_aware(local, tz, ms)

    @classmethod
    def from_timestamp(cls, seconds: float, tz: Optional[tzinfo] = None) -> Instant:
        """Epoch seconds; sub-millisecond digits are floored."""
        if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
            raise InvalidArgumentError(f"Timestamp must be a number, got {seconds!r}")
        if isinstance(seconds, float) and not math.isfinite(seconds):
            raise InvalidArgumentError(f"Timestamp must be finite, got {seconds!r}")
        ms = seconds * 1000 if isinstance(seconds, int) else math.floor(Decimal(repr(float(seconds))) * 1000)
        return cls.from_epoch_ms(ms, tz)

    @classmethod
    def from_datetime(cls, value: datetime, tz: Optional[tzinfo] = None) -> Instant:
        """Aware datetimes keep their zone unless `tz` is given; naive ones are wall time in `tz`."""
        if not isinstance(value, datetime):
            raise InvalidArgumentError(f"Expected a datetime, got {type(value).__name__}")
        try:
            if value.tzinfo is None:
                aware = attach_zone(value, tz)
            elif tz is not None:
                aware = value.astimezone(tz)
            else:
                aware = value
                tz = value.tzinfo
            epoch_ms = epoch_ms_of(aware)
        except (OverflowError, ValueError, OSError) as e:
            raise InvalidArgumentError(f"Datetime {value!r} is not representable") from e
        return cls._from_aware(aware, tz, epoch_ms)

    @classmethod
    def from_date(cls, value: date, tz: Optional[tzinfo] = None) -> Instant:
        """Local midnight of a civil date."""
        return cls.from_datetime(datetime(value.year, value.month, value.day), tz)

    @classmethod
    def now(cls, tz: Optional[tzinfo] = None) -> Instant:
        return cls.from_epoch_ms(now_ms(), tz)

    def to_datetime(self) -> datetime:
        """Aware datetime for the same moment, in this instant's zone."""
        return localize(utc_from_epoch_ms(self.epoch_ms), self.tz)
