from __future__ import annotations

import datetime as dt
import logging
import re
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")

TzLike = Union[str, dt.tzinfo, None]


def normalize_tz_name(name: Optional[str]) -> str:
    """Normalize a timezone identifier.

    Supported forms:
      - None/"" -> "local"
      - "local" / "system" / "host" -> "local" (the machine's own rules)
      - "UTC" / "Z" / "GMT" -> "UTC"
      - IANA names, e.g. "Europe/Berlin"
      - Fixed offsets: "+02:00", "+0200", "-05:30"
    """
    if name is None:
        return "local"
    s = str(name).strip()
    if not s:
        return "local"

    low = s.lower()
    if low in {"local", "system", "host"}:
        return "local"
    if low in {"utc", "z", "gmt", "utc0", "utc+0"}:
        return "UTC"
    return s


def resolve_tz(name: TzLike) -> Optional[dt.tzinfo]:
    """Resolve a timezone name into a tzinfo.

    Returns None for "local": callers then apply the host's own rules per instant,
    which keeps its daylight saving transitions (a fixed snapshot of the current
    offset would not).
    tzinfo objects are returned unchanged.

    Raises InvalidArgumentError for invalid identifiers.
    """
    if isinstance(name, dt.tzinfo):
        return name
    if name is not None and not isinstance(name, str):
        raise InvalidArgumentError(f"Timezone must be a name or tzinfo, got {type(name).__name__}")

    tz_name = normalize_tz_name(name)
    if tz_name == "local":
        return None
    if tz_name == "UTC":
        return dt.timezone.utc

    m = _OFFSET_RE.match(tz_name)
    if m:
        sign_s, hh_s, mm_s = m.groups()
        hh = int(hh_s)
        mm = int(mm_s)
        if hh > 23 or mm > 59:
            raise InvalidArgumentError(f"Invalid timezone offset: {tz_name!r}")
        sign = 1 if sign_s == "+" else -1
        return dt.timezone(dt.timedelta(minutes=sign * (hh * 60 + mm)))

    try:
        tz = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as ex:
        raise InvalidArgumentError(f"Invalid timezone identifier: {tz_name!r}") from ex
    logger.debug("resolved zone %r", tz_name)
    return tz
