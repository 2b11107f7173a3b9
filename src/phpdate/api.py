from __future__ import annotations

import logging
from datetime import date, datetime, tzinfo
from typing import Any, Optional

from .config import default_tz_name
from .core.errors import InvalidArgumentError
from .core.types import Instant
from .core.zone import TzLike, resolve_tz
from .engines.formatter import FormatEngine

logger = logging.getLogger(__name__)

_engine = FormatEngine()
DIRECTIVES = _engine.directives


def default_engine() -> FormatEngine:
    return _engine

def _zone(tz: TzLike) -> Optional[tzinfo]:
    if tz is None:
        return resolve_tz(default_tz_name())
    return resolve_tz(tz)

def to_instant(value: Any = None, *, tz: TzLike = None) -> Instant:
    """Coerce `value` into an Instant.

    Accepted: Instant, datetime, date (local midnight), int (epoch milliseconds) or
    None (now). When `tz` is given an existing Instant or aware datetime is
    re-projected into it; otherwise the configured default zone applies to values
    that carry no zone of their own.
    """
    if isinstance(value, Instant):
        if tz is None:
            return value
        return Instant.from_epoch_ms(value.epoch_ms, resolve_tz(tz))
    if isinstance(value, datetime):
        if value.tzinfo is not None and tz is None:
            return Instant.from_datetime(value)
        return Instant.from_datetime(value, _zone(tz))
    if isinstance(value, date):
        return Instant.from_date(value, _zone(tz))
    if value is None:
        return Instant.now(_zone(tz))
    if isinstance(value, int) and not isinstance(value, bool):
        return Instant.from_epoch_ms(value, _zone(tz))
    raise InvalidArgumentError(f"Cannot build an Instant from {type(value).__name__}")

def format(instant: Any, pattern: str, *, tz: TzLike = None) -> str:
    """Format `instant` with a PHP date()-style pattern."""
    if not isinstance(pattern, str):
        raise InvalidArgumentError(f"Pattern must be a str, got {type(pattern).__name__}")
    inst = to_instant(instant, tz=tz)
    logger.debug("format %r at epoch_ms=%d", pattern, inst.epoch_ms)
    return _engine.format(inst, pattern)

def format_timestamp(pattern: str, timestamp: Optional[float] = None, *, tz: TzLike = None) -> str:
    """PHP's date(format, timestamp): epoch seconds, defaulting to now."""
    if timestamp is None:
        return format(None, pattern, tz=tz)
    return format(Instant.from_timestamp(timestamp, _zone(tz)), pattern)
