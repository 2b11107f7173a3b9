#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import List

from phpdate.core.types import Instant
from phpdate.engines import calendar_math as cm

logger = logging.getLogger(__name__)


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "phpdate[diagnostics]"') from e


@dataclass(frozen=True)
class Mismatch:
    day: date
    expected: tuple[int, int, int]
    got: tuple[int, int, int]


def check_day(d: date) -> Mismatch | None:
    inst = Instant.from_datetime(datetime(d.year, d.month, d.day, 12), timezone.utc)
    got = (cm.iso_year(inst), cm.iso_week_number(inst), cm.iso_weekday(inst))
    expected = tuple(d.isocalendar())
    if got != expected:
        return Mismatch(d, expected, got)
    return None


def boundary_ordinals(start_year: int, end_year: int):
    """Proleptic ordinals of Dec 25 .. Jan 7 around every year boundary in range."""
    np = _need_numpy()
    years = np.arange(start_year, end_year, dtype=np.int64)
    anchors = np.array([date(int(y), 12, 25).toordinal() for y in years], dtype=np.int64)
    return (anchors[:, None] + np.arange(14, dtype=np.int64)[None, :]).ravel()


def random_ordinals(start_year: int, end_year: int, N: int, seed: int):
    np = _need_numpy()
    rng = np.random.default_rng(seed)
    lo = date(start_year, 1, 1).toordinal()
    hi = date(end_year, 12, 31).toordinal()
    return rng.integers(lo, hi + 1, size=N)


def sweep(start_year: int, end_year: int, N: int, seed: int, *, max_failures: int = 5) -> List[Mismatch]:
    np = _need_numpy()
    ordinals = np.concatenate([
        boundary_ordinals(start_year, end_year),
        random_ordinals(start_year, end_year, N, seed),
    ])
    failures: List[Mismatch] = []
    for o in np.unique(ordinals):
        m = check_day(date.fromordinal(int(o)))
        if m is None:
            continue
        logger.warning("ISO week mismatch on %s: expected %s, got %s", m.day, m.expected, m.got)
        failures.append(m)
        if len(failures) >= max_failures:
            break
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Compare ISO week/year/weekday against datetime.date.isocalendar()."
    )
    p.add_argument("--N", type=int, default=20000, help="Random days to check.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--start-year", type=int, default=1600)
    p.add_argument("--end-year", type=int, default=2400)
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    if not 1 <= args.start_year < args.end_year <= 9998:
        raise SystemExit("--start-year/--end-year must satisfy 1 <= start < end <= 9998")

    failures = sweep(args.start_year, args.end_year, args.N, args.seed, max_failures=args.max_failures)
    for m in failures:
        print(f"FAIL {m.day}: expected {m.expected}, got {m.got}")

    if not failures:
        print("All ISO week checks passed.")
        return 0
    print(f"ISO week failures: {len(failures)}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
