from __future__ import annotations

import argparse
from typing import List, Optional, Sequence

import phpdate
from phpdate.config import default_tz_name
from phpdate.core.zone import resolve_tz

# Epoch seconds chosen around ISO week/year boundaries, leap days and DST switches.
TIMESTAMPS = (
    1276179716, 946721472, 1230750785, 162993600, 915091688, 915233003,
    915278400, 915364800, 915451200, 1218686722, 1293796800, 1293883200,
    1293969600, 1294056000, 1262260800, 1262347200, 1262520000, 1262606400,
    725803200, 725889600, 726062400, 726148800, 1009800000, 1009886400,
    1009713600, 1041336000, 1041768000, 1041854400, 1041249600, 1041163200,
    585266400, 949456922, 1075860264, 1013602393,
)

CODES = "dDjlNSwzWFmMntLoYyaABgGhHisuvIOPZcrU"


def grid_rows(
    timestamps: Sequence[int] = TIMESTAMPS,
    codes: str = CODES,
    *,
    tz: Optional[str] = None,
    millis: int = 0,
) -> List[List[str]]:
    """One row per timestamp: the epoch milliseconds followed by each directive's value."""
    zone = resolve_tz(tz)
    rows = []
    for ts in timestamps:
        ms = ts * 1000 + millis
        inst = phpdate.Instant.from_epoch_ms(ms, zone)
        rows.append([str(ms)] + [phpdate.default_engine().format(inst, c) for c in codes])
    return rows


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print every directive for a fixed set of timestamps (tab separated)."
    )
    p.add_argument("--tz", default=None, help="Zone name (default: PHPDATE_TZ or host local)")
    p.add_argument("--codes", default=CODES, help=f"Directive characters to show (default: {CODES})")
    p.add_argument("--millis", type=int, default=0, help="Milliseconds added to each timestamp (0..999)")
    args = p.parse_args(argv)

    if not 0 <= args.millis <= 999:
        raise SystemExit("--millis must be in 0..999")

    tz = args.tz if args.tz is not None else default_tz_name()
    print("\t".join(["epoch_ms"] + list(args.codes)))
    for row in grid_rows(codes=args.codes, tz=tz, millis=args.millis):
        print("\t".join(row))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
