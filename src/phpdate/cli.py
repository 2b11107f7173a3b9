from __future__ import annotations

import argparse
import importlib
import logging
import sys
from datetime import datetime

from .core.errors import InvalidArgumentError, PhpDateError
from .core.logger import setup_logging
from .config import LOG_LEVELS, load_settings

logger = logging.getLogger(__name__)

_SUBCOMMANDS = {"format", "grid", "diag"}


def _run_diagnostic(modpath: str, argv: list[str]) -> int:
    """Run a diagnostics module's main(argv)."""
    mod = importlib.import_module(modpath)
    return int(mod.main(argv) or 0)


def _first_positional(argv: list[str]) -> int:
    """Index of the first argument after the global options."""
    i = 0
    while i < len(argv) and argv[i].startswith("-"):
        if argv[i] == "--log-level":
            i += 2
        else:
            i += 1
    return i


def _parse_iso(s: str) -> datetime:
    try:
        return datetime.fromisoformat(s)
    except ValueError as e:
        raise InvalidArgumentError(f"Not an ISO-8601 datetime: {s!r}") from e


def cmd_format(argv: list[str]) -> int:
    import phpdate

    p = argparse.ArgumentParser(prog="phpdate format", description="Format a moment with a PHP date() pattern")
    p.add_argument("pattern", help="e.g. 'D, d M Y H:i:s O'")
    src = p.add_mutually_exclusive_group()
    src.add_argument("--epoch-ms", type=int, help="Epoch milliseconds")
    src.add_argument("--timestamp", type=float, help="Epoch seconds (fractions allowed)")
    src.add_argument("--iso", help="ISO-8601 datetime; naive values are wall time in --tz")
    p.add_argument("--tz", default=None, help="local | UTC | IANA name | +HH:MM (default: PHPDATE_TZ)")
    args = p.parse_args(argv)

    if args.epoch_ms is not None:
        value = args.epoch_ms
    elif args.timestamp is not None:
        print(phpdate.format_timestamp(args.pattern, args.timestamp, tz=args.tz))
        return 0
    elif args.iso is not None:
        value = _parse_iso(args.iso)
    else:
        value = None

    print(phpdate.format(value, args.pattern, tz=args.tz))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        settings = load_settings()
    except PhpDateError as e:
        print(f"phpdate: {e}", file=sys.stderr)
        return 2

    # Shortcut: `phpdate [--log-level LEVEL] PATTERN [options]`
    i = _first_positional(argv)
    if i < len(argv) and argv[i] not in _SUBCOMMANDS:
        argv = argv[:i] + ["format"] + argv[i:]

    p = argparse.ArgumentParser(prog="phpdate", description="PHP date()-style formatting toolkit CLI.")
    p.add_argument("--log-level", choices=LOG_LEVELS, default=settings.log_level)
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("format", help="Format a moment with a PHP date() pattern")
    sub.add_parser("grid", help="Print every directive for a fixed timestamp set (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["iso-week"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)
    setup_logging(args.log_level)
    logger.debug("command %s %s", args.cmd, rest)

    try:
        if args.cmd == "format":
            return cmd_format(rest)

        if args.cmd == "grid":
            return _run_diagnostic("phpdate.diagnostics.directive_grid", rest)

        if args.cmd == "diag":
            tool_map = {
                "iso-week": "phpdate.diagnostics.iso_week_sweep",
            }
            return _run_diagnostic(tool_map[args.tool], rest)
    except PhpDateError as e:
        print(f"phpdate: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
