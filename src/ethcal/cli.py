from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys


log = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^\d{1,4}-\d{1,2}-\d{1,2}$")


def _parse_ymd(s: str) -> tuple[int, int, int]:
    if not _DATE_RE.match(s):
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}")
    y, m, d = map(int, s.split("-"))
    return y, m, d


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _print_date(d) -> None:
    print(f"{d}  ({d.calendar} {d.year}-{d.month:02d}-{d.day:02d})")


def cmd_today(argv: list[str]) -> int:
    import ethcal

    p = argparse.ArgumentParser(prog="ethcal today", description="Today's date (UTC) in a calendar")
    p.add_argument("--calendar", default="ethiopian")
    args = p.parse_args(argv)

    _print_date(ethcal.today(calendar=args.calendar))
    return 0


def cmd_convert(argv: list[str]) -> int:
    import ethcal

    p = argparse.ArgumentParser(prog="ethcal convert", description="Convert a date between calendars")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD in the --from calendar")
    p.add_argument("--from", dest="src", default="gregorian")
    p.add_argument("--to", dest="dst", default=None, help="default: the other calendar")
    args = p.parse_args(argv)

    dst = args.dst
    if dst is None:
        dst = "ethiopian" if args.src == "gregorian" else "gregorian"

    d = ethcal.make_date(*args.date, calendar=args.src)
    _print_date(d)
    _print_date(ethcal.convert(d, to=dst))
    return 0


def cmd_jdn(argv: list[str]) -> int:
    import ethcal

    p = argparse.ArgumentParser(prog="ethcal jdn", description="Date <-> Julian Day Number")
    p.add_argument("date", nargs="?", type=_parse_ymd, help="YYYY-MM-DD in --calendar")
    p.add_argument("--calendar", default="gregorian")
    p.add_argument("--from-jdn", type=int, default=None, help="print the date of this JDN instead")
    args = p.parse_args(argv)

    if args.from_jdn is not None:
        _print_date(ethcal.from_jdn(args.from_jdn, calendar=args.calendar))
        return 0
    if args.date is None:
        p.error("give a date or --from-jdn")

    d = ethcal.make_date(*args.date, calendar=args.calendar)
    print(ethcal.to_jdn(d))
    return 0


def cmd_names(argv: list[str]) -> int:
    import ethcal

    p = argparse.ArgumentParser(prog="ethcal names", description="Month and weekday names of a calendar")
    p.add_argument("--calendar", default="ethiopian")
    args = p.parse_args(argv)

    cal = ethcal.get_calendar(args.calendar)
    print("Months:")
    for n in range(1, cal.months_in_year() + 1):
        print(f"  {n:2d}  {cal.month_name(n)}")
    print("Weekdays:")
    for n in range(1, 8):
        print(f"  {n:2d}  {cal.day_name(n)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    from ethcal.core.errors import EthcalError

    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `ethcal YYYY-MM-DD ...` converts from Gregorian
    if argv and _DATE_RE.match(argv[0]):
        argv = ["convert"] + argv

    p = argparse.ArgumentParser(prog="ethcal", description="Ethiopian / Gregorian calendar converter.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("today", help="Today's date in a calendar", add_help=False)
    sub.add_parser("convert", help="Convert a date between calendars", add_help=False)
    sub.add_parser("jdn", help="Date <-> Julian Day Number", add_help=False)
    sub.add_parser("names", help="Month and weekday names", add_help=False)
    sub.add_parser("pretty-month", help="Print a month with paired dates (diagnostics)", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["round-trip"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    # -v is accepted on either side of the subcommand
    if any(a in ("-v", "--verbose") for a in rest):
        args.verbose = True
        rest = [a for a in rest if a not in ("-v", "--verbose")]

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    log.debug("command %s %s", args.cmd, rest)

    commands = {
        "today": cmd_today,
        "convert": cmd_convert,
        "jdn": cmd_jdn,
        "names": cmd_names,
    }

    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "pretty-month":
            return _run_module_main("ethcal.diagnostics.pretty_month", rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "ethcal.diagnostics.round_trip",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except (EthcalError, KeyError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
