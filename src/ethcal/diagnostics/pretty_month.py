from __future__ import annotations

import argparse

import ethcal


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def month_grid(calendar: str, other: str, Y: int, M: int) -> list[list[tuple[str, str]]]:
    """Week rows (Monday first) of `calendar`'s month Y-M, each day paired with its `other` MM-DD."""
    ndays = ethcal.days_in_month(Y, M, calendar=calendar)
    first = ethcal.make_date(Y, M, 1, calendar=calendar)

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "") for _ in range(first.weekday - 1)]
    for day in range(1, ndays + 1):
        d = ethcal.make_date(Y, M, day, calendar=calendar)
        o = ethcal.convert(d, to=other)
        wk.append(cell(f"{d.day:2d}", f"{o.month:02d}-{o.day:02d}"))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def month_calendar(calendar: str, other: str, Y: int, M: int) -> None:
    first = ethcal.make_date(Y, M, 1, calendar=calendar)
    last = ethcal.make_date(Y, M, ethcal.days_in_month(Y, M, calendar=calendar), calendar=calendar)
    a = ethcal.convert(first, to=other)
    b = ethcal.convert(last, to=other)
    title = (
        f"{calendar} month  {Y}-{M:02d} {first.month_name}   "
        f"({other} {a.year}-{a.month:02d}-{a.day:02d} .. {b.year}-{b.month:02d}-{b.day:02d})"
    )
    print_grid(title, month_grid(calendar, other, Y, M))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a month of one calendar with the paired dates of the other."
    )
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("--calendar", default="ethiopian", help="gregorian|ethiopian (default: ethiopian)")
    p.add_argument("--other", default=None, help="Calendar for the second row (default: the other one)")
    args = p.parse_args(argv)

    other = args.other
    if other is None:
        other = "gregorian" if args.calendar != "gregorian" else "ethiopian"

    month_calendar(args.calendar, other, args.year, args.month)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
