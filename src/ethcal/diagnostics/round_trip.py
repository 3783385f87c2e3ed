from __future__ import annotations

import argparse
import logging
import random
from datetime import date
from typing import List

import ethcal

log = logging.getLogger(__name__)


def parse_date(s: str) -> date:
    try:
        y, m, d = s.split("-")
        return date(int(y), int(m), int(d))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}") from e


def parse_calendars(s: str) -> List[str]:
    # "gregorian,ethiopian" -> ["gregorian", "ethiopian"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    calendar: str,
    N: int,
    start: date,
    end: date,
    seed: int,
    *,
    max_failures: int,
) -> int:
    """
    For random JDNs in [start, end]:
      jdn -> date -> jdn must be the identity,
      date -> gregorian -> date must give back the same date,
      the next day must have a strictly larger date label.
    """
    random.seed(seed)
    failures = 0
    j0 = ethcal.to_jdn(ethcal.from_pydate(start))
    j1 = ethcal.to_jdn(ethcal.from_pydate(end))
    log.debug("round-trip %s over JDN %d..%d (N=%d, seed=%d)", calendar, j0, j1, N, seed)

    for _ in range(N):
        jdn = random.randint(j0, j1)
        d0 = ethcal.from_jdn(jdn, calendar=calendar)

        back = ethcal.to_jdn(d0)
        if back != jdn:
            failures += 1
            print("\nFAIL (jdn)")
            print("calendar:", calendar)
            print("jdn:", jdn)
            print("date:", d0)
            print("back:", back)
            if failures >= max_failures:
                return failures

        via = ethcal.convert(ethcal.convert(d0, to="gregorian"), to=calendar)
        if via != d0:
            failures += 1
            print("\nFAIL (via gregorian)")
            print("calendar:", calendar)
            print("date:", d0)
            print("via:", via)
            if failures >= max_failures:
                return failures

        d1 = ethcal.from_jdn(jdn + 1, calendar=calendar)
        if not d0 < d1:
            failures += 1
            print("\nFAIL (order)")
            print("calendar:", calendar)
            print("date:", d0, d0.ymd)
            print("next:", d1, d1.ymd)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: jdn -> date -> jdn.")
    p.add_argument("--calendars", type=str, default="gregorian,ethiopian",
                   help="Comma-separated calendar list.")
    p.add_argument("-n", "--N", dest="N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--start", type=parse_date, default="1600-01-01", help="Start date YYYY-MM-DD (Gregorian).")
    p.add_argument("--end", type=parse_date, default="2400-12-31", help="End date YYYY-MM-DD (Gregorian).")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    calendars = parse_calendars(args.calendars)
    start = args.start
    end = args.end

    if end < start:
        raise SystemExit("--end must be >= --start")

    total_fail = 0
    for cal in calendars:
        print(f"Testing {cal} ...")
        f = roundtrip_test(cal, N=args.N, start=start, end=end, seed=args.seed, max_failures=args.max_failures)
        total_fail += f

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
