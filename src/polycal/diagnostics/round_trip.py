from __future__ import annotations

import argparse
import random
from typing import List

import polycal
from polycal.core.errors import DateRangeError
from polycal.core.jdn import gregorian_to_jdn


def parse_calendars(s: str) -> List[str]:
    # "hebrew,islamic" -> ["hebrew", "islamic"]; "all" -> every calendar
    if s.strip() == "all":
        return polycal.list_calendars()
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    calendar: str,
    N: int,
    start: int,
    end: int,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    conv = polycal.get_converter(calendar)
    failures = 0

    for _ in range(N):
        jdn = random.randint(start, end)
        try:
            d = conv.from_jdn(jdn)
        except DateRangeError:
            continue
        back = conv.to_jdn(d.year, d.month, d.day)
        if back != jdn:
            failures += 1
            print("\nFAIL")
            print("calendar:", calendar)
            print("jdn:", jdn)
            print("date:", d)
            print("back:", back)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: JDN -> calendar date -> JDN.")
    p.add_argument("--calendars", type=str, default="all", help='Comma-separated calendar list, or "all".')
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--start", type=str, default="-2000-01-01", help="Start date (Gregorian) [-]YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="3000-12-31", help="End date (Gregorian) [-]YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    start_date = polycal.parse_date(args.start)
    end_date = polycal.parse_date(args.end)
    if start_date is None or end_date is None:
        raise SystemExit("--start/--end must be valid [-]YYYY-MM-DD Gregorian dates")
    start = gregorian_to_jdn(*start_date.ymd())
    end = gregorian_to_jdn(*end_date.ymd())
    if end < start:
        raise SystemExit("--end must be >= --start")

    total_fail = 0
    for cal in parse_calendars(args.calendars):
        print(f"Testing {cal} ...")
        total_fail += roundtrip_test(cal, N=args.N, start=start, end=end, seed=args.seed,
                                     max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
