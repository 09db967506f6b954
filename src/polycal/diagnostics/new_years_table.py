from __future__ import annotations

import argparse
from typing import List, Tuple

import polycal
from polycal.core.jdn import jdn_to_gregorian
from polycal.core.types import CalendarDate


DEFAULT_CALENDARS: List[Tuple[str, str]] = [
    ("Chinese", "chinese"),
    ("Hebrew", "hebrew"),
    ("Islamic", "islamic"),
    ("Persian", "persian"),
    ("Ethiopian", "ethiopian"),
]


def mmdd(d: CalendarDate) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def parse_calendars(arg: str) -> List[Tuple[str, str]]:
    """
    Parse the calendar list from the command line.
    Example:
      --calendars "Chinese=chinese,Jewish=hebrew"
    Plain tags are titled automatically:
      --calendars "chinese,hebrew"
    """
    items = [x.strip() for x in arg.split(",") if x.strip()]
    out: List[Tuple[str, str]] = []
    for it in items:
        if "=" in it:
            name, cal = it.split("=", 1)
            out.append((name.strip(), cal.strip()))
        else:
            out.append((it.capitalize(), it))
    return out


def new_years_in(calendar: str, gy: int) -> List[Tuple[CalendarDate, int]]:
    """(Gregorian date, calendar year) of every new year of `calendar` in Gregorian year `gy`."""
    first = polycal.from_jdn(polycal.to_jdn("gregorian", gy, 1, 1), calendar).year
    out = []
    for y in (first, first + 1, first + 2):
        g = jdn_to_gregorian(polycal.new_year_day(calendar, y))
        if g.year == gy:
            out.append((g, y))
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Gregorian dates of new years in several calendars."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--calendars",
        type=str,
        default="",
        help='Comma list like "Chinese=chinese,Hebrew=hebrew" (default: five lunar/solar calendars).',
    )
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    args = p.parse_args(argv)

    calendars = parse_calendars(args.calendars) if args.calendars else DEFAULT_CALENDARS

    def fmt(d: CalendarDate) -> str:
        return mmdd(d) if args.dates == "mmdd" else polycal.format_date(d)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year"] + [name for name, _ in calendars]
    colw = [5] + [max(12, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for gy in range(Y0, Y1 + 1):
        row = [str(gy).ljust(colw[0])]
        for (_, cal), w in zip(calendars, colw[1:]):
            # the Islamic year is shorter than a solar one, so two new years can fall in one year
            cells = [f"{fmt(g)} ({y})" for g, y in new_years_in(cal, gy)]
            row.append(" ".join(cells).ljust(w))
        print("  ".join(row))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
