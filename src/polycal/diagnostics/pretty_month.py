from __future__ import annotations

import argparse

import polycal
from polycal.core.jdn import jdn_to_gregorian


def dow_header() -> str:
    return "Su     Mo     Tu     We     Th     Fr     Sa"


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


def month_calendar(calendar: str, year: int, month: int) -> None:
    """Print one month of `calendar` with the Gregorian date under each day."""
    conv = polycal.get_converter(calendar)
    n = conv.days_in_month(year, month)
    first = conv.to_jdn(year, month, 1)

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    for _ in range(polycal.day_of_week(first)):
        wk.append(cell("", ""))
    for i in range(n):
        g = jdn_to_gregorian(first + i)
        wk.append(cell(f"{i + 1:2d}", f"{g.month:02d}-{g.day:02d}"))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    name = polycal.month_name(calendar, month, year=year)
    g0 = jdn_to_gregorian(first)
    g1 = jdn_to_gregorian(first + n - 1)
    title = (f"{conv.info.name}  {year}  month {month} ({name})   "
             f"({polycal.format_date(g0)} .. {polycal.format_date(g1)})")
    print_grid(title, weeks)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a month of any calendar as a week grid with paired Gregorian dates."
    )
    p.add_argument("--calendar", default="hebrew", help="Calendar tag (default: hebrew)")
    p.add_argument("--month", nargs=2, type=int, metavar=("Y", "M"),
                   help="Month to print: Y M (e.g. 5785 7)")
    args = p.parse_args(argv)

    if not args.month:
        # sensible default demo
        today = polycal.from_jdn(polycal.to_jdn("gregorian", 2025, 1, 1), args.calendar)
        month_calendar(args.calendar, today.year, today.month)
        return 0

    Y, M = args.month
    month_calendar(args.calendar, Y, M)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
