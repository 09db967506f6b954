from __future__ import annotations

import argparse
import sys
import re
import importlib
import inspect
from dataclasses import fields


_DATE_RE = re.compile(r"^-?\d{4,}-\d{2}-\d{2}$")


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


def _parse_or_exit(text: str, calendar: str):
    import polycal

    d = polycal.parse_date(text, calendar)
    if d is None:
        raise SystemExit(f"'{text}' is not a valid {calendar} date ([-]YYYY-MM-DD)")
    return d


def _print_row(label: str, value: str) -> None:
    print(f"  {label:<20s} {value}")


def _print_converted(jdn: int, calendar: str, pattern: str | None) -> None:
    import polycal

    try:
        text = polycal.format_date(polycal.from_jdn(jdn, calendar), pattern)
    except polycal.DateRangeError:
        text = "out of range"
    _print_row(calendar, text)


def cmd_convert(argv: list[str]) -> int:
    import polycal

    p = argparse.ArgumentParser(prog="polycal convert", description="Convert a date between calendars.")
    p.add_argument("date", help="[-]YYYY-MM-DD in the source calendar")
    p.add_argument("--from", dest="source", default="gregorian", help="Source calendar (default: gregorian)")
    p.add_argument("--to", dest="target", default="all", help='Target calendar, or "all" (default)')
    p.add_argument("--pattern", default=None, help="Output pattern, e.g. 'D MMMM Y ERA'")
    args = p.parse_args(argv)

    d = _parse_or_exit(args.date, args.source)
    jdn = polycal.to_jdn(d.calendar, d.year, d.month, d.day)
    targets = polycal.list_calendars() if args.target == "all" else [args.target]

    print(f"{args.source} {args.date}  (JDN {jdn})")
    for cal in targets:
        _print_converted(jdn, cal, args.pattern)
    return 0


def cmd_jdn(argv: list[str]) -> int:
    import polycal

    p = argparse.ArgumentParser(prog="polycal jdn", description="Julian Day Number -> dates in every calendar.")
    p.add_argument("jdn", type=int)
    p.add_argument("--calendar", default="all", help='Calendar tag, or "all" (default)')
    p.add_argument("--pattern", default=None)
    args = p.parse_args(argv)

    targets = polycal.list_calendars() if args.calendar == "all" else [args.calendar]
    print(f"JDN {args.jdn}")
    for cal in targets:
        _print_converted(args.jdn, cal, args.pattern)
    return 0


def cmd_cycles(argv: list[str]) -> int:
    import polycal

    p = argparse.ArgumentParser(prog="polycal cycles", description="Macro cycles relevant to a calendar on a date.")
    p.add_argument("date", help="Gregorian [-]YYYY-MM-DD")
    p.add_argument("--calendar", default="gregorian", help="Calendar whose cycles to show")
    args = p.parse_args(argv)

    d = _parse_or_exit(args.date, "gregorian")
    jdn = polycal.to_jdn("gregorian", d.year, d.month, d.day)
    mc = polycal.macro_cycles(jdn, args.calendar)

    print(f"{args.date}  (JDN {jdn})  cycles for {args.calendar}")
    for f in fields(mc):
        v = getattr(mc, f.name)
        if v is not None:
            print(f"  {f.name}: {v}")
    return 0


def cmd_calendars(argv: list[str]) -> int:
    import polycal

    p = argparse.ArgumentParser(prog="polycal calendars", description="List supported calendars.")
    p.parse_args(argv)

    for cal in polycal.list_calendars():
        info = polycal.calendar_info(cal)
        print(f"{cal:<20s} {info.name:<28s} {info.kind:<10s} epoch JDN {info.epoch_jdn}")
    return 0


def cmd_verify(argv: list[str]) -> int:
    import polycal

    p = argparse.ArgumentParser(prog="polycal verify", description="Check converters against documented dates.")
    p.add_argument("--verbose", action="store_true", help="List every check, not just failures")
    args = p.parse_args(argv)

    report = polycal.verify()
    if args.verbose:
        for subject, results in report.by_subject().items():
            print(subject)
            for r in results:
                print(f"  [{'ok' if r.passed else 'FAIL'}] {r.name}")
    print(report.summary())
    return 0 if report.all_passed else 1


def _print_events(events) -> None:
    import polycal

    for e in events:
        d = polycal.from_jdn(e.jdn)
        hh, mm = divmod(int((e.jd_ut + 0.5) % 1.0 * 1440), 60)
        print(f"  {polycal.format_date(d)} {hh:02d}:{mm:02d} UT  {e.label}")


def cmd_astro(argv: list[str]) -> int:
    import polycal
    from polycal.astro import deltat
    from polycal.astro import lunar
    from polycal.astro import solar

    p = argparse.ArgumentParser(prog="polycal astro", description="Apparent solar and lunar longitude at a given JD(UT).")
    p.add_argument("--jd-ut", type=float, default=2451545.0, help="Julian Date in UT (default: 2451545.0)")
    p.add_argument("--seasons", type=int, metavar="YEAR", help="List solstices and equinoxes of a Gregorian year")
    p.add_argument("--moon-phases", nargs=2, metavar=("START", "END"), help="List principal moon phases between two Gregorian dates")
    args = p.parse_args(argv)

    if args.seasons is not None:
        print(f"Solstices and equinoxes {args.seasons}:")
        _print_events(polycal.solstices_equinoxes(args.seasons))
        return 0

    if args.moon_phases:
        start, end = (_parse_or_exit(s, "gregorian") for s in args.moon_phases)
        print(f"Moon phases {args.moon_phases[0]} .. {args.moon_phases[1]}:")
        _print_events(polycal.moon_phases(start, end))
        return 0

    jd_ut = args.jd_ut
    jd_tt = deltat.ut_to_tt(jd_ut)
    sun = solar.solar_longitude(jd_tt)
    moon = lunar.lunar_position(jd_tt)

    print(f"JD_UT = {jd_ut:.6f}")
    print(f"JD_TT = {jd_tt:.6f}  (delta T = {deltat.delta_t_days(jd_ut) * 86400.0:.2f} s)")
    print()
    print("Sun (degrees):")
    print(f"  True Longitude     = {sun.L_true_deg:.6f}")
    print(f"  Apparent Longitude = {sun.L_app_deg:.6f}")
    print("Moon (degrees):")
    print(f"  True Longitude     = {moon.L_true_deg:.6f}")
    print(f"  Apparent Longitude = {moon.L_app_deg:.6f}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `polycal YYYY-MM-DD` converts a Gregorian date to every calendar
    if argv and _DATE_RE.match(argv[0]):
        return cmd_convert(argv)

    p = argparse.ArgumentParser(prog="polycal", description="Multi-calendar date conversion toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("convert", help="Convert a date between calendars")
    sub.add_parser("jdn", help="Julian Day Number -> every calendar")
    sub.add_parser("cycles", help="Macro cycles (sexagenary, Long Count, Metonic, Saros, yugas)")
    sub.add_parser("calendars", help="List supported calendars")
    sub.add_parser("verify", help="Check converters against documented dates (exit 1 on failure)")
    sub.add_parser("astro", help="Solar and lunar longitude, solstices, equinoxes and moon phases")

    # diagnostics
    sub.add_parser("pretty-month", help="Print a month of any calendar with Gregorian dates (diagnostics)")
    sub.add_parser("new-years", help="Print New Year table (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "year-lengths", "new-year-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    commands = {
        "convert": cmd_convert,
        "jdn": cmd_jdn,
        "cycles": cmd_cycles,
        "calendars": cmd_calendars,
        "verify": cmd_verify,
        "astro": cmd_astro,
    }
    if args.cmd in commands:
        return commands[args.cmd](rest)

    if args.cmd == "pretty-month":
        return _run_module_main("polycal.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("polycal.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "polycal.diagnostics.round_trip",
            "year-lengths": "polycal.diagnostics.year_lengths",
            "new-year-scatter": "polycal.diagnostics.new_year_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
