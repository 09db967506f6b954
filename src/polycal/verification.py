"""
polycal.verification
--------------------
Documented facts every converter and cycle function is checked against.

Three groups of checks:
  * spot checks: a Gregorian/Julian date and the JDN published for it,
  * epochs: the registry value, and that the converter decodes the epoch to
    the first day of its year 1 and encodes it back,
  * macro cycles: published anchor years and days of each cycle.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Tuple

from .core.jdn import gregorian_jdn, gregorian_to_jdn, julian_to_jdn
from .core.types import Calendar
from .cycles import calendar_round, hindu_yuga, long_count, metonic_cycle, sexagenary_year
from .engines.factory import make_converter
from .epochs import CHINESE_REFERENCE_YEAR, EPOCHS

CC = "Calendrical Calculations (Dershowitz & Reingold)"
IMPL = "Implementation constant"
GMT = "GMT correlation (Goodman-Martínez-Thompson)"


@dataclass(frozen=True)
class DocumentedEpoch:
    calendar: Calendar
    jdn: int
    source: str
    description: str


DOCUMENTED_EPOCHS: Tuple[DocumentedEpoch, ...] = (
    DocumentedEpoch(Calendar.GREGORIAN, 1721426, CC, "1 January 1 CE (proleptic Gregorian)"),
    DocumentedEpoch(Calendar.JULIAN, 1721424, CC, "1 January 1 CE (Julian)"),
    DocumentedEpoch(Calendar.ISLAMIC, 1948439, CC, "1 Muharram 1 AH, Thursday 15 July 622 (Julian)"),
    DocumentedEpoch(Calendar.HEBREW, 347997, IMPL, "1 Tishrei 1 AM, approximately October 3761 BCE (Julian)"),
    DocumentedEpoch(Calendar.PERSIAN, 1948318, IMPL, "1 Farvardin 1 SH, 19 March 622 (Gregorian)"),
    DocumentedEpoch(Calendar.CHINESE, 2415051, IMPL, "Chinese new year 1900, 31 January 1900 (Gregorian)"),
    DocumentedEpoch(Calendar.ETHIOPIAN, 1724221, CC, "1 Meskerem 1 EE, 29 August 8 CE (Julian)"),
    DocumentedEpoch(Calendar.COPTIC, 1825030, CC, "1 Tout 1 AM, 29 August 284 CE (Julian)"),
    DocumentedEpoch(Calendar.INDIAN_SAKA, 1749630, IMPL, "1 Chaitra 1 Saka, 22 March 78 CE (Gregorian)"),
    DocumentedEpoch(Calendar.BAHAI, 2394647, IMPL, "1 Bahá 1 BE, Naw-Rúz 21 March 1844 (Gregorian)"),
    DocumentedEpoch(Calendar.THAI_BUDDHIST, 1523099, IMPL, "1 January 1 BE, 543 BCE (proleptic Gregorian)"),
    DocumentedEpoch(Calendar.MAYAN_TZOLKIN, 584283, GMT, "Long Count 0.0.0.0.0, 11 August 3114 BCE (Gregorian)"),
    DocumentedEpoch(Calendar.MAYAN_HAAB, 584283, GMT, "Long Count 0.0.0.0.0, 11 August 3114 BCE (Gregorian)"),
    DocumentedEpoch(Calendar.MAYAN_LONGCOUNT, 584283, GMT, "Long Count 0.0.0.0.0, 11 August 3114 BCE (Gregorian)"),
    DocumentedEpoch(Calendar.CHEROKEE, 1721426, IMPL, "Gregorian-aligned, 1 January 1 CE"),
    DocumentedEpoch(Calendar.IROQUOIS, 1721426, IMPL, "Gregorian-aligned, 1 January 1 CE"),
    DocumentedEpoch(Calendar.AZTEC_XIUHPOHUALLI, 584283, GMT, "Mayan epoch shared by the 365-day count"),
)

# (label, calendar, (y, m, d), JDN, source)
SPOT_CHECKS: Tuple[Tuple[str, Calendar, Tuple[int, int, int], int, str], ...] = (
    ("Gregorian epoch", Calendar.GREGORIAN, (1, 1, 1), 1721426, CC),
    ("Julian epoch", Calendar.JULIAN, (1, 1, 1), 1721424, CC),
    ("Islamic epoch", Calendar.JULIAN, (622, 7, 15), 1948439, CC),
    ("Hebrew epoch", Calendar.JULIAN, (-3760, 10, 6), 347997, IMPL),
    ("Persian epoch", Calendar.GREGORIAN, (622, 3, 19), 1948318, IMPL),
    ("Ethiopian epoch", Calendar.JULIAN, (8, 8, 29), 1724221, CC),
    ("Coptic epoch", Calendar.JULIAN, (284, 8, 29), 1825030, CC),
    ("Saka epoch", Calendar.GREGORIAN, (78, 3, 22), 1749630, IMPL),
    ("Baháʼí epoch", Calendar.GREGORIAN, (1844, 3, 21), 2394647, IMPL),
    ("Mayan creation date", Calendar.GREGORIAN, (-3113, 8, 11), 584283, GMT),
    ("Thai Buddhist epoch", Calendar.GREGORIAN, (-542, 1, 1), 1523099, IMPL),
    ("Chinese new year 1900", Calendar.GREGORIAN, (1900, 1, 31), 2415051, IMPL),
)


@dataclass(frozen=True)
class CheckResult:
    group: str           # "spot", "epoch" or "cycle"
    subject: str         # calendar tag or cycle name
    name: str
    passed: bool
    detail: str = ""


@dataclass
class VerificationReport:
    results: List[CheckResult] = field(default_factory=list)

    @property
    def all_passed(self) -> bool:
        return all(r.passed for r in self.results)

    @property
    def failures(self) -> List[CheckResult]:
        return [r for r in self.results if not r.passed]

    def by_subject(self) -> Dict[str, List[CheckResult]]:
        out: Dict[str, List[CheckResult]] = {}
        for r in self.results:
            out.setdefault(r.subject, []).append(r)
        return out

    def summary(self) -> str:
        n = len(self.results)
        bad = len(self.failures)
        lines = [f"{n - bad}/{n} checks passed"]
        for r in self.failures:
            lines.append(f"  FAIL [{r.group}] {r.subject}: {r.name} ({r.detail})")
        return "\n".join(lines)


def _check(group: str, subject: str, name: str, fn: Callable[[], Tuple[bool, str]]) -> CheckResult:
    """Run one check; a raised library error counts as a failure, not a crash."""
    try:
        ok, detail = fn()
    except (ValueError, KeyError, ArithmeticError) as e:
        ok, detail = False, f"{type(e).__name__}: {e}"
    return CheckResult(group=group, subject=subject, name=name, passed=ok, detail=detail)


def _expect(got, want) -> Tuple[bool, str]:
    return got == want, f"got {got!r}, expected {want!r}"


# ---------------------------------------------------------------------------
# Spot checks and epochs
# ---------------------------------------------------------------------------

def verify_spot_checks() -> List[CheckResult]:
    results = []
    for label, cal, ymd, want, _source in SPOT_CHECKS:
        to_jdn = gregorian_to_jdn if cal is Calendar.GREGORIAN else julian_to_jdn
        results.append(_check("spot", cal.value, label, lambda f=to_jdn, ymd=ymd, want=want: _expect(f(*ymd), want)))
    return results


def _first_day(cal: Calendar) -> Tuple[int, int, int]:
    if cal is Calendar.HEBREW:
        return (1, 7, 1)
    if cal is Calendar.MAYAN_LONGCOUNT:
        return (0, 0, 0)
    if cal is Calendar.CHINESE:
        return (CHINESE_REFERENCE_YEAR, 1, 1)
    return (1, 1, 1)


def verify_epochs() -> List[CheckResult]:
    results = []
    for fact in DOCUMENTED_EPOCHS:
        cal = fact.calendar
        conv = make_converter(cal)
        first = _first_day(cal)
        results.append(_check("epoch", cal.value, "registry value",
                              lambda c=cal, j=fact.jdn: _expect(EPOCHS[c], j)))
        results.append(_check("epoch", cal.value, "epoch decodes to first day",
                              lambda conv=conv, j=fact.jdn, first=first: _expect(conv.from_jdn(j).ymd(), first)))
        results.append(_check("epoch", cal.value, "first day encodes to epoch",
                              lambda conv=conv, j=fact.jdn, first=first: _expect(conv.to_jdn(*first), j)))
    return results


# ---------------------------------------------------------------------------
# Macro cycles
# ---------------------------------------------------------------------------

def verify_macro_cycles() -> List[CheckResult]:
    mayan = EPOCHS[Calendar.MAYAN_LONGCOUNT]
    checks = [
        ("sexagenary", "1984 is 甲子, position 1",
         lambda: _expect((sexagenary_year(1984).combined, sexagenary_year(1984).position), ("甲子", 1))),
        ("sexagenary", "1985 is 乙丑, position 2",
         lambda: _expect((sexagenary_year(1985).combined, sexagenary_year(1985).position), ("乙丑", 2))),
        ("sexagenary", "2024 is 甲辰, position 41",
         lambda: _expect((sexagenary_year(2024).combined, sexagenary_year(2024).position), ("甲辰", 41))),
        ("long-count", "2012-12-21 is 13.0.0.0.0",
         lambda: _expect(str(long_count(gregorian_jdn(2012, 12, 21))), "13.0.0.0.0")),
        ("long-count", "epoch is 0.0.0.0.0",
         lambda: _expect(str(long_count(mayan)), "0.0.0.0.0")),
        ("long-count", "2024 lies in baktun 13",
         lambda: _expect(long_count(gregorian_jdn(2024, 6, 1)).baktun, 13)),
        ("metonic", "AM 1 is position 1",
         lambda: _expect(metonic_cycle(1).position, 1)),
        ("metonic", "AM 3 is a leap year at position 3",
         lambda: _expect((metonic_cycle(3).position, metonic_cycle(3).is_leap_year), (3, True))),
        ("metonic", "AM 19 is a leap year at position 19",
         lambda: _expect((metonic_cycle(19).position, metonic_cycle(19).is_leap_year), (19, True))),
        ("metonic", "AM 20 starts a new cycle",
         lambda: _expect((metonic_cycle(20).position, metonic_cycle(20).cycle_number), (1, 1))),
        ("calendar-round", "epoch starts round 0",
         lambda: _expect((calendar_round(mayan).round_number, calendar_round(mayan).years_into_round), (0, 0))),
        ("calendar-round", "52 years later starts round 1",
         lambda: _expect(calendar_round(gregorian_jdn(-3061, 8, 11)).round_number, 1)),
        ("yuga", "3102 BCE starts the Kali Yuga",
         lambda: _expect((hindu_yuga(-3101).yuga_type, hindu_yuga(-3101).years_into_yuga,
                          hindu_yuga(-3101).mahayuga_number), ("Kali", 0, 0))),
        ("yuga", "2024 is Kali Yuga year 5125",
         lambda: _expect((hindu_yuga(2024).is_kali_yuga, hindu_yuga(2024).years_into_yuga), (True, 5125))),
    ]
    return [_check("cycle", subject, name, fn) for subject, name, fn in checks]


def run_all() -> VerificationReport:
    return VerificationReport(verify_spot_checks() + verify_epochs() + verify_macro_cycles())
