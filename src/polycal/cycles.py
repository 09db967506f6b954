"""
polycal.cycles
--------------
Long-period cycles computed from a JDN or a year: the Chinese sexagenary
cycle, the Mayan Long Count and Calendar Round, the Metonic cycle, the Saros
eclipse cycle and the Hindu yugas.

Every function is pure and total on integer input: positions use floor
arithmetic, so dates before each reference point land in earlier cycles.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal, Optional

from .core.jdn import gregorian_ymd
from .core.types import Calendar
from .engines.chinese import ChineseConverter
from .engines.hebrew import HebrewCalendar
from .engines.mayan import KATUN, TUN, UINAL, split_long_count
from .epochs import MAYAN_EPOCH


# ============================================================
# CHINESE SEXAGENARY CYCLE
# ============================================================

SEXAGENARY_REFERENCE_YEAR = 1984   # 甲子

HEAVENLY_STEMS = ("甲", "乙", "丙", "丁", "戊", "己", "庚", "辛", "壬", "癸")
HEAVENLY_STEMS_PINYIN = ("jiǎ", "yǐ", "bǐng", "dīng", "wù", "jǐ", "gēng", "xīn", "rén", "guǐ")
EARTHLY_BRANCHES = ("子", "丑", "寅", "卯", "辰", "巳", "午", "未", "申", "酉", "戌", "亥")
EARTHLY_BRANCHES_PINYIN = ("zǐ", "chǒu", "yín", "mǎo", "chén", "sì", "wǔ", "wèi", "shēn", "yǒu", "xū", "hài")
ZODIAC_ANIMALS = ("Rat", "Ox", "Tiger", "Rabbit", "Dragon", "Snake", "Horse", "Goat", "Monkey", "Rooster", "Dog", "Pig")
ELEMENTS = ("Wood", "Fire", "Earth", "Metal", "Water")


@dataclass(frozen=True)
class SexagenaryYear:
    stem: str
    stem_index: int        # 0..9
    branch: str
    branch_index: int      # 0..11
    animal: str
    element: str
    yin_yang: Literal["yang", "yin"]
    pinyin: str
    position: int          # 1..60
    cycle_number: int      # 60-year cycles since 1984, negative before

    @property
    def combined(self) -> str:
        return self.stem + self.branch


def sexagenary_year(year: int) -> SexagenaryYear:
    """Stem-branch name of a Chinese year; 1984 is 甲子, position 1."""
    pos = (year - SEXAGENARY_REFERENCE_YEAR) % 60
    s, b = pos % 10, pos % 12
    return SexagenaryYear(
        stem=HEAVENLY_STEMS[s],
        stem_index=s,
        branch=EARTHLY_BRANCHES[b],
        branch_index=b,
        animal=ZODIAC_ANIMALS[b],
        element=ELEMENTS[s // 2],
        yin_yang="yang" if s % 2 == 0 else "yin",
        pinyin=f"{HEAVENLY_STEMS_PINYIN[s]}{EARTHLY_BRANCHES_PINYIN[b]}",
        position=pos + 1,
        cycle_number=(year - SEXAGENARY_REFERENCE_YEAR) // 60,
    )


# ============================================================
# MAYAN LONG COUNT AND CALENDAR ROUND
# ============================================================

CALENDAR_ROUND_DAYS = 18980   # lcm(260, 365), 52 Haab' years


@dataclass(frozen=True)
class LongCount:
    baktun: int
    katun: int
    tun: int
    uinal: int
    kin: int
    days_into_katun: int
    days_into_baktun: int

    @property
    def katun_global(self) -> int:
        return self.baktun * 20 + self.katun

    def __str__(self) -> str:
        return f"{self.baktun}.{self.katun}.{self.tun}.{self.uinal}.{self.kin}"


def long_count(jdn: int) -> LongCount:
    baktun, katun, tun, uinal, kin = split_long_count(jdn - MAYAN_EPOCH)
    into_katun = tun * TUN + uinal * UINAL + kin
    return LongCount(
        baktun=baktun,
        katun=katun,
        tun=tun,
        uinal=uinal,
        kin=kin,
        days_into_katun=into_katun,
        days_into_baktun=katun * KATUN + into_katun,
    )


@dataclass(frozen=True)
class CalendarRound:
    round_number: int
    days_into_round: int     # 0..18979
    years_into_round: int    # 0..51


def calendar_round(jdn: int) -> CalendarRound:
    n, days = divmod(jdn - MAYAN_EPOCH, CALENDAR_ROUND_DAYS)
    return CalendarRound(round_number=n, days_into_round=days, years_into_round=days // 365)


# ============================================================
# METONIC CYCLE
# ============================================================

METONIC_LEAP_POSITIONS = frozenset({3, 6, 8, 11, 14, 17, 19})

# Gregorian year + 3760 is the Hebrew year until Rosh Hashanah, one short after it
HEBREW_YEAR_OFFSET = 3760


@dataclass(frozen=True)
class MetonicPosition:
    position: int       # 1..19
    cycle_number: int
    is_leap_year: bool
    hebrew_year: int


def metonic_cycle(year: int, is_hebrew: bool = True) -> MetonicPosition:
    """
    Position of a year in the 19-year cycle (AM 1 is position 1). Gregorian
    years are shifted by +3760, which is approximate.
    """
    hy = year if is_hebrew else year + HEBREW_YEAR_OFFSET
    pos = (hy - 1) % 19 + 1
    return MetonicPosition(
        position=pos,
        cycle_number=(hy - 1) // 19,
        is_leap_year=pos in METONIC_LEAP_POSITIONS,
        hebrew_year=hy,
    )


# ============================================================
# SAROS
# ============================================================

SAROS_DAYS = 6585.32
SAROS_REFERENCE_JD = 2444239.5
SAROS_REFERENCE_SERIES = 136


@dataclass(frozen=True)
class SarosPosition:
    saros_number: int
    days_into_cycle: float
    fraction: float       # [0, 1)


def saros_cycle(jdn: float) -> SarosPosition:
    elapsed = jdn - SAROS_REFERENCE_JD
    n = math.floor(elapsed / SAROS_DAYS)
    into = elapsed - n * SAROS_DAYS
    return SarosPosition(
        saros_number=SAROS_REFERENCE_SERIES + n,
        days_into_cycle=into,
        fraction=into / SAROS_DAYS,
    )


# ============================================================
# HINDU YUGAS
# ============================================================

KALI_YUGA_START_YEAR = -3101    # 3102 BCE
# Saka year Y begins in Gregorian year Y + 78
SAKA_ERA_OFFSET = 78
SATYA_YUGA_YEARS = 1728000
TRETA_YUGA_YEARS = 1296000
DVAPARA_YUGA_YEARS = 864000
KALI_YUGA_YEARS = 432000
MAHAYUGA_YEARS = 4320000

YugaType = Literal["Satya", "Treta", "Dvapara", "Kali"]

# counted from a Kali Yuga start, ages follow in their traditional cyclic order
_YUGA_SEQUENCE = (
    ("Kali", KALI_YUGA_YEARS, 4),
    ("Satya", SATYA_YUGA_YEARS, 1),
    ("Treta", TRETA_YUGA_YEARS, 2),
    ("Dvapara", DVAPARA_YUGA_YEARS, 3),
)


@dataclass(frozen=True)
class YugaPosition:
    yuga_type: YugaType
    yuga_number: int            # 1 Satya .. 4 Kali
    years_into_yuga: int
    years_into_mahayuga: int
    mahayuga_number: int        # 0 starts with the present Kali Yuga
    is_kali_yuga: bool          # the present Kali Yuga that began in 3102 BCE
    kali_yuga_start_year: int = KALI_YUGA_START_YEAR


def hindu_yuga(year: int) -> YugaPosition:
    """
    Yuga of an astronomical Gregorian year. Mahayugas are counted from the
    start of the present Kali Yuga, so years before -3101 fall in mahayuga -1
    and earlier.
    """
    mahayuga, into = divmod(year - KALI_YUGA_START_YEAR, MAHAYUGA_YEARS)
    rest = into
    for name, length, number in _YUGA_SEQUENCE:
        if rest < length:
            break
        rest -= length
    return YugaPosition(
        yuga_type=name,
        yuga_number=number,
        years_into_yuga=rest,
        years_into_mahayuga=into,
        mahayuga_number=mahayuga,
        is_kali_yuga=(name == "Kali" and mahayuga == 0),
    )


# ============================================================
# PER-CALENDAR SELECTION
# ============================================================

@dataclass(frozen=True)
class MacroCycles:
    saros: SarosPosition
    sexagenary: Optional[SexagenaryYear] = None
    long_count: Optional[LongCount] = None
    calendar_round: Optional[CalendarRound] = None
    metonic: Optional[MetonicPosition] = None
    yuga: Optional[YugaPosition] = None


def macro_cycles(jdn: int, calendar: Calendar | str, year: Optional[int] = None) -> MacroCycles:
    """
    Cycles relevant to `calendar` on day `jdn`. `year` is the year in that
    calendar's numbering when the caller already has it; otherwise it is
    derived from `jdn`. A Saka `year` is counted from the Gregorian year it
    begins in. The Saros position is always included.
    """
    cal = Calendar.parse(calendar)
    sexagenary = long = cround = metonic = yuga = None

    if cal is Calendar.CHINESE:
        y = year if year is not None else ChineseConverter().from_jdn(jdn).year
        sexagenary = sexagenary_year(y)
    elif cal is Calendar.MAYAN_LONGCOUNT:
        long = long_count(jdn)
        cround = calendar_round(jdn)
    elif cal is Calendar.HEBREW:
        y = year if year is not None else HebrewCalendar().from_jdn(jdn).year
        metonic = metonic_cycle(y, is_hebrew=True)
    elif cal is Calendar.INDIAN_SAKA:
        gy = year + SAKA_ERA_OFFSET if year is not None else gregorian_ymd(jdn)[0]
        yuga = hindu_yuga(gy)

    return MacroCycles(
        saros=saros_cycle(jdn),
        sexagenary=sexagenary,
        long_count=long,
        calendar_round=cround,
        metonic=metonic,
        yuga=yuga,
    )
