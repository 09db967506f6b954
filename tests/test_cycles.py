# tests/test_cycles.py

import pytest

import polycal
from polycal.core.jdn import gregorian_to_jdn
from polycal.cycles import (
    CALENDAR_ROUND_DAYS,
    MAHAYUGA_YEARS,
    SAROS_DAYS,
    SAROS_REFERENCE_JD,
    calendar_round,
    hindu_yuga,
    long_count,
    metonic_cycle,
    saros_cycle,
    sexagenary_year,
)
from polycal.epochs import MAYAN_EPOCH


def test_sexagenary_anchors():
    y = sexagenary_year(1984)
    assert (y.stem, y.branch, y.position) == ("甲", "子", 1)
    assert (y.animal, y.element, y.yin_yang) == ("Rat", "Wood", "yang")
    assert y.cycle_number == 0
    assert sexagenary_year(1985).combined == "乙丑"

    y = sexagenary_year(2024)
    assert y.combined == "甲辰"
    assert y.position == 41
    assert y.animal == "Dragon"
    assert y.pinyin == "jiǎchén"

def test_sexagenary_before_reference():
    y = sexagenary_year(1983)
    assert y.combined == "癸亥"
    assert y.position == 60
    assert y.cycle_number == -1
    assert sexagenary_year(4).combined == "甲子"
    assert sexagenary_year(-56).combined == "甲子"

def test_long_count():
    lc = long_count(gregorian_to_jdn(2012, 12, 21))
    assert (lc.baktun, lc.katun, lc.tun, lc.uinal, lc.kin) == (13, 0, 0, 0, 0)
    assert str(lc) == "13.0.0.0.0"
    assert lc.katun_global == 260

    lc = long_count(gregorian_to_jdn(2024, 6, 1))
    assert lc.baktun == 13
    assert lc.days_into_baktun == gregorian_to_jdn(2024, 6, 1) - gregorian_to_jdn(2012, 12, 21)

def test_calendar_round():
    assert calendar_round(MAYAN_EPOCH).round_number == 0
    cr = calendar_round(MAYAN_EPOCH + CALENDAR_ROUND_DAYS)
    assert (cr.round_number, cr.days_into_round, cr.years_into_round) == (1, 0, 0)
    cr = calendar_round(MAYAN_EPOCH - 1)
    assert (cr.round_number, cr.days_into_round, cr.years_into_round) == (-1, 18979, 51)

def test_metonic():
    m = metonic_cycle(3, is_hebrew=True)
    assert m.is_leap_year and m.position == 3
    assert metonic_cycle(1).position == 1
    assert not metonic_cycle(1).is_leap_year
    assert metonic_cycle(19).is_leap_year
    assert metonic_cycle(20).position == 1
    assert metonic_cycle(0).position == 19
    assert metonic_cycle(0).cycle_number == -1

def test_metonic_from_gregorian_year_is_approximate():
    m = metonic_cycle(2024, is_hebrew=False)
    assert m.hebrew_year == 5784
    assert m.is_leap_year == polycal.is_leap_year("hebrew", 5784)

def test_saros():
    s = saros_cycle(SAROS_REFERENCE_JD)
    assert s.saros_number == 136
    assert s.days_into_cycle == pytest.approx(0.0)
    s = saros_cycle(SAROS_REFERENCE_JD + 1.5 * SAROS_DAYS)
    assert s.saros_number == 137
    assert s.fraction == pytest.approx(0.5)
    s = saros_cycle(SAROS_REFERENCE_JD - 1)
    assert s.saros_number == 135
    assert 0.0 <= s.fraction < 1.0

def test_yuga_anchor():
    y = hindu_yuga(-3101)
    assert (y.yuga_type, y.years_into_yuga, y.mahayuga_number) == ("Kali", 0, 0)
    assert y.is_kali_yuga
    assert y.yuga_number == 4

    y = hindu_yuga(2024)
    assert y.is_kali_yuga
    assert y.years_into_yuga == 5125

def test_yuga_order():
    # after the Kali Yuga the cycle returns to the Satya Yuga
    y = hindu_yuga(-3101 + 432000)
    assert (y.yuga_type, y.yuga_number, y.years_into_yuga) == ("Satya", 1, 0)
    assert not y.is_kali_yuga
    y = hindu_yuga(-3101 + 432000 + 1728000)
    assert y.yuga_type == "Treta"
    y = hindu_yuga(-3101 + MAHAYUGA_YEARS)
    assert (y.yuga_type, y.mahayuga_number) == ("Kali", 1)

def test_yuga_before_kali():
    y = hindu_yuga(-3102)
    assert y.yuga_type == "Dvapara"
    assert y.mahayuga_number == -1
    assert y.years_into_yuga == 864000 - 1
    assert not y.is_kali_yuga

def test_macro_cycles_selection():
    jdn = gregorian_to_jdn(2024, 6, 1)
    assert polycal.macro_cycles(jdn, "gregorian").sexagenary is None

    mc = polycal.macro_cycles(jdn, "mayan-longcount")
    assert mc.long_count.baktun == 13 and mc.calendar_round is not None

    mc = polycal.macro_cycles(jdn, "hebrew")
    assert mc.metonic.hebrew_year == 5784

    mc = polycal.macro_cycles(jdn, "indian-saka")
    assert mc.yuga.years_into_yuga == 5125

    mc = polycal.macro_cycles(jdn, "chinese", year=1984)
    assert mc.sexagenary.position == 1

    for cal in polycal.list_calendars():
        assert polycal.macro_cycles(jdn, cal).saros is not None

def test_macro_cycles_saka_year_argument():
    # 2024-01-15 falls in Saka 1945, which began in Gregorian 2023
    jdn = gregorian_to_jdn(2024, 1, 15)
    assert polycal.from_jdn(jdn, "indian-saka").year == 1945
    assert polycal.macro_cycles(jdn, "indian-saka").yuga.years_into_yuga == 5125
    assert polycal.macro_cycles(jdn, "indian-saka", year=1945).yuga.years_into_yuga == 5124
    assert polycal.macro_cycles(jdn, "indian-saka", year=1946).yuga.years_into_yuga == 5125
