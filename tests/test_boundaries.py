# tests/test_boundaries.py
#
# The day before each epoch is the last day of year 0, and the epoch itself is
# the first day of year 1; both directions are checked for every epoch-counted
# calendar.

import pytest

import polycal
from polycal.engines.epoch_based import CyclicCalendar
from polycal.engines.factory import make_converter
from polycal.engines.specs import ALL_SPECS, alexandrian_leap, islamic_leap, persian_leap
from polycal.epochs import EPOCHS


@pytest.mark.parametrize("cal", sorted(ALL_SPECS, key=lambda c: c.value))
def test_cyclic_epoch_boundaries(cal):
    conv = make_converter(cal)
    assert isinstance(conv, CyclicCalendar)
    epoch = EPOCHS[cal]
    last_month = conv.months_in_year(0)
    last_day = conv.days_in_month(0, last_month)

    assert conv.from_jdn(epoch).ymd() == (1, 1, 1)
    assert conv.from_jdn(epoch - 1).ymd() == (0, last_month, last_day)
    assert conv.to_jdn(1, 1, 1) == epoch
    assert conv.to_jdn(0, last_month, last_day) == epoch - 1
    # first day of year 0 is a whole year before the epoch
    assert conv.from_jdn(epoch - conv.days_in_year(0)).ymd() == (0, 1, 1)
    assert conv.from_jdn(epoch - conv.days_in_year(0) - 1).year == -1

@pytest.mark.parametrize(
    "cal,first,last_of_year_0",
    [
        ("gregorian", (1, 1, 1), (0, 12, 31)),
        ("julian", (1, 1, 1), (0, 12, 31)),
        ("hebrew", (1, 7, 1), (0, 6, 29)),
        ("mayan-tzolkin", (1, 1, 1), (0, 20, 13)),
        ("mayan-longcount", (0, 0, 0), (-1, 19, 7959)),
    ],
)
def test_other_epoch_boundaries(cal, first, last_of_year_0):
    epoch = polycal.epoch_jdn(cal)
    assert polycal.from_jdn(epoch, cal).ymd() == first
    assert polycal.from_jdn(epoch - 1, cal).ymd() == last_of_year_0
    assert polycal.to_jdn(cal, *last_of_year_0) == epoch - 1

def test_backward_walk_exact_span():
    """Day 1 of a negative year sits exactly its backward span before the epoch."""
    conv = make_converter("islamic")
    for year in (0, -1, -29, -30, -31, -9998):
        start = conv.year_start(year)
        assert conv.from_jdn(start).ymd() == (year, 1, 1)
        assert conv.from_jdn(start - 1).year == year - 1
        assert conv.year_start(year + 1) - start == conv.days_in_year(year)

def test_alexandrian_negative_year_leaps():
    """Ethiopian and Coptic leap years keep the y % 4 == 3 rule before year 1."""
    for y in (3, -1, -5, -9):
        assert alexandrian_leap(y)
        assert polycal.days_in_year("ethiopian", y) == 366
        assert polycal.days_in_year("coptic", y) == 366
    for y in (0, -2, -3, -4):
        assert not alexandrian_leap(y)
        assert polycal.days_in_month("coptic", y, 13) == 5
    for y in range(-400, 400):
        assert alexandrian_leap(y) == alexandrian_leap(y - 4)

def test_cycle_rules_are_periodic_through_zero():
    for y in range(-200, 200):
        assert islamic_leap(y) == islamic_leap(y + 30)
        assert persian_leap(y) == persian_leap(y + 33)

def test_parse_rejects_out_of_range():
    assert polycal.parse_date("0000-12-31", "gregorian") is not None
    assert polycal.parse_date("-9999-01-01", "gregorian") is not None
    assert polycal.parse_date("10000-01-01", "gregorian") is None
    assert polycal.parse_date("2023-02-29", "gregorian") is None
    assert polycal.parse_date("1446-12-30", "islamic") is None
    assert polycal.parse_date("1445-12-30", "islamic") is not None
