# tests/test_formatting.py

import pytest

import polycal
from polycal import CalendarDate, Calendar
from polycal.formatting import format_iso, parse_ymd


def test_canonical_form():
    assert format_iso(2024, 2, 10) == "2024-02-10"
    assert format_iso(0, 1, 1) == "0000-01-01"
    assert format_iso(-1, 12, 31) == "-0001-12-31"
    assert format_iso(-9999, 1, 1) == "-9999-01-01"

@pytest.mark.parametrize("text", ["2024-02-10", "0000-01-01", "-0001-12-31", "-9999-01-01", "9999-12-31"])
def test_parse_canonical(text):
    d = polycal.parse_date(text)
    assert d is not None
    assert polycal.format_date(d) == text

@pytest.mark.parametrize("text", ["", "2024-2-10", "24-02-10", "2024/02/10", "2024-02-10T00:00", "abcd-ef-gh", "2024-02-30"])
def test_parse_rejects(text):
    assert polycal.parse_date(text) is None

def test_parse_ymd_is_strict():
    assert parse_ymd("2024-02-10") == (2024, 2, 10)
    assert parse_ymd(" 2024-02-10 ") is None
    assert parse_ymd("2024-02-10\n") is None
    # Arabic-Indic digits
    assert parse_ymd("\u0662\u0660\u0662\u0664-\u0660\u0661-\u0660\u0661") is None
    assert parse_ymd(None) is None

def test_patterns():
    d = CalendarDate(Calendar.GREGORIAN, 2024, 3, 5, "CE")
    assert polycal.format_date(d, "D MMMM Y ERA") == "5 March 2024 CE"
    assert polycal.format_date(d, "EEEE, MMM DD, YY") == "Tuesday, Mar 05, 24"
    assert polycal.format_date(d, "E M/D") == "T 3/5"

def test_bce_display():
    d = polycal.from_jdn(polycal.to_jdn("gregorian", 0, 6, 1))
    assert polycal.format_date(d, "Y ERA") == "1 BCE"
    d = polycal.from_jdn(polycal.to_jdn("gregorian", -43, 3, 15))
    assert polycal.format_date(d, "D MMMM Y ERA") == "15 March 44 BCE"
    assert polycal.format_date(d, "YYYY") == "-0043"

def test_year_tokens():
    d = CalendarDate(Calendar.GREGORIAN, 5, 3, 5, "CE")
    assert polycal.format_date(d, "YYYY|YY|Y") == "0005|05|5"
    d = CalendarDate(Calendar.GREGORIAN, 0, 3, 5, "BCE")
    assert polycal.format_date(d, "YYYY|Y ERA") == "0000|1 BCE"

@pytest.mark.parametrize("calendar,ymd", [
    ("gregorian", (-5, 1, 1)),
    ("gregorian", (0, 2, 29)),
    ("julian", (-43, 3, 15)),
    ("islamic", (-100, 12, 29)),
    ("hebrew", (3, 13, 29)),
    ("ethiopian", (-1, 13, 6)),
    ("mayan-longcount", (-1, 19, 7959)),
    ("mayan-longcount", (13, 0, 0)),
    ("mayan-tzolkin", (-3, 20, 13)),
    ("chinese", (2023, 14, 1)),
])
def test_default_pattern_is_canonical(calendar, ymd):
    d = polycal.from_jdn(polycal.to_jdn(calendar, *ymd), calendar)
    text = polycal.format_date(d, "YYYY-MM-DD")
    assert text == polycal.format_date(d)
    assert polycal.parse_date(text, calendar) == d
    if ymd[0] < 0:
        assert text.startswith("-")

def test_other_calendar_names():
    d = polycal.from_jdn(polycal.to_jdn("islamic", 1446, 9, 1), "islamic")
    assert polycal.format_date(d, "D MMMM YYYY ERA") == "1 Ramadan 1446 AH"
    d = polycal.from_jdn(polycal.to_jdn("hebrew", 5784, 12, 14), "hebrew")
    assert polycal.format_date(d, "D MMMM YYYY") == "14 Adar I 5784"
    d = polycal.from_jdn(polycal.to_jdn("chinese", 2023, 14, 1), "chinese")
    assert polycal.format_date(d, "MMMM") == "闰二"

def test_format_rejects_invalid_date():
    with pytest.raises(polycal.DateRangeError):
        polycal.format_date(CalendarDate(Calendar.GREGORIAN, 2023, 2, 29))

def test_unknown_tokens_are_literal():
    d = CalendarDate(Calendar.GREGORIAN, 2024, 3, 5, "CE")
    assert polycal.format_date(d, "[x] DD") == "[x] 05"
