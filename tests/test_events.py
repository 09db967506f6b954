# tests/test_events.py

import pytest

import polycal
from polycal.astro import deltat, events
from polycal.astro.lunisolar import lunar_phase_ut, new_moon_ut
from polycal.core.jdn import gregorian_to_jdn, gregorian_ymd


def test_meeus_example_27a_june_solstice():
    """
    Jean Meeus, Astronomical Algorithms (2nd Ed), Example 27.a.
    June solstice 1962: JDE 2437837.39245 (1962 June 21, 21h25m TD).
    """
    t = events.season_moment(1962, "summer-solstice")
    assert deltat.ut_to_tt(t) == pytest.approx(2437837.39245, abs=0.02)
    assert gregorian_ymd(events.season_day(1962, "summer-solstice")) == (1962, 6, 21)

def test_meeus_example_49b_last_quarter():
    """
    Jean Meeus, Astronomical Algorithms (2nd Ed), Example 49.b.
    First last quarter of 2044: k = 544.75, JDE 2467636.49186 (2044 January 21, 23h48m TD).
    """
    t = lunar_phase_ut(544, 3)
    assert deltat.ut_to_tt(t) == pytest.approx(2467636.49186, abs=0.01)

def test_new_moon_is_quarter_zero():
    for k in (-100, 0, 296, 1000):
        assert new_moon_ut(k) == lunar_phase_ut(k, 0)

@pytest.mark.parametrize("name,ymd", [
    # USNO: 2024 Mar 20 03:06, Jun 20 20:51, Sep 22 12:44, Dec 21 09:20 UT
    ("vernal-equinox", (2024, 3, 20)),
    ("summer-solstice", (2024, 6, 20)),
    ("autumnal-equinox", (2024, 9, 22)),
    ("winter-solstice", (2024, 12, 21)),
])
def test_seasons_2024(name, ymd):
    assert events.season_day(2024, name) == gregorian_to_jdn(*ymd)

def test_seasons_order_and_spacing():
    for year in (-3000, 1000, 2024, 4000):
        evs = events.seasons(year)
        assert [e.name for e in evs] == [s[0] for s in events.SEASONS]
        for a, b in zip(evs, evs[1:]):
            assert 85 < b.jd_ut - a.jd_ut < 96
        assert gregorian_ymd(evs[0].jdn)[:2] == (year, 3)

def test_unknown_season():
    with pytest.raises(ValueError):
        events.season_moment(2024, "midsummer")

def test_season_year_range():
    with pytest.raises(polycal.DateRangeError):
        events.seasons(10000)

def test_moon_phases_january_2024():
    """USNO: last quarter Jan 4 03:30, new Jan 11 11:57, first quarter Jan 18 03:52, full Jan 25 17:54 UT."""
    evs = events.moon_phases(gregorian_to_jdn(2024, 1, 1), gregorian_to_jdn(2024, 1, 31))
    assert [(e.name, gregorian_ymd(e.jdn)[2]) for e in evs] == [
        ("last-quarter", 4),
        ("new", 11),
        ("first-quarter", 18),
        ("full", 25),
    ]
    assert all(e.kind == "moon-phase" for e in evs)
    assert [e.label for e in evs][-1] == "Full Moon"

@pytest.mark.parametrize("ymd", [(2024, 2, 24), (2024, 3, 25), (2024, 9, 18), (2024, 12, 15)])
def test_full_moons_2024(ymd):
    jdn = gregorian_to_jdn(*ymd)
    assert [e.name for e in events.moon_phases(jdn, jdn)] == ["full"]

def test_moon_phases_empty_and_ordered():
    jdn = gregorian_to_jdn(2024, 1, 1)
    assert events.moon_phases(jdn, jdn - 1) == []
    evs = events.moon_phases(jdn, jdn + 365)
    assert len(evs) in (49, 50)
    assert all(a.jd_ut < b.jd_ut for a, b in zip(evs, evs[1:]))

@pytest.mark.parametrize("ymd,phase", [
    ((2024, 1, 11), "new"),
    ((2024, 1, 14), "waxing-crescent"),
    ((2024, 1, 18), "first-quarter"),
    ((2024, 1, 21), "waxing-gibbous"),
    ((2024, 1, 25), "full"),
    ((2024, 1, 29), "waning-gibbous"),
    ((2024, 2, 2), "last-quarter"),
    ((2024, 2, 6), "waning-crescent"),
])
def test_moon_phase_names(ymd, phase):
    assert events.moon_phase(gregorian_to_jdn(*ymd)) == phase

def test_public_api():
    d = polycal.parse_date("2024-03-20")
    evs = polycal.astronomical_events(d)
    assert [e.name for e in evs] == ["vernal-equinox"]
    assert polycal.moon_phase(polycal.parse_date("2024-01-25")) == "full"
    assert [e.name for e in polycal.solstices_equinoxes(2024)][0] == "vernal-equinox"
    start, end = polycal.parse_date("2024-01-01"), polycal.parse_date("2024-01-31")
    assert len(polycal.moon_phases(start, end)) == 4
    month = polycal.astronomical_events(start, polycal.parse_date("2024-03-31"))
    assert "vernal-equinox" in [e.name for e in month]
    assert all(a.jd_ut <= b.jd_ut for a, b in zip(month, month[1:]))
