# tests/test_verification.py

import pytest

import polycal
from polycal import Calendar
from polycal.verification import (
    DOCUMENTED_EPOCHS,
    SPOT_CHECKS,
    CheckResult,
    VerificationReport,
    run_all,
    verify_epochs,
    verify_macro_cycles,
    verify_spot_checks,
)


def test_every_calendar_has_a_documented_epoch():
    assert {fact.calendar for fact in DOCUMENTED_EPOCHS} == set(Calendar)

def test_spot_checks_pass():
    results = verify_spot_checks()
    assert len(results) == len(SPOT_CHECKS)
    assert all(r.passed for r in results), [r for r in results if not r.passed]

def test_epochs_pass():
    results = verify_epochs()
    assert len(results) == 3 * len(DOCUMENTED_EPOCHS)
    assert all(r.passed for r in results), [r for r in results if not r.passed]

def test_macro_cycles_pass():
    results = verify_macro_cycles()
    assert {r.subject for r in results} == {"sexagenary", "long-count", "metonic", "calendar-round", "yuga"}
    assert all(r.passed for r in results), [r for r in results if not r.passed]

def test_run_all():
    report = run_all()
    assert report.all_passed, report.summary()
    assert report.failures == []
    assert set(report.by_subject()) >= {c.value for c in Calendar}

def test_strict_verify_passes():
    report = polycal.verify(strict=True)
    assert report.summary().startswith(f"{len(report.results)}/{len(report.results)}")

def test_single_failure_fails_the_report():
    report = VerificationReport([
        CheckResult("epoch", "gregorian", "ok", True),
        CheckResult("epoch", "islamic", "wrong", False, "got 1, expected 2"),
    ])
    assert not report.all_passed
    assert len(report.failures) == 1
    assert "FAIL [epoch] islamic: wrong (got 1, expected 2)" in report.summary()

def test_strict_raises_on_failure(monkeypatch):
    bad = VerificationReport([CheckResult("spot", "gregorian", "broken", False, "detail")])
    monkeypatch.setattr(polycal.api, "run_all", lambda: bad)
    with pytest.raises(polycal.VerificationError, match="broken"):
        polycal.verify(strict=True)
    assert polycal.verify() is bad
