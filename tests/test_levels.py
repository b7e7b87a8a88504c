from __future__ import annotations

import pytest

from jsonstate.levels import STATE_OK, STATE_PANIC, Severity, band, band_name


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        (0, "Unknown"),
        (99, "Unknown"),
        (100, "Disabled"),
        (199, "Disabled"),
        (200, "OK"),
        (210, "OK"),
        (300, "Attention"),
        (450, "Warning"),
        (500, "Error"),
        (699, "Fault"),
        (700, "Panic"),
        (50000, "Panic"),
    ],
)
def test_band_name_by_interval(level: int, expected: str) -> None:
    assert band_name(level) == expected


def test_negative_levels_are_unknown() -> None:
    assert band(-1) is Severity.UNKNOWN
    assert band_name(-10_000) == "Unknown"


def test_band_returns_lower_bound_member() -> None:
    assert band(250) is Severity.OK
    assert band(250) == 200
    assert band(STATE_PANIC + 1) is Severity.PANIC


def test_constants_match_enum() -> None:
    assert STATE_OK == Severity.OK == 200
    assert [int(member) for member in Severity] == [0, 100, 200, 300, 400, 500, 600, 700]
    assert Severity.ATTENTION.label == "Attention"
