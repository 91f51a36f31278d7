from __future__ import annotations

from school_admin.reports.calculator import mean_rounded, percentage, round_half_up


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(66.666) == 67
    assert round_half_up(0.49) == 0


def test_percentage_bounds():
    assert percentage(0, 0) == 0
    assert percentage(2, 3) == 67
    assert percentage(1, 2) == 50
    assert percentage(5, 5) == 100


def test_mean_rounded():
    assert mean_rounded([]) == 0
    assert mean_rounded([50, 51]) == 51
