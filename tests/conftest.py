from datetime import date

import pytest

from allen.intervals.core.interval import Interval


@pytest.fixture
def days():
    """Four consecutive days, D1 < D2 < D3 < D4"""
    return date(2024, 3, 1), date(2024, 3, 2), date(2024, 3, 3), date(2024, 3, 4)


@pytest.fixture
def small_intervals():
    """Every valid integer interval with boundaries in [0, 5]"""
    return [Interval(s, e) for s in range(6) for e in range(s + 1, 6)]
