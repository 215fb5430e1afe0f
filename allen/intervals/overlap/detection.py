from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Dict

from allen.intervals.overlap.types import BasicRelation

if TYPE_CHECKING:
    from allen.intervals.core.interval import Interval
else:
    # For runtime, use Any as a placeholder for Interval
    Interval = Any


class OverlapChecker(ABC):
    """Abstract base class for basic relation checking strategies"""

    def check(self, interval: "Interval", other: "Interval") -> bool:
        """
        Base implementation of check that handles null safety
        before delegating to the specific implementation
        """
        if interval is None or other is None:
            return False

        return self._check_impl(interval, other)

    def __call__(self, interval: "Interval", other: "Interval") -> bool:
        return self.check(interval, other)

    @abstractmethod
    def _check_impl(self, interval: "Interval", other: "Interval") -> bool:
        """Implementation of the specific relation checking strategy"""
        pass

    @staticmethod
    def _safe_compare(comparison_fn: Callable[[], bool]) -> bool:
        """
        Safely executes a comparison function, handling type errors.
        Returns False if the comparison raises a TypeError.
        """
        try:
            return bool(comparison_fn())
        except TypeError:
            # boundaries of unrelated types are never related
            return False


class PrecedesChecker(OverlapChecker):
    """Checks if interval ends before other starts"""

    def _check_impl(self, interval: "Interval", other: "Interval") -> bool:
        return self._safe_compare(lambda: interval.end < other.start)


class MeetsChecker(OverlapChecker):
    """Checks if interval ends exactly where other starts"""

    def _check_impl(self, interval: "Interval", other: "Interval") -> bool:
        return self._safe_compare(lambda: interval.end == other.start)


class OverlapsChecker(OverlapChecker):
    """Checks if interval starts first and ends inside other"""

    def _check_impl(self, interval: "Interval", other: "Interval") -> bool:
        cond1 = self._safe_compare(lambda: interval.start < other.start)
        cond2 = self._safe_compare(lambda: interval.end > other.start)
        cond3 = self._safe_compare(lambda: interval.end < other.end)
        return cond1 and cond2 and cond3


class StartsChecker(OverlapChecker):
    """Checks if interval starts together with other but ends earlier"""

    def _check_impl(self, interval: "Interval", other: "Interval") -> bool:
        cond1 = self._safe_compare(lambda: interval.start == other.start)
        cond2 = self._safe_compare(lambda: interval.end < other.end)
        return cond1 and cond2


class FinishesChecker(OverlapChecker):
    """Checks if interval ends together with other but starts later"""

    def _check_impl(self, interval: "Interval", other: "Interval") -> bool:
        cond1 = self._safe_compare(lambda: interval.start > other.start)
        cond2 = self._safe_compare(lambda: interval.end == other.end)
        return cond1 and cond2


class DuringChecker(OverlapChecker):
    """Checks if interval is completely contained within other"""

    def _check_impl(self, interval: "Interval", other: "Interval") -> bool:
        cond1 = self._safe_compare(lambda: interval.start > other.start)
        cond2 = self._safe_compare(lambda: interval.end < other.end)
        return cond1 and cond2


class EqualsChecker(OverlapChecker):
    """Checks if interval has the same boundaries as other"""

    def _check_impl(self, interval: "Interval", other: "Interval") -> bool:
        cond1 = self._safe_compare(lambda: interval.start == other.start)
        cond2 = self._safe_compare(lambda: interval.end == other.end)
        return cond1 and cond2


class ConverseChecker(OverlapChecker):
    """
    Checks the converse of another relation, by swapping the arguments.

    Whenever "x precedes y" holds, "y preceded by x" holds also.
    """

    def __init__(self, checker: OverlapChecker):
        self.checker = checker

    def _check_impl(self, interval: "Interval", other: "Interval") -> bool:
        return self.checker.check(other, interval)


_precedes = PrecedesChecker()
_meets = MeetsChecker()
_overlaps = OverlapsChecker()
_starts = StartsChecker()
_finishes = FinishesChecker()
_during = DuringChecker()

CHECKERS: Dict[BasicRelation, OverlapChecker] = {
    BasicRelation.PRECEDES: _precedes,
    BasicRelation.MEETS: _meets,
    BasicRelation.OVERLAPS: _overlaps,
    BasicRelation.FINISHED_BY: ConverseChecker(_finishes),
    BasicRelation.CONTAINS: ConverseChecker(_during),
    BasicRelation.STARTS: _starts,
    BasicRelation.EQUALS: EqualsChecker(),
    BasicRelation.STARTED_BY: ConverseChecker(_starts),
    BasicRelation.DURING: _during,
    BasicRelation.FINISHES: _finishes,
    BasicRelation.OVERLAPPED_BY: ConverseChecker(_overlaps),
    BasicRelation.MET_BY: ConverseChecker(_meets),
    BasicRelation.PRECEDED_BY: ConverseChecker(_precedes),
}


def holds(basic: BasicRelation, interval: "Interval", other: "Interval") -> bool:
    """Evaluates a single basic relation between two intervals"""
    return CHECKERS[basic].check(interval, other)
