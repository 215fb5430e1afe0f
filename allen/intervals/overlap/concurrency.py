from dataclasses import dataclass
from typing import List, Optional

from allen.intervals.core.interval import Interval
from allen.intervals.overlap.relations import relation


@dataclass(frozen=True)
class Concurrency:
    """A pair of intervals together with the interval they are concurrent over"""

    x: Interval
    y: Interval
    concur: Interval


def concur(x: Interval, y: Interval) -> Optional[Interval]:
    """
    Return the interval of time over which the given intervals are
    concurrent, or None if they are disjoint.

    Intervals derived from x keep the payload of x.
    """
    basic = relation(x, y)
    return concur_for_code(basic.code if basic is not None else None, x, y)


def concur_for_code(rel_code: Optional[str], x: Interval, y: Interval) -> Optional[Interval]:
    """The concurrent interval of x and y, given the code of their relation"""
    if rel_code == "o":
        return x.update_start(y.start)
    if rel_code == "O":
        return x.update_end(y.end)
    if rel_code in ("s", "f", "d", "e"):
        return x
    if rel_code in ("S", "F", "D"):
        return y
    return None


def concurrencies(*intervals: Interval) -> List[Concurrency]:
    """
    Return every pair of the given intervals that coincide, with the
    interval over which they do.
    """
    result = []
    for xi, x in enumerate(intervals):
        for y in intervals[xi + 1:]:
            overlap = concur(x, y)
            if overlap is not None:
                result.append(Concurrency(x, y, overlap))
    return result
