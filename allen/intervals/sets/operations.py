"""
Merge algorithms over interval sets.

Every input is an ordered sequence of mutually disjoint intervals (each
member precedes or meets the next). The algorithms walk the heads of the
inputs, compare them with the basic relation between them, and split or
recombine heads according to the relation code. Inputs that break the
ordering precondition give undefined results; use
:func:`allen.intervals.core.validation.is_ordered_disjoint` to check them.

The functions here are generators: they produce the result lazily and
never mutate their inputs. Calling them again over sequence inputs
restarts the computation from the beginning.
"""

import logging
from heapq import heappop, heappush
from typing import Iterable, Iterator, Optional

from allen.intervals.core.exceptions import ErrorMessages, InvalidDataTypeError
from allen.intervals.core.interval import Interval, join
from allen.intervals.overlap.concurrency import concur_for_code
from allen.intervals.overlap.relations import relation
from allen.intervals.overlap.types import BasicRelation

logger = logging.getLogger(__name__)

IntervalStream = Iterable[Interval]

_SEPARATE = frozenset((BasicRelation.PRECEDES, BasicRelation.PRECEDED_BY))
_ADJACENT = frozenset((BasicRelation.MEETS, BasicRelation.MET_BY))


def _relation(x: Interval, y: Interval) -> BasicRelation:
    basic = relation(x, y)
    if basic is None:
        raise InvalidDataTypeError(ErrorMessages.NO_RELATION.format(x, y))
    return basic


def _code(x: Interval, y: Interval) -> str:
    return _relation(x, y).code


def _push(heap: list, index: int, interval: Interval) -> None:
    try:
        heappush(heap, (interval.start, index, interval))
    except TypeError as e:
        raise InvalidDataTypeError(ErrorMessages.NO_RELATION.format(heap[0][2], interval)) from e


def iter_union(*sets: Optional[IntervalStream], coalesce_adjacent: bool = True) -> Iterator[Interval]:
    """
    Combine multiple collections of intervals into a single ordered
    collection of ordered disjoint intervals.

    The heads of all inputs are kept in a heap ordered by start. The
    earliest interval absorbs each following head it concurs with (or
    meets, if coalesce_adjacent), and is emitted once the next head is
    disjoint from it.
    """
    iterators = [iter(s) for s in sets if s is not None]
    heap = []
    for index, it in enumerate(iterators):
        head = next(it, None)
        if head is not None:
            _push(heap, index, head)
    logger.debug("union over %d sets, %d with members", len(iterators), len(heap))

    current: Optional[Interval] = None
    while heap:
        _, index, head = heappop(heap)
        following = next(iterators[index], None)
        if following is not None:
            _push(heap, index, following)

        if current is None:
            current = head
            continue

        basic = _relation(current, head)
        if basic in _SEPARATE or (basic in _ADJACENT and not coalesce_adjacent):
            yield current
            current = head
        else:
            current = join(current, head)

    if current is not None:
        yield current


def _iter_intersection_pair(s1: IntervalStream, s2: IntervalStream) -> Iterator[Interval]:
    xs, ys = iter(s1), iter(s2)
    x, y = next(xs, None), next(ys, None)

    while x is not None and y is not None:
        rel_code = _code(x, y)

        if rel_code in ("p", "m"):
            x = next(xs, None)
        elif rel_code in ("P", "M"):
            y = next(ys, None)
        elif rel_code in ("S", "D", "O"):
            # x outlasts y, the rest of x is compared with the next y
            yield concur_for_code(rel_code, x, y)
            x = x.update_start(y.end)
            y = next(ys, None)
        elif rel_code == "F":
            yield concur_for_code(rel_code, x, y)
            x, y = next(xs, None), next(ys, None)
        elif rel_code == "o":
            yield concur_for_code(rel_code, x, y)
            y = y.update_start(x.end)
            x = next(xs, None)
        elif rel_code in ("d", "s"):
            yield concur_for_code(rel_code, x, y)
            y = y.update_start(x.end)
            x = next(xs, None)
        elif rel_code in ("e", "f"):
            yield concur_for_code(rel_code, x, y)
            x, y = next(xs, None), next(ys, None)


def iter_intersection(s1: IntervalStream, *sets: IntervalStream) -> Iterator[Interval]:
    """
    Return the intervals of time covered by every one of the input
    interval sets. More than two sets are reduced pairwise from the left.
    """
    result: IntervalStream = s1
    for s in sets:
        result = _iter_intersection_pair(result, s)
    return iter(result)


def _iter_difference_pair(s1: IntervalStream, s2: IntervalStream) -> Iterator[Interval]:
    xs, ys = iter(s1), iter(s2)
    x, y = next(xs, None), next(ys, None)

    while x is not None:
        if y is None:
            yield x
            yield from xs
            return

        rel_code = _code(x, y)

        if rel_code in ("p", "m"):
            yield x
            x = next(xs, None)
        elif rel_code in ("P", "M"):
            y = next(ys, None)
        elif rel_code in ("f", "e"):
            x, y = next(xs, None), next(ys, None)
        elif rel_code in ("s", "d"):
            # y reaches past x and may cover the next x too
            x = next(xs, None)
        elif rel_code in ("S", "O"):
            x = x.update_start(y.end)
            y = next(ys, None)
        elif rel_code == "F":
            yield x.update_end(y.start)
            x, y = next(xs, None), next(ys, None)
        elif rel_code == "o":
            yield x.update_end(y.start)
            x = next(xs, None)
        elif rel_code == "D":
            yield x.update_end(y.start)
            x = x.update_start(y.end)
            y = next(ys, None)


def iter_difference(s1: IntervalStream, *sets: IntervalStream) -> Iterator[Interval]:
    """
    Return the intervals of time in the first set that are not covered by
    any of the remaining sets.
    """
    result: IntervalStream = s1
    for s in sets:
        result = _iter_difference_pair(result, s)
    return iter(result)
