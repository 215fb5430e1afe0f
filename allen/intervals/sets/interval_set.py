import logging
from collections.abc import Sequence
from typing import Iterable, Iterator, List, Optional, Union, overload

from allen.config import IntervalSetConfig, get_default_config
from allen.intervals.core.interval import Interval
from allen.intervals.core.validation import IntervalValidator, is_ordered_disjoint
from allen.intervals.sets.operations import iter_difference, iter_intersection, iter_union

logger = logging.getLogger(__name__)


class IntervalSet(Sequence):
    """
    An immutable, temporally ordered sequence of mutually disjoint intervals.

    Each member precedes or meets the one after it. Sets built by
    :func:`union`, :func:`intersection` and :func:`difference` hold this
    invariant; sets wrapped directly from a sequence are only checked when
    ``validate=True`` (or via :meth:`from_intervals`).
    """

    __slots__ = ("_intervals",)

    @classmethod
    def from_intervals(cls, intervals: Iterable[Interval]) -> "IntervalSet":
        """
        Wraps an already ordered, disjoint sequence of intervals.

        Raises:
            PreconditionViolatedError: if the intervals are not ordered and disjoint
        """
        return cls(intervals, validate=True)

    def __init__(self, intervals: Iterable[Interval] = (), validate: bool = False):
        members = tuple(intervals)
        for member in members:
            IntervalValidator.validate_interval(member)
        if validate:
            IntervalValidator.validate_ordered_disjoint(members)
        self._intervals = members

    @property
    def intervals(self) -> tuple:
        return self._intervals

    def is_ordered_disjoint(self) -> bool:
        return is_ordered_disjoint(self._intervals)

    # Sequence protocol
    # -----------------

    @overload
    def __getitem__(self, index: int) -> Interval: ...

    @overload
    def __getitem__(self, index: slice) -> "IntervalSet": ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Interval, "IntervalSet"]:
        if isinstance(index, slice):
            return IntervalSet(self._intervals[index])
        return self._intervals[index]

    def __len__(self) -> int:
        return len(self._intervals)

    def __iter__(self) -> Iterator[Interval]:
        return iter(self._intervals)

    def __eq__(self, other: object) -> bool:
        """
        Compares members in order. A set also equals a list or tuple of the
        same intervals; it hashes like the tuple, so it can stand in for
        that tuple as a dict key, while an equal list stays unhashable.
        """
        if isinstance(other, IntervalSet):
            return self._intervals == other._intervals
        if isinstance(other, (list, tuple)):
            return list(self._intervals) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._intervals)

    def __repr__(self) -> str:
        return f"IntervalSet({list(self._intervals)!r})"

    # Set operations
    # --------------

    def union(self, *others: Iterable[Interval], config: Optional[IntervalSetConfig] = None) -> "IntervalSet":
        return union(self, *others, config=config)

    def intersection(
        self, *others: Iterable[Interval], config: Optional[IntervalSetConfig] = None
    ) -> "IntervalSet":
        return intersection(self, *others, config=config)

    def difference(
        self, *others: Iterable[Interval], config: Optional[IntervalSetConfig] = None
    ) -> "IntervalSet":
        return difference(self, *others, config=config)

    def conj(self, interval: Interval) -> "IntervalSet":
        return conj(self, interval)

    def disj(self, interval: Interval) -> "IntervalSet":
        return disj(self, interval)

    def __or__(self, other: Iterable[Interval]) -> "IntervalSet":
        return union(self, other)

    def __and__(self, other: Iterable[Interval]) -> "IntervalSet":
        return intersection(self, other)

    def __sub__(self, other: Iterable[Interval]) -> "IntervalSet":
        return difference(self, other)


def _prepare(sets: Iterable[Optional[Iterable[Interval]]], config: IntervalSetConfig) -> List[tuple]:
    """Materializes the inputs so they can be validated and then walked"""
    prepared = [tuple(s) for s in sets if s is not None]
    if config.validate_inputs:
        for s in prepared:
            IntervalValidator.validate_ordered_disjoint(s)
    return prepared


def union(*sets: Optional[Iterable[Interval]], config: Optional[IntervalSetConfig] = None) -> IntervalSet:
    """
    Combine multiple collections of intervals into a single interval set.
    Concurrent intervals are joined; meeting intervals are joined too
    unless the configuration says otherwise.
    """
    config = config or get_default_config()
    prepared = _prepare(sets, config)
    result = IntervalSet(iter_union(*prepared, coalesce_adjacent=config.coalesce_adjacent))
    logger.debug("union of %d sets produced %d intervals", len(prepared), len(result))
    return result


def intersection(
    s1: Iterable[Interval], *sets: Iterable[Interval], config: Optional[IntervalSetConfig] = None
) -> IntervalSet:
    """Return an interval set that is the intersection of the input interval sets"""
    config = config or get_default_config()
    prepared = _prepare((s1, *sets), config)
    result = IntervalSet(iter_intersection(*prepared))
    logger.debug("intersection of %d sets produced %d intervals", len(prepared), len(result))
    return result


def difference(
    s1: Iterable[Interval], *sets: Iterable[Interval], config: Optional[IntervalSetConfig] = None
) -> IntervalSet:
    """
    Return an interval set that is the first set without the time covered
    by the remaining sets.
    """
    config = config or get_default_config()
    prepared = _prepare((s1, *sets), config)
    result = IntervalSet(iter_difference(*prepared))
    logger.debug("difference of %d sets produced %d intervals", len(prepared), len(result))
    return result


def conj(s: Iterable[Interval], interval: Interval) -> IntervalSet:
    """Adds the time of a single interval to the set"""
    return union(s, [interval])


def disj(s: Iterable[Interval], interval: Interval) -> IntervalSet:
    """Removes the time of a single interval from the set"""
    return difference(s, [interval])
