from typing import Any, Iterator, Tuple

from allen.intervals.core.boundaries import Locality, check_same_locality, ordered
from allen.intervals.core.exceptions import ErrorMessages, InvalidDataTypeError, InvalidIntervalError
from allen.intervals.core.types import Instant, Payload


class Interval:
    """
    Represents a period of time between two instants, with start strictly before end.

    An Interval is the atomic unit of the algebra, containing:
    - Time boundaries (start and end instants of the same locality)
    - An optional payload (application data carried alongside the boundaries)

    Intervals are immutable values. Two intervals are equal when their
    boundaries and payloads are equal. Unpacking an interval yields its
    boundaries followed by its payload, so ``start, end = Interval(a, b)``
    works as for a plain pair.
    """

    __slots__ = ("_start", "_end", "_payload", "_locality")

    @classmethod
    def create(cls, v1: Instant, v2: Instant, *payload: Any) -> "Interval":
        """
        Creates a new Interval from unordered boundaries.

        This is the preferred way to construct an Interval, as it orders the
        boundaries before validating them.
        """
        # local and absolute values do not compare, check before ordering
        check_same_locality(v1, v2)
        try:
            start, end = ordered(v1, v2)
        except TypeError as e:
            raise InvalidDataTypeError(
                f"Interval boundaries must be comparable, got {v1!r} and {v2!r}"
            ) from e
        return cls(start, end, *payload)

    def __init__(self, start: Instant, end: Instant, *payload: Any):
        """
        Initialize an interval from ordered boundaries.

        Args:
            start: the first instant of the interval
            end: the instant the interval ends at, strictly after start
            payload: optional trailing data carried by the interval

        Raises:
            MixedLocalityError: if start and end are not of the same locality
            InvalidIntervalError: if start does not strictly precede end
        """
        locality = check_same_locality(start, end)
        self._validate_duration(start, end)

        object.__setattr__(self, "_locality", locality)
        object.__setattr__(self, "_start", start)
        object.__setattr__(self, "_end", end)
        object.__setattr__(self, "_payload", tuple(payload))

    # Validation Methods
    # -----------------

    @staticmethod
    def _validate_duration(start: Instant, end: Instant) -> None:
        """Validates that the interval is not a point in time, nor inverted"""
        try:
            valid = start < end
        except TypeError as e:
            raise InvalidDataTypeError(
                f"Interval boundaries must be comparable, got {start!r} and {end!r}"
            ) from e
        if not valid:
            raise InvalidIntervalError(ErrorMessages.ZERO_DURATION.format(start, end))

    # Boundaries
    # ----------

    @property
    def start(self) -> Instant:
        return self._start

    @property
    def end(self) -> Instant:
        return self._end

    @property
    def boundaries(self) -> Tuple[Instant, Instant]:
        """Returns the start and end instants as a pair"""
        return self._start, self._end

    @property
    def payload(self) -> Payload:
        return self._payload

    @property
    def locality(self) -> Locality:
        return self._locality

    @property
    def is_local(self) -> bool:
        return self._locality is Locality.LOCAL

    # Time Operations
    # --------------

    def update_start(self, new_start: Instant) -> "Interval":
        """Creates a new interval with updated start, keeping the payload"""
        return Interval(new_start, self._end, *self._payload)

    def update_end(self, new_end: Instant) -> "Interval":
        """Creates a new interval with updated end, keeping the payload"""
        return Interval(self._start, new_end, *self._payload)

    def with_payload(self, *payload: Any) -> "Interval":
        return Interval(self._start, self._end, *payload)

    def duration(self) -> Any:
        return self._end - self._start

    # Value semantics
    # ---------------

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __iter__(self) -> Iterator[Any]:
        yield self._start
        yield self._end
        yield from self._payload

    def __len__(self) -> int:
        return 2 + len(self._payload)

    def __getitem__(self, index):
        return tuple(self)[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Interval):
            return (
                self._start == other._start
                and self._end == other._end
                and self._payload == other._payload
            )
        if isinstance(other, tuple):
            return tuple(self) == other
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __reduce__(self):
        return Interval, tuple(self)

    def __repr__(self) -> str:
        extra = "".join(f", {p!r}" for p in self._payload)
        return f"Interval({self._start!r}, {self._end!r}{extra})"


def make_interval(v1: Instant, v2: Instant, *payload: Any) -> Interval:
    """
    Make an interval from unordered boundaries. Boundaries must both be
    local, or both be absolute, and must not be equal.
    """
    return Interval.create(v1, v2, *payload)


def join(x: Interval, y: Interval) -> Interval:
    """
    Returns the smallest interval covering both x and y. The payload of x
    is carried over.
    """
    return Interval(min(x.start, y.start), max(x.end, y.end), *x.payload)


def duration(interval: Interval) -> Any:
    """Returns the length of the interval, as end minus start"""
    return interval.duration()
