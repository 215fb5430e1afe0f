"""
Intervals from bounded periods of time.

A spannable value (a day, a month, a year, a point in time, a textual
timestamp, an existing interval) is first resolved into one of the source
variants below, each of which knows the (start, end) bounds it covers.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Tuple, Union

from numpy import floating, integer
from pandas import Period, Timestamp

from allen.intervals.core.boundaries import check_same_locality
from allen.intervals.core.exceptions import ErrorMessages, InvalidDataTypeError
from allen.intervals.core.interval import Interval, make_interval
from allen.intervals.core.types import Instant
from allen.intervals.datetime.utils import Granularity, infer_granularity, parse_timestamp

Bounds = Tuple[Instant, Instant, tuple]


@dataclass(frozen=True)
class PointSource:
    """A single instant; only spans an interval when joined with another value"""

    instant: Instant


@dataclass(frozen=True)
class DaySource:
    """A calendar date, from its midnight to the next midnight"""

    day: date


@dataclass(frozen=True)
class MonthSource:
    year: int
    month: int


@dataclass(frozen=True)
class YearSource:
    year: int


@dataclass(frozen=True)
class PeriodSource:
    """Any pandas Period, from its first instant to the start of the next period"""

    period: Period


@dataclass(frozen=True)
class ZonedSource:
    """A timezone-aware instant"""

    timestamp: Union[datetime, Timestamp]

    def __post_init__(self):
        if self.timestamp.tzinfo is None:
            raise InvalidDataTypeError(f"ZonedSource requires a timezone-aware value, got {self.timestamp!r}")


@dataclass(frozen=True)
class TextSource:
    text: str


@dataclass(frozen=True)
class IntervalSource:
    interval: Interval


@dataclass(frozen=True)
class PairSource:
    """Two spannable values and an optional payload, covered by one interval"""

    first: Any
    second: Any
    payload: tuple = field(default=())


SpanSource = Union[
    PointSource,
    DaySource,
    MonthSource,
    YearSource,
    PeriodSource,
    ZonedSource,
    TextSource,
    IntervalSource,
    PairSource,
]

_SOURCE_TYPES = (
    PointSource,
    DaySource,
    MonthSource,
    YearSource,
    PeriodSource,
    ZonedSource,
    TextSource,
    IntervalSource,
    PairSource,
)


def to_source(value: Any) -> SpanSource:
    """Resolves a raw value into its span source variant"""
    if isinstance(value, _SOURCE_TYPES):
        return value
    elif isinstance(value, Interval):
        return IntervalSource(value)
    elif isinstance(value, (tuple, list)):
        if len(value) < 2:
            raise InvalidDataTypeError(ErrorMessages.UNSUPPORTED_SPAN.format(value, type(value)))
        return PairSource(value[0], value[1], tuple(value[2:]))
    elif isinstance(value, Period):
        return PeriodSource(value)
    # Handle Timestamp first because pandas.Timestamp is a subclass of datetime
    elif isinstance(value, (Timestamp, datetime)):
        if value.tzinfo is not None:
            return ZonedSource(value)
        return PointSource(value)
    elif isinstance(value, date):
        return DaySource(value)
    elif isinstance(value, str):
        return TextSource(value)
    elif isinstance(value, (int, float, integer, floating)) and not isinstance(value, bool):
        return PointSource(value)
    raise InvalidDataTypeError(ErrorMessages.UNSUPPORTED_SPAN.format(value, type(value)))


def _period_bounds(period: Period) -> Bounds:
    return period.start_time, (period + 1).start_time, ()


def _text_source(text: str) -> SpanSource:
    granularity = infer_granularity(text)
    ts = parse_timestamp(text)
    if granularity is Granularity.YEAR:
        return YearSource(ts.year)
    elif granularity is Granularity.MONTH:
        return MonthSource(ts.year, ts.month)
    elif granularity is Granularity.DAY:
        return DaySource(ts.date())
    return to_source(ts)


def bounds(source: SpanSource) -> Bounds:
    """The (start, end, payload) covered by a span source"""
    if isinstance(source, PointSource):
        return source.instant, source.instant, ()
    elif isinstance(source, ZonedSource):
        return source.timestamp, source.timestamp, ()
    elif isinstance(source, DaySource):
        return _period_bounds(Period(source.day, freq="D"))
    elif isinstance(source, MonthSource):
        return _period_bounds(Period(year=source.year, month=source.month, freq="M"))
    elif isinstance(source, YearSource):
        return _period_bounds(Period(year=source.year, freq="Y"))
    elif isinstance(source, PeriodSource):
        return _period_bounds(source.period)
    elif isinstance(source, TextSource):
        return bounds(_text_source(source.text))
    elif isinstance(source, IntervalSource):
        return source.interval.start, source.interval.end, source.interval.payload
    elif isinstance(source, PairSource):
        start, end, _ = _join_bounds(bounds(to_source(source.first)), bounds(to_source(source.second)))
        return start, end, source.payload
    raise InvalidDataTypeError(ErrorMessages.UNSUPPORTED_SPAN.format(source, type(source)))


def _join_bounds(b1: Bounds, b2: Bounds) -> Bounds:
    start1, end1, payload = b1
    start2, end2, _ = b2
    # mixing civil and absolute values is an error before anything is compared
    check_same_locality(start1, start2)
    try:
        return min(start1, start2), max(end1, end2), payload
    except TypeError as e:
        raise InvalidDataTypeError(
            f"Span boundaries must be comparable, got {start1!r} and {start2!r}"
        ) from e


_MISSING = object()


def span(value: Any, other: Any = _MISSING) -> Interval:
    """
    Return the interval covering a bounded period of time, or, given two
    values, the smallest interval covering both.

    The payload of the first value (if it is an interval or a tuple with
    more than two members) is carried over.

    Raises:
        InvalidIntervalError: if the covered period has no duration, as for a single point
        MixedLocalityError: if local and absolute values are mixed
        InvalidDataTypeError: if a value cannot be spanned
    """
    b = bounds(to_source(value))
    if other is not _MISSING:
        b = _join_bounds(b, bounds(to_source(other)))
    start, end, payload = b
    return make_interval(start, end, *payload)


def interval(value: Any, *more: Any) -> Interval:
    """Return the smallest interval covering all the given values"""
    if not more:
        return span(value)
    result = value
    for v in more:
        result = span(result, v)
    return result
