from datetime import date, datetime, timezone

import pytest
from pandas import Period, Timestamp

from allen.intervals.core.exceptions import (
    InvalidDataTypeError,
    InvalidIntervalError,
    InvalidTimestampError,
    MixedLocalityError,
)
from allen.intervals.core.interval import Interval
from allen.intervals.datetime.span import (
    DaySource,
    IntervalSource,
    MonthSource,
    PairSource,
    PeriodSource,
    PointSource,
    TextSource,
    YearSource,
    ZonedSource,
    bounds,
    interval,
    span,
    to_source,
)


def ts(text):
    return Timestamp(text)


class TestToSource:
    @pytest.mark.parametrize(
        "value, expected_type",
        [
            (date(2024, 3, 1), DaySource),
            (datetime(2024, 3, 1, 10), PointSource),
            (Timestamp("2024-03-01 10:00"), PointSource),
            (datetime(2024, 3, 1, 10, tzinfo=timezone.utc), ZonedSource),
            (Timestamp("2024-03-01 10:00", tz="UTC"), ZonedSource),
            (Period("2024-03", freq="M"), PeriodSource),
            ("2024-03-01", TextSource),
            (42, PointSource),
            (4.2, PointSource),
            (Interval(1, 2), IntervalSource),
            ((1, 2), PairSource),
            ([1, 2, "payload"], PairSource),
        ],
    )
    def test_to_source(self, value, expected_type):
        assert isinstance(to_source(value), expected_type)

    def test_source_passes_through(self):
        source = YearSource(2024)
        assert to_source(source) is source

    @pytest.mark.parametrize("value", [object(), None, True, (1,), {"start": 1}])
    def test_unsupported(self, value):
        with pytest.raises(InvalidDataTypeError, match="Unsupported span value"):
            to_source(value)

    def test_zoned_source_requires_timezone(self):
        with pytest.raises(InvalidDataTypeError, match="timezone-aware"):
            ZonedSource(datetime(2024, 3, 1))


class TestBounds:
    def test_point(self):
        assert bounds(PointSource(3)) == (3, 3, ())

    def test_pair_keeps_payload(self):
        assert bounds(PairSource(1, 4, ("x",))) == (1, 4, ("x",))


class TestSpan:
    def test_day(self):
        assert span(date(2024, 3, 1)) == Interval(ts("2024-03-01"), ts("2024-03-02"))

    def test_day_is_local(self):
        assert span(date(2024, 3, 1)).is_local

    def test_month(self):
        assert span(MonthSource(2024, 12)) == Interval(ts("2024-12-01"), ts("2025-01-01"))

    def test_leap_february(self):
        assert span(MonthSource(2024, 2)) == Interval(ts("2024-02-01"), ts("2024-03-01"))

    def test_year(self):
        assert span(YearSource(2024)) == Interval(ts("2024-01-01"), ts("2025-01-01"))

    def test_period(self):
        assert span(Period("2024Q1", freq="Q")) == Interval(ts("2024-01-01"), ts("2024-04-01"))

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("2024", ("2024-01-01", "2025-01-01")),
            ("2024-03", ("2024-03-01", "2024-04-01")),
            ("2024-03-01", ("2024-03-01", "2024-03-02")),
            ("03/01/2024", ("2024-03-01", "2024-03-02")),
        ],
    )
    def test_text(self, text, expected):
        assert span(text) == Interval(ts(expected[0]), ts(expected[1]))

    def test_text_instants(self):
        result = span("2024-03-01T10:00:00Z", "2024-03-01T12:00:00Z")

        assert result == Interval(ts("2024-03-01T10:00:00Z"), ts("2024-03-01T12:00:00Z"))
        assert not result.is_local

    def test_unparseable_text(self):
        with pytest.raises(InvalidTimestampError, match="Could not parse"):
            span("not a date")

    def test_point_has_no_duration(self):
        with pytest.raises(InvalidIntervalError):
            span(Timestamp("2024-03-01 10:00"))

    def test_two_points(self):
        assert span(3, 1) == Interval(1, 3)

    def test_two_days_covers_both(self, days):
        d1, _, d3, _ = days
        assert span(d1, d3) == Interval(ts("2024-03-01"), ts("2024-03-04"))

    def test_day_and_instant(self):
        result = span(date(2024, 3, 1), datetime(2024, 3, 5, 9))
        assert result == Interval(ts("2024-03-01"), datetime(2024, 3, 5, 9))

    def test_mixed_locality(self):
        with pytest.raises(MixedLocalityError):
            span(date(2024, 3, 1), datetime(2024, 3, 5, tzinfo=timezone.utc))

    def test_tuple_with_payload(self):
        assert span((5, 1, "payload", 7)) == Interval(1, 5, "payload", 7)

    def test_tuple_of_days(self, days):
        d1, d2, _, _ = days
        assert span((d1, d2)) == Interval(ts("2024-03-01"), ts("2024-03-03"))

    def test_interval_keeps_payload(self):
        assert span(Interval(1, 3, "a")) == Interval(1, 3, "a")
        assert span(Interval(1, 3, "a"), 5) == Interval(1, 5, "a")


class TestInterval:
    def test_single_value(self):
        assert interval(YearSource(2024)) == span(YearSource(2024))

    def test_fold_over_values(self):
        assert interval(4, 1, 9) == Interval(1, 9)

    def test_fold_over_days(self, days):
        d1, d2, d3, _ = days
        assert interval(d2, d1, d3) == Interval(ts("2024-03-01"), ts("2024-03-04"))

    def test_single_point(self):
        with pytest.raises(InvalidIntervalError):
            interval(5)
