from datetime import date, datetime
from enum import Enum, auto
from typing import Any, Tuple

from numpy import floating, integer
from pandas import Timestamp

from allen.intervals.core.exceptions import ErrorMessages, MixedLocalityError


class Locality(Enum):
    """
    Whether an instant is a civil (wall-clock, calendar) value or an
    absolute point on the time line.
    """

    LOCAL = auto()  # calendar dates and naive date-times
    ABSOLUTE = auto()  # zoned date-times, epoch numbers and opaque instants


def locality_of(value: Any) -> Locality:
    """Classify a single boundary value"""
    # Handle Timestamp first because pandas.Timestamp is a subclass of datetime
    if isinstance(value, Timestamp):
        return Locality.LOCAL if value.tzinfo is None else Locality.ABSOLUTE
    elif isinstance(value, datetime):
        return Locality.LOCAL if value.tzinfo is None else Locality.ABSOLUTE
    elif isinstance(value, date):
        return Locality.LOCAL
    elif isinstance(value, (int, float, integer, floating)):
        return Locality.ABSOLUTE
    # any other totally ordered value is treated as an opaque absolute instant
    return Locality.ABSOLUTE


def is_local(value: Any) -> bool:
    return locality_of(value) is Locality.LOCAL


def check_same_locality(start: Any, end: Any) -> Locality:
    """
    Validates that both boundaries share a locality and returns it.

    Raises:
        MixedLocalityError: if one boundary is local and the other absolute
    """
    start_locality = locality_of(start)
    end_locality = locality_of(end)
    if start_locality is not end_locality:
        raise MixedLocalityError(ErrorMessages.MIXED_LOCALITY.format(start, end))
    return start_locality


def ordered(v1: Any, v2: Any) -> Tuple[Any, Any]:
    """Returns the two values as a (min, max) pair"""
    if v2 < v1:
        return v2, v1
    return v1, v2
