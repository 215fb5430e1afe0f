import re
from enum import Enum, auto

from pandas import NaT, Timestamp

from allen.intervals.core.exceptions import ErrorMessages, InvalidTimestampError


class Granularity(Enum):
    """The calendar unit a textual timestamp denotes"""

    YEAR = auto()
    MONTH = auto()
    DAY = auto()
    INSTANT = auto()


# Patterns are matched against the whole string, first match wins
_GRANULARITY_PATTERNS = [
    (r'\d{4}', Granularity.YEAR),  # "2023"
    (r'\d{4}-\d{2}', Granularity.MONTH),  # "2023-01"
    (r'\d{4}/\d{2}', Granularity.MONTH),  # "2023/01"

    # Date only formats
    (r'\d{4}-\d{2}-\d{2}', Granularity.DAY),
    (r'\d{4}/\d{2}/\d{2}', Granularity.DAY),
    (r'\d{1,2}/\d{1,2}/\d{4}', Granularity.DAY),  # US, MM/DD/YYYY
    (r'\d{2}\.\d{2}\.\d{4}', Granularity.DAY),  # German/European format
    (r'\d{8}', Granularity.DAY),  # "20230101"

    # Month name formats
    (r'[A-Za-z]{3,9} \d{1,2}, \d{4}', Granularity.DAY),  # "Jan 01, 2023"
    (r'\d{1,2} [A-Za-z]{3,9} \d{4}', Granularity.DAY),  # "01 January 2023"
    (r'[A-Za-z]{3,9} \d{4}', Granularity.MONTH),  # "January 2023"
]


def infer_granularity(text: str) -> Granularity:
    """
    Determines whether a textual timestamp denotes a whole year, month or
    day, or a single instant.

    Anything with a time-of-day component (or that matches none of the
    date-only shapes) is an instant.
    """
    stripped = text.strip()
    for pattern, granularity in _GRANULARITY_PATTERNS:
        if re.match(f'^{pattern}$', stripped):
            return granularity
    return Granularity.INSTANT


def parse_timestamp(text: str) -> Timestamp:
    """
    Parses text with pandas, raising InvalidTimestampError if it cannot be
    parsed.
    """
    try:
        ts = Timestamp(text.strip())
    except (ValueError, TypeError, OverflowError) as e:
        raise InvalidTimestampError(ErrorMessages.UNPARSEABLE_TEXT.format(text)) from e
    if ts is NaT:
        raise InvalidTimestampError(ErrorMessages.UNPARSEABLE_TEXT.format(text))
    return ts
