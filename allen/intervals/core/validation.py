import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from allen.intervals.core.exceptions import ErrorMessages, InvalidDataTypeError, PreconditionViolatedError
from allen.intervals.core.interval import Interval
from allen.intervals.overlap.relations import ORDERED, evaluate

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    is_valid: bool
    message: Optional[str] = None


class IntervalValidator:
    """Validates intervals and interval sets"""

    @staticmethod
    def validate_interval(value: object) -> ValidationResult:
        if not isinstance(value, Interval):
            raise InvalidDataTypeError(ErrorMessages.NOT_AN_INTERVAL.format(value))

        return ValidationResult(is_valid=True)

    @staticmethod
    def check_ordered_disjoint(intervals: Iterable[Interval]) -> ValidationResult:
        """
        Checks that each interval precedes or meets the next one. Does not
        raise on failure; the result carries the reason instead.
        """
        previous = None
        for position, current in enumerate(intervals):
            IntervalValidator.validate_interval(current)
            if previous is not None and evaluate(ORDERED, previous, current) is None:
                return ValidationResult(
                    is_valid=False,
                    message=ErrorMessages.NOT_ORDERED_DISJOINT.format(position, previous, current),
                )
            previous = current

        return ValidationResult(is_valid=True)

    @staticmethod
    def validate_ordered_disjoint(intervals: Iterable[Interval]) -> ValidationResult:
        result = IntervalValidator.check_ordered_disjoint(intervals)
        if not result.is_valid:
            logger.warning(result.message)
            raise PreconditionViolatedError(result.message)
        return result


def is_ordered_disjoint(intervals: Iterable[Interval]) -> bool:
    """
    Are all the intervals in the given collection temporally ordered and
    disjoint? Every interval must precede or meet the one after it.
    """
    return IntervalValidator.check_ordered_disjoint(intervals).is_valid
