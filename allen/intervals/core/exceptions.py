class IntervalAlgebraError(Exception):
    """Base exception for all interval algebra errors"""
    pass


class IntervalValidationError(IntervalAlgebraError):
    """Base exception for interval validation errors"""
    pass


class InvalidIntervalError(IntervalValidationError):
    """Raised when an interval would have zero or negative duration"""
    pass


class MixedLocalityError(IntervalValidationError):
    """Raised when one boundary is a local (civil) value and the other is absolute"""
    pass


class InvalidDataTypeError(IntervalValidationError):
    """Raised when data is not of expected type"""
    pass


class InvalidTimestampError(IntervalValidationError):
    """Raised when timestamps are invalid"""
    pass


class PreconditionViolatedError(IntervalValidationError):
    """Raised when an interval set is not temporally ordered and disjoint"""
    pass


class AmbiguousRelationError(IntervalAlgebraError):
    """Raised when more than one basic relation holds between two intervals"""
    pass


class RelationNotImplementedError(IntervalAlgebraError, NotImplementedError):
    """Raised for relation operations that are not supported"""
    pass


class ErrorMessages:
    """Centralized error message definitions for consistent error handling"""
    ZERO_DURATION = "Interval boundaries must differ, got {} and {}. Point-in-Time Intervals are not supported."
    MIXED_LOCALITY = "Interval boundaries must both be local or both be absolute, got {!r} and {!r}"
    UNSUPPORTED_SPAN = "Unsupported span value: {!r} of type {}"
    UNPARSEABLE_TEXT = "Could not parse timestamp from text: {!r}"
    NOT_AN_INTERVAL = "Expected an Interval, got {!r}"
    NOT_ORDERED_DISJOINT = "Interval set is not ordered and disjoint at position {}: {!r} then {!r}"
    AMBIGUOUS_RELATION = "Basic relations {} all hold between {!r} and {!r}"
    NO_RELATION = "No basic relation holds between {!r} and {!r}"
    NOT_IMPLEMENTED = "{} of general relations is not yet implemented"
