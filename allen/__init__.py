from allen.config import IntervalSetConfig
from allen.intervals.core.exceptions import (
    AmbiguousRelationError,
    IntervalAlgebraError,
    IntervalValidationError,
    InvalidDataTypeError,
    InvalidIntervalError,
    InvalidTimestampError,
    MixedLocalityError,
    PreconditionViolatedError,
    RelationNotImplementedError,
)
from allen.intervals.core.interval import Interval, duration, join, make_interval
from allen.intervals.core.validation import is_ordered_disjoint
from allen.intervals.datetime.span import interval, span
from allen.intervals.overlap.concurrency import Concurrency, concur, concurrencies
from allen.intervals.overlap.relations import (
    CONCURRENT,
    DISJOINT,
    RELATION,
    GeneralRelation,
    complement,
    compose,
    converse,
    evaluate,
    intersect,
    is_concurrent,
    is_disjoint,
    make_relation,
    relation,
)
from allen.intervals.overlap.types import BasicRelation
from allen.intervals.sets.interval_set import IntervalSet, conj, difference, disj, intersection, union
from allen.intervals.sets.operations import iter_difference, iter_intersection, iter_union
