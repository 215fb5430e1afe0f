"""
Allen's general relations.

A general relation is a set of basic relations. Evaluating a general
relation on two intervals returns the basic relation that causes the
general relation to hold, and there can only be one such basic relation
since the basic relations are mutually exclusive.

General relations are plain data; evaluation is done by :func:`evaluate`.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from allen.intervals.core.exceptions import (
    AmbiguousRelationError,
    ErrorMessages,
    InvalidDataTypeError,
    RelationNotImplementedError,
)
from allen.intervals.core.interval import Interval
from allen.intervals.overlap.detection import holds
from allen.intervals.overlap.types import BASIC_RELATIONS, BasicRelation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneralRelation:
    """A named collection of basic relations"""

    relations: Tuple[BasicRelation, ...]
    name: Optional[str] = None

    def __contains__(self, basic: object) -> bool:
        return basic in self.relations

    def __iter__(self):
        return iter(self.relations)

    def __len__(self) -> int:
        return len(self.relations)

    @property
    def codes(self) -> str:
        return "".join(r.code for r in self.relations)

    def as_set(self) -> frozenset:
        return frozenset(self.relations)


def make_relation(*basic_relations: BasicRelation, name: Optional[str] = None) -> GeneralRelation:
    for basic in basic_relations:
        if not isinstance(basic, BasicRelation):
            raise InvalidDataTypeError(f"Expected a BasicRelation, got {basic!r}")
    return GeneralRelation(tuple(basic_relations), name)


def _validate_intervals(x: Interval, y: Interval) -> None:
    for ival in (x, y):
        if not isinstance(ival, Interval):
            raise InvalidDataTypeError(ErrorMessages.NOT_AN_INTERVAL.format(ival))


def evaluate(relation_: GeneralRelation, x: Interval, y: Interval) -> Optional[BasicRelation]:
    """
    Returns the member of the general relation that holds between x and y,
    or None if no member holds.

    Raises:
        AmbiguousRelationError: if more than one distinct member holds
    """
    _validate_intervals(x, y)
    matches = []
    for basic in relation_.relations:
        if basic not in matches and holds(basic, x, y):
            matches.append(basic)
    if len(matches) > 1:
        raise AmbiguousRelationError(
            ErrorMessages.AMBIGUOUS_RELATION.format([m.name for m in matches], x, y)
        )
    return matches[0] if matches else None


def satisfies(relation_: GeneralRelation, x: Interval, y: Interval) -> bool:
    """Whether the general relation holds between x and y"""
    return evaluate(relation_, x, y) is not None


# All thirteen basic relations, in code-table order
RELATION = make_relation(*BASIC_RELATIONS, name="relation")


def relation(x: Interval, y: Interval) -> Optional[BasicRelation]:
    """
    Determines the basic relation between two intervals.

    All thirteen relations are evaluated; for valid intervals whose
    boundaries are mutually comparable exactly one holds.
    """
    return evaluate(RELATION, x, y)


def code(x: Interval, y: Interval) -> Optional[str]:
    """The single-character code of the basic relation between x and y"""
    basic = relation(x, y)
    return basic.code if basic is not None else None


# Operations on relations
# -----------------------


def complement(relation_: GeneralRelation, name: Optional[str] = None) -> GeneralRelation:
    """
    Return the complement of the general relation. The complement ~r of
    a relation r is the relation consisting of all basic relations not
    in r.
    """
    members = relation_.as_set()
    return GeneralRelation(tuple(r for r in BASIC_RELATIONS if r not in members), name)


def converse(relation_: GeneralRelation, name: Optional[str] = None) -> GeneralRelation:
    """
    Return the converse of the given general relation. The converse !r
    of a relation r is the relation consisting of the converses of all
    basic relations in r.
    """
    return GeneralRelation(tuple(r.converse for r in relation_.relations), name)


def compose(r: GeneralRelation, s: GeneralRelation) -> GeneralRelation:
    """Return the composition of r and s"""
    logger.error("Composition requested for %s and %s", r, s)
    raise RelationNotImplementedError(ErrorMessages.NOT_IMPLEMENTED.format("Composition"))


def intersect(r: GeneralRelation, s: GeneralRelation) -> GeneralRelation:
    """Return the intersection of r with s"""
    logger.error("Intersection requested for %s and %s", r, s)
    raise RelationNotImplementedError(ErrorMessages.NOT_IMPLEMENTED.format("Intersection"))


# Useful named general relations
# ------------------------------

DISJOINT = make_relation(
    BasicRelation.PRECEDES,
    BasicRelation.PRECEDED_BY,
    BasicRelation.MEETS,
    BasicRelation.MET_BY,
    name="disjoint",
)
CONCURRENT = complement(DISJOINT, name="concurrent")

# the only relations allowed between consecutive members of an interval set
ORDERED = make_relation(BasicRelation.PRECEDES, BasicRelation.MEETS, name="ordered")


def is_disjoint(x: Interval, y: Interval) -> bool:
    return satisfies(DISJOINT, x, y)


def is_concurrent(x: Interval, y: Interval) -> bool:
    return satisfies(CONCURRENT, x, y)


def relations_of(codes: Iterable[str], name: Optional[str] = None) -> GeneralRelation:
    """Builds a general relation from single-character codes, e.g. ``"pm"``"""
    return make_relation(*(BasicRelation.from_code(c) for c in codes), name=name)
