from enum import Enum


class BasicRelation(Enum):
    """
    The thirteen basic relations of Allen's interval algebra.

    Each member's value is the single-character code used for dispatch.
    Exactly one basic relation holds between any two valid intervals.
    """

    PRECEDES = "p"  # X ends before Y starts
    MEETS = "m"  # X ends where Y starts
    OVERLAPS = "o"  # X overlaps start of Y
    FINISHED_BY = "F"  # Y ends at X end, Y starts later
    CONTAINS = "D"  # X completely contains Y
    STARTS = "s"  # X and Y start together, X ends first
    EQUALS = "e"  # X and Y are identical
    STARTED_BY = "S"  # Y starts at X start, Y ends first
    DURING = "d"  # X completely inside Y
    FINISHES = "f"  # X and Y end together, X starts later
    OVERLAPPED_BY = "O"  # Y overlaps start of X
    MET_BY = "M"  # Y ends where X starts
    PRECEDED_BY = "P"  # X starts after Y ends

    @property
    def code(self) -> str:
        return self.value

    @property
    def converse(self) -> "BasicRelation":
        """The relation obtained by swapping the argument order"""
        return _CONVERSES[self]

    @classmethod
    def from_code(cls, code: str) -> "BasicRelation":
        return cls(code)


_CONVERSES = {
    BasicRelation.PRECEDES: BasicRelation.PRECEDED_BY,
    BasicRelation.MEETS: BasicRelation.MET_BY,
    BasicRelation.OVERLAPS: BasicRelation.OVERLAPPED_BY,
    BasicRelation.FINISHED_BY: BasicRelation.FINISHES,
    BasicRelation.CONTAINS: BasicRelation.DURING,
    BasicRelation.STARTS: BasicRelation.STARTED_BY,
    BasicRelation.EQUALS: BasicRelation.EQUALS,
}
_CONVERSES.update({v: k for k, v in list(_CONVERSES.items())})

# the fixed order relations are evaluated and complemented in
BASIC_RELATIONS = tuple(BasicRelation)
