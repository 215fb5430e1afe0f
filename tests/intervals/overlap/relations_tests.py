import pytest

from allen.intervals.core.exceptions import (
    AmbiguousRelationError,
    InvalidDataTypeError,
    RelationNotImplementedError,
)
from allen.intervals.core.interval import Interval
from allen.intervals.overlap.relations import (
    CONCURRENT,
    DISJOINT,
    ORDERED,
    RELATION,
    GeneralRelation,
    code,
    complement,
    compose,
    converse,
    evaluate,
    intersect,
    is_concurrent,
    is_disjoint,
    make_relation,
    relation,
    relations_of,
    satisfies,
)
from allen.intervals.overlap.types import BasicRelation


# A value that is equal to, less than and greater than everything
class Chaotic:
    def __lt__(self, other):
        return True

    def __gt__(self, other):
        return True

    def __eq__(self, other):
        return True

    def __hash__(self):
        return 0


class TestRelation:
    @pytest.mark.parametrize(
        "x, y, expected",
        [
            ((1, 2), (3, 4), BasicRelation.PRECEDES),
            ((1, 2), (2, 3), BasicRelation.MEETS),
            ((1, 3), (2, 4), BasicRelation.OVERLAPS),
            ((1, 4), (2, 4), BasicRelation.FINISHED_BY),
            ((1, 4), (2, 3), BasicRelation.CONTAINS),
            ((1, 2), (1, 3), BasicRelation.STARTS),
            ((1, 2), (1, 2), BasicRelation.EQUALS),
            ((1, 3), (1, 2), BasicRelation.STARTED_BY),
            ((2, 3), (1, 4), BasicRelation.DURING),
            ((2, 4), (1, 4), BasicRelation.FINISHES),
            ((2, 4), (1, 3), BasicRelation.OVERLAPPED_BY),
            ((2, 3), (1, 2), BasicRelation.MET_BY),
            ((3, 4), (1, 2), BasicRelation.PRECEDED_BY),
        ],
    )
    def test_relation(self, x, y, expected):
        assert relation(Interval(*x), Interval(*y)) is expected
        assert code(Interval(*x), Interval(*y)) == expected.code

    def test_days_overlap(self, days):
        d1, d2, d3, d4 = days
        assert relation(Interval(d1, d3), Interval(d2, d4)) is BasicRelation.OVERLAPS

    def test_days_meet(self, days):
        d1, d2, d3, _ = days
        assert relation(Interval(d1, d2), Interval(d2, d3)) is BasicRelation.MEETS
        assert is_disjoint(Interval(d1, d2), Interval(d2, d3))

    def test_days_contain(self, days):
        d1, d2, d3, d4 = days
        assert relation(Interval(d1, d4), Interval(d2, d3)) is BasicRelation.CONTAINS

    def test_relation_requires_intervals(self):
        with pytest.raises(InvalidDataTypeError, match="Expected an Interval"):
            relation((1, 2), Interval(1, 2))

    def test_incomparable_intervals_have_no_relation(self, days):
        d1, d2, _, _ = days
        assert relation(Interval(d1, d2), Interval(1, 2)) is None
        assert code(Interval(d1, d2), Interval(1, 2)) is None

    def test_ambiguous_relation(self):
        chaotic = Interval(Chaotic(), Chaotic())
        with pytest.raises(AmbiguousRelationError):
            relation(chaotic, chaotic)


class TestAlgebraicLaws:
    def test_completeness(self, small_intervals):
        for x in small_intervals:
            for y in small_intervals:
                matching = [r for r in BasicRelation if evaluate(make_relation(r), x, y)]
                assert len(matching) == 1, (x, y, matching)
                assert relation(x, y) is matching[0]

    def test_converse_law(self, small_intervals):
        for x in small_intervals:
            for y in small_intervals:
                for r in BasicRelation:
                    forward = satisfies(make_relation(r), x, y)
                    backward = satisfies(converse(make_relation(r)), y, x)
                    assert forward == backward, (r, x, y)

    def test_complement_law(self, small_intervals):
        for x in small_intervals:
            for y in small_intervals:
                assert is_disjoint(x, y) != is_concurrent(x, y), (x, y)


class TestGeneralRelation:
    def test_make_relation(self):
        r = make_relation(BasicRelation.PRECEDES, BasicRelation.MEETS, name="before")

        assert isinstance(r, GeneralRelation)
        assert r.name == "before"
        assert r.codes == "pm"
        assert BasicRelation.MEETS in r
        assert BasicRelation.OVERLAPS not in r
        assert len(r) == 2
        assert list(r) == [BasicRelation.PRECEDES, BasicRelation.MEETS]

    def test_make_relation_rejects_non_basic(self):
        with pytest.raises(InvalidDataTypeError):
            make_relation("p")

    def test_relations_of(self):
        assert relations_of("pm").as_set() == ORDERED.as_set()

    def test_duplicates_are_harmless(self):
        r = make_relation(BasicRelation.MEETS, BasicRelation.MEETS)
        assert evaluate(r, Interval(1, 2), Interval(2, 3)) is BasicRelation.MEETS

    def test_evaluate_returns_holding_member(self):
        assert evaluate(DISJOINT, Interval(3, 4), Interval(1, 2)) is BasicRelation.PRECEDED_BY
        assert evaluate(DISJOINT, Interval(1, 3), Interval(2, 4)) is None

    def test_relation_is_universe(self):
        assert RELATION.as_set() == frozenset(BasicRelation)

    def test_relation_is_immutable(self):
        with pytest.raises(AttributeError):
            DISJOINT.name = "other"


class TestOperationsOnRelations:
    def test_disjoint_and_concurrent(self):
        assert DISJOINT.as_set() == {
            BasicRelation.PRECEDES,
            BasicRelation.PRECEDED_BY,
            BasicRelation.MEETS,
            BasicRelation.MET_BY,
        }
        assert CONCURRENT.codes == "oFDseSdfO"
        assert CONCURRENT.name == "concurrent"

    def test_complement(self):
        r = make_relation(BasicRelation.EQUALS)
        assert len(complement(r)) == 12
        assert BasicRelation.EQUALS not in complement(r)
        assert complement(complement(r)).as_set() == r.as_set()

    def test_complement_of_everything(self):
        assert len(complement(RELATION)) == 0

    def test_converse(self):
        r = make_relation(BasicRelation.PRECEDES, BasicRelation.STARTS, BasicRelation.EQUALS)
        assert converse(r).as_set() == {
            BasicRelation.PRECEDED_BY,
            BasicRelation.STARTED_BY,
            BasicRelation.EQUALS,
        }

    def test_converse_of_disjoint_is_disjoint(self):
        assert converse(DISJOINT).as_set() == DISJOINT.as_set()

    def test_compose_not_implemented(self):
        with pytest.raises(RelationNotImplementedError, match="Composition"):
            compose(DISJOINT, CONCURRENT)

    def test_intersect_not_implemented(self):
        with pytest.raises(NotImplementedError, match="Intersection"):
            intersect(DISJOINT, CONCURRENT)
