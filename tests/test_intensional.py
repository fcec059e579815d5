"""
Tests for IntensionalSet, generated domains and lazy views
"""

from fractions import Fraction
from itertools import count, cycle

import pytest

from mathsets import (
    COUNTABLY_INFINITE,
    Cardinality,
    ExtensionalSet,
    GeneratedSet,
    INTEGERS,
    IntensionalSet,
    InvalidConstruction,
    MappedSet,
    NATURALS,
    NonEnumerable,
    NonFiniteMaterialization,
    PowerSetView,
    ProductView,
    OrderedPair,
    RATIONALS,
    REALS,
    SetKind,
    UNCOUNTABLE,
    UNKNOWN,
)
from mathsets.universe import is_natural


def guarded_naturals(limit):
    """Naturals whose generator fails once more than `limit` elements are pulled."""
    def generate():
        for i in count():
            if i >= limit:
                raise AssertionError(f"pulled more than {limit} elements")
            yield i
    return GeneratedSet("guarded", is_natural, generate, COUNTABLY_INFINITE)


class TestIntensionalSet:
    def test_membership(self):
        universe = ExtensionalSet(range(1, 6))
        evens = IntensionalSet(universe, lambda x: x % 2 == 0)
        assert evens.kind is SetKind.INTENSIONAL
        assert 2 in evens and 4 in evens
        assert 3 not in evens
        assert 6 not in evens

    def test_predicate_only_sees_domain_members(self):
        evens = IntensionalSet(NATURALS, lambda n: n % 2 == 0)
        assert "a" not in evens
        assert -2 not in evens

    def test_domain_and_predicate_exposed(self):
        evens = IntensionalSet(NATURALS, lambda n: n % 2 == 0)
        assert evens.domain is NATURALS
        assert evens.predicate(4)

    def test_invalid_domain(self):
        with pytest.raises(InvalidConstruction):
            IntensionalSet([1, 2, 3], lambda x: True)
        with pytest.raises(InvalidConstruction):
            IntensionalSet(None, lambda x: True)

    def test_invalid_predicate(self):
        with pytest.raises(InvalidConstruction):
            IntensionalSet(NATURALS, "even")

    def test_filter_builds_intensional(self):
        threes = NATURALS.filter(lambda n: n % 3 == 0)
        assert isinstance(threes, IntensionalSet)
        assert threes.elements().take(4) == [0, 3, 6, 9]


class TestLaziness:
    @pytest.mark.parametrize("k", range(11))
    def test_prefix_never_overpulls(self, k):
        s = IntensionalSet(guarded_naturals(10), lambda n: True)
        assert s.elements().take(k) == list(range(k))

    def test_guard_trips_past_limit(self):
        s = IntensionalSet(guarded_naturals(10), lambda n: True)
        with pytest.raises(AssertionError):
            s.elements().take(11)

    def test_membership_never_enumerates(self):
        s = IntensionalSet(guarded_naturals(0), lambda n: n > 100)
        assert 101 in s
        assert 5 not in s

    def test_elements_restart(self):
        evens = IntensionalSet(NATURALS, lambda n: n % 2 == 0)
        assert evens.elements().take(3) == [0, 2, 4]
        assert evens.elements().take(3) == [0, 2, 4]

    def test_cursor_over_infinite_set(self):
        cursor = NATURALS.elements().iterator()
        assert cursor.has_next()
        assert cursor.next() == 0
        assert cursor.next() == 1


class TestGeneratedSet:
    def test_finite_checked(self):
        s = GeneratedSet.finite("small", lambda: [1, 2, 3], 3)
        assert s.cardinality == Cardinality.finite(3)
        assert 2 in s
        assert 4 not in s
        assert s.materialize() == ExtensionalSet([1, 2, 3])

    def test_finite_too_many(self):
        with pytest.raises(InvalidConstruction):
            GeneratedSet.finite("liar", lambda: count(), 3)

    def test_finite_too_few(self):
        with pytest.raises(InvalidConstruction):
            GeneratedSet.finite("short", lambda: [1, 2], 3)

    def test_finite_duplicates(self):
        with pytest.raises(InvalidConstruction):
            GeneratedSet.finite("dupes", lambda: [1, 1, 2], 3)

    def test_declared_finite_checked_by_constructor(self):
        with pytest.raises(InvalidConstruction):
            GeneratedSet("cycle", is_natural, lambda: cycle([1, 2, 3]), Cardinality.finite(3))

    def test_declared_finite_defaults_membership(self):
        s = GeneratedSet("small", None, lambda: [1, 2, 3], Cardinality.finite(3))
        assert 2 in s
        assert 4 not in s

    def test_generator_must_be_callable(self):
        with pytest.raises(InvalidConstruction):
            GeneratedSet("bad", is_natural, [1, 2], COUNTABLY_INFINITE)

    def test_repr_is_name(self):
        assert repr(NATURALS) == "ℕ"


class TestStandardDomains:
    def test_naturals(self):
        assert NATURALS.elements().take(4) == [0, 1, 2, 3]
        assert 0 in NATURALS and 7 in NATURALS
        assert -1 not in NATURALS
        assert True not in NATURALS
        assert 1.0 not in NATURALS
        assert NATURALS.cardinality == COUNTABLY_INFINITE

    def test_integers_zigzag(self):
        assert INTEGERS.elements().take(5) == [0, 1, -1, 2, -2]
        assert -100 in INTEGERS
        assert Fraction(1, 2) not in INTEGERS

    def test_rationals_diagonal(self):
        assert RATIONALS.elements().take(7) == [0, 1, -1, 2, -2, Fraction(1, 2), Fraction(-1, 2)]
        assert Fraction(3, 7) in RATIONALS
        assert 5 in RATIONALS
        assert 0.5 not in RATIONALS

    def test_rationals_are_reduced_and_unique(self):
        prefix = RATIONALS.elements().take(200)
        assert len(set(prefix)) == 200

    def test_reals_membership_only(self):
        assert 0.5 in REALS
        assert Fraction(1, 3) in REALS
        assert 3 in REALS
        assert float("inf") not in REALS
        assert float("nan") not in REALS
        assert False not in REALS
        assert REALS.cardinality == UNCOUNTABLE
        with pytest.raises(NonEnumerable):
            REALS.elements()


class TestViews:
    def test_mapped_finite(self):
        squares = ExtensionalSet([1, 2, 3]).map(lambda x: x * x)
        assert isinstance(squares, MappedSet)
        assert 4 in squares
        assert 5 not in squares
        assert squares.cardinality == Cardinality.finite(3)
        assert squares.materialize() == ExtensionalSet([1, 4, 9])

    def test_mapped_collapses_duplicates(self):
        assert ExtensionalSet([-1, 1, 2]).map(abs).cardinality == Cardinality.finite(2)

    def test_mapped_infinite(self):
        squares = NATURALS.map(lambda n: n * n)
        assert squares.elements().take(4) == [0, 1, 4, 9]
        assert squares.cardinality == UNKNOWN
        with pytest.raises(NonFiniteMaterialization):
            4 in squares

    def test_power_set_view_of_infinite(self):
        power = NATURALS.power_set()
        assert isinstance(power, PowerSetView)
        assert power.cardinality == UNCOUNTABLE
        assert ExtensionalSet([1, 2]) in power
        assert ExtensionalSet([-1]) not in power
        assert 3 not in power
        with pytest.raises(NonEnumerable):
            power.elements()

    def test_product_view(self):
        grid = NATURALS.product(ExtensionalSet("ab"))
        assert isinstance(grid, ProductView)
        assert grid.cardinality == COUNTABLY_INFINITE
        assert OrderedPair(5, "a") in grid
        assert OrderedPair("a", 5) not in grid
        assert (5, "a") not in grid
        prefix = grid.elements().take(4)
        assert len(set(prefix)) == 4
        assert all(isinstance(p, OrderedPair) for p in prefix)

    def test_product_of_infinite_sets_reaches_every_pair(self):
        pairs = NATURALS.product(NATURALS).elements().take(55)
        assert OrderedPair(3, 5) in pairs
        assert OrderedPair(9, 0) in pairs
