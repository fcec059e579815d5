"""
Tests for OrderedPair
"""

import pytest

from mathsets import ExtensionalSet, OrderedPair


class TestOrderedPair:
    def test_equality(self):
        assert OrderedPair(1, 2) == OrderedPair(1, 2)
        assert OrderedPair(1, 2) != OrderedPair(2, 1)
        assert OrderedPair(1, 2) != OrderedPair(1, 3)

    def test_kuratowski_encoding(self):
        assert OrderedPair(1, 2).to_kuratowski() == ExtensionalSet([
            ExtensionalSet([1]),
            ExtensionalSet([1, 2]),
        ])

    def test_diagonal_pair_collapses(self):
        assert OrderedPair(1, 1).kuratowski == ExtensionalSet([ExtensionalSet([1])])
        assert len(OrderedPair(1, 1).kuratowski) == 1

    def test_hashable(self):
        pairs = {OrderedPair(1, "a"), OrderedPair(1, "a"), OrderedPair("a", 1)}
        assert len(pairs) == 2
        assert hash(OrderedPair(3, 4)) == hash(OrderedPair(3, 4))

    def test_not_equal_to_tuple(self):
        assert OrderedPair(1, 2) != (1, 2)

    def test_unpacking_and_swap(self):
        first, second = OrderedPair("x", "y")
        assert (first, second) == ("x", "y")
        assert OrderedPair(1, 2).swap() == OrderedPair(2, 1)

    def test_immutable(self):
        pair = OrderedPair(1, 2)
        with pytest.raises(AttributeError):
            pair.first = 5

    def test_repr(self):
        assert repr(OrderedPair(1, "a")) == "(1, 'a')"

    def test_nested_pairs(self):
        outer = OrderedPair(OrderedPair(1, 2), 3)
        assert outer == OrderedPair(OrderedPair(1, 2), 3)
        assert outer != OrderedPair(OrderedPair(2, 1), 3)
