"""
Tests for ExtensionalSet and BitSet
"""

import numpy as np
import pytest

from mathsets import (
    BitSet,
    CapacityExceeded,
    Cardinality,
    EMPTY_SET,
    EngineConfig,
    ExtensionalSet,
    InvalidConstruction,
    MathSet,
    OrderedPair,
    SetKind,
    get_default_config,
    set_default_config,
)
from mathsets.extensional import iter_subsets, mask_indices


@pytest.fixture
def restore_config():
    saved = get_default_config()
    yield
    set_default_config(saved)


class TestConstruction:
    def test_duplicates_collapse(self):
        s = ExtensionalSet([1, 2, 2, 3, 3, 3])
        assert len(s) == 3
        assert s.kind is SetKind.EXTENSIONAL

    def test_unhashable_element_rejected(self):
        with pytest.raises(InvalidConstruction):
            ExtensionalSet([[1, 2]])

    def test_factories(self):
        assert MathSet.empty() == EMPTY_SET
        assert MathSet.singleton(4) == ExtensionalSet([4])
        assert MathSet.of(1, 2, 1) == ExtensionalSet([1, 2])
        assert ExtensionalSet.from_range(3) == ExtensionalSet([0, 1, 2])
        assert ExtensionalSet.from_range(2, 8, 3) == ExtensionalSet([2, 5])
        assert ExtensionalSet.from_iterable(iter("ab")) == ExtensionalSet(["a", "b"])

    def test_sets_of_sets(self):
        inner = ExtensionalSet([1])
        outer = ExtensionalSet([inner, EMPTY_SET])
        assert ExtensionalSet([1]) in outer
        assert len(outer) == 2


class TestMembership:
    def test_contains(self):
        s = ExtensionalSet("abc")
        assert "a" in s
        assert s.contains("c")
        assert "z" not in s

    def test_unhashable_value_is_not_a_member(self):
        assert [1] not in ExtensionalSet([1])

    def test_cardinality(self):
        assert ExtensionalSet([5, 6]).cardinality == Cardinality.finite(2)

    def test_elements_are_restartable(self):
        seq = ExtensionalSet([1, 2, 3]).elements()
        assert sorted(seq.take(3)) == [1, 2, 3]
        assert sorted(seq.take(3)) == [1, 2, 3]


class TestEquality:
    def test_order_does_not_matter(self):
        assert ExtensionalSet([3, 1, 2]) == ExtensionalSet([1, 2, 3])
        assert hash(ExtensionalSet([3, 1, 2])) == hash(ExtensionalSet([1, 2, 3]))

    def test_different_members(self):
        assert ExtensionalSet([1]) != ExtensionalSet([2])
        assert ExtensionalSet([1]) != EMPTY_SET

    def test_not_equal_to_builtin_set(self):
        assert ExtensionalSet([1]) != {1}

    def test_repr(self):
        assert repr(ExtensionalSet([2, 1])) == "ExtensionalSet({1, 2})"
        assert repr(EMPTY_SET) == "ExtensionalSet({})"
        assert "ExtensionalSet(" in repr(ExtensionalSet([1, "a"]))


class TestOperations:
    a = ExtensionalSet([1, 2, 3])
    b = ExtensionalSet([3, 4])

    def test_union(self):
        assert (self.a | self.b) == ExtensionalSet([1, 2, 3, 4])

    def test_intersection(self):
        assert (self.a & self.b) == ExtensionalSet([3])

    def test_difference(self):
        assert (self.a - self.b) == ExtensionalSet([1, 2])

    def test_symmetric_difference(self):
        assert (self.a ^ self.b) == ExtensionalSet([1, 2, 4])

    def test_complement(self):
        universe = ExtensionalSet(range(1, 6))
        assert self.a.complement(universe) == ExtensionalSet([4, 5])

    def test_operands_untouched(self):
        self.a | self.b
        assert self.a == ExtensionalSet([1, 2, 3])
        assert self.b == ExtensionalSet([3, 4])

    def test_non_set_operand(self):
        with pytest.raises(TypeError):
            self.a | [1, 2]

    def test_relations(self):
        assert ExtensionalSet([1, 2]).is_subset_of(self.a)
        assert ExtensionalSet([1, 2]).is_proper_subset_of(self.a)
        assert not self.a.is_proper_subset_of(self.a)
        assert self.a.is_subset_of(self.a)
        assert ExtensionalSet([1, 2]).is_disjoint_with(self.b)
        assert not self.a.is_disjoint_with(self.b)


class TestProduct:
    def test_pairs(self):
        product = ExtensionalSet([1, 2]).product(ExtensionalSet("ab"))
        assert product.kind is SetKind.EXTENSIONAL
        assert len(product) == 4
        assert OrderedPair(1, "a") in product
        assert OrderedPair("a", 1) not in product

    def test_empty_factor(self):
        assert ExtensionalSet([1, 2]).product(EMPTY_SET) == EMPTY_SET

    def test_cap(self, restore_config):
        set_default_config(EngineConfig(product_cap=5))
        with pytest.raises(CapacityExceeded) as info:
            ExtensionalSet(range(3)).product(ExtensionalSet(range(2)))
        assert info.value.limit == 5
        assert info.value.requested == 6


class TestPowerSet:
    def test_two_elements(self):
        power = ExtensionalSet([1, 2]).power_set()
        assert len(power) == 4
        assert power == ExtensionalSet([
            EMPTY_SET,
            ExtensionalSet([1]),
            ExtensionalSet([2]),
            ExtensionalSet([1, 2]),
        ])

    def test_empty_set(self):
        assert EMPTY_SET.power_set() == ExtensionalSet([EMPTY_SET])

    def test_explicit_cap(self):
        with pytest.raises(CapacityExceeded) as info:
            ExtensionalSet(range(5)).power_set(cap=16)
        assert info.value.requested == 32
        assert info.value.limit == 16

    def test_default_cap(self, restore_config):
        set_default_config(EngineConfig(power_set_cap=8))
        assert len(ExtensionalSet(range(3)).power_set()) == 8
        with pytest.raises(CapacityExceeded):
            ExtensionalSet(range(4)).power_set()

    def test_cap_checked_before_allocation(self):
        with pytest.raises(CapacityExceeded):
            ExtensionalSet(range(64)).power_set()

    def test_lazy_power_set(self):
        power = ExtensionalSet(range(40)).lazy_power_set()
        assert power.cardinality == Cardinality.finite(1 << 40)
        assert ExtensionalSet([1, 39]) in power
        assert ExtensionalSet([40]) not in power
        assert power.elements().take(3) == [EMPTY_SET, ExtensionalSet([0]), ExtensionalSet([1])]

    def test_subset_order(self):
        assert list(iter_subsets([1, 2])) == [
            EMPTY_SET,
            ExtensionalSet([1]),
            ExtensionalSet([2]),
            ExtensionalSet([1, 2]),
        ]

    def test_mask_indices(self):
        assert mask_indices(0b1011, 4).tolist() == [0, 1, 3]
        assert mask_indices(1 << 70, 71).tolist() == [70]
        assert mask_indices(0, 0).tolist() == []


class TestBitSet:
    def test_from_set_ignores_out_of_range(self):
        b = BitSet.from_set(8, [1, 3, 9, -2])
        assert b.members == frozenset({1, 3})
        assert b.size == 8

    def test_membership(self):
        b = BitSet.from_set(8, [1, 3])
        assert 3 in b
        assert 3.0 in b
        assert 2 not in b
        assert "a" not in b
        assert 3.5 not in b
        assert 100 not in b

    def test_vectorised_operations(self):
        a = BitSet.from_set(8, [1, 3, 5])
        b = BitSet.from_set(8, [3, 4])
        assert a.union_bits(b).members == frozenset({1, 3, 4, 5})
        assert a.intersect_bits(b).members == frozenset({3})
        assert a.difference_bits(b).members == frozenset({1, 5})

    def test_operators_keep_bitset(self):
        a = BitSet.from_set(8, [1, 3, 5])
        b = BitSet.from_set(8, [3, 4])
        union = a | b
        assert isinstance(union, BitSet)
        assert np.array_equal(union.mask, np.array([0, 1, 0, 1, 1, 1, 0, 0], dtype=bool))
        assert isinstance(a - b, BitSet)
        assert isinstance(a & b, BitSet)

    def test_mixed_operands_fall_back(self):
        a = BitSet.from_set(8, [1, 3])
        union = a | ExtensionalSet([3, "x"])
        assert type(union) is ExtensionalSet
        assert union == ExtensionalSet([1, 3, "x"])
        other_size = a | BitSet.from_set(4, [0])
        assert type(other_size) is ExtensionalSet
        assert other_size == ExtensionalSet([0, 1, 3])

    def test_size_mismatch(self):
        with pytest.raises(InvalidConstruction):
            BitSet.from_set(8, [1]).union_bits(BitSet.from_set(4, [1]))

    def test_invalid_construction(self):
        with pytest.raises(InvalidConstruction):
            BitSet(-1)
        with pytest.raises(InvalidConstruction):
            BitSet(4, np.zeros(3, dtype=bool))

    def test_mask_is_read_only(self):
        b = BitSet.from_set(4, [1])
        with pytest.raises(ValueError):
            b.mask[0] = True

    def test_equal_to_extensional(self):
        assert BitSet.from_set(8, [2, 4]) == ExtensionalSet([2, 4])
        assert hash(BitSet.from_set(8, [2, 4])) == hash(ExtensionalSet([2, 4]))
