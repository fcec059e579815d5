"""
Set algebra laws.

Checks of the classical identities over a FINITE universe: two sets
agree iff every element of the universe is in both or in neither. The
universe is materialized, so it must be Finite; the operands may be any
sets, including views over infinite domains.

agrees_on() is the sampled variant for infinite sets: it compares
membership on an explicit, caller-bounded sample.
"""

from __future__ import annotations
from typing import Any, Iterable

from .base import MathSet
from .extensional import EMPTY_SET
from .materialize import materialize


def same_membership(left: MathSet, right: MathSet, universe: MathSet) -> bool:
    """True iff left and right agree on every element of universe."""
    return all((x in left) == (x in right) for x in materialize(universe).members)


def agrees_on(left: MathSet, right: MathSet, sample: Iterable[Any]) -> bool:
    """True iff left and right agree on every sampled element."""
    return all((x in left) == (x in right) for x in sample)


# =============================================================================
# Commutativity, associativity, distributivity
# =============================================================================

def is_union_commutative(a: MathSet, b: MathSet, universe: MathSet) -> bool:
    return same_membership(a | b, b | a, universe)


def is_intersection_commutative(a: MathSet, b: MathSet, universe: MathSet) -> bool:
    return same_membership(a & b, b & a, universe)


def is_union_associative(a: MathSet, b: MathSet, c: MathSet, universe: MathSet) -> bool:
    return same_membership((a | b) | c, a | (b | c), universe)


def is_intersection_associative(a: MathSet, b: MathSet, c: MathSet, universe: MathSet) -> bool:
    return same_membership((a & b) & c, a & (b & c), universe)


def is_distributive(a: MathSet, b: MathSet, c: MathSet, universe: MathSet) -> bool:
    """A ∩ (B ∪ C) = (A ∩ B) ∪ (A ∩ C)"""
    return same_membership(a & (b | c), (a & b) | (a & c), universe)


# =============================================================================
# De Morgan
# =============================================================================

def is_de_morgan_for_union(a: MathSet, b: MathSet, universe: MathSet) -> bool:
    """U \\ (A ∪ B) = (U \\ A) ∩ (U \\ B)"""
    return same_membership(
        (a | b).complement(universe),
        a.complement(universe) & b.complement(universe),
        universe,
    )


def is_de_morgan_for_intersection(a: MathSet, b: MathSet, universe: MathSet) -> bool:
    """U \\ (A ∩ B) = (U \\ A) ∪ (U \\ B)"""
    return same_membership(
        (a & b).complement(universe),
        a.complement(universe) | b.complement(universe),
        universe,
    )


# =============================================================================
# Identities
# =============================================================================

def is_idempotent_union(a: MathSet, universe: MathSet) -> bool:
    return same_membership(a | a, a, universe)


def has_identity_union(a: MathSet, universe: MathSet) -> bool:
    """A ∪ ∅ = A"""
    return same_membership(a | EMPTY_SET, a, universe)


def has_annihilator_intersection(a: MathSet, universe: MathSet) -> bool:
    """A ∩ ∅ = ∅"""
    return same_membership(a & EMPTY_SET, EMPTY_SET, universe)


def has_self_difference_empty(a: MathSet, universe: MathSet) -> bool:
    """A \\ A = ∅"""
    return same_membership(a - a, EMPTY_SET, universe)


def has_absorption(a: MathSet, b: MathSet, universe: MathSet) -> bool:
    """A ∪ (A ∩ B) = A"""
    return same_membership(a | (a & b), a, universe)


def has_involution(a: MathSet, universe: MathSet) -> bool:
    """U \\ (U \\ A) = A on U"""
    return same_membership(a.complement(universe).complement(universe), a, universe)


def extensionality_holds(a: MathSet, b: MathSet, universe: MathSet) -> bool:
    """Same membership over universe implies mutual inclusion."""
    if not same_membership(a, b, universe):
        return True
    return a.is_subset_of(b) and b.is_subset_of(a)


__all__ = [
    'same_membership',
    'agrees_on',
    'is_union_commutative',
    'is_intersection_commutative',
    'is_union_associative',
    'is_intersection_associative',
    'is_distributive',
    'is_de_morgan_for_union',
    'is_de_morgan_for_intersection',
    'is_idempotent_union',
    'has_identity_union',
    'has_annihilator_intersection',
    'has_self_difference_empty',
    'has_absorption',
    'has_involution',
    'extensionality_holds',
]
