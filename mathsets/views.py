"""
Lazy set views.

Views are domain-less intensional sets built by the dispatcher (and by
map() / power_set()) whenever a result must not be computed eagerly:

- UnionView:     left ∪ right, interleaving both sequences
- ProductView:   left × right, Cantor-diagonal enumeration
- MappedSet:     {f(x) | x ∈ source}
- PowerSetView:  P(base), subsets enumerated by bitmask

None of them enumerates an operand unless the caller pulls elements or
the operand is already known to be Finite.
"""

from __future__ import annotations
from typing import Any, Callable

from .base import MathSet
from .cardinality import (
    Cardinality,
    UNKNOWN,
    classify,
    larger,
    power_of,
    product_of,
)
from .errors import NonEnumerable
from .extensional import iter_subsets
from .intensional import IntensionalSet
from .materialize import materialize
from .pairs import OrderedPair
from .predicate import Predicate
from .sequence import LazySequence, diagonal_pairs


class UnionView(IntensionalSet):
    """Lazy left ∪ right."""

    _self_enumerating = True

    def __init__(self, left: MathSet, right: MathSet):
        super().__init__(None, Predicate.member_of(left) | Predicate.member_of(right))
        self._left = left
        self._right = right

    @property
    def operands(self):
        return self._left, self._right

    def elements(self) -> LazySequence:
        return self._left.elements().interleave(self._right.elements()).distinct()

    def _intrinsic_cardinality(self) -> Cardinality:
        left, right = classify(self._left), classify(self._right)
        if left.is_finite and right.is_finite:
            members = materialize(self._left).members | materialize(self._right).members
            return Cardinality.finite(len(members))
        return larger(left, right)

    def __repr__(self) -> str:
        return f"UnionView({self._left!r}, {self._right!r})"


class ProductView(IntensionalSet):
    """Lazy left × right; members are OrderedPairs."""

    _self_enumerating = True

    def __init__(self, left: MathSet, right: MathSet):
        super().__init__(None, self._is_pair_of)
        self._left = left
        self._right = right

    def _is_pair_of(self, element: Any) -> bool:
        return (isinstance(element, OrderedPair)
                and element.first in self._left
                and element.second in self._right)

    def elements(self) -> LazySequence:
        left, right = self._left.elements(), self._right.elements()
        return LazySequence(
            lambda: (OrderedPair(a, b) for a, b in diagonal_pairs(left, right)),
            left.restartable and right.restartable,
        )

    def _intrinsic_cardinality(self) -> Cardinality:
        return product_of(classify(self._left), classify(self._right))

    def __repr__(self) -> str:
        return f"ProductView({self._left!r}, {self._right!r})"


class MappedSet(IntensionalSet):
    """
    Image of a set under a function (replacement).

    Membership needs the whole image, so it is only decidable when the
    source is Finite; otherwise it raises NonFiniteMaterialization.
    """

    _self_enumerating = True

    def __init__(self, source: MathSet, f: Callable[[Any], Any]):
        super().__init__(None, self._in_image)
        self._source = source
        self._f = f

    def _in_image(self, element: Any) -> bool:
        return any(self._f(x) == element for x in materialize(self._source).members)

    def elements(self) -> LazySequence:
        return self._source.elements().map(self._f).distinct()

    def _intrinsic_cardinality(self) -> Cardinality:
        source = classify(self._source)
        if source.is_finite:
            return Cardinality.finite(len({self._f(x) for x in materialize(self._source).members}))
        return UNKNOWN

    def __repr__(self) -> str:
        return f"MappedSet({self._source!r})"


class PowerSetView(IntensionalSet):
    """
    Lazy P(base).

    Members are sets; enumeration needs a Finite base and yields
    ExtensionalSets in bitmask order.
    """

    _self_enumerating = True

    def __init__(self, base: MathSet):
        super().__init__(None, self._is_subset)
        self._base = base

    @property
    def base(self) -> MathSet:
        return self._base

    def _is_subset(self, element: Any) -> bool:
        return isinstance(element, MathSet) and element.is_subset_of(self._base)

    def elements(self) -> LazySequence:
        base = classify(self._base)
        if not base.is_finite:
            raise NonEnumerable(f"Power set of a set of cardinality {base} cannot be enumerated")
        return LazySequence(lambda: iter_subsets(materialize(self._base)._sorted_items()))

    def _intrinsic_cardinality(self) -> Cardinality:
        return power_of(classify(self._base))

    def __repr__(self) -> str:
        return f"PowerSetView({self._base!r})"


__all__ = [
    'UnionView',
    'ProductView',
    'MappedSet',
    'PowerSetView',
]
