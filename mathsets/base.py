"""
Set Capability Surface

MathSet is the one interface every consumer programs against. Concrete
sets come in exactly two kinds:

    EXTENSIONAL  finite, materialized, de-duplicated members
    INTENSIONAL  membership decided by a domain and a predicate, or by a
                 lazy structure (generated domains, views); never
                 enumerated eagerly

Consumers never branch on the kind. They use:

    x in s, s.union(t) / s | t, s.intersect(t) / s & t,
    s.difference(t) / s - t, s.product(t), s.power_set(),
    s.elements(), s.cardinality, s.materialize(), s == t

Binary operations are routed through the dispatcher, which picks the
result representation from the operand kinds.

Equality is extensional: two sets are equal iff they have the same
members, whatever their representation. It is decided by materializing
when both sides are Finite; a Finite set never equals a provably infinite
one; otherwise == falls back to identity. Use algebra.agrees_on() for a
sampled comparison of infinite sets.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Iterable, Optional, TYPE_CHECKING

from .errors import NonFiniteMaterialization

if TYPE_CHECKING:
    from .cardinality import Cardinality
    from .extensional import ExtensionalSet
    from .predicate import Predicate
    from .sequence import LazySequence


class SetKind(Enum):
    """The closed set of concrete representations."""
    EXTENSIONAL = "extensional"
    INTENSIONAL = "intensional"


class MathSet(ABC):
    """
    Abstract mathematical set.

    Subclasses provide membership and a lazy element sequence; everything
    else is defined here in terms of the dispatcher, the classifier and
    the materialization boundary. Instances are immutable.
    """

    kind: SetKind

    # Intensional sets expose (domain, predicate); domain is None for sets
    # that enumerate themselves (generated domains and views).
    domain: Optional[MathSet] = None
    predicate: Optional[Predicate] = None

    @abstractmethod
    def __contains__(self, element: Any) -> bool:
        ...

    @abstractmethod
    def elements(self) -> LazySequence:
        """Lazy, forward-only sequence of the members."""

    def _intrinsic_cardinality(self) -> Cardinality:
        """Cardinality of a domain-less set; overridden by generated sets and views."""
        raise NotImplementedError(f"{type(self).__name__} has no intrinsic cardinality")

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @staticmethod
    def empty() -> ExtensionalSet:
        from .extensional import ExtensionalSet
        return ExtensionalSet()

    @staticmethod
    def singleton(element: Any) -> ExtensionalSet:
        from .extensional import ExtensionalSet
        return ExtensionalSet((element,))

    @staticmethod
    def of(*elements: Any) -> ExtensionalSet:
        from .extensional import ExtensionalSet
        return ExtensionalSet(elements)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def contains(self, element: Any) -> bool:
        return element in self

    @property
    def cardinality(self) -> Cardinality:
        from .cardinality import classify
        return classify(self)

    def materialize(self, cap: Optional[int] = None) -> ExtensionalSet:
        """Force full enumeration (see materialize.materialize)."""
        from .materialize import materialize
        return materialize(self, cap)

    # -------------------------------------------------------------------------
    # Algebra - every binary operation goes through the dispatcher
    # -------------------------------------------------------------------------

    def union(self, other: MathSet) -> MathSet:
        from .dispatch import BinaryOp, dispatch
        return dispatch(BinaryOp.UNION, self, other)

    def intersect(self, other: MathSet) -> MathSet:
        from .dispatch import BinaryOp, dispatch
        return dispatch(BinaryOp.INTERSECTION, self, other)

    def difference(self, other: MathSet) -> MathSet:
        from .dispatch import BinaryOp, dispatch
        return dispatch(BinaryOp.DIFFERENCE, self, other)

    def product(self, other: MathSet) -> MathSet:
        """Cartesian product; members are OrderedPairs."""
        from .dispatch import BinaryOp, dispatch
        return dispatch(BinaryOp.PRODUCT, self, other)

    def symmetric_difference(self, other: MathSet) -> MathSet:
        return self.difference(other).union(other.difference(self))

    def complement(self, universe: MathSet) -> MathSet:
        """universe \\ self"""
        return universe.difference(self)

    def power_set(self, cap: Optional[int] = None) -> MathSet:
        """Lazy power set; ExtensionalSet overrides with an eager, capped one."""
        from .views import PowerSetView
        return PowerSetView(self)

    def __or__(self, other):
        if not isinstance(other, MathSet):
            return NotImplemented
        return self.union(other)

    def __and__(self, other):
        if not isinstance(other, MathSet):
            return NotImplemented
        return self.intersect(other)

    def __sub__(self, other):
        if not isinstance(other, MathSet):
            return NotImplemented
        return self.difference(other)

    def __xor__(self, other):
        if not isinstance(other, MathSet):
            return NotImplemented
        return self.symmetric_difference(other)

    # -------------------------------------------------------------------------
    # Separation and replacement
    # -------------------------------------------------------------------------

    def filter(self, predicate: Callable[[Any], bool]) -> MathSet:
        """{x in self | predicate(x)}, always intensional."""
        from .intensional import IntensionalSet
        return IntensionalSet(self, predicate)

    def map(self, f: Callable[[Any], Any]) -> MathSet:
        """{f(x) | x in self}, a lazy mapped view."""
        from .views import MappedSet
        return MappedSet(self, f)

    # -------------------------------------------------------------------------
    # Relations between sets
    # -------------------------------------------------------------------------

    def is_subset_of(self, other: MathSet) -> bool:
        """
        self ⊆ other. Needs self to be finite.

        Raises:
            NonFiniteMaterialization: If self is not Finite
        """
        if self is other:
            return True
        return all(x in other for x in self.materialize().members)

    def is_proper_subset_of(self, other: MathSet) -> bool:
        if not self.is_subset_of(other):
            return False
        theirs = other.cardinality
        if theirs.is_infinite:
            return True
        return len(self.materialize()) < len(other.materialize())

    def is_disjoint_with(self, other: MathSet) -> bool:
        """
        self ∩ other = ∅, scanning whichever side is finite.

        Raises:
            NonFiniteMaterialization: If neither side is Finite
        """
        if self.cardinality.is_finite:
            return not any(x in other for x in self.materialize().members)
        if other.cardinality.is_finite:
            return not any(x in self for x in other.materialize().members)
        raise NonFiniteMaterialization(
            "Disjointness of two non-finite sets is undecidable by enumeration",
            self.cardinality,
        )

    # -------------------------------------------------------------------------
    # Extensional equality
    # -------------------------------------------------------------------------

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, MathSet):
            return NotImplemented
        mine, theirs = self.cardinality, other.cardinality
        if mine.is_finite and theirs.is_finite:
            return mine == theirs and self.materialize().members == other.materialize().members
        if (mine.is_finite and theirs.is_infinite) or (mine.is_infinite and theirs.is_finite):
            return False
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        if self.cardinality.is_finite:
            return hash(self.materialize().members)
        return object.__hash__(self)


def as_set(value: Any) -> MathSet:
    """Coerce a MathSet or a finite iterable into a MathSet."""
    if isinstance(value, MathSet):
        return value
    from .extensional import ExtensionalSet
    return ExtensionalSet(value)


def mathset_of(*elements: Any) -> MathSet:
    """Extensional set of the given elements."""
    return MathSet.of(*elements)


def mathset_from(iterable: Iterable[Any]) -> MathSet:
    """Extensional set of a finite iterable."""
    return as_set(list(iterable))


__all__ = [
    'SetKind',
    'MathSet',
    'as_set',
    'mathset_of',
    'mathset_from',
]
