"""
IntensionalSet - sets defined by a domain and a predicate.

    {x ∈ domain | predicate(x)}

Membership is "x in domain and predicate(x)" and is decided without
enumerating anything. elements() filters the domain's own lazy sequence,
so taking a prefix pulls from the domain only as far as needed, and the
sequence is restartable exactly when the domain's is. When the domain is
not Finite but the predicate requires membership in a Finite set, that
set is scanned instead, so the sequence ends.

GeneratedSet is the primitive intensional set: it has no domain of its
own, a membership test, an optional generator for its elements and a
declared cardinality. The standard number domains are GeneratedSets.
"""

from __future__ import annotations
from itertools import islice
from typing import Any, Callable, Iterable, Optional

from .base import MathSet, SetKind
from .cardinality import Cardinality, classify, finite_member_bound
from .errors import InvalidConstruction, NonEnumerable
from .extensional import ExtensionalSet
from .predicate import Predicate
from .sequence import LazySequence


class IntensionalSet(MathSet):
    """
    Set defined by comprehension over a domain.

    Args:
        domain: Any MathSet
        predicate: Pure, idempotent boolean function (or Predicate)

    Example:
        >>> universe = ExtensionalSet(range(1, 6))
        >>> evens = IntensionalSet(universe, lambda x: x % 2 == 0)
        >>> 4 in evens, 5 in evens
        (True, False)
    """

    kind = SetKind.INTENSIONAL

    # Domain-less subclasses enumerate themselves
    _self_enumerating = False

    def __init__(self, domain: Optional[MathSet], predicate: Any):
        if domain is None:
            if not self._self_enumerating:
                raise InvalidConstruction("IntensionalSet needs a domain")
        elif not isinstance(domain, MathSet):
            raise InvalidConstruction(f"Domain must be a MathSet, got {type(domain).__name__}")
        self._domain = domain
        self._predicate = Predicate.of(predicate)

    @property
    def domain(self) -> Optional[MathSet]:
        return self._domain

    @property
    def predicate(self) -> Predicate:
        return self._predicate

    def __contains__(self, element: Any) -> bool:
        if self._domain is None:
            return self._predicate(element)
        return element in self._domain and self._predicate(element)

    def elements(self) -> LazySequence:
        bound = finite_member_bound(self._predicate)
        if bound is not None and not classify(self._domain).is_finite:
            # never scan an infinite domain when a finite superset is known
            return bound.elements().filter(self.__contains__)
        return self._domain.elements().filter(self._predicate)

    def __repr__(self) -> str:
        return f"IntensionalSet({self._domain!r} | {self._predicate!r})"


def _sample_exactly(name: str, generator: Callable[[], Iterable[Any]], count: int) -> set:
    """Distinct members of a generator claimed to yield count; pulls at most count + 1."""
    sample = list(islice(iter(generator()), count + 1))
    distinct = set(sample)
    if len(sample) > count:
        raise InvalidConstruction(
            f"{name} declared Finite({count}) but yields more than {count} elements"
        )
    if len(distinct) != count:
        raise InvalidConstruction(
            f"{name} declared Finite({count}) but yields {len(distinct)} distinct elements"
        )
    return distinct


class GeneratedSet(IntensionalSet):
    """
    Primitive domain: membership test, element generator, declared size.

    Args:
        name: Display name
        membership: Pure membership test
        generator: Zero-argument callable returning a fresh iterable of the
            members, or None when the set cannot be enumerated
        cardinality: Declared cardinality. A Finite(n) claim is checked
            against the generator at construction.

    Raises:
        InvalidConstruction: If generator is not callable, or a declared
            Finite(n) generator does not yield exactly n distinct elements
    """

    _self_enumerating = True

    def __init__(self, name: str, membership: Any,
                 generator: Optional[Callable[[], Iterable[Any]]],
                 cardinality: Cardinality):
        if generator is not None and not callable(generator):
            raise InvalidConstruction("generator must be a zero-argument callable")
        if generator is not None and cardinality.is_finite:
            members = _sample_exactly(name, generator, cardinality.count)
            if membership is None:
                membership = Predicate.member_of(ExtensionalSet(members))
        super().__init__(None, membership)
        self._name = name
        self._generator = generator
        self._declared = cardinality

    @classmethod
    def finite(cls, name: str, generator: Callable[[], Iterable[Any]], count: int,
               membership: Optional[Any] = None) -> GeneratedSet:
        """
        Finite generated domain; membership defaults to the generated members.

        Raises:
            InvalidConstruction: If the generator does not yield exactly
                count distinct elements
        """
        return cls(name, membership, generator, Cardinality.finite(count))

    @property
    def name(self) -> str:
        return self._name

    def elements(self) -> LazySequence:
        if self._generator is None:
            raise NonEnumerable(f"{self._name} has no enumeration")
        return LazySequence(self._generator)

    def _intrinsic_cardinality(self) -> Cardinality:
        return self._declared

    def __repr__(self) -> str:
        return self._name


__all__ = [
    'IntensionalSet',
    'GeneratedSet',
]
