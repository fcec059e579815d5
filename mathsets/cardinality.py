"""
Cardinality Classifier

Size classes of sets and the classifier that assigns them.

================================================================================
THE CLOSED VARIANT
================================================================================

    Finite(n) | CountablyInfinite | Uncountable | Unknown

Sort order (total):

    Finite(0) < Finite(1) < ... < CountablyInfinite < Uncountable < Unknown

Unknown sorts last so that max() over a composition degrades to Unknown,
but it is otherwise incomparable: comparable_with() is False whenever
exactly one side is Unknown.

================================================================================
CLASSIFICATION RULES
================================================================================

- ExtensionalSet               -> Finite(len), O(1)
- domain-less intensional set  -> its own structural cardinality
- IntensionalSet(domain, p):
    1. p is select-none          -> Finite(0)   (before looking at the domain)
    2. p is select-all           -> classify(domain)
    3. domain Finite             -> Finite(count), enumerating the domain
    4. p bounded by a Finite set S (member_of(S), an AND with such an
       operand, or an OR of bounded operands) -> Finite(count), enumerating S
    5. domain infinite, p = NOT member_of(S), S Finite -> domain's class
    6. otherwise                 -> Unknown

Results are memoized in an explicit table keyed by object identity, and
only once finiteness is proven. Entries are dropped when the set is
garbage collected.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, TYPE_CHECKING
import logging
import weakref

from .errors import CapacityExceeded

if TYPE_CHECKING:
    from .base import MathSet
    from .predicate import Predicate

logger = logging.getLogger(__name__)


class CardinalityKind(Enum):
    """Size classes, declared in sort order."""
    FINITE = 0
    COUNTABLY_INFINITE = 1
    UNCOUNTABLE = 2
    UNKNOWN = 3


@dataclass(frozen=True)
class Cardinality:
    """
    Size class of a set.

    Attributes:
        kind: One of the four size classes
        count: Exact element count, only for FINITE

    Example:
        >>> Cardinality.finite(3) < COUNTABLY_INFINITE
        True
        >>> max(Cardinality.finite(3), UNCOUNTABLE)
        Cardinality(kind=<CardinalityKind.UNCOUNTABLE: 2>, count=None)
    """
    kind: CardinalityKind
    count: Optional[int] = None

    def __post_init__(self):
        if self.kind is CardinalityKind.FINITE:
            if isinstance(self.count, bool) or not isinstance(self.count, int) or self.count < 0:
                raise ValueError(f"Finite cardinality needs a non-negative int count, got {self.count!r}")
        elif self.count is not None:
            raise ValueError(f"{self.kind.name} cardinality carries no count")

    @classmethod
    def finite(cls, n: int) -> Cardinality:
        """Finite(n)."""
        return cls(CardinalityKind.FINITE, n)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def is_finite(self) -> bool:
        return self.kind is CardinalityKind.FINITE

    @property
    def is_infinite(self) -> bool:
        """True for the two proven infinite classes, False for Unknown."""
        return self.kind in (CardinalityKind.COUNTABLY_INFINITE, CardinalityKind.UNCOUNTABLE)

    @property
    def is_known(self) -> bool:
        return self.kind is not CardinalityKind.UNKNOWN

    def comparable_with(self, other: Cardinality) -> bool:
        """Unknown is only comparable with itself."""
        return self.is_known == other.is_known

    # -------------------------------------------------------------------------
    # Ordering
    # -------------------------------------------------------------------------

    def _sort_key(self):
        return (self.kind.value, self.count or 0)

    def __lt__(self, other):
        if not isinstance(other, Cardinality):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other):
        if not isinstance(other, Cardinality):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other):
        if not isinstance(other, Cardinality):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other):
        if not isinstance(other, Cardinality):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def __str__(self) -> str:
        if self.kind is CardinalityKind.FINITE:
            return str(self.count)
        if self.kind is CardinalityKind.COUNTABLY_INFINITE:
            return "ℵ₀"
        if self.kind is CardinalityKind.UNCOUNTABLE:
            return "Uncountable"
        return "?"


EMPTY = Cardinality.finite(0)
COUNTABLY_INFINITE = Cardinality(CardinalityKind.COUNTABLY_INFINITE)
UNCOUNTABLE = Cardinality(CardinalityKind.UNCOUNTABLE)
UNKNOWN = Cardinality(CardinalityKind.UNKNOWN)


# =============================================================================
# COMPOSITION
# =============================================================================

def larger(*cardinalities: Cardinality) -> Cardinality:
    """Largest class under the sort order. Used for unions of lazy operands."""
    return max(cardinalities)


def product_of(left: Cardinality, right: Cardinality) -> Cardinality:
    """Cardinality of a cartesian product |A × B|."""
    if left == EMPTY or right == EMPTY:
        return EMPTY
    if left.is_finite and right.is_finite:
        return Cardinality.finite(left.count * right.count)
    return larger(left, right)


def power_of(base: Cardinality) -> Cardinality:
    """Cardinality of a power set |P(A)| = 2^|A|."""
    if base.is_finite:
        return Cardinality.finite(1 << base.count)
    if base.is_infinite:
        return UNCOUNTABLE
    return UNKNOWN


# =============================================================================
# CLASSIFIER
# =============================================================================

# id(set) -> Finite cardinality. Monotonic: entries are added, never changed.
_finite_cache: Dict[int, Cardinality] = {}


def _remember(s: MathSet, cardinality: Cardinality) -> None:
    key = id(s)
    if key not in _finite_cache:
        _finite_cache[key] = cardinality
        weakref.finalize(s, _finite_cache.pop, key, None)


def classify(s: MathSet) -> Cardinality:
    """
    Compute the cardinality class of any set.

    Args:
        s: Set to classify

    Returns:
        Cardinality; cached when Finite
    """
    from .base import SetKind

    if s.kind is SetKind.EXTENSIONAL:
        return Cardinality.finite(len(s))

    cached = _finite_cache.get(id(s))
    if cached is not None:
        logger.debug("classify cache hit for %s: %s", type(s).__name__, cached)
        return cached

    if s.domain is None:
        result = s._intrinsic_cardinality()
    else:
        result = _classify_filtered(s.domain, s.predicate)

    logger.debug("classified %s as %s", type(s).__name__, result)
    if result.is_finite:
        _remember(s, result)
    return result


def _classify_filtered(domain: MathSet, predicate: Predicate) -> Cardinality:
    from .predicate import PredicateShape

    if predicate.shape is PredicateShape.NONE:
        return EMPTY

    domain_cardinality = classify(domain)
    if predicate.shape is PredicateShape.ALL:
        return domain_cardinality

    if domain_cardinality.is_finite:
        return Cardinality.finite(_count_matching(domain, domain_cardinality.count, predicate))

    bound = finite_member_bound(predicate)
    if bound is not None:
        return Cardinality.finite(
            _count_matching(bound, classify(bound).count, lambda x: x in domain and predicate(x))
        )

    # infinite domain minus a finite set keeps the domain's class
    if (domain_cardinality.is_infinite
            and predicate.shape is PredicateShape.NOT
            and predicate.operands[0].shape is PredicateShape.MEMBER
            and classify(predicate.operands[0].target).is_finite):
        return domain_cardinality

    return UNKNOWN


def _count_matching(source: MathSet, size: int, test) -> int:
    """
    Count the members of a Finite source that pass test.

    Raises:
        CapacityExceeded: If the source yields more than its proven size
    """
    matched = 0
    for pulled, x in enumerate(source.elements(), 1):
        if pulled > size:
            raise CapacityExceeded(
                f"{source!r} yielded more than its {size} elements",
                limit=size,
            )
        if test(x):
            matched += 1
    return matched


def finite_member_bound(predicate: Predicate) -> Optional[MathSet]:
    """
    Finite set S such that predicate(x) implies x in S, if one is visible.

    member_of(S) is bounded by S, a conjunction by any bounded operand,
    and a disjunction by the union of its operands' bounds when every
    operand has one.
    """
    from .predicate import PredicateShape

    if predicate.shape is PredicateShape.MEMBER:
        if classify(predicate.target).is_finite:
            return predicate.target
        return None
    if predicate.shape is PredicateShape.AND:
        for operand in predicate.operands:
            bound = finite_member_bound(operand)
            if bound is not None:
                return bound
    if predicate.shape is PredicateShape.OR:
        bounds = [finite_member_bound(operand) for operand in predicate.operands]
        if all(bound is not None for bound in bounds):
            from .extensional import ExtensionalSet
            from .materialize import materialize
            return ExtensionalSet(frozenset().union(*(materialize(b).members for b in bounds)))
    return None


def cache_size() -> int:
    """Number of memoized classifications currently alive."""
    return len(_finite_cache)


__all__ = [
    'CardinalityKind',
    'Cardinality',
    'EMPTY',
    'COUNTABLY_INFINITE',
    'UNCOUNTABLE',
    'UNKNOWN',
    'larger',
    'product_of',
    'power_of',
    'classify',
    'finite_member_bound',
    'cache_size',
]
