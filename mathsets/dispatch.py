"""
Binary-Operation Dispatcher

Chooses the cheapest safe representation for the result of
union / intersection / difference / cartesian product, from the kinds of
the two operands.

================================================================================
RULE TABLE
================================================================================

  Left  Right | Union           Intersection     Difference      Product
  ------------+------------------------------------------------------------
  Ext   Ext   | Ext             Ext              Ext             Ext (capped)
  Ext   Int   | Int (symbolic)  Ext (filter L)   Ext (filter L)  lazy view
  Int   Ext   | Int (symbolic)  Ext (filter R)   Int (AND-NOT)   lazy view
  Int   Int   | Int (OR)        Int (AND)        Int (AND-NOT)   lazy view

- Never force enumeration of a possibly infinite operand.
- Prefer eager results whenever an operand is already finite: membership
  in a frozenset is O(1), predicate evaluation is not.
- The table is total: import fails if any (op, kind, kind) is missing.

An intensional operand contributes (domain, predicate). Domain-less
operands (generated domains, views) act as their own domain with a
select-all predicate. When two predicates end up on a domain that is not
their own, they are guarded by membership in their own domain, so a
predicate is only ever applied to elements it was written for.
"""

from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, Tuple
import logging

from .base import MathSet, SetKind
from .bitset import BitSet
from .cardinality import classify
from .config import get_default_config
from .errors import CapacityExceeded, InvalidConstruction
from .extensional import ExtensionalSet
from .intensional import IntensionalSet
from .pairs import OrderedPair
from .predicate import Predicate, PredicateShape
from .views import ProductView, UnionView

logger = logging.getLogger(__name__)


class BinaryOp(Enum):
    UNION = "union"
    INTERSECTION = "intersection"
    DIFFERENCE = "difference"
    PRODUCT = "product"


Rule = Callable[[MathSet, MathSet], MathSet]

_RULES: Dict[Tuple[BinaryOp, SetKind, SetKind], Rule] = {}

EXT = SetKind.EXTENSIONAL
INT = SetKind.INTENSIONAL


def _rule(op: BinaryOp, left: SetKind, right: SetKind):
    def register(fn: Rule) -> Rule:
        _RULES[(op, left, right)] = fn
        return fn
    return register


# =============================================================================
# HELPERS
# =============================================================================

def _split(s: MathSet) -> Tuple[MathSet, Predicate]:
    """(domain, predicate) of an intensional set."""
    if s.domain is None:
        return s, Predicate.always()
    return s.domain, s.predicate


def _guard(predicate: Predicate, own: MathSet, target: MathSet) -> Predicate:
    """Restrict predicate to its own domain when it is moved onto target."""
    if own is target:
        return predicate
    return Predicate.member_of(own) & predicate


def domain_union(left: MathSet, right: MathSet) -> MathSet:
    """Union of two domains without enumerating an infinite one."""
    if left is right:
        return left
    if left.kind is EXT and right.kind is EXT:
        return _union_eager(left, right)
    return UnionView(left, right)


def _smaller_domain(left: MathSet, right: MathSet) -> MathSet:
    a, b = classify(left), classify(right)
    if b.comparable_with(a) and b < a:
        return right
    return left


def _both_bitsets(left: MathSet, right: MathSet) -> bool:
    return isinstance(left, BitSet) and isinstance(right, BitSet) and left.size == right.size


# =============================================================================
# EXTENSIONAL × EXTENSIONAL - eager
# =============================================================================

@_rule(BinaryOp.UNION, EXT, EXT)
def _union_eager(left, right):
    if _both_bitsets(left, right):
        return left.union_bits(right)
    return ExtensionalSet(left.members | right.members)


@_rule(BinaryOp.INTERSECTION, EXT, EXT)
def _intersect_eager(left, right):
    if _both_bitsets(left, right):
        return left.intersect_bits(right)
    return ExtensionalSet(left.members & right.members)


@_rule(BinaryOp.DIFFERENCE, EXT, EXT)
def _difference_eager(left, right):
    if _both_bitsets(left, right):
        return left.difference_bits(right)
    return ExtensionalSet(left.members - right.members)


@_rule(BinaryOp.PRODUCT, EXT, EXT)
def _product_eager(left, right):
    limit = get_default_config().product_cap
    requested = len(left) * len(right)
    if requested > limit:
        raise CapacityExceeded(
            f"Cartesian product would hold {requested} pairs, cap is {limit}",
            limit=limit,
            requested=requested,
        )
    return ExtensionalSet(OrderedPair(a, b) for a in left.members for b in right.members)


# =============================================================================
# MIXED - filter the finite side eagerly, keep the lazy side symbolic
# =============================================================================

@_rule(BinaryOp.UNION, EXT, INT)
def _union_ext_int(ext, intensional):
    domain, predicate = _split(intensional)
    merged = domain_union(ext, domain)
    if predicate.shape is PredicateShape.ALL:
        return merged
    return IntensionalSet(merged, Predicate.member_of(ext) | _guard(predicate, domain, merged))


@_rule(BinaryOp.UNION, INT, EXT)
def _union_int_ext(intensional, ext):
    return _union_ext_int(ext, intensional)


@_rule(BinaryOp.INTERSECTION, EXT, INT)
def _intersect_ext_int(ext, intensional):
    return ExtensionalSet(x for x in ext.members if x in intensional)


@_rule(BinaryOp.INTERSECTION, INT, EXT)
def _intersect_int_ext(intensional, ext):
    return _intersect_ext_int(ext, intensional)


@_rule(BinaryOp.DIFFERENCE, EXT, INT)
def _difference_ext_int(ext, intensional):
    return ExtensionalSet(x for x in ext.members if x not in intensional)


@_rule(BinaryOp.DIFFERENCE, INT, EXT)
def _difference_int_ext(intensional, ext):
    domain, predicate = _split(intensional)
    return IntensionalSet(domain, predicate & ~Predicate.member_of(ext))


# =============================================================================
# INTENSIONAL × INTENSIONAL - symbolic, no element access
# =============================================================================

@_rule(BinaryOp.UNION, INT, INT)
def _union_symbolic(left, right):
    left_domain, left_pred = _split(left)
    right_domain, right_pred = _split(right)
    if left_domain is right_domain:
        return IntensionalSet(left_domain, left_pred | right_pred)
    merged = domain_union(left_domain, right_domain)
    if left_pred.shape is PredicateShape.ALL and right_pred.shape is PredicateShape.ALL:
        return merged
    return IntensionalSet(
        merged,
        _guard(left_pred, left_domain, merged) | _guard(right_pred, right_domain, merged),
    )


@_rule(BinaryOp.INTERSECTION, INT, INT)
def _intersect_symbolic(left, right):
    left_domain, left_pred = _split(left)
    right_domain, right_pred = _split(right)
    domain = _smaller_domain(left_domain, right_domain)
    return IntensionalSet(
        domain,
        _guard(left_pred, left_domain, domain) & _guard(right_pred, right_domain, domain),
    )


@_rule(BinaryOp.DIFFERENCE, INT, INT)
def _difference_symbolic(left, right):
    left_domain, left_pred = _split(left)
    right_domain, right_pred = _split(right)
    return IntensionalSet(left_domain, left_pred & ~_guard(right_pred, right_domain, left_domain))


# =============================================================================
# PRODUCT with a lazy operand
# =============================================================================

@_rule(BinaryOp.PRODUCT, EXT, INT)
@_rule(BinaryOp.PRODUCT, INT, EXT)
@_rule(BinaryOp.PRODUCT, INT, INT)
def _product_lazy(left, right):
    return ProductView(left, right)


# =============================================================================
# ENTRY POINT
# =============================================================================

def _check_total() -> None:
    missing = [
        (op.value, left.value, right.value)
        for op in BinaryOp
        for left in SetKind
        for right in SetKind
        if (op, left, right) not in _RULES
    ]
    if missing:
        raise RuntimeError(f"Dispatcher has no rule for {missing}")


_check_total()


def rule_for(op: BinaryOp, left: SetKind, right: SetKind) -> Rule:
    """Rule the dispatcher applies to (op, left kind, right kind)."""
    return _RULES[(op, left, right)]


def dispatch(op: BinaryOp, left: MathSet, right: MathSet) -> MathSet:
    """
    Apply a binary set operation, choosing the result representation.

    Args:
        op: Operation to apply
        left: Left operand
        right: Right operand

    Returns:
        New set; neither operand is modified

    Raises:
        InvalidConstruction: If an operand is not a MathSet
        CapacityExceeded: If an eager product would exceed product_cap
    """
    if not isinstance(left, MathSet) or not isinstance(right, MathSet):
        raise InvalidConstruction(
            f"Cannot {op.value} {type(left).__name__} and {type(right).__name__}"
        )
    rule = _RULES[(op, left.kind, right.kind)]
    logger.debug("%s(%s, %s) -> %s", op.value, left.kind.value, right.kind.value, rule.__name__)
    return rule(left, right)


__all__ = [
    'BinaryOp',
    'dispatch',
    'domain_union',
    'rule_for',
]
