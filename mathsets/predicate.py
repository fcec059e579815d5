"""
Predicates for intensional sets.

A Predicate wraps a pure boolean function and remembers its SHAPE, so the
dispatcher can combine predicates symbolically and the classifier can
recognise select-all / select-none without evaluating anything.

Shapes:
    ALL      always true
    NONE     always false
    CUSTOM   opaque user function
    MEMBER   x in target (a set)
    AND/OR   conjunction / disjunction of operands
    NOT      negation of one operand

Combinators simplify as they build:
    ALL & p = p        NONE & p = NONE
    ALL | p = ALL      NONE | p = p
    ~ALL = NONE        ~~p = p

Predicates must be pure and idempotent: the engine may call them any
number of times, in any order, from any thread.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Callable, Optional, Tuple

from .errors import InvalidConstruction


class PredicateShape(Enum):
    ALL = "all"
    NONE = "none"
    CUSTOM = "custom"
    MEMBER = "member"
    AND = "and"
    OR = "or"
    NOT = "not"


class Predicate:
    """
    Pure boolean function with a recognisable shape.

    Build with the factories (of, always, never, member_of) and combine
    with &, |, ~, implies() and iff().

    Example:
        >>> even = Predicate.of(lambda x: x % 2 == 0)
        >>> small = Predicate.of(lambda x: x < 10)
        >>> (even & small)(4)
        True
    """

    def __init__(self, shape: PredicateShape, fn: Optional[Callable[[Any], bool]] = None,
                 operands: Tuple[Predicate, ...] = (), target: Any = None,
                 name: Optional[str] = None):
        self._shape = shape
        self._fn = fn
        self._operands = operands
        self._target = target
        self._name = name

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, fn: Any, name: Optional[str] = None) -> Predicate:
        """Wrap a callable; Predicates pass through unchanged."""
        if isinstance(fn, Predicate):
            return fn
        if not callable(fn):
            raise InvalidConstruction(f"Predicate must be callable, got {type(fn).__name__}")
        return cls(PredicateShape.CUSTOM, fn=fn, name=name or getattr(fn, '__name__', None))

    @classmethod
    def always(cls) -> Predicate:
        return _ALWAYS

    @classmethod
    def never(cls) -> Predicate:
        return _NEVER

    @classmethod
    def member_of(cls, s: Any) -> Predicate:
        """x -> x in s"""
        return cls(PredicateShape.MEMBER, target=s)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def shape(self) -> PredicateShape:
        return self._shape

    @property
    def operands(self) -> Tuple[Predicate, ...]:
        return self._operands

    @property
    def target(self) -> Any:
        """Set tested by a MEMBER predicate."""
        return self._target

    # -------------------------------------------------------------------------
    # Evaluation
    # -------------------------------------------------------------------------

    def __call__(self, x: Any) -> bool:
        shape = self._shape
        if shape is PredicateShape.ALL:
            return True
        if shape is PredicateShape.NONE:
            return False
        if shape is PredicateShape.CUSTOM:
            return bool(self._fn(x))
        if shape is PredicateShape.MEMBER:
            return x in self._target
        if shape is PredicateShape.AND:
            return all(p(x) for p in self._operands)
        if shape is PredicateShape.OR:
            return any(p(x) for p in self._operands)
        return not self._operands[0](x)

    # -------------------------------------------------------------------------
    # Combinators
    # -------------------------------------------------------------------------

    def __and__(self, other: Any) -> Predicate:
        other = Predicate.of(other)
        if self._shape is PredicateShape.NONE or other._shape is PredicateShape.NONE:
            return _NEVER
        if self._shape is PredicateShape.ALL:
            return other
        if other._shape is PredicateShape.ALL:
            return self
        return Predicate(PredicateShape.AND, operands=self._flatten(PredicateShape.AND) + other._flatten(PredicateShape.AND))

    def __or__(self, other: Any) -> Predicate:
        other = Predicate.of(other)
        if self._shape is PredicateShape.ALL or other._shape is PredicateShape.ALL:
            return _ALWAYS
        if self._shape is PredicateShape.NONE:
            return other
        if other._shape is PredicateShape.NONE:
            return self
        return Predicate(PredicateShape.OR, operands=self._flatten(PredicateShape.OR) + other._flatten(PredicateShape.OR))

    def __invert__(self) -> Predicate:
        if self._shape is PredicateShape.ALL:
            return _NEVER
        if self._shape is PredicateShape.NONE:
            return _ALWAYS
        if self._shape is PredicateShape.NOT:
            return self._operands[0]
        return Predicate(PredicateShape.NOT, operands=(self,))

    def implies(self, other: Any) -> Predicate:
        """Material implication: ~self | other."""
        return ~self | Predicate.of(other)

    def iff(self, other: Any) -> Predicate:
        """Biconditional: both true or both false."""
        other = Predicate.of(other)
        return (self & other) | (~self & ~other)

    def _flatten(self, shape: PredicateShape) -> Tuple[Predicate, ...]:
        if self._shape is shape:
            return self._operands
        return (self,)

    def __repr__(self) -> str:
        shape = self._shape
        if shape is PredicateShape.ALL:
            return "Predicate(all)"
        if shape is PredicateShape.NONE:
            return "Predicate(none)"
        if shape is PredicateShape.CUSTOM:
            return f"Predicate({self._name or 'custom'})"
        if shape is PredicateShape.MEMBER:
            return f"Predicate(member_of {type(self._target).__name__})"
        if shape is PredicateShape.NOT:
            return f"~{self._operands[0]!r}"
        joiner = " & " if shape is PredicateShape.AND else " | "
        return "(" + joiner.join(repr(p) for p in self._operands) + ")"


_ALWAYS = Predicate(PredicateShape.ALL, name="all")
_NEVER = Predicate(PredicateShape.NONE, name="none")


__all__ = [
    'PredicateShape',
    'Predicate',
]
