"""
Standard infinite domains.

    NATURALS   0, 1, 2, ...                       CountablyInfinite
    INTEGERS   0, 1, -1, 2, -2, ...               CountablyInfinite
    RATIONALS  0, 1, -1, 2, -2, 1/2, -1/2, ...    CountablyInfinite
    REALS      membership only                    Uncountable

Members are plain Python numbers: int for the naturals and integers,
fractions.Fraction (or int) for the rationals, any finite real number for
the reals. bool is excluded everywhere.

The generators are functions, so every elements() call starts over.
"""

from __future__ import annotations
from fractions import Fraction
from itertools import count
from math import gcd, isfinite
from numbers import Real
from typing import Any, Iterator

from .cardinality import COUNTABLY_INFINITE, UNCOUNTABLE
from .intensional import GeneratedSet


def _is_int(x: Any) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def is_natural(x: Any) -> bool:
    return _is_int(x) and x >= 0


def is_integer(x: Any) -> bool:
    return _is_int(x)


def is_rational(x: Any) -> bool:
    return _is_int(x) or isinstance(x, Fraction)


def is_real(x: Any) -> bool:
    if isinstance(x, bool) or not isinstance(x, Real):
        return False
    return isfinite(x)


def naturals(start: int = 0) -> Iterator[int]:
    """start, start + 1, start + 2, ..."""
    return count(start)


def integers() -> Iterator[int]:
    """Zigzag enumeration 0, 1, -1, 2, -2, ... reaching every integer."""
    yield 0
    for n in count(1):
        yield n
        yield -n


def rationals() -> Iterator[Fraction]:
    """
    Every rational exactly once, by increasing |numerator| + denominator.

    0 first, then each reduced fraction p/q followed by -p/q.
    """
    yield Fraction(0)
    for diagonal in count(2):
        for denominator in range(1, diagonal):
            numerator = diagonal - denominator
            if gcd(numerator, denominator) != 1:
                continue
            positive = Fraction(numerator, denominator)
            yield positive
            yield -positive


NATURALS = GeneratedSet("ℕ", is_natural, naturals, COUNTABLY_INFINITE)
INTEGERS = GeneratedSet("ℤ", is_integer, integers, COUNTABLY_INFINITE)
RATIONALS = GeneratedSet("ℚ", is_rational, rationals, COUNTABLY_INFINITE)
REALS = GeneratedSet("ℝ", is_real, None, UNCOUNTABLE)


__all__ = [
    'NATURALS',
    'INTEGERS',
    'RATIONALS',
    'REALS',
    'naturals',
    'integers',
    'rationals',
    'is_natural',
    'is_integer',
    'is_rational',
    'is_real',
]
