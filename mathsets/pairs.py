"""
Ordered pairs.

OrderedPair(a, b) is the relationship primitive used by products and by
everything built on top of them (relations, functions). Its equality is
the equality of its Kuratowski encoding

    (a, b) = {{a}, {a, b}}

which guarantees (a, b) == (c, d) iff a == c and b == d.
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Iterator

from .extensional import ExtensionalSet


@dataclass(frozen=True, eq=False)
class OrderedPair:
    """
    Ordered pair (first, second).

    Components must satisfy the element contract (hashable, stable
    equality).

    Example:
        >>> OrderedPair(1, 2) == OrderedPair(1, 2)
        True
        >>> OrderedPair(1, 2) == OrderedPair(2, 1)
        False
    """
    first: Any
    second: Any

    @cached_property
    def kuratowski(self) -> ExtensionalSet:
        """{{first}, {first, second}}"""
        return ExtensionalSet((
            ExtensionalSet((self.first,)),
            ExtensionalSet((self.first, self.second)),
        ))

    def to_kuratowski(self) -> ExtensionalSet:
        return self.kuratowski

    def swap(self) -> OrderedPair:
        return OrderedPair(self.second, self.first)

    def __iter__(self) -> Iterator[Any]:
        yield self.first
        yield self.second

    def __eq__(self, other):
        if not isinstance(other, OrderedPair):
            return NotImplemented
        return self.kuratowski == other.kuratowski

    def __hash__(self) -> int:
        return hash(self.kuratowski)

    def __repr__(self) -> str:
        return f"({self.first!r}, {self.second!r})"


__all__ = [
    'OrderedPair',
]
