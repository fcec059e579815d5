"""
ExtensionalSet - finite, materialized sets.

Design principles:
- Backed by a frozenset: de-duplicated, O(1) average membership
- Fully immutable; every operation returns a new set
- Equality and hashing depend on membership only, never on order
- Cardinality is always Finite(len)

Power sets are eager here and capped: asking for P(A) with 2^|A| above
power_set_cap raises CapacityExceeded before anything is allocated. Use
lazy_power_set() for a view that enumerates subsets on demand.
"""

from __future__ import annotations
from typing import Any, Iterable, Iterator, List, Optional, Sequence

import numpy as np

from .base import MathSet, SetKind
from .config import get_default_config
from .errors import CapacityExceeded, InvalidConstruction
from .sequence import LazySequence


# =============================================================================
# SUBSET ENUMERATION
# =============================================================================

def mask_indices(mask: int, n: int) -> np.ndarray:
    """
    Indices of the set bits of an n-bit mask.

    Works for any n: the mask is unpacked byte-wise, so masks wider than
    64 bits never overflow a numpy integer.
    """
    if n == 0:
        return np.empty(0, dtype=np.intp)
    raw = np.frombuffer(mask.to_bytes((n + 7) // 8, 'little'), dtype=np.uint8)
    bits = np.unpackbits(raw, bitorder='little')[:n]
    return np.flatnonzero(bits)


def iter_subsets(items: Sequence[Any]) -> Iterator[ExtensionalSet]:
    """All 2^n subsets of items, by increasing bitmask."""
    n = len(items)
    for mask in range(1 << n):
        yield ExtensionalSet(items[i] for i in mask_indices(mask, n))


class ExtensionalSet(MathSet):
    """
    Finite set defined by explicit enumeration.

    Example:
        >>> a = ExtensionalSet([1, 2, 2, 3])
        >>> len(a), 2 in a
        (3, True)
        >>> sorted((a | ExtensionalSet([4])).members)
        [1, 2, 3, 4]
    """

    kind = SetKind.EXTENSIONAL

    def __init__(self, elements: Iterable[Any] = ()):
        try:
            self._members = frozenset(elements)
        except TypeError as e:
            raise InvalidConstruction(f"Set elements must be hashable: {e}") from e

    @classmethod
    def from_iterable(cls, iterable: Iterable[Any]) -> ExtensionalSet:
        return cls(iterable)

    @classmethod
    def from_range(cls, start: int, stop: Optional[int] = None, step: int = 1) -> ExtensionalSet:
        """ExtensionalSet(range(start, stop, step)); one argument means range(start)."""
        if stop is None:
            start, stop = 0, start
        return cls(range(start, stop, step))

    @property
    def members(self) -> frozenset:
        """The backing frozenset."""
        return self._members

    def __contains__(self, element: Any) -> bool:
        try:
            return element in self._members
        except TypeError:
            # unhashable values cannot be members
            return False

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._members)

    def elements(self) -> LazySequence:
        return LazySequence(lambda: self._members)

    # -------------------------------------------------------------------------
    # Power set
    # -------------------------------------------------------------------------

    def power_set(self, cap: Optional[int] = None) -> ExtensionalSet:
        """
        Eager power set.

        Args:
            cap: Maximum number of subsets (default: config power_set_cap)

        Raises:
            CapacityExceeded: If 2^|A| > cap
        """
        limit = cap if cap is not None else get_default_config().power_set_cap
        n = len(self._members)
        requested = 1 << n
        if requested > limit:
            raise CapacityExceeded(
                f"Power set of a {n}-element set has {requested} members, cap is {limit}",
                limit=limit,
                requested=requested,
            )
        return ExtensionalSet(iter_subsets(self._sorted_items()))

    def lazy_power_set(self) -> MathSet:
        """Power set view that enumerates subsets on demand."""
        from .views import PowerSetView
        return PowerSetView(self)

    def _sorted_items(self) -> List[Any]:
        try:
            return sorted(self._members)
        except TypeError:
            return list(self._members)

    # -------------------------------------------------------------------------
    # Python protocols
    # -------------------------------------------------------------------------

    def __eq__(self, other):
        if isinstance(other, ExtensionalSet):
            return self._members == other._members
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash(self._members)

    def __repr__(self) -> str:
        body = ", ".join(repr(x) for x in self._sorted_items())
        return f"ExtensionalSet({{{body}}})"


EMPTY_SET = ExtensionalSet()


__all__ = [
    'ExtensionalSet',
    'EMPTY_SET',
    'iter_subsets',
    'mask_indices',
]
