"""
BitSet - dense sets of small non-negative integers.

A BitSet over [0, size) stores membership as a numpy boolean vector, so
union, intersection and difference between two BitSets of the same size
are single vectorised operations:

    Union:        mask_a | mask_b
    Intersection: mask_a & mask_b
    Difference:   mask_a & ~mask_b

A BitSet is an ExtensionalSet in every other respect (equality, hashing,
cardinality, interaction with other sets).
"""

from __future__ import annotations
from typing import Any, Iterable, Optional

import numpy as np

from .errors import InvalidConstruction
from .extensional import ExtensionalSet


class BitSet(ExtensionalSet):
    """
    Bit-vector backed set of integers in [0, size).

    Args:
        size: Exclusive upper bound of representable elements
        bits: Boolean vector of length size (default: all False)

    Example:
        >>> a = BitSet.from_set(8, {1, 3, 5})
        >>> b = BitSet.from_set(8, {3, 4})
        >>> sorted(a.union_bits(b).members)
        [1, 3, 4, 5]
    """

    def __init__(self, size: int, bits: Optional[np.ndarray] = None):
        if isinstance(size, bool) or not isinstance(size, int) or size < 0:
            raise InvalidConstruction(f"BitSet size must be a non-negative int, got {size!r}")
        if bits is None:
            mask = np.zeros(size, dtype=bool)
        else:
            mask = np.array(bits, dtype=bool)
            if mask.shape != (size,):
                raise InvalidConstruction(f"Expected bit vector of shape ({size},), got {mask.shape}")
        mask.setflags(write=False)
        self._size = size
        self._mask = mask
        super().__init__(int(i) for i in np.flatnonzero(mask))

    @classmethod
    def from_set(cls, size: int, ints: Iterable[int]) -> BitSet:
        """Build from integers; values outside [0, size) are ignored."""
        mask = np.zeros(max(size, 0), dtype=bool)
        for i in ints:
            if 0 <= i < size:
                mask[i] = True
        return cls(size, mask)

    @property
    def size(self) -> int:
        return self._size

    @property
    def mask(self) -> np.ndarray:
        """Read-only membership vector."""
        return self._mask

    def __contains__(self, element: Any) -> bool:
        try:
            index = int(element)
        except (TypeError, ValueError):
            return False
        if index != element or not 0 <= index < self._size:
            return False
        return bool(self._mask[index])

    # -------------------------------------------------------------------------
    # Vectorised operations
    # -------------------------------------------------------------------------

    def _check_compatible(self, other: BitSet) -> None:
        if self._size != other._size:
            raise InvalidConstruction(
                f"BitSet sizes differ: {self._size} vs {other._size}"
            )

    def union_bits(self, other: BitSet) -> BitSet:
        self._check_compatible(other)
        return BitSet(self._size, np.logical_or(self._mask, other._mask))

    def intersect_bits(self, other: BitSet) -> BitSet:
        self._check_compatible(other)
        return BitSet(self._size, np.logical_and(self._mask, other._mask))

    def difference_bits(self, other: BitSet) -> BitSet:
        self._check_compatible(other)
        return BitSet(self._size, np.logical_and(self._mask, np.logical_not(other._mask)))

    def __repr__(self) -> str:
        body = ", ".join(str(i) for i in np.flatnonzero(self._mask))
        return f"BitSet(size={self._size}, {{{body}}})"


__all__ = [
    'BitSet',
]
