"""
Set Algebra Errors

Every failure raised by the engine derives from SetAlgebraError. Each class
also subclasses the builtin exception a caller would naturally catch, so
generic handlers (ValueError, RuntimeError, ...) keep working.

Taxonomy:
- InvalidConstruction:       self-contradictory inputs at creation time
- NonFiniteMaterialization:  enumeration requested on a non-finite set
- CapacityExceeded:          result would exceed a configured safety cap
- NonEnumerable:             the set has no enumeration at all

Predicates handed to an IntensionalSet must be pure. That obligation is
documented, not checked: an impure predicate gives undefined results.
"""

from __future__ import annotations
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .cardinality import Cardinality


class SetAlgebraError(Exception):
    """Base class for all set algebra failures."""


class InvalidConstruction(SetAlgebraError, ValueError):
    """Raised when a set cannot be built from the given inputs."""


class NonFiniteMaterialization(SetAlgebraError, RuntimeError):
    """
    Raised when a set whose cardinality is not Finite would have to be
    enumerated in full.

    Recover by taking a bounded prefix of ``elements()`` instead.
    """

    def __init__(self, message: str, cardinality: Optional[Cardinality] = None):
        super().__init__(message)
        self.cardinality = cardinality


class CapacityExceeded(SetAlgebraError, MemoryError):
    """
    Raised when a result would exceed a configured cap.

    Attributes:
        limit: The cap that was exceeded
        requested: Size that was asked for, or None when the overflow was
            only discovered while enumerating
    """

    def __init__(self, message: str, limit: int, requested: Optional[int] = None):
        super().__init__(message)
        self.limit = limit
        self.requested = requested


class NonEnumerable(SetAlgebraError, TypeError):
    """Raised by elements() on a set that has membership but no enumeration."""


__all__ = [
    'SetAlgebraError',
    'InvalidConstruction',
    'NonFiniteMaterialization',
    'CapacityExceeded',
    'NonEnumerable',
]
