"""
mathsets - A Set Algebra Engine

Mathematical sets with two interchangeable representations:

- ExtensionalSet: finite, materialized, de-duplicated members
- IntensionalSet: a domain plus a pure predicate, never enumerated eagerly

================================================================================
ARCHITECTURE
================================================================================

┌─────────────────────────────────────────────────────────────────────────────┐
│  algebra, zfc      - Law checks and finite models                          │
├─────────────────────────────────────────────────────────────────────────────┤
│  dispatch          - Picks the result representation per binary operation  │
├─────────────────────────────────────────────────────────────────────────────┤
│  base (MathSet)    - Capability surface shared by every representation     │
├─────────────────────────────────────────────────────────────────────────────┤
│  extensional, bitset, intensional, views, universe, pairs                  │
├─────────────────────────────────────────────────────────────────────────────┤
│  cardinality, predicate, sequence, materialize, config, errors             │
└─────────────────────────────────────────────────────────────────────────────┘

Quick Start:
    >>> from mathsets import ExtensionalSet, IntensionalSet, NATURALS
    >>> universe = ExtensionalSet(range(1, 6))
    >>> evens = IntensionalSet(universe, lambda x: x % 2 == 0)
    >>> sorted(evens.materialize().members)
    [2, 4]
    >>> sorted((evens | ExtensionalSet([3])).materialize().members)
    [2, 3, 4]
    >>> NATURALS.filter(lambda n: n % 3 == 0).elements().take(4)
    [0, 3, 6, 9]

Only materialize() forces full enumeration, and it refuses (with
NonFiniteMaterialization) whenever the set is not provably Finite.
"""

import logging

__version__ = "0.1.0"

from .errors import (
    SetAlgebraError,
    InvalidConstruction,
    NonFiniteMaterialization,
    CapacityExceeded,
    NonEnumerable,
)
from .config import (
    EngineConfig,
    DEFAULT_ENGINE_CONFIG,
    get_default_config,
    set_default_config,
)
from .cardinality import (
    Cardinality,
    CardinalityKind,
    EMPTY,
    COUNTABLY_INFINITE,
    UNCOUNTABLE,
    UNKNOWN,
    classify,
)
from .predicate import Predicate, PredicateShape
from .sequence import Cursor, LazySequence
from .base import MathSet, SetKind, as_set, mathset_of, mathset_from
from .extensional import ExtensionalSet, EMPTY_SET
from .bitset import BitSet
from .intensional import IntensionalSet, GeneratedSet
from .materialize import materialize, take, materialize_or_prefix
from .pairs import OrderedPair
from .views import UnionView, ProductView, MappedSet, PowerSetView
from .dispatch import BinaryOp, dispatch
from .universe import NATURALS, INTEGERS, RATIONALS, REALS

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "SetAlgebraError",
    "InvalidConstruction",
    "NonFiniteMaterialization",
    "CapacityExceeded",
    "NonEnumerable",
    # Configuration
    "EngineConfig",
    "DEFAULT_ENGINE_CONFIG",
    "get_default_config",
    "set_default_config",
    # Cardinality
    "Cardinality",
    "CardinalityKind",
    "EMPTY",
    "COUNTABLY_INFINITE",
    "UNCOUNTABLE",
    "UNKNOWN",
    "classify",
    # Predicates and sequences
    "Predicate",
    "PredicateShape",
    "Cursor",
    "LazySequence",
    # Sets
    "MathSet",
    "SetKind",
    "as_set",
    "mathset_of",
    "mathset_from",
    "ExtensionalSet",
    "EMPTY_SET",
    "BitSet",
    "IntensionalSet",
    "GeneratedSet",
    "UnionView",
    "ProductView",
    "MappedSet",
    "PowerSetView",
    "OrderedPair",
    # Operations
    "BinaryOp",
    "dispatch",
    "materialize",
    "take",
    "materialize_or_prefix",
    # Domains
    "NATURALS",
    "INTEGERS",
    "RATIONALS",
    "REALS",
]
