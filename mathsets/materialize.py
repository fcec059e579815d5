"""
Materialization Boundary

The single sanctioned path from any set to a concrete, finite collection:

    materialize(s) -> ExtensionalSet

- Extensional input is returned unchanged. It is already in memory, so
  only an explicit cap= applies to it, never the configured default.
- Cardinality not Finite              -> NonFiniteMaterialization
- Finite but above the cap            -> CapacityExceeded
- Enumeration pulls more than the cap -> CapacityExceeded (a domain
  whose finiteness was only established empirically). Pulls are counted,
  not distinct members, so a source that repeats itself forever still
  stops at the cap.

This is the only place allowed to loop over a set without a previously
established finite bound. Callers that only need some elements should
use take() instead, which never enumerates past k.
"""

from __future__ import annotations
from typing import Any, List, Optional, TYPE_CHECKING
import logging

from .base import MathSet, SetKind
from .cardinality import classify
from .config import get_default_config
from .errors import CapacityExceeded, NonFiniteMaterialization

if TYPE_CHECKING:
    from .extensional import ExtensionalSet

logger = logging.getLogger(__name__)


def materialize(s: MathSet, cap: Optional[int] = None) -> ExtensionalSet:
    """
    Force full enumeration of a set.

    Args:
        s: Set to materialize
        cap: Maximum element count (default: config materialize_cap,
            which extensional input is exempt from)

    Returns:
        ExtensionalSet with the same members

    Raises:
        NonFiniteMaterialization: If s is not Finite
        CapacityExceeded: If s has more than cap elements
    """
    from .extensional import ExtensionalSet

    if s.kind is SetKind.EXTENSIONAL:
        if cap is not None and len(s) > cap:
            raise CapacityExceeded(
                f"Set holds {len(s)} elements, cap is {cap}",
                limit=cap,
                requested=len(s),
            )
        return s

    limit = cap if cap is not None else get_default_config().materialize_cap
    cardinality = classify(s)
    if not cardinality.is_finite:
        raise NonFiniteMaterialization(
            f"Cannot materialize {s!r}: cardinality is {cardinality}",
            cardinality,
        )
    if cardinality.count > limit:
        raise CapacityExceeded(
            f"Cannot materialize {cardinality.count} elements, cap is {limit}",
            limit=limit,
            requested=cardinality.count,
        )

    logger.debug("materializing %s (%s elements)", type(s).__name__, cardinality)
    collected = set()
    for pulled, element in enumerate(s.elements(), 1):
        if pulled > limit:
            raise CapacityExceeded(
                f"Enumeration of {s!r} passed the cap of {limit} elements",
                limit=limit,
            )
        collected.add(element)
    return ExtensionalSet(collected)


def take(s: MathSet, k: int) -> List[Any]:
    """Bounded prefix of s: at most k elements, never enumerating further."""
    return s.elements().take(k)


def materialize_or_prefix(s: MathSet, k: int) -> List[Any]:
    """
    All members when s is Finite and small enough, otherwise the first k.

    The caller opts in to truncation explicitly by using this function.
    """
    try:
        members = materialize(s, cap=k).members
    except (NonFiniteMaterialization, CapacityExceeded) as e:
        logger.debug("falling back to a %d-element prefix: %s", k, e)
        return take(s, k)
    return list(members)


__all__ = [
    'materialize',
    'take',
    'materialize_or_prefix',
]
