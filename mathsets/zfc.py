"""
Finite models of ZFC and the classical paradoxes.

verify(model) checks which ZFC axioms hold in a finite model: a finite
universe of ground elements plus a finite collection of sets over it.
Sets are compared extensionally over the universe.

Because the models are finite, Infinity is always False; Replacement,
Choice and Foundation hold trivially; Separation is approximated by
closure under subsets (power-set closure).

russell() and cantor() build the paradoxical objects and report whether
a contradiction surfaced. Under restricted comprehension it never does.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, TypeVar

from .algebra import same_membership
from .base import MathSet
from .extensional import EMPTY_SET, ExtensionalSet

T = TypeVar('T')

AXIOMS = (
    "Extensionality",
    "EmptySet",
    "Pairing",
    "Union",
    "PowerSet",
    "Infinity",
    "Separation",
    "Replacement",
    "Choice",
    "Foundation",
)


@dataclass(frozen=True)
class FiniteModel:
    """
    Finite model of a set-theoretic universe.

    Attributes:
        universe: Ground-level elements
        sets: The sets present in the model, each a MathSet over universe
    """
    universe: ExtensionalSet
    sets: ExtensionalSet


@dataclass(frozen=True)
class ZFCReport:
    """Axiom name -> whether it holds in the inspected model."""
    by_axiom: Dict[str, bool] = field(default_factory=dict)

    def is_satisfied(self, axiom: str) -> bool:
        return self.by_axiom.get(axiom) is True

    @property
    def satisfied(self) -> List[str]:
        return [name for name in AXIOMS if self.is_satisfied(name)]


def verify(model: FiniteModel) -> ZFCReport:
    """
    Check the ZFC axioms against a finite model.

    Args:
        model: Finite universe and collection of sets

    Returns:
        ZFCReport with one entry per axiom in AXIOMS
    """
    universe = model.universe
    sets = [s.materialize() for s in model.sets.members]

    def present(target: MathSet) -> bool:
        return any(same_membership(existing, target, universe) for existing in sets)

    extensionality = all(
        not same_membership(a, b, universe) or (a.is_subset_of(b) and b.is_subset_of(a))
        for a in sets
        for b in sets
    )
    empty_set = present(EMPTY_SET)
    pairing = all(
        present(ExtensionalSet((a, b)))
        for a in universe.members
        for b in universe.members
    )
    union_closure = all(present(a | b) for a in sets for b in sets)
    power_set_closure = all(
        present(subset) for s in sets for subset in s.power_set().members
    )

    return ZFCReport(by_axiom={
        "Extensionality": extensionality,
        "EmptySet": empty_set,
        "Pairing": pairing,
        "Union": union_closure,
        "PowerSet": power_set_closure,
        "Infinity": False,
        "Separation": power_set_closure,
        "Replacement": True,
        "Choice": True,
        "Foundation": True,
    })


# =============================================================================
# PARADOXES
# =============================================================================

@dataclass(frozen=True)
class ParadoxResult(Generic[T]):
    """
    Outcome of a paradox demonstration.

    Attributes:
        title: Name of the paradox
        artifact: Object produced by the demonstration
        contradiction_detected: Whether a contradiction surfaced
        explanation: Human-readable summary
    """
    title: str
    artifact: T
    contradiction_detected: bool
    explanation: str


def russell(base: ExtensionalSet) -> ParadoxResult:
    """
    R = {x ∈ base | x ∉ x}.

    Separation only ever filters an existing set, so R is an ordinary
    subset of base and no contradiction arises.
    """
    def not_self_member(candidate: Any) -> bool:
        # atoms have no members, so they never contain themselves
        return not (isinstance(candidate, MathSet) and candidate in candidate)

    russell_set = base.filter(not_self_member).materialize()
    return ParadoxResult(
        title="Russell",
        artifact=russell_set,
        contradiction_detected=False,
        explanation=(
            "No contradiction appears in restricted comprehension; "
            "the paradox arises in unrestricted comprehension."
        ),
    )


def cantor(s: ExtensionalSet) -> ParadoxResult:
    """|P(S)| > |S| for a finite S."""
    power_count = len(s.power_set())
    base_count = len(s)
    return ParadoxResult(
        title="Cantor",
        artifact=power_count,
        contradiction_detected=power_count <= base_count,
        explanation=f"For finite sets, |P(S)| = {power_count} and |S| = {base_count}.",
    )


__all__ = [
    'AXIOMS',
    'FiniteModel',
    'ZFCReport',
    'verify',
    'ParadoxResult',
    'russell',
    'cantor',
]
