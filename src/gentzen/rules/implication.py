"""Implication rules."""

from gentzen.core.logic import Claim, Implication
from .base import DecompositionRule, ProofRule


class ImplicationLeftRule(DecompositionRule):
    """G, A -> B => D  from  G => D, A  and  G, B => D

    The implication is consumed: neither premise keeps a copy of it.
    """

    side = 'lhs'
    connective = Implication

    @property
    def rule(self) -> ProofRule:
        return ProofRule.LImpl

    def decompose(self, rest: Claim, formula: Implication):
        return (
            rest.extend(rhs=[formula.lhs]),
            rest.extend(lhs=[formula.rhs]),
        )


class ImplicationRightRule(DecompositionRule):
    """G => D, A -> B  from  G, A => D, B"""

    side = 'rhs'
    connective = Implication

    @property
    def rule(self) -> ProofRule:
        return ProofRule.RImpl

    def decompose(self, rest: Claim, formula: Implication):
        return (rest.extend(lhs=[formula.lhs], rhs=[formula.rhs]),)
