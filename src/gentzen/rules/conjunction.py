"""Conjunction rules."""

from gentzen.core.logic import And, Claim
from .base import DecompositionRule, ProofRule


class ConjunctionLeftRule(DecompositionRule):
    """G, A & B => D  from  G, A, B => D"""

    side = 'lhs'
    connective = And

    @property
    def rule(self) -> ProofRule:
        return ProofRule.LAnd

    def decompose(self, rest: Claim, formula: And):
        return (rest.extend(lhs=[formula.lhs, formula.rhs]),)


class ConjunctionRightRule(DecompositionRule):
    """G => D, A & B  from  G => D, A  and  G => D, B"""

    side = 'rhs'
    connective = And

    @property
    def rule(self) -> ProofRule:
        return ProofRule.RAnd

    def decompose(self, rest: Claim, formula: And):
        return (
            rest.extend(rhs=[formula.lhs]),
            rest.extend(rhs=[formula.rhs]),
        )
