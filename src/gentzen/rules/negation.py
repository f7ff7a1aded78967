"""Negation rules."""

from gentzen.core.logic import Claim, Not
from .base import DecompositionRule, ProofRule


class NegationLeftRule(DecompositionRule):
    """G, !A => D  from  G => D, A"""

    side = 'lhs'
    connective = Not

    @property
    def rule(self) -> ProofRule:
        return ProofRule.LNeg

    def decompose(self, rest: Claim, formula: Not):
        return (rest.extend(rhs=[formula.operand]),)


class NegationRightRule(DecompositionRule):
    """G => D, !A  from  G, A => D"""

    side = 'rhs'
    connective = Not

    @property
    def rule(self) -> ProofRule:
        return ProofRule.RNeg

    def decompose(self, rest: Claim, formula: Not):
        return (rest.extend(lhs=[formula.operand]),)
