"""Disjunction rules."""

from gentzen.core.logic import Claim, Or
from .base import DecompositionRule, ProofRule


class DisjunctionLeftRule(DecompositionRule):
    """G, A | B => D  from  G, A => D  and  G, B => D"""

    side = 'lhs'
    connective = Or

    @property
    def rule(self) -> ProofRule:
        return ProofRule.LOr

    def decompose(self, rest: Claim, formula: Or):
        return (
            rest.extend(lhs=[formula.lhs]),
            rest.extend(lhs=[formula.rhs]),
        )


class DisjunctionRightRule(DecompositionRule):
    """G => D, A | B  from  G => D, A, B"""

    side = 'rhs'
    connective = Or

    @property
    def rule(self) -> ProofRule:
        return ProofRule.ROr

    def decompose(self, rest: Claim, formula: Or):
        return (rest.extend(rhs=[formula.lhs, formula.rhs]),)
