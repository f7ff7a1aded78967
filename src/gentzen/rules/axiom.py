"""Rules that close a claim outright."""

from gentzen.core.logic import Bottom, Claim
from .base import Closed, ProofRule, Rule, RuleOutcome, StillOpen


class AxiomRule(Rule):
    """Closes a claim when some formula occurs on both sides."""

    @property
    def rule(self) -> ProofRule:
        return ProofRule.Axiom

    def apply(self, claim: Claim) -> RuleOutcome:
        for formula in claim.lhs:
            if formula in claim.rhs:
                return Closed(claim, (), self.rule)
        return StillOpen(claim)


class BottomLeftRule(Rule):
    """Closes a claim with falsity among its hypotheses."""

    @property
    def rule(self) -> ProofRule:
        return ProofRule.LBot

    def apply(self, claim: Claim) -> RuleOutcome:
        if Bottom() in claim.lhs:
            return Closed(claim, (), self.rule)
        return StillOpen(claim)
