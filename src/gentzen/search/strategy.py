"""Fixed-order proof search.

The strategy tries its rules one after another against an open claim and
commits to the first rule that closes it; the premises are then searched
independently. Every rule other than Axiom and LBot removes at least one
connective from each premise, so the recursion is bounded by the size of the
input claim.
"""

import logging
from typing import Iterable, Optional, Sequence, Union

from gentzen.core.logic import Claim
from gentzen.proofs.tree import Complete, Open, ProofTree
from gentzen.rules.base import Closed, ProofRule
from gentzen.rules.registry import apply_rule

logger = logging.getLogger(__name__)


# Closing rules first, then rules with one premise, then branching rules.
DEFAULT_ORDER = (
    ProofRule.LBot,
    ProofRule.Axiom,
    ProofRule.LNeg,
    ProofRule.RNeg,
    ProofRule.LAnd,
    ProofRule.ROr,
    ProofRule.RImpl,
    ProofRule.RAnd,
    ProofRule.LOr,
    ProofRule.LImpl,
)


class SearchStrategy:
    """Recursive search over an explicit, ordered list of rules."""

    def __init__(self, order: Optional[Iterable[Union[ProofRule, str]]] = None):
        """
        Initialize the strategy.

        Args:
            order: Rules to try, in priority order. Names are accepted.
                   Defaults to DEFAULT_ORDER.

        Raises:
            ValueError: If an entry is not a known rule, or the order
                        repeats a rule or tries a decomposition rule
                        before Axiom or LBot
        """
        if order is None:
            order = DEFAULT_ORDER
        if isinstance(order, str) or not isinstance(order, Iterable):
            raise ValueError(f"Search order must be a list of rules, got {order!r}")
        self.order = tuple(self._as_rule(rule) for rule in order)
        self._validate()

    @staticmethod
    def _as_rule(rule) -> ProofRule:
        if isinstance(rule, ProofRule):
            return rule
        if isinstance(rule, str):
            return ProofRule.from_name(rule)
        raise ValueError(f"Expected a rule or rule name, got {rule!r}")

    def _validate(self):
        if not self.order:
            raise ValueError("Search order is empty")
        if len(set(self.order)) != len(self.order):
            raise ValueError(f"Search order repeats a rule: {self.order}")
        seen_decomposition = False
        for rule in self.order:
            if not rule.closes_leaf:
                seen_decomposition = True
            elif seen_decomposition:
                raise ValueError(
                    f"{rule} must come before every decomposition rule"
                )

    @property
    def uses_every_rule(self) -> bool:
        """True if no rule of the calculus is left out of the order."""
        return set(self.order) == set(ProofRule)

    def expand(self, claim: Claim) -> Optional[Closed]:
        """First successful rule application for the claim, if any."""
        for rule in self.order:
            outcome = apply_rule(claim, rule)
            if isinstance(outcome, Closed):
                return outcome
        return None

    def search(self, tree: ProofTree) -> ProofTree:
        """
        Extend an open tree as far as the rules allow.

        Args:
            tree: The tree to search. Complete trees are returned as they are.

        Returns:
            A tree that is either fully closed or whose open leaves admit no
            rule of the strategy
        """
        match tree:
            case Complete():
                return tree
            case Open(claim):
                outcome = self.expand(claim)
                if outcome is None:
                    logger.debug("Stuck on %s", claim)
                    return tree
                logger.debug("%s closes %s with %d premise(s)",
                             outcome.rule, claim, len(outcome.subclaims))
                return Complete(
                    claim,
                    [self.search(Open(subclaim)) for subclaim in outcome.subclaims],
                    outcome.rule
                )
        raise TypeError(f"Expected proof tree, got {tree!r}")

    def __repr__(self) -> str:
        return f"SearchStrategy(order=[{', '.join(map(str, self.order))}])"


_default = SearchStrategy()


def search(tree: ProofTree, strategy: Optional[SearchStrategy] = None) -> ProofTree:
    """Search `tree` with `strategy` (the default order if omitted)."""
    return (strategy or _default).search(tree)


def get_strategy(order: Optional[Sequence[Union[ProofRule, str]]] = None) -> SearchStrategy:
    """Get a strategy for `order`, sharing the default instance when possible."""
    if order is None:
        return _default
    return SearchStrategy(order)
