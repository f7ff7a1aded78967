"""Re-checking recorded rule applications."""

import logging
from typing import List

from gentzen.rules.base import Closed
from gentzen.rules.registry import apply_rule
from .tree import Complete, ProofTree, claim_of, iter_nodes

logger = logging.getLogger(__name__)


def verify(tree: ProofTree) -> List[Complete]:
    """Return the `Complete` nodes that do not follow from their rule.

    A node is accepted when applying its recorded rule to its recorded claim
    closes the claim with exactly the claims of its subproofs, in order.
    """
    failures = []
    for node in iter_nodes(tree):
        if not isinstance(node, Complete):
            continue
        outcome = apply_rule(node.claim, node.rule)
        expected = outcome.subclaims if isinstance(outcome, Closed) else None
        actual = tuple(claim_of(subproof) for subproof in node.subproofs)
        if expected != actual:
            logger.warning("%s does not derive %s", node.rule, node.claim)
            failures.append(node)
    return failures


def is_sound(tree: ProofTree) -> bool:
    return not verify(tree)
