"""Truth-value semantics and falsifying assignments for open derivations.

A stuck leaf holds only literals and falsity, shares no formula between its
sides and has no falsity on the left. Making exactly its left-hand literals
true falsifies it, and because every rule of the calculus is invertible the
same assignment falsifies the root claim.
"""

from typing import Dict, Optional

from gentzen.core.logic import Formula, Bottom, Literal, Not, And, Or, Implication, Claim
from .tree import ProofTree, claim_of, open_leaves


def evaluate(formula: Formula, assignment: Dict[str, bool]) -> bool:
    """Truth value of `formula`; literals missing from `assignment` are false."""
    match formula:
        case Bottom():
            return False
        case Literal(name):
            return assignment.get(name, False)
        case Not(operand):
            return not evaluate(operand, assignment)
        case And(lhs, rhs):
            return evaluate(lhs, assignment) and evaluate(rhs, assignment)
        case Or(lhs, rhs):
            return evaluate(lhs, assignment) or evaluate(rhs, assignment)
        case Implication(lhs, rhs):
            return not evaluate(lhs, assignment) or evaluate(rhs, assignment)
    raise TypeError(f"Expected formula, got {formula!r}")


def holds(claim: Claim, assignment: Dict[str, bool]) -> bool:
    """True if the assignment satisfies some goal or falsifies some hypothesis."""
    return (not all(evaluate(f, assignment) for f in claim.lhs)
            or any(evaluate(f, assignment) for f in claim.rhs))


def leaf_assignment(claim: Claim) -> Dict[str, bool]:
    names = set()
    for formula in claim.formulas:
        names |= formula.literals()
    hypotheses = {f.name for f in claim.lhs if isinstance(f, Literal)}
    return {name: name in hypotheses for name in sorted(names)}


def countermodel(tree: ProofTree) -> Optional[Dict[str, bool]]:
    """An assignment falsifying the root claim, or None if the tree is closed.

    The assignment is read off the leftmost open leaf and covers every
    literal of the root claim. It is only meaningful for trees searched
    with every rule, whose open leaves are stuck.
    """
    leaves = open_leaves(tree)
    if not leaves:
        return None
    assignment = leaf_assignment(leaves[0])
    root = claim_of(tree)
    for formula in root.formulas:
        for name in formula.literals():
            assignment.setdefault(name, False)
    return dict(sorted(assignment.items()))
