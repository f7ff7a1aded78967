"""Derivation trees.

A tree is either an `Open` leaf waiting for a rule, or a `Complete` node
recording the rule that closed its claim together with one subproof per
premise. Trees are immutable; the search builds new nodes instead of
updating old ones.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple, Union

from gentzen.core.logic import Claim
from gentzen.rules.base import ProofRule


@dataclass(frozen=True)
class Open:
    claim: Claim


@dataclass(frozen=True)
class Complete:
    claim: Claim
    subproofs: Tuple['ProofTree', ...]
    rule: ProofRule

    def __post_init__(self):
        object.__setattr__(self, 'subproofs', tuple(self.subproofs))


ProofTree = Union[Open, Complete]


def claim_of(tree: ProofTree) -> Claim:
    match tree:
        case Open(claim) | Complete(claim, _, _):
            return claim
    raise TypeError(f"Expected proof tree, got {tree!r}")


def iter_nodes(tree: ProofTree) -> Iterator[ProofTree]:
    """Yield every node of the tree in pre-order."""
    yield tree
    match tree:
        case Complete(_, subproofs, _):
            for subproof in subproofs:
                yield from iter_nodes(subproof)


def open_leaves(tree: ProofTree) -> List[Claim]:
    """Claims of the open leaves, left to right."""
    return [node.claim for node in iter_nodes(tree) if isinstance(node, Open)]


def is_closed(tree: ProofTree) -> bool:
    """True if no open leaf remains, i.e. the root claim is proved."""
    return not open_leaves(tree)


def depth(tree: ProofTree) -> int:
    """Number of edges on the longest path from the root to a leaf."""
    match tree:
        case Complete(_, subproofs, _) if subproofs:
            return 1 + max(depth(subproof) for subproof in subproofs)
    return 0


def node_count(tree: ProofTree) -> int:
    return sum(1 for _ in iter_nodes(tree))


def rules_used(tree: ProofTree) -> List[ProofRule]:
    """Rules of the `Complete` nodes in pre-order."""
    return [node.rule for node in iter_nodes(tree) if isinstance(node, Complete)]
