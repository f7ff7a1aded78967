"""Plain-text rendering of derivation trees as an indented outline."""

from typing import List

from gentzen.proofs.tree import Open, Complete, ProofTree


def tree_text(tree: ProofTree, indent: str = "  ") -> str:
    lines: List[str] = []
    _outline(tree, 0, indent, lines)
    return "\n".join(lines)


def _outline(tree: ProofTree, level: int, indent: str, lines: List[str]):
    match tree:
        case Open(claim):
            lines.append(f"{indent * level}{claim}   [open]")
        case Complete(claim, subproofs, rule):
            lines.append(f"{indent * level}{claim}   [{rule}]")
            for subproof in subproofs:
                _outline(subproof, level + 1, indent, lines)
