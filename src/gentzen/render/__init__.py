"""Rendering derivations for display."""

from gentzen.proofs.tree import ProofTree
from .latex import (
    RULE_SYMBOLS,
    formula_latex, claim_latex, rule_latex, tree_latex, latex_document
)
from .text import tree_text

RENDERERS = {
    'latex': tree_latex,
    'text': tree_text,
}


def render(tree: ProofTree, format: str = 'latex') -> str:
    """Render a derivation tree in one of RENDERERS."""
    if format not in RENDERERS:
        raise ValueError(f"Unknown output format: {format}")
    return RENDERERS[format](tree)


__all__ = [
    'RULE_SYMBOLS', 'RENDERERS', 'render',
    'formula_latex', 'claim_latex', 'rule_latex', 'tree_latex', 'latex_document',
    'tree_text'
]
