"""
Gentzen: proof search in a propositional sequent calculus.

Gentzen decides sequents such as `p & q => q & p` by decomposing them with
the rules of a contraction-free sequent calculus and records the result as
a derivation tree. It includes:

- Propositional formulas and two-sided claims
- Ten inference rules (axiom, falsity and left/right rules per connective)
- A fixed-order recursive search strategy
- A lark-based reader for the sequent syntax
- LaTeX and plain-text rendering of derivations
- JSON serialization and re-verification of derivations

Basic usage:
    >>> from gentzen import *
    >>> claim = read_string("p & q => q & p")
    >>> tree = prove(claim)
    >>> is_closed(tree)
    True
"""

__version__ = "0.1.0"

# Core logic structures
from gentzen.core import (
    Formula, Bottom, Literal, Not, And, Or, Implication,
    Claim, precedence,
    save_claim, load_claim
)

# Inference rules
from gentzen.rules import (
    ProofRule, Rule, RuleOutcome, StillOpen, Closed,
    get_rule, apply_rule
)

# Derivation trees
from gentzen.proofs import (
    Open, Complete, ProofTree,
    is_closed, open_leaves, depth, rules_used,
    verify, is_sound,
    save_tree, load_tree
)

# Search
from gentzen.search import (
    DEFAULT_ORDER, SearchStrategy, search
)

# File formats
from gentzen.fileformats import (
    read_string, read_file, read_formula,
    get_format_handler,
    SequentSyntaxError, LexicalError, StructuralError
)

# Rendering
from gentzen.render import render, tree_latex, claim_latex, tree_text

# Configuration
from gentzen.utils.config import get_config


def prove(claim: Claim, strategy: SearchStrategy = None) -> ProofTree:
    """
    Search for a derivation of a claim.

    Args:
        claim: The claim to prove
        strategy: Search strategy to use (default: the fixed rule order)

    Returns:
        The derivation tree; it is closed iff no open leaf remains
    """
    return search(Open(claim), strategy)


__all__ = [
    # Version
    "__version__",

    # Core logic
    "Formula", "Bottom", "Literal", "Not", "And", "Or", "Implication",
    "Claim", "precedence",
    "save_claim", "load_claim",

    # Rules
    "ProofRule", "Rule", "RuleOutcome", "StillOpen", "Closed",
    "get_rule", "apply_rule",

    # Proofs
    "Open", "Complete", "ProofTree",
    "is_closed", "open_leaves", "depth", "rules_used",
    "verify", "is_sound",
    "save_tree", "load_tree",

    # Search
    "DEFAULT_ORDER", "SearchStrategy", "search",

    # File formats
    "read_string", "read_file", "read_formula",
    "get_format_handler",
    "SequentSyntaxError", "LexicalError", "StructuralError",

    # Rendering
    "render", "tree_latex", "claim_latex", "tree_text",

    # Configuration
    "get_config",

    # High-level API
    "prove"
]
