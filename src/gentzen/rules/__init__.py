"""Inference rules of the sequent calculus."""

from .base import (
    ProofRule, Rule, DecompositionRule,
    RuleOutcome, StillOpen, Closed
)
from .axiom import AxiomRule, BottomLeftRule
from .negation import NegationLeftRule, NegationRightRule
from .conjunction import ConjunctionLeftRule, ConjunctionRightRule
from .disjunction import DisjunctionLeftRule, DisjunctionRightRule
from .implication import ImplicationLeftRule, ImplicationRightRule
from .registry import RuleRegistry, get_rule, apply_rule

__all__ = [
    'ProofRule', 'Rule', 'DecompositionRule',
    'RuleOutcome', 'StillOpen', 'Closed',
    'AxiomRule', 'BottomLeftRule',
    'NegationLeftRule', 'NegationRightRule',
    'ConjunctionLeftRule', 'ConjunctionRightRule',
    'DisjunctionLeftRule', 'DisjunctionRightRule',
    'ImplicationLeftRule', 'ImplicationRightRule',
    'RuleRegistry', 'get_rule', 'apply_rule'
]
