"""Registry mapping rule names to rule implementations."""

from typing import Dict, List, Type, Union

from gentzen.core.logic import Claim
from .base import ProofRule, Rule, RuleOutcome
from .axiom import AxiomRule, BottomLeftRule
from .negation import NegationLeftRule, NegationRightRule
from .conjunction import ConjunctionLeftRule, ConjunctionRightRule
from .disjunction import DisjunctionLeftRule, DisjunctionRightRule
from .implication import ImplicationLeftRule, ImplicationRightRule


class RuleRegistry:
    """Registry for managing inference rules."""

    def __init__(self):
        self._rules: Dict[ProofRule, Rule] = {}
        self._register_default_rules()

    def _register_default_rules(self):
        """Register the rules of the calculus."""
        for rule_class in (
            AxiomRule, BottomLeftRule,
            NegationLeftRule, NegationRightRule,
            ConjunctionLeftRule, ConjunctionRightRule,
            DisjunctionLeftRule, DisjunctionRightRule,
            ImplicationLeftRule, ImplicationRightRule,
        ):
            self.register(rule_class)

    def register(self, rule_class: Type[Rule]):
        """Register a rule implementation under the rule it implements."""
        rule = rule_class()
        self._rules[rule.rule] = rule

    def get(self, rule: Union[ProofRule, str]) -> Rule:
        """Get the implementation of a rule."""
        if isinstance(rule, str):
            rule = ProofRule.from_name(rule)
        if rule not in self._rules:
            raise ValueError(f"Unknown rule: {rule}")
        return self._rules[rule]

    def list_rules(self) -> List[ProofRule]:
        """List registered rules."""
        return list(self._rules.keys())


_registry = RuleRegistry()


def get_rule(rule: Union[ProofRule, str]) -> Rule:
    """Get a rule instance."""
    return _registry.get(rule)


def apply_rule(claim: Claim, rule: Union[ProofRule, str]) -> RuleOutcome:
    """Apply `rule` once to `claim`."""
    return _registry.get(rule).apply(claim)
