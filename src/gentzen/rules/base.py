"""Base interface for sequent calculus rules."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Type, Union

from gentzen.core.logic import Claim, Formula


class ProofRule(Enum):
    """Names of the inference rules of the calculus."""
    Axiom = "Axiom"
    LBot = "LBot"
    LNeg = "LNeg"
    RNeg = "RNeg"
    LAnd = "LAnd"
    RAnd = "RAnd"
    LOr = "LOr"
    ROr = "ROr"
    LImpl = "LImpl"
    RImpl = "RImpl"

    @classmethod
    def from_name(cls, name: str) -> 'ProofRule':
        """Look up a rule by name, ignoring case."""
        for rule in cls:
            if rule.value.lower() == name.lower():
                return rule
        raise ValueError(f"Unknown rule: {name}")

    @property
    def closes_leaf(self) -> bool:
        """True for the rules that close a claim without children."""
        return self in (ProofRule.Axiom, ProofRule.LBot)

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class StillOpen:
    """No formula matched; the claim is returned unchanged."""
    claim: Claim


@dataclass(frozen=True)
class Closed:
    """The rule applied; `subclaims` still have to be proved."""
    claim: Claim
    subclaims: Tuple[Claim, ...]
    rule: ProofRule

    def __post_init__(self):
        object.__setattr__(self, 'subclaims', tuple(self.subclaims))


RuleOutcome = Union[StillOpen, Closed]


class Rule(ABC):
    """Abstract base class for inference rules."""

    @property
    @abstractmethod
    def rule(self) -> ProofRule:
        """The rule this object implements."""
        pass

    @property
    def name(self) -> str:
        return self.rule.value

    @abstractmethod
    def apply(self, claim: Claim) -> RuleOutcome:
        """
        Apply the rule once to the claim.

        Args:
            claim: The claim to close or decompose

        Returns:
            Closed with the successor claims if the rule applies,
            StillOpen with the unchanged claim otherwise
        """
        pass

    def is_applicable(self, claim: Claim) -> bool:
        """Check if the rule closes or decomposes the claim."""
        return isinstance(self.apply(claim), Closed)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class DecompositionRule(Rule):
    """A rule that takes apart the leftmost formula of one connective.

    Subclasses name the side they inspect and the connective they match,
    and build the successor claims from the claim with the matched
    formula already removed.
    """

    side: str
    connective: Type[Formula]

    def find(self, claim: Claim) -> Optional[int]:
        """Index of the leftmost formula of `connective` on `side`."""
        for i, formula in enumerate(claim.side(self.side)):
            if isinstance(formula, self.connective):
                return i
        return None

    @abstractmethod
    def decompose(self, rest: Claim, formula: Formula) -> Tuple[Claim, ...]:
        """Build successor claims from `rest` (the claim minus `formula`)."""
        pass

    def apply(self, claim: Claim) -> RuleOutcome:
        index = self.find(claim)
        if index is None:
            return StillOpen(claim)
        formula = claim.side(self.side)[index]
        rest = claim.without(self.side, index)
        return Closed(claim, self.decompose(rest, formula), self.rule)
