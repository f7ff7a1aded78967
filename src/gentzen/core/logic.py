"""Propositional formulas and two-sided sequents (claims)."""

from dataclasses import dataclass, field
from typing import Iterable, Tuple, Union


class Formula:
    """Common behaviour of the formula variants.

    Subclasses are frozen dataclasses, so equality is structural and
    formulas can be used as dict keys or set members.
    """

    __slots__ = ()

    # Binding strength for printing: lower binds tighter.
    precedence = 0

    @property
    def operands(self) -> Tuple['Formula', ...]:
        return ()

    @property
    def size(self) -> int:
        """Number of connectives in the formula (Bottom counts as none)."""
        return 0

    def literals(self) -> set:
        """Names of the literals occurring in the formula."""
        names = set()
        for operand in self.operands:
            names |= operand.literals()
        return names


@dataclass(frozen=True)
class Bottom(Formula):
    def __str__(self):
        return "false"


@dataclass(frozen=True)
class Literal(Formula):
    name: str

    def __str__(self):
        return self.name

    def literals(self) -> set:
        return {self.name}


@dataclass(frozen=True)
class Not(Formula):
    operand: Formula

    @property
    def operands(self):
        return (self.operand,)

    @property
    def size(self):
        return 1 + self.operand.size

    def __str__(self):
        if self.operand.precedence > self.precedence:
            return f"!({self.operand})"
        return f"!{self.operand}"


@dataclass(frozen=True)
class _Binary(Formula):
    lhs: Formula
    rhs: Formula

    symbol = "?"

    @property
    def operands(self):
        return (self.lhs, self.rhs)

    @property
    def size(self):
        return 1 + self.lhs.size + self.rhs.size

    def __str__(self):
        # Connectives are right-associative, so a left operand of equal
        # strength needs parentheses while a right one does not.
        left = f"({self.lhs})" if self.lhs.precedence >= self.precedence else str(self.lhs)
        right = f"({self.rhs})" if self.rhs.precedence > self.precedence else str(self.rhs)
        return f"{left} {self.symbol} {right}"


@dataclass(frozen=True)
class And(_Binary):
    precedence = 1
    symbol = "&"


@dataclass(frozen=True)
class Or(_Binary):
    precedence = 2
    symbol = "|"


@dataclass(frozen=True)
class Implication(_Binary):
    precedence = 3
    symbol = "->"


FormulaType = Union[Bottom, Literal, Not, And, Or, Implication]


def precedence(formula: Formula) -> int:
    """Printing precedence: 0 for atoms and negation, 3 for implication."""
    return formula.precedence


@dataclass(frozen=True)
class Claim:
    """A sequent: the conjunction of `lhs` entails the disjunction of `rhs`.

    Both sides are kept as tuples; order carries no logical meaning but is
    preserved so that derivations print reproducibly.
    """
    lhs: Tuple[Formula, ...] = field(default_factory=tuple)
    rhs: Tuple[Formula, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, 'lhs', tuple(self.lhs))
        object.__setattr__(self, 'rhs', tuple(self.rhs))

    @property
    def size(self) -> int:
        """Total connective count over both sides."""
        return sum(f.size for f in self.lhs) + sum(f.size for f in self.rhs)

    @property
    def formulas(self) -> Tuple[Formula, ...]:
        return self.lhs + self.rhs

    def side(self, name: str) -> Tuple[Formula, ...]:
        if name == 'lhs':
            return self.lhs
        if name == 'rhs':
            return self.rhs
        raise ValueError(f"Unknown side: {name}")

    def without(self, side: str, index: int) -> 'Claim':
        """Return a copy of the claim with one formula removed from `side`."""
        formulas = self.side(side)
        remaining = formulas[:index] + formulas[index + 1:]
        if side == 'lhs':
            return Claim(remaining, self.rhs)
        return Claim(self.lhs, remaining)

    def extend(self, lhs: Iterable[Formula] = (), rhs: Iterable[Formula] = ()) -> 'Claim':
        """Return a copy of the claim with formulas appended to either side."""
        return Claim(self.lhs + tuple(lhs), self.rhs + tuple(rhs))

    def __str__(self):
        left = ", ".join(map(str, self.lhs))
        right = ", ".join(map(str, self.rhs))
        return f"{left} => {right}".strip()
