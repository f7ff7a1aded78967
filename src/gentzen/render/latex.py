"""LaTeX rendering of formulas, claims and derivation trees.

A complete node becomes a fraction whose numerator holds the rendered
subproofs and whose denominator holds the claim, followed by the symbol of
the closing rule. Open leaves render as their bare claim.
"""

from gentzen.core.logic import Formula, Bottom, Literal, Not, And, Or, Implication, Claim
from gentzen.proofs.tree import Open, Complete, ProofTree
from gentzen.rules.base import ProofRule


RULE_SYMBOLS = {
    ProofRule.Axiom: r"Ax",
    ProofRule.LBot: r"\bot L",
    ProofRule.LNeg: r"\neg L",
    ProofRule.RNeg: r"\neg R",
    ProofRule.LAnd: r"\wedge L",
    ProofRule.RAnd: r"\wedge R",
    ProofRule.LOr: r"\vee L",
    ProofRule.ROr: r"\vee R",
    ProofRule.LImpl: r"\rightarrow L",
    ProofRule.RImpl: r"\rightarrow R",
}

_CONNECTIVES = {
    And: r" \wedge ",
    Or: r" \vee ",
    Implication: r" \rightarrow ",
}


def _group(formula: Formula, parenthesize: bool) -> str:
    if parenthesize:
        return r"\left(" + formula_latex(formula) + r"\right)"
    return formula_latex(formula)


def formula_latex(formula: Formula) -> str:
    match formula:
        case Bottom():
            return r"\bot"
        case Literal(name):
            return name
        case Not(operand):
            return r"\neg " + _group(operand, formula.precedence < operand.precedence)
        case Implication(lhs, rhs):
            # Right-associative: a nested implication on the left is grouped.
            return (_group(lhs, formula.precedence <= lhs.precedence)
                    + _CONNECTIVES[Implication]
                    + _group(rhs, formula.precedence < rhs.precedence))
        case And(lhs, rhs) | Or(lhs, rhs):
            return (_group(lhs, formula.precedence < lhs.precedence)
                    + _CONNECTIVES[type(formula)]
                    + _group(rhs, formula.precedence < rhs.precedence))
    raise TypeError(f"Expected formula, got {formula!r}")


def claim_latex(claim: Claim) -> str:
    lhs = ", ".join(formula_latex(f) for f in claim.lhs)
    rhs = ", ".join(formula_latex(f) for f in claim.rhs)
    return lhs + r" \Rightarrow " + rhs


def rule_latex(rule: ProofRule) -> str:
    return RULE_SYMBOLS[rule]


def tree_latex(tree: ProofTree) -> str:
    match tree:
        case Open(claim):
            return claim_latex(claim)
        case Complete(claim, subproofs, rule):
            numerator = r"\quad ".join(tree_latex(subproof) for subproof in subproofs)
            return (r"\frac{" + numerator + r"}{" + claim_latex(claim)
                    + r"}\quad " + rule_latex(rule))
    raise TypeError(f"Expected proof tree, got {tree!r}")


def latex_document(tree: ProofTree) -> str:
    """Wrap a rendered tree into a standalone LaTeX document."""
    return "\n".join([
        r"\documentclass{article}",
        r"\usepackage{amsmath}",
        r"\begin{document}",
        r"\[",
        tree_latex(tree),
        r"\]",
        r"\end{document}",
        "",
    ])
