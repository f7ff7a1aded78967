"""Tests for the sequent reader."""

import unittest

import pytest

from gentzen.core.logic import Bottom, Literal, Not, And, Or, Implication, Claim
from gentzen.fileformats import (
    read_string, read_formula,
    SequentSyntaxError, LexicalError, StructuralError
)


p, q, r = Literal("p"), Literal("q"), Literal("r")


class TestClaims(unittest.TestCase):
    """Test reading whole claims."""

    def test_simple_claim(self):
        self.assertEqual(read_string("p => q"), Claim([p], [q]))

    def test_empty_sides(self):
        self.assertEqual(read_string("=> p"), Claim([], [p]))
        self.assertEqual(read_string("p =>"), Claim([p], []))
        self.assertEqual(read_string("=>"), Claim())

    def test_formula_lists(self):
        claim = read_string("p, q & r => r, p | q")
        self.assertEqual(claim, Claim([p, And(q, r)], [r, Or(p, q)]))

    def test_whitespace_insensitive(self):
        self.assertEqual(read_string("  p&q\n=>\tq  &p \n"), read_string("p & q => q & p"))

    def test_duplicates_kept(self):
        self.assertEqual(read_string("p, p => p").lhs, (p, p))


class TestFormulas(unittest.TestCase):
    """Test precedence and associativity."""

    def test_names(self):
        self.assertEqual(read_formula("Abc_1"), Literal("Abc_1"))

    def test_bottom(self):
        self.assertEqual(read_formula("false"), Bottom())

    def test_false_prefix_is_a_name(self):
        self.assertEqual(read_formula("falsey"), Literal("falsey"))
        self.assertEqual(read_formula("False"), Literal("False"))

    def test_negation_binds_tightest(self):
        self.assertEqual(read_formula("!p & q"), And(Not(p), q))
        self.assertEqual(read_formula("!!p"), Not(Not(p)))
        self.assertEqual(read_formula("!(p & q)"), Not(And(p, q)))

    def test_conjunction_over_disjunction(self):
        self.assertEqual(read_formula("p & q | r"), Or(And(p, q), r))
        self.assertEqual(read_formula("p | q & r"), Or(p, And(q, r)))

    def test_disjunction_over_implication(self):
        self.assertEqual(read_formula("p | q -> r"), Implication(Or(p, q), r))
        self.assertEqual(read_formula("p -> q | r"), Implication(p, Or(q, r)))

    def test_right_associative(self):
        self.assertEqual(read_formula("p -> q -> r"), Implication(p, Implication(q, r)))
        self.assertEqual(read_formula("p & q & r"), And(p, And(q, r)))
        self.assertEqual(read_formula("p | q | r"), Or(p, Or(q, r)))

    def test_parentheses(self):
        self.assertEqual(read_formula("(p -> q) -> r"), Implication(Implication(p, q), r))
        self.assertEqual(read_formula("((p))"), p)

    def test_printed_formula_reads_back(self):
        for text in ["(p -> q) -> r", "!(p | q) & r", "p & q | !r -> false", "(p & q) & r"]:
            formula = read_formula(text)
            self.assertEqual(read_formula(str(formula)), formula)


class TestErrors:
    """Test lexical and structural failures."""

    def test_lexical_error(self):
        with pytest.raises(LexicalError) as excinfo:
            read_string("p => q $ r")
        assert excinfo.value.remainder == "$ r"
        assert excinfo.value.position == 7

    def test_name_must_start_with_letter(self):
        with pytest.raises(LexicalError):
            read_string("1p => p")

    def test_missing_turnstile(self):
        with pytest.raises(StructuralError) as excinfo:
            read_string("p, q")
        assert excinfo.value.token is None

    def test_trailing_tokens(self):
        with pytest.raises(StructuralError) as excinfo:
            read_string("p => q )")
        assert excinfo.value.token == ")"

    def test_two_turnstiles(self):
        with pytest.raises(StructuralError):
            read_string("p => q => r")

    def test_unbalanced_parenthesis(self):
        with pytest.raises(StructuralError):
            read_string("(p => q")

    def test_dangling_connective(self):
        with pytest.raises(StructuralError):
            read_string("p & => q")

    def test_missing_operand_between_names(self):
        with pytest.raises(StructuralError) as excinfo:
            read_string("p q => r")
        assert excinfo.value.token == "q"

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            read_string("p -")
        assert issubclass(LexicalError, SequentSyntaxError)
        assert issubclass(StructuralError, SequentSyntaxError)

    def test_read_formula_rejects_lists(self):
        with pytest.raises(StructuralError):
            read_formula("p, q")
        with pytest.raises(StructuralError):
            read_formula("")

    def test_read_formula_positions_refer_to_formula(self):
        with pytest.raises(StructuralError) as excinfo:
            read_formula("p )")
        assert excinfo.value.position == 2
        assert excinfo.value.token == ")"
        with pytest.raises(LexicalError) as excinfo:
            read_formula("p $ q")
        assert excinfo.value.position == 2
        assert excinfo.value.remainder == "$ q"
        with pytest.raises(StructuralError) as excinfo:
            read_formula("p &")
        assert excinfo.value.position == 3

    def test_expected_tokens_are_readable(self):
        with pytest.raises(StructuralError) as excinfo:
            read_string("p, q")
        error = excinfo.value
        assert "'=>'" in error.expected
        assert not any(name.startswith("__") or name.startswith("$") for name in error.expected)
        assert "__ANON" not in str(error)
        assert "$END" not in str(error)

    def test_end_of_input_is_described(self):
        with pytest.raises(StructuralError) as excinfo:
            read_string("p => q q")
        assert "end of input" in excinfo.value.expected


if __name__ == '__main__':
    unittest.main()
