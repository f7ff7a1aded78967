from lark import Transformer
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedToken

from gentzen.core.logic import Bottom, Literal, Not, And, Or, Implication, Claim
from gentzen.fileformats.exceptions import LexicalError, StructuralError
from gentzen.fileformats.sequent_parser.lexer import sequentlexer


def read_file(file):
    with open(file, "r") as f:
        data = f.read()
    return read_string(data)


def describe_terminals(names):
    """Turn lark terminal names into the tokens a user would type."""
    described = set()
    for name in names:
        if name == "$END":
            described.add("end of input")
            continue
        try:
            pattern = sequentlexer.get_terminal(name).pattern
        except KeyError:
            described.add(name)
            continue
        if pattern.type == "str":
            described.add(repr(pattern.value))
        else:
            described.add(name.lower())
    return described


def read_string(string):
    try:
        tree = sequentlexer.parse(string)
    except UnexpectedCharacters as e:
        raise LexicalError(string, e.pos_in_stream) from e
    except UnexpectedEOF as e:
        raise StructuralError(None, len(string), describe_terminals(e.expected)) from e
    except UnexpectedToken as e:
        expected = describe_terminals(e.expected)
        if e.token.type == "$END":
            raise StructuralError(None, len(string), expected) from e
        raise StructuralError(e.token.value, e.token.start_pos, expected) from e
    return ClaimConverter().transform(tree)


_FORMULA_PREFIX = "=> "


def read_formula(string):
    """Parse a single formula."""
    offset = len(_FORMULA_PREFIX)
    try:
        claim = read_string(_FORMULA_PREFIX + string)
    except LexicalError as e:
        raise LexicalError(string, e.position - offset) from e
    except StructuralError as e:
        raise StructuralError(e.token, max(e.position - offset, 0), e.expected) from e
    if len(claim.rhs) != 1:
        position = string.find(",")
        if position < 0:
            raise StructuralError(None, len(string))
        raise StructuralError(",", position)
    return claim.rhs[0]


class ClaimConverter(Transformer):
    def claim(self, children):
        lhs, rhs = children
        return Claim(lhs, rhs)

    def formula_list(self, children):
        return tuple(children)

    def implication(self, children):
        return Implication(*children)

    def lor(self, children):
        return Or(*children)

    def land(self, children):
        return And(*children)

    def lnot(self, children):
        return Not(children[0])

    def bottom(self, children):
        return Bottom()

    def literal(self, children):
        return Literal(str(children[0]))
