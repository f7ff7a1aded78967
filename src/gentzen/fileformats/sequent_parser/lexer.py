from lark import Lark

sequentlexer = Lark(r"""
    %import common.WS
    %ignore WS

    claim : formula_list "=>" formula_list
    formula_list : (formula ("," formula)*)?

    ?formula : disjunction "->" formula -> implication
             | disjunction
    ?disjunction : conjunction "|" disjunction -> lor
                 | conjunction
    ?conjunction : unary "&" conjunction -> land
                 | unary
    ?unary : "!" unary -> lnot
           | BOTTOM -> bottom
           | NAME -> literal
           | "(" formula ")"

    BOTTOM : "false"
    NAME : /[A-Za-z][A-Za-z0-9_]*/
""", start="claim", parser="lalr", lexer="basic")
