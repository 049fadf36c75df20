"""
Reference grammar for the expression language.

The same language the precedence-climbing Parser accepts, written as a
layered LALR grammar. It builds the same node types, so the two parsers can
be checked against each other expression by expression.
"""
from lark import Lark, Transformer, v_args
from lark.exceptions import LarkError

from .errors import ParseError
from .nodes import Add, And, Caret, Divide, Multiply, Negative, Node, Number, Or, Subtract

GRAMMAR = r"""
?start: expr
?expr: bit_expr
?bit_expr: add_expr ((AMP|PIPE) add_expr)*
?add_expr: mul_expr ((PLUS|MINUS) mul_expr)*
?mul_expr: pow_expr ((STAR|SLASH) pow_expr)*
?pow_expr: unary_expr ("^" pow_expr)?
?unary_expr: MINUS unary_expr -> neg
           | atom
?atom: NUMBER        -> number
     | "(" expr ")"
AMP: "&"
PIPE: "|"
PLUS: "+"
MINUS: "-"
STAR: "*"
SLASH: "/"
NUMBER: /[0-9]+(\.[0-9]+)?/
%ignore /[ \t\r\n]+/
"""

parser = Lark(GRAMMAR, start="start", parser="lalr")

BINARY = {"&": And, "|": Or, "+": Add, "-": Subtract, "*": Multiply, "/": Divide}


def _fold(a, rest):
    # operators arrive interleaved with operands: a, op, b, op, c
    n = a
    it = iter(rest)
    for op, b in zip(it, it):
        n = BINARY[str(op)](n, b)
    return n


@v_args(inline=True)
class ASTBuilder(Transformer):
    def number(self, tok): return Number(float(tok))
    def neg(self, _minus, operand): return Negative(operand)
    def pow_expr(self, a, b): return Caret(a, b)
    def bit_expr(self, a, *rest): return _fold(a, rest)
    def add_expr(self, a, *rest): return _fold(a, rest)
    def mul_expr(self, a, *rest): return _fold(a, rest)


def parse_reference(src: str) -> Node:
    try:
        tree = parser.parse(src)
    except LarkError as e:
        raise ParseError(f"reference grammar rejected input: {e}") from e
    return ASTBuilder().transform(tree)
