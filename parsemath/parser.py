from .errors import LexError, ParseError
from .nodes import Add, And, Caret, Divide, Multiply, Negative, Node, Number, Or, Subtract
from .token import OperatorPrecedence, Token, TokenKind, is_right_associative, precedence_of
from .tokenizer import Tokenizer

NODE_FOR = {
    TokenKind.AND: And,
    TokenKind.OR: Or,
    TokenKind.ADD: Add,
    TokenKind.SUBTRACT: Subtract,
    TokenKind.MULTIPLY: Multiply,
    TokenKind.DIVIDE: Divide,
    TokenKind.CARET: Caret,
}


class Parser:
    """
    Precedence-climbing recursive descent parser.

    Each level of generate_ast only accepts operators binding strictly
    tighter than its minimum precedence, so equal-precedence operators fold
    to the left. Caret recurses one level below Power to fold to the right.
    Unary minus recurses at Negative, which no binary operator exceeds, so it
    wraps only the following primary: -2^2 is (-2)^2.
    """

    def __init__(self, text: str):
        self.tokenizer = Tokenizer(text)
        self.current: Token = self._read()

    def parse(self) -> Node:
        ast = self.generate_ast(OperatorPrecedence.DEFAULT_ZERO)
        if self.current.kind is not TokenKind.EOF:
            raise ParseError(f"unexpected trailing input {self.current!r}", self.current)
        return ast

    def _read(self) -> Token:
        try:
            return self.tokenizer.next()
        except LexError as e:
            raise ParseError(f"invalid input: {e}", lex_error=e) from e

    def advance(self):
        self.current = self._read()

    def generate_ast(self, min_prec: OperatorPrecedence) -> Node:
        left = self.parse_primary()
        while precedence_of(self.current) > min_prec:
            if self.current.kind is TokenKind.EOF:
                break
            op = self.current
            self.advance()
            prec = precedence_of(op)
            if is_right_associative(op):
                prec = OperatorPrecedence(prec - 1)
            right = self.generate_ast(prec)
            left = NODE_FOR[op.kind](left, right)
        return left

    def parse_primary(self) -> Node:
        tok = self.current
        if tok.kind is TokenKind.SUBTRACT:
            self.advance()
            return Negative(self.generate_ast(OperatorPrecedence.NEGATIVE))
        if tok.kind is TokenKind.NUM:
            self.advance()
            return Number(tok.value)
        if tok.kind is TokenKind.LEFT_PAREN:
            self.advance()
            expr = self.generate_ast(OperatorPrecedence.DEFAULT_ZERO)
            self.expect(TokenKind.RIGHT_PAREN, "unbalanced parenthesis")
            return expr
        raise ParseError(f"unable to parse {tok!r}", tok)

    def expect(self, kind: TokenKind, message: str):
        if self.current.kind is not kind:
            raise ParseError(f"{message}: expected {kind.value!r}, got {self.current!r}", self.current)
        self.advance()


def parse(text: str) -> Node:
    return Parser(text).parse()
