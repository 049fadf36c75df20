from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional


class TokenKind(Enum):
    AND = "&"
    OR = "|"
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    CARET = "^"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    NUM = "NUM"
    EOF = "EOF"


class OperatorPrecedence(IntEnum):
    """Binding strength, lowest to highest."""
    DEFAULT_ZERO = 0
    AND_OR = 1
    ADD_SUB = 2
    MUL_DIV = 3
    POWER = 4
    NEGATIVE = 5


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: Optional[float] = None

    def __repr__(self):
        if self.kind is TokenKind.NUM:
            return f"Num({self.value!r})"
        if self.kind is TokenKind.EOF:
            return "EOF"
        return f"Token({self.kind.value!r})"


AND = Token(TokenKind.AND)
OR = Token(TokenKind.OR)
ADD = Token(TokenKind.ADD)
SUBTRACT = Token(TokenKind.SUBTRACT)
MULTIPLY = Token(TokenKind.MULTIPLY)
DIVIDE = Token(TokenKind.DIVIDE)
CARET = Token(TokenKind.CARET)
LEFT_PAREN = Token(TokenKind.LEFT_PAREN)
RIGHT_PAREN = Token(TokenKind.RIGHT_PAREN)
EOF = Token(TokenKind.EOF)


def num(value: float) -> Token:
    return Token(TokenKind.NUM, float(value))


# single-character symbol -> token
SYMBOLS = {t.kind.value: t for t in (AND, OR, ADD, SUBTRACT, MULTIPLY, DIVIDE, CARET, LEFT_PAREN, RIGHT_PAREN)}

_PRECEDENCE = {
    TokenKind.AND: OperatorPrecedence.AND_OR,
    TokenKind.OR: OperatorPrecedence.AND_OR,
    TokenKind.ADD: OperatorPrecedence.ADD_SUB,
    TokenKind.SUBTRACT: OperatorPrecedence.ADD_SUB,
    TokenKind.MULTIPLY: OperatorPrecedence.MUL_DIV,
    TokenKind.DIVIDE: OperatorPrecedence.MUL_DIV,
    TokenKind.CARET: OperatorPrecedence.POWER,
}


def precedence_of(token: Token) -> OperatorPrecedence:
    return _PRECEDENCE.get(token.kind, OperatorPrecedence.DEFAULT_ZERO)


def is_right_associative(token: Token) -> bool:
    return token.kind is TokenKind.CARET
