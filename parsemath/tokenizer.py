import math
import re
from typing import List, Optional

from .errors import LexError
from .token import EOF, SYMBOLS, Token, num

DIGITS = "0123456789"
WHITESPACE = " \t\r\n"
NUMBER_RE = re.compile(r"\d+(\.\d+)?", re.ASCII)


class Tokenizer:
    """
    Pull-based tokenizer over an in-memory string.

    Iterating yields tokens up to and including a single EOF, then stops.
    A new Tokenizer over the same text restarts from the beginning.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self._done = False

    def __iter__(self):
        return self

    def __next__(self) -> Token:
        if self._done:
            raise StopIteration
        return self.next()

    def peek_char(self) -> Optional[str]:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def next(self) -> Token:
        self._skip_whitespace()
        ch = self.peek_char()
        if ch is None:
            self._done = True
            return EOF
        if ch in DIGITS:
            return self._number()
        tok = SYMBOLS.get(ch)
        if tok is None:
            raise LexError(ch, self.pos)
        self.pos += 1
        return tok

    def _skip_whitespace(self):
        while self.pos < len(self.text) and self.text[self.pos] in WHITESPACE:
            self.pos += 1

    def _number(self) -> Token:
        start = self.pos
        while True:
            ch = self.peek_char()
            if ch is None or (ch not in DIGITS and ch != "."):
                break
            self.pos += 1
        literal = self.text[start:self.pos]
        if not NUMBER_RE.fullmatch(literal):
            raise LexError(literal, start, reason="malformed number")
        value = float(literal)
        if not math.isfinite(value):
            raise LexError(literal, start, reason="number out of range")
        return num(value)


def tokenize(text: str) -> List[Token]:
    return list(Tokenizer(text))
