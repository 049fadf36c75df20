class ParseMathError(Exception):
    """Base class for every failure raised by parsemath."""


class LexError(ParseMathError):
    """A character (or run of characters) that cannot start a valid token."""

    def __init__(self, text: str, position: int, reason: str = "invalid character"):
        self.text = text
        self.position = position
        self.reason = reason
        super().__init__(f"{reason} '{text}' at position {position}")


class ParseError(ParseMathError):
    """Structurally invalid token sequence, or a wrapped LexError."""

    def __init__(self, message: str, token=None, lex_error: LexError = None):
        self.message = message
        self.token = token
        self.lex_error = lex_error
        super().__init__(message)


class EvalError(ParseMathError):
    """Raised only for bitwise operands that do not fit a 64-bit integer."""
