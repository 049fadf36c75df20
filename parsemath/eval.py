import numpy as np

from .errors import EvalError
from .nodes import Add, And, BinaryNode, Caret, Divide, Multiply, Negative, Node, Number, Or, Subtract
from .parser import parse

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def to_int64(x: np.float64) -> np.int64:
    """Truncate toward zero; fail for values a 64-bit integer cannot hold."""
    if not np.isfinite(x):
        raise EvalError(f"bitwise operand {float(x)!r} is not finite")
    t = int(np.trunc(x))
    if t < INT64_MIN or t > INT64_MAX:
        raise EvalError(f"bitwise operand {float(x)!r} is outside the 64-bit integer range")
    return np.int64(t)


# IEEE-754 semantics: 1/0 -> inf, 0/0 -> nan, (-8)^(1/3) -> nan
OPS = {
    Add: lambda a, b: a + b,
    Subtract: lambda a, b: a - b,
    Multiply: lambda a, b: a * b,
    Divide: lambda a, b: a / b,
    Caret: lambda a, b: np.power(a, b),
    And: lambda a, b: np.float64(np.bitwise_and(to_int64(a), to_int64(b))),
    Or: lambda a, b: np.float64(np.bitwise_or(to_int64(a), to_int64(b))),
}


def eval_node(node: Node) -> np.float64:
    if isinstance(node, Number):
        return np.float64(node.value)
    if isinstance(node, Negative):
        return -eval_node(node.operand)
    if isinstance(node, BinaryNode):
        a = eval_node(node.left)
        b = eval_node(node.right)
        return OPS[type(node)](a, b)
    raise TypeError(f"Unknown node {type(node).__name__}")


def evaluate(node: Node) -> float:
    with np.errstate(all="ignore"):
        return float(eval_node(node))


def evaluate_expression(text: str) -> float:
    return evaluate(parse(text))
