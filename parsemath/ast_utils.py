# parsemath/ast_utils.py
from typing import Any, Dict

import numpy as np

from .nodes import BinaryNode, Negative, Number, SYMBOL_OF


def ast_to_dict(node) -> Dict[str, Any]:
    if isinstance(node, Number):
        return {"type": "Number", "value": node.value}
    if isinstance(node, Negative):
        return {"type": "Negative", "operand": ast_to_dict(node.operand)}
    if isinstance(node, BinaryNode):
        return {"type": type(node).__name__, "op": SYMBOL_OF[type(node)],
                "left": ast_to_dict(node.left), "right": ast_to_dict(node.right)}
    return {"type": "Unknown", "repr": repr(node)}


def ast_to_pretty(node, indent: str = "  ") -> str:
    lines = []
    def rec(n, depth=0, label=None):
        pad = indent * depth
        pre = f"{label}: " if label else ""
        if isinstance(n, Number):
            lines.append(f"{pad}{pre}Number({n.value})")
        elif isinstance(n, Negative):
            lines.append(f"{pad}{pre}Negative")
            rec(n.operand, depth+1, "operand")
        elif isinstance(n, BinaryNode):
            lines.append(f"{pad}{pre}{type(n).__name__}({SYMBOL_OF[type(n)]})")
            rec(n.left, depth+1, "left")
            rec(n.right, depth+1, "right")
        else:
            lines.append(f"{pad}{pre}{type(n).__name__}")
    rec(node)
    return "\n".join(lines)


def _fmt_number(v: float) -> str:
    return np.format_float_positional(v, trim="-")


def ast_to_infix(node) -> str:
    """Fully parenthesized source text; parsing it yields an equal tree."""
    if isinstance(node, Number):
        return _fmt_number(node.value)
    if isinstance(node, Negative):
        return f"(-{ast_to_infix(node.operand)})"
    if isinstance(node, BinaryNode):
        return f"({ast_to_infix(node.left)}{SYMBOL_OF[type(node)]}{ast_to_infix(node.right)})"
    raise TypeError(f"Unknown node {type(node).__name__}")
