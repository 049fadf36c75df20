from collections import Counter
from dataclasses import dataclass, field
from typing import Dict

from .nodes import BinaryNode, Negative, Number, SYMBOL_OF


@dataclass
class Analysis:
    operators: Dict[str, int] = field(default_factory=dict)
    literals: int = 0
    negations: int = 0
    depth: int = 0
    nodes: int = 0

    def to_dict(self):
        return {"operators": dict(sorted(self.operators.items())), "literals": self.literals,
                "negations": self.negations, "depth": self.depth, "nodes": self.nodes}


def analyze(node) -> Analysis:
    an = Analysis()
    ops = Counter()

    def walk(n, depth):
        an.nodes += 1
        an.depth = max(an.depth, depth)
        if isinstance(n, Number):
            an.literals += 1
        elif isinstance(n, Negative):
            an.negations += 1
            walk(n.operand, depth + 1)
        elif isinstance(n, BinaryNode):
            ops[SYMBOL_OF[type(n)]] += 1
            walk(n.left, depth + 1)
            walk(n.right, depth + 1)

    walk(node, 1)
    an.operators = dict(ops)
    return an
