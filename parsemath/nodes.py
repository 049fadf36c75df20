from dataclasses import dataclass


class Node: ...


@dataclass(frozen=True)
class Number(Node):
    value: float


@dataclass(frozen=True)
class Negative(Node):
    operand: Node


@dataclass(frozen=True)
class BinaryNode(Node):
    left: Node
    right: Node


# WARNING: And / Or truncate both operands to 64-bit integers before combining
class And(BinaryNode): ...
class Or(BinaryNode): ...
class Add(BinaryNode): ...
class Subtract(BinaryNode): ...
class Multiply(BinaryNode): ...
class Divide(BinaryNode): ...
class Caret(BinaryNode): ...


SYMBOL_OF = {And: "&", Or: "|", Add: "+", Subtract: "-", Multiply: "*", Divide: "/", Caret: "^"}
