import pytest
from parsemath.analyzer import analyze
from parsemath.ast_utils import ast_to_dict, ast_to_infix, ast_to_pretty
from parsemath.parser import parse


def test_dict():
    assert ast_to_dict(parse("-1+2")) == {
        "type": "Add", "op": "+",
        "left": {"type": "Negative", "operand": {"type": "Number", "value": 1.0}},
        "right": {"type": "Number", "value": 2.0},
    }

def test_pretty():
    assert ast_to_pretty(parse("2^3^2")) == "\n".join([
        "Caret(^)",
        "  left: Number(2.0)",
        "  right: Caret(^)",
        "    left: Number(3.0)",
        "    right: Number(2.0)",
    ])

@pytest.mark.parametrize("src,infix", [
    ("1+2*3", "(1+(2*3))"),
    ("-2^2", "((-2)^2)"),
    ("0.0000001|2.5", "(0.0000001|2.5)"),
])
def test_infix(src, infix):
    assert ast_to_infix(parse(src)) == infix

@pytest.mark.parametrize("src", ["3+2-1*5/4", "2^-3^2", "-(1&2)|3", "((4))"])
def test_infix_reparses_to_same_tree(src):
    ast = parse(src)
    assert parse(ast_to_infix(ast)) == ast

def test_analyze():
    an = analyze(parse("-(1+2)*3^2|4"))
    assert an.operators == {"+": 1, "*": 1, "^": 1, "|": 1}
    assert an.literals == 5
    assert an.negations == 1
    assert an.nodes == 10
    assert an.depth == 5
