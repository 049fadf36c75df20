import pytest
from parsemath.errors import ParseError
from parsemath.grammar import parse_reference
from parsemath.parser import parse


@pytest.mark.parametrize("src", [
    "1+2-3",
    "3+2-1*5/4",
    "3+3 | 4",
    "2-3-4",
    "2^3^2",
    "2+3*4",
    "(2+3)*4",
    "-3+5",
    "-2^2",
    "2^-3^2",
    "2*-3^2",
    "1--2",
    "---7",
    "-(1+2)^2",
    "1&2|3&4",
    "1+2&3*4|5^6",
    "8/4/2*3",
    "((1.5+2.25)*(3-4))/5",
    "2^3*4^5",
    " 10 | 1 + 2 * 3 ^ 2 ",
])
def test_parser_matches_reference_grammar(src):
    assert parse(src) == parse_reference(src)


@pytest.mark.parametrize("src", ["(1+2", "1+2)", "1+", "", "3.", "1 # 2", "()"])
def test_both_reject(src):
    with pytest.raises(ParseError):
        parse(src)
    with pytest.raises(ParseError):
        parse_reference(src)


@pytest.mark.parametrize("src", ["1 \t+\r\n2", "\n(3)\n"])
def test_same_whitespace(src):
    assert parse(src) == parse_reference(src)


@pytest.mark.parametrize("src", ["1\x1f+ 2", "1\x0b+2", "1\u00a0+2"])
def test_both_reject_other_blanks(src):
    with pytest.raises(ParseError):
        parse(src)
    with pytest.raises(ParseError):
        parse_reference(src)
