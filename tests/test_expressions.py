import pytest

from dsakit.expressions import (
    STACK_CAPACITY,
    brackets_balanced,
    brackets_match,
    infix_to_postfix,
    is_operator,
    parentheses_balanced,
    precedence,
)


def test_parentheses_source_example_unbalanced():
    assert parentheses_balanced("8*(9(") is False


@pytest.mark.parametrize("expression", ["", "8*(9)", "((a)(b))", "no brackets"])
def test_parentheses_balanced(expression):
    assert parentheses_balanced(expression) is True


@pytest.mark.parametrize("expression", [")(", "(()", "a)", "((b)"])
def test_parentheses_unbalanced(expression):
    assert parentheses_balanced(expression) is False


def test_parentheses_ignore_other_brackets():
    assert parentheses_balanced("[(])") is True


def test_parentheses_capacity():
    depth = STACK_CAPACITY
    assert parentheses_balanced("(" * depth + ")" * depth) is True
    with pytest.raises(OverflowError):
        parentheses_balanced("(" * (depth + 1))


@pytest.mark.parametrize("pair", ["()", "[]", "{}"])
def test_brackets_match_pairs(pair):
    assert brackets_match(pair[0], pair[1]) is True


@pytest.mark.parametrize("opening,closing", [("(", "]"), ("[", "}"), (")", "("), ("a", "b")])
def test_brackets_match_mismatch(opening, closing):
    assert brackets_match(opening, closing) is False


def test_brackets_source_example_unbalanced():
    assert brackets_balanced("([8]{(9-8))") is False


@pytest.mark.parametrize("expression", ["", "([8]{(9-8)})", "{[()]}", "a[b](c){d}"])
def test_brackets_balanced(expression):
    assert brackets_balanced(expression) is True


@pytest.mark.parametrize("expression", ["(]", "{[}]", "((", "]", "{(})"])
def test_brackets_unbalanced(expression):
    assert brackets_balanced(expression) is False


def test_brackets_capacity():
    with pytest.raises(OverflowError):
        brackets_balanced("[" * (STACK_CAPACITY + 1))


def test_precedence_values():
    assert precedence("^") == 3
    assert precedence("*") == precedence("/") == 2
    assert precedence("+") == precedence("-") == 1
    assert precedence("(") == -1
    assert precedence("a") == -1


@pytest.mark.parametrize("ch", list("+-*/^"))
def test_is_operator_true(ch):
    assert is_operator(ch) is True


@pytest.mark.parametrize("ch", ["(", ")", "a", "7", "%", ""])
def test_is_operator_false(ch):
    assert is_operator(ch) is False


def test_infix_source_example():
    assert infix_to_postfix("a+b*(c^d-e)^(f+g*h)-i") == "abcd^e-fgh*+i-(^(*+"


def test_infix_precedence():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_infix_open_parenthesis_kept_to_the_end():
    assert infix_to_postfix("(a+b)") == "ab+("


@pytest.mark.parametrize("infix", ["a+b*c", "x^y^z", "1+2-3*4/5", "(p+q)*r", "a"])
def test_infix_keeps_operands_in_order(infix):
    postfix = infix_to_postfix(infix)
    assert [c for c in postfix if c.isalnum()] == [c for c in infix if c.isalnum()]
    assert len(postfix) == len(infix.replace(")", ""))


def test_infix_equal_precedence_is_left_associative():
    assert infix_to_postfix("a-b-c") == infix_to_postfix("a-b") + "c-"


def test_infix_only_operands():
    assert infix_to_postfix("abc123") == "abc123"


@pytest.mark.parametrize("infix", ["a + b", "a%b", "a.b"])
def test_infix_rejects_unknown_characters(infix):
    with pytest.raises(ValueError):
        infix_to_postfix(infix)


def test_infix_capacity():
    with pytest.raises(OverflowError):
        infix_to_postfix("(" * (STACK_CAPACITY + 1))