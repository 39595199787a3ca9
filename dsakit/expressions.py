"""Bracket balancing and infix-to-postfix conversion on a bounded stack."""

from __future__ import annotations

STACK_CAPACITY = 100

_PAIRS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = frozenset(_PAIRS.values())
_PRECEDENCE = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}


def _push(stack: list[str], ch: str) -> None:
    if len(stack) >= STACK_CAPACITY:
        raise OverflowError(f"stack holds at most {STACK_CAPACITY} items")
    stack.append(ch)


def parentheses_balanced(expression: str) -> bool:
    """Return True when every '(' in ``expression`` has a matching ')'."""
    stack: list[str] = []
    for ch in expression:
        if ch == "(":
            _push(stack, ch)
        elif ch == ")":
            if not stack:
                return False
            stack.pop()
    return not stack


def brackets_match(opening: str, closing: str) -> bool:
    """Return True when ``opening`` and ``closing`` form a bracket pair."""
    return _PAIRS.get(opening) == closing


def brackets_balanced(expression: str) -> bool:
    """Return True when (), [] and {} in ``expression`` nest correctly."""
    stack: list[str] = []
    for ch in expression:
        if ch in _PAIRS:
            _push(stack, ch)
        elif ch in _CLOSERS:
            if not stack or not brackets_match(stack.pop(), ch):
                return False
    return not stack


def precedence(ch: str) -> int:
    """Return the binding strength of an operator, or -1 for anything else."""
    return _PRECEDENCE.get(ch, -1)


def is_operator(ch: str) -> bool:
    """Return True for one of the operators + - * / ^."""
    return ch in _PRECEDENCE


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression of letters, digits and + - * / ^ ( ).

    Operators of equal precedence are popped before pushing, so all of them
    associate to the left. A ')' pops operators down to the nearest '(' but
    leaves the '(' on the stack; it is emitted when the stack is drained.
    Any other character raises ValueError.
    """
    stack: list[str] = []
    output: list[str] = []
    for ch in infix:
        if ch.isascii() and ch.isalnum():
            output.append(ch)
        elif ch == "(":
            _push(stack, ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
        elif is_operator(ch):
            while stack and precedence(ch) <= precedence(stack[-1]):
                output.append(stack.pop())
            _push(stack, ch)
        else:
            raise ValueError(f"unexpected character {ch!r} in expression")
    output.extend(reversed(stack))
    return "".join(output)