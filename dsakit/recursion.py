"""Small recursive sequences: Fibonacci, running sums and counting."""

from __future__ import annotations

_REPEAT_LIMIT = 10
_COUNT_LIMIT = 5


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number; any ``n`` below 2 is returned as is."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def sum_first_n(n: int, total: int = 0) -> int:
    """Return ``total`` plus every integer from ``n`` down to zero."""
    while n >= 0:
        total += n
        n -= 1
    return total


def linear(start: int, stop: int) -> list[int]:
    """Return the integers from ``start`` up to, not including, ``stop``."""
    if start > stop:
        raise ValueError(f"start {start} is past stop {stop}")
    return list(range(start, stop))


def linear_backtracking(i: int, n: int) -> list[int]:
    """Return ``linear(i - 1, n)`` followed by ``i``; empty when ``i`` < 1."""
    if i < 1:
        return []
    return [*linear(i - 1, n), i]


def count_to_five(n: int) -> list[int]:
    """Return the integers from ``n`` up to and including five."""
    return list(range(n, _COUNT_LIMIT + 1))


def repeat_line(text: str, start: int = 0) -> list[str]:
    """Return ``text`` once for each step from ``start`` up to ten."""
    if start > _REPEAT_LIMIT:
        raise ValueError(f"start {start} is past {_REPEAT_LIMIT}")
    return [text] * (_REPEAT_LIMIT - start)