"""Elementary comparison sorts and array reversal."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

Compare = Callable[[Any, Any], bool]


def ascending(a: Any, b: Any) -> bool:
    """Return True when ``a`` must move after ``b`` for ascending order."""
    return a > b


def descending(a: Any, b: Any) -> bool:
    """Return True when ``a`` must move after ``b`` for descending order."""
    return a < b


def bubble_sort(values: Iterable[Any], compare: Compare = ascending) -> list[Any]:
    """Return a bubble-sorted copy of ``values``.

    Adjacent items are swapped whenever ``compare(left, right)`` is true.
    A pass that makes no swap ends the sort early.
    """
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if compare(items[j], items[j + 1]):
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return an insertion-sorted copy of ``values`` in ascending order."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a selection-sorted copy of ``values`` in ascending order."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
    return items


def reverse_array(values: Iterable[Any]) -> list[Any]:
    """Return the items of ``values`` in reverse order."""
    items = list(values)
    for i in range(len(items) // 2):
        items[i], items[-1 - i] = items[-1 - i], items[i]
    return items