"""Linear and binary search over sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def linear_search(values: Iterable[Any], key: Any) -> int | None:
    """Return the index of the first item equal to ``key``, or None."""
    return next((i for i, item in enumerate(values) if item == key), None)


def binary_search(values: Sequence[Any], key: Any) -> int | None:
    """Return an index of ``key`` in the ascending ``values``, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == key:
            return mid
        if values[mid] < key:
            low = mid + 1
        else:
            high = mid - 1
    return None